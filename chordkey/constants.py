from enum import Enum

# ── Pitch-class lookup tables ─────────────────────────────────────────────────

_NOTE_TO_PC: dict[str, int] = {
    "C": 0,  "C#": 1,  "Db": 1,  "D": 2,  "D#": 3,  "Eb": 3,
    "E": 4,  "F": 5,   "F#": 6,  "Gb": 6, "G": 7,   "G#": 8,
    "Ab": 8, "A": 9,   "A#": 10, "Bb": 10, "B": 11,
}
# Flat-preferred spelling for reconstructing note and chord names from a pitch class.
_PC_TO_NOTE: tuple[str, ...] = (
    "C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B"
)

SEMITONES_PER_OCTAVE = 12

# ── Chord enumerations ────────────────────────────────────────────────────────

class ChordQuality(Enum):
    MAJOR = "major"
    MINOR = "minor"
    SEVENTH = "seventh"
    MAJOR_SEVENTH = "major_seventh"
    MINOR_SEVENTH = "minor_seventh"
    MAJOR_SIXTH = "major_sixth"
    MINOR_SIXTH = "minor_sixth"
    DIMINISHED = "diminished"
    AUGMENTED = "augmented"

    @property
    def offsets(self) -> tuple[int, ...]:
        return CHORD_OFFSETS[self]

    @property
    def suffix(self) -> str:
        return CHORD_SUFFIXES[self]


class Inversion(Enum):
    ROOT = 0
    FIRST = 1
    SECOND = 2


# ── Chord interval tables ─────────────────────────────────────────────────────
# Semitone offsets above the chord root.
# Ordered low → high; inversion raises tones by index, not by pitch.
CHORD_OFFSETS: dict[ChordQuality, tuple[int, ...]] = {
    ChordQuality.MAJOR:         (0, 4, 7),
    ChordQuality.MINOR:         (0, 3, 7),
    ChordQuality.SEVENTH:       (0, 4, 7, 10),
    ChordQuality.MAJOR_SEVENTH: (0, 4, 7, 11),
    ChordQuality.MINOR_SEVENTH: (0, 3, 7, 10),
    ChordQuality.MAJOR_SIXTH:   (0, 4, 7, 9),
    ChordQuality.MINOR_SIXTH:   (0, 3, 7, 9),
    ChordQuality.DIMINISHED:    (0, 3, 6),
    ChordQuality.AUGMENTED:     (0, 4, 8),
}

# Canonical symbol suffix per quality (C, Cm, C7, Cmaj7, ...).
CHORD_SUFFIXES: dict[ChordQuality, str] = {
    ChordQuality.MAJOR:         "",
    ChordQuality.MINOR:         "m",
    ChordQuality.SEVENTH:       "7",
    ChordQuality.MAJOR_SEVENTH: "maj7",
    ChordQuality.MINOR_SEVENTH: "m7",
    ChordQuality.MAJOR_SIXTH:   "6",
    ChordQuality.MINOR_SIXTH:   "m6",
    ChordQuality.DIMINISHED:    "dim",
    ChordQuality.AUGMENTED:     "aug",
}

# Alternative spellings accepted when parsing a chord symbol.
_SUFFIX_ALIASES: dict[str, ChordQuality] = {
    "M":    ChordQuality.MAJOR,
    "maj":  ChordQuality.MAJOR,
    "min":  ChordQuality.MINOR,
    "-":    ChordQuality.MINOR,
    "dom7": ChordQuality.SEVENTH,
    "M7":   ChordQuality.MAJOR_SEVENTH,
    "min7": ChordQuality.MINOR_SEVENTH,
    "-7":   ChordQuality.MINOR_SEVENTH,
    "maj6": ChordQuality.MAJOR_SIXTH,
    "min6": ChordQuality.MINOR_SIXTH,
    "-6":   ChordQuality.MINOR_SIXTH,
    "o":    ChordQuality.DIMINISHED,
    "+":    ChordQuality.AUGMENTED,
}

# ── Key tables ────────────────────────────────────────────────────────────────
# Major scale, root to octave inclusive (W W H W W W H).
# The trailing 12 never matches a mod-12 offset but fixes the table at 8 entries.
MAJOR_KEY_OFFSETS: tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11, 12)
