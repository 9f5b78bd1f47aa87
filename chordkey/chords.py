"""
Chord calculator: root pitch + quality (+ inversion) -> ordered chord tones.

Example:
    >>> compute_chord_notes(60, ChordQuality.MAJOR, Inversion.FIRST)
    [72, 64, 67]

Inverted chords are NOT re-sorted. Index 0 is always the chord root, whatever
octave it ended up in; sort the result if you need register order.
"""
import re

from chordkey.constants import (
    ChordQuality,
    Inversion,
    _SUFFIX_ALIASES,
    _PC_TO_NOTE,
    SEMITONES_PER_OCTAVE,
)
from chordkey.logger_config import logger
from chordkey.pitch import pitch_class, pitch_class_vector, root_pitch_class

__all__ = [
    "ChordQuality",
    "Inversion",
    "apply_inversion",
    "compute_chord_notes",
    "chord_symbol",
    "parse_chord_symbol",
    "chord_notes_from_symbol",
    "parse_quality",
    "chord_vector",
]

# suffix -> quality, canonical spellings first, then aliases
_SUFFIX_TO_QUALITY: dict[str, ChordQuality] = {q.suffix: q for q in ChordQuality}
for _alias, _quality in _SUFFIX_ALIASES.items():
    _SUFFIX_TO_QUALITY.setdefault(_alias, _quality)

_SYMBOL_RE = re.compile(r"^([A-Ga-g][#b]?)(.*)$")


# ── Core calculation ──────────────────────────────────────────────────────────

def apply_inversion(notes, inversion=Inversion.ROOT):
    """
    Raise the lowest-indexed tones by an octave.

    ROOT leaves the chord alone, FIRST raises index 0, SECOND raises indices
    0 and 1. Returns a new list; an empty input comes back empty.
    """
    notes = list(notes)
    if not notes:
        return notes
    for i in range(min(inversion.value, len(notes))):
        notes[i] += SEMITONES_PER_OCTAVE
    return notes


def compute_chord_notes(root: int, quality: ChordQuality,
                        inversion: Inversion = Inversion.ROOT) -> list[int]:
    """
    Return the chord tones for `quality` built on `root`.

    Args:
        root (int): Root pitch, any integer.
        quality (ChordQuality): Chord type; 3 tones for triads, 4 for
            seventh and sixth chords.
        inversion (Inversion): Which tones to raise an octave.

    Returns:
        list[int]: Tones in table order (root first before inversion).
    """
    notes = [root + offset for offset in quality.offsets]
    return apply_inversion(notes, inversion)


# ── Symbols ───────────────────────────────────────────────────────────────────

def chord_symbol(root: int, quality: ChordQuality) -> str:
    """Flat-preferred chord symbol, e.g. (70, MAJOR_SEVENTH) -> 'Bbmaj7'."""
    return f"{_PC_TO_NOTE[pitch_class(root)]}{quality.suffix}"


def parse_chord_symbol(symbol: str) -> tuple[int, ChordQuality]:
    """
    Split a chord symbol into (root pitch class 0-11, ChordQuality).

    Accepts the canonical suffixes ('', m, 7, maj7, m7, 6, m6, dim, aug) and
    common aliases (M, min, -, M7, min7, o, +, ...). Suffixes are
    case-sensitive since 'M7' and 'm7' differ.

    Raises:
        ValueError: unknown root or suffix.
    """
    s = symbol.strip()
    m = _SYMBOL_RE.match(s)
    if not m:
        raise ValueError(f"Unrecognised chord root in {symbol!r}")
    root_name, suffix = m.groups()
    root_name = root_name[0].upper() + root_name[1:]

    quality = _SUFFIX_TO_QUALITY.get(suffix)
    if quality is None:
        raise ValueError(f"Unsupported chord suffix {suffix!r} in {symbol!r}")
    root_pc = root_pitch_class(root_name)
    logger.debug("parse_chord_symbol %r -> root_pc=%d quality=%s", symbol, root_pc, quality.name)
    return root_pc, quality


def chord_notes_from_symbol(symbol, octave=4, inversion=Inversion.ROOT):
    """Parse `symbol` and voice it with the root in MIDI octave `octave` (C4 = 60)."""
    root_pc, quality = parse_chord_symbol(symbol)
    root = root_pc + SEMITONES_PER_OCTAVE * (octave + 1)
    return compute_chord_notes(root, quality, inversion)


def parse_quality(text: str) -> ChordQuality:
    """Resolve a quality from its member name ('major_seventh') or a suffix ('maj7')."""
    key = text.strip()
    try:
        return ChordQuality[key.upper()]
    except KeyError:
        pass
    quality = _SUFFIX_TO_QUALITY.get(key)
    if quality is None:
        names = ", ".join(q.value for q in ChordQuality)
        raise ValueError(f"Unknown chord quality {text!r} (expected one of: {names})")
    return quality


def chord_vector(root, quality):
    """12-element float32 multi-hot vector of the chord's pitch classes."""
    return pitch_class_vector(compute_chord_notes(root, quality))
