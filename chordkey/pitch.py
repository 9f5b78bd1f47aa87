"""
Pitch helpers shared by the chord and key calculators.

A pitch is a plain int counting semitones. Naming helpers use MIDI numbering
(C4 = 60); the calculators themselves impose no reference point.
"""
import re

import music21
import numpy as np

from chordkey.constants import _NOTE_TO_PC, _PC_TO_NOTE, SEMITONES_PER_OCTAVE
from chordkey.logger_config import logger

# Letter, optional accidental (b flat, # sharp, doubled allowed), optional signed octave.
# '-' is reserved for negative octaves: 'C-1' is MIDI 0.
_NOTE_RE = re.compile(r"^([A-Ga-g])(#{1,2}|b{1,2})?(-?\d+)?$")


def pitch_class(pitch: int) -> int:
    """Reduce a pitch to 0-11 (negative pitches included)."""
    return pitch % SEMITONES_PER_OCTAVE


def note_name(pitch: int) -> str:
    """Flat-preferred pitch-class name, e.g. 63 -> 'Eb'."""
    return _PC_TO_NOTE[pitch_class(pitch)]


def note_name_with_octave(pitch: int) -> str:
    """Name plus MIDI octave, e.g. 60 -> 'C4', -1 -> 'B-2'."""
    octave = pitch // SEMITONES_PER_OCTAVE - 1
    return f"{note_name(pitch)}{octave}"


def parse_note(text: str) -> int:
    """
    Parse a note name into a pitch.

    'C4', 'F#3', 'Bb-1' -> MIDI number.
    A bare name without octave ('Eb', 'g#') -> pitch class 0-11.

    Raises ValueError for anything else.
    """
    m = _NOTE_RE.match(text.strip())
    if not m:
        raise ValueError(f"Unrecognised note name: {text!r}")
    letter, accidental, octave = m.groups()
    # music21 spells flats with '-'; set the octave separately so a
    # negative octave is never read as a flat.
    name = letter.upper() + (accidental or "").replace("b", "-")
    p = music21.pitch.Pitch(name)
    if octave is None:
        pc = int(p.ps) % SEMITONES_PER_OCTAVE
        logger.debug("parse_note %r -> pitch class %d", text, pc)
        return pc
    p.octave = int(octave)
    midi = int(round(p.ps))
    logger.debug("parse_note %r -> %d", text, midi)
    return midi


def parse_pitch(text: str) -> int:
    """Accept either an integer ('60', '-3') or a note name ('C4')."""
    try:
        return int(text)
    except ValueError:
        return parse_note(text)


def root_pitch_class(name: str) -> int:
    """Pitch class of a root spelled as letter + optional single #/b."""
    pc = _NOTE_TO_PC.get(name)
    if pc is None:
        # Cb, Fb, E#, B# and friends are not in the lookup table.
        pc = parse_note(name)
    return pc


def pitch_class_vector(pitches):
    """12-element float32 multi-hot vector of the pitch classes present."""
    v = np.zeros(SEMITONES_PER_OCTAVE, dtype=np.float32)
    for p in pitches:
        v[pitch_class(p)] = 1.0
    return v
