"""
Key calculator for major keys.

Scale degrees are 1-based (1 = tonic ... 7 = leading tone); note indices into
get_key_notes() are 0-based and run to 7, the octave.
"""
from typing import Optional

from chordkey.constants import MAJOR_KEY_OFFSETS, SEMITONES_PER_OCTAVE
from chordkey.logger_config import logger
from chordkey.pitch import pitch_class_vector

KEY_LENGTH = len(MAJOR_KEY_OFFSETS)  # 8, root to octave


def get_key_notes(root: int) -> list[int]:
    """The 8 major-key pitches from `root` up to its octave."""
    return [root + offset for offset in MAJOR_KEY_OFFSETS]


def get_nth_note_in_key(root: int, n: int) -> int:
    """
    Pitch at index `n` (0-7) of get_key_notes(root).

    Raises:
        IndexError: n outside 0-7. Negative n is rejected rather than
            counted from the end.
    """
    if not 0 <= n < KEY_LENGTH:
        raise IndexError(f"Key note index {n} out of range (expected 0-{KEY_LENGTH - 1})")
    return root + MAJOR_KEY_OFFSETS[n]


def note_to_position_in_key(root: int, note: int) -> Optional[int]:
    """
    Scale degree (1-7) of `note` in the major key on `root`, any octave.

    Returns None for the five chromatic tones outside the key.
    """
    offset = (note - root) % SEMITONES_PER_OCTAVE
    if offset not in MAJOR_KEY_OFFSETS:
        logger.debug("note %d not diatonic to key root %d (offset %d)", note, root, offset)
        return None
    return MAJOR_KEY_OFFSETS.index(offset) + 1


def is_in_key(root: int, note: int) -> bool:
    return note_to_position_in_key(root, note) is not None


def chord_positions_in_key(key_root, chord_notes):
    """Scale degree of each chord tone in order; None marks a non-diatonic tone."""
    return [note_to_position_in_key(key_root, n) for n in chord_notes]


def key_vector(root):
    """12-element float32 multi-hot vector of the key's seven pitch classes."""
    return pitch_class_vector(get_key_notes(root))
