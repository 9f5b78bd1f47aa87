import unittest
import numpy as np
from chordkey.chords import (
    ChordQuality,
    Inversion,
    apply_inversion,
    chord_notes_from_symbol,
    chord_symbol,
    chord_vector,
    compute_chord_notes,
    parse_chord_symbol,
    parse_quality,
)
from chordkey.constants import CHORD_OFFSETS, CHORD_SUFFIXES

_TRIADS = {ChordQuality.MAJOR, ChordQuality.MINOR, ChordQuality.DIMINISHED, ChordQuality.AUGMENTED}


class TestComputeChordNotes(unittest.TestCase):
    def test_c_major_root_position(self):
        self.assertEqual(compute_chord_notes(60, ChordQuality.MAJOR), [60, 64, 67])
        self.assertEqual(compute_chord_notes(60, ChordQuality.MAJOR, Inversion.ROOT), [60, 64, 67])

    def test_first_inversion_is_not_resorted(self):
        # The raised root stays at index 0
        self.assertEqual(compute_chord_notes(60, ChordQuality.MAJOR, Inversion.FIRST), [72, 64, 67])

    def test_second_inversion(self):
        self.assertEqual(compute_chord_notes(60, ChordQuality.MAJOR, Inversion.SECOND), [72, 76, 67])
        self.assertEqual(compute_chord_notes(62, ChordQuality.MINOR_SEVENTH, Inversion.SECOND),
                         [74, 77, 69, 72])

    def test_minor_seventh(self):
        self.assertEqual(compute_chord_notes(60, ChordQuality.MINOR_SEVENTH), [60, 63, 67, 70])

    def test_every_quality(self):
        expected = {
            ChordQuality.MAJOR:         [0, 4, 7],
            ChordQuality.MINOR:         [0, 3, 7],
            ChordQuality.SEVENTH:       [0, 4, 7, 10],
            ChordQuality.MAJOR_SEVENTH: [0, 4, 7, 11],
            ChordQuality.MINOR_SEVENTH: [0, 3, 7, 10],
            ChordQuality.MAJOR_SIXTH:   [0, 4, 7, 9],
            ChordQuality.MINOR_SIXTH:   [0, 3, 7, 9],
            ChordQuality.DIMINISHED:    [0, 3, 6],
            ChordQuality.AUGMENTED:     [0, 4, 8],
        }
        self.assertEqual(set(expected), set(ChordQuality))
        for quality, offsets in expected.items():
            self.assertEqual(compute_chord_notes(0, quality), offsets, quality)

    def test_tables_cover_every_quality(self):
        self.assertEqual(set(CHORD_OFFSETS), set(ChordQuality))
        self.assertEqual(set(CHORD_SUFFIXES), set(ChordQuality))
        self.assertEqual(len(set(CHORD_SUFFIXES.values())), len(ChordQuality))
        for quality in ChordQuality:
            self.assertIs(quality.offsets, CHORD_OFFSETS[quality])

    def test_lengths_and_root_properties(self):
        for root in (-25, -1, 0, 7, 60, 127, 1000):
            for quality in ChordQuality:
                base = compute_chord_notes(root, quality)
                self.assertEqual(base[0], root)
                expected_len = 3 if quality in _TRIADS else 4
                for inversion in Inversion:
                    notes = compute_chord_notes(root, quality, inversion)
                    self.assertEqual(len(notes), expected_len)
                first = compute_chord_notes(root, quality, Inversion.FIRST)
                self.assertEqual(first[0], base[0] + 12)
                self.assertEqual(first[1:], base[1:])

    def test_negative_root(self):
        self.assertEqual(compute_chord_notes(-3, ChordQuality.DIMINISHED), [-3, 0, 3])

    def test_returns_fresh_list(self):
        a = compute_chord_notes(60, ChordQuality.MAJOR)
        a[0] = 0
        self.assertEqual(compute_chord_notes(60, ChordQuality.MAJOR), [60, 64, 67])


class TestApplyInversion(unittest.TestCase):
    def test_empty_sequence_unchanged(self):
        for inversion in Inversion:
            self.assertEqual(apply_inversion([], inversion), [])

    def test_does_not_mutate_input(self):
        notes = [60, 64, 67]
        self.assertEqual(apply_inversion(notes, Inversion.SECOND), [72, 76, 67])
        self.assertEqual(notes, [60, 64, 67])

    def test_short_sequence(self):
        self.assertEqual(apply_inversion([60], Inversion.SECOND), [72])


class TestChordSymbols(unittest.TestCase):
    def test_chord_symbol(self):
        self.assertEqual(chord_symbol(60, ChordQuality.MAJOR), "C")
        self.assertEqual(chord_symbol(70, ChordQuality.MAJOR_SEVENTH), "Bbmaj7")
        self.assertEqual(chord_symbol(-3, ChordQuality.MINOR), "Am")
        self.assertEqual(chord_symbol(66, ChordQuality.DIMINISHED), "Gbdim")

    def test_parse_canonical(self):
        for quality in ChordQuality:
            self.assertEqual(parse_chord_symbol("D" + quality.suffix), (2, quality))

    def test_parse_aliases(self):
        self.assertEqual(parse_chord_symbol("F#-7"), (6, ChordQuality.MINOR_SEVENTH))
        self.assertEqual(parse_chord_symbol("EbM7"), (3, ChordQuality.MAJOR_SEVENTH))
        self.assertEqual(parse_chord_symbol("Bo"), (11, ChordQuality.DIMINISHED))
        self.assertEqual(parse_chord_symbol("G+"), (7, ChordQuality.AUGMENTED))
        self.assertEqual(parse_chord_symbol("amin"), (9, ChordQuality.MINOR))
        self.assertEqual(parse_chord_symbol(" Cb "), (11, ChordQuality.MAJOR))

    def test_parse_rejects_unknown(self):
        for bad in ("", "N.C.", "H7", "Csus4", "C9"):
            with self.assertRaises(ValueError):
                parse_chord_symbol(bad)

    def test_symbol_round_trip(self):
        for root in range(12):
            for quality in ChordQuality:
                self.assertEqual(parse_chord_symbol(chord_symbol(root, quality)), (root, quality))

    def test_chord_notes_from_symbol(self):
        self.assertEqual(chord_notes_from_symbol("C"), [60, 64, 67])
        self.assertEqual(chord_notes_from_symbol("Am7", octave=3), [57, 60, 64, 67])
        self.assertEqual(chord_notes_from_symbol("C", inversion=Inversion.FIRST), [72, 64, 67])

    def test_parse_quality(self):
        self.assertIs(parse_quality("major_seventh"), ChordQuality.MAJOR_SEVENTH)
        self.assertIs(parse_quality("MINOR"), ChordQuality.MINOR)
        self.assertIs(parse_quality("maj7"), ChordQuality.MAJOR_SEVENTH)
        self.assertIs(parse_quality("m"), ChordQuality.MINOR)
        self.assertIs(parse_quality("M"), ChordQuality.MAJOR)
        with self.assertRaises(ValueError):
            parse_quality("sus4")


class TestChordVector(unittest.TestCase):
    def test_g7_vector(self):
        vec = chord_vector(67, ChordQuality.SEVENTH)
        expected = np.zeros(12, dtype=np.float32)
        expected[[7, 11, 2, 5]] = 1.0
        self.assertEqual(vec.dtype, np.float32)
        np.testing.assert_array_equal(vec, expected)

    def test_vector_ignores_octave(self):
        np.testing.assert_array_equal(chord_vector(60, ChordQuality.MINOR),
                                      chord_vector(-12, ChordQuality.MINOR))


if __name__ == "__main__":
    unittest.main()
