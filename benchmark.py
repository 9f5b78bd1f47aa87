import timeit
from chordkey.chords import ChordQuality, compute_chord_notes, parse_chord_symbol

SETUP = """
from chordkey.chords import ChordQuality, Inversion, compute_chord_notes, parse_chord_symbol
from chordkey.keys import get_key_notes, note_to_position_in_key
"""

STMT = """
compute_chord_notes(67, ChordQuality.SEVENTH)
compute_chord_notes(57, ChordQuality.MINOR_SEVENTH, Inversion.FIRST)
compute_chord_notes(66, ChordQuality.DIMINISHED, Inversion.SECOND)
get_key_notes(62)
note_to_position_in_key(62, 66)
note_to_position_in_key(62, 65)
parse_chord_symbol("Bbmaj7")
"""

def run_benchmark(number=10000, repeat=5):
    # Warmup
    compute_chord_notes(60, ChordQuality.MAJOR)
    parse_chord_symbol("Cmaj7")

    times = timeit.repeat(STMT, SETUP, number=number, repeat=repeat)
    print(f"Baseline (min of {repeat} runs, {number} loops each): {min(times):.5f} seconds")
    return min(times)

if __name__ == '__main__':
    run_benchmark()
