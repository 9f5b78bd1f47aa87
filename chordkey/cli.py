"""
Command-line front end for the chord and key calculators.

Usage:
    chordkey chord C4 maj7 --inversion first --names
    chordkey symbol Bbm7 --octave 3
    chordkey key G
    chordkey degree C F#
"""
import argparse

from chordkey.chords import (
    Inversion,
    chord_notes_from_symbol,
    compute_chord_notes,
    parse_quality,
)
from chordkey.keys import get_key_notes, note_to_position_in_key
from chordkey.logger_config import logger, set_verbose
from chordkey.pitch import note_name_with_octave, parse_pitch

_INVERSIONS = {inv.name.lower(): inv for inv in Inversion}


def _format_notes(notes, names=False):
    if names:
        return " ".join(note_name_with_octave(n) for n in notes)
    return " ".join(str(n) for n in notes)


def _cmd_chord(args):
    root = parse_pitch(args.root)
    quality = parse_quality(args.quality)
    notes = compute_chord_notes(root, quality, _INVERSIONS[args.inversion])
    print(_format_notes(notes, args.names))


def _cmd_symbol(args):
    notes = chord_notes_from_symbol(args.symbol, octave=args.octave,
                                    inversion=_INVERSIONS[args.inversion])
    print(_format_notes(notes, args.names))


def _cmd_key(args):
    print(_format_notes(get_key_notes(parse_pitch(args.root)), args.names))


def _cmd_degree(args):
    position = note_to_position_in_key(parse_pitch(args.root), parse_pitch(args.note))
    print("-" if position is None else position)


def build_parser():
    parser = argparse.ArgumentParser(prog="chordkey",
                                     description="Chord tones and major-key degrees from pitch arithmetic.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("chord", help="Chord tones from a root and a quality")
    p.add_argument("root", type=str, help="Root pitch: integer or note name (e.g. 60, C4)")
    p.add_argument("quality", type=str, help="Quality name (major_seventh) or suffix (maj7)")
    p.add_argument("--inversion", choices=list(_INVERSIONS), default="root")
    p.add_argument("--names", action="store_true", help="Print note names instead of numbers")
    p.set_defaults(func=_cmd_chord)

    p = sub.add_parser("symbol", help="Chord tones from a chord symbol (e.g. Bbmaj7)")
    p.add_argument("symbol", type=str)
    p.add_argument("--octave", type=int, default=4, help="MIDI octave of the root (default: 4)")
    p.add_argument("--inversion", choices=list(_INVERSIONS), default="root")
    p.add_argument("--names", action="store_true", help="Print note names instead of numbers")
    p.set_defaults(func=_cmd_symbol)

    p = sub.add_parser("key", help="The 8 notes of a major key, root to octave")
    p.add_argument("root", type=str)
    p.add_argument("--names", action="store_true", help="Print note names instead of numbers")
    p.set_defaults(func=_cmd_key)

    p = sub.add_parser("degree", help="Scale degree (1-7) of a note in a major key, '-' if none")
    p.add_argument("root", type=str)
    p.add_argument("note", type=str)
    p.set_defaults(func=_cmd_degree)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    set_verbose(args.verbose)
    logger.debug("command=%s args=%s", args.command, vars(args))
    try:
        args.func(args)
    except (ValueError, IndexError) as e:
        parser.error(str(e))


if __name__ == "__main__":
    main()
