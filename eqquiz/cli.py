"""CLI entry and command wiring."""

import argparse
import sys

from eqquiz.commands import guess_cmd, new_cmd, play_cmd, render_cmd, reveal_cmd, status_cmd
from eqquiz.constants import ExitCode
from eqquiz.logging_setup import setup_logging


COMMANDS = {
    "new": new_cmd.run,
    "guess": guess_cmd.run,
    "status": status_cmd.run,
    "reveal": reveal_cmd.run,
    "render": render_cmd.run,
    "play": play_cmd.run,
}


def _positive_int(text):
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError("must be >= 1")
    return value


def _seed(text):
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError("must be >= 0")
    return value


def build_parser():
    parser = argparse.ArgumentParser(prog="eqquiz", description="Equalizer ear-training quiz")
    parser.add_argument("-v", "--verbose", action="count", default=0)
    sub = parser.add_subparsers(dest="command")

    p_new = sub.add_parser("new", help="Start a new round")
    p_new.add_argument("--seed", type=_seed, help="Seed for a reproducible round")
    p_new.add_argument("--strict", action="store_true", help="Make all four options distinct")
    p_new.add_argument("--max-attempts", type=_positive_int, help="Bound rejection sampling")
    p_new.add_argument("--json", action="store_true")

    p_guess = sub.add_parser("guess", help="Pick the option matching the applied EQ")
    p_guess.add_argument("option", type=int, help="Option number (1-4)")

    p_status = sub.add_parser("status", help="Show current round and score")
    p_status.add_argument("--json", action="store_true")

    p_reveal = sub.add_parser("reveal", help="Show the applied EQ and end the round")
    p_reveal.add_argument("--json", action="store_true")

    p_render = sub.add_parser("render", help="Write the equalized track to a WAV file")
    p_render.add_argument("--input", required=True, help="16-bit PCM WAV file")
    p_render.add_argument("--original", action="store_true", help="Render with a flat EQ")
    p_render.add_argument("--outdir", help="Output directory")

    sub.add_parser("play", help="Launch interactive text menu")

    return parser


def normalize_shorthand_args(argv):
    if not argv:
        return argv

    first = argv[0]
    if first.isdigit():
        # `eqquiz 3` is shorthand for `eqquiz guess 3`
        return ["guess", *argv]
    return argv


def main(argv=None):
    raw_argv = list(sys.argv[1:] if argv is None else argv)
    argv = normalize_shorthand_args(raw_argv)
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return ExitCode.USAGE

    setup_logging(args.verbose)
    return COMMANDS[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
