"""Play command."""

from eqquiz.tui.app import run_tui


def run(args):
    return run_tui()
