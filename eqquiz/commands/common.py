"""Shared command helpers."""

from eqquiz.config import load_config
from eqquiz.render.sliders import render_panel


def resolve_generation_settings(args):
    config = load_config()
    strict = bool(getattr(args, "strict", False) or config["strict_decoys"])
    max_attempts = getattr(args, "max_attempts", None)
    if max_attempts is None:
        max_attempts = config["max_attempts"]
    return strict, max_attempts


def print_options(quiz_round):
    for i, option in enumerate(quiz_round.options, start=1):
        print(render_panel(option, title=f"[{i}]"))
        print()
