"""Minimal interactive TUI wrapper.

No new logic here; delegates to existing command handlers.
"""

from types import SimpleNamespace

from eqquiz.commands import guess_cmd, new_cmd, render_cmd, reveal_cmd, status_cmd
from eqquiz.constants import ExitCode

MENU = """
eqquiz
  1) New round
  2) Show round
  3) Render track (EQ version)
  4) Render track (original)
  5) Guess
  6) Reveal
  7) Quit"""


def print_menu():
    print(MENU)


def _render(original):
    path = input("Path to .wav: ").strip()
    args = SimpleNamespace(input=path, original=original, outdir=None)
    return render_cmd.run(args)


def run_tui():
    while True:
        print_menu()
        try:
            choice = input("Select: ").strip()
        except EOFError:
            return ExitCode.OK

        if choice == "1":
            strict = input("Strict decoys? [y/N]: ").strip().lower() in ("y", "yes")
            new_cmd.run(SimpleNamespace(seed=None, strict=strict, max_attempts=None, json=False))
        elif choice == "2":
            status_cmd.run(SimpleNamespace(json=False))
        elif choice == "3":
            _render(original=False)
        elif choice == "4":
            _render(original=True)
        elif choice == "5":
            text = input("Option number: ").strip()
            if not text.isdigit():
                print("invalid option")
                continue
            guess_cmd.run(SimpleNamespace(option=int(text)))
        elif choice == "6":
            reveal_cmd.run(SimpleNamespace(json=False))
        elif choice == "7":
            return ExitCode.OK
        else:
            print("invalid selection")
