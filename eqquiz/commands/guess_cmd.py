"""Guess command."""

import logging

from eqquiz.constants import ExitCode
from eqquiz.core.rounds import is_correct_guess
from eqquiz.render.sliders import equalization_from_slider_state, slider_state
from eqquiz.state.store import current_round, locked_state

log = logging.getLogger(__name__)


def run(args):
    with locked_state() as state:
        quiz_round = current_round(state)
        if quiz_round is None:
            print("error: no active round (run `eqquiz new`)")
            return ExitCode.NO_ROUND
        if state.get("resolved"):
            print("error: round already resolved (run `eqquiz new`)")
            return ExitCode.USAGE

        count = len(quiz_round.options)
        if not 1 <= args.option <= count:
            print(f"error: option must be between 1 and {count}")
            return ExitCode.USAGE

        # judge what the chosen panel shows, as read back from its knobs
        panel = slider_state(quiz_round.options[args.option - 1])
        correct = is_correct_guess(quiz_round, equalization_from_slider_state(panel))

        score = dict(state["score"])
        if correct:
            state["resolved"] = True
            score["solved"] = score.get("solved", 0) + 1
        else:
            state["attempts"] = state.get("attempts", 0) + 1
            score["wrong_guesses"] = score.get("wrong_guesses", 0) + 1
        state["score"] = score
    log.info("guess %d: %s", args.option, "correct" if correct else "wrong")

    if correct:
        print("Congrats! You did it!")
        return ExitCode.OK
    print("Oops! That's not it! Try again")
    return ExitCode.WRONG_GUESS
