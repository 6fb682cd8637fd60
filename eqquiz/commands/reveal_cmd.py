"""Reveal command: show the applied equalization and give up the round."""

import json

from eqquiz.constants import ExitCode
from eqquiz.core.equality import equal
from eqquiz.render.sliders import render_panel
from eqquiz.state.store import current_round, locked_state


def run(args):
    with locked_state() as state:
        quiz_round = current_round(state)
        if quiz_round is None:
            print("error: no active round (run `eqquiz new`)")
            return ExitCode.NO_ROUND
        state["resolved"] = True

    matching = [i for i, o in enumerate(quiz_round.options, start=1) if equal(o, quiz_round.target)]
    if getattr(args, "json", False):
        print(json.dumps({"target": list(quiz_round.target), "options": matching}, indent=2))
    else:
        print(render_panel(quiz_round.target, title="applied equalization"))
        print(f"matching option(s): {', '.join(str(i) for i in matching)}")
    return ExitCode.OK
