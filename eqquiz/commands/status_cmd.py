"""Status command."""

import json

from eqquiz.commands.common import print_options
from eqquiz.constants import ExitCode
from eqquiz.state.store import current_round, load_state


def run(args):
    state = load_state()
    quiz_round = current_round(state)
    payload = {
        "active_round": quiz_round is not None,
        "resolved": state.get("resolved", False),
        "attempts": state.get("attempts", 0),
        "seed": quiz_round.seed if quiz_round else None,
        "strict": quiz_round.strict if quiz_round else None,
        "score": state.get("score"),
    }

    if getattr(args, "json", False):
        print(json.dumps(payload, indent=2))
        return ExitCode.OK

    print("eqquiz status")
    for k, v in payload.items():
        print(f"- {k}: {v}")
    if quiz_round is not None and not payload["resolved"]:
        print()
        print_options(quiz_round)
    return ExitCode.OK
