"""New round command."""

import json
import logging

from eqquiz.commands.common import print_options, resolve_generation_settings
from eqquiz.constants import ExitCode
from eqquiz.core.models import GenerationExhausted
from eqquiz.core.rounds import round_from_seed
from eqquiz.state.store import locked_state, start_round

log = logging.getLogger(__name__)


def run(args):
    if args.seed is not None and args.seed < 0:
        print("error: seed must be a non-negative integer")
        return ExitCode.USAGE

    strict, max_attempts = resolve_generation_settings(args)
    try:
        quiz_round = round_from_seed(args.seed, strict=strict, max_attempts=max_attempts)
    except GenerationExhausted as exc:
        print(f"error: round generation failed: {exc}")
        return ExitCode.RUNTIME_ERROR

    with locked_state() as state:
        start_round(state, quiz_round)
    log.info("round %d started (seed=%s strict=%s)", state["score"]["rounds"], quiz_round.seed, strict)

    if getattr(args, "json", False):
        payload = {
            "seed": quiz_round.seed,
            "strict": quiz_round.strict,
            "options": [list(o) for o in quiz_round.options],
        }
        print(json.dumps(payload, indent=2))
    else:
        print(f"round {state['score']['rounds']}: which equalizer is applied?\n")
        print_options(quiz_round)
        print("note: use `eqquiz render --input song.wav` to hear it, then `eqquiz guess N`")
    return ExitCode.OK
