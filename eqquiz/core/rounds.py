"""Quiz round assembly and judging."""

import logging

from eqquiz.constants import BASELINE
from eqquiz.core.decoys import generate_decoys
from eqquiz.core.equality import equal
from eqquiz.core.models import QuizRound
from eqquiz.core.perturb import generate_alternative
from eqquiz.core.random_source import RandomSource, fresh_seed

log = logging.getLogger(__name__)


def new_round(rng, strict=False, max_attempts=None):
    target = generate_alternative(BASELINE, rng, max_attempts)
    decoys = generate_decoys(target, rng, strict=strict, max_attempts=max_attempts)
    options = rng.shuffle([*decoys, target])
    log.debug("new round: target=%s strict=%s", list(target), strict)
    return QuizRound(
        target=target,
        options=tuple(options),
        seed=getattr(rng, "seed", None),
        strict=strict,
    )


def round_from_seed(seed=None, strict=False, max_attempts=None):
    """Build a round from ``seed``; a missing seed is drawn fresh and recorded."""
    if seed is None:
        seed = fresh_seed()
    return new_round(RandomSource(seed), strict=strict, max_attempts=max_attempts)


def is_correct_guess(quiz_round, guess):
    return equal(quiz_round.target, guess)
