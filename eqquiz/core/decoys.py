"""Decoy equalizations for a quiz round."""

import logging

from eqquiz.constants import BASELINE
from eqquiz.core.equality import equal
from eqquiz.core.models import GenerationExhausted
from eqquiz.core.perturb import generate_alternative

log = logging.getLogger(__name__)


def _candidates_accepted(candidates, target, strict):
    c0, c1, c2 = candidates
    if equal(c0, c1) or equal(c0, c2) or equal(c0, target):
        return False
    if strict and (equal(c1, c2) or equal(c1, target) or equal(c2, target)):
        return False
    return True


def generate_decoys(target, rng, strict=False, max_attempts=None):
    """Return three decoys a few edits away from the baseline or ``target``.

    Two decoys derive from the flat baseline and one from ``target``. The
    default check only compares the first decoy against the others and
    against ``target``, so the second and third decoys may coincide with
    each other or with ``target``. ``strict=True`` requires all four
    equalizations to be pairwise distinct.
    """
    attempts = 0
    while True:
        candidates = (
            generate_alternative(BASELINE, rng, max_attempts),
            generate_alternative(BASELINE, rng, max_attempts),
            generate_alternative(target, rng, max_attempts),
        )
        if _candidates_accepted(candidates, target, strict):
            return candidates

        attempts += 1
        log.debug("decoy triple rejected (attempt %d, strict=%s)", attempts, strict)
        if max_attempts is not None and attempts >= max_attempts:
            raise GenerationExhausted("decoys", attempts)
