"""Random small-edit alternatives of an equalization."""

import logging

from eqquiz.constants import BAND_COUNT, GAIN_LEVELS
from eqquiz.core.equality import equal
from eqquiz.core.models import GenerationExhausted, as_vector

log = logging.getLogger(__name__)

# Odds (1 in N) of each extra mutation after the first one.
EXTRA_EDIT_ODDS = (5, 6, 16)


def _mutate(candidate, rng):
    index = rng.randint(BAND_COUNT)
    candidate[index] = rng.choice(GAIN_LEVELS)


def generate_alternative(base, rng, max_attempts=None):
    """Return a copy of ``base`` with one to four random band edits.

    Candidates equal to ``base`` are rejected and redrawn. With
    ``max_attempts=None`` the loop is unbounded; otherwise
    GenerationExhausted is raised after that many rejections.
    """
    base = as_vector(base)
    attempts = 0
    while True:
        candidate = list(base)
        _mutate(candidate, rng)
        for odds in EXTRA_EDIT_ODDS:
            if rng.randint(odds) == 0:
                _mutate(candidate, rng)

        if not equal(candidate, base):
            return as_vector(candidate)

        attempts += 1
        log.debug("alternative rejected (attempt %d): equals base", attempts)
        if max_attempts is not None and attempts >= max_attempts:
            raise GenerationExhausted("alternative", attempts)
