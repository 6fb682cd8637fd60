"""Strict equality of equalization vectors."""

from eqquiz.constants import BAND_COUNT
from eqquiz.core.models import LengthMismatch


def equal(eq1, eq2):
    if len(eq1) != BAND_COUNT:
        raise LengthMismatch(1, len(eq1))
    if len(eq2) != BAND_COUNT:
        raise LengthMismatch(2, len(eq2))
    for i in range(BAND_COUNT):
        if eq1[i] != eq2[i]:
            return False
    return True
