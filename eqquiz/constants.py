"""Shared constants."""

from enum import IntEnum


class ExitCode(IntEnum):
    OK = 0
    USAGE = 2
    RUNTIME_ERROR = 10
    NO_ROUND = 20
    WRONG_GUESS = 30


APP_NAME = "eqquiz"

EQ_FREQUENCIES = (32, 63, 125, 250, 500, 1000, 2000, 4000, 8000, 16000)
BAND_COUNT = len(EQ_FREQUENCIES)
GAIN_LEVELS = (-12, 0, 12)
BASELINE = (0,) * BAND_COUNT
OPTION_COUNT = 4
