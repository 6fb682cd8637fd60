"""Shared data models."""

from dataclasses import dataclass

from eqquiz.constants import BAND_COUNT


class EqQuizError(Exception):
    """Base class for eqquiz errors."""


class LengthMismatch(EqQuizError, ValueError):
    def __init__(self, operand, length):
        self.operand = operand
        self.length = length
        super().__init__(f"equalization {operand} has incorrect length: {length}")


class GenerationExhausted(EqQuizError, RuntimeError):
    def __init__(self, what, attempts):
        self.what = what
        self.attempts = attempts
        super().__init__(f"{what}: no acceptable candidate after {attempts} attempts")


def as_vector(levels):
    """Return levels as an EqualizationVector (a tuple of ints)."""
    return tuple(int(level) for level in levels)


@dataclass(frozen=True)
class QuizRound:
    target: tuple[int, ...]
    options: tuple[tuple[int, ...], ...]
    seed: int | None = None
    strict: bool = False

    def to_dict(self):
        return {
            "target": list(self.target),
            "options": [list(o) for o in self.options],
            "seed": self.seed,
            "strict": self.strict,
        }

    @classmethod
    def from_dict(cls, data):
        quiz_round = cls(
            target=as_vector(data["target"]),
            options=tuple(as_vector(o) for o in data["options"]),
            seed=data.get("seed"),
            strict=bool(data.get("strict", False)),
        )
        for vector in (quiz_round.target, *quiz_round.options):
            if len(vector) != BAND_COUNT:
                raise ValueError(f"stored equalization has {len(vector)} bands, expected {BAND_COUNT}")
        return quiz_round
