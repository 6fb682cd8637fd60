"""Seedable random source consumed by the generators."""

import numpy as np


class RandomSource:
    """Thin wrapper over ``numpy.random.Generator``.

    Generators only need three draws:
      randint(high)  -> uniform int in [0, high)
      choice(seq)    -> uniform element of seq
      shuffle(seq)   -> new list holding a uniform permutation of seq
    """

    def __init__(self, seed=None):
        self.seed = seed
        self._gen = np.random.default_rng(seed)

    def randint(self, high):
        return int(self._gen.integers(0, high))

    def choice(self, seq):
        return seq[self.randint(len(seq))]

    def shuffle(self, seq):
        items = list(seq)
        order = self._gen.permutation(len(items))
        return [items[int(i)] for i in order]


def fresh_seed():
    """Draw an OS-entropy seed small enough to show and type back in."""
    return int(np.random.SeedSequence().entropy % 2**32)
