"""
Mutation sources and seeding distributions.

A mutation source has one method, mutate(value, stdev), returning a new
non-negative value near ``value``. GaussianMutation is the one used in real
runs; NoMutation and AddStdevMutation make steps exactly predictable in tests.
"""

from __future__ import annotations
from dataclasses import dataclass

import numpy as np

from .bounded import NonNegative


def sample_non_negative(rng: np.random.Generator, mean: float, stdev: float) -> NonNegative:
    """Draw from Normal(mean, stdev), redrawing until the draw is >= 0."""
    if stdev == 0.0:
        return NonNegative(mean)
    while True:
        x = float(rng.normal(mean, stdev))
        if x >= 0.0:
            return NonNegative.clipped(x)


class GaussianMutation:
    def __init__(self, rng: np.random.Generator):
        self.rng = rng

    def mutate(self, value: float, stdev: float) -> NonNegative:
        return sample_non_negative(self.rng, NonNegative(value), NonNegative(stdev))


class NoMutation:
    def mutate(self, value: float, stdev: float) -> NonNegative:
        return NonNegative(value)


class AddStdevMutation:
    def mutate(self, value: float, stdev: float) -> NonNegative:
        return NonNegative(value) + NonNegative(stdev)


@dataclass(frozen=True)
class Normal:
    """Seeding distribution for one cell attribute."""
    mean: float
    sd: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "mean", NonNegative(self.mean))
        object.__setattr__(self, "sd", NonNegative(self.sd))

    def sample(self, rng: np.random.Generator) -> NonNegative:
        return sample_non_negative(rng, self.mean, self.sd)
