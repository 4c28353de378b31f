"""
Unit tests for mutation sources and seeding distributions.
"""

import numpy as np
import pytest

from cellsim.mutation import AddStdevMutation, GaussianMutation, NoMutation, Normal


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(42)


def test_no_mutation_returns_value():
    assert NoMutation().mutate(3.5, 10.0) == 3.5


def test_add_stdev_mutation_adds_stdev():
    assert AddStdevMutation().mutate(3.5, 0.25) == 3.75


def test_gaussian_mutation_with_zero_stdev_is_identity(rng):
    assert GaussianMutation(rng).mutate(2.0, 0.0) == 2.0


def test_gaussian_mutation_never_negative(rng):
    mutation = GaussianMutation(rng)
    values = [mutation.mutate(0.1, 5.0) for _ in range(1000)]
    assert all(v >= 0.0 for v in values)
    assert len(set(values)) > 1


def test_gaussian_mutation_centered_on_value(rng):
    mutation = GaussianMutation(rng)
    values = np.array([mutation.mutate(100.0, 1.0) for _ in range(2000)])
    assert values.mean() == pytest.approx(100.0, abs=0.2)


def test_gaussian_mutation_rejects_negative_stdev(rng):
    with pytest.raises(ValueError):
        GaussianMutation(rng).mutate(1.0, -1.0)


def test_same_seed_same_mutations():
    a = GaussianMutation(np.random.default_rng(5))
    b = GaussianMutation(np.random.default_rng(5))
    assert [a.mutate(1.0, 0.5) for _ in range(10)] == [b.mutate(1.0, 0.5) for _ in range(10)]


def test_normal_samples_are_non_negative(rng):
    dist = Normal(0.0, 1.0)
    assert all(dist.sample(rng) >= 0.0 for _ in range(500))


def test_normal_rejects_negative_parameters():
    with pytest.raises(ValueError):
        Normal(-1.0, 1.0)
    with pytest.raises(ValueError):
        Normal(1.0, -1.0)
