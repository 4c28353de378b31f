"""
Cells: lineage constants, heritable params, and the per-step metabolism.
"""

from __future__ import annotations
import sys
from dataclasses import dataclass, fields, replace
from typing import ClassVar, Optional, Tuple

from .bounded import NonNegative, Rate, ZeroToOne
from .budget import budget

# Largest float: a child threshold no budget can reach.
NEVER = sys.float_info.max


def _check_fields(obj, kinds) -> None:
    # frozen dataclasses: convert plain floats through the checked constructors
    for f in fields(obj):
        object.__setattr__(obj, f.name, kinds[f.name](getattr(obj, f.name)))


@dataclass(frozen=True)
class CellConstants:
    """Shared by a founding cell and all of its descendants. Never changes."""
    create_child_energy: float = 0.0
    energy_yield_from_digestion: float = 1.0
    food_yield_from_eating: float = 1.0
    health_increase_per_healing_energy: float = 0.0
    health_reduction_from_entropy: float = 0.0
    health_reduction_per_energy_expended: float = 0.0

    # Mutation stdevs, one per heritable param
    attempted_eating_energy_sd: float = 0.0
    attempted_healing_energy_sd: float = 0.0
    child_threshold_energy_sd: float = 0.0
    child_threshold_food_sd: float = 0.0

    DEFAULT: ClassVar["CellConstants"]

    _KINDS: ClassVar[dict] = {
        "create_child_energy": NonNegative,
        "energy_yield_from_digestion": NonNegative,
        "food_yield_from_eating": NonNegative,
        "health_increase_per_healing_energy": Rate,
        "health_reduction_from_entropy": ZeroToOne,
        "health_reduction_per_energy_expended": Rate,
        "attempted_eating_energy_sd": NonNegative,
        "attempted_healing_energy_sd": NonNegative,
        "child_threshold_energy_sd": NonNegative,
        "child_threshold_food_sd": NonNegative,
    }

    def __post_init__(self):
        _check_fields(self, self._KINDS)


CellConstants.DEFAULT = CellConstants()


@dataclass(frozen=True)
class CellParams:
    """Heritable per-cell behaviour. Children get a mutated copy."""
    attempted_eating_energy: float = 0.0
    attempted_healing_energy: float = 0.0
    child_threshold_energy: float = NEVER
    child_threshold_food: float = 0.0

    DEFAULT: ClassVar["CellParams"]

    def __post_init__(self):
        _check_fields(self, {f.name: NonNegative for f in fields(self)})

    def mutated(self, constants: CellConstants, mutation) -> "CellParams":
        return replace(
            self,
            attempted_eating_energy=mutation.mutate(
                self.attempted_eating_energy, constants.attempted_eating_energy_sd),
            attempted_healing_energy=mutation.mutate(
                self.attempted_healing_energy, constants.attempted_healing_energy_sd),
            child_threshold_energy=mutation.mutate(
                self.child_threshold_energy, constants.child_threshold_energy_sd),
            child_threshold_food=mutation.mutate(
                self.child_threshold_food, constants.child_threshold_food_sd),
        )


CellParams.DEFAULT = CellParams()


@dataclass(frozen=True)
class CellEnvironment:
    food_per_cell: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "food_per_cell", NonNegative(self.food_per_cell))


class Cell:
    def __init__(
        self,
        constants: CellConstants,
        params: CellParams,
        energy: float = 0.0,
        health: float = 1.0,
    ):
        self.constants = constants
        self.params = params
        self.energy = NonNegative(energy)
        self.health = ZeroToOne(health)

    def __repr__(self) -> str:
        return f"Cell(energy={float(self.energy):.3f}, health={float(self.health):.3f}, params={self.params})"

    def is_alive(self) -> bool:
        return self.health > 0.0

    def step(self, environment: CellEnvironment, mutation) -> Tuple[Optional["Cell"], NonNegative]:
        """Advance one tick. Returns (child or None, food eaten)."""
        params = self.params
        total, (child_energy, eating_energy, healing_energy) = budget(
            self.energy,
            [params.child_threshold_energy, params.attempted_eating_energy, params.attempted_healing_energy],
        )

        reproducing = (child_energy >= params.child_threshold_energy
                       and environment.food_per_cell >= params.child_threshold_food)
        if not reproducing:
            # the share left by reproduction goes to eating and healing
            total, (eating_energy, healing_energy) = budget(
                self.energy, [params.attempted_eating_energy, params.attempted_healing_energy])

        self._expend_energy(total)
        food_eaten = self._eat(eating_energy, environment.food_per_cell)
        self._digest(food_eaten)
        self._entropy()
        self._heal(healing_energy)

        child = self._make_child(child_energy, mutation) if reproducing else None
        return child, food_eaten

    def _expend_energy(self, amount: NonNegative) -> None:
        self.energy -= amount
        self.health -= amount * self.constants.health_reduction_per_energy_expended

    def _eat(self, eating_energy: NonNegative, food_per_cell: NonNegative) -> NonNegative:
        return min(eating_energy * self.constants.food_yield_from_eating, food_per_cell)

    def _digest(self, food: NonNegative) -> None:
        self.energy += food * self.constants.energy_yield_from_digestion

    def _entropy(self) -> None:
        self.health -= self.constants.health_reduction_from_entropy

    def _heal(self, healing_energy: NonNegative) -> None:
        self.health += healing_energy * self.constants.health_increase_per_healing_energy

    def _make_child(self, child_energy: NonNegative, mutation) -> "Cell":
        return Cell(
            self.constants,
            self.params.mutated(self.constants, mutation),
            energy=child_energy - self.constants.create_child_energy,
            health=1.0,
        )
