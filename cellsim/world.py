from typing import List, Sequence, Tuple

import numpy as np

from .bounded import NonNegative
from .cell import Cell, CellConstants, CellEnvironment, CellParams
from .mutation import NoMutation, Normal
from .utils import swap_remove

DEFAULT_FOOD_AMOUNT = 0.0


class World:
    """
    The cell population plus the shared food pool.

    Cell order is not meaningful: dead cells are removed by swapping in the
    last cell, so indexes change from one step to the next.
    """

    def __init__(self):
        self.cells: List[Cell] = []
        self._food = NonNegative(DEFAULT_FOOD_AMOUNT)
        self.food_sources: list = []
        self.mutation = NoMutation()

    # ----- construction -----

    def with_cells(self, cells: Sequence[Cell]) -> "World":
        self.cells.extend(cells)
        return self

    def with_cell(self, cell: Cell) -> "World":
        self.cells.append(cell)
        return self

    def with_food(self, food: float) -> "World":
        self._food = NonNegative(food)
        return self

    def with_food_sources(self, food_sources) -> "World":
        self.food_sources = list(food_sources)
        return self

    def with_mutation(self, mutation) -> "World":
        self.mutation = mutation
        return self

    # ----- queries -----

    def cell(self, index: int) -> Cell:
        return self.cells[index]

    def num_cells(self) -> int:
        return len(self.cells)

    def mean_health(self) -> float:
        if not self.cells:
            return 0.0
        return float(np.mean([c.health for c in self.cells]))

    def mean_energy(self) -> float:
        if not self.cells:
            return 0.0
        return float(np.mean([c.energy for c in self.cells]))

    def food(self) -> NonNegative:
        return self._food

    # ----- per-tick mechanics -----

    def step(self) -> Tuple[int, int]:
        """Run one tick. Returns (num_born, num_died)."""
        self._add_food()
        if not self.cells:
            return 0, 0

        environment = CellEnvironment(food_per_cell=self._food / len(self.cells))
        newborns: List[Cell] = []
        dead_indexes: List[int] = []

        for index, cell in enumerate(self.cells):
            child, food_eaten = cell.step(environment, self.mutation)
            if child is not None:
                newborns.append(child)
            self._food -= food_eaten
            if not cell.is_alive():
                dead_indexes.append(index)

        self.cells.extend(newborns)
        self._remove_cells(dead_indexes)
        return len(newborns), len(dead_indexes)

    def _add_food(self) -> None:
        for source in self.food_sources:
            self._food += source.food_this_step()

    def _remove_cells(self, sorted_indexes: List[int]) -> None:
        # highest first so the remaining indexes stay valid
        for index in reversed(sorted_indexes):
            swap_remove(self.cells, index)


def generate_cells(
    num_cells: int,
    initial_energies: Normal,
    eating_energies: Normal,
    healing_energies: Normal,
    child_threshold_energies: Normal,
    child_threshold_foods: Normal,
    constants: CellConstants,
    rng: np.random.Generator,
) -> List[Cell]:
    """Seed ``num_cells`` cells that all share ``constants``."""
    cells = []
    for _ in range(num_cells):
        params = CellParams(
            attempted_eating_energy=eating_energies.sample(rng),
            attempted_healing_energy=healing_energies.sample(rng),
            child_threshold_energy=child_threshold_energies.sample(rng),
            child_threshold_food=child_threshold_foods.sample(rng),
        )
        cells.append(Cell(constants, params, energy=initial_energies.sample(rng)))
    return cells
