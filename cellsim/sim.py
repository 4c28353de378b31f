import numpy as np
from typing import Dict, List, Optional, Tuple

from .cell import NEVER
from .config import CFG
from .mutation import GaussianMutation, Normal
from .world import World, generate_cells

TRAITS = ["attempted_eating_energy", "attempted_healing_energy", "child_threshold_energy", "child_threshold_food"]


def settable(values: np.ndarray) -> np.ndarray:
    # drop "never reproduce" thresholds, they would swamp the scale
    return values[values < NEVER]


class Sim:
    """Seeds a World from a CFG, steps it, and keeps per-step metrics."""

    def __init__(self, cfg: CFG, world: Optional[World] = None):
        self.cfg = cfg
        self.rng = np.random.default_rng(cfg.SEED)
        self.world = world if world is not None else self._create_world()
        self.steps = 0

        # Metrics, one entry per recorded step (step 0 is the seeded world)
        self.step_population: List[int] = []
        self.step_mean_health: List[float] = []
        self.step_mean_energy: List[float] = []
        self.step_food: List[float] = []
        self.step_births: List[int] = []
        self.step_deaths: List[int] = []
        # Per-step trait means, plus the latest per-cell trait values only
        self.trait_means: Dict[str, List[float]] = {k: [] for k in TRAITS}
        self.trait_snapshot: Dict[str, np.ndarray] = {}

        self.record_step_metrics(0, 0)

    # ----- initialization -----

    def _create_world(self) -> World:
        cfg = self.cfg
        constants = cfg.cell_constants()
        cells = generate_cells(
            cfg.N0,
            Normal(cfg.MEAN_ENERGY, cfg.SD_ENERGY),
            Normal(cfg.MEAN_EATING_ENERGY, cfg.SD_EATING_ENERGY),
            Normal(cfg.MEAN_HEALING_ENERGY, cfg.SD_HEALING_ENERGY),
            Normal(cfg.MEAN_CHILD_THRESHOLD_ENERGY, cfg.SD_CHILD_THRESHOLD_ENERGY),
            Normal(cfg.MEAN_CHILD_THRESHOLD_FOOD, cfg.SD_CHILD_THRESHOLD_FOOD),
            constants,
            self.rng,
        )
        return (World()
                .with_cells(cells)
                .with_food(cfg.INITIAL_FOOD)
                .with_food_sources(cfg.food_sources())
                .with_mutation(GaussianMutation(self.rng)))

    # ----- stepping -----

    def finished(self) -> bool:
        return self.steps >= self.cfg.STEPS or self.world.num_cells() == 0

    def step(self) -> Tuple[int, int]:
        num_born, num_died = self.world.step()
        self.steps += 1
        self.record_step_metrics(num_born, num_died)
        return num_born, num_died

    # ----- metrics -----

    def record_step_metrics(self, num_born: int, num_died: int):
        world = self.world
        self.step_population.append(world.num_cells())
        self.step_mean_health.append(world.mean_health())
        self.step_mean_energy.append(world.mean_energy())
        self.step_food.append(float(world.food()))
        self.step_births.append(num_born)
        self.step_deaths.append(num_died)

        for k in TRAITS:
            values = settable(np.array([getattr(c.params, k) for c in world.cells], dtype=float))
            self.trait_snapshot[k] = values
            self.trait_means[k].append(float(np.mean(values)) if values.size > 0 else np.nan)


def print_stats_header():
    print("<step>: +<born> -<died> -> <cells> (h: <mean_cell_health>, e: <mean_cell_energy>, f: <total_food>)")


def print_stats(sim: Sim, num_born: int, num_died: int):
    world = sim.world
    print(f"{sim.steps}: +{num_born} -{num_died} -> {world.num_cells()} "
          f"(h: {world.mean_health():.4f}, e: {world.mean_energy():.4f}, f: {float(world.food()):.4f})")


def step_and_report(sim: Sim) -> Tuple[int, int]:
    num_born, num_died = sim.step()
    if sim.steps % max(1, sim.cfg.PRINT_EVERY) == 0 or sim.finished():
        print_stats(sim, num_born, num_died)
    return num_born, num_died


def run(sim: Sim) -> Sim:
    """Step ``sim`` until it runs out of steps or cells, printing stats."""
    print_stats_header()
    print_stats(sim, 0, 0)

    while not sim.finished():
        step_and_report(sim)

    if sim.world.num_cells() == 0:
        print(f"Population died out after {sim.steps} steps")
    return sim
