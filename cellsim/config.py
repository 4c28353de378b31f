import argparse
from dataclasses import dataclass
from typing import List

from .bounded import NonNegative
from .cell import NEVER, CellConstants
from .food_sources import ConstantFoodSource, GrowingFoodSource
from .mutation import Normal
from .world import DEFAULT_FOOD_AMOUNT


@dataclass
class CFG:
    # Run
    SEED: int = 7
    STEPS: int = 1000

    # Food
    INITIAL_FOOD: float = DEFAULT_FOOD_AMOUNT
    ADDED_FOOD: float = 0.0
    FOOD_GROWTH: float = 0.0       # added food grows by this much every step

    # Initial population (mean, sd of a non-negative normal)
    N0: int = 100
    MEAN_ENERGY: float = 100.0
    SD_ENERGY: float = 0.0
    MEAN_EATING_ENERGY: float = 0.0
    SD_EATING_ENERGY: float = 0.0
    MEAN_HEALING_ENERGY: float = 0.0
    SD_HEALING_ENERGY: float = 0.0
    MEAN_CHILD_THRESHOLD_ENERGY: float = NEVER
    SD_CHILD_THRESHOLD_ENERGY: float = 0.0
    MEAN_CHILD_THRESHOLD_FOOD: float = 0.0
    SD_CHILD_THRESHOLD_FOOD: float = 0.0

    # Lineage constants
    CREATE_CHILD_ENERGY: float = CellConstants.DEFAULT.create_child_energy
    EAT_YIELD: float = CellConstants.DEFAULT.food_yield_from_eating
    DIGEST_YIELD: float = CellConstants.DEFAULT.energy_yield_from_digestion
    HEAL_YIELD: float = CellConstants.DEFAULT.health_increase_per_healing_energy
    ENTROPY: float = CellConstants.DEFAULT.health_reduction_from_entropy
    EXPENDITURE_DAMAGE: float = CellConstants.DEFAULT.health_reduction_per_energy_expended

    # Mutation stdevs
    EATING_ENERGY_MUT_SD: float = 0.0
    HEALING_ENERGY_MUT_SD: float = 0.0
    CHILD_THRESHOLD_ENERGY_MUT_SD: float = 0.0
    CHILD_THRESHOLD_FOOD_MUT_SD: float = 0.0

    # Console
    PRINT_EVERY: int = 1   # every step

    # Monitor
    MONITOR: bool = False
    TICKS_PER_SECOND: float = 10.0

    # End-of-run charts
    CHARTS: bool = False
    CHART_DIR: str = "simulation_results"
    TRAIT_BINS: int = 20

    def cell_constants(self) -> CellConstants:
        return CellConstants(
            create_child_energy=self.CREATE_CHILD_ENERGY,
            energy_yield_from_digestion=self.DIGEST_YIELD,
            food_yield_from_eating=self.EAT_YIELD,
            health_increase_per_healing_energy=self.HEAL_YIELD,
            health_reduction_from_entropy=self.ENTROPY,
            health_reduction_per_energy_expended=self.EXPENDITURE_DAMAGE,
            attempted_eating_energy_sd=self.EATING_ENERGY_MUT_SD,
            attempted_healing_energy_sd=self.HEALING_ENERGY_MUT_SD,
            child_threshold_energy_sd=self.CHILD_THRESHOLD_ENERGY_MUT_SD,
            child_threshold_food_sd=self.CHILD_THRESHOLD_FOOD_MUT_SD,
        )

    def food_sources(self) -> list:
        if self.FOOD_GROWTH != 0.0:
            return [GrowingFoodSource(self.ADDED_FOOD, self.FOOD_GROWTH)]
        return [ConstantFoodSource(self.ADDED_FOOD)]

    def validate(self):
        """Raise ValueError for any setting the simulation cannot start with."""
        for name in ("STEPS", "N0"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0, got {getattr(self, name)}")
        NonNegative(self.INITIAL_FOOD)
        for trait in ("ENERGY", "EATING_ENERGY", "HEALING_ENERGY", "CHILD_THRESHOLD_ENERGY", "CHILD_THRESHOLD_FOOD"):
            Normal(getattr(self, f"MEAN_{trait}"), getattr(self, f"SD_{trait}"))
        self.cell_constants()
        self.food_sources()


# (flags, CFG field, type, help)
_OPTIONS: List[tuple] = [
    (("-s", "--steps"), "STEPS", int, "Number of steps"),
    (("--seed",), "SEED", int, "Random seed"),
    (("-f", "--initial-food"), "INITIAL_FOOD", float, "Initial world food"),
    (("--added-food",), "ADDED_FOOD", float, "World food added per step"),
    (("--food-growth",), "FOOD_GROWTH", float, "Increase of the added food every step"),
    (("-n", "--cells"), "N0", int, "Initial number of cells"),
    (("-e", "--mean-en"), "MEAN_ENERGY", float, "Mean of cell initial energies"),
    (("--sd-en",), "SD_ENERGY", float, "Standard deviation of cell initial energies"),
    (("-E", "--mean-eat"), "MEAN_EATING_ENERGY", float, "Mean of cell eating energies"),
    (("--sd-eat",), "SD_EATING_ENERGY", float, "Standard deviation of cell eating energies"),
    (("-H", "--mean-heal"), "MEAN_HEALING_ENERGY", float, "Mean of cell healing energies"),
    (("--sd-heal",), "SD_HEALING_ENERGY", float, "Standard deviation of cell healing energies"),
    (("-C", "--mean-child-en"), "MEAN_CHILD_THRESHOLD_ENERGY", float, "Mean of child threshold energies"),
    (("--sd-child-en",), "SD_CHILD_THRESHOLD_ENERGY", float, "Standard deviation of child threshold energies"),
    (("--mean-child-fd",), "MEAN_CHILD_THRESHOLD_FOOD", float, "Mean of child threshold foods"),
    (("--sd-child-fd",), "SD_CHILD_THRESHOLD_FOOD", float, "Standard deviation of child threshold foods"),
    (("--create-child",), "CREATE_CHILD_ENERGY", float, "Energy cost of creating a child"),
    (("-F", "--eat-yield"), "EAT_YIELD", float, "Food gained per unit eating energy"),
    (("-D", "--digest-yield"), "DIGEST_YIELD", float, "Energy gained per unit food"),
    (("--heal-yield",), "HEAL_YIELD", float, "Health gained per unit healing energy"),
    (("--entropy",), "ENTROPY", float, "Health lost every step"),
    (("--damage",), "EXPENDITURE_DAMAGE", float, "Health lost per unit energy expended"),
    (("--mut-eat",), "EATING_ENERGY_MUT_SD", float, "Mutation stdev of eating energy"),
    (("--mut-heal",), "HEALING_ENERGY_MUT_SD", float, "Mutation stdev of healing energy"),
    (("--mut-child-en",), "CHILD_THRESHOLD_ENERGY_MUT_SD", float, "Mutation stdev of child threshold energy"),
    (("--mut-child-fd",), "CHILD_THRESHOLD_FOOD_MUT_SD", float, "Mutation stdev of child threshold food"),
    (("--print-every",), "PRINT_EVERY", int, "Print stats every N steps"),
]


def build_parser() -> argparse.ArgumentParser:
    defaults = CFG()
    parser = argparse.ArgumentParser(description="Evolve a population of cells competing for food.")
    for flags, name, kind, help_text in _OPTIONS:
        parser.add_argument(*flags, dest=name, type=kind, default=getattr(defaults, name),
                            help=f"{help_text} (default: {getattr(defaults, name)})")
    parser.add_argument("--monitor", dest="MONITOR", action="store_true", help="Show the live pygame monitor")
    parser.add_argument("--charts", dest="CHARTS", action="store_true", help="Save matplotlib charts at the end")
    parser.add_argument("--chart-dir", dest="CHART_DIR", default=defaults.CHART_DIR, help="Where charts are saved")
    return parser


def cfg_from_args(argv=None) -> CFG:
    parser = build_parser()
    args = parser.parse_args(argv)
    cfg = CFG(**vars(args))
    try:
        cfg.validate()
    except ValueError as e:
        parser.error(str(e))
    return cfg
