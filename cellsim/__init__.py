"""
Evolving cells competing for a shared pool of food.

Provides:
    - Cell, CellConstants, CellParams, CellEnvironment
    - World, generate_cells
    - food and mutation sources
    - Sim (seeded runs with metrics) and CFG
"""

from .bounded import NonNegative, Rate, ZeroToOne
from .budget import budget
from .cell import Cell, CellConstants, CellEnvironment, CellParams
from .food_sources import ConstantFoodSource, GrowingFoodSource
from .mutation import AddStdevMutation, GaussianMutation, NoMutation, Normal
from .world import World, generate_cells
from .config import CFG
from .sim import Sim, run

__all__ = [
    "NonNegative", "Rate", "ZeroToOne", "budget",
    "Cell", "CellConstants", "CellEnvironment", "CellParams",
    "ConstantFoodSource", "GrowingFoodSource",
    "AddStdevMutation", "GaussianMutation", "NoMutation", "Normal",
    "World", "generate_cells", "CFG", "Sim", "run",
]
