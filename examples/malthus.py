"""One founding cell that eats and heals; its lineage grows until food runs short."""

from cellsim.cell import Cell, CellConstants, CellParams
from cellsim.config import CFG
from cellsim.food_sources import ConstantFoodSource
from cellsim.sim import Sim, run
from cellsim.world import World

if __name__ == "__main__":
    constants = CellConstants(
        energy_yield_from_digestion=0.5,
        food_yield_from_eating=10.0,
        health_increase_per_healing_energy=0.5,
        health_reduction_from_entropy=0.5,
        health_reduction_per_energy_expended=0.1,
        create_child_energy=1.0,
    )
    params = CellParams(
        attempted_eating_energy=1.0,
        attempted_healing_energy=2.0,
        child_threshold_energy=3.0,
        child_threshold_food=1.0,
    )
    world = (World()
             .with_cell(Cell(constants, params, energy=10.0))
             .with_food(50.0)
             .with_food_sources([ConstantFoodSource(20.0)]))
    run(Sim(CFG(STEPS=1000), world=world))
