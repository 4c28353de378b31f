"""
A single cell with a fixed food supply: it eats, splits while food lasts,
and the population starves once the pool is gone.
"""

from cellsim.config import CFG
from cellsim.sim import Sim, run

if __name__ == "__main__":
    run(Sim(CFG(
        N0=1,
        MEAN_ENERGY=10.0,
        INITIAL_FOOD=100.0,
        MEAN_EATING_ENERGY=1.0,
        EAT_YIELD=10.0,
        DIGEST_YIELD=1.0,
        MEAN_CHILD_THRESHOLD_ENERGY=2.0,
        CREATE_CHILD_ENERGY=2.0,
        ENTROPY=0.1,
        STEPS=200,
    )))
