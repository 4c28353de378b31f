"""Twenty steps of the default configuration."""

from cellsim.config import CFG
from cellsim.sim import Sim, run

if __name__ == "__main__":
    run(Sim(CFG(STEPS=20)))
