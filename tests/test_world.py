"""
Unit tests for the World tick driver.

Tests cover:
- Construction and queries (counts, means, food)
- Food sources feeding the pool before cells eat
- Food consumption and the per-cell cap
- Births added after the tick, deaths removed with swap removal
- Invariants over many stochastic ticks
- generate_cells seeding
"""

import numpy as np
import pytest

from cellsim.cell import Cell, CellConstants, CellParams
from cellsim.food_sources import ConstantFoodSource, GrowingFoodSource
from cellsim.mutation import GaussianMutation, Normal
from cellsim.world import World, generate_cells


def make_cell(energy=10.0, health=1.0, constants=None, **params) -> Cell:
    return Cell(constants or CellConstants.DEFAULT, CellParams(**params), energy=energy, health=health)


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------

def test_world_counts_cells():
    world = World().with_cells([make_cell(1.0), make_cell(0.0), make_cell(1.0)])
    assert world.num_cells() == 3


def test_with_cell_appends():
    world = World().with_cells([make_cell(1.0)]).with_cell(make_cell(2.0))
    assert world.num_cells() == 2
    assert world.cell(1).energy == 2.0


def test_world_means_with_no_cells_are_zero():
    world = World()
    assert world.mean_energy() == 0.0
    assert world.mean_health() == 0.0


def test_world_calculates_means():
    world = World().with_cells([make_cell(1.0, health=0.5), make_cell(2.0, health=1.0)])
    assert world.mean_energy() == 1.5
    assert world.mean_health() == 0.75


def test_world_food():
    assert World().food() == 0.0
    assert World().with_food(12.5).food() == 12.5
    with pytest.raises(ValueError):
        World().with_food(-1.0)


# ---------------------------------------------------------------------------
# Food
# ---------------------------------------------------------------------------

def test_empty_world_step_is_a_no_op_apart_from_food():
    world = World().with_food(1.0).with_food_sources([ConstantFoodSource(2.0)])
    assert world.step() == (0, 0)
    assert world.food() == 3.0


def test_food_sources_are_polled_every_step():
    world = World().with_food_sources([ConstantFoodSource(1.0), GrowingFoodSource(1.0, 1.0)])
    world.step()
    world.step()
    assert world.food() == 5.0


def test_cells_consume_world_food():
    world = (World()
             .with_food(10.0)
             .with_cells([make_cell(attempted_eating_energy=2.0),
                          make_cell(attempted_eating_energy=3.0)]))
    world.step()
    assert world.food() == 5.0


def test_cells_cannot_consume_more_than_their_share_of_world_food():
    world = (World()
             .with_food(4.0)
             .with_cells([make_cell(attempted_eating_energy=3.0),
                          make_cell(attempted_eating_energy=1.0)]))
    world.step()
    assert world.food() == 1.0


def test_added_food_is_shared_in_the_same_step():
    world = (World()
             .with_food_sources([ConstantFoodSource(4.0)])
             .with_cells([make_cell(attempted_eating_energy=10.0)]))
    world.step()
    assert world.food() == 0.0
    assert world.cell(0).energy == 4.0


# ---------------------------------------------------------------------------
# Births and deaths
# ---------------------------------------------------------------------------

def test_world_adds_new_cells():
    constants = CellConstants(create_child_energy=1.5)
    world = World().with_cells([make_cell(10.0, constants=constants, child_threshold_energy=4.0)])
    assert world.step() == (1, 0)
    assert world.num_cells() == 2


def test_newborns_do_not_step_in_their_birth_tick():
    constants = CellConstants(create_child_energy=1.5, health_reduction_from_entropy=0.25)
    world = World().with_cells([make_cell(10.0, constants=constants, child_threshold_energy=4.0)])
    world.step()

    parent, child = world.cell(0), world.cell(1)
    assert parent.health == 0.75
    assert parent.energy == 6.0
    assert child.health == 1.0
    assert child.energy == 2.5


def test_world_removes_dead_cells():
    constants = CellConstants(health_reduction_per_energy_expended=1.0)
    world = World().with_cells([
        make_cell(10.0, constants=constants, attempted_eating_energy=10.0) for _ in range(10)
    ])
    assert world.step() == (0, 10)
    assert world.num_cells() == 0


def test_world_reports_num_died():
    lethal = CellConstants(health_reduction_from_entropy=1.0)
    world = World().with_cells([
        make_cell(1.0),
        make_cell(2.0, constants=lethal),
        make_cell(3.0, constants=lethal),
    ])
    _, num_died = world.step()
    assert num_died == 2
    assert world.num_cells() == 1
    assert world.cell(0).energy == 1.0


def test_dead_cells_removed_without_keeping_order():
    lethal = CellConstants(health_reduction_from_entropy=1.0)
    world = World().with_cells([
        make_cell(0.0, constants=lethal),
        make_cell(1.0),
        make_cell(2.0, constants=lethal),
        make_cell(3.0),
        make_cell(4.0),
    ])
    world.step()
    assert sorted(c.energy for c in world.cells) == [1.0, 3.0, 4.0]


def test_newborns_survive_parent_death():
    constants = CellConstants(create_child_energy=1.0, health_reduction_from_entropy=1.0)
    world = World().with_cells([make_cell(10.0, constants=constants, child_threshold_energy=4.0)])
    assert world.step() == (1, 1)
    assert world.num_cells() == 1
    assert world.cell(0).health == 1.0
    assert world.cell(0).energy == 3.0


# ---------------------------------------------------------------------------
# Invariants
# ---------------------------------------------------------------------------

def test_invariants_hold_over_many_steps():
    rng = np.random.default_rng(11)
    constants = CellConstants(
        create_child_energy=1.0,
        food_yield_from_eating=2.0,
        energy_yield_from_digestion=1.0,
        health_increase_per_healing_energy=0.2,
        health_reduction_from_entropy=0.05,
        health_reduction_per_energy_expended=0.02,
        attempted_eating_energy_sd=0.2,
        attempted_healing_energy_sd=0.2,
        child_threshold_energy_sd=0.5,
        child_threshold_food_sd=0.1,
    )
    cells = generate_cells(
        30, Normal(10.0, 3.0), Normal(2.0, 1.0), Normal(0.5, 0.5), Normal(6.0, 2.0), Normal(0.5, 0.5),
        constants, rng,
    )
    world = (World()
             .with_cells(cells)
             .with_food(50.0)
             .with_food_sources([ConstantFoodSource(20.0)])
             .with_mutation(GaussianMutation(rng)))

    for _ in range(60):
        before = world.num_cells()
        num_born, num_died = world.step()
        assert world.num_cells() == before + num_born - num_died
        assert world.food() >= 0.0
        for cell in world.cells:
            assert cell.energy >= 0.0
            assert 0.0 <= cell.health <= 1.0
            assert cell.health > 0.0
        if world.num_cells() == 0 or world.num_cells() > 2000:
            break


# ---------------------------------------------------------------------------
# generate_cells
# ---------------------------------------------------------------------------

def test_generate_cells_with_normal_energy_distribution():
    rng = np.random.default_rng(0)
    cells = generate_cells(
        100, Normal(100.0, 5.0), Normal(0.0), Normal(0.0), Normal(4.0), Normal(0.0),
        CellConstants.DEFAULT, rng,
    )
    assert len(cells) == 100
    assert any(c.energy < 100.0 for c in cells)
    assert any(c.energy > 100.0 for c in cells)
    assert all(c.params.child_threshold_energy == 4.0 for c in cells)
    assert all(c.health == 1.0 for c in cells)


def test_generated_cells_share_constants():
    constants = CellConstants(create_child_energy=2.0)
    cells = generate_cells(
        5, Normal(1.0), Normal(1.0), Normal(1.0), Normal(1.0), Normal(1.0), constants, np.random.default_rng(1),
    )
    assert all(c.constants is constants for c in cells)


def test_generated_values_are_never_negative():
    cells = generate_cells(
        200, Normal(0.0, 1.0), Normal(0.0, 1.0), Normal(0.0, 1.0), Normal(0.0, 1.0), Normal(0.0, 1.0),
        CellConstants.DEFAULT, np.random.default_rng(2),
    )
    for c in cells:
        assert c.energy >= 0.0
        assert c.params.attempted_eating_energy >= 0.0
        assert c.params.child_threshold_food >= 0.0
