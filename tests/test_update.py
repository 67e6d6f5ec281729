import numpy as np
import pytest

from acotsp import ACOConfig, PheromoneTable, UpdatePolicy


def test_offline_update_evaporates_then_deposits():
    cfg = ACOConfig(pheromone_persistence=0.5, deposit_factor=2.0, initial_pheromone=1.0)
    table = PheromoneTable(4, cfg.initial_pheromone)
    assert UpdatePolicy(cfg).apply(table, [0, 1, 2, 3], 4.0)
    assert table.get(0, 1) == pytest.approx(0.5 + 0.5)
    assert table.get(3, 0) == pytest.approx(1.0)
    assert table.get(0, 2) == pytest.approx(0.5)


def test_offline_disabled_leaves_table_alone():
    cfg = ACOConfig(offline_pheromone_update=False)
    table = PheromoneTable(4, 1.0)
    assert not UpdatePolicy(cfg).apply(table, [0, 1, 2, 3], 4.0)
    assert np.all(table.snapshot() == 1.0)


def test_online_step_adds_fixed_amount():
    cfg = ACOConfig(online_pheromone_update=True, online_deposit=0.05)
    table = PheromoneTable(3, 1.0)
    UpdatePolicy(cfg).online_step(table, 0, 2)
    assert table.get(2, 0) == pytest.approx(1.05)


def test_zero_cost_tour_deposit_is_finite():
    policy = UpdatePolicy(ACOConfig())
    assert np.isfinite(policy.offline_amount(0.0))
