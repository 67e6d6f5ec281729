import pytest

from acotsp import ACOConfig, ConfigurationError


def test_defaults_are_valid():
    cfg = ACOConfig()
    assert cfg.validate() is cfg
    assert cfg.offline_pheromone_update and not cfg.online_pheromone_update


@pytest.mark.parametrize("changes", [
    {"population_size": 0},
    {"max_iterations": 0},
    {"population_size": 2.5},
    {"max_iterations": True},
    {"pheromone_persistence": 0.0},
    {"pheromone_persistence": 1.5},
    {"pheromone_persistence": float("nan")},
    {"alpha": -0.1},
    {"beta": -1.0},
    {"alpha": float("nan")},
    {"beta": float("nan")},
    {"online_deposit": float("nan")},
    {"initial_pheromone": 0.0},
    {"pheromone_floor": 0.0},
    {"distance_epsilon": -1.0},
    {"deposit_factor": -1.0},
    {"n_workers": 0},
    {"seed": -3},
])
def test_invalid_values_raise(changes):
    with pytest.raises(ConfigurationError):
        ACOConfig(**changes).validate()


def test_persistence_of_one_is_allowed():
    ACOConfig(pheromone_persistence=1.0).validate()


def test_configuration_error_is_value_error():
    assert issubclass(ConfigurationError, ValueError)


def test_replace_returns_copy():
    cfg = ACOConfig()
    other = cfg.replace(alpha=3.0)
    assert other.alpha == 3.0 and cfg.alpha == 1.0
