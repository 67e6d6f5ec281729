from dataclasses import fields

from acotsp import ACOConfig
from solve_tsp import build_argparser, config_from_args, main


def test_every_config_field_has_an_option():
    dests = {a.dest for a in build_argparser()._actions}
    assert {f.name for f in fields(ACOConfig)} <= dests


def test_floor_and_epsilon_reach_the_config():
    args = build_argparser().parse_args(["cities.txt", "--floor", "1e-6", "--epsilon", "1e-5",
                                         "--online", "--no-offline", "--ants", "7"])
    cfg = config_from_args(args)
    assert cfg.pheromone_floor == 1e-6
    assert cfg.distance_epsilon == 1e-5
    assert cfg.online_pheromone_update and not cfg.offline_pheromone_update
    assert cfg.population_size == 7


def test_defaults_match_config_defaults():
    cfg = config_from_args(build_argparser().parse_args(["cities.txt"]))
    assert cfg == ACOConfig()


def test_main_prints_solution(tmp_path, capsys):
    f = tmp_path / "square.txt"
    f.write_text("1 0 0\n2 0 1\n3 1 1\n4 1 0\n")
    assert main([str(f), "--ants", "10", "--iters", "30", "--seed", "1", "--matlab"]) == 0
    out = capsys.readouterr().out
    assert "Cost: 4.000000" in out
    assert "solution_matrix = [" in out
