import pytest

from acotsp import City, PheromoneTable, ProblemFormatError, TSPInstance
from acotsp.problem_io import (format_cities, format_matlab_matrix, format_pheromone_table,
                               format_solution, parse_problem_file)


def test_parse_problem_file(tmp_path):
    f = tmp_path / "cities.txt"
    f.write_text("# id x y\n1 0 0\n\n2 3.5 4\n3 -1 2.25\n")
    assert parse_problem_file(f) == [City(1, 0.0, 0.0), City(2, 3.5, 4.0), City(3, -1.0, 2.25)]


@pytest.mark.parametrize("content, line", [
    ("1 0 0\n2 1\n", 2),
    ("1 0 0\nx 1 1\n", 2),
    ("1 0 zero\n", 1),
    ("1 0 0\n1 5 5\n", 2),
])
def test_parse_errors_carry_line_number(tmp_path, content, line):
    f = tmp_path / "bad.txt"
    f.write_text(content)
    with pytest.raises(ProblemFormatError) as exc:
        parse_problem_file(f)
    assert exc.value.line_no == line


def test_format_cities_lists_every_city():
    out = format_cities([City(1, 0, 0), City(2, 1.5, 2)])
    lines = out.splitlines()
    assert len(lines) == 3
    assert lines[2].split() == ["2", "1.5000", "2.0000"]


def test_format_solution(unit_square):
    out = format_solution(unit_square, [1, 2, 3, 4], 4.0)
    assert "Tour: 1 -> 2 -> 3 -> 4 -> 1" in out
    assert out.endswith("Cost: 4.000000")


def test_matlab_matrix_is_closed(unit_square):
    out = format_matlab_matrix(unit_square, [2, 3, 4, 1], name="m")
    lines = out.splitlines()
    assert lines[0] == "m = ["
    assert lines[-1] == "];"
    rows = lines[1:-1]
    assert len(rows) == 5
    assert rows[0] == rows[-1] == "  0 1;"


def test_format_pheromone_table():
    out = format_pheromone_table(PheromoneTable(3, 0.5))
    assert len(out.splitlines()) == 3
    assert out.split()[0] == "0.5"
