import math

from acotsp import BestSolutionTracker


def test_starts_empty():
    t = BestSolutionTracker()
    assert t.best_path == []
    assert t.best_cost == math.inf


def test_keeps_first_on_ties_and_only_improves():
    t = BestSolutionTracker()
    assert t.update([1, 2, 3], 10.0)
    assert not t.update([3, 2, 1], 10.0)
    assert not t.update([2, 1, 3], 12.0)
    assert t.best() == ([1, 2, 3], 10.0)
    assert t.update([2, 3, 1], 9.5)
    assert t.best_cost == 9.5


def test_stored_path_is_a_copy():
    t = BestSolutionTracker()
    path = [1, 2, 3]
    t.update(path, 1.0)
    path.append(4)
    assert t.best_path == [1, 2, 3]
