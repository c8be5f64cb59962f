"""Tests for the sample problem definitions."""

import math

import pytest

from bestfirst.algorithms.astar import a_star_search
from bestfirst.problems.graph import GraphProblem, undirected
from bestfirst.problems.grid import GridProblem, make_grid_problem
from bestfirst.problems.random_graph import random_graph_problem
from bestfirst.problems.romania import ROADS, ROMANIA, SLD_TO_BUCHAREST, romania_problem
from bestfirst.problems.tsp import TSPProblem


class TestGraphProblem:
    def test_undirected_builds_both_directions(self) -> None:
        g = undirected([("a", "b", 2), ("b", "c", 3)])
        assert g == {"a": {"b": 2.0}, "b": {"a": 2.0, "c": 3.0}, "c": {"b": 3.0}}

    def test_goals_are_frozen_and_heuristic_defaults_to_zero(self) -> None:
        p = GraphProblem(graph=undirected([("a", "b", 1)]), initial="a", goals={"b"}, h={"a": 1})
        assert isinstance(p.goals, frozenset)
        assert p.heuristic("a") == 1.0
        assert p.heuristic("b") == 0.0
        assert p.edges == 2

    def test_unknown_vertex_has_no_actions(self) -> None:
        p = GraphProblem(graph={}, initial="x", goals=frozenset())
        assert p.actions("x") == []


class TestRomania:
    def test_map_has_every_road_both_ways(self) -> None:
        p = romania_problem()
        assert len(ROMANIA) == len(SLD_TO_BUCHAREST) == 20
        assert p.edges == 2 * len(ROADS)
        for a, b, d in ROADS:
            assert ROMANIA[a][b] == ROMANIA[b][a] == d

    def test_heuristic_only_for_bucharest(self) -> None:
        assert romania_problem().heuristic("Arad") == 366.0
        assert romania_problem("Bucharest", "Arad").heuristic("Sibiu") == 0.0

    def test_unknown_city(self) -> None:
        with pytest.raises(KeyError):
            romania_problem("Atlantis")
        with pytest.raises(KeyError):
            romania_problem("Arad", "Atlantis")


class TestGrid:
    def test_walls_and_bounds_limit_actions(self) -> None:
        p = make_grid_problem()
        assert list(p.actions((0, 0))) == ["Down", "Right"]
        assert "Down" not in list(p.actions((0, 3)))

    def test_manhattan_heuristic(self) -> None:
        p = GridProblem(rows=3, cols=3, start=(0, 0), goal=(2, 2))
        assert p.heuristic((0, 0)) == 4.0
        assert p.result((0, 0), "Right") == (0, 1)

    def test_walls_are_not_vertices(self) -> None:
        p = make_grid_problem()
        assert (1, 3) not in p.graph
        assert len(p.graph) == 5 * 7 - 4

    def test_diagonal_moves_and_octile_heuristic(self) -> None:
        p = GridProblem(rows=3, cols=3, start=(0, 0), goal=(2, 2), diagonal=True)
        assert list(p.actions((0, 0))) == ["Down", "Right", "DownRight"]
        assert p.heuristic((0, 0)) == pytest.approx(2 * math.sqrt(2))
        assert a_star_search(p).path_cost == pytest.approx(2 * math.sqrt(2))

    def test_diagonal_cannot_cut_a_corner(self) -> None:
        p = GridProblem(rows=2, cols=2, start=(0, 0), goal=(1, 1), walls={(0, 1)}, diagonal=True)
        assert "DownRight" not in list(p.actions((0, 0)))
        goal = a_star_search(p)
        assert goal.solution() == ["Down", "Right"]
        assert goal.path_cost == 2.0

    def test_heavy_cell_is_routed_around(self) -> None:
        p = GridProblem(rows=2, cols=3, start=(0, 0), goal=(0, 2), weights={(0, 1): 5})
        assert p.step_cost((0, 0), "Right", (0, 1)) == 5.0
        goal = a_star_search(p)
        assert goal.path_cost == 4.0
        assert (0, 1) not in [n.state for n in goal.path()]

    def test_rejects_light_cells_and_blocked_endpoints(self) -> None:
        with pytest.raises(ValueError):
            GridProblem(rows=2, cols=2, start=(0, 0), goal=(1, 1), weights={(1, 0): 0.5})
        with pytest.raises(ValueError):
            GridProblem(rows=2, cols=2, start=(0, 0), goal=(1, 1), walls={(1, 1)})


class TestTSP:
    def test_closing_edge_only_when_all_visited(self) -> None:
        dist = {"a": {"b": 1, "c": 1}, "b": {"a": 1, "c": 1}, "c": {"a": 1, "b": 1}}
        p = TSPProblem(cities=["a", "b", "c"], distance=dist)
        assert sorted(p.actions(p.initial)) == ["b", "c"]
        full = ("c", frozenset("abc"))
        assert p.actions(full) == ["a"]
        assert p.goal_test(p.result(full, "a"))
        assert not p.goal_test(p.initial)

    def test_heuristic_counts_remaining_departures(self) -> None:
        dist = {"a": {"b": 1, "c": 4}, "b": {"a": 1, "c": 2}, "c": {"a": 4, "b": 2}}
        p = TSPProblem(cities=["a", "b", "c"], distance=dist)
        assert p.heuristic(p.initial) == 1 + 1 + 2


class TestRandomGraph:
    def test_same_seed_same_graph(self) -> None:
        a = random_graph_problem(n=15, seed=4)
        b = random_graph_problem(n=15, seed=4)
        assert a.graph == b.graph
        assert a.h == b.h

    def test_connected(self) -> None:
        p = random_graph_problem(n=30, seed=1)
        seen, todo = {p.initial}, [p.initial]
        while todo:
            for v in p.graph[todo.pop()]:
                if v not in seen:
                    seen.add(v)
                    todo.append(v)
        assert len(seen) == 30

    def test_heuristic_is_consistent(self) -> None:
        p = random_graph_problem(n=30, seed=2)
        for u, nbrs in p.graph.items():
            for v, c in nbrs.items():
                assert p.heuristic(u) <= c + p.heuristic(v) + 1e-9

    def test_too_small(self) -> None:
        with pytest.raises(ValueError):
            random_graph_problem(n=1)
