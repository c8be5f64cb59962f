"""Shared fixtures: tiny explicit graphs used across the engine tests."""

import pytest

from bestfirst.problems.graph import GraphProblem


@pytest.fixture
def abc_problem() -> GraphProblem:
    # A->C directly costs 5, A->B->C costs 2
    return GraphProblem(
        graph={"A": {"B": 1, "C": 5}, "B": {"C": 1}, "C": {}},
        initial="A",
        goals=frozenset({"C"}),
    )


@pytest.fixture
def trivial_problem() -> GraphProblem:
    return GraphProblem(graph={"A": {"B": 1}, "B": {}}, initial="A", goals=frozenset({"A"}))


@pytest.fixture
def unreachable_problem() -> GraphProblem:
    # C exists but no edge leads to it
    return GraphProblem(
        graph={"A": {"B": 1}, "B": {}, "C": {}},
        initial="A",
        goals=frozenset({"C"}),
    )
