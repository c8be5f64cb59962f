"""Tests for Node and the Problem node factories."""

import pytest

from bestfirst.core.node import Node
from bestfirst.core.utils import path_states, reconstruct_path
from bestfirst.problems.graph import GraphProblem


class TestNode:
    def test_root_has_zero_cost_and_no_parent(self) -> None:
        root = Node("A")
        assert root.parent is None
        assert root.action is None
        assert root.path_cost == 0.0
        assert root.depth == 0

    def test_path_cost_accumulates_along_parents(self) -> None:
        root = Node("A")
        b = Node("B", root, "go-b", 1.5)
        c = Node("C", b, "go-c", 2)
        assert b.path_cost == 1.5
        assert c.path_cost == 3.5
        assert c.depth == 2

    def test_root_ignores_step_cost(self) -> None:
        assert Node("A", None, None, 7).path_cost == 0.0

    def test_node_is_read_only(self) -> None:
        n = Node("A")
        with pytest.raises(AttributeError):
            n.state = "B"
        with pytest.raises(AttributeError):
            n._path_cost = 10.0

    def test_siblings_share_parent(self) -> None:
        root = Node("A")
        left = Node("L", root, "l", 1)
        right = Node("R", root, "r", 1)
        assert left.parent is right.parent is root

    def test_path_and_solution(self) -> None:
        root = Node("A")
        c = Node("C", Node("B", root, "ab", 1), "bc", 1)
        assert [n.state for n in c.path()] == ["A", "B", "C"]
        assert c.solution() == ["ab", "bc"]


class TestPathHelpers:
    def test_reconstruct_path(self) -> None:
        c = Node("C", Node("B", Node("A"), "ab", 1), "bc", 4)
        actions, cost = reconstruct_path(c)
        assert actions == ["ab", "bc"]
        assert cost == 5.0

    def test_path_states_is_goal_to_start(self) -> None:
        c = Node("C", Node("B", Node("A"), "ab", 1), "bc", 4)
        assert list(path_states(c)) == ["C", "B", "A"]


class TestProblemFactories:
    def test_child_applies_result_and_step_cost(self, abc_problem: GraphProblem) -> None:
        root = abc_problem.root()
        child = abc_problem.child(root, "C")
        assert child.state == "C"
        assert child.parent is root
        assert child.action == "C"
        assert child.path_cost == 5.0

    def test_child_uses_given_next_state(self, abc_problem: GraphProblem) -> None:
        child = abc_problem.child(abc_problem.root(), "B", "B")
        assert child.state == "B"
        assert child.path_cost == 1.0

    def test_child_rejects_missing_step_cost(self) -> None:
        class Broken(GraphProblem):
            def step_cost(self, s, a, s2):
                return None

        p = Broken(graph={"A": {"B": 1}, "B": {}}, initial="A", goals=frozenset({"B"}))
        with pytest.raises(ValueError, match="step_cost returned None"):
            p.child(p.root(), "B")

    def test_expand_follows_action_order(self, abc_problem: GraphProblem) -> None:
        children = list(abc_problem.root().expand(abc_problem))
        assert [c.state for c in children] == ["B", "C"]
