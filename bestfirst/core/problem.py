# Defines the standard interface for any search problem (states, actions, goals, costs, heuristic).
# bestfirst/core/problem.py
from __future__ import annotations
from typing import Callable, Hashable, Iterable, Optional, Protocol

from .node import Node

Action = Hashable
State = Hashable

# f(node) -> estimated total cost through node (g + h for A*)
CostFunction = Callable[[Node], float]
# split(a, b) -> True if a should be ordered before b when their priorities are equal
TiePolicy = Callable[[Node, Node], bool]


class Problem(Protocol):
    """Canonical AI search problem interface (atomic state-space view).

    Subclasses must provide ``initial`` and the four transition methods; node creation,
    child construction and the heuristic have usable defaults.
    """
    initial: State

    def goal_test(self, state: State) -> bool: ...
    def actions(self, state: State) -> Iterable[Action]: ...
    def result(self, state: State, action: Action) -> State: ...
    def step_cost(self, state: State, action: Action, next_state: State) -> float: ...

    # Optional heuristic for informed search; default 0
    def heuristic(self, state: State) -> float:
        return 0.0

    def create(self, state: State, parent: Optional[Node], action: Optional[Action], step_cost: float) -> Node:
        return Node(state, parent, action, step_cost)

    def child(self, parent: Node, action: Action, next_state: Optional[State] = None) -> Node:
        s = parent.state
        s2 = self.result(s, action) if next_state is None else next_state
        cost = self.step_cost(s, action, s2)
        if cost is None:
            raise ValueError(
                f"step_cost returned None for (s={s!r}, a={action!r}, s'={s2!r}). "
                "Check your problem's ACTIONS/RESULT/cost mapping."
            )
        return self.create(s2, parent, action, float(cost))

    def root(self) -> Node:
        return self.create(self.initial, None, None, 0.0)


def path_cost(node: Node) -> float:
    return node.path_cost


def a_star_cost(problem: Problem, weight: float = 1.0) -> CostFunction:
    """f(n) = g(n) + weight * h(n), reading h from ``problem.heuristic``."""
    def f(n: Node) -> float:
        val = problem.heuristic(n.state)
        return n.path_cost + weight * (0.0 if val is None else float(val))
    return f


def greedy_cost(problem: Problem) -> CostFunction:
    def f(n: Node) -> float:
        val = problem.heuristic(n.state)
        return 0.0 if val is None else float(val)
    return f
