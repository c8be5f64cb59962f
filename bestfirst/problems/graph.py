# bestfirst/problems/graph.py
# An explicit weighted digraph as a search problem. States are vertex names and the
# action for an edge is the vertex it leads to.
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Hashable, Iterable, Mapping, Optional

from ..core.problem import Problem, State, Action


@dataclass
class GraphProblem(Problem):
    graph: Mapping[Hashable, Mapping[Hashable, float]]
    initial: State
    goals: FrozenSet[State]
    h: Optional[Mapping[Hashable, float]] = None  # heuristic table; missing entries are 0
    edges: int = field(init=False, default=0)

    def __post_init__(self):
        if not isinstance(self.goals, frozenset):
            self.goals = frozenset(self.goals)
        self.edges = sum(len(nbrs) for nbrs in self.graph.values())

    def goal_test(self, s: State) -> bool:
        return s in self.goals

    def actions(self, s: State) -> Iterable[Action]:
        return list(self.graph.get(s, {}))

    def result(self, s: State, a: Action) -> State:
        return a  # action is the neighbour vertex

    def step_cost(self, s: State, a: Action, s2: State) -> float:
        return float(self.graph[s][s2])

    def heuristic(self, s: State) -> float:
        if self.h is None:
            return 0.0
        return float(self.h.get(s, 0.0))


def undirected(edges: Iterable) -> Dict[Hashable, Dict[Hashable, float]]:
    """Adjacency dict from (u, v, cost) triples, adding both directions."""
    graph: Dict[Hashable, Dict[Hashable, float]] = {}
    for u, v, c in edges:
        graph.setdefault(u, {})[v] = float(c)
        graph.setdefault(v, {})[u] = float(c)
    return graph
