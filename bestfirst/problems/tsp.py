# bestfirst/problems/tsp.py
# Travelling salesman as a search over partial tours. A state is (city, visited) and
# the goal is back at the start city with every city visited. Every path to a state
# visits the same set, but states are reached by many orderings, so graph search
# prunes a lot; the tree of partial tours is finite, so tree search and RBFS terminate too.
from __future__ import annotations
from typing import FrozenSet, Hashable, Iterable, Mapping, Sequence, Tuple

from ..core.problem import Problem

TourState = Tuple[Hashable, FrozenSet[Hashable]]


class TSPProblem(Problem):
    def __init__(self, cities: Sequence[Hashable], distance: Mapping[Hashable, Mapping[Hashable, float]],
                 start: Hashable | None = None):
        self.cities = tuple(cities)
        self.distance = distance
        self.start = self.cities[0] if start is None else start
        self.initial = (self.start, frozenset([self.start]))
        self._all = frozenset(self.cities)
        # cheapest way out of each city, for the heuristic
        self._min_out = {
            c: min((float(d) for o, d in distance[c].items() if o != c), default=0.0) for c in self.cities
        }

    def goal_test(self, state: TourState) -> bool:
        city, visited = state
        return city == self.start and visited == self._all

    def actions(self, state: TourState) -> Iterable[Hashable]:
        city, visited = state
        if visited == self._all:
            # only the closing edge remains
            return [self.start] if city != self.start else []
        return [c for c in self.cities if c not in visited and c in self.distance[city]]

    def result(self, state: TourState, action: Hashable) -> TourState:
        city, visited = state
        return (action, visited | {action})

    def step_cost(self, state: TourState, action: Hashable, next_state: TourState) -> float:
        return float(self.distance[state[0]][action])

    def heuristic(self, state: TourState) -> float:
        """Each unvisited city, plus the current one, still has to be left once."""
        city, visited = state
        if city == self.start and visited == self._all:
            return 0.0
        return self._min_out[city] + sum(self._min_out[c] for c in self._all - visited)
