# bestfirst/problems/grid.py
# Grid pathfinding compiled to an explicit graph. Cells may carry a terrain weight
# (entering a cell costs move length times its weight) and diagonal moves are
# optional; diagonals may not cut the corner of a wall.
from __future__ import annotations
import math
from typing import Dict, Iterable, Mapping, Optional, Set, Tuple

from .graph import GraphProblem

Coord = Tuple[int, int]

_MOVES = {
    "Up": (-1, 0),
    "Down": (1, 0),
    "Left": (0, -1),
    "Right": (0, 1),
}
_DIAGONALS = {
    "UpLeft": (-1, -1),
    "UpRight": (-1, 1),
    "DownLeft": (1, -1),
    "DownRight": (1, 1),
}


class GridProblem(GraphProblem):
    """
    Pathfinding on a rows x cols grid.

    - State: (row, col) tuple
    - ACTIONS(s): move names ('Up', 'Down', ..., 'DownRight' with ``diagonal``) that stay
      in bounds and off walls
    - c(s,a,s'): 1 (sqrt 2 for a diagonal) times the weight of s', default weight 1
    - heuristic(s): Manhattan distance, or octile distance with diagonals. Weights must
      be >= 1, which keeps both admissible and consistent.
    """

    def __init__(
        self,
        rows: int,
        cols: int,
        start: Coord,
        goal: Coord,
        walls: Optional[Set[Coord]] = None,
        diagonal: bool = False,
        weights: Optional[Mapping[Coord, float]] = None,
    ):
        self.rows = rows
        self.cols = cols
        self.goal = goal
        self.walls = set(walls or ())
        self.diagonal = diagonal
        self.weights = dict(weights or {})
        if any(w < 1 for w in self.weights.values()):
            raise ValueError("cell weights must be >= 1")
        for cell in (start, goal):
            if not self._open(cell):
                raise ValueError(f"{cell} is a wall or off the grid")
        self.moves = dict(_MOVES, **_DIAGONALS) if diagonal else dict(_MOVES)
        super().__init__(graph=self._build(), initial=start, goals=frozenset({goal}))

    def _open(self, cell: Coord) -> bool:
        r, c = cell
        return 0 <= r < self.rows and 0 <= c < self.cols and cell not in self.walls

    def _build(self) -> Dict[Coord, Dict[Coord, float]]:
        graph: Dict[Coord, Dict[Coord, float]] = {}
        for r in range(self.rows):
            for c in range(self.cols):
                if not self._open((r, c)):
                    continue
                nbrs = graph.setdefault((r, c), {})
                for dr, dc in self.moves.values():
                    nxt = (r + dr, c + dc)
                    if not self._open(nxt):
                        continue
                    if dr and dc and not (self._open((r + dr, c)) and self._open((r, c + dc))):
                        continue  # corner cutting
                    length = math.sqrt(2) if dr and dc else 1.0
                    nbrs[nxt] = length * self.weights.get(nxt, 1.0)
        return graph

    def actions(self, state: Coord) -> Iterable[str]:
        r, c = state
        nbrs = self.graph.get(state, {})
        return [name for name, (dr, dc) in self.moves.items() if (r + dr, c + dc) in nbrs]

    def result(self, state: Coord, action: str) -> Coord:
        r, c = state
        dr, dc = self.moves[action]
        return (r + dr, c + dc)

    def heuristic(self, state: Coord) -> float:
        dr = abs(state[0] - self.goal[0])
        dc = abs(state[1] - self.goal[1])
        if self.diagonal:
            return max(dr, dc) + (math.sqrt(2) - 1) * min(dr, dc)
        return float(dr + dc)


def make_grid_problem(diagonal: bool = False) -> GridProblem:
    # 5x7 grid with an L-shaped wall between start and goal
    walls = {(1, 3), (2, 3), (3, 3), (3, 4)}
    return GridProblem(rows=5, cols=7, start=(0, 0), goal=(4, 6), walls=walls, diagonal=diagonal)
