# bestfirst/problems/random_graph.py
# Random connected Euclidean graphs. Points are scattered in a square, each one is
# joined to its k nearest neighbours, and a random spanning path guarantees
# connectivity. Edge costs are Euclidean lengths, so straight-line distance to the
# goal is an admissible, consistent heuristic.
from __future__ import annotations
from typing import Dict

import numpy as np

from .graph import GraphProblem


def random_graph_problem(n: int = 60, seed: int = 0, k: int = 3, size: float = 100.0) -> GraphProblem:
    if n < 2:
        raise ValueError(f"need at least 2 vertices, got {n}")
    rng = np.random.default_rng(seed)
    pts = rng.uniform(0.0, size, size=(n, 2))
    dist = np.linalg.norm(pts[:, None, :] - pts[None, :, :], axis=-1)

    graph: Dict[int, Dict[int, float]] = {i: {} for i in range(n)}

    def join(u: int, v: int) -> None:
        d = float(dist[u, v])
        graph[u][v] = d
        graph[v][u] = d

    order = rng.permutation(n)
    for u, v in zip(order[:-1], order[1:]):
        join(int(u), int(v))
    for u in range(n):
        for v in np.argsort(dist[u])[1:k + 1]:
            join(u, int(v))

    goal = n - 1
    h = {i: float(dist[i, goal]) for i in range(n)}
    return GraphProblem(graph=graph, initial=0, goals=frozenset([goal]), h=h)
