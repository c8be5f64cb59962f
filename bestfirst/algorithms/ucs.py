# Uniform Cost Search (Dijkstra) by reusing the generic best-first graph search.
# bestfirst/algorithms/ucs.py
from __future__ import annotations
from typing import Optional

from .best_first import graph_search
from ..core.metrics import SearchStats
from ..core.problem import TiePolicy, path_cost


def uniform_cost_search(problem, tie: Optional[TiePolicy] = None, stats: Optional[SearchStats] = None):
    return graph_search(problem, key=path_cost, tie=tie, stats=stats)
