# bestfirst/algorithms/greedy.py
from __future__ import annotations
from typing import Optional

from .best_first import graph_search
from ..core.metrics import SearchStats
from ..core.problem import TiePolicy, greedy_cost


def greedy_best_first_search(problem, tie: Optional[TiePolicy] = None, stats: Optional[SearchStats] = None):
    # greedy: f = 0 + h
    return graph_search(problem, key=greedy_cost(problem), tie=tie, stats=stats)
