# bestfirst/algorithms/astar.py
from __future__ import annotations
from typing import Optional

from .best_first import graph_search
from .rbfs import recursive_best_first_search
from .tree_search import best_first_tree_search
from ..core.metrics import SearchStats
from ..core.policies import prefer_deeper
from ..core.problem import TiePolicy, a_star_cost


def a_star_search(problem, tie: Optional[TiePolicy] = prefer_deeper, stats: Optional[SearchStats] = None,
                  weight: float = 1.0):
    """A* graph search; weight > 1 gives weighted A* (faster, no longer optimal)."""
    return graph_search(problem, key=a_star_cost(problem, weight), tie=tie, stats=stats)


def a_star_tree_search(problem, tie: Optional[TiePolicy] = prefer_deeper, stats: Optional[SearchStats] = None):
    return best_first_tree_search(problem, key=a_star_cost(problem), tie=tie, stats=stats)


def rbfs_search(problem, tie: Optional[TiePolicy] = prefer_deeper, stats: Optional[SearchStats] = None):
    return recursive_best_first_search(problem, cost=a_star_cost(problem), tie=tie, stats=stats)
