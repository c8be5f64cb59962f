# bestfirst/algorithms/tree_search.py
# Best-first tree search: no closed set and no duplicate detection. Every child goes
# straight onto the queue, so a state can be expanded many times (forever on a cyclic
# state space). Use it when the state graph is a tree or duplicates are rare.
from __future__ import annotations
import logging
from typing import Callable, Optional

from ..core.errors import GoalNotFound
from ..core.frontiers import PriorityQueue
from ..core.metrics import SearchStats
from ..core.node import Node
from ..core.problem import Problem, TiePolicy, path_cost

logger = logging.getLogger(__name__)


def best_first_tree_search(
    problem: Problem,
    key: Callable[[Node], float] = path_cost,
    tie: Optional[TiePolicy] = None,
    stats: Optional[SearchStats] = None,
) -> Node:
    """Return the first goal Node popped from a queue ordered by ``key``.

    Memory grows with every child generated, not with the live frontier: popped nodes
    are released, but the queue keeps a small bookkeeping slot per push. Raises
    GoalNotFound when the queue empties.
    """
    frontier = PriorityQueue(key=key, tie=tie)
    frontier.push(problem.root())
    if stats is not None:
        stats.pushed += 1

    while frontier:
        node = frontier.pop()
        if stats is not None:
            stats.popped += 1
        if problem.goal_test(node.state):
            logger.debug("frontier: %d", len(frontier))
            return node

        if stats is not None:
            stats.expanded += 1
        for child in node.expand(problem):
            frontier.push(child)
            if stats is not None:
                stats.pushed += 1

    raise GoalNotFound("frontier exhausted")
