# bestfirst/algorithms/rbfs.py
# Recursive Best-First Search (Korf, 1993). Memory stays linear in the search depth:
# each call keeps only its own children, ordered by backed-up f-estimate, and gives
# up on its subtree as soon as the best child costs more than the best alternative
# elsewhere (the bound). The backed-up value lets the caller come back later.
from __future__ import annotations
import logging
from typing import Optional, Tuple

from ..config import rbfs_recursion_limit, recursion_limit
from ..core.errors import GoalNotFound
from ..core.frontiers import INF, PriorityQueue
from ..core.metrics import SearchStats
from ..core.node import Node
from ..core.problem import CostFunction, Problem, TiePolicy, a_star_cost

logger = logging.getLogger(__name__)

# (goal, value): goal is None on backtrack and value is the backed-up f-estimate;
# value is unused when goal is set.
RBFSResult = Tuple[Optional[Node], float]


def rbfs(
    problem: Problem,
    cost: CostFunction,
    node: Node,
    f_node: float,
    bound: float,
    tie: Optional[TiePolicy] = None,
    stats: Optional[SearchStats] = None,
) -> RBFSResult:
    """One RBFS call on ``node``, whose estimate in the caller is f_node, under ``bound``."""
    logger.debug(">>> rbfs(%r, %g, %g)", node, f_node, bound)
    f_n = cost(node)
    if f_n > bound:
        return None, f_n

    if problem.goal_test(node.state):
        return node, 0.0

    actions = list(problem.actions(node.state))
    if not actions:
        return None, INF
    if stats is not None:
        stats.expanded += 1

    children = PriorityQueue(tie=tie)
    for action in actions:
        child = problem.child(node, action)
        f_child = cost(child)
        # pathmax: a child inherits the parent's backed-up value if f dropped below it
        estimate = max(f_node, f_child) if f_n < f_node else f_child
        children.push(child, estimate)
    if stats is not None:
        stats.records_created(len(children))

    try:
        # the < INF test keeps us out of subtrees already proven dead
        while children.top_priority() <= bound and children.top_priority() < INF:
            best = children.top_handle()
            second = children.second_priority()
            goal, value = rbfs(problem, cost, children.item(best), children.priority(best),
                               min(bound, second), tie, stats)
            if goal is not None:
                return goal, value
            children.update(best, priority=value)
        return None, children.top_priority()
    finally:
        if stats is not None:
            stats.records_released(len(children))


def recursive_best_first_search(
    problem: Problem,
    cost: Optional[CostFunction] = None,
    tie: Optional[TiePolicy] = None,
    stats: Optional[SearchStats] = None,
    max_recursion: Optional[int] = None,
) -> Node:
    """RBFS from the initial state. Returns the goal Node or raises GoalNotFound.

    ``cost`` defaults to A*'s f = g + h using ``problem.heuristic``. Recursion depth
    equals search depth; ``max_recursion`` (default from BESTFIRST_RBFS_RECURSION_LIMIT)
    raises the interpreter recursion limit for the duration of the search.
    """
    f = cost or a_star_cost(problem)
    limit = max_recursion if max_recursion is not None else rbfs_recursion_limit()
    root = problem.root()

    with recursion_limit(limit):
        goal, value = rbfs(problem, f, root, f(root), INF, tie, stats)

    if goal is None:
        logger.info("RBFS exhausted the search space (backed-up f=%g)", value)
        raise GoalNotFound("recursion bottomed out on every branch")
    return goal
