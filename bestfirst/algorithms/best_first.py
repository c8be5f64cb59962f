# bestfirst/algorithms/best_first.py
# Best-first graph search: a duplicate-aware frontier plus a closed set, so each
# state is expanded at most once and the frontier holds the cheapest known path to it.
from __future__ import annotations
import logging
from typing import Callable, Optional

from ..core.errors import GoalNotFound
from ..core.frontiers import ClosedSet, Frontier
from ..core.metrics import SearchStats
from ..core.node import Node
from ..core.problem import Problem, TiePolicy, path_cost
from ..core.utils import path_states

logger = logging.getLogger(__name__)

ADDED = "added"
REPLACED = "replaced"
DISCARDED = "discarded"


def handle_child(frontier: Frontier, child: Node, stats: Optional[SearchStats] = None) -> str:
    """Add CHILD to the frontier, replace a costlier duplicate with it, or drop it."""
    handle = frontier.find(child.state)
    if handle is None:
        frontier.push(child)
        if stats is not None:
            stats.pushed += 1
        return ADDED

    duplicate = frontier.get(handle)
    if child.path_cost < duplicate.path_cost:
        logger.debug("%r: replace %g with %g", child.state, duplicate.path_cost, child.path_cost)
        frontier.decrease_key(handle, child)
        if stats is not None:
            stats.decreased += 1
        return REPLACED

    logger.debug("%r: keep %g and throw away %g", child.state, duplicate.path_cost, child.path_cost)
    if stats is not None:
        stats.discarded += 1
    return DISCARDED


def graph_search(
    problem: Problem,
    key: Callable[[Node], float] = path_cost,
    tie: Optional[TiePolicy] = None,
    stats: Optional[SearchStats] = None,
) -> Node:
    """Return the first goal Node popped from a duplicate-free frontier ordered by ``key``.

    Raises GoalNotFound once the frontier empties.
    """
    frontier = Frontier(key=key, tie=tie)
    closed = ClosedSet()
    frontier.push(problem.root())
    if stats is not None:
        stats.pushed += 1

    while not frontier.empty():
        node = frontier.pop()
        if stats is not None:
            stats.popped += 1

        if problem.goal_test(node.state):
            logger.debug("frontier: %d, closed: %d", frontier.size(), len(closed))
            return node

        closed.insert(node.state)
        if stats is not None:
            stats.expanded += 1
        for action in problem.actions(node.state):
            successor = problem.result(node.state, action)
            if not closed.find(successor):
                handle_child(frontier, problem.child(node, action, successor), stats)

    raise GoalNotFound(f"frontier exhausted after expanding {len(closed)} states")


def best_first_graph_search(
    problem: Problem,
    path: Optional[Callable[[object], None]] = None,
    key: Callable[[Node], float] = path_cost,
    tie: Optional[TiePolicy] = None,
    stats: Optional[SearchStats] = None,
) -> float:
    """Graph search that emits the solution states to ``path`` and returns the path cost.

    States are emitted goal first, ending with the initial state; reverse them for
    travel order. ``path`` is any append-like callable, e.g. ``states.append``.
    """
    goal = graph_search(problem, key=key, tie=tie, stats=stats)
    if path is not None:
        for state in path_states(goal):
            path(state)
    return goal.path_cost
