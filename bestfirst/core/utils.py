# bestfirst/core/utils.py
# Helpers for reconstructing the solution path from a goal node in a search tree.
from __future__ import annotations
from typing import Iterator, List, Tuple
from .node import Node


def reconstruct_path(node: Node) -> Tuple[List, float]:
    actions = []
    cost = float(node.path_cost)
    cur = node
    while cur.parent is not None:
        actions.append(cur.action)
        cur = cur.parent
    actions.reverse()
    return actions, cost


def path_states(node: Node) -> Iterator:
    """States from ``node`` back to the root (goal -> start order)."""
    cur = node
    while cur is not None:
        yield cur.state
        cur = cur.parent
