# bestfirst/core/policies.py
# Tie policies: pure, stateless split(a, b) functions consulted when two candidates
# have equal priority. True puts a first, False puts b first.
from __future__ import annotations

from .node import Node


def prefer_deeper(a: Node, b: Node) -> bool:
    """Equal f: the node with more cost already paid (smaller h) is closer to a goal."""
    return a.path_cost > b.path_cost


def prefer_shallower(a: Node, b: Node) -> bool:
    return a.path_cost < b.path_cost
