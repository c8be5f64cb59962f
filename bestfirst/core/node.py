# bestfirst/core/node.py
# Search-tree record: a state, the action that produced it, the accumulated path cost
# and a shared reference to the parent node. Many children may share one ancestor chain.
from __future__ import annotations
from typing import Any, Iterator, List, Optional


class Node:
    __slots__ = ("_state", "_parent", "_action", "_path_cost", "_depth")

    def __init__(self, state, parent: Optional["Node"] = None, action=None, step_cost: float = 0.0):
        self._state = state
        self._parent = parent
        self._action = action
        if parent is None:
            self._path_cost = 0.0
            self._depth = 0
        else:
            self._path_cost = parent.path_cost + float(step_cost)
            self._depth = parent.depth + 1

    @property
    def state(self):
        return self._state

    @property
    def parent(self) -> Optional["Node"]:
        return self._parent

    @property
    def action(self):
        return self._action

    @property
    def path_cost(self) -> float:
        return self._path_cost

    @property
    def depth(self) -> int:
        return self._depth

    def __setattr__(self, name: str, value: Any) -> None:
        if hasattr(self, name):
            raise AttributeError(f"Node is read-only once created (tried to set {name!r})")
        object.__setattr__(self, name, value)

    def __repr__(self) -> str:
        return f"<Node {self._state!r} g={self._path_cost:g}>"

    def expand(self, problem) -> Iterator["Node"]:
        """Generate child Nodes by applying ACTIONS(s), using the problem's child factory."""
        for a in problem.actions(self._state):
            yield problem.child(self, a)

    def path(self) -> List["Node"]:
        """Nodes from the root down to this one."""
        nodes = []
        cur: Optional[Node] = self
        while cur is not None:
            nodes.append(cur)
            cur = cur.parent
        nodes.reverse()
        return nodes

    def solution(self) -> list:
        return [n.action for n in self.path()[1:]]
