# bestfirst/core/frontiers.py
from __future__ import annotations
import logging
from typing import Any, Callable, Dict, Hashable, Iterator, List, Optional, Set

from .node import Node
from .problem import TiePolicy, path_cost

logger = logging.getLogger(__name__)

INF = float("inf")


class PriorityQueue:
    """Min-heap by priority with stable integer handles.

    Every pushed item gets a slot in an arena; the handle returned by ``push`` is the
    slot index and stays valid until the item is popped. ``update`` moves an item up or
    down after its priority changes (decrease-key and increase-key), O(log n).

    Slots are never reused, so a stale handle cannot alias a newer item. The arena
    therefore grows with the total number of pushes, not with ``len(self)``; popping
    drops the item reference but keeps the slot.

    Equal priorities are ordered by ``tie(a, b)`` when given (called once per
    comparison, True puts ``a`` first), otherwise by insertion order.
    """

    def __init__(self, key: Optional[Callable[[Any], float]] = None, tie: Optional[TiePolicy] = None):
        self.key = key
        self.tie = tie
        self.h: List[int] = []              # heap of handles
        self._items: List[Any] = []
        self._prio: List[float] = []
        self._seq: List[int] = []
        self._pos: List[Optional[int]] = []  # handle -> index in self.h, None once popped
        self.counter = 0  # tie-breaker for stability

    def __len__(self) -> int:
        return len(self.h)

    def __contains__(self, handle: int) -> bool:
        return 0 <= handle < len(self._pos) and self._pos[handle] is not None

    def push(self, x, priority: Optional[float] = None) -> int:
        if priority is None:
            priority = self.key(x) if self.key is not None else x
        handle = len(self._items)
        self.counter += 1
        self._items.append(x)
        self._prio.append(float(priority))
        self._seq.append(self.counter)
        self._pos.append(len(self.h))
        self.h.append(handle)
        self._sift_up(len(self.h) - 1)
        return handle

    def pop(self):
        if not self.h:
            raise IndexError("pop from an empty priority queue")
        handle = self.h[0]
        last = self.h.pop()
        if self.h:
            self.h[0] = last
            self._pos[last] = 0
            self._sift_down(0)
        item = self._items[handle]
        self._items[handle] = None  # release the node (and its ancestor chain)
        self._pos[handle] = None
        return item

    def top(self):
        return self._items[self.top_handle()]

    def top_handle(self) -> int:
        if not self.h:
            raise IndexError("top of an empty priority queue")
        return self.h[0]

    def top_priority(self) -> float:
        return self._prio[self.top_handle()]

    def second_priority(self) -> float:
        """Priority of the runner-up, or +inf if fewer than two items are queued."""
        n = len(self.h)
        if n < 2:
            return INF
        if n == 2 or self._before(self.h[1], self.h[2]):
            return self._prio[self.h[1]]
        return self._prio[self.h[2]]

    def item(self, handle: int):
        self._check(handle)
        return self._items[handle]

    def priority(self, handle: int) -> float:
        self._check(handle)
        return self._prio[handle]

    def update(self, handle: int, x=None, priority: Optional[float] = None) -> None:
        """Replace the item and/or priority stored at ``handle`` and restore heap order."""
        self._check(handle)
        if x is not None:
            self._items[handle] = x
        if priority is None:
            priority = self.key(self._items[handle]) if self.key is not None else self._items[handle]
        old = self._prio[handle]
        self._prio[handle] = float(priority)
        self.counter += 1
        self._seq[handle] = self.counter
        i = self._pos[handle]
        if priority < old:
            self._sift_up(i)
        elif priority > old:
            self._sift_down(i)
        else:
            self._sift_down(self._sift_up(i))

    def ordered(self) -> Iterator[Any]:
        """Items in priority order without disturbing the heap (O(n log n))."""
        clone = PriorityQueue(tie=self.tie)
        for handle in sorted(self.h, key=lambda hd: self._seq[hd]):
            clone.push(self._items[handle], self._prio[handle])
        while clone:
            yield clone.pop()

    # --- heap internals ------------------------------------------------------

    def _check(self, handle: int) -> None:
        if handle not in self:
            raise KeyError(f"stale or unknown handle {handle!r}")

    def _before(self, a: int, b: int) -> bool:
        pa, pb = self._prio[a], self._prio[b]
        if pa != pb:
            return pa < pb
        if self.tie is not None:
            return bool(self.tie(self._items[a], self._items[b]))
        return self._seq[a] < self._seq[b]

    def _swap(self, i: int, j: int) -> None:
        h = self.h
        h[i], h[j] = h[j], h[i]
        self._pos[h[i]] = i
        self._pos[h[j]] = j

    def _sift_up(self, i: int) -> int:
        while i > 0:
            parent = (i - 1) >> 1
            if not self._before(self.h[i], self.h[parent]):
                break
            self._swap(i, parent)
            i = parent
        return i

    def _sift_down(self, i: int) -> int:
        n = len(self.h)
        while True:
            best = i
            for c in (2 * i + 1, 2 * i + 2):
                if c < n and self._before(self.h[c], self.h[best]):
                    best = c
            if best == i:
                return i
            self._swap(i, best)
            i = best


class Frontier:
    """Graph-search open set: a PriorityQueue of Nodes plus a state -> handle index.

    At most one entry per state. Use ``handle_child`` from the graph search when a
    duplicate might already be queued; ``push`` assumes the state is new.
    """

    def __init__(self, key: Callable[[Node], float] = path_cost, tie: Optional[TiePolicy] = None):
        self.q = PriorityQueue(key=key, tie=tie)
        self.index: Dict[Hashable, int] = {}

    def push(self, node: Node) -> int:
        handle = self.q.push(node)
        self.index[node.state] = handle
        logger.debug("frontier <= %r", node.state)
        return handle

    def pop(self) -> Node:
        node = self.q.pop()
        del self.index[node.state]
        logger.debug("%r <= frontier", node.state)
        return node

    def top(self) -> Node:
        return self.q.top()

    def find(self, state) -> Optional[int]:
        return self.index.get(state)

    def get(self, handle: int) -> Node:
        return self.q.item(handle)

    def decrease_key(self, handle: int, node: Node) -> None:
        old = self.q.item(handle)
        if old.state != node.state:
            raise ValueError(f"cannot replace {old.state!r} with a node for {node.state!r}")
        self.q.update(handle, node)

    def size(self) -> int:
        return len(self.q)

    def empty(self) -> bool:
        return not self.q

    def __len__(self) -> int:
        return len(self.q)

    def __contains__(self, state) -> bool:
        return state in self.index


class ClosedSet:
    """States that have been fully expanded. Grows monotonically for one search."""

    def __init__(self):
        self.states: Set[Hashable] = set()

    def insert(self, state) -> None:
        self.states.add(state)

    def find(self, state) -> bool:
        return state in self.states

    def __contains__(self, state) -> bool:
        return state in self.states

    def __len__(self) -> int:
        return len(self.states)
