# bestfirst/core/metrics.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional
import logging
import time, tracemalloc

from .errors import GoalNotFound
from .node import Node
from .utils import reconstruct_path

logger = logging.getLogger(__name__)


@dataclass
class SearchStats:
    """Optional counters the engines bump while they run."""
    popped: int = 0
    pushed: int = 0
    decreased: int = 0
    discarded: int = 0
    expanded: int = 0
    live_records: int = 0
    peak_records: int = 0

    def records_created(self, n: int) -> None:
        self.live_records += n
        if self.live_records > self.peak_records:
            self.peak_records = self.live_records

    def records_released(self, n: int) -> None:
        self.live_records -= n


@dataclass
class SearchResult:
    """Tagged outcome of one search run: either success with a path, or the error name."""
    algo: str
    success: bool
    actions: List[Any]
    cost: float
    nodes_expanded: int
    time_s: float
    peak_kb: int
    error: Optional[str] = None
    states: List[Any] = field(default_factory=list)


class MeasuredRun:
    """
    Context manager for timing and (approximate) peak memory.
    Safe to query .elapsed and .peak_kb *inside* the with-block.
    """
    def __init__(self, trace_memory: bool = True) -> None:
        self.t0: Optional[float] = None
        self.t1: Optional[float] = None
        self._peak_kb: int = 0
        self._tracing: bool = False
        self._trace_memory = trace_memory

    def __enter__(self) -> "MeasuredRun":
        # don't clobber a tracemalloc session someone else started
        if self._trace_memory and not tracemalloc.is_tracing():
            self._tracing = True
            tracemalloc.start()
        self.t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.t1 = time.perf_counter()
        if self._tracing:
            current, peak = tracemalloc.get_traced_memory()
            tracemalloc.stop()
            self._tracing = False
            self._peak_kb = max(self._peak_kb, peak // 1024)
        return False  # don't suppress exceptions

    @property
    def elapsed(self) -> float:
        """Seconds elapsed. Works before and after __exit__."""
        if self.t0 is None:
            return 0.0
        if self.t1 is None:
            return time.perf_counter() - self.t0
        return self.t1 - self.t0

    @property
    def peak_kb(self) -> int:
        """Approx peak KB. Works before and after __exit__."""
        if self._tracing:
            current, peak = tracemalloc.get_traced_memory()
            return max(self._peak_kb, peak // 1024)
        return self._peak_kb


def measure(name: str, search: Callable[..., Node], problem, trace_memory: bool = True, **kwargs) -> SearchResult:
    """Run ``search(problem, stats=..., **kwargs)`` and fold the outcome into a SearchResult.

    ``search`` must return the goal Node. Only GoalNotFound becomes a failed result;
    anything a problem collaborator raises propagates.
    """
    stats = SearchStats()
    goal: Optional[Node] = None
    error: Optional[str] = None
    with MeasuredRun(trace_memory=trace_memory) as meter:
        try:
            goal = search(problem, stats=stats, **kwargs)
        except GoalNotFound as e:
            error = type(e).__name__
            logger.info("%s: %s after %d expansions", name, e, stats.expanded)

    if goal is None:
        return SearchResult(name, False, [], float("inf"), stats.expanded, meter.elapsed, meter.peak_kb, error)
    actions, cost = reconstruct_path(goal)
    states = [n.state for n in goal.path()]
    logger.info("%s: cost=%g expanded=%d", name, cost, stats.expanded)
    return SearchResult(name, True, actions, cost, stats.expanded, meter.elapsed, meter.peak_kb, states=states)
