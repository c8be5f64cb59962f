# bestfirst/core/errors.py
from __future__ import annotations


class SearchError(Exception):
    """Base class for failures raised by the search engines."""


class GoalNotFound(SearchError):
    """The reachable search space was exhausted without satisfying the goal test."""

    def __init__(self, message: str = "goal not found"):
        super().__init__(message)
