# bestfirst/config.py
# Engine tunables are read one variable at a time, so a bad benchmark setting never
# reaches a search. load_settings() is the benchmark driver's full view.
from __future__ import annotations

import logging
import os
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Mapping, Optional

PROBLEMS = ("romania", "grid", "random")


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    rbfs_recursion_limit: int = 10_000
    bench_problem: str = "romania"
    random_nodes: int = 60
    random_seed: int = 7


def rbfs_recursion_limit(env: Optional[Mapping[str, str]] = None) -> int:
    """BESTFIRST_RBFS_RECURSION_LIMIT, the only variable RBFS reads."""
    env = os.environ if env is None else env
    limit = int(env.get("BESTFIRST_RBFS_RECURSION_LIMIT", "10000"))
    if limit <= 0:
        raise ValueError(f"BESTFIRST_RBFS_RECURSION_LIMIT must be positive, got {limit}")
    return limit


def log_level(env: Optional[Mapping[str, str]] = None) -> str:
    env = os.environ if env is None else env
    return env.get("BESTFIRST_LOG_LEVEL", "WARNING").upper()


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Read every BESTFIRST_* variable; validates the benchmark ones too."""
    env = os.environ if env is None else env
    problem = env.get("BESTFIRST_BENCH_PROBLEM", "romania").lower()
    if problem not in PROBLEMS:
        raise ValueError(f"BESTFIRST_BENCH_PROBLEM must be one of {PROBLEMS}, got {problem!r}")
    return Settings(
        log_level=log_level(env),
        rbfs_recursion_limit=rbfs_recursion_limit(env),
        bench_problem=problem,
        random_nodes=int(env.get("BESTFIRST_RANDOM_NODES", "60")),
        random_seed=int(env.get("BESTFIRST_RANDOM_SEED", "7")),
    )


def configure_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(
        level=getattr(logging, (level or log_level()).upper(), logging.WARNING),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )


@contextmanager
def recursion_limit(limit: int) -> Iterator[None]:
    """Raise the interpreter recursion limit to at least ``limit`` for the block."""
    old = sys.getrecursionlimit()
    if limit > old:
        sys.setrecursionlimit(limit)
    try:
        yield
    finally:
        sys.setrecursionlimit(old)
