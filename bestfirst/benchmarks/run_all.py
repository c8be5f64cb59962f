# bestfirst/benchmarks/run_all.py
# Runs every engine on one sample problem and prints (optionally saves/plots) the results.
#   python -m bestfirst.benchmarks.run_all --problem grid --out results.json --plot results.png
from __future__ import annotations

import argparse
import json
import logging
import time
from dataclasses import asdict
from pathlib import Path
from typing import Callable, List, Tuple

import matplotlib

from ..algorithms.astar import a_star_search, a_star_tree_search, rbfs_search
from ..algorithms.greedy import greedy_best_first_search
from ..algorithms.ucs import uniform_cost_search
from ..config import PROBLEMS, Settings, configure_logging, load_settings
from ..core.metrics import SearchResult, measure
from ..core.problem import Problem
from ..problems.grid import make_grid_problem
from ..problems.random_graph import random_graph_problem
from ..problems.romania import romania_problem

logger = logging.getLogger(__name__)

WA_W = 1.5  # weighted A* weight


def _fmt_time(x):
    try:
        return f"{float(x):.4f}"
    except (TypeError, ValueError):
        return "n/a"


def load_problem(name: str, settings: Settings) -> Problem:
    if name == "romania":
        return romania_problem()
    if name == "grid":
        return make_grid_problem()
    if name == "random":
        return random_graph_problem(n=settings.random_nodes, seed=settings.random_seed)
    raise ValueError(f"unknown problem {name!r}; choose from {PROBLEMS}")


def load_algos() -> List[Tuple[str, Callable]]:
    """Each entry takes (problem, stats=...) and returns the goal Node."""
    return [
        ("UCS", uniform_cost_search),
        ("Greedy", greedy_best_first_search),
        ("A*", a_star_search),
        (f"WeightedA*(w={WA_W})", lambda p, stats=None: a_star_search(p, stats=stats, weight=WA_W)),
        ("A* (tree)", a_star_tree_search),
        ("RBFS", rbfs_search),
    ]


def run_all(problem: Problem, trace_memory: bool = True) -> List[SearchResult]:
    rows = []
    for name, fn in load_algos():
        print(f"→ Running {name} ...")
        r = measure(name, fn, problem, trace_memory=trace_memory)
        print(
            f"  {r.algo}: "
            f"{'OK' if r.success else 'FAIL'} "
            f"cost={r.cost} "
            f"expanded={r.nodes_expanded}, "
            f"time={_fmt_time(r.time_s)}s"
        )
        rows.append(r)
    return rows


def main(argv=None):
    settings = load_settings()
    ap = argparse.ArgumentParser(description="Compare best-first search engines on a sample problem.")
    ap.add_argument("--problem", choices=PROBLEMS, default=settings.bench_problem)
    ap.add_argument("--out", type=Path, default=None, help="write results as JSON here")
    ap.add_argument("--plot", type=Path, default=None, help="write a PNG bar chart here")
    ap.add_argument("--log-level", default=settings.log_level)
    args = ap.parse_args(argv)

    configure_logging(args.log_level)
    problem = load_problem(args.problem, settings)
    rows = run_all(problem)

    out = {"problem": args.problem, "results": [asdict(r) for r in rows], "ts": time.time()}
    if args.out is not None:
        args.out.write_text(json.dumps(out, indent=2, default=str))
        print(f"Wrote {args.out}")
    if args.plot is not None:
        matplotlib.use("Agg")  # headless: the chart only goes to a file
        from ..plots.plotting import save_comparison
        save_comparison(rows, args.plot, title=f"Search Comparison: {args.problem}")
        print(f"Wrote {args.plot}")


if __name__ == "__main__":
    main()
