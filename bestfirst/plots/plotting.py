# bestfirst/plots/plotting.py
# Bar plots comparing search engine results: nodes expanded, path cost, time taken
# and peak memory usage, as a 2x2 grid.
from __future__ import annotations
from pathlib import Path
from typing import Sequence

import matplotlib.pyplot as plt

from ..core.metrics import SearchResult


def bar_compare(results: Sequence[SearchResult], title="Search Comparison"):
    rows = [r for r in results if r.success]
    names = [r.algo for r in rows]
    nodes = [r.nodes_expanded for r in rows]
    costs = [r.cost for r in rows]
    times = [r.time_s for r in rows]
    mems  = [r.peak_kb or 0 for r in rows]

    fig, axs = plt.subplots(2, 2, figsize=(11,8))
    axs = axs.ravel()
    axs[0].bar(names, nodes); axs[0].set_title("Nodes Expanded"); axs[0].tick_params(axis='x', rotation=45)
    axs[1].bar(names, costs); axs[1].set_title("Path Cost"); axs[1].tick_params(axis='x', rotation=45)
    axs[2].bar(names, times); axs[2].set_title("Time (s)"); axs[2].tick_params(axis='x', rotation=45)
    axs[3].bar(names, mems); axs[3].set_title("Peak Memory (KB)"); axs[3].tick_params(axis='x', rotation=45)
    fig.suptitle(title)
    fig.tight_layout(rect=[0,0,1,0.95])
    return fig


def save_comparison(results: Sequence[SearchResult], path, title="Search Comparison") -> Path:
    out = Path(path)
    fig = bar_compare(results, title=title)
    fig.savefig(out, format="png", dpi=160)
    plt.close(fig)
    return out
