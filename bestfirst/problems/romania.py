# bestfirst/problems/romania.py
# The AIMA Romania road map (Fig. 3.1) as a GraphProblem, with straight-line
# distances to Bucharest (Fig. 3.16) as the heuristic.
from __future__ import annotations
from typing import Dict, List, Tuple

from .graph import GraphProblem, undirected

ROADS: List[Tuple[str, str, int]] = [
    ("Arad", "Zerind", 75), ("Arad", "Sibiu", 140), ("Arad", "Timisoara", 118),
    ("Zerind", "Oradea", 71), ("Oradea", "Sibiu", 151),
    ("Sibiu", "Fagaras", 99), ("Sibiu", "Rimnicu Vilcea", 80),
    ("Timisoara", "Lugoj", 111), ("Lugoj", "Mehadia", 70), ("Mehadia", "Drobeta", 75),
    ("Drobeta", "Craiova", 120), ("Craiova", "Rimnicu Vilcea", 146), ("Craiova", "Pitesti", 138),
    ("Rimnicu Vilcea", "Pitesti", 97),
    ("Fagaras", "Bucharest", 211), ("Pitesti", "Bucharest", 101),
    ("Bucharest", "Giurgiu", 90), ("Bucharest", "Urziceni", 85),
    ("Urziceni", "Vaslui", 142), ("Urziceni", "Hirsova", 98), ("Hirsova", "Eforie", 86),
    ("Vaslui", "Iasi", 92), ("Iasi", "Neamt", 87),
]

SLD_TO_BUCHAREST: Dict[str, int] = {
    "Arad": 366, "Zerind": 374, "Oradea": 380, "Sibiu": 253, "Timisoara": 329,
    "Lugoj": 244, "Mehadia": 241, "Drobeta": 242, "Craiova": 160, "Rimnicu Vilcea": 193,
    "Fagaras": 176, "Pitesti": 100, "Bucharest": 0, "Giurgiu": 77, "Urziceni": 80,
    "Hirsova": 151, "Eforie": 161, "Vaslui": 199, "Iasi": 226, "Neamt": 234,
}

ROMANIA = undirected(ROADS)


def romania_problem(start: str = "Arad", goal: str = "Bucharest") -> GraphProblem:
    """Route from START to GOAL. Only Bucharest has a heuristic; other goals get h = 0."""
    for city in (start, goal):
        if city not in ROMANIA:
            raise KeyError(f"unknown city: {city!r}")
    h = SLD_TO_BUCHAREST if goal == "Bucharest" else None
    return GraphProblem(graph=ROMANIA, initial=start, goals=frozenset({goal}), h=h)
