"""
Heuristic and distance functions.

A heuristic ``h(a, b)`` estimates the cost of the cheapest path from node
``a`` to node ``b``. NBA* returns optimal paths only when it never
overestimates (admissible) and obeys the triangle inequality along edges
(consistent).
"""

import math
from typing import Callable, Dict

import h3

from nbapath.errors import ConfigError
from nbapath.graph.base import Link, Node

Heuristic = Callable[[Node, Node], float]
Distance = Callable[[Node, Node, Link], float]


def zero(a: Node, b: Node) -> float:
    return 0.0


def _coords(node: Node, keys):
    try:
        return tuple(node.data[k] for k in keys)
    except (TypeError, KeyError):
        raise ConfigError(
            f"Node {node.id!r} has no {'/'.join(keys)} coordinates; "
            "load node data (graph.nodes_table) or use the zero heuristic"
        ) from None


def _xy(node: Node):
    return _coords(node, ("x", "y"))


def l2(a: Node, b: Node) -> float:
    """Euclidean distance between ``data["x"], data["y"]`` positions."""
    ax, ay = _xy(a)
    bx, by = _xy(b)
    return math.hypot(ax - bx, ay - by)


def l1(a: Node, b: Node) -> float:
    """Manhattan distance; admissible on 4-connected grids only."""
    ax, ay = _xy(a)
    bx, by = _xy(b)
    return abs(ax - bx) + abs(ay - by)


def great_circle(a: Node, b: Node) -> float:
    """Great-circle distance in metres between ``data["lat"], data["lng"]``."""
    return h3.great_circle_distance(_coords(a, ("lat", "lng")), _coords(b, ("lat", "lng")), unit="m")


def link_weight(a: Node, b: Node, link: Link) -> float:
    return link.weight


def unit_distance(a: Node, b: Node, link: Link) -> float:
    return 1.0


HEURISTICS: Dict[str, Heuristic] = {
    "zero": zero,
    "l1": l1,
    "l2": l2,
    "great_circle": great_circle,
}

DISTANCES: Dict[str, Distance] = {
    "weight": link_weight,
    "unit": unit_distance,
}


def get_heuristic(name: str) -> Heuristic:
    try:
        return HEURISTICS[name]
    except KeyError:
        raise ConfigError(f"Unknown heuristic '{name}' (choose from {', '.join(HEURISTICS)})") from None


def get_distance(name: str) -> Distance:
    try:
        return DISTANCES[name]
    except KeyError:
        raise ConfigError(f"Unknown distance '{name}' (choose from {', '.join(DISTANCES)})") from None
