"""Low-level array API.

Vertices are the integers ``0..n-1`` and edges are given as parallel int64
arrays, which suits callers that already hold their graph in numpy form.
"""
from __future__ import annotations

from typing import Iterable

import numpy as np

from ._version import __version__
from .engine import compute_max_flow
from .network import Network

__all__ = ["max_flow_edges", "__version__"]


def _as_int64_array(values: Iterable[int], name: str) -> np.ndarray:
    array = np.asarray(values, dtype=np.int64)
    if array.ndim != 1:
        raise ValueError(f"{name} must be a 1D array")
    return array


def max_flow_edges(
    n: int,
    tail: Iterable[int],
    head: Iterable[int],
    capacity: Iterable[int],
    source: int,
    sink: int,
) -> np.ndarray:
    """Compute a maximum flow and return the flow on each edge, in input order."""
    if n < 0:
        raise ValueError("n must be non-negative")

    tail_arr = _as_int64_array(tail, "tail")
    head_arr = _as_int64_array(head, "head")
    capacity_arr = _as_int64_array(capacity, "capacity")

    edge_count = len(tail_arr)
    if len(head_arr) != edge_count:
        raise ValueError("tail and head arrays must match length")
    if len(capacity_arr) != edge_count:
        raise ValueError("capacity array must match tail/head length")

    if np.any(tail_arr < 0) or np.any(tail_arr >= n):
        raise ValueError("tail index out of range")
    if np.any(head_arr < 0) or np.any(head_arr >= n):
        raise ValueError("head index out of range")
    if not (0 <= source < n) or not (0 <= sink < n):
        raise ValueError("source or sink index out of range")
    if np.any(capacity_arr < 0):
        raise ValueError("capacity must be non-negative")

    edges = [
        (int(tail_arr[idx]), int(head_arr[idx]), int(capacity_arr[idx]))
        for idx in range(edge_count)
    ]
    network = Network(range(n), edges, int(source), int(sink))
    flow, _cut = compute_max_flow(network)

    flows = np.zeros(edge_count, dtype=np.int64)
    for idx, (u, v, _cap) in enumerate(edges):
        flows[idx] = int(flow.value(u, v))
    return flows
