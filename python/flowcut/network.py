"""Immutable capacitated flow networks.

A :class:`Network` owns a fixed vertex set, a set of directed capacitated
edges and a distinguished source and sink. The structural invariants every
other component relies on are checked once, at construction:

* no two edges join the same pair of vertices in opposite directions
  (this also rules out self-loops),
* no edge enters the source,
* no edge leaves the sink,
* every declared edge has a finite, non-negative capacity.
"""
from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from decimal import Decimal
from fractions import Fraction
from typing import Any

import math
import numbers

import networkx as nx

from .errors import InvalidNetwork, NetworkMismatch
from .typing import Capacity, EdgeSpec, Node, Number


def as_exact(value: Any) -> Number:
    """Convert ``value`` to an exact ``int`` or ``Fraction``.

    Raises ``TypeError`` for non-numeric input and ``ValueError`` for
    non-finite input.
    """
    if isinstance(value, bool):
        raise TypeError("booleans are not numbers here")
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, Fraction):
        exact = value
    elif isinstance(value, (numbers.Real, Decimal)):
        if isinstance(value, Decimal):
            finite = value.is_finite()
        else:
            finite = math.isfinite(value)
        if not finite:
            raise ValueError(f"{value!r} is not finite")
        exact = Fraction(value)
    else:
        raise TypeError(f"{value!r} is not a real number")
    if exact.denominator == 1:
        return exact.numerator
    return exact


def _iter_edge_spec(edges: EdgeSpec) -> Iterator[tuple[Node, Node, Any]]:
    if isinstance(edges, Mapping):
        for key, capacity in edges.items():
            try:
                u, v = key
            except (TypeError, ValueError):
                raise InvalidNetwork(
                    f"edge key {key!r} must be a (u, v) pair", invariant="edge-shape"
                ) from None
            yield u, v, capacity
        return
    for item in edges:
        try:
            u, v, capacity = item
        except (TypeError, ValueError):
            raise InvalidNetwork(
                f"edge {item!r} must be a (u, v, capacity) triple", invariant="edge-shape"
            ) from None
        yield u, v, capacity


class Network:
    """A directed capacitated graph with a source and a sink.

    Instances are immutable and may be shared freely. Flows and cuts remember
    the network they were built against and are compared by identity.
    """

    __slots__ = (
        "_vertices",
        "_order",
        "_capacity",
        "_successors",
        "_predecessors",
        "_neighbors",
        "_source",
        "_sink",
    )

    def __init__(self, vertices: Iterable[Node], edges: EdgeSpec, source: Node, sink: Node) -> None:
        vertex_list = list(vertices)
        order: dict[Node, int] = {}
        for vertex in vertex_list:
            if vertex in order:
                raise InvalidNetwork(
                    f"vertex {vertex!r} is listed twice",
                    invariant="distinct-vertices",
                    vertices=(vertex,),
                )
            order[vertex] = len(order)

        if source not in order:
            raise InvalidNetwork(
                f"source {source!r} is not a vertex", invariant="known-source", vertices=(source,)
            )
        if sink not in order:
            raise InvalidNetwork(
                f"sink {sink!r} is not a vertex", invariant="known-sink", vertices=(sink,)
            )
        if source == sink:
            raise InvalidNetwork(
                "source and sink must be distinct",
                invariant="distinct-terminals",
                vertices=(source,),
            )

        capacity: dict[tuple[Node, Node], Capacity] = {}
        successors: dict[Node, list[Node]] = {vertex: [] for vertex in vertex_list}
        predecessors: dict[Node, list[Node]] = {vertex: [] for vertex in vertex_list}
        for u, v, raw in _iter_edge_spec(edges):
            for endpoint in (u, v):
                if endpoint not in order:
                    raise InvalidNetwork(
                        f"edge ({u!r}, {v!r}) uses unknown vertex {endpoint!r}",
                        invariant="known-endpoints",
                        vertices=(u, v),
                    )
            if (u, v) in capacity:
                raise InvalidNetwork(
                    f"edge ({u!r}, {v!r}) is declared twice",
                    invariant="no-parallel-edges",
                    vertices=(u, v),
                )
            if u == v:
                raise InvalidNetwork(
                    f"self-loop at {u!r}", invariant="no-antiparallel-edges", vertices=(u, v)
                )
            if (v, u) in capacity:
                raise InvalidNetwork(
                    f"edges ({u!r}, {v!r}) and ({v!r}, {u!r}) are antiparallel",
                    invariant="no-antiparallel-edges",
                    vertices=(u, v),
                )
            if v == source:
                raise InvalidNetwork(
                    f"edge ({u!r}, {v!r}) enters the source",
                    invariant="source-is-source",
                    vertices=(u, v),
                )
            if u == sink:
                raise InvalidNetwork(
                    f"edge ({u!r}, {v!r}) leaves the sink",
                    invariant="sink-is-sink",
                    vertices=(u, v),
                )
            try:
                value = as_exact(raw)
            except (TypeError, ValueError) as exc:
                raise InvalidNetwork(
                    f"edge ({u!r}, {v!r}) has invalid capacity {raw!r}: {exc}",
                    invariant="finite-capacity",
                    vertices=(u, v),
                ) from exc
            if value < 0:
                raise InvalidNetwork(
                    f"edge ({u!r}, {v!r}) has negative capacity {raw!r}",
                    invariant="nonnegative-capacity",
                    vertices=(u, v),
                )
            capacity[(u, v)] = value
            successors[u].append(v)
            predecessors[v].append(u)

        def _sorted(items: Iterable[Node]) -> tuple[Node, ...]:
            return tuple(sorted(items, key=order.__getitem__))

        self._vertices = tuple(vertex_list)
        self._order = order
        self._capacity = capacity
        self._successors = {u: _sorted(vs) for u, vs in successors.items()}
        self._predecessors = {v: _sorted(us) for v, us in predecessors.items()}
        self._neighbors = {
            vertex: _sorted(set(successors[vertex]) | set(predecessors[vertex]))
            for vertex in vertex_list
        }
        self._source = source
        self._sink = sink

    @property
    def vertices(self) -> tuple[Node, ...]:
        return self._vertices

    @property
    def source(self) -> Node:
        return self._source

    @property
    def sink(self) -> Node:
        return self._sink

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._order

    def __repr__(self) -> str:
        return (
            f"Network(vertices={len(self._vertices)}, edges={len(self._capacity)}, "
            f"source={self._source!r}, sink={self._sink!r})"
        )

    def number_of_edges(self) -> int:
        return len(self._capacity)

    def edge(self, u: Node, v: Node) -> bool:
        """Return whether the directed edge ``u -> v`` is declared."""
        return (u, v) in self._capacity

    def capacity(self, u: Node, v: Node) -> Capacity:
        """Return the capacity of ``u -> v``, zero when there is no such edge."""
        return self._capacity.get((u, v), 0)

    def edges(self) -> Iterator[tuple[Node, Node, Capacity]]:
        """Yield ``(u, v, capacity)`` in declaration order."""
        for (u, v), cap in self._capacity.items():
            yield u, v, cap

    def successors(self, vertex: Node) -> tuple[Node, ...]:
        return self._successors[vertex]

    def predecessors(self, vertex: Node) -> tuple[Node, ...]:
        return self._predecessors[vertex]

    def neighbors(self, vertex: Node) -> tuple[Node, ...]:
        """Vertices joined to ``vertex`` by an edge in either direction, in vertex order."""
        return self._neighbors[vertex]

    def order(self, vertex: Node) -> int:
        """Position of ``vertex`` in the fixed total order used for tie-breaking."""
        return self._order[vertex]

    def sort_vertices(self, vertices: Iterable[Node]) -> list[Node]:
        return sorted(vertices, key=self._order.__getitem__)

    def flow_value(self, flow) -> Number:
        """Net flow leaving the source under ``flow``."""
        if flow.network is not self:
            raise NetworkMismatch("flow was built over a different network")
        terminal = (self._source,)
        return flow.outflow(terminal) - flow.inflow(terminal)

    def to_networkx(self) -> nx.DiGraph:
        """Return a new DiGraph with a ``capacity`` attribute on every edge."""
        graph = nx.DiGraph()
        graph.add_nodes_from(self._vertices)
        for u, v, cap in self.edges():
            graph.add_edge(u, v, capacity=cap)
        graph.graph["source"] = self._source
        graph.graph["sink"] = self._sink
        return graph


def build_network(vertices: Iterable[Node], edges: EdgeSpec, source: Node, sink: Node) -> Network:
    """Build a :class:`Network`, raising :class:`InvalidNetwork` on bad structure.

    Example:
        >>> net = build_network(["s", "t"], [("s", "t", 5)], "s", "t")
        >>> net.capacity("s", "t")
        5
    """
    return Network(vertices, edges, source, sink)


__all__ = ["Network", "as_exact", "build_network"]
