"""NetworkX adapter for flowcut.

Results come back in the same shapes as ``networkx.maximum_flow`` and
``networkx.minimum_cut`` so the two can be swapped in calling code.
"""
from __future__ import annotations

from typing import Any

import networkx as nx

from .engine import compute_max_flow
from .errors import InvalidNetwork
from .flow import Flow
from .network import Network
from .residual import ResidualView
from .typing import FlowDict, Node, Number


def _edge_capacities(G, capacity: str) -> list[tuple[Node, Node, Any]]:
    edges = []
    for u, v, data in G.edges(data=True):
        if capacity not in data:
            raise InvalidNetwork(
                "Each edge must specify a finite capacity.",
                invariant="finite-capacity",
                vertices=(u, v),
            )
        edges.append((u, v, data[capacity]))
    return edges


def network_from_graph(G, source: Node, sink: Node, *, capacity: str = "capacity") -> Network:
    """Build a :class:`Network` from a NetworkX DiGraph.

    Every edge needs a finite ``capacity`` attribute; unlike NetworkX a missing
    attribute is an error rather than infinite capacity.
    """
    if not G.is_directed():
        raise ValueError("Only directed graphs are supported.")
    if G.is_multigraph():
        raise ValueError("Multigraphs are not supported.")
    return Network(G.nodes(), _edge_capacities(G, capacity), source, sink)


def maximum_flow(
    G,
    source: Node,
    sink: Node,
    *,
    capacity: str = "capacity",
    max_iterations: int | None = None,
) -> tuple[Number, FlowDict]:
    """Return ``(flow_value, flow_dict)`` like ``networkx.maximum_flow``."""
    network = network_from_graph(G, source, sink, capacity=capacity)
    flow, _cut = compute_max_flow(network, max_iterations=max_iterations)
    return flow.flow_value(), flow.to_dict()


def maximum_flow_value(G, source: Node, sink: Node, *, capacity: str = "capacity") -> Number:
    return maximum_flow(G, source, sink, capacity=capacity)[0]


def minimum_cut(
    G,
    source: Node,
    sink: Node,
    *,
    capacity: str = "capacity",
) -> tuple[Number, tuple[set, set]]:
    """Return ``(cut_value, (source_side, sink_side))`` like ``networkx.minimum_cut``."""
    network = network_from_graph(G, source, sink, capacity=capacity)
    _flow, cut = compute_max_flow(network)
    return cut.capacity, (set(cut.source_side), set(cut.sink_side))


def residual_graph(network: Network, flow: Flow) -> nx.DiGraph:
    """Residual capacities of ``flow`` as a DiGraph with a ``capacity`` attribute."""
    return ResidualView(network, flow).to_networkx()


__all__ = [
    "maximum_flow",
    "maximum_flow_value",
    "minimum_cut",
    "network_from_graph",
    "residual_graph",
]
