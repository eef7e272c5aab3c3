"""Read-through residual view of a network under a flow.

Nothing is cached: every query reads the current flow values, so a view built
once stays correct while the flow underneath it is augmented.
"""
from __future__ import annotations

from collections.abc import Iterator

import networkx as nx

from .flow import Flow
from .network import Network
from .typing import Node, Number


class ResidualView:
    """Residual capacities of ``network`` under ``flow``.

    ``residual(u, v)`` is the spare capacity of ``u -> v`` when that edge is
    declared, the cancellable flow on ``v -> u`` when the reverse edge is
    declared, and zero otherwise.
    """

    __slots__ = ("_network", "_flow")

    def __init__(self, network: Network, flow: Flow) -> None:
        flow.require_network(network)
        self._network = network
        self._flow = flow

    @property
    def network(self) -> Network:
        return self._network

    @property
    def flow(self) -> Flow:
        return self._flow

    def residual(self, u: Node, v: Node) -> Number:
        network = self._network
        if network.edge(u, v):
            return network.capacity(u, v) - self._flow.value(u, v)
        if network.edge(v, u):
            return self._flow.value(v, u)
        return 0

    def is_residual_edge(self, u: Node, v: Node) -> bool:
        return self.residual(u, v) > 0

    def neighbors(self, u: Node) -> Iterator[Node]:
        """Heads of residual edges leaving ``u``, in vertex order."""
        for v in self._network.neighbors(u):
            if self.residual(u, v) > 0:
                yield v

    def edges(self) -> Iterator[tuple[Node, Node, Number]]:
        for u in self._network.vertices:
            for v in self._network.neighbors(u):
                amount = self.residual(u, v)
                if amount > 0:
                    yield u, v, amount

    def to_networkx(self) -> nx.DiGraph:
        """Snapshot of the residual graph with a ``capacity`` attribute per edge."""
        graph = nx.DiGraph()
        graph.add_nodes_from(self._network.vertices)
        graph.add_weighted_edges_from(self.edges(), weight="capacity")
        return graph


__all__ = ["ResidualView"]
