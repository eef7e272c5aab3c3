"""Source/sink cuts and extraction of the minimum cut from a maximum flow."""
from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import logging

from .errors import AugmentingPathExists, InvalidCut, NetworkMismatch
from .flow import Flow
from .network import Network
from .paths import PathFinder
from .residual import ResidualView
from .typing import Capacity, Node, Number

if TYPE_CHECKING:
    from .engine import AugmentEngine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Cut:
    """A partition ``(S, T)`` of a network's vertices with the source in ``S``."""

    network: Network = field(repr=False)
    source_side: frozenset
    sink_side: frozenset

    @classmethod
    def from_source_side(cls, network: Network, source_side: Iterable[Node]) -> "Cut":
        """Build the cut whose source side is ``source_side``; the rest is the sink side."""
        members = frozenset(source_side)
        unknown = [vertex for vertex in members if vertex not in network]
        if unknown:
            raise InvalidCut(f"vertices {unknown!r} are not in the network")
        if network.source not in members:
            raise InvalidCut("source must be on the source side")
        if network.sink in members:
            raise InvalidCut("sink must be on the sink side")
        rest = frozenset(vertex for vertex in network.vertices if vertex not in members)
        return cls(network, members, rest)

    def crossing_edges(self) -> Iterator[tuple[Node, Node, Capacity]]:
        """Declared edges from ``S`` to ``T``, in declaration order."""
        for u, v, cap in self.network.edges():
            if u in self.source_side and v in self.sink_side:
                yield u, v, cap

    def backward_edges(self) -> Iterator[tuple[Node, Node, Capacity]]:
        """Declared edges from ``T`` back into ``S``."""
        for u, v, cap in self.network.edges():
            if u in self.sink_side and v in self.source_side:
                yield u, v, cap

    @property
    def capacity(self) -> Number:
        return sum((cap for _, _, cap in self.crossing_edges()), 0)


def cut_capacity(network: Network, cut: Cut) -> Number:
    """Sum of capacities on edges crossing from the source side to the sink side."""
    if cut.network is not network:
        raise NetworkMismatch("cut was built over a different network")
    return cut.capacity


class CutExtractor:
    """Turn a flow with no augmenting path into the cut that certifies it.

    The source side is the set of vertices reachable from the source in the
    residual network. Every edge leaving it is then saturated and every edge
    entering it carries no flow, which makes the cut capacity equal the flow
    value.
    """

    def __init__(self, path_finder: PathFinder | None = None) -> None:
        self.path_finder = path_finder or PathFinder()

    def extract(self, network: Network, flow: Flow) -> Cut:
        flow.require_network(network)
        residual = ResidualView(network, flow)
        reachable = self.path_finder.reachable(residual, network.source)
        if network.sink in reachable:
            path = self.path_finder.find_path(residual, network.source, network.sink)
            raise AugmentingPathExists(
                f"flow is not maximum: augmenting path {path!r} remains", path=path or []
            )
        cut = Cut.from_source_side(network, reachable)
        logger.info(
            "extracted cut with %d source-side and %d sink-side vertices",
            len(cut.source_side),
            len(cut.sink_side),
        )
        return cut

    def from_engine(self, engine: AugmentEngine) -> Cut:
        """Extract the cut for a terminated :class:`~flowcut.engine.AugmentEngine`."""
        return self.extract(engine.network, engine.flow)


def extract_cut(network: Network, flow: Flow) -> Cut:
    return CutExtractor().extract(network, flow)


__all__ = ["Cut", "CutExtractor", "cut_capacity", "extract_cut"]
