"""Numerical check of max-flow/min-cut duality on a concrete instance."""
from __future__ import annotations

from dataclasses import dataclass, field

import logging

from .cut import Cut, cut_capacity
from .errors import DualityMismatch, NetworkMismatch
from .flow import Flow
from .network import Network
from .typing import Edge, Number

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DualityReport:
    flow_value: Number
    cut_capacity: Number
    unsaturated_edges: tuple[Edge, ...] = field(default=())
    backflow_edges: tuple[Edge, ...] = field(default=())

    @property
    def discrepancy(self) -> Number:
        """``flow_value - cut_capacity``; zero exactly when duality holds."""
        return self.flow_value - self.cut_capacity

    @property
    def holds(self) -> bool:
        return self.discrepancy == 0


class DualityChecker:
    """Recompute flow value and cut capacity independently and compare them."""

    def check(self, network: Network, flow: Flow, cut: Cut) -> DualityReport:
        if flow.network is not network:
            raise NetworkMismatch("flow was built over a different network")
        if cut.network is not network:
            raise NetworkMismatch("cut was built over a different network")
        source = (network.source,)
        value = flow.outflow(source) - flow.inflow(source)
        capacity = cut_capacity(network, cut)
        unsaturated = tuple(
            (u, v) for u, v, cap in cut.crossing_edges() if flow.value(u, v) != cap
        )
        backflow = tuple((u, v) for u, v, _ in cut.backward_edges() if flow.value(u, v) != 0)
        return DualityReport(value, capacity, unsaturated, backflow)


def verify_duality(network: Network, flow: Flow, cut: Cut) -> bool:
    """Return whether the flow value equals the cut capacity exactly."""
    return DualityChecker().check(network, flow, cut).holds


def assert_duality(network: Network, flow: Flow, cut: Cut) -> DualityReport:
    """Like :func:`verify_duality` but raise :class:`DualityMismatch` on failure."""
    report = DualityChecker().check(network, flow, cut)
    if not report.holds:
        logger.error(
            "duality mismatch: flow %s, cut %s, unsaturated %r, backflow %r",
            report.flow_value,
            report.cut_capacity,
            report.unsaturated_edges,
            report.backflow_edges,
        )
        raise DualityMismatch(
            f"flow value {report.flow_value} differs from cut capacity "
            f"{report.cut_capacity} by {report.discrepancy}",
            report=report,
        )
    return report


__all__ = ["DualityChecker", "DualityReport", "assert_duality", "verify_duality"]
