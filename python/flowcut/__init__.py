"""Python interface for flowcut.

Example:
    >>> from flowcut import build_network, compute_max_flow, verify_duality
    >>> net = build_network(
    ...     ["s", "a", "t"], [("s", "a", 10), ("a", "t", 2)], "s", "t"
    ... )
    >>> flow, cut = compute_max_flow(net)
    >>> flow.flow_value(), cut.capacity
    (2, 2)
    >>> verify_duality(net, flow, cut)
    True

Exact arithmetic:
    Capacities are stored as ``int`` or ``fractions.Fraction`` so flow value
    and cut capacity can be compared for exact equality.
"""

from ._version import __version__
from .cut import Cut, CutExtractor, cut_capacity, extract_cut
from .duality import DualityChecker, DualityReport, assert_duality, verify_duality
from .engine import (
    AugmentEngine,
    EngineState,
    EngineStats,
    bottleneck,
    compute_max_flow,
    flow_value,
)
from .errors import (
    AugmentingPathExists,
    CapacityExceeded,
    DualityMismatch,
    FlowcutError,
    InvalidCut,
    InvalidFlow,
    InvalidNetwork,
    InvariantViolation,
    NetworkMismatch,
    NonTermination,
)
from .flow import Flow
from .network import Network, build_network
from .nx import maximum_flow, maximum_flow_value, minimum_cut, network_from_graph
from .paths import PathFinder
from .residual import ResidualView
from .typing import FlowDict

__all__ = [
    "AugmentEngine",
    "AugmentingPathExists",
    "CapacityExceeded",
    "Cut",
    "CutExtractor",
    "DualityChecker",
    "DualityMismatch",
    "DualityReport",
    "EngineState",
    "EngineStats",
    "Flow",
    "FlowDict",
    "FlowcutError",
    "InvalidCut",
    "InvalidFlow",
    "InvalidNetwork",
    "InvariantViolation",
    "Network",
    "NetworkMismatch",
    "NonTermination",
    "PathFinder",
    "ResidualView",
    "assert_duality",
    "bottleneck",
    "build_network",
    "compute_max_flow",
    "cut_capacity",
    "extract_cut",
    "flow_value",
    "maximum_flow",
    "maximum_flow_value",
    "minimum_cut",
    "network_from_graph",
    "verify_duality",
    "__version__",
]
