"""Ford-Fulkerson augmentation loop.

The engine starts from the zero flow and keeps pushing the bottleneck amount
along the shortest residual source-sink path (Edmonds-Karp) until the sink is
no longer reachable. Each augmentation is applied as a single batch, so the
flow is feasible after every step and an interrupted run still leaves a valid
lower bound.
"""
from __future__ import annotations

from collections.abc import Callable
from dataclasses import asdict, dataclass
from typing import Any

import enum
import logging
import time

from .cut import Cut, CutExtractor
from .duality import assert_duality
from .errors import InvariantViolation, NonTermination
from .flow import Flow
from .network import Network
from .paths import PathFinder
from .residual import ResidualView
from .typing import Edge, FlowValue, Node, Number

logger = logging.getLogger(__name__)


class EngineState(enum.Enum):
    RUNNING = "running"
    TERMINATED = "terminated"


@dataclass
class EngineStats:
    iterations: int = 0
    flow_value: Number = 0
    termination: str | None = None
    elapsed: float = 0.0

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


def bottleneck(residual: ResidualView, path: list[Node]) -> Number:
    """Smallest residual capacity along ``path``; always positive for a residual path."""
    if len(path) < 2:
        raise InvariantViolation(f"augmenting path {path!r} has no edges")
    amount = min(residual.residual(u, v) for u, v in zip(path, path[1:]))
    if amount <= 0:
        raise InvariantViolation(f"augmenting path {path!r} has non-positive bottleneck {amount}")
    return amount


class AugmentEngine:
    """Drive a flow from zero to maximum on one network.

    Args:
        network: The network to saturate.
        path_finder: Search strategy; defaults to breadth-first :class:`PathFinder`.
        max_iterations: Stop after this many augmentations of a single :meth:`run`.
        deadline: Stop once this many seconds have passed since :meth:`run` began.
        clock: Monotonic time source, in seconds.
    """

    def __init__(
        self,
        network: Network,
        *,
        path_finder: PathFinder | None = None,
        max_iterations: int | None = None,
        deadline: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_iterations is not None and max_iterations < 0:
            raise ValueError("max_iterations must be non-negative")
        if deadline is not None and deadline < 0:
            raise ValueError("deadline must be non-negative")
        self.network = network
        self.flow = Flow.zero(network)
        self.state = EngineState.RUNNING
        self.stats = EngineStats()
        self._residual = ResidualView(network, self.flow)
        self._path_finder = path_finder or PathFinder()
        self._max_iterations = max_iterations
        self._deadline = deadline
        self._clock = clock
        self._pending: list[Node] | None = None

    @property
    def terminated(self) -> bool:
        return self.state is EngineState.TERMINATED

    @property
    def residual(self) -> ResidualView:
        return self._residual

    def _next_path(self) -> list[Node] | None:
        if self._pending is not None:
            path, self._pending = self._pending, None
            return path
        network = self.network
        path = self._path_finder.find_path(self._residual, network.source, network.sink)
        if path is None:
            self.state = EngineState.TERMINATED
            self.stats.termination = "optimal"
        return path

    def _augment(self, path: list[Node]) -> Number:
        network = self.network
        flow = self.flow
        amount = bottleneck(self._residual, path)
        updates: dict[Edge, FlowValue] = {}
        for u, v in zip(path, path[1:]):
            if network.edge(u, v):
                updates[(u, v)] = flow.value(u, v) + amount
            else:
                updates[(v, u)] = flow.value(v, u) - amount
        flow.apply(updates)
        self.stats.iterations += 1
        self.stats.flow_value += amount
        logger.debug(
            "augmentation %d: pushed %s along %r", self.stats.iterations, amount, path
        )
        return amount

    def step(self) -> list[Node] | None:
        """Perform one augmentation; return its path, or ``None`` once terminated."""
        if self.terminated:
            return None
        path = self._next_path()
        if path is None:
            logger.info(
                "max flow reached after %d augmentations, value %s",
                self.stats.iterations,
                self.stats.flow_value,
            )
            return None
        self._augment(path)
        return path

    def _budget_exhausted(self, done: int, started: float) -> str | None:
        if self._max_iterations is not None and done >= self._max_iterations:
            return "iteration_limit"
        if self._deadline is not None and self._clock() - started >= self._deadline:
            return "deadline"
        return None

    def run(self) -> EngineStats:
        """Augment until optimal or until the budget is spent.

        On budget exhaustion the engine stays :attr:`EngineState.RUNNING` and
        ``stats.termination`` names the budget that ran out. The path already
        found is kept and augmented first by the next :meth:`step` or :meth:`run`.
        """
        started = self._clock()
        done = 0
        while not self.terminated:
            path = self._next_path()
            if path is None:
                break
            reason = self._budget_exhausted(done, started)
            if reason is not None:
                self.stats.termination = reason
                self._pending = path
                logger.warning(
                    "stopped on %s after %d augmentations; flow value %s is a lower bound",
                    reason,
                    self.stats.iterations,
                    self.stats.flow_value,
                )
                break
            self._augment(path)
            done += 1
        self.stats.elapsed += self._clock() - started
        if self.terminated:
            logger.info(
                "max flow reached after %d augmentations, value %s",
                self.stats.iterations,
                self.stats.flow_value,
            )
        return self.stats


def flow_value(network: Network, flow: Flow) -> Number:
    """Net flow leaving the source of ``network``."""
    return network.flow_value(flow)


def compute_max_flow(
    network: Network,
    *,
    max_iterations: int | None = None,
    deadline: float | None = None,
    verify: bool = True,
    return_stats: bool = False,
) -> tuple[Flow, Cut] | tuple[Flow, Cut, dict[str, Any]]:
    """Run the augmentation loop to optimality and extract the minimum cut.

    Args:
        network: The network to solve.
        max_iterations: Optional augmentation budget.
        deadline: Optional wall-clock budget in seconds.
        verify: Check that flow value equals cut capacity before returning.
        return_stats: When True, return ``(flow, cut, stats)``.

    Raises:
        NonTermination: A budget ran out first; ``exc.flow`` holds the
            feasible partial flow.
        DualityMismatch: ``verify`` is set and the certificate does not hold.
    """
    engine = AugmentEngine(network, max_iterations=max_iterations, deadline=deadline)
    stats = engine.run()
    if not engine.terminated:
        raise NonTermination(
            f"no optimal flow within budget ({stats.termination}); "
            f"best-effort value {stats.flow_value}",
            flow=engine.flow,
            stats=stats.as_dict(),
        )
    cut = CutExtractor().extract(network, engine.flow)
    if verify:
        assert_duality(network, engine.flow, cut)
    if return_stats:
        return engine.flow, cut, stats.as_dict()
    return engine.flow, cut


__all__ = [
    "AugmentEngine",
    "EngineState",
    "EngineStats",
    "bottleneck",
    "compute_max_flow",
    "flow_value",
]
