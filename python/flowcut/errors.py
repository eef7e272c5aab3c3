"""Exception hierarchy for flowcut.

Bad input surfaces as :class:`ValueError` subclasses; failures of the engine's
own invariants surface as :class:`RuntimeError` subclasses.
"""
from __future__ import annotations

from typing import Any


class FlowcutError(Exception):
    """Base class for every error raised by flowcut."""


class InvalidNetwork(FlowcutError, ValueError):
    """A structural network invariant does not hold."""

    def __init__(self, message: str, *, invariant: str, vertices: tuple = ()) -> None:
        super().__init__(message)
        self.invariant = invariant
        self.vertices = tuple(vertices)


class NetworkMismatch(FlowcutError, ValueError):
    """A flow or cut was built over a different network."""


class InvalidFlow(FlowcutError, ValueError):
    """Flow values break conservation at some interior vertex."""

    def __init__(self, message: str, *, vertex: Any) -> None:
        super().__init__(message)
        self.vertex = vertex


class InvalidCut(FlowcutError, ValueError):
    """A vertex set does not describe a source/sink partition."""


class AugmentingPathExists(FlowcutError, ValueError):
    """The sink is still reachable in the residual network."""

    def __init__(self, message: str, *, path: list) -> None:
        super().__init__(message)
        self.path = list(path)


class CapacityExceeded(FlowcutError, RuntimeError):
    """A flow update fell outside ``[0, capacity]``."""

    def __init__(self, message: str, *, edge: tuple, value: Any, capacity: Any) -> None:
        super().__init__(message)
        self.edge = edge
        self.value = value
        self.capacity = capacity


class InvariantViolation(FlowcutError, RuntimeError):
    """An internal invariant of the augmentation loop failed."""


class NonTermination(FlowcutError, RuntimeError):
    """The iteration or deadline budget ran out before optimality.

    ``flow`` is still feasible and its value is a lower bound on the maximum.
    """

    def __init__(self, message: str, *, flow: Any, stats: dict) -> None:
        super().__init__(message)
        self.flow = flow
        self.stats = stats


class DualityMismatch(FlowcutError, RuntimeError):
    """Flow value and cut capacity disagree."""

    def __init__(self, message: str, *, report: Any) -> None:
        super().__init__(message)
        self.report = report


__all__ = [
    "AugmentingPathExists",
    "CapacityExceeded",
    "DualityMismatch",
    "FlowcutError",
    "InvalidCut",
    "InvalidFlow",
    "InvalidNetwork",
    "InvariantViolation",
    "NetworkMismatch",
    "NonTermination",
]
