"""Feasible flows over a :class:`~flowcut.network.Network`."""
from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from .errors import CapacityExceeded, InvalidFlow, NetworkMismatch
from .network import Network, as_exact
from .typing import Edge, FlowDict, FlowValue, Node, Number


class Flow:
    """Edge values bound to one network and kept inside ``[0, capacity]``.

    Only declared edges carry a value; every other ordered pair reads as zero.
    Individual updates are bounds-checked but conservation is not re-checked,
    since keeping it is the augmenting loop's job.
    """

    __slots__ = ("_network", "_values")

    def __init__(self, network: Network) -> None:
        self._network = network
        self._values: dict[Edge, FlowValue] = {(u, v): 0 for u, v, _ in network.edges()}

    @classmethod
    def zero(cls, network: Network) -> "Flow":
        """Return the all-zero flow, which is feasible on every network."""
        return cls(network)

    @classmethod
    def from_mapping(cls, network: Network, values: Mapping[Edge, Any]) -> "Flow":
        """Build a flow from ``{(u, v): value}`` and check it is feasible.

        Pairs left out are zero. Raises :class:`CapacityExceeded` for a value
        outside its bounds and :class:`InvalidFlow` when conservation fails.
        """
        flow = cls(network)
        flow.apply(values)
        flow.check_conservation()
        return flow

    @property
    def network(self) -> Network:
        return self._network

    def __repr__(self) -> str:
        return f"Flow(value={self.flow_value()!r}, edges={len(self._values)})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Flow):
            return NotImplemented
        return self._network is other._network and self._values == other._values

    __hash__ = None  # type: ignore[assignment]

    def copy(self) -> "Flow":
        clone = Flow.__new__(Flow)
        clone._network = self._network
        clone._values = dict(self._values)
        return clone

    def value(self, u: Node, v: Node) -> FlowValue:
        """Flow on ``u -> v``; zero when the edge is not declared."""
        return self._values.get((u, v), 0)

    def items(self) -> Iterator[tuple[Edge, FlowValue]]:
        return iter(self._values.items())

    def _checked(self, u: Node, v: Node, new_value: Any) -> FlowValue:
        try:
            exact = as_exact(new_value)
        except (TypeError, ValueError) as exc:
            raise CapacityExceeded(
                f"flow on ({u!r}, {v!r}) must be a finite number, got {new_value!r}",
                edge=(u, v),
                value=new_value,
                capacity=self._network.capacity(u, v),
            ) from exc
        capacity = self._network.capacity(u, v)
        if exact < 0 or exact > capacity:
            raise CapacityExceeded(
                f"flow {exact} on ({u!r}, {v!r}) is outside [0, {capacity}]",
                edge=(u, v),
                value=exact,
                capacity=capacity,
            )
        return exact

    def try_set(self, u: Node, v: Node, new_value: Any) -> "Flow":
        """Set the flow on ``u -> v`` in place and return ``self``.

        Raises :class:`CapacityExceeded` when ``new_value`` is negative or
        above ``capacity(u, v)``. Setting a non-edge to zero is a no-op.
        """
        exact = self._checked(u, v, new_value)
        if (u, v) in self._values:
            self._values[(u, v)] = exact
        return self

    def apply(self, updates: Mapping[Edge, Any]) -> "Flow":
        """Set several edges at once; nothing changes unless every value is in bounds."""
        staged: dict[Edge, FlowValue] = {}
        for (u, v), new_value in updates.items():
            exact = self._checked(u, v, new_value)
            if (u, v) in self._values:
                staged[(u, v)] = exact
        self._values.update(staged)
        return self

    def outflow(self, vertices: Iterable[Node]) -> Number:
        """Total flow on edges leaving the vertex set."""
        members = set(vertices)
        total: Number = 0
        for u in members:
            for v in self._network.successors(u):
                if v not in members:
                    total += self._values[(u, v)]
        return total

    def inflow(self, vertices: Iterable[Node]) -> Number:
        """Total flow on edges entering the vertex set."""
        members = set(vertices)
        total: Number = 0
        for v in members:
            for u in self._network.predecessors(v):
                if u not in members:
                    total += self._values[(u, v)]
        return total

    def excess(self, vertex: Node) -> Number:
        """Inflow minus outflow at a single vertex."""
        single = (vertex,)
        return self.inflow(single) - self.outflow(single)

    def flow_value(self) -> Number:
        return self._network.flow_value(self)

    def conservation_violations(self) -> list[tuple[Node, Number]]:
        """``(vertex, excess)`` for every interior vertex whose excess is nonzero."""
        terminals = (self._network.source, self._network.sink)
        violations = []
        for vertex in self._network.vertices:
            if vertex in terminals:
                continue
            excess = self.excess(vertex)
            if excess != 0:
                violations.append((vertex, excess))
        return violations

    def check_conservation(self) -> None:
        violations = self.conservation_violations()
        if violations:
            vertex, excess = violations[0]
            raise InvalidFlow(
                f"conservation fails at {vertex!r}: inflow exceeds outflow by {excess}",
                vertex=vertex,
            )

    def is_feasible(self) -> bool:
        """Re-check both bounds and conservation from scratch."""
        for (u, v), value in self._values.items():
            if value < 0 or value > self._network.capacity(u, v):
                return False
        return not self.conservation_violations()

    def require_network(self, network: Network) -> None:
        if self._network is not network:
            raise NetworkMismatch("flow was built over a different network")

    def to_dict(self) -> FlowDict:
        """Nested ``{u: {v: value}}`` in NetworkX's flow-dict shape."""
        flow_dict: FlowDict = {vertex: {} for vertex in self._network.vertices}
        for (u, v), value in self._values.items():
            flow_dict[u][v] = value
        return flow_dict


__all__ = ["Flow"]
