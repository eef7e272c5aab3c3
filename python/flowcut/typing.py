"""Type aliases for the flowcut public API."""
from __future__ import annotations

from fractions import Fraction
from typing import Dict, Hashable, Iterable, Mapping, Tuple, Union

Node = Hashable
Number = Union[int, Fraction]
Capacity = Number
FlowValue = Number

Edge = Tuple[Node, Node]
EdgeCapacityMap = Mapping[Edge, Capacity]
EdgeSpec = Union[EdgeCapacityMap, Iterable[Tuple[Node, Node, Capacity]]]
FlowDict = Dict[Node, Dict[Node, FlowValue]]

__all__ = [
    "Capacity",
    "Edge",
    "EdgeCapacityMap",
    "EdgeSpec",
    "FlowDict",
    "FlowValue",
    "Node",
    "Number",
]
