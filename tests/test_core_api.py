import numpy as np
import pytest

from flowcut import InvalidNetwork
from flowcut import _core


def test_max_flow_edges_diamond():
    flow = _core.max_flow_edges(
        4,
        np.asarray([0, 0, 1, 2], dtype=np.int64),
        np.asarray([1, 2, 3, 3], dtype=np.int64),
        np.asarray([3, 3, 3, 3], dtype=np.int64),
        0,
        3,
    )
    assert flow.dtype == np.int64
    assert flow.tolist() == [3, 3, 3, 3]


def test_max_flow_edges_accepts_lists():
    flow = _core.max_flow_edges(3, [0, 1], [1, 2], [10, 2], 0, 2)
    assert flow.tolist() == [2, 2]


def test_max_flow_edges_rejects_mismatched_lengths():
    with pytest.raises(ValueError, match="tail and head"):
        _core.max_flow_edges(2, [0], [1, 1], [1], 0, 1)
    with pytest.raises(ValueError, match="capacity array"):
        _core.max_flow_edges(2, [0], [1], [1, 2], 0, 1)


def test_max_flow_edges_rejects_bad_indices():
    with pytest.raises(ValueError, match="head index"):
        _core.max_flow_edges(2, [0], [2], [1], 0, 1)
    with pytest.raises(ValueError, match="source or sink"):
        _core.max_flow_edges(2, [0], [1], [1], 0, 5)
    with pytest.raises(ValueError, match="1D"):
        _core.max_flow_edges(2, [[0]], [[1]], [[1]], 0, 1)


def test_max_flow_edges_rejects_negative_capacity():
    with pytest.raises(ValueError, match="non-negative"):
        _core.max_flow_edges(2, [0], [1], [-1], 0, 1)


def test_max_flow_edges_checks_structure():
    with pytest.raises(InvalidNetwork):
        _core.max_flow_edges(3, [0, 1], [1, 0], [1, 1], 0, 2)
