from fractions import Fraction

import pytest

from flowcut import (
    CapacityExceeded,
    Flow,
    InvalidFlow,
    NetworkMismatch,
    build_network,
    flow_value,
)


def _chain():
    return build_network(
        ["s", "a", "b", "t"],
        [("s", "a", 4), ("a", "b", 3), ("b", "t", 5), ("s", "b", 2)],
        "s",
        "t",
    )


def test_zero_flow_is_feasible():
    net = _chain()
    flow = Flow.zero(net)
    assert flow.is_feasible()
    assert flow.flow_value() == 0
    assert all(value == 0 for _, value in flow.items())


def test_try_set_within_bounds():
    net = _chain()
    flow = Flow.zero(net)
    assert flow.try_set("s", "a", 4) is flow
    assert flow.value("s", "a") == 4
    flow.try_set("a", "b", Fraction(3, 2))
    assert flow.value("a", "b") == Fraction(3, 2)


@pytest.mark.parametrize("value", [-1, 5, Fraction(9, 2)])
def test_try_set_rejects_out_of_bounds(value):
    flow = Flow.zero(_chain())
    with pytest.raises(CapacityExceeded) as excinfo:
        flow.try_set("s", "a", value)
    assert excinfo.value.edge == ("s", "a")
    assert excinfo.value.capacity == 4
    assert flow.value("s", "a") == 0


def test_try_set_on_non_edge():
    flow = Flow.zero(_chain())
    flow.try_set("a", "s", 0)
    assert flow.value("a", "s") == 0
    with pytest.raises(CapacityExceeded):
        flow.try_set("a", "s", 1)


def test_try_set_does_not_check_conservation():
    flow = Flow.zero(_chain())
    flow.try_set("s", "a", 2)
    assert flow.conservation_violations() == [("a", 2)]
    assert not flow.is_feasible()
    with pytest.raises(InvalidFlow, match="'a'"):
        flow.check_conservation()


def test_apply_is_all_or_nothing():
    flow = Flow.zero(_chain())
    with pytest.raises(CapacityExceeded):
        flow.apply({("s", "a"): 2, ("a", "b"): 9})
    assert flow.value("s", "a") == 0
    flow.apply({("s", "a"): 2, ("a", "b"): 2})
    assert flow.value("a", "b") == 2


def test_inflow_outflow_over_sets():
    net = _chain()
    flow = Flow.from_mapping(
        net, {("s", "a"): 3, ("a", "b"): 3, ("s", "b"): 2, ("b", "t"): 5}
    )
    assert flow.outflow(["s"]) == 5
    assert flow.inflow(["s"]) == 0
    assert flow.outflow(["s", "a"]) == 5
    assert flow.inflow(["b", "t"]) == 5
    assert flow.inflow(["t"]) == 5
    assert flow.excess("b") == 0
    assert flow_value(net, flow) == 5


def test_from_mapping_validates():
    net = _chain()
    with pytest.raises(InvalidFlow):
        Flow.from_mapping(net, {("s", "a"): 1})
    with pytest.raises(CapacityExceeded):
        Flow.from_mapping(net, {("s", "b"): 3, ("b", "t"): 3})


def test_flow_value_checks_network_identity():
    first = _chain()
    second = _chain()
    flow = Flow.zero(first)
    with pytest.raises(NetworkMismatch):
        flow_value(second, flow)


def test_copy_is_independent():
    flow = Flow.zero(_chain())
    clone = flow.copy()
    clone.try_set("s", "b", 1)
    assert flow.value("s", "b") == 0
    assert clone != flow
    flow.try_set("s", "b", 1)
    assert clone == flow


def test_to_dict_shape():
    flow = Flow.zero(_chain())
    flow_dict = flow.to_dict()
    assert flow_dict["s"] == {"a": 0, "b": 0}
    assert flow_dict["t"] == {}
