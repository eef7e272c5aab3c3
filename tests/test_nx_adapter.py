import math

import networkx as nx
import pytest

from flowcut import Flow, InvalidNetwork
from flowcut import nx as flowcut_nx


def test_graph_requires_directed():
    graph = nx.Graph()
    graph.add_edge("s", "t", capacity=1)
    with pytest.raises(ValueError, match="directed"):
        flowcut_nx.network_from_graph(graph, "s", "t")


def test_graph_rejects_multidigraph():
    graph = nx.MultiDiGraph()
    graph.add_edge("s", "t", capacity=1)
    graph.add_edge("s", "t", capacity=3)
    with pytest.raises(ValueError, match="Multigraph"):
        flowcut_nx.network_from_graph(graph, "s", "t")


def test_missing_capacity_is_error():
    graph = nx.DiGraph()
    graph.add_edge("s", "t")
    with pytest.raises(InvalidNetwork, match="capacity"):
        flowcut_nx.network_from_graph(graph, "s", "t")


def test_infinite_capacity_is_error():
    graph = nx.DiGraph()
    graph.add_edge("s", "t", capacity=math.inf)
    with pytest.raises(InvalidNetwork, match="capacity") as excinfo:
        flowcut_nx.network_from_graph(graph, "s", "t")
    assert excinfo.value.invariant == "finite-capacity"


def test_missing_capacity_reports_invariant():
    graph = nx.DiGraph()
    graph.add_edge("s", "t")
    with pytest.raises(InvalidNetwork) as excinfo:
        flowcut_nx.network_from_graph(graph, "s", "t")
    assert excinfo.value.invariant == "finite-capacity"
    assert excinfo.value.vertices == ("s", "t")


def test_antiparallel_edges_are_rejected():
    graph = nx.DiGraph()
    graph.add_edge("s", "a", capacity=1)
    graph.add_edge("a", "b", capacity=1)
    graph.add_edge("b", "a", capacity=1)
    graph.add_edge("b", "t", capacity=1)
    with pytest.raises(InvalidNetwork) as excinfo:
        flowcut_nx.network_from_graph(graph, "s", "t")
    assert excinfo.value.invariant == "no-antiparallel-edges"


def test_custom_capacity_attribute():
    graph = nx.DiGraph()
    graph.add_edge("s", "a", bandwidth=7, capacity=1)
    graph.add_edge("a", "t", bandwidth=3, capacity=1)
    network = flowcut_nx.network_from_graph(graph, "s", "t", capacity="bandwidth")
    assert network.capacity("s", "a") == 7
    assert flowcut_nx.maximum_flow_value(graph, "s", "t", capacity="bandwidth") == 3


def test_node_order_follows_graph():
    graph = nx.DiGraph()
    graph.add_nodes_from(["s", "b", "a", "t"])
    graph.add_edge("s", "a", capacity=1)
    graph.add_edge("s", "b", capacity=1)
    network = flowcut_nx.network_from_graph(graph, "s", "t")
    assert network.vertices == ("s", "b", "a", "t")


def test_residual_graph_export():
    graph = nx.DiGraph()
    graph.add_edge("s", "t", capacity=5)
    network = flowcut_nx.network_from_graph(graph, "s", "t")
    flow = Flow.zero(network).try_set("s", "t", 2)
    residual = flowcut_nx.residual_graph(network, flow)
    assert residual["s"]["t"]["capacity"] == 3
    assert residual["t"]["s"]["capacity"] == 2
