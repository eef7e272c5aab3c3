import networkx as nx

from flowcut import maximum_flow, maximum_flow_value, minimum_cut


def _graphs():
    graphs = []
    G = nx.DiGraph()
    G.add_edge("s", "a", capacity=4)
    G.add_edge("a", "t", capacity=4)
    graphs.append(G)

    G = nx.DiGraph()
    G.add_edge("s", "m", capacity=2)
    G.add_edge("s", "t", capacity=2)
    G.add_edge("m", "t", capacity=2)
    graphs.append(G)

    G = nx.DiGraph()
    G.add_edge("s", 1, capacity=3)
    G.add_edge("s", 2, capacity=5)
    G.add_edge(1, 2, capacity=5)
    G.add_edge(2, 3, capacity=2)
    G.add_edge(1, "t", capacity=1)
    G.add_edge(3, "t", capacity=6)
    graphs.append(G)
    return graphs


def test_matches_networkx_value():
    for G in _graphs():
        assert maximum_flow_value(G, "s", "t") == nx.maximum_flow_value(G, "s", "t")


def test_matches_networkx_min_cut_value():
    for G in _graphs():
        cut_value, (source_side, sink_side) = minimum_cut(G, "s", "t")
        nx_value, _partition = nx.minimum_cut(G, "s", "t")
        assert cut_value == nx_value
        assert "s" in source_side and "t" in sink_side
        assert source_side | sink_side == set(G.nodes())


def test_flow_dict_matches_networkx_shape():
    G = _graphs()[1]
    value, flow_dict = maximum_flow(G, "s", "t")
    nx_value, nx_flow_dict = nx.maximum_flow(G, "s", "t")
    assert value == nx_value
    assert set(flow_dict) == set(nx_flow_dict)
    for u in G.nodes():
        assert set(flow_dict[u]) == set(G.successors(u))
