"""Quickstart example for flowcut with NetworkX."""
import networkx as nx

from flowcut import maximum_flow, minimum_cut


def main() -> None:
    graph = nx.DiGraph()
    graph.add_edge("s", "a", capacity=3)
    graph.add_edge("s", "b", capacity=3)
    graph.add_edge("a", "t", capacity=3)
    graph.add_edge("b", "t", capacity=3)

    value, flow = maximum_flow(graph, "s", "t")
    print("flow value:", value)
    print("flow:", flow)
    print("min cut:", minimum_cut(graph, "s", "t"))


if __name__ == "__main__":
    main()
