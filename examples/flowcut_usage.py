"""Example usage: step through augmentations and check the cut certificate."""
from __future__ import annotations

import logging

from flowcut import AugmentEngine, CutExtractor, DualityChecker, build_network


def build_example_network():
    return build_network(
        ["s", "x", "p", "y", "q", "t"],
        [
            ("s", "x", 1),
            ("x", "y", 1),
            ("y", "t", 1),
            ("s", "p", 1),
            ("p", "y", 1),
            ("x", "q", 1),
            ("q", "t", 1),
        ],
        "s",
        "t",
    )


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)
    network = build_example_network()
    engine = AugmentEngine(network)
    while True:
        path = engine.step()
        if path is None:
            break
        print("augmented along", path, "-> value", engine.flow.flow_value())

    cut = CutExtractor().from_engine(engine)
    report = DualityChecker().check(network, engine.flow, cut)
    print("source side:", sorted(cut.source_side))
    print("flow value:", report.flow_value, "cut capacity:", report.cut_capacity)
    print("duality holds:", report.holds)


if __name__ == "__main__":
    main()
