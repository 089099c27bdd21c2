"""
Generate random graphs and time the per-node statistics on their largest component.
"""

from __future__ import annotations

import argparse
import logging

from tiny_graphstats.analysis import analyze_nodes
from tiny_graphstats.graph.builders import random_graph
from tiny_graphstats.graph.utilities import count_connections
from tiny_graphstats.utils.profiling import Profiler


PROFILES = {
    "small": {
        "nodes": 64,
        "connections": 160,
    },
    "medium": {
        "nodes": 256,
        "connections": 768,
    },
    "large": {
        "nodes": 1024,
        "connections": 4096,
    },
}


def _apply_profile(args: argparse.Namespace) -> argparse.Namespace:
    profile_cfg = PROFILES.get(args.profile)
    if not profile_cfg:
        return args
    for key, value in profile_cfg.items():
        if getattr(args, key) is None:
            setattr(args, key, value)
    return args


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--profile", choices=PROFILES.keys(), default="small")
    parser.add_argument("--nodes", type=int, default=None)
    parser.add_argument("--connections", type=int, default=None)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--tsv", action="store_true", help="Print the per-node table.")
    parser.add_argument("--verbose", action="store_true")
    return _apply_profile(parser.parse_args())


def main() -> None:
    args = parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    graph = random_graph(args.nodes, args.connections, rng=args.seed)
    profiler = Profiler()
    report = analyze_nodes(graph, profiler=profiler)

    print("=== Graph Diagnostics ===")
    print(f"Nodes: {graph.size()} ({count_connections(graph)} connections)")
    print(f"Components: {report.num_components}, largest: {report.size()}")
    print(f"Isolated nodes: {report.isolated_nodes}, leaf nodes: {report.leaf_nodes}")
    for name, value in report.summary().items():
        print(f"  {name:<4}{value:9.5f}")
    print("Timings:")
    for line in profiler.format_results(report.size()):
        print(f"  {line}")
    if args.tsv:
        print(report.to_tsv(), end="")


if __name__ == "__main__":
    main()
