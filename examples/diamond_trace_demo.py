import logging

import networkx as nx
from rich.console import Console

from pathsearch import AStar, ConsoleTracer, GraphAdjacency, ZeroHeuristic, load_settings

graph = nx.DiGraph()
graph.add_weighted_edges_from(
    [("S", "A", 1.0), ("S", "B", 4.0), ("A", "G", 1.0), ("B", "G", 1.0)]
)


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    console = Console()
    driver = AStar(
        GraphAdjacency(graph, goal="G"),
        ZeroHeuristic(),
        ConsoleTracer(console),
        settings=load_settings(),
    )
    result = driver.search("S", "G")
    console.print("path:", list(result.path))
    console.print("cost:", result.cost)
    console.print("stats:", result.stats)
