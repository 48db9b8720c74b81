"""Dijkstra shortest path with linear-scan selection over the location list."""
import math
from typing import Optional

from .config import Edge, SolverState
from .cost_policy import WeightFunction
from .graph import Graph
from .utils import setup_logging

logger = setup_logging()


class DijkstraSolver:
    """Single-source shortest distances using O(V^2) priority relaxation."""

    def __init__(self, graph: Graph):
        self.graph = graph

    def solve(
            self,
            origin: str,
            dest: Optional[str],
            weight_fn: WeightFunction
    ) -> SolverState:
        """
        Relax outward from origin until dest is settled or nothing finite remains.

        Args:
            origin: Start location
            dest: Location whose settlement ends the search, or None to settle all
            weight_fn: Scalar weight of an edge under the active policy

        Returns:
            SolverState with distances, predecessor nodes and predecessor edges
        """
        if not self.graph.has_node(origin):
            raise ValueError(f"Unknown origin location: {origin}")

        distances = {node: math.inf for node in self.graph.nodes}
        predecessors: dict[str, Optional[str]] = {node: None for node in self.graph.nodes}
        predecessor_edges: dict[str, Optional[Edge]] = {node: None for node in self.graph.nodes}
        distances[origin] = 0.0

        visited = set()
        unvisited = list(self.graph.nodes)

        while unvisited:
            current = None
            min_distance = math.inf

            # Strict comparison keeps the first node encountered on ties
            for node in unvisited:
                if distances[node] < min_distance:
                    min_distance = distances[node]
                    current = node

            if current is None:
                break

            unvisited.remove(current)
            visited.add(current)

            if current == dest:
                break

            for edge in self.graph.outgoing(current):
                if edge.dest in visited:
                    continue

                candidate = distances[current] + weight_fn(edge)
                if candidate < distances[edge.dest]:
                    distances[edge.dest] = candidate
                    predecessors[edge.dest] = current
                    predecessor_edges[edge.dest] = edge

        logger.debug(
            f"Dijkstra from {origin}: settled {len(visited)}/{self.graph.node_count} locations"
        )

        return SolverState(
            distances=distances,
            predecessors=predecessors,
            predecessor_edges=predecessor_edges
        )


def run_dijkstra(
        graph: Graph,
        origin: str,
        dest: Optional[str],
        weight_fn: WeightFunction
) -> SolverState:
    return DijkstraSolver(graph).solve(origin, dest, weight_fn)
