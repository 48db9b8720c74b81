"""
Bellman-Ford shortest path with negative cycle detection.

Also provides the delivery-planner entry points that work directly on a
location list and a route table.
"""
import math
from typing import Iterable, Optional, Union

from .config import Edge, Policy, PolicyParams, SolverState
from .cost_policy import WeightFunction, make_weight_function
from .graph import Graph
from .utils import setup_logging

logger = setup_logging()


class NegativeCycleError(Exception):
    """Raised when relaxation still improves after |V| - 1 passes."""

    def __init__(self, message: str, edge: Optional[Edge] = None):
        super().__init__(message)
        self.edge = edge


def _relax_all(
        locations: list[str],
        routes: tuple[Edge, ...],
        start: str,
        weight_fn: WeightFunction
) -> SolverState:
    distances = {location: math.inf for location in locations}
    predecessors: dict[str, Optional[str]] = {location: None for location in locations}
    predecessor_edges: dict[str, Optional[Edge]] = {location: None for location in locations}
    distances[start] = 0.0

    weights = [weight_fn(route) for route in routes]

    for _ in range(len(locations) - 1):
        for route, weight in zip(routes, weights):
            candidate = distances.get(route.origin, math.inf) + weight
            if candidate < distances.get(route.dest, math.inf):
                distances[route.dest] = candidate
                predecessors[route.dest] = route.origin
                predecessor_edges[route.dest] = route

    for route, weight in zip(routes, weights):
        if distances.get(route.origin, math.inf) + weight < distances.get(route.dest, math.inf):
            logger.error(
                f"Negative weight cycle detected at {route.origin}->{route.dest} ({route.mode.value})"
            )
            raise NegativeCycleError("Negative weight cycle detected in routes.", edge=route)

    return SolverState(
        distances=distances,
        predecessors=predecessors,
        predecessor_edges=predecessor_edges
    )


class BellmanFordSolver:
    """Single-source shortest distances by relaxing every edge |V| - 1 times."""

    def __init__(self, graph: Graph):
        self.graph = graph

    def solve(self, origin: str, weight_fn: WeightFunction) -> SolverState:
        if not self.graph.has_node(origin):
            raise ValueError(f"Unknown origin location: {origin}")

        state = _relax_all(list(self.graph.nodes), self.graph.edges, origin, weight_fn)

        reached = sum(1 for d in state.distances.values() if d < math.inf)
        logger.debug(
            f"Bellman-Ford from {origin}: {self.graph.node_count - 1} passes over "
            f"{len(self.graph)} edges, reached {reached}/{self.graph.node_count} locations"
        )
        return state


def run_bellman_ford(graph: Graph, origin: str, weight_fn: WeightFunction) -> SolverState:
    return BellmanFordSolver(graph).solve(origin, weight_fn)


def find_optimal_route(
        locations: list[str],
        routes: Iterable[Edge],
        start_location: str,
        metric: Union[Policy, str] = Policy.COMBO,
        params: PolicyParams = PolicyParams()
) -> tuple[dict[str, float], dict[str, Optional[str]]]:
    """
    Compute shortest delivery routes from a start location.

    Args:
        locations: Warehouses, hubs and customers; the pass count is len(locations) - 1
        routes: Available delivery routes
        start_location: Where deliveries start (e.g. a warehouse)
        metric: Policy selector, 'combo' by default

    Returns:
        Tuple of (total cost per location, previous location per location)
    """
    if start_location not in locations:
        raise ValueError(f"Start location {start_location} not in locations")

    weight_fn = make_weight_function(metric, params=params)
    state = _relax_all(list(locations), tuple(routes), start_location, weight_fn)

    return state.distances, state.predecessors


def get_optimal_path(
        previous_location: dict[str, Optional[str]],
        destination: str
) -> list[str]:
    """
    Walk predecessors from destination back to the root of its chain.

    The result starts at whatever location has no predecessor; callers
    compare its first element with the start location to detect an
    unreachable destination.
    """
    path = []
    seen = set()
    current: Optional[str] = destination

    while current is not None:
        if current in seen:
            logger.warning(f"Predecessor loop at {current} while walking back from {destination}")
            return []
        seen.add(current)
        path.insert(0, current)
        current = previous_location.get(current)

    return path
