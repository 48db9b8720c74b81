"""Path reconstruction: predecessor walks and concrete edge resolution per segment."""
import math
from typing import Optional

from .config import (
    Edge, Policy, RouteResult, SolverState, SolverType, DISTANCE_MATCH_TOLERANCE
)
from .cost_policy import is_single_dimension
from .graph import Graph
from .utils import setup_logging, format_path_nodes

logger = setup_logging()


def reconstruct_path(
        predecessors: dict[str, Optional[str]],
        origin: str,
        destination: str
) -> list[str]:
    """
    Walk predecessors back from destination to origin.

    Returns an empty list when the chain never reaches origin, which callers
    treat as no valid route.
    """
    path = []
    seen = set()
    current: Optional[str] = destination

    while current is not None:
        if current in seen:
            logger.warning(f"Predecessor loop at {current} reconstructing {origin}->{destination}")
            return []
        seen.add(current)
        path.insert(0, current)

        if current == origin:
            return path

        current = predecessors.get(current)

    logger.warning(
        f"Broken predecessor chain reconstructing {origin}->{destination}: "
        f"walk stopped at {path[0]}"
    )
    return []


def recorded_segment_edges(path: list[str], state: SolverState) -> Optional[list[Edge]]:
    """Edges the solver recorded for each segment, or None if any is missing."""
    edges = []
    for from_node, to_node in zip(path, path[1:]):
        edge = state.predecessor_edges.get(to_node)
        if edge is None or edge.origin != from_node or edge.dest != to_node:
            return None
        edges.append(edge)
    return edges


def _match_parallel_edge(
        candidates: tuple[Edge, ...],
        policy: Policy,
        distance_from: float,
        distance_to: float,
        tolerance: float
) -> Edge:
    if is_single_dimension(policy):
        dimension = policy.value
        for edge in candidates:
            if abs(distance_from + edge.value_for(dimension) - distance_to) < tolerance:
                return edge
        return min(candidates, key=lambda e: e.value_for(dimension))

    # Cumulative composite scores can't identify the edge; fall back to fastest
    return min(candidates, key=lambda e: e.time)


def resolve_segment_edges(
        graph: Graph,
        path: list[str],
        distances: dict[str, float],
        policy: Policy,
        tolerance: float = DISTANCE_MATCH_TOLERANCE
) -> Optional[list[Edge]]:
    """
    Re-derive the concrete edge used for each path segment.

    For single-dimension policies the edge whose value closes the gap
    between the recorded distances is chosen, falling back to the minimum
    value of that dimension. Composite policies take the fastest parallel
    edge. Returns None if any segment has no connecting edge.
    """
    edges = []
    for from_node, to_node in zip(path, path[1:]):
        candidates = graph.edges_between(from_node, to_node)
        if not candidates:
            logger.warning(f"No edge connects {from_node}->{to_node} on path {format_path_nodes(path)}")
            return None

        edges.append(_match_parallel_edge(
            candidates,
            policy,
            distances.get(from_node, math.inf),
            distances.get(to_node, math.inf),
            tolerance
        ))

    return edges


def build_route_result(
        graph: Graph,
        path: list[str],
        state: SolverState,
        policy: Policy,
        optimization_type: str,
        solver: SolverType,
        segment_edges: Optional[list[Edge]] = None
) -> Optional[RouteResult]:
    """
    Total up a reconstructed path into a RouteResult.

    Args:
        graph: Graph the path was solved on
        path: Ordered locations from origin to destination
        state: Solver output for the query
        policy: Policy the solver ran under
        optimization_type: Label for the result
        solver: Which solver produced the state
        segment_edges: Concrete edges per segment; resolved from distances if omitted

    Returns:
        RouteResult, or None if the path is too short or any segment can't be resolved
    """
    if len(path) < 2:
        return None

    if segment_edges is None:
        segment_edges = resolve_segment_edges(graph, path, state.distances, policy)
        if segment_edges is None:
            return None

    if len(segment_edges) != len(path) - 1:
        raise ValueError(
            f"Expected {len(path) - 1} segment edges for {format_path_nodes(path)}, "
            f"got {len(segment_edges)}"
        )

    return RouteResult(
        path=tuple(path),
        modes=tuple(edge.mode.value for edge in segment_edges),
        legs=tuple(segment_edges),
        total_time=sum(edge.time for edge in segment_edges),
        total_cost=sum(edge.cost for edge in segment_edges),
        total_distance=sum(edge.distance for edge in segment_edges),
        score=state.distances[path[-1]],
        optimization_type=optimization_type,
        policy=policy,
        solver=solver
    )
