"""
Diagnostic tool for tracing a single route query.
"""

# =============================================================================
# CONFIGURATION - EDIT THESE VALUES
# =============================================================================
DATASET = "chennai"     # "chennai" or "delivery"
POLICY = "combined"
WEIGHTS = (0.5, 0.5)    # (time_weight, cost_weight), combined policy only
# =============================================================================

import logging
import math
from typing import Optional

from multimodal_route_model.bellman_ford import NegativeCycleError
from multimodal_route_model.config import RouteResult, SolverState, SolverType
from multimodal_route_model.cost_policy import make_weight_function, parse_policy
from multimodal_route_model.datasets import load_dataset
from multimodal_route_model.engine import RouteEngine
from multimodal_route_model.graph import Graph
from multimodal_route_model.path_reconstruction import reconstruct_path
from multimodal_route_model.utils import format_path_nodes

# Suppress verbose logging from other modules
logging.getLogger("route_model").setLevel(logging.WARNING)


def print_section(title: str):
    """Print a section header."""
    print(f"\n{'=' * 70}")
    print(f" {title}")
    print('=' * 70)


def print_state(state: SolverState, graph: Graph):
    """Print distance and predecessor for each location in graph order."""
    print(f"\n  {'Location':<25} {'Distance':>12}  Via")
    for node in graph.nodes:
        dist = state.distances.get(node, math.inf)
        dist_str = "unreached" if dist == math.inf else f"{dist:.4f}"
        edge = state.predecessor_edges.get(node)
        via = f"{edge.origin} ({edge.mode.value})" if edge else "-"
        print(f"  {node:<25} {dist_str:>12}  {via}")


def print_route(result: Optional[RouteResult]):
    if result is None:
        print("\n  No route found")
        return

    print(f"\n  {result.optimization_type} [{result.solver.value}]")
    print(f"  Path: {format_path_nodes(result.path)}")
    for seq, edge in enumerate(result.legs, start=1):
        print(
            f"    {seq}. {edge.origin} → {edge.dest} by {edge.mode.value}: "
            f"{edge.time:g} min, {edge.cost:g} cost, {edge.distance:g} km"
        )
    print(
        f"  Totals: {result.total_time:g} min, {result.total_cost:g} cost, "
        f"{result.total_distance:g} km (score {result.score:.4f})"
    )


def diagnose_query(
        graph: Graph,
        origin: str,
        destination: str,
        policy: str,
        weights: Optional[tuple[float, float]] = None
):
    """
    Trace one query through both solvers.
    Shows the raw distance tables and the reconstructed routes.
    """
    policy = parse_policy(policy)
    print_section(f"DIAGNOSTIC: {origin} → {destination} ({policy.value})")
    print(f"\n  {graph.node_count} locations, {len(graph)} edges")

    engine = RouteEngine(graph, origin, destination)
    weight_fn = make_weight_function(policy, weights, engine.params)

    print("\n  Edge weights under policy:")
    for edge in graph.edges:
        print(f"    {edge.origin} → {edge.dest} ({edge.mode.value}): {weight_fn(edge):.4f}")

    for solver in SolverType:
        print_section(f"SOLVER: {solver.value}")
        try:
            state = engine.run_solver(policy, weights, solver)
        except NegativeCycleError as e:
            print(f"\n  {e}")
            continue

        print_state(state, graph)
        path = reconstruct_path(state.predecessors, origin, destination)
        print(f"\n  Predecessor chain: {format_path_nodes(path) or '(broken)'}")
        print_route(engine.solve(policy, weights, solver))


if __name__ == "__main__":
    data = load_dataset(DATASET)
    settings = data["run_settings"]
    diagnose_query(data["graph"], settings.origin, settings.destination, POLICY, WEIGHTS)
