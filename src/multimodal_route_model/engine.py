"""Route engine: solve one origin-destination query under a chosen policy."""
from typing import Iterable, Mapping, Optional, Union

from .bellman_ford import BellmanFordSolver
from .config import (
    Edge, Policy, PolicyParams, RouteResult, RunSettings, SolverState, SolverType
)
from .cost_policy import make_weight_function, parse_policy, policy_label
from .dijkstra import DijkstraSolver
from .graph import Graph
from .path_reconstruction import build_route_result, reconstruct_path, recorded_segment_edges
from .utils import setup_logging, format_path_nodes

logger = setup_logging()


def parse_solver_type(value: Union[SolverType, str]) -> SolverType:
    if isinstance(value, SolverType):
        return value

    solver_str = str(value).lower().strip().replace("-", "_")
    try:
        return SolverType(solver_str)
    except ValueError:
        raise ValueError(
            f"Invalid solver: {value!r}. "
            f"Must be one of {[s.value for s in SolverType]}"
        )


class RouteEngine:
    """Answers optimal-route queries between a fixed origin and destination."""

    def __init__(
            self,
            graph: Graph,
            origin: str,
            destination: str,
            params: PolicyParams = PolicyParams(),
            solver: Union[SolverType, str] = SolverType.DIJKSTRA,
            weights: Optional[tuple[float, float]] = None
    ):
        if not graph.has_node(origin):
            raise ValueError(f"Unknown origin location: {origin}")
        if not graph.has_node(destination):
            raise ValueError(f"Unknown destination location: {destination}")

        self.graph = graph
        self.origin = origin
        self.destination = destination
        self.params = params
        self.default_solver = parse_solver_type(solver)
        self.default_weights = weights

    @classmethod
    def from_settings(cls, graph: Graph, settings: RunSettings) -> "RouteEngine":
        return cls(
            graph,
            settings.origin,
            settings.destination,
            params=settings.policy_params,
            solver=settings.solver_type,
            weights=(settings.time_weight, settings.cost_weight)
        )

    @property
    def edges(self) -> tuple[Edge, ...]:
        return self.graph.edges

    @property
    def nodes(self) -> tuple[str, ...]:
        return self.graph.nodes

    @property
    def coordinates(self) -> Mapping[str, tuple[float, float]]:
        return self.graph.coordinates

    def run_solver(
            self,
            policy: Union[Policy, str],
            weights: Optional[tuple[float, float]] = None,
            solver: Optional[Union[SolverType, str]] = None
    ) -> SolverState:
        """Run a solver and return its raw distance/predecessor state."""
        policy = parse_policy(policy)
        solver_type = parse_solver_type(solver) if solver is not None else self.default_solver
        if weights is None:
            weights = self.default_weights
        weight_fn = make_weight_function(policy, weights, self.params)

        if solver_type == SolverType.BELLMAN_FORD:
            return BellmanFordSolver(self.graph).solve(self.origin, weight_fn)
        return DijkstraSolver(self.graph).solve(self.origin, self.destination, weight_fn)

    def solve(
            self,
            policy: Union[Policy, str],
            weights: Optional[tuple[float, float]] = None,
            solver: Optional[Union[SolverType, str]] = None
    ) -> Optional[RouteResult]:
        """
        Find the optimal route from origin to destination.

        Args:
            policy: time, cost, distance, combined or combo
            weights: (time_weight, cost_weight) for the combined policy; engine default if omitted
            solver: Override the engine's default solver

        Returns:
            RouteResult, or None if the destination is unreachable

        Raises:
            UnknownPolicyError: policy is not a supported selector
            NegativeCycleError: Bellman-Ford found a negative cycle
        """
        policy = parse_policy(policy)
        solver_type = parse_solver_type(solver) if solver is not None else self.default_solver
        if weights is None:
            weights = self.default_weights

        state = self.run_solver(policy, weights, solver_type)

        if not state.is_reachable(self.destination):
            logger.info(
                f"No route {self.origin}->{self.destination} under {policy.value} ({solver_type.value})"
            )
            return None

        path = reconstruct_path(state.predecessors, self.origin, self.destination)
        if not path:
            return None

        result = build_route_result(
            self.graph,
            path,
            state,
            policy,
            policy_label(policy, weights, self.params),
            solver_type,
            segment_edges=recorded_segment_edges(path, state)
        )

        if result is not None:
            logger.debug(
                f"{result.optimization_type} ({solver_type.value}): {format_path_nodes(result.path)} "
                f"time={result.total_time:g} cost={result.total_cost:g} distance={result.total_distance:g}"
            )
        return result

    def find_best_route(self, factor: Union[Policy, str]) -> Optional[RouteResult]:
        return self.solve(factor)

    def find_compromise_route(self, time_weight: float, cost_weight: float) -> Optional[RouteResult]:
        return self.solve(Policy.COMBINED, (time_weight, cost_weight))

    def reconstruct_path(
            self,
            predecessors: dict[str, Optional[str]],
            destination: Optional[str] = None
    ) -> list[str]:
        return reconstruct_path(predecessors, self.origin, destination or self.destination)

    def compare_policies(
            self,
            policies: Optional[Iterable[Union[Policy, str]]] = None,
            weights: Optional[tuple[float, float]] = None,
            solver: Optional[Union[SolverType, str]] = None
    ) -> dict[Policy, Optional[RouteResult]]:
        """Solve each policy as an independent query."""
        if policies is None:
            policies = list(Policy)

        results = {}
        for policy in policies:
            policy = parse_policy(policy)
            results[policy] = self.solve(policy, weights, solver)

        found = sum(1 for r in results.values() if r is not None)
        logger.info(
            f"Compared {len(results)} policies for {self.origin}->{self.destination}: "
            f"{found} with a route"
        )
        return results
