"""Report generation for multimodal route model outputs."""
from typing import Optional

import pandas as pd

from .config import Policy, RouteResult
from .graph import Graph
from .utils import setup_logging, format_path_nodes

logger = setup_logging()


class ReportBuilder:

    def __init__(
            self,
            graph: Graph,
            results: dict[Policy, Optional[RouteResult]]
    ):
        self.graph = graph
        self.results = results

    def build_policy_summary_df(self) -> pd.DataFrame:
        rows = []
        for policy, result in self.results.items():
            if result is None:
                rows.append({
                    "policy": policy.value,
                    "optimization_type": None,
                    "solver": None,
                    "reachable": False,
                    "path": None,
                    "modes": None,
                    "num_segments": 0,
                    "total_time": None,
                    "total_cost": None,
                    "total_distance": None,
                    "score": None
                })
                continue

            rows.append({
                "policy": policy.value,
                "optimization_type": result.optimization_type,
                "solver": result.solver.value,
                "reachable": True,
                "path": format_path_nodes(result.path),
                "modes": ",".join(result.modes),
                "num_segments": result.num_segments,
                "total_time": result.total_time,
                "total_cost": result.total_cost,
                "total_distance": result.total_distance,
                "score": result.score
            })

        df = pd.DataFrame(rows)
        logger.info(f"Built policy_summary with {len(df)} rows")
        return df

    def build_route_legs_df(self) -> pd.DataFrame:
        """
        One row per leg of every found route, in travel order.

        Cumulative columns let a renderer label each stop without
        recomputing totals.
        """
        rows = []
        for policy, result in self.results.items():
            if result is None:
                continue

            cum_time = cum_cost = cum_distance = 0.0
            for seq, edge in enumerate(result.legs, start=1):
                cum_time += edge.time
                cum_cost += edge.cost
                cum_distance += edge.distance
                from_coord = self.graph.coordinates.get(edge.origin, (None, None))
                to_coord = self.graph.coordinates.get(edge.dest, (None, None))

                rows.append({
                    "policy": policy.value,
                    "leg_sequence": seq,
                    "from_location": edge.origin,
                    "to_location": edge.dest,
                    "mode": edge.mode.value,
                    "time": edge.time,
                    "cost": edge.cost,
                    "distance": edge.distance,
                    "cumulative_time": cum_time,
                    "cumulative_cost": cum_cost,
                    "cumulative_distance": cum_distance,
                    "from_lat": from_coord[0],
                    "from_lon": from_coord[1],
                    "to_lat": to_coord[0],
                    "to_lon": to_coord[1]
                })

        df = pd.DataFrame(rows)
        logger.info(f"Built route_legs with {len(df)} rows")
        return df

    def build_network_edges_df(self) -> pd.DataFrame:
        """All edges, flagged with the policies whose route uses them."""
        used_by = {}
        for policy, result in self.results.items():
            if result is None:
                continue
            for edge in result.legs:
                used_by.setdefault(edge, []).append(policy.value)

        rows = []
        for edge in self.graph.edges:
            rows.append({
                "origin": edge.origin,
                "dest": edge.dest,
                "mode": edge.mode.value,
                "time": edge.time,
                "cost": edge.cost,
                "distance": edge.distance,
                "used_by_policies": ",".join(used_by.get(edge, []))
            })

        df = pd.DataFrame(rows)
        logger.info(f"Built network_edges with {len(df)} rows")
        return df


def build_all_reports(
        graph: Graph,
        results: dict[Policy, Optional[RouteResult]]
) -> dict[str, pd.DataFrame]:
    builder = ReportBuilder(graph, results)

    return {
        "policy_summary": builder.build_policy_summary_df(),
        "route_legs": builder.build_route_legs_df(),
        "network_edges": builder.build_network_edges_df()
    }
