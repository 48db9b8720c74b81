from pathlib import Path
from typing import Optional

import pandas as pd

from .config import (
    Edge, TransportMode, RunSettings, SolverType, PolicyParams,
    MAX_TIME_MINUTES, MAX_COST, COMBO_COST_FACTOR,
    DEFAULT_TIME_WEIGHT, DEFAULT_COST_WEIGHT
)
from .geo import leg_distance_km
from .graph import Graph
from .utils import parse_optional_float, setup_logging

logger = setup_logging()


class InputLoader:

    REQUIRED_SHEETS = [
        "edges",
        "run_settings"
    ]

    def __init__(self, filepath: str):
        self.filepath = Path(filepath)
        if not self.filepath.exists():
            raise FileNotFoundError(f"Input file not found: {filepath}")

        self.excel = pd.ExcelFile(filepath)
        self._validate_required_sheets()

    def _validate_required_sheets(self):
        missing = [s for s in self.REQUIRED_SHEETS if s not in self.excel.sheet_names]
        if missing:
            raise ValueError(f"Missing required sheets: {missing}")

    def load_locations(self) -> dict[str, tuple[float, float]]:
        if "locations" not in self.excel.sheet_names:
            logger.info("No locations sheet found, edges must carry their own distance")
            return {}

        df = pd.read_excel(self.excel, sheet_name="locations")

        coordinates = {}
        for _, row in df.iterrows():
            name = str(row["location"]).strip()
            lat = parse_optional_float(row.get("lat"))
            lon = parse_optional_float(row.get("lon"))
            if lat is None or lon is None:
                raise ValueError(f"Location {name} missing coordinates")
            coordinates[name] = (lat, lon)

        logger.info(f"Loaded coordinates for {len(coordinates)} locations")
        return coordinates

    def load_edges(self, coordinates: dict[str, tuple[float, float]]) -> list[Edge]:
        df = pd.read_excel(self.excel, sheet_name="edges")

        edges = []
        derived = 0
        for idx, row in df.iterrows():
            origin = str(row["origin"]).strip()
            dest = str(row["dest"]).strip()
            mode_str = str(row["mode"]).lower().strip().replace(" ", "_")

            try:
                mode = TransportMode(mode_str)
            except ValueError:
                raise ValueError(
                    f"Invalid mode '{row['mode']}' on edge {origin}->{dest} (row {idx + 2}). "
                    f"Must be one of {[m.value for m in TransportMode]}"
                )

            time = parse_optional_float(row.get("time"))
            cost = parse_optional_float(row.get("cost"))
            if time is None or cost is None:
                raise ValueError(f"Edge {origin}->{dest} (row {idx + 2}) missing time or cost")

            distance = parse_optional_float(row.get("distance"))
            if distance is None:
                if not coordinates:
                    raise ValueError(
                        f"Edge {origin}->{dest} (row {idx + 2}) has no distance and no locations sheet"
                    )
                distance = leg_distance_km(origin, dest, coordinates)
                derived += 1

            edges.append(Edge(
                origin=origin,
                dest=dest,
                mode=mode,
                time=time,
                cost=cost,
                distance=distance
            ))

        logger.info(f"Loaded {len(edges)} edges ({derived} with distance derived from coordinates)")
        return edges

    def load_run_settings(self) -> RunSettings:
        df = pd.read_excel(self.excel, sheet_name="run_settings")

        settings = {}
        for _, row in df.iterrows():
            key = str(row["key"]).strip()
            value = row["value"]
            settings[key] = value

        missing = [k for k in ("origin", "destination") if pd.isna(settings.get(k))]
        if missing:
            raise ValueError(f"Missing required run settings: {missing}")

        solver_str = str(settings.get("solver", SolverType.DIJKSTRA.value)).lower().strip()
        try:
            solver_type = SolverType(solver_str)
        except ValueError:
            raise ValueError(
                f"Invalid solver: {solver_str}. "
                f"Must be one of {[e.value for e in SolverType]}"
            )

        run_settings = RunSettings(
            origin=str(settings["origin"]).strip(),
            destination=str(settings["destination"]).strip(),
            solver_type=solver_type,
            time_weight=_setting_float(settings, "time_weight", DEFAULT_TIME_WEIGHT),
            cost_weight=_setting_float(settings, "cost_weight", DEFAULT_COST_WEIGHT),
            policy_params=PolicyParams(
                max_time=_setting_float(settings, "max_time", MAX_TIME_MINUTES),
                max_cost=_setting_float(settings, "max_cost", MAX_COST),
                combo_cost_factor=_setting_float(settings, "combo_cost_factor", COMBO_COST_FACTOR)
            )
        )

        logger.info(f"Loaded run settings: {run_settings}")
        return run_settings

    def load_all(self) -> dict:
        coordinates = self.load_locations()
        edges = self.load_edges(coordinates)

        return {
            "graph": Graph(edges, coordinates=coordinates),
            "run_settings": self.load_run_settings()
        }


def _setting_float(settings: dict, key: str, default: float) -> float:
    value: Optional[float] = parse_optional_float(settings.get(key))
    return default if value is None else value
