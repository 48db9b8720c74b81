import pandas as pd
import pytest

from multimodal_route_model.config import SolverType, TransportMode
from multimodal_route_model.io_loader import InputLoader


def _write_workbook(path, edges, run_settings, locations=None):
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        if edges is not None:
            pd.DataFrame(edges).to_excel(writer, sheet_name="edges", index=False)
        if run_settings is not None:
            pd.DataFrame(
                [{"key": k, "value": v} for k, v in run_settings.items()]
            ).to_excel(writer, sheet_name="run_settings", index=False)
        if locations is not None:
            pd.DataFrame(locations).to_excel(writer, sheet_name="locations", index=False)
    return path


EDGES = [
    {"origin": "Warehouse A", "dest": "Hub B", "mode": "Bike", "time": 30, "cost": 5, "distance": 2.2},
    {"origin": "Hub B", "dest": "Customer D", "mode": "Van", "time": 15, "cost": 2, "distance": None},
    {"origin": "Warehouse A", "dest": "Customer D", "mode": "Self Drive", "time": 50, "cost": 9, "distance": 4.0},
]

LOCATIONS = [
    {"location": "Warehouse A", "lat": 13.010, "lon": 80.230},
    {"location": "Hub B", "lat": 13.012, "lon": 80.250},
    {"location": "Customer D", "lat": 13.035, "lon": 80.255},
]

SETTINGS = {
    "origin": "Warehouse A",
    "destination": "Customer D",
    "solver": "bellman_ford",
    "time_weight": 0.7,
    "cost_weight": 0.3,
    "max_cost": 10,
}


def test_load_all(tmp_path):
    path = _write_workbook(tmp_path / "input.xlsx", EDGES, SETTINGS, LOCATIONS)
    data = InputLoader(str(path)).load_all()

    graph = data["graph"]
    assert graph.nodes == ("Warehouse A", "Hub B", "Customer D")
    assert [e.mode for e in graph.edges] == [TransportMode.BIKE, TransportMode.VAN, TransportMode.SELF_DRIVE]
    assert graph.edges[0].distance == pytest.approx(2.2)
    # Blank distance derived from coordinates
    assert graph.edges[1].distance > 0
    assert graph.coordinates["Hub B"] == (13.012, 80.250)

    settings = data["run_settings"]
    assert settings.origin == "Warehouse A"
    assert settings.destination == "Customer D"
    assert settings.solver_type == SolverType.BELLMAN_FORD
    assert settings.time_weight == pytest.approx(0.7)
    assert settings.cost_weight == pytest.approx(0.3)
    assert settings.policy_params.max_cost == 10
    assert settings.policy_params.max_time == 120
    assert settings.policy_params.combo_cost_factor == 0.5


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        InputLoader(str(tmp_path / "missing.xlsx"))


def test_missing_required_sheet(tmp_path):
    path = _write_workbook(tmp_path / "input.xlsx", EDGES, None, LOCATIONS)
    with pytest.raises(ValueError, match="run_settings"):
        InputLoader(str(path))


def test_blank_distance_needs_locations(tmp_path):
    path = _write_workbook(tmp_path / "input.xlsx", EDGES, SETTINGS)
    with pytest.raises(ValueError, match="no distance"):
        InputLoader(str(path)).load_all()


def test_invalid_mode(tmp_path):
    edges = [dict(EDGES[0], mode="Hovercraft")]
    path = _write_workbook(tmp_path / "input.xlsx", edges, SETTINGS, LOCATIONS)
    with pytest.raises(ValueError, match="Invalid mode"):
        InputLoader(str(path)).load_all()


def test_invalid_solver(tmp_path):
    path = _write_workbook(tmp_path / "input.xlsx", EDGES, dict(SETTINGS, solver="astar"), LOCATIONS)
    with pytest.raises(ValueError, match="Invalid solver"):
        InputLoader(str(path)).load_run_settings()


def test_missing_origin_setting(tmp_path):
    settings = {k: v for k, v in SETTINGS.items() if k != "origin"}
    path = _write_workbook(tmp_path / "input.xlsx", EDGES, settings, LOCATIONS)
    with pytest.raises(ValueError, match="origin"):
        InputLoader(str(path)).load_run_settings()
