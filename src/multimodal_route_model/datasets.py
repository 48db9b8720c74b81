"""Built-in network tables: Chennai commute options and a delivery hub network."""
from .config import Edge, TransportMode, RunSettings, SolverType
from .geo import leg_distance_km
from .graph import Graph

# (origin, dest, mode, time_min, cost_rs, distance_km)
CHENNAI_COMMUTE_ROUTES = [
    ("Tambaram", "Anna Nagar", "taxi", 35, 775, 28),
    ("Tambaram", "Anna Nagar", "self_drive", 40, 325, 28),
    ("Tambaram", "St. Thomas Mount", "train", 25, 30, 15),
    ("St. Thomas Mount", "Anna Nagar East", "metro", 35, 40, 12),
    ("Anna Nagar East", "Anna Nagar", "walk", 5, 0, 1),
    ("Tambaram", "Chennai Egmore", "train", 35, 35, 20),
    ("Chennai Egmore", "Anna Nagar East", "metro", 40, 40, 12),
    ("Tambaram", "Airport Metro Station", "bus", 30, 20, 18),
    ("Airport Metro Station", "Alandur", "metro", 20, 25, 8),
    ("Alandur", "Anna Nagar", "metro", 25, 25, 10),
    ("Tambaram", "Anna Nagar", "bus", 120, 35, 28),
]

CHENNAI_ORIGIN = "Tambaram"
CHENNAI_DESTINATION = "Anna Nagar"

# (origin, dest, mode, time_min, cost_usd); distance derived from coordinates
DELIVERY_ROUTES = [
    ("Warehouse A", "Hub B", "bike", 30, 5),
    ("Warehouse A", "Hub C", "van", 45, 8),
    ("Hub B", "Hub D", "bike", 20, 3),
    ("Hub B", "Hub C", "van", 15, 2),
    ("Hub C", "Hub D", "van", 30, 6),
    ("Hub C", "Hub E", "drone", 10, 4),
    ("Hub E", "Hub D", "drone", 10, 4),
    ("Hub D", "Customer D", "van", 15, 2),
    ("Hub E", "Customer D", "drone", 15, 3),
]

DELIVERY_LOCATIONS = ["Warehouse A", "Hub B", "Hub C", "Hub D", "Hub E", "Customer D"]

DELIVERY_COORDINATES = {
    "Warehouse A": (13.010, 80.230),
    "Hub B": (13.012, 80.250),
    "Hub C": (13.020, 80.240),
    "Hub D": (13.030, 80.245),
    "Hub E": (13.025, 80.260),
    "Customer D": (13.035, 80.255),
}

DELIVERY_ORIGIN = "Warehouse A"
DELIVERY_DESTINATION = "Customer D"


def build_chennai_edges() -> list[Edge]:
    return [
        Edge(
            origin=origin,
            dest=dest,
            mode=TransportMode(mode),
            time=float(time),
            cost=float(cost),
            distance=float(distance)
        )
        for origin, dest, mode, time, cost, distance in CHENNAI_COMMUTE_ROUTES
    ]


def build_delivery_edges() -> list[Edge]:
    return [
        Edge(
            origin=origin,
            dest=dest,
            mode=TransportMode(mode),
            time=float(time),
            cost=float(cost),
            distance=leg_distance_km(origin, dest, DELIVERY_COORDINATES)
        )
        for origin, dest, mode, time, cost in DELIVERY_ROUTES
    ]


def chennai_graph() -> Graph:
    return Graph(build_chennai_edges())


def delivery_graph() -> Graph:
    return Graph(build_delivery_edges(), coordinates=DELIVERY_COORDINATES)


DATASETS = {
    "chennai": (chennai_graph, CHENNAI_ORIGIN, CHENNAI_DESTINATION),
    "delivery": (delivery_graph, DELIVERY_ORIGIN, DELIVERY_DESTINATION),
}


def load_dataset(name: str) -> dict:
    """Build a named built-in dataset in the same shape InputLoader.load_all returns."""
    if name not in DATASETS:
        raise ValueError(f"Unknown dataset: {name}. Must be one of {sorted(DATASETS)}")

    graph_factory, origin, destination = DATASETS[name]
    graph = graph_factory()
    solver = SolverType.BELLMAN_FORD if name == "delivery" else SolverType.DIJKSTRA

    return {
        "graph": graph,
        "run_settings": RunSettings(origin=origin, destination=destination, solver_type=solver)
    }
