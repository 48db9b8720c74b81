import pytest

from multimodal_route_model.config import Edge, TransportMode
from multimodal_route_model.datasets import (
    build_chennai_edges, chennai_graph, delivery_graph,
    CHENNAI_ORIGIN, CHENNAI_DESTINATION
)
from multimodal_route_model.graph import Graph


def make_edge(origin, dest, mode="bus", time=1.0, cost=1.0, distance=1.0) -> Edge:
    return Edge(
        origin=origin,
        dest=dest,
        mode=TransportMode(mode),
        time=float(time),
        cost=float(cost),
        distance=float(distance),
    )


@pytest.fixture
def full_graph() -> Graph:
    return chennai_graph()


@pytest.fixture
def transit_graph() -> Graph:
    """Chennai network without the three direct Tambaram -> Anna Nagar edges."""
    edges = [
        e for e in build_chennai_edges()
        if not (e.origin == CHENNAI_ORIGIN and e.dest == CHENNAI_DESTINATION)
    ]
    return Graph(edges)


@pytest.fixture
def delivery() -> Graph:
    return delivery_graph()
