import math

import pytest

from multimodal_route_model.config import TransportMode
from multimodal_route_model.cost_policy import make_weight_function
from multimodal_route_model.dijkstra import DijkstraSolver, run_dijkstra
from multimodal_route_model.graph import Graph

from conftest import make_edge


def test_direct_taxi_wins_on_time_in_full_network(full_graph):
    state = run_dijkstra(full_graph, "Tambaram", "Anna Nagar", make_weight_function("time"))
    assert state.distances["Anna Nagar"] == 35
    assert state.predecessors["Anna Nagar"] == "Tambaram"
    assert state.predecessor_edges["Anna Nagar"].mode == TransportMode.TAXI


def test_direct_bus_wins_on_cost_in_full_network(full_graph):
    state = run_dijkstra(full_graph, "Tambaram", "Anna Nagar", make_weight_function("cost"))
    assert state.distances["Anna Nagar"] == 35
    assert state.predecessor_edges["Anna Nagar"].mode == TransportMode.BUS


def test_equal_distance_keeps_first_found_edge(full_graph):
    # taxi, self_drive and bus are all 28 km; the first relaxation stands
    state = run_dijkstra(full_graph, "Tambaram", "Anna Nagar", make_weight_function("distance"))
    assert state.distances["Anna Nagar"] == 28
    assert state.predecessor_edges["Anna Nagar"].mode == TransportMode.TAXI


def test_transit_time_route(transit_graph):
    state = run_dijkstra(transit_graph, "Tambaram", "Anna Nagar", make_weight_function("time"))
    assert state.distances["Anna Nagar"] == 65
    assert state.predecessors["Anna Nagar"] == "Anna Nagar East"
    assert state.predecessors["Anna Nagar East"] == "St. Thomas Mount"
    assert state.predecessors["St. Thomas Mount"] == "Tambaram"


def test_transit_cost_tie_keeps_first_settled_route(transit_graph):
    # Both St. Thomas Mount and Airport Metro routes cost 70; Alandur relaxes first
    state = run_dijkstra(transit_graph, "Tambaram", "Anna Nagar", make_weight_function("cost"))
    assert state.distances["Anna Nagar"] == 70
    assert state.predecessors["Anna Nagar"] == "Alandur"
    assert state.predecessors["Alandur"] == "Airport Metro Station"


def test_stops_once_destination_is_settled(full_graph):
    state = run_dijkstra(full_graph, "Tambaram", "Anna Nagar", make_weight_function("time"))
    # Chennai Egmore (35) ties with Anna Nagar but comes later, so is never expanded
    assert state.distances["Anna Nagar East"] == 60
    assert state.predecessors["Anna Nagar East"] == "St. Thomas Mount"


def test_settles_everything_without_destination(full_graph):
    state = DijkstraSolver(full_graph).solve("Tambaram", None, make_weight_function("time"))
    assert all(state.is_reachable(node) for node in full_graph.nodes)
    assert state.distances["Alandur"] == 50


def test_unreachable_nodes_stay_infinite(full_graph):
    state = run_dijkstra(full_graph, "Anna Nagar", "Tambaram", make_weight_function("time"))
    assert state.distances["Anna Nagar"] == 0
    assert state.distances["Tambaram"] == math.inf
    assert state.predecessors["Tambaram"] is None
    assert not state.is_reachable("Tambaram")


def test_unknown_origin(full_graph):
    with pytest.raises(ValueError, match="Unknown origin"):
        run_dijkstra(full_graph, "Guindy", "Anna Nagar", make_weight_function("time"))


def test_min_selection_tie_break_is_first_in_node_order():
    graph = Graph([
        make_edge("S", "A", time=1),
        make_edge("S", "B", time=1),
        make_edge("A", "T", time=1),
        make_edge("B", "T", time=1),
    ])
    state = run_dijkstra(graph, "S", "T", make_weight_function("time"))
    assert state.distances["T"] == 2
    assert state.predecessors["T"] == "A"
