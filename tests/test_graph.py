from dataclasses import FrozenInstanceError

import pytest

from multimodal_route_model.config import TransportMode
from multimodal_route_model.graph import Graph

from conftest import make_edge


def test_nodes_follow_first_appearance_order(full_graph):
    assert full_graph.nodes == (
        "Tambaram",
        "Anna Nagar",
        "St. Thomas Mount",
        "Anna Nagar East",
        "Chennai Egmore",
        "Airport Metro Station",
        "Alandur",
    )
    assert full_graph.node_count == 7
    assert len(full_graph) == 11


def test_parallel_edges_are_preserved(full_graph):
    direct = full_graph.edges_between("Tambaram", "Anna Nagar")
    assert [e.mode for e in direct] == [TransportMode.TAXI, TransportMode.SELF_DRIVE, TransportMode.BUS]
    assert full_graph.edges_between("Anna Nagar", "Tambaram") == ()


def test_identical_parallel_edges_are_not_deduplicated():
    edge = make_edge("A", "B")
    graph = Graph([edge, edge])
    assert len(graph.edges_between("A", "B")) == 2


def test_outgoing_lists_edges_in_graph_order(full_graph):
    outgoing = full_graph.outgoing("Tambaram")
    assert len(outgoing) == 6
    assert outgoing[0].mode == TransportMode.TAXI
    assert outgoing[-1].mode == TransportMode.BUS
    assert full_graph.outgoing("Anna Nagar") == ()
    assert full_graph.outgoing("Nowhere") == ()


def test_empty_graph_is_rejected():
    with pytest.raises(ValueError, match="at least one edge"):
        Graph([])


def test_graph_is_read_only(delivery):
    assert isinstance(delivery.edges, tuple)
    with pytest.raises(FrozenInstanceError):
        delivery.edges[0].time = 0.0
    with pytest.raises(TypeError):
        delivery.coordinates["Hub B"] = (0.0, 0.0)


def test_has_node(full_graph):
    assert full_graph.has_node("Alandur")
    assert not full_graph.has_node("Guindy")


def test_edge_value_for_rejects_unknown_dimension():
    edge = make_edge("A", "B", time=3, cost=4, distance=5)
    assert edge.value_for("cost") == 4
    with pytest.raises(ValueError):
        edge.value_for("mode")
