"""Immutable directed multigraph of transport edges between named locations."""
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from .config import Edge
from .utils import setup_logging

logger = setup_logging()


class Graph:
    """
    Ordered collection of edges plus the derived set of locations.

    Locations are every edge endpoint, in order of first appearance (origin
    before destination within each edge). That order drives deterministic
    tie-breaking in the solvers. Parallel edges are kept as given.
    """

    def __init__(
            self,
            edges: Iterable[Edge],
            coordinates: Optional[Mapping[str, tuple[float, float]]] = None
    ):
        self._edges = tuple(edges)
        if not self._edges:
            raise ValueError("Graph requires at least one edge")

        self._coordinates = MappingProxyType(dict(coordinates or {}))

        self._build_lookups()

    def _build_lookups(self):
        nodes = {}
        for edge in self._edges:
            nodes.setdefault(edge.origin, None)
            nodes.setdefault(edge.dest, None)
        self._nodes = tuple(nodes)
        self._node_set = frozenset(self._nodes)

        outgoing = {node: [] for node in self._nodes}
        between = {}
        for edge in self._edges:
            outgoing[edge.origin].append(edge)
            between.setdefault((edge.origin, edge.dest), []).append(edge)

        self._outgoing = {node: tuple(edges) for node, edges in outgoing.items()}
        self._between = {pair: tuple(edges) for pair, edges in between.items()}

        logger.debug(
            f"Graph built: {len(self._nodes)} locations, {len(self._edges)} edges, "
            f"{sum(1 for e in self._between.values() if len(e) > 1)} parallel edge groups"
        )

    @property
    def edges(self) -> tuple[Edge, ...]:
        return self._edges

    @property
    def nodes(self) -> tuple[str, ...]:
        return self._nodes

    @property
    def coordinates(self) -> Mapping[str, tuple[float, float]]:
        return self._coordinates

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    def has_node(self, name: str) -> bool:
        return name in self._node_set

    def outgoing(self, node: str) -> tuple[Edge, ...]:
        return self._outgoing.get(node, ())

    def edges_between(self, origin: str, dest: str) -> tuple[Edge, ...]:
        """All parallel edges from origin to dest, in graph order."""
        return self._between.get((origin, dest), ())

    def __len__(self) -> int:
        return len(self._edges)

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self._nodes)}, edges={len(self._edges)})"
