"""Graph model: nodes, wires and the adjacency built from them.

The layout engine works on a snapshot of the document: an ordered list of
``Node`` and an ordered list of ``DirectedEdge``. ``GraphModel.build`` turns
that snapshot into a ``networkx.MultiDiGraph`` so parallel wires between the
same pair of components are kept (and counted) rather than merged.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

import networkx as nx

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Position:
    """A 2D canvas position (pivot)."""

    x: float
    y: float


@dataclass(frozen=True)
class Node:
    """A graph vertex: one component on the canvas."""

    id: int
    existing_position: Position | None = None


@dataclass(frozen=True)
class DirectedEdge:
    """A data-flow wire from one component's output to another's input."""

    from_id: int
    to_id: int


class GraphModel:
    """Adjacency view over a node/edge snapshot.

    Attributes:
        digraph: The underlying multigraph. Nodes are inserted in input order.
        nodes: The input nodes, in input order.
        dropped_edge_count: Number of edges ignored because an endpoint was
            not among the nodes.
    """

    def __init__(self, digraph: nx.MultiDiGraph, nodes: list[Node], dropped_edge_count: int = 0) -> None:
        self.digraph = digraph
        self.nodes = nodes
        self.dropped_edge_count = dropped_edge_count

    @classmethod
    def build(cls, nodes: Iterable[Node], edges: Iterable[DirectedEdge]) -> GraphModel:
        """Build adjacency from a flat list of nodes and directed edges.

        Edges referencing an id that is not among ``nodes`` are dropped without
        error. Runs in O(N + E) and never mutates its inputs.
        """
        node_list = list(nodes)
        g: nx.MultiDiGraph = nx.MultiDiGraph()
        for node in node_list:
            g.add_node(node.id)

        dropped = 0
        for edge in edges:
            if edge.from_id not in g or edge.to_id not in g:
                dropped += 1
                continue
            g.add_edge(edge.from_id, edge.to_id)

        if dropped:
            logger.debug("Dropped %d edge(s) with unknown endpoints", dropped)

        return cls(digraph=g, nodes=node_list, dropped_edge_count=dropped)

    @property
    def node_ids(self) -> list[int]:
        """Node ids in input order (duplicates collapsed to the first occurrence)."""
        return list(self.digraph.nodes)

    @property
    def edge_count(self) -> int:
        """Number of retained edges, parallel edges counted individually."""
        return self.digraph.number_of_edges()

    def outbound_neighbor_ids(self, node_id: int) -> list[int]:
        """Distinct targets of ``node_id``'s outgoing edges, first-seen order."""
        if node_id not in self.digraph:
            return []
        return list(self.digraph.successors(node_id))

    def inbound_neighbor_ids(self, node_id: int) -> list[int]:
        """Distinct sources of ``node_id``'s incoming edges, first-seen order."""
        if node_id not in self.digraph:
            return []
        return list(self.digraph.predecessors(node_id))

    def __len__(self) -> int:
        return self.digraph.number_of_nodes()

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.digraph
