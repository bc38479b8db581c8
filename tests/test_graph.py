"""Tests for graph.py - adjacency building from node/edge snapshots."""

from __future__ import annotations

from ghjson_layout.graph import DirectedEdge, GraphModel, Node, Position

# ─── Helpers ──────────────────────────────────────────────────────────────────


def make_nodes(*ids: int) -> list[Node]:
    """Build nodes with no existing position."""
    return [Node(id=i) for i in ids]


def make_edges(*pairs: tuple[int, int]) -> list[DirectedEdge]:
    """Build edges from (from_id, to_id) pairs."""
    return [DirectedEdge(from_id=a, to_id=b) for a, b in pairs]


# ─── GraphModel.build Tests ───────────────────────────────────────────────────


class TestGraphModelBuild:
    def test_registers_outbound_and_inbound(self):
        """1 → 2 registers 2 as outbound of 1 and 1 as inbound of 2."""
        g = GraphModel.build(make_nodes(1, 2), make_edges((1, 2)))
        assert g.outbound_neighbor_ids(1) == [2]
        assert g.inbound_neighbor_ids(2) == [1]
        assert g.inbound_neighbor_ids(1) == []
        assert g.outbound_neighbor_ids(2) == []

    def test_node_order_preserved(self):
        """node_ids follows input order, not id order."""
        g = GraphModel.build(make_nodes(3, 1, 2), [])
        assert g.node_ids == [3, 1, 2]

    def test_edge_with_unknown_target_dropped(self):
        """An edge to an id outside the node set is ignored without error."""
        g = GraphModel.build(make_nodes(1, 2), make_edges((1, 2), (1, 99)))
        assert g.outbound_neighbor_ids(1) == [2]
        assert g.edge_count == 1
        assert g.dropped_edge_count == 1
        assert 99 not in g

    def test_edge_with_unknown_source_dropped(self):
        """An edge from an unknown id leaves the target without inbound neighbours."""
        g = GraphModel.build(make_nodes(1), make_edges((42, 1)))
        assert g.inbound_neighbor_ids(1) == []
        assert g.dropped_edge_count == 1

    def test_multi_edges_kept(self):
        """Parallel wires are counted but the neighbour is listed once."""
        g = GraphModel.build(make_nodes(1, 2), make_edges((1, 2), (1, 2)))
        assert g.edge_count == 2
        assert g.outbound_neighbor_ids(1) == [2]
        assert g.inbound_neighbor_ids(2) == [1]

    def test_neighbours_in_first_seen_order(self):
        """Outbound neighbours keep the order their first edge appeared in."""
        g = GraphModel.build(make_nodes(1, 2, 3, 4), make_edges((1, 4), (1, 2), (1, 4), (1, 3)))
        assert g.outbound_neighbor_ids(1) == [4, 2, 3]

    def test_self_loop(self):
        """A self-loop makes the node its own inbound and outbound neighbour."""
        g = GraphModel.build(make_nodes(1), make_edges((1, 1)))
        assert g.outbound_neighbor_ids(1) == [1]
        assert g.inbound_neighbor_ids(1) == [1]

    def test_unknown_node_has_no_neighbours(self):
        """Asking about an id outside the graph returns empty lists."""
        g = GraphModel.build(make_nodes(1), [])
        assert g.outbound_neighbor_ids(7) == []
        assert g.inbound_neighbor_ids(7) == []

    def test_duplicate_ids_collapse(self):
        """A repeated node id is registered once, at its first position."""
        g = GraphModel.build(make_nodes(1, 2, 1), [])
        assert g.node_ids == [1, 2]
        assert len(g) == 2

    def test_empty_graph(self):
        """No nodes, no edges - empty model."""
        g = GraphModel.build([], [])
        assert len(g) == 0
        assert g.node_ids == []
        assert g.edge_count == 0

    def test_inputs_not_mutated(self):
        """build never alters the caller's lists."""
        nodes = [Node(id=1, existing_position=Position(5.0, 5.0)), Node(id=2)]
        edges = make_edges((1, 2), (2, 99))
        nodes_copy = list(nodes)
        edges_copy = list(edges)
        GraphModel.build(nodes, edges)
        assert nodes == nodes_copy
        assert edges == edges_copy

    def test_accepts_generators(self):
        """Nodes and edges may be any iterable."""
        g = GraphModel.build((Node(id=i) for i in range(3)), (DirectedEdge(i, i + 1) for i in range(2)))
        assert g.node_ids == [0, 1, 2]
        assert g.edge_count == 2
        assert [n.id for n in g.nodes] == [0, 1, 2]


# ─── Value Type Tests ─────────────────────────────────────────────────────────


class TestValueTypes:
    def test_position_equality_ignores_int_float(self):
        """Position(0, 0) equals Position(0.0, 0.0)."""
        assert Position(0, 0) == Position(0.0, 0.0)

    def test_node_default_position_is_none(self):
        """Nodes carry no position unless given one."""
        assert Node(id=1).existing_position is None

    def test_edge_fields(self):
        """DirectedEdge stores its endpoints."""
        edge = DirectedEdge(from_id=1, to_id=2)
        assert (edge.from_id, edge.to_id) == (1, 2)
