"""NetworkX graph builder for contact connections."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

import networkx as nx

from .types import ConnectionEdge, ContactNode

log = logging.getLogger(__name__)


@dataclass
class GraphStats:
    """Statistics about the contact graph."""

    contacts: int
    connections: int
    isolated: list[str]
    self_edges: int

    def __str__(self) -> str:
        isolated_str = ", ".join(self.isolated) if self.isolated else "none"
        return (
            f"Graph Stats:\n"
            f"  Contacts: {self.contacts}\n"
            f"  Connections: {self.connections} (self-edges: {self.self_edges})\n"
            f"  Isolated: {isolated_str}"
        )


class ContactGraph:
    """Undirected who-knows-whom graph keyed by contact id.

    Each contact pair keeps the first edge record seen for it under ``edge``
    and every record under ``records``.
    """

    def __init__(self):
        self.graph = nx.Graph()

    def add_contact(self, contact_id: str) -> None:
        if not self.graph.has_node(contact_id):
            self.graph.add_node(contact_id)

    def add_connection(self, edge: ConnectionEdge) -> None:
        """Add an edge in both directions; the first record for a pair wins."""
        a_id, b_id = edge.contact_a_id, edge.contact_b_id
        self.add_contact(a_id)
        self.add_contact(b_id)

        if self.graph.has_edge(a_id, b_id):
            self.graph.edges[a_id, b_id]["records"].append(edge)
            return

        self.graph.add_edge(a_id, b_id, edge=edge, records=[edge])

    def __contains__(self, contact_id: object) -> bool:
        return contact_id in self.graph

    def neighbors(self, contact_id: str) -> list[str]:
        """Neighbor ids in sorted order, excluding the contact itself."""
        if contact_id not in self.graph:
            return []
        return sorted(
            neighbor_id
            for neighbor_id in self.graph.neighbors(contact_id)
            if neighbor_id != contact_id
        )

    def edge_between(self, first_id: str, second_id: str) -> ConnectionEdge | None:
        """Get the edge used for scoring the hop between two contacts."""
        if not self.graph.has_edge(first_id, second_id):
            return None
        return self.graph.edges[first_id, second_id]["edge"]

    def edges_within(self, contact_ids: Iterable[str]) -> list[ConnectionEdge]:
        """Every edge record whose endpoints are both in ``contact_ids``."""
        members = [cid for cid in dict.fromkeys(contact_ids) if cid in self.graph]
        subgraph = self.graph.subgraph(members)
        records: list[ConnectionEdge] = []
        for _, _, data in subgraph.edges(data=True):
            records.extend(data["records"])
        return records

    def get_stats(self) -> GraphStats:
        """Get statistics about the graph."""
        self_edges = nx.number_of_selfloops(self.graph)
        isolated = sorted(
            contact_id
            for contact_id in self.graph.nodes
            if not self.neighbors(contact_id)
        )
        return GraphStats(
            contacts=self.graph.number_of_nodes(),
            connections=sum(
                len(data["records"]) for _, _, data in self.graph.edges(data=True)
            ),
            isolated=isolated,
            self_edges=self_edges,
        )


def build_contact_graph(
    nodes: Iterable[ContactNode],
    edges: Iterable[ConnectionEdge],
) -> ContactGraph:
    """Build an undirected contact graph from node and edge records."""
    contact_graph = ContactGraph()

    # Seed every known contact so isolated contacts are representable
    for node in nodes:
        contact_graph.add_contact(node.id)

    for edge in edges:
        contact_graph.add_connection(edge)

    log.debug(
        f"Built contact graph: {contact_graph.graph.number_of_nodes()} contacts, "
        f"{contact_graph.graph.number_of_edges()} linked pairs"
    )
    return contact_graph
