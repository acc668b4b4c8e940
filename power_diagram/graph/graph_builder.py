"""
Graph builder module for indexing diagrams as networkx graphs.
"""

import logging
from typing import Iterable, Set

import networkx as nx

from ..core.models import Link, Node

logger = logging.getLogger(__name__)


class GraphBuilder:
    """
    Builds directed graphs from diagram nodes and links.

    Node and edge insertion follow declaration order, so successor and
    predecessor iteration on the result is deterministic.
    """

    def build_graph(self, nodes: Iterable[Node], links: Iterable[Link]) -> nx.DiGraph:
        """
        Build a NetworkX graph from nodes and links.

        Links whose endpoints do not resolve to a node are skipped. When
        several links join the same ordered pair, the first one declared
        is kept as the edge's ``link`` attribute.

        Args:
            nodes: Diagram nodes, in declaration order
            links: Diagram links, in declaration order

        Returns:
            NetworkX DiGraph with ``node`` and ``link`` attributes
        """
        graph = nx.DiGraph()

        for node in nodes:
            if node.id not in graph:
                graph.add_node(node.id, node=node)

        dangling = 0
        for link in links:
            if link.source not in graph or link.target not in graph:
                dangling += 1
                continue
            if not graph.has_edge(link.source, link.target):
                graph.add_edge(link.source, link.target, link=link)

        if dangling:
            logger.debug(f"Skipped {dangling} link(s) with unresolved endpoints")

        return graph

    @staticmethod
    def target_ids(links: Iterable[Link]) -> Set[str]:
        """Ids that appear as the target of any link, resolved or not."""
        return {link.target for link in links}
