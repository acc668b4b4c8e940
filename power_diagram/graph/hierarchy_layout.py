"""
Hierarchical layout for fixed-layout mode.

Turns an arbitrary directed graph (cycles, several parents, several roots)
into a strict rooted tree and assigns each node a static coordinate:

1. Roots are nodes that never appear as a link target. A graph with no such
   node (pure cycles) is rooted at its first node instead.
2. The tree is grown breadth-first from all roots at once. The first node to
   discover a child becomes its only parent; every other edge into that child
   is left out of the tree but stays in the view's link set. A cycle no
   root reaches is grown from its first node in input order, so every node
   ends up in the tree.
3. Several roots are hung under one virtual root so a single layout pass
   covers the whole forest. The virtual root never receives a coordinate.
4. Leaves take consecutive horizontal slots, parents sit centered over their
   children and depth gives the vertical rank.
"""

import logging
from collections import deque
from dataclasses import dataclass, field, replace
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from ..config.layout_config import LayoutConfiguration, get_default_config
from ..core.models import Diagram, Link, Node, Point
from .graph_builder import GraphBuilder

logger = logging.getLogger(__name__)


@dataclass
class TreeNode:
    """Node of the layout tree."""
    id: str
    children: List["TreeNode"] = field(default_factory=list)
    parent: Optional["TreeNode"] = None
    is_virtual: bool = False
    depth: int = 0
    x: float = 0.0

    def add_child(self, child: "TreeNode") -> None:
        child.parent = self
        self.children.append(child)

    def walk(self) -> Iterable["TreeNode"]:
        """Pre-order traversal, iterative to stay clear of recursion limits."""
        stack = [self]
        while stack:
            current = stack.pop()
            yield current
            stack.extend(reversed(current.children))


class HierarchyBuilder:
    """
    Converts a node/link set into a rooted layout tree.

    Ties are resolved by root order (input order), then by adjacency order
    (link declaration order), which makes the tree fully deterministic.
    """

    def __init__(self, config: Optional[LayoutConfiguration] = None):
        self.config = config or get_default_config()
        self._graph_builder = GraphBuilder()

    def find_roots(self, nodes: Sequence[Node], links: Sequence[Link]) -> List[str]:
        """Root candidates, falling back to the first node for rootless input."""
        if not nodes:
            return []
        targets = self._graph_builder.target_ids(links)
        roots: List[str] = []
        for node in nodes:
            if node.id not in targets and node.id not in roots:
                roots.append(node.id)
        if not roots:
            logger.debug(f"No root candidates; falling back to first node '{nodes[0].id}'")
            roots.append(nodes[0].id)
        return roots

    def build(self, nodes: Sequence[Node], links: Sequence[Link]) -> Optional[TreeNode]:
        """
        Build the layout tree.

        Returns:
            The single tree root (possibly virtual), or None for empty input
        """
        roots = self.find_roots(nodes, links)
        if not roots:
            return None

        graph = self._graph_builder.build_graph(nodes, links)
        tree_nodes: Dict[str, TreeNode] = {}
        root_nodes = []
        for root_id in roots:
            tree_nodes[root_id] = TreeNode(id=root_id)
            root_nodes.append(tree_nodes[root_id])

        self._grow(graph, root_nodes, tree_nodes)

        # Cycles no root reaches are seeded from their first node in input order
        for node in nodes:
            if node.id in tree_nodes:
                continue
            logger.debug(f"Seeding unreached node '{node.id}' as an extra root")
            extra_root = TreeNode(id=node.id)
            tree_nodes[node.id] = extra_root
            root_nodes.append(extra_root)
            self._grow(graph, [extra_root], tree_nodes)

        if len(root_nodes) == 1:
            return root_nodes[0]

        virtual_root = TreeNode(id=self.config.virtual_root_id, is_virtual=True)
        for root in root_nodes:
            virtual_root.add_child(root)
        return virtual_root

    @staticmethod
    def _grow(graph, seeds: List[TreeNode], tree_nodes: Dict[str, TreeNode]) -> None:
        """Breadth-first, first-discoverer-wins expansion from ``seeds``."""
        queue = deque(seeds)
        while queue:
            parent = queue.popleft()
            for child_id in graph.successors(parent.id):
                if child_id in tree_nodes:
                    continue
                child = TreeNode(id=child_id)
                tree_nodes[child_id] = child
                parent.add_child(child)
                queue.append(child)


class TreeLayout:
    """
    Tidy tree placement with fixed per-level and per-sibling spacing.

    Leaves are placed left to right, ``sibling_separation`` slots apart when
    they share a parent and ``cousin_separation`` slots apart otherwise.
    Every parent is centered between its first and last child, so subtrees
    never overlap.
    """

    def __init__(self, config: Optional[LayoutConfiguration] = None):
        self.config = config or get_default_config()

    def place(self, root: TreeNode) -> None:
        """Assign ``depth`` and slot-based ``x`` to every tree node in place."""
        for node in root.walk():
            node.depth = 0 if node.parent is None else node.parent.depth + 1

        previous_leaf: Optional[TreeNode] = None
        for node in self._post_order(root):
            if node.children:
                node.x = (node.children[0].x + node.children[-1].x) / 2
                continue
            if previous_leaf is None:
                node.x = 0.0
            else:
                node.x = previous_leaf.x + self._separation(previous_leaf, node)
            previous_leaf = node

    def _separation(self, left: TreeNode, right: TreeNode) -> float:
        if left.parent is right.parent:
            return self.config.sibling_separation
        return self.config.cousin_separation

    @staticmethod
    def _post_order(root: TreeNode) -> List[TreeNode]:
        result: List[TreeNode] = []
        stack: List[Tuple[TreeNode, bool]] = [(root, False)]
        while stack:
            node, expanded = stack.pop()
            if expanded:
                result.append(node)
                continue
            stack.append((node, True))
            for child in reversed(node.children):
                stack.append((child, False))
        return result


class HierarchicalLayoutBuilder:
    """
    Computes pinned coordinates for the nodes of a displayed view.

    Example:
        builder = HierarchicalLayoutBuilder()
        coordinates = builder.compute(view.nodes, view.links)
        pinned_view = builder.apply(view)
    """

    def __init__(self, config: Optional[LayoutConfiguration] = None):
        self.config = config or get_default_config()
        self.hierarchy_builder = HierarchyBuilder(self.config)
        self.tree_layout = TreeLayout(self.config)

    def compute(self, nodes: Sequence[Node], links: Sequence[Link]) -> Dict[str, Point]:
        """
        Compute a coordinate for every node of the view.

        Args:
            nodes: Nodes of the displayed view, in input order
            links: Links of the displayed view

        Returns:
            Mapping of node id to ``(x, y)``, centered horizontally on 0 with
            the shallowest real nodes at y == 0. Empty for empty input.
        """
        root = self.hierarchy_builder.build(nodes, links)
        if root is None:
            return {}

        self.tree_layout.place(root)
        placed = [n for n in root.walk() if not n.is_virtual]

        min_slot = min(n.x for n in placed)
        max_slot = max(n.x for n in placed)
        center = (min_slot + max_slot) / 2
        min_depth = min(n.depth for n in placed)

        coordinates: Dict[str, Point] = {}
        for tree_node in placed:
            coordinates[tree_node.id] = (
                (tree_node.x - center) * self.config.horizontal_spacing,
                (tree_node.depth - min_depth) * self.config.vertical_spacing,
            )

        logger.debug(f"Hierarchical layout placed {len(coordinates)} of {len(nodes)} node(s)")
        return coordinates

    def apply(self, view: Diagram) -> Diagram:
        """Return ``view`` with computed coordinates pinned onto its nodes."""
        coordinates = self.compute(view.nodes, view.links)
        if not coordinates:
            return view
        nodes = tuple(
            replace(node, position=coordinates[node.id], pinned=coordinates[node.id])
            if node.id in coordinates else node
            for node in view.nodes
        )
        return replace(view, nodes=nodes)


def compute_hierarchical_layout(
    nodes: Sequence[Node],
    links: Sequence[Link],
    config: Optional[LayoutConfiguration] = None,
) -> Dict[str, Point]:
    """Functional shortcut for ``HierarchicalLayoutBuilder(config).compute``."""
    return HierarchicalLayoutBuilder(config).compute(nodes, links)


def apply_fixed_layout(view: Diagram, config: Optional[LayoutConfiguration] = None) -> Diagram:
    """Functional shortcut for ``HierarchicalLayoutBuilder(config).apply``."""
    return HierarchicalLayoutBuilder(config).apply(view)
