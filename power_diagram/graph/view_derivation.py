"""
View derivation for power system diagrams.

A view is a ``Diagram`` computed from the canonical diagram and a
``ViewSelector``. Three projections exist:

- Default: the diagram itself.
- Focus: one group's members, plus ghost copies of the nodes they exchange
  links with, so boundary context stays visible.
- Trace: every node upstream of a selected node, following links against
  their declared direction.

All derivations are pure and tolerate dangling ids.
"""

import logging
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Set

from ..core.models import Diagram, Link, Node
from .graph_builder import GraphBuilder

logger = logging.getLogger(__name__)


class ViewKind(Enum):
    """Projection selected by a ViewSelector."""
    DEFAULT = "default"
    FOCUS = "focus"
    TRACE = "trace"


@dataclass(frozen=True)
class ViewSelector:
    """
    Chooses which projection of the diagram to display.

    Both ids may be set at once; a trace always takes precedence over a
    focus, whatever order the caller set them in.
    """
    focused_group_id: Optional[str] = None
    traced_node_id: Optional[str] = None

    @classmethod
    def default(cls) -> "ViewSelector":
        return cls()

    @classmethod
    def focus(cls, group_id: str) -> "ViewSelector":
        return cls(focused_group_id=group_id)

    @classmethod
    def trace(cls, node_id: str) -> "ViewSelector":
        return cls(traced_node_id=node_id)

    @property
    def kind(self) -> ViewKind:
        if self.traced_node_id:
            return ViewKind.TRACE
        if self.focused_group_id:
            return ViewKind.FOCUS
        return ViewKind.DEFAULT


def derive_view(diagram: Diagram, selector: Optional[ViewSelector] = None) -> Diagram:
    """
    Compute the projection of ``diagram`` chosen by ``selector``.

    Args:
        diagram: Canonical diagram
        selector: View selector; None means the default view

    Returns:
        The derived view. The default view is ``diagram`` itself.
    """
    selector = selector or ViewSelector.default()
    kind = selector.kind

    if kind is ViewKind.TRACE:
        return derive_trace_view(diagram, selector.traced_node_id)
    if kind is ViewKind.FOCUS:
        return derive_focus_view(diagram, selector.focused_group_id)
    return diagram


def derive_trace_view(diagram: Diagram, node_id: str) -> Diagram:
    """
    Upstream trace: breadth-first search backward from ``node_id``.

    Nodes are returned in discovery order, ties broken by link declaration
    order. Every node is expanded once, and all of its resolvable incoming
    links are kept, so converging paths show every upstream link without
    repeating one. Groups are dropped.
    """
    graph = GraphBuilder().build_graph(diagram.nodes, diagram.links)
    if node_id not in graph:
        logger.debug(f"Trace requested for unknown node '{node_id}'")
        return Diagram.empty()

    visited: Set[str] = {node_id}
    order: List[str] = [node_id]
    path_links: List[Link] = []
    queue = deque([node_id])

    while queue:
        current = queue.popleft()
        for parent in graph.predecessors(current):
            path_links.append(graph.edges[parent, current]["link"])
            if parent in visited:
                continue
            visited.add(parent)
            order.append(parent)
            queue.append(parent)

    nodes = tuple(graph.nodes[nid]["node"] for nid in order)
    logger.debug(f"Trace from '{node_id}' reached {len(nodes)} node(s)")
    return Diagram(nodes=nodes, links=tuple(path_links), groups=())


def derive_focus_view(diagram: Diagram, group_id: str) -> Diagram:
    """
    Group focus: the group's members plus boundary context.

    Links with both endpoints inside the group are kept as internal links.
    Links with exactly one endpoint inside become boundary links, and the
    outside endpoint is added once as a ghost node. Internal items keep
    diagram order; ghosts follow in the order the boundary links are seen.
    """
    group = diagram.get_group(group_id)
    if group is None:
        logger.debug(f"Focus requested for unknown group '{group_id}'")
        return Diagram.empty()

    index = diagram.node_index()
    members = {nid for nid in group.node_ids if nid in index}

    internal_nodes = tuple(node for node in diagram.nodes if node.id in members)
    internal_links: List[Link] = []
    boundary_links: List[Link] = []
    ghosts: Dict[str, Node] = {}

    for link in diagram.links:
        source_in = link.source in members
        target_in = link.target in members

        if source_in and target_in:
            internal_links.append(link)
        elif source_in != target_in:
            outside_id = link.target if source_in else link.source
            outside = index.get(outside_id)
            if outside is None:
                continue
            if outside_id not in ghosts:
                ghosts[outside_id] = outside.as_ghost()
            boundary_links.append(_as_boundary(link))

    return Diagram(
        nodes=internal_nodes + tuple(ghosts.values()),
        links=tuple(internal_links) + tuple(boundary_links),
        groups=(group,),
    )


def _as_boundary(link: Link) -> Link:
    return Link(
        source=link.source,
        target=link.target,
        properties=link.properties,
        is_boundary=True,
    )
