"""
Diagram edits expressed as snapshot mutators.

Each factory returns a ``Mutator`` for ``HistoryManager.apply``. A mutator
returns its input unchanged when the edit would have no effect, which keeps
no-op edits out of the history.
"""

import logging
from typing import Any, Dict, Iterable, Optional

from ..core.constants import NEW_NODE_OFFSET_X
from ..core.models import ComponentType, Diagram, Group, Link, Node, Snapshot
from .history_manager import Mutator

logger = logging.getLogger(__name__)


def generate_node_id(diagram: Diagram, component_type: str) -> str:
    """First free id made of the type's two-letter prefix and a counter."""
    return f"{_id_prefix(component_type)}{_next_counter(diagram, component_type)}"


def _id_prefix(component_type: str) -> str:
    return component_type[:2].upper()


def _next_counter(diagram: Diagram, component_type: str) -> int:
    taken = set(diagram.node_ids)
    prefix = _id_prefix(component_type)
    count = 1
    while f"{prefix}{count}" in taken:
        count += 1
    return count


def remove_node(node_id: str) -> Mutator:
    """Remove a node, its links and its group memberships; empty groups go too."""
    def mutate(snapshot: Snapshot) -> Snapshot:
        diagram = snapshot.diagram
        if not diagram.has_node(node_id):
            return snapshot
        groups = []
        for group in diagram.groups:
            if node_id in group.node_ids:
                remaining = tuple(nid for nid in group.node_ids if nid != node_id)
                if remaining:
                    groups.append(Group(group.id, group.label, remaining))
            else:
                groups.append(group)
        return snapshot.with_diagram(
            nodes=tuple(n for n in diagram.nodes if n.id != node_id),
            links=tuple(l for l in diagram.links if node_id not in (l.source, l.target)),
            groups=tuple(groups),
        )
    return mutate


def add_link(link: Link) -> Mutator:
    def mutate(snapshot: Snapshot) -> Snapshot:
        return snapshot.with_diagram(links=snapshot.diagram.links + (link,))
    return mutate


def remove_link(source: str, target: str) -> Mutator:
    """Remove every link from ``source`` to ``target``."""
    def mutate(snapshot: Snapshot) -> Snapshot:
        links = snapshot.diagram.links
        kept = tuple(l for l in links if l.key != (source, target))
        if len(kept) == len(links):
            return snapshot
        return snapshot.with_diagram(links=kept)
    return mutate


def drop_node(component_type: str, x: float, y: float) -> Mutator:
    """
    Add a node of ``component_type`` dropped at ``(x, y)``.

    The node gets a generated id and a label built from the registry's
    display label, and is pinned where it was dropped.
    """
    def mutate(snapshot: Snapshot) -> Snapshot:
        diagram = snapshot.diagram
        count = _next_counter(diagram, component_type)
        label = f"{snapshot.component_types.label_for(component_type)} {count}"
        node = Node(
            id=f"{_id_prefix(component_type)}{count}",
            type=component_type,
            label=label,
            position=(x, y),
            pinned=(x, y),
        )
        logger.debug(f"Dropping node {node.id} at ({x}, {y})")
        return snapshot.with_diagram(nodes=diagram.nodes + (node,))
    return mutate


def add_node_and_link(
    source_id: str,
    component_type: str,
    label: str,
    properties: Optional[Dict[str, Any]] = None,
    link_properties: Optional[Dict[str, Any]] = None,
) -> Mutator:
    """Add a node fed by ``source_id``, placed to the right of the source."""
    def mutate(snapshot: Snapshot) -> Snapshot:
        diagram = snapshot.diagram
        source = diagram.get_node(source_id)
        source_x, source_y = (source.position if source and source.position else (0.0, 0.0))

        new_id = generate_node_id(diagram, component_type)
        node = Node(
            id=new_id,
            type=component_type,
            label=label,
            properties=dict(properties or {}),
            position=(source_x + NEW_NODE_OFFSET_X if source_x else 0.0, source_y or 0.0),
        )
        link = Link(source=source_id, target=new_id, properties=dict(link_properties or {}))
        return snapshot.with_diagram(
            nodes=diagram.nodes + (node,),
            links=diagram.links + (link,),
        )
    return mutate


def add_component_type(definition: ComponentType) -> Mutator:
    """
    Register a new component type.

    Raises:
        DuplicateComponentTypeError: If the key exists, ignoring case
    """
    def mutate(snapshot: Snapshot) -> Snapshot:
        registry = snapshot.component_types.with_type(definition)
        return Snapshot(diagram=snapshot.diagram, component_types=registry)
    return mutate


def edit_component_type(definition: ComponentType) -> Mutator:
    def mutate(snapshot: Snapshot) -> Snapshot:
        registry = snapshot.component_types.with_replaced(definition)
        if registry is snapshot.component_types:
            return snapshot
        return Snapshot(diagram=snapshot.diagram, component_types=registry)
    return mutate


def add_group(group: Group) -> Mutator:
    def mutate(snapshot: Snapshot) -> Snapshot:
        return snapshot.with_diagram(groups=snapshot.diagram.groups + (group,))
    return mutate


def remove_group(group_id: str) -> Mutator:
    def mutate(snapshot: Snapshot) -> Snapshot:
        if snapshot.diagram.get_group(group_id) is None:
            return snapshot
        return snapshot.with_diagram(
            groups=tuple(g for g in snapshot.diagram.groups if g.id != group_id)
        )
    return mutate


def update_group(group_id: str, node_ids: Iterable[str]) -> Mutator:
    """Replace the member list of a group."""
    node_ids = tuple(node_ids)

    def mutate(snapshot: Snapshot) -> Snapshot:
        group = snapshot.diagram.get_group(group_id)
        if group is None or group.node_ids == node_ids:
            return snapshot
        updated = Group(group.id, group.label, node_ids)
        return snapshot.with_diagram(
            groups=tuple(updated if g.id == group_id else g for g in snapshot.diagram.groups)
        )
    return mutate
