"""
Group boundary geometry.

Computes the padded axis-aligned box enclosing a group's members from their
live positions. Turning the box into an outline and placing the label is
left to the renderer.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Optional

import numpy as np

from ..config.layout_config import LayoutConfiguration, get_default_config
from ..core.models import Diagram, Group, Node, Point

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GroupBounds:
    """Padded bounding box of one group."""
    group_id: str
    min_x: float
    min_y: float
    max_x: float
    max_y: float
    member_count: int

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center(self) -> Point:
        return ((self.min_x + self.max_x) / 2, (self.min_y + self.max_y) / 2)

    def contains(self, point: Point) -> bool:
        x, y = point
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y


def compute_group_bounds(
    group: Group,
    nodes: Iterable[Node],
    positions: Optional[Mapping[str, Point]] = None,
    config: Optional[LayoutConfiguration] = None,
) -> Optional[GroupBounds]:
    """
    Compute the boundary box of ``group``.

    Args:
        group: Group whose members should be enclosed
        nodes: Nodes currently displayed; ghost copies are ignored
        positions: Live positions by node id, overriding ``node.position``
        config: Layout configuration supplying padding

    Returns:
        GroupBounds, or None when no member has a position
    """
    config = config or get_default_config()
    positions = positions or {}
    members = set(group.node_ids)

    points = []
    for node in nodes:
        if node.is_external or node.id not in members:
            continue
        point = positions.get(node.id, node.position)
        if point is not None:
            points.append(point)

    if not points:
        return None

    coords = np.asarray(points, dtype=float)
    low = coords.min(axis=0)
    high = coords.max(axis=0)
    padding = config.group_padding

    return GroupBounds(
        group_id=group.id,
        min_x=float(low[0] - padding),
        # Extra room above the members for the group label
        min_y=float(low[1] - padding - config.label_clearance),
        max_x=float(high[0] + padding),
        max_y=float(high[1] + padding),
        member_count=len(points),
    )


def compute_all_group_bounds(
    view: Diagram,
    positions: Optional[Mapping[str, Point]] = None,
    config: Optional[LayoutConfiguration] = None,
) -> Dict[str, GroupBounds]:
    """
    Boundary boxes for every group of a view that has a shape.

    A node belonging to several groups contributes to each of their boxes.
    """
    result: Dict[str, GroupBounds] = {}
    for group in view.groups:
        bounds = compute_group_bounds(group, view.nodes, positions, config)
        if bounds is None:
            logger.debug(f"Group '{group.id}' has no positioned members")
            continue
        result[group.id] = bounds
    return result
