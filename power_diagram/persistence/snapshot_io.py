"""
JSON snapshot loading and saving.

The document layout is the one diagram files already use::

    {"diagramData": {"nodes": [...], "links": [...], "groups": [...]},
     "componentTypes": [{"type": ..., "label": ..., "iconSvg": ...}]}

Older files hold a bare ``diagramData`` object; they load with the default
component types. Ghost and boundary flags are view-only and never written.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..core.constants import UNKNOWN
from ..core.exceptions import SnapshotFormatError
from ..core.models import (
    ComponentType, ComponentTypeRegistry, Diagram, Group, Link, Node, Snapshot,
)

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def snapshot_to_dict(snapshot: Snapshot) -> Dict[str, Any]:
    """Serialize a snapshot to plain JSON-compatible data."""
    diagram = snapshot.diagram
    return {
        "diagramData": {
            "nodes": [_node_to_dict(n) for n in diagram.nodes],
            "links": [_link_to_dict(l) for l in diagram.links],
            "groups": [
                {"id": g.id, "label": g.label, "nodeIds": list(g.node_ids)}
                for g in diagram.groups
            ],
        },
        "componentTypes": [
            {"type": c.type, "label": c.label, "iconSvg": c.icon_svg}
            for c in snapshot.component_types
        ],
    }


def snapshot_from_dict(
    data: Any,
    default_registry: Optional[ComponentTypeRegistry] = None,
) -> Snapshot:
    """
    Deserialize a snapshot, accepting the legacy bare-diagram layout.

    Raises:
        SnapshotFormatError: If neither layout matches
    """
    if not isinstance(data, dict):
        raise SnapshotFormatError("Invalid diagram file format: expected a JSON object")

    diagram_data = data.get("diagramData")
    component_types = data.get("componentTypes")
    if (
        isinstance(diagram_data, dict)
        and isinstance(diagram_data.get("nodes"), list)
        and isinstance(diagram_data.get("links"), list)
        and isinstance(component_types, list)
    ):
        return Snapshot(
            diagram=_diagram_from_dict(diagram_data),
            component_types=_registry_from_list(component_types),
        )

    if isinstance(data.get("nodes"), list):
        logger.info("Loading legacy diagram without component types; using defaults")
        return Snapshot(
            diagram=_diagram_from_dict(data),
            component_types=default_registry or ComponentTypeRegistry.default(),
        )

    raise SnapshotFormatError(
        "Invalid diagram file format",
        details={"keys": sorted(data.keys())},
    )


def load_snapshot(path: PathLike, default_registry: Optional[ComponentTypeRegistry] = None) -> Snapshot:
    """Load a snapshot from a JSON file."""
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise SnapshotFormatError(f"Could not parse diagram file {path}: {e}")
    except OSError as e:
        raise SnapshotFormatError(f"Could not read diagram file {path}: {e}")

    snapshot = snapshot_from_dict(data, default_registry)
    logger.info(f"Loaded diagram from {path} ({len(snapshot.diagram.nodes)} nodes)")
    return snapshot


def save_snapshot(snapshot: Snapshot, path: PathLike) -> Path:
    """Write a snapshot to a JSON file and return the path written."""
    path = Path(path)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(snapshot_to_dict(snapshot), f, indent=2)
    logger.info(f"Saved diagram to {path}")
    return path


def _node_to_dict(node: Node) -> Dict[str, Any]:
    result: Dict[str, Any] = {"id": node.id, "type": node.type, "label": node.label}
    if node.properties:
        result["properties"] = dict(node.properties)
    if node.position is not None:
        result["x"], result["y"] = node.position
    if node.pinned is not None:
        result["fx"], result["fy"] = node.pinned
    return result


def _link_to_dict(link: Link) -> Dict[str, Any]:
    result: Dict[str, Any] = {"source": link.source, "target": link.target}
    if link.properties:
        result["properties"] = dict(link.properties)
    return result


def _point(data: Dict[str, Any], x_key: str, y_key: str):
    x, y = data.get(x_key), data.get(y_key)
    if x is None or y is None:
        return None
    return (float(x), float(y))


def _diagram_from_dict(data: Dict[str, Any]) -> Diagram:
    try:
        nodes = tuple(
            Node(
                id=str(n["id"]),
                type=str(n.get("type", UNKNOWN)),
                label=str(n.get("label", n["id"])),
                properties=dict(n.get("properties") or {}),
                position=_point(n, "x", "y"),
                pinned=_point(n, "fx", "fy"),
            )
            for n in data["nodes"]
        )
        links = tuple(
            Link(
                source=str(l["source"]),
                target=str(l["target"]),
                properties=dict(l.get("properties") or {}),
            )
            for l in (data.get("links") or [])
        )
        groups = tuple(
            Group(id=str(g["id"]), label=str(g.get("label", g["id"])), node_ids=tuple(g.get("nodeIds", [])))
            for g in (data.get("groups") or [])
        )
    except (KeyError, TypeError, ValueError) as e:
        raise SnapshotFormatError(f"Malformed diagram data: {e}")
    return Diagram(nodes=nodes, links=links, groups=groups)


def _registry_from_list(entries: List[Any]) -> ComponentTypeRegistry:
    try:
        return ComponentTypeRegistry(tuple(
            ComponentType(type=str(e["type"]), label=str(e.get("label", e["type"])), icon_svg=e.get("iconSvg", ""))
            for e in entries
        ))
    except (KeyError, TypeError) as e:
        raise SnapshotFormatError(f"Malformed component types: {e}")
