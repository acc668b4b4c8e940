"""
Core data models for power system diagrams.

Every model is a frozen dataclass. Collections are stored as tuples so a
snapshot can be shared between history entries without defensive copies;
edits build new instances with ``dataclasses.replace`` and reuse every
sub-structure they do not touch.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterable, Optional, Tuple

from .constants import DEFAULT_COMPONENT_LABELS
from .exceptions import DuplicateComponentTypeError

Point = Tuple[float, float]


@dataclass(frozen=True)
class Node:
    """Represents a single electrical component on the diagram."""
    id: str
    type: str
    label: str
    properties: Dict[str, Any] = field(default_factory=dict, hash=False)
    position: Optional[Point] = None
    pinned: Optional[Point] = None
    is_external: bool = False

    def as_ghost(self) -> "Node":
        """Read-only external copy used for boundary context."""
        return replace(self, is_external=True)

    def __str__(self) -> str:
        return f"{self.label} ({self.id}, {self.type})"


@dataclass(frozen=True)
class Link:
    """Represents a directed feed from ``source`` to ``target``."""
    source: str
    target: str
    properties: Dict[str, Any] = field(default_factory=dict, hash=False)
    is_boundary: bool = False

    @property
    def key(self) -> Tuple[str, str]:
        return (self.source, self.target)

    def __str__(self) -> str:
        return f"{self.source} -> {self.target}"


@dataclass(frozen=True)
class Group:
    """Named cluster of node ids."""
    id: str
    label: str
    node_ids: Tuple[str, ...] = ()

    def __post_init__(self):
        # Accept any iterable of ids from callers
        object.__setattr__(self, "node_ids", tuple(self.node_ids))

    def __contains__(self, node_id: str) -> bool:
        return node_id in self.node_ids


@dataclass(frozen=True)
class Diagram:
    """Nodes, links and groups of one diagram or one derived view."""
    nodes: Tuple[Node, ...] = ()
    links: Tuple[Link, ...] = ()
    groups: Tuple[Group, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "nodes", tuple(self.nodes))
        object.__setattr__(self, "links", tuple(self.links))
        object.__setattr__(self, "groups", tuple(self.groups))

    @classmethod
    def empty(cls) -> "Diagram":
        return cls()

    @property
    def node_ids(self) -> Tuple[str, ...]:
        return tuple(node.id for node in self.nodes)

    def node_index(self) -> Dict[str, Node]:
        """Map of node id to node; the first occurrence wins on duplicates."""
        index: Dict[str, Node] = {}
        for node in self.nodes:
            index.setdefault(node.id, node)
        return index

    def get_node(self, node_id: str) -> Optional[Node]:
        return next((n for n in self.nodes if n.id == node_id), None)

    def get_group(self, group_id: str) -> Optional[Group]:
        return next((g for g in self.groups if g.id == group_id), None)

    def has_node(self, node_id: str) -> bool:
        return any(n.id == node_id for n in self.nodes)

    @property
    def is_empty(self) -> bool:
        return not self.nodes


@dataclass(frozen=True)
class ComponentType:
    """Palette entry resolving a node type key to a display label."""
    type: str
    label: str
    icon_svg: str = ""


@dataclass(frozen=True)
class ComponentTypeRegistry:
    """
    Ordered, immutable collection of component types.

    The registry is only consulted for display labels of newly created
    nodes; node types themselves stay opaque keys everywhere else.
    """
    types: Tuple[ComponentType, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "types", tuple(self.types))

    @classmethod
    def default(cls) -> "ComponentTypeRegistry":
        """Registry holding the built-in electrical component types."""
        return cls(tuple(ComponentType(type=t, label=label) for t, label in DEFAULT_COMPONENT_LABELS))

    def get(self, component_type: str) -> Optional[ComponentType]:
        return next((c for c in self.types if c.type == component_type), None)

    def label_for(self, component_type: str) -> str:
        """Display label for a type, falling back to the raw type key."""
        definition = self.get(component_type)
        return definition.label if definition else component_type

    def contains(self, component_type: str) -> bool:
        """Case-insensitive membership test on type keys."""
        wanted = component_type.upper()
        return any(c.type.upper() == wanted for c in self.types)

    def with_type(self, definition: ComponentType) -> "ComponentTypeRegistry":
        if self.contains(definition.type):
            raise DuplicateComponentTypeError(definition.type)
        return replace(self, types=self.types + (definition,))

    def with_replaced(self, definition: ComponentType) -> "ComponentTypeRegistry":
        """Registry with the entry of the same key swapped for ``definition``."""
        if self.get(definition.type) is None:
            return self
        return replace(
            self,
            types=tuple(definition if c.type == definition.type else c for c in self.types),
        )

    def __iter__(self):
        return iter(self.types)

    def __len__(self) -> int:
        return len(self.types)


@dataclass(frozen=True)
class Snapshot:
    """Immutable value capturing a diagram plus its type registry."""
    diagram: Diagram = field(default_factory=Diagram)
    component_types: ComponentTypeRegistry = field(default_factory=ComponentTypeRegistry.default)

    def with_diagram(self, **changes) -> "Snapshot":
        """New snapshot whose diagram has the given fields replaced."""
        return replace(self, diagram=replace(self.diagram, **changes))


def build_diagram(
    nodes: Iterable[Node] = (),
    links: Iterable[Link] = (),
    groups: Iterable[Group] = (),
) -> Diagram:
    """Convenience constructor accepting any iterables."""
    return Diagram(tuple(nodes), tuple(links), tuple(groups))
