"""
Core components for power system diagram modeling.

This package provides the fundamental data structures and exceptions
for building and working with power system diagrams.
"""

from .models import (
    Node, Link, Group, Diagram, ComponentType,
    ComponentTypeRegistry, Snapshot, build_diagram,
)
from .exceptions import (
    DiagramError, ConfigurationError, SnapshotError,
    SnapshotFormatError, DuplicateComponentTypeError,
)

__all__ = [
    'Node',
    'Link',
    'Group',
    'Diagram',
    'ComponentType',
    'ComponentTypeRegistry',
    'Snapshot',
    'build_diagram',
    'DiagramError',
    'ConfigurationError',
    'SnapshotError',
    'SnapshotFormatError',
    'DuplicateComponentTypeError',
]
