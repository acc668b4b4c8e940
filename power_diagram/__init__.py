"""
Power Diagram Package - Single-Line Diagram Graph Core

A library for editing, projecting and laying out typed graphs of
electrical components (generators, transformers, buses, loads, breakers
and user-defined types).

Key Features:
- Immutable diagram snapshots with linear undo/redo
- Group focus and upstream trace views derived on demand
- Deterministic hierarchical layout for cyclic, multi-rooted graphs
- Group boundary geometry from live node positions
- JSON snapshot files, including the legacy bare-diagram layout

Architecture:
- core/: Models, constants and exceptions
- config/: Layout configuration
- graph/: Graph indexing, view derivation, layout and group geometry
- history/: Undo/redo manager and diagram edits
- persistence/: Snapshot files
- session.py: View selection and layout mode around the history

Example Usage:
    from power_diagram import DiagramSession, edits

    session = DiagramSession()
    session.apply(edits.drop_node("GENERATOR", 0, 0))
    session.trace_upstream("GE1")
    model = session.render_model()
"""

# Core models and exceptions
from .core.models import (
    Node, Link, Group, Diagram, ComponentType,
    ComponentTypeRegistry, Snapshot, build_diagram,
)
from .core.exceptions import (
    DiagramError, ConfigurationError, SnapshotError,
    SnapshotFormatError, DuplicateComponentTypeError,
)

from .config.layout_config import LayoutConfiguration
from .graph.view_derivation import ViewKind, ViewSelector, derive_view
from .graph.hierarchy_layout import (
    HierarchicalLayoutBuilder, apply_fixed_layout, compute_hierarchical_layout,
)
from .graph.group_geometry import GroupBounds, compute_all_group_bounds, compute_group_bounds
from .history.history_manager import HistoryManager, HistoryState
from .history import edits
from .persistence.snapshot_io import load_snapshot, save_snapshot
from .session import DiagramSession, EditMode, LayoutMode

__version__ = "1.0.0"

__all__ = [
    # Core models
    'Node',
    'Link',
    'Group',
    'Diagram',
    'ComponentType',
    'ComponentTypeRegistry',
    'Snapshot',
    'build_diagram',

    # Exceptions
    'DiagramError',
    'ConfigurationError',
    'SnapshotError',
    'SnapshotFormatError',
    'DuplicateComponentTypeError',

    # Algorithms
    'LayoutConfiguration',
    'ViewKind',
    'ViewSelector',
    'derive_view',
    'HierarchicalLayoutBuilder',
    'apply_fixed_layout',
    'compute_hierarchical_layout',
    'GroupBounds',
    'compute_all_group_bounds',
    'compute_group_bounds',

    # History and session
    'HistoryManager',
    'HistoryState',
    'edits',
    'load_snapshot',
    'save_snapshot',
    'DiagramSession',
    'EditMode',
    'LayoutMode',
]

# Module configuration
import logging
logging.getLogger(__name__).addHandler(logging.NullHandler())
