"""
Diagram session: the state a presentation layer keeps around the history.

A session owns the edit history, the current view selection and the layout
mode, and produces the model a renderer should paint.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

from .config.layout_config import LayoutConfiguration, get_default_config
from .core.models import Diagram, Snapshot
from .graph.group_geometry import GroupBounds, compute_all_group_bounds
from .graph.hierarchy_layout import HierarchicalLayoutBuilder
from .graph.view_derivation import ViewKind, ViewSelector, derive_view
from .history.history_manager import HistoryManager, Mutator
from .persistence.snapshot_io import load_snapshot, save_snapshot

logger = logging.getLogger(__name__)


class LayoutMode(Enum):
    """How node coordinates are produced."""
    FREE = "free"
    FIXED = "fixed"


class EditMode(Enum):
    """Whether the diagram accepts edits; the unlock gate lives elsewhere."""
    VIEW = "view"
    EDIT = "edit"


class DiagramSession:
    """
    Orchestrates history, view selection and static layout.

    Focusing a group clears any trace and tracing a node clears any focus,
    so at most one non-default projection is selected at a time.
    """

    def __init__(
        self,
        initial: Optional[Snapshot] = None,
        layout_mode: LayoutMode = LayoutMode.FIXED,
        config: Optional[LayoutConfiguration] = None,
    ):
        self.history = HistoryManager(initial)
        self.layout_mode = layout_mode
        self.edit_mode = EditMode.VIEW
        self.config = config or get_default_config()
        self._layout_builder = HierarchicalLayoutBuilder(self.config)

        self.focused_group_id: Optional[str] = None
        self.traced_node_id: Optional[str] = None

        # (diagram, selector, view) of the last derivation
        self._view_cache: Optional[Tuple[Diagram, ViewSelector, Diagram]] = None

    # ------------------------------------------------------------------ history

    @property
    def snapshot(self) -> Snapshot:
        return self.history.present

    @property
    def diagram(self) -> Diagram:
        return self.history.present.diagram

    def apply(self, mutator: Mutator) -> bool:
        return self.history.apply(mutator)

    def undo(self) -> bool:
        return self.history.undo()

    def redo(self) -> bool:
        return self.history.redo()

    def load(self, path: Union[str, Path]) -> Snapshot:
        """Load a snapshot file and make it the new, history-free present."""
        snapshot = load_snapshot(path)
        self.history.reset(snapshot)
        self.focused_group_id = None
        self.traced_node_id = None
        return snapshot

    def save(self, path: Union[str, Path]) -> Path:
        return save_snapshot(self.history.present, path)

    # ----------------------------------------------------------- view selection

    @property
    def selector(self) -> ViewSelector:
        return ViewSelector(
            focused_group_id=self.focused_group_id,
            traced_node_id=self.traced_node_id,
        )

    def focus_group(self, group_id: str) -> None:
        self.traced_node_id = None
        self.focused_group_id = group_id
        logger.debug(f"Focusing group '{group_id}'")

    def clear_focus(self) -> None:
        self.focused_group_id = None

    def trace_upstream(self, node_id: str) -> None:
        self.focused_group_id = None
        self.traced_node_id = node_id
        logger.debug(f"Tracing upstream of '{node_id}'")

    def clear_trace(self) -> None:
        self.traced_node_id = None

    def enter_edit_mode(self) -> None:
        self.edit_mode = EditMode.EDIT

    def exit_edit_mode(self) -> None:
        self.edit_mode = EditMode.VIEW

    @property
    def is_editing_disabled(self) -> bool:
        """Edits are blocked in view mode and while a projection is shown."""
        return self.edit_mode is EditMode.VIEW or self.selector.kind is not ViewKind.DEFAULT

    # -------------------------------------------------------------- derivation

    def displayed_view(self) -> Diagram:
        """
        The projection currently selected, memoized on diagram identity.

        Snapshots are immutable, so the same diagram object with an equal
        selector always derives the same view.
        """
        diagram = self.diagram
        selector = self.selector
        cached = self._view_cache
        if cached is not None and cached[0] is diagram and cached[1] == selector:
            return cached[2]

        view = derive_view(diagram, selector)
        self._view_cache = (diagram, selector, view)
        return view

    def render_model(self) -> Diagram:
        """Displayed view, with pinned tree coordinates in fixed layout mode."""
        view = self.displayed_view()
        if self.layout_mode is LayoutMode.FIXED:
            return self._layout_builder.apply(view)
        return view

    def group_bounds(self, view: Optional[Diagram] = None) -> Dict[str, GroupBounds]:
        """Boundary boxes of the groups in ``view`` (the render model by default)."""
        view = view if view is not None else self.render_model()
        return compute_all_group_bounds(view, config=self.config)
