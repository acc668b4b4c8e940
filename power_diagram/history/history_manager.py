"""
Linear undo/redo history over diagram snapshots.

The manager keeps a single immutable ``HistoryState`` and swaps it whole on
every accepted operation, so callers never observe a half-applied change.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Tuple

from ..core.exceptions import SnapshotError
from ..core.models import Snapshot

logger = logging.getLogger(__name__)

Mutator = Callable[[Snapshot], Snapshot]


@dataclass(frozen=True)
class HistoryState:
    """Past snapshots, the current one, and undone snapshots available to redo."""
    past: Tuple[Snapshot, ...]
    present: Snapshot
    future: Tuple[Snapshot, ...]

    @classmethod
    def initial(cls, snapshot: Snapshot) -> "HistoryState":
        return cls(past=(), present=snapshot, future=())


class HistoryManager:
    """
    Records diagram edits in a linear undo/redo log.

    Branching timelines are not supported: any accepted edit discards the
    redo stack.
    """

    def __init__(self, initial: Snapshot = None):
        """
        Initialize the history manager.

        Args:
            initial: Starting snapshot; an empty diagram with the default
                component types when omitted
        """
        snapshot = initial if initial is not None else Snapshot()
        self._require_snapshot(snapshot)
        self._state = HistoryState.initial(snapshot)

    @property
    def state(self) -> HistoryState:
        return self._state

    @property
    def present(self) -> Snapshot:
        return self._state.present

    @property
    def can_undo(self) -> bool:
        return bool(self._state.past)

    @property
    def can_redo(self) -> bool:
        return bool(self._state.future)

    def apply(self, mutator: Mutator) -> bool:
        """
        Apply an edit to the present snapshot.

        The mutator receives the present snapshot and returns a candidate.
        Returning the very same object means "nothing changed" and records
        nothing.

        Returns:
            True if a new snapshot was recorded
        """
        state = self._state
        candidate = mutator(state.present)
        if candidate is state.present:
            return False
        self._require_snapshot(candidate)

        self._state = HistoryState(
            past=state.past + (state.present,),
            present=candidate,
            future=(),
        )
        logger.debug(f"Recorded edit; history depth {len(self._state.past)}")
        return True

    def undo(self) -> bool:
        """Step back one snapshot. Returns False when there is nothing to undo."""
        state = self._state
        if not state.past:
            return False
        self._state = HistoryState(
            past=state.past[:-1],
            present=state.past[-1],
            future=(state.present,) + state.future,
        )
        return True

    def redo(self) -> bool:
        """Step forward one snapshot. Returns False when there is nothing to redo."""
        state = self._state
        if not state.future:
            return False
        self._state = HistoryState(
            past=state.past + (state.present,),
            present=state.future[0],
            future=state.future[1:],
        )
        return True

    def reset(self, snapshot: Snapshot) -> None:
        """
        Install ``snapshot`` as the present and clear both stacks.

        Used when a diagram is loaded: that is a context switch, not an edit,
        so it cannot be undone.
        """
        self._require_snapshot(snapshot)
        self._state = HistoryState.initial(snapshot)
        logger.info("History reset to imported snapshot")

    @staticmethod
    def _require_snapshot(snapshot) -> None:
        if not isinstance(snapshot, Snapshot):
            raise SnapshotError(
                f"Expected a Snapshot, got {type(snapshot).__name__}",
                details={"type": type(snapshot).__name__},
            )
