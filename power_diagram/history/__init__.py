"""
History Module - Undo/Redo and Diagram Edits

Contains the linear history manager and the snapshot mutators recorded
through it.
"""

from .history_manager import HistoryManager, HistoryState, Mutator
from . import edits

__all__ = [
    'HistoryManager',
    'HistoryState',
    'Mutator',
    'edits',
]
