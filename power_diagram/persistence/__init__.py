"""
Persistence Module - Snapshot Files

Reads and writes diagram snapshots as JSON documents.
"""

from .snapshot_io import load_snapshot, save_snapshot, snapshot_from_dict, snapshot_to_dict

__all__ = [
    'load_snapshot',
    'save_snapshot',
    'snapshot_from_dict',
    'snapshot_to_dict',
]
