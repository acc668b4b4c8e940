"""
Graph Module - View Derivation and Layout

Contains the graph index, the view derivation engine, the hierarchical
layout builder and group boundary geometry.
"""

from .graph_builder import GraphBuilder
from .view_derivation import ViewKind, ViewSelector, derive_view
from .hierarchy_layout import (
    HierarchicalLayoutBuilder, HierarchyBuilder, TreeNode,
    apply_fixed_layout, compute_hierarchical_layout,
)
from .group_geometry import GroupBounds, compute_all_group_bounds, compute_group_bounds

__all__ = [
    'GraphBuilder',
    'ViewKind',
    'ViewSelector',
    'derive_view',
    'HierarchicalLayoutBuilder',
    'HierarchyBuilder',
    'TreeNode',
    'apply_fixed_layout',
    'compute_hierarchical_layout',
    'GroupBounds',
    'compute_all_group_bounds',
    'compute_group_bounds',
]
