"""
Constants for power system component categorization.
"""

from typing import Tuple

# Built-in component type keys
GENERATOR = "GENERATOR"
TRANSFORMER = "TRANSFORMER"
BUS = "BUS"
LOAD = "LOAD"
BREAKER = "BREAKER"
UNKNOWN = "UNKNOWN"

BUILTIN_TYPES: Tuple[str, ...] = (GENERATOR, TRANSFORMER, BUS, LOAD, BREAKER)

# (type, label) pairs for the default palette; icons are supplied by the renderer
DEFAULT_COMPONENT_LABELS: Tuple[Tuple[str, str], ...] = (
    (GENERATOR, "Generator"),
    (TRANSFORMER, "Transformer"),
    (BUS, "Bus"),
    (LOAD, "Load"),
    (BREAKER, "Breaker"),
)

# Horizontal offset for a node created downstream of an existing one
NEW_NODE_OFFSET_X = 150.0
