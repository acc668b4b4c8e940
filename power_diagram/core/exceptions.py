"""
Custom exceptions for the power diagram package.
"""


class DiagramError(Exception):
    """Base exception class for power diagram errors."""
    pass


class ConfigurationError(DiagramError):
    """Raised when configuration is invalid or missing."""
    pass


class SnapshotError(DiagramError):
    """Raised when a snapshot violates the history contract."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.details = details or {}


class SnapshotFormatError(SnapshotError):
    """Raised when a serialized snapshot is structurally invalid."""
    pass


class DuplicateComponentTypeError(DiagramError):
    """Raised when a component type key is already registered."""

    def __init__(self, component_type: str):
        super().__init__(f"A component with type '{component_type}' already exists.")
        self.component_type = component_type
