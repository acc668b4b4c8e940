from .logging_utils import print_view_summary, setup_logging

__all__ = [
    'print_view_summary',
    'setup_logging',
]
