"""Console display helpers."""
from .display_utils import (
    print_banner,
    print_progress,
    print_change_set,
    print_sync_summary,
)

__all__ = [
    'print_banner',
    'print_progress',
    'print_change_set',
    'print_sync_summary',
]
