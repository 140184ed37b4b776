"""
Native geometry backend (shapely).
"""

from .shapely_backend import (
    to_shapely,
    from_shapely,
    attach_backend,
    ensure_backend,
    detach_backend,
)

__all__ = [
    'to_shapely',
    'from_shapely',
    'attach_backend',
    'ensure_backend',
    'detach_backend',
]
