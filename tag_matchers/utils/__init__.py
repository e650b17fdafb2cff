"""
Utility helpers for tag matchers.
"""

from .hierarchy import flatten_hierarchy, build_input_name

__all__ = [
    'flatten_hierarchy',
    'build_input_name'
]
