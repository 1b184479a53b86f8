"""Core abstractions for TreePicker.

This module contains the read-only building blocks the selection model
works through: node access, traversal and the selection binding.
"""

from .accessor import TreeAccessor
from .traverser import DepthFirstPreOrderTraverser, depth_first_preorder
from .binding import SelectionBinding, StateBinding

__all__ = [
    "TreeAccessor",
    "DepthFirstPreOrderTraverser",
    "depth_first_preorder",
    "SelectionBinding",
    "StateBinding",
]
