"""Selection model for TreePicker.

Policies decide what can be selected, the resolver decides what is
selected, and the mutator decides what a toggle changes.
"""

from .policy import (
    allows,
    is_selectable,
    cascades,
    SINGLE_POLICIES,
    OPTIONAL_POLICIES,
    MULTI_POLICIES,
)
from .resolver import SelectionResolver
from .mutator import (
    toggle_single,
    toggle_optional,
    toggle_multi,
    toggle_cascading,
)

__all__ = [
    'allows',
    'is_selectable',
    'cascades',
    'SINGLE_POLICIES',
    'OPTIONAL_POLICIES',
    'MULTI_POLICIES',
    'SelectionResolver',
    'toggle_single',
    'toggle_optional',
    'toggle_multi',
    'toggle_cascading',
]
