"""Selection policies for TreePicker.

A policy answers one question: can this node be selected? The answer
depends only on the node and the policy, never on the current selection.
"""

from typing import Any, FrozenSet

from ..config import SelectionPolicy
from ..core.accessor import TreeAccessor

# Policies each picker variant accepts. Cascading needs a set to cascade into.
SINGLE_POLICIES: FrozenSet[SelectionPolicy] = frozenset({
    SelectionPolicy.LEAF_ONLY,
    SelectionPolicy.ALL_NODES,
})
OPTIONAL_POLICIES: FrozenSet[SelectionPolicy] = SINGLE_POLICIES
MULTI_POLICIES: FrozenSet[SelectionPolicy] = frozenset(SelectionPolicy)


def is_selectable(node: Any, policy: SelectionPolicy, accessor: TreeAccessor) -> bool:
    """Check if a node can be selected under the given policy.

    Args:
        node: The node to check
        policy: Active selection policy
        accessor: TreeAccessor for the leaf test

    Returns:
        True for leaves under LEAF_ONLY, True for every node otherwise
    """
    if policy is SelectionPolicy.LEAF_ONLY:
        return accessor.is_leaf(node)
    return True


def allows(policy: SelectionPolicy, is_leaf: bool) -> bool:
    """Check selectability when leaf-ness is already known."""
    return is_leaf or policy is not SelectionPolicy.LEAF_ONLY


def cascades(policy: SelectionPolicy) -> bool:
    """Check if toggling a node also toggles its descendants."""
    return policy is SelectionPolicy.CASCADING
