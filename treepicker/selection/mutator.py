"""Selection mutation for TreePicker.

Each function computes the selection that results from toggling one
node. They are pure: the current container is read, never modified,
and the caller writes the returned value back through its binding.
"""

from typing import AbstractSet, Any, Iterable, Optional


def _same_kind(current: AbstractSet[Any], values: Iterable[Any]) -> AbstractSet[Any]:
    """Build a new set of the caller's kind (frozenset stays frozenset)."""
    if isinstance(current, frozenset):
        return frozenset(values)
    return set(values)


def toggle_single(node_value: Any, current: Any) -> Any:
    """Toggle in a single picker: always replace, never clear."""
    return node_value


def toggle_optional(node_value: Any, current: Optional[Any]) -> Optional[Any]:
    """Toggle in an optional picker: clear if selected, replace otherwise."""
    if current is not None and current == node_value:
        return None
    return node_value


def toggle_multi(node_value: Any, current: AbstractSet[Any]) -> AbstractSet[Any]:
    """Toggle one membership in a multi picker."""
    if node_value in current:
        return _same_kind(current, (value for value in current if value != node_value))
    return _same_kind(current, (*current, node_value))


def toggle_cascading(node_value: Any,
                     subtree_values: Iterable[Any],
                     current: AbstractSet[Any]) -> AbstractSet[Any]:
    """Toggle a node and its whole subtree in a multi picker.

    The direction is decided once, from the toggled node's own state:
    a selected node deselects its entire subtree, an unselected node
    selects its entire subtree, whatever the descendants' states were.

    Args:
        node_value: Selection value of the toggled node
        subtree_values: Values of the node and all its descendants
        current: Current selection set

    Returns:
        New selection set
    """
    subtree = set(subtree_values)
    subtree.add(node_value)
    if node_value in current:
        return _same_kind(current, (value for value in current if value not in subtree))
    return _same_kind(current, set(current) | subtree)
