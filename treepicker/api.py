"""High-level API for TreePicker.

This module provides simple, functional interfaces for common questions
about a picker's tree without building a picker. These functions wrap
the accessor, traverser and policy objects for ease of use in simple
cases, such as preparing data before a picker is shown.
"""

from typing import Any, Iterable, Iterator, List, Optional, Tuple, Union

from .config import DEFAULT_MAX_DEPTH, SelectionPolicy
from .core.accessor import Extractor, TreeAccessor
from .core.traverser import DepthFirstPreOrderTraverser
from .selection.policy import allows


def traverse_tree(
    roots: Iterable[Any],
    children: Extractor = "children",
    max_depth: Optional[int] = DEFAULT_MAX_DEPTH,
    with_depth: bool = False,
) -> Iterator[Union[Any, Tuple[Any, int]]]:
    """Simple interface for walking a picker tree.

    Args:
        roots: Ordered root nodes
        children: Attribute name or callable returning a node's children
        max_depth: Deepest level to visit (None = unlimited)
        with_depth: Yield (node, depth) tuples instead of nodes

    Yields:
        Nodes (or (node, depth) tuples) in depth-first pre-order

    Example:
        >>> for node in traverse_tree(locations_tree()):
        ...     print(node.title)
    """
    traverser = DepthFirstPreOrderTraverser(TreeAccessor(children=children), max_depth)
    if with_depth:
        yield from traverser.traverse(roots)
    else:
        yield from traverser.iter_nodes(roots)


def find_node(
    roots: Iterable[Any],
    identity_value: Any,
    identity: Extractor = "id",
    children: Extractor = "children",
    max_depth: Optional[int] = DEFAULT_MAX_DEPTH,
) -> Optional[Any]:
    """Find the first node, in pre-order, whose identity equals a value.

    Args:
        roots: Ordered root nodes
        identity_value: Identity to look for
        identity: Attribute name or callable returning a node's identity
        children: Attribute name or callable returning a node's children
        max_depth: Deepest level to visit

    Returns:
        The matching node, or None

    Example:
        >>> find_node(locations_tree(), "London").title
        'London'
    """
    accessor = TreeAccessor(identity=identity, children=children)
    for node in DepthFirstPreOrderTraverser(accessor, max_depth).iter_nodes(roots):
        if accessor.identity_of(node) == identity_value:
            return node
    return None


def count_nodes(
    roots: Iterable[Any],
    children: Extractor = "children",
    max_depth: Optional[int] = DEFAULT_MAX_DEPTH,
) -> int:
    """Count nodes in a tree.

    Args:
        roots: Ordered root nodes
        children: Attribute name or callable returning a node's children
        max_depth: Deepest level to count

    Returns:
        Number of nodes visited
    """
    count = 0
    for _ in traverse_tree(roots, children=children, max_depth=max_depth):
        count += 1
    return count


def get_leaf_nodes(
    roots: Iterable[Any],
    children: Extractor = "children",
    max_depth: Optional[int] = DEFAULT_MAX_DEPTH,
) -> List[Any]:
    """Get all leaf nodes (children extractor returns None).

    Internal nodes with an empty children sequence are not leaves.
    """
    accessor = TreeAccessor(children=children)
    traverser = DepthFirstPreOrderTraverser(accessor, max_depth)
    return [node for node, _, kids in traverser.walk(roots) if kids is None]


def selectable_nodes(
    roots: Iterable[Any],
    policy: SelectionPolicy = SelectionPolicy.LEAF_ONLY,
    children: Extractor = "children",
    max_depth: Optional[int] = DEFAULT_MAX_DEPTH,
) -> List[Any]:
    """Get the nodes a picker with the given policy would let users select.

    Args:
        roots: Ordered root nodes
        policy: Selection policy
        children: Attribute name or callable returning a node's children
        max_depth: Deepest level to visit

    Returns:
        Selectable nodes in pre-order
    """
    accessor = TreeAccessor(children=children)
    traverser = DepthFirstPreOrderTraverser(accessor, max_depth)
    return [
        node for node, _, kids in traverser.walk(roots)
        if allows(policy, kids is None)
    ]
