"""Selection resolution for TreePicker.

The resolver connects selection values and tree nodes in both
directions: it derives the value a node contributes to a selection, and
it finds the node(s) a stored selection denotes. A stored value that no
longer matches any node is not an error; it simply resolves to nothing.
"""

import logging
from typing import Any, Collection, Iterable, List, Optional

from ..config import SelectionMode
from ..core.accessor import TreeAccessor
from ..core.traverser import DepthFirstPreOrderTraverser

logger = logging.getLogger(__name__)


class SelectionResolver:
    """Maps nodes to selection values and selection values back to nodes.

    With SelectionMode.BY_VALUE the selection stores nodes, so a stored
    value already is the node it denotes. With SelectionMode.BY_IDENTITY
    the selection stores identities and resolving one means walking the
    tree. If identities repeat, the first match in pre-order wins.
    """

    def __init__(self,
                 accessor: TreeAccessor,
                 traverser: DepthFirstPreOrderTraverser,
                 mode: SelectionMode = SelectionMode.BY_IDENTITY):
        """Initialize resolver.

        Args:
            accessor: TreeAccessor for identity extraction
            traverser: Traverser used for tree lookups
            mode: What selection values store
        """
        self.accessor = accessor
        self.traverser = traverser
        self.mode = mode

    def value_of(self, node: Any) -> Any:
        """Return the selection value a node contributes."""
        if self.mode is SelectionMode.BY_VALUE:
            return node
        return self.accessor.identity_of(node)

    def is_selected(self, node: Any, value: Any) -> bool:
        """Check a node against a single (possibly absent) selection value."""
        if value is None:
            return False
        return self.value_of(node) == value

    def is_member(self, node: Any, values: Collection[Any]) -> bool:
        """Check a node against a set of selection values."""
        value = self.value_of(node)
        try:
            return value in values
        except TypeError:
            # Unhashable node under BY_VALUE; nothing in a set can match it
            logger.debug("Selection value for %r is not hashable", node)
            return False

    def resolve_selected_node(self, value: Any, roots: Iterable[Any]) -> Optional[Any]:
        """Find the node a single selection value denotes.

        Args:
            value: Stored selection value (None = nothing selected)
            roots: Ordered root nodes of the tree

        Returns:
            The matching node, or None if nothing matches
        """
        if value is None:
            return None
        if self.mode is SelectionMode.BY_VALUE:
            return value

        for node in self.traverser.iter_nodes(roots):
            if self.accessor.identity_of(node) == value:
                return node

        logger.debug("Selection value %r does not match any node", value)
        return None

    def resolve_selected_nodes(self, values: Collection[Any], roots: Iterable[Any]) -> List[Any]:
        """Find every node a set of selection values denotes.

        One pass over the tree, testing each visited node for membership.

        Args:
            values: Stored selection values
            roots: Ordered root nodes of the tree

        Returns:
            Matching nodes in pre-order. Under BY_VALUE, stored nodes that
            are not in the tree follow at the end.
        """
        if not values:
            return []

        found = []
        for node in self.traverser.iter_nodes(roots):
            if self.is_member(node, values):
                found.append(node)

        if self.mode is SelectionMode.BY_VALUE:
            seen = set(found)
            found.extend(value for value in values if value not in seen)
        elif len(found) < len(values):
            logger.debug(
                "%d of %d selection values do not match any node",
                len(values) - len(found), len(values)
            )

        return found
