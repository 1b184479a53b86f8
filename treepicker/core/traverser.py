"""Tree traversal for TreePicker.

Pickers walk the forest in the same order an outline displays it:
parent before children, roots and siblings in their original order.
The walk uses an explicit stack so deep trees never exhaust the Python
call stack, and a depth bound so a malformed children extractor (one
that reports a node as its own descendant) cannot make it run forever.
"""

import logging
from typing import Any, Iterable, Iterator, List, Optional, Sequence, Tuple

from .accessor import TreeAccessor

logger = logging.getLogger(__name__)

_EXHAUSTED = object()


class DepthFirstPreOrderTraverser:
    """Depth-first pre-order traversal over a forest.

    Visits parent before children. Every call to traverse() starts a new,
    independent walk from the roots it is given, so the traverser itself
    holds no walk state and can be reused.
    """

    def __init__(self, accessor: TreeAccessor, max_depth: Optional[int] = None):
        """Initialize traverser with an accessor.

        Args:
            accessor: TreeAccessor for reading children
            max_depth: Deepest level to visit, roots are depth 0
                (None = unlimited)
        """
        self.accessor = accessor
        self.max_depth = max_depth

    def _should_explore(self, depth: int) -> bool:
        """Check if children of a node at given depth should be visited."""
        if self.max_depth is None:
            return True
        return depth < self.max_depth

    def walk(self, roots: Iterable[Any]) -> Iterator[Tuple[Any, int, Optional[Sequence[Any]]]]:
        """Traverse the forest depth-first, pre-order, reporting children.

        The children extractor is called once per visited node and its
        result is handed out with the node, so callers that need leaf-ness
        do not have to call it again.

        Args:
            roots: Ordered root nodes

        Yields:
            Tuples of (node, depth, children) where roots have depth 0 and
            children is None for a leaf
        """
        # Stack of child iterators; the top one is the sibling list being walked
        stack: List[Iterator[Any]] = [iter(roots)]
        warned = False

        while stack:
            node = next(stack[-1], _EXHAUSTED)
            if node is _EXHAUSTED:
                stack.pop()
                continue

            depth = len(stack) - 1
            children = self.accessor.children_of(node)
            yield (node, depth, children)

            if children is None:
                continue

            if self._should_explore(depth):
                stack.append(iter(children))
            elif not warned and next(iter(children), _EXHAUSTED) is not _EXHAUSTED:
                warned = True
                logger.warning(
                    "Traversal stopped descending at depth %d (max_depth=%d); "
                    "the children extractor may report a cycle",
                    depth, self.max_depth
                )

    def traverse(self, roots: Iterable[Any]) -> Iterator[Tuple[Any, int]]:
        """Traverse the forest depth-first, pre-order.

        Args:
            roots: Ordered root nodes

        Yields:
            Tuples of (node, depth) where roots have depth 0
        """
        for node, depth, _ in self.walk(roots):
            yield (node, depth)

    def iter_nodes(self, roots: Iterable[Any]) -> Iterator[Any]:
        """Traverse the forest, yielding nodes only."""
        for node, _ in self.traverse(roots):
            yield node

    def iter_subtree(self, node: Any) -> Iterator[Any]:
        """Yield the node itself followed by all its descendants, pre-order."""
        return self.iter_nodes((node,))


def depth_first_preorder(roots: Iterable[Any],
                         accessor: TreeAccessor,
                         max_depth: Optional[int] = None) -> Iterator[Any]:
    """Lazily yield every node of the forest, parent before children.

    Args:
        roots: Ordered root nodes
        accessor: TreeAccessor for reading children
        max_depth: Deepest level to visit (None = unlimited)
    """
    return DepthFirstPreOrderTraverser(accessor, max_depth).iter_nodes(roots)
