"""TreeAccessor abstraction for TreePicker.

The picker never owns the tree it shows. Application data comes in
whatever shape the application already uses, and the TreeAccessor is
what knows HOW to read it: where a node keeps its identity and where
it keeps its children.
"""

from operator import attrgetter
from typing import Any, Callable, Iterator, Optional, Sequence, Union

Extractor = Union[str, Callable[[Any], Any]]


def _as_callable(extractor: Extractor) -> Callable[[Any], Any]:
    """Turn an attribute name into a getter, pass callables through."""
    if isinstance(extractor, str):
        return attrgetter(extractor)
    if not callable(extractor):
        raise TypeError(
            f"Extractor must be an attribute name or a callable, got {extractor!r}"
        )
    return extractor


class TreeAccessor:
    """Read-only navigation over an externally owned forest.

    Leaf-ness is defined by the data, not computed: a node whose children
    extractor returns None is a leaf, while a node returning an empty
    sequence is an internal node that currently has no children (an empty
    folder, for example).

    Example:
        accessor = TreeAccessor(identity="title", children="children")
        accessor.is_leaf(london)        # True, children is None
        accessor.is_leaf(empty_folder)  # False, children is []
    """

    def __init__(self, identity: Extractor = "id", children: Extractor = "children"):
        """Initialize accessor with identity and children extractors.

        Args:
            identity: Attribute name or callable returning a node's identity
            children: Attribute name or callable returning a node's children
                sequence, or None for a leaf
        """
        self._identity = _as_callable(identity)
        self._children = _as_callable(children)

    @classmethod
    def from_config(cls, config) -> 'TreeAccessor':
        """Create an accessor from a PickerConfig."""
        return cls(identity=config.identity, children=config.children)

    def identity_of(self, node: Any) -> Any:
        return self._identity(node)

    def children_of(self, node: Any) -> Optional[Sequence[Any]]:
        return self._children(node)

    def is_leaf(self, node: Any) -> bool:
        """Check if the node is a leaf (children extractor reports None)."""
        return self._children(node) is None

    def iter_children(self, node: Any) -> Iterator[Any]:
        """Iterate the node's children; leaves yield nothing."""
        children = self._children(node)
        if children is None:
            return iter(())
        return iter(children)
