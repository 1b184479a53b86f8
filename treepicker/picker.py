"""Tree picker facades.

A picker binds the selection model (policy, resolver, mutator) to one
concrete tree and one selection binding. The view layer asks it what to
draw and tells it what the user activated; the picker answers from the
binding and writes new selections back through it.

Three variants share one constructor shape:

    TreeSinglePicker    exactly one value, always present
    TreeOptionalPicker  one value or None
    TreeMultiPicker     a set of values, optionally cascading
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, FrozenSet, List, Optional, Sequence

from .config import (
    PickerConfig,
    PickerConfigurationError,
    PresentationState,
    SelectionPolicy,
)
from .core.accessor import TreeAccessor
from .core.traverser import DepthFirstPreOrderTraverser
from .selection.policy import (
    allows,
    is_selectable,
    cascades,
    SINGLE_POLICIES,
    OPTIONAL_POLICIES,
    MULTI_POLICIES,
)
from .selection.resolver import SelectionResolver
from .selection.mutator import (
    toggle_single,
    toggle_optional,
    toggle_multi,
    toggle_cascading,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PickerRow:
    """Everything the view layer needs to draw one option row."""
    node: Any
    depth: int
    identity: Any
    is_leaf: bool
    selectable: bool
    selected: bool
    content: Any


class TreePicker(ABC):
    """Abstract base class for tree pickers.

    Subclasses define which policies they accept and how a toggle turns
    the current selection into the next one. Everything else (node access,
    traversal, row building, open/closed state) lives here.
    """

    allowed_policies: FrozenSet[SelectionPolicy] = MULTI_POLICIES
    dismisses_on_select = False

    def __init__(self,
                 data: Sequence[Any],
                 selection: Any,
                 config: Optional[PickerConfig] = None,
                 **overrides):
        """Create and validate a picker.

        Args:
            data: Ordered root nodes of the tree (not copied, not owned)
            selection: SelectionBinding, or any object with get() and set(value)
            config: Picker configuration (defaults to PickerConfig())
            **overrides: PickerConfig fields to override, e.g. title="City"

        Raises:
            PickerConfigurationError: If the configuration or binding is invalid
        """
        config = config if config is not None else PickerConfig()
        if overrides:
            config = config.replace(**overrides)

        errors = config.validate(self.allowed_policies)
        errors.extend(self._validate_binding(selection))
        if errors:
            raise PickerConfigurationError(
                f"Invalid picker configuration: {'; '.join(errors)}"
            )

        self.data = data
        self.selection = selection
        self.config = config

        self.accessor = TreeAccessor.from_config(config)
        self.traverser = DepthFirstPreOrderTraverser(self.accessor, config.max_depth)
        self.resolver = SelectionResolver(self.accessor, self.traverser, config.selection_mode)

        self.state = PresentationState.CLOSED

    def _validate_binding(self, selection: Any) -> List[str]:
        """Validate the selection binding.

        Returns:
            List of binding problems (empty if valid)
        """
        issues = []
        for method in ("get", "set"):
            if not callable(getattr(selection, method, None)):
                issues.append(f"selection binding has no callable {method}()")
        return issues

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(title={self.config.title!r}, "
            f"policy={self.policy.name}, state={self.state.name})"
        )

    @property
    def label(self) -> Optional[str]:
        return self.config.title

    @property
    def policy(self) -> SelectionPolicy:
        return self.config.policy

    # Presentation state

    @property
    def is_open(self) -> bool:
        return self.state is PresentationState.OPEN

    def open(self) -> None:
        """Show the option list."""
        self.state = PresentationState.OPEN

    def dismiss(self) -> None:
        """Hide the option list."""
        self.state = PresentationState.CLOSED

    # Queries

    def is_selectable(self, node: Any) -> bool:
        return is_selectable(node, self.config.policy, self.accessor)

    @abstractmethod
    def is_selected(self, node: Any) -> bool:
        """Check if the node is part of the current selection."""
        pass

    def render_row(self, node: Any) -> Any:
        return self.config.row_content(node)

    def rows(self) -> List[PickerRow]:
        """Describe every option row in outline (pre-order) order."""
        rows = []
        for node, depth, children in self.traverser.walk(self.data):
            leaf = children is None
            rows.append(PickerRow(
                node=node,
                depth=depth,
                identity=self.accessor.identity_of(node),
                is_leaf=leaf,
                selectable=allows(self.config.policy, leaf),
                selected=self.is_selected(node),
                content=self.render_row(node),
            ))
        return rows

    @abstractmethod
    def selection_content(self) -> Any:
        """Render the current selection for the picker's label row."""
        pass

    # Events

    def toggle(self, node: Any) -> bool:
        """Handle activation of a node.

        Non-selectable nodes are ignored. Otherwise the next selection is
        computed from the current one and written back through the binding.

        Returns:
            True if the selection value changed
        """
        if not self.is_selectable(node):
            logger.debug(
                "Ignoring toggle of non-selectable node %r under %s",
                self.accessor.identity_of(node), self.policy.name
            )
            return False

        current = self.selection.get()
        updated = self._toggled(node, current)
        self.selection.set(updated)

        logger.debug(
            "Toggled %r: %r -> %r",
            self.accessor.identity_of(node), current, updated
        )

        if self.dismisses_on_select and self.config.dismiss_on_select:
            self.dismiss()
        return updated != current

    @abstractmethod
    def _toggled(self, node: Any, current: Any) -> Any:
        """Compute the selection value that follows toggling node."""
        pass


class TreeSinglePicker(TreePicker):
    """A picker for exactly one option from a set of hierarchical values.

    The selection always holds a value; toggling replaces it and there is
    no way to clear it.
    """

    allowed_policies = SINGLE_POLICIES
    dismisses_on_select = True

    def _validate_binding(self, selection: Any) -> List[str]:
        issues = super()._validate_binding(selection)
        if not issues and selection.get() is None:
            issues.append("single picker selection cannot be None")
        return issues

    @property
    def selected_node(self) -> Optional[Any]:
        return self.resolver.resolve_selected_node(self.selection.get(), self.data)

    def is_selected(self, node: Any) -> bool:
        return self.resolver.is_selected(node, self.selection.get())

    def selection_content(self) -> Any:
        """Row content of the selected node, or None if it is not in the tree."""
        node = self.selected_node
        if node is None:
            return None
        return self.render_row(node)

    def _toggled(self, node: Any, current: Any) -> Any:
        return toggle_single(self.resolver.value_of(node), current)


class TreeOptionalPicker(TreePicker):
    """A picker for zero or one option from a set of hierarchical values.

    Toggling the selected node clears the selection; toggling any other
    selectable node replaces it.
    """

    allowed_policies = OPTIONAL_POLICIES
    dismisses_on_select = True

    @property
    def selected_node(self) -> Optional[Any]:
        return self.resolver.resolve_selected_node(self.selection.get(), self.data)

    def is_selected(self, node: Any) -> bool:
        return self.resolver.is_selected(node, self.selection.get())

    def selection_content(self) -> Any:
        """Row content of the selected node, or the empty-state content."""
        node = self.selected_node
        if node is None:
            return self.config.nil_content()
        return self.render_row(node)

    def clear(self) -> bool:
        """Select nothing (the picker's "None" row).

        Returns:
            True if a value was cleared
        """
        had_value = self.selection.get() is not None
        self.selection.set(None)
        if self.config.dismiss_on_select:
            self.dismiss()
        return had_value

    def _toggled(self, node: Any, current: Any) -> Any:
        return toggle_optional(self.resolver.value_of(node), current)


class TreeMultiPicker(TreePicker):
    """A picker for any number of options from a set of hierarchical values.

    The selection is a set. Under CASCADING, toggling a node selects or
    deselects the node and all of its descendants in one update.
    """

    allowed_policies = MULTI_POLICIES

    def _current(self) -> Any:
        current = self.selection.get()
        return set() if current is None else current

    @property
    def selected_nodes(self) -> List[Any]:
        return self.resolver.resolve_selected_nodes(self._current(), self.data)

    def is_selected(self, node: Any) -> bool:
        return self.resolver.is_member(node, self._current())

    def selection_content(self) -> Any:
        """Row contents of all selected nodes, or the empty-state content."""
        nodes = self.selected_nodes
        if not nodes:
            return self.config.nil_content()
        return [self.render_row(node) for node in nodes]

    def clear(self) -> bool:
        """Deselect everything.

        Returns:
            True if anything was deselected
        """
        current = self._current()
        self.selection.set(frozenset() if isinstance(current, frozenset) else set())
        return bool(current)

    def toggle(self, node: Any) -> bool:
        value = self.resolver.value_of(node)
        try:
            hash(value)
        except TypeError:
            logger.debug("Cannot toggle %r: selection value is not hashable", node)
            return False
        return super().toggle(node)

    def _toggled(self, node: Any, current: Any) -> Any:
        current = set() if current is None else current
        value = self.resolver.value_of(node)
        if cascades(self.config.policy):
            subtree = (self.resolver.value_of(n) for n in self.traverser.iter_subtree(node))
            return toggle_cascading(value, subtree, current)
        return toggle_multi(value, current)


_PICKERS = {
    'single': TreeSinglePicker,
    'optional': TreeOptionalPicker,
    'multi': TreeMultiPicker,
    'multiple': TreeMultiPicker,
}


def create_picker(kind: str,
                  data: Sequence[Any],
                  selection: Any,
                  config: Optional[PickerConfig] = None,
                  **overrides) -> TreePicker:
    """Create a picker by variant name.

    Args:
        kind: Picker variant (single, optional, multi)
        data: Ordered root nodes of the tree
        selection: Selection binding
        config: Picker configuration
        **overrides: PickerConfig fields to override

    Returns:
        TreePicker instance

    Raises:
        ValueError: If kind is not recognized
    """
    kind_lower = kind.lower()
    if kind_lower not in _PICKERS:
        raise ValueError(
            f"Unknown picker kind: {kind}. "
            f"Choose from: {', '.join(_PICKERS.keys())}"
        )
    return _PICKERS[kind_lower](data, selection, config, **overrides)
