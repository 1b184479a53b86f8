"""Configuration system for TreePicker.

This module defines how callers describe a picker: which nodes can be
selected, what a selection value stores, how nodes are identified and
how the current selection is labelled. A single options record replaces
the combinations of title, empty-state content and identity source that
would otherwise need one constructor each.
"""

from dataclasses import dataclass, fields, replace as _dc_replace
from enum import Enum
from typing import Optional, Callable, Any, List, Union, FrozenSet


# Deep enough for any realistic outline, shallow enough to stop a cyclic
# children extractor quickly.
DEFAULT_MAX_DEPTH = 256


class SelectionPolicy(Enum):
    """Which nodes of the tree can be selected.

    CASCADING only changes how the multi picker mutates the selection;
    selectability is the same as ALL_NODES.
    """
    LEAF_ONLY = "leaf_only"      # Only nodes without a children sequence
    ALL_NODES = "all_nodes"      # Every node, toggled independently
    CASCADING = "cascading"      # Every node, toggling a node toggles its subtree


class SelectionMode(Enum):
    """What a selection value stores.

    Chosen once per picker so no runtime type checks are needed.
    """
    BY_VALUE = "value"           # The node object itself
    BY_IDENTITY = "identity"     # The node's extracted identity


class PresentationState(Enum):
    """Display state of a picker's option list."""
    CLOSED = "closed"
    OPEN = "open"


class PickerConfigurationError(ValueError):
    """Raised when a picker is constructed from an invalid configuration."""
    pass


Extractor = Union[str, Callable[[Any], Any]]


def _default_row_content(node: Any) -> Any:
    return str(node)


@dataclass
class PickerConfig:
    """Complete configuration for a tree picker.

    Every field has a default, so callers only name what they care about:

        PickerConfig(title="Location", policy=SelectionPolicy.ALL_NODES)
    """

    # Labels
    title: Optional[str] = None                     # Text describing the picker
    nil_selection_title: str = "None"               # Shown when nothing is selected
    nil_selection_content: Optional[Callable[[], Any]] = None  # Custom empty-state renderer

    # Row rendering (opaque to the selection model)
    row_content: Callable[[Any], Any] = _default_row_content

    # Node access, attribute name or callable
    identity: Extractor = "id"
    children: Extractor = "children"

    # Selection behaviour
    policy: SelectionPolicy = SelectionPolicy.LEAF_ONLY
    selection_mode: SelectionMode = SelectionMode.BY_IDENTITY

    # Traversal bound for malformed (cyclic) input, None = unbounded
    max_depth: Optional[int] = DEFAULT_MAX_DEPTH

    # Close the option list after a toggle (single-choice pickers only)
    dismiss_on_select: bool = False

    # Convenience constructors for common configurations

    @classmethod
    def leaf_only(cls, **kwargs) -> 'PickerConfig':
        """Create config where only leaf nodes are selectable."""
        return cls(policy=SelectionPolicy.LEAF_ONLY, **kwargs)

    @classmethod
    def all_nodes(cls, **kwargs) -> 'PickerConfig':
        """Create config where every node is independently selectable."""
        return cls(policy=SelectionPolicy.ALL_NODES, **kwargs)

    @classmethod
    def cascading(cls, **kwargs) -> 'PickerConfig':
        """Create config where toggling a node toggles its whole subtree.

        Only multi pickers accept this configuration.
        """
        return cls(policy=SelectionPolicy.CASCADING, **kwargs)

    def replace(self, **overrides) -> 'PickerConfig':
        """Return a copy with the given fields replaced.

        Raises:
            PickerConfigurationError: If an override names an unknown field
        """
        known = {f.name for f in fields(self)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise PickerConfigurationError(
                f"Unknown picker option(s): {', '.join(unknown)}"
            )
        return _dc_replace(self, **overrides)

    def nil_content(self) -> Any:
        """Render the empty-selection content."""
        if self.nil_selection_content is not None:
            return self.nil_selection_content()
        return self.nil_selection_title

    def validate(self, allowed_policies: Optional[FrozenSet[SelectionPolicy]] = None) -> List[str]:
        """Validate configuration for consistency.

        Args:
            allowed_policies: Policies the calling picker variant supports
                (None = any policy)

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.policy, SelectionPolicy):
            errors.append(f"policy must be a SelectionPolicy, got {self.policy!r}")
        elif allowed_policies is not None and self.policy not in allowed_policies:
            allowed = ", ".join(sorted(p.name for p in allowed_policies))
            errors.append(
                f"policy {self.policy.name} is not supported here (choose from: {allowed})"
            )

        if not isinstance(self.selection_mode, SelectionMode):
            errors.append(
                f"selection_mode must be a SelectionMode, got {self.selection_mode!r}"
            )

        for name in ("identity", "children"):
            extractor = getattr(self, name)
            if isinstance(extractor, str):
                if not extractor:
                    errors.append(f"{name} attribute name cannot be empty")
            elif not callable(extractor):
                errors.append(f"{name} must be an attribute name or a callable")

        if not callable(self.row_content):
            errors.append("row_content must be callable")

        if self.nil_selection_content is not None and not callable(self.nil_selection_content):
            errors.append("nil_selection_content must be callable")

        if self.max_depth is not None:
            if not isinstance(self.max_depth, int) or isinstance(self.max_depth, bool):
                errors.append(f"max_depth must be an int or None, got {self.max_depth!r}")
            elif self.max_depth < 0:
                errors.append("max_depth cannot be negative")

        return errors
