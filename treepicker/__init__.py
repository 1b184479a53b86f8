"""TreePicker - Selection model for hierarchical picker controls.

TreePicker computes everything a single, optional or multi-selection
tree picker needs from an application-owned tree and selection value:
which nodes can be selected, which are selected, what a toggle changes,
and which nodes a stored selection denotes. Drawing is left to the
view layer, which renders the rows a picker describes.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from treepicker import TreeMultiPicker, StateBinding, SelectionPolicy

    picker = TreeMultiPicker(tree, StateBinding(set()),
                             policy=SelectionPolicy.CASCADING)
    picker.toggle(tree[0])
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

from .config import (
    DEFAULT_MAX_DEPTH,
    PickerConfig,
    PickerConfigurationError,
    PresentationState,
    SelectionMode,
    SelectionPolicy,
)
from .core import (
    TreeAccessor,
    DepthFirstPreOrderTraverser,
    depth_first_preorder,
    SelectionBinding,
    StateBinding,
)
from .selection import (
    SelectionResolver,
    is_selectable,
    cascades,
)
from .picker import (
    PickerRow,
    TreePicker,
    TreeSinglePicker,
    TreeOptionalPicker,
    TreeMultiPicker,
    create_picker,
)
from .api import (
    traverse_tree,
    find_node,
    count_nodes,
    get_leaf_nodes,
    selectable_nodes,
)

__all__ = [
    "__version__",
    # Config
    "DEFAULT_MAX_DEPTH",
    "PickerConfig",
    "PickerConfigurationError",
    "PresentationState",
    "SelectionMode",
    "SelectionPolicy",
    # Core
    "TreeAccessor",
    "DepthFirstPreOrderTraverser",
    "depth_first_preorder",
    "SelectionBinding",
    "StateBinding",
    # Selection model
    "SelectionResolver",
    "is_selectable",
    "cascades",
    # Pickers
    "PickerRow",
    "TreePicker",
    "TreeSinglePicker",
    "TreeOptionalPicker",
    "TreeMultiPicker",
    "create_picker",
    # API
    "traverse_tree",
    "find_node",
    "count_nodes",
    "get_leaf_nodes",
    "selectable_nodes",
]
