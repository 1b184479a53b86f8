#!/usr/bin/env python3
"""
Console location picker showing how a view layer drives TreePicker.

This example demonstrates:
- Rendering option rows from picker.rows()
- Toggling nodes and re-rendering from the binding
- Leaf-only vs cascading multi selection
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from treepicker import (
    PickerConfig,
    SelectionPolicy,
    StateBinding,
    TreeMultiPicker,
    TreeOptionalPicker,
    find_node,
)
from treepicker.testing import locations_tree


def render(picker):
    """Print the picker the way an outline view would draw it."""
    print(f"{picker.label}: {picker.selection_content()}")
    for row in picker.rows():
        mark = "[x]" if row.selected else ("[ ]" if row.selectable else "   ")
        print(f"  {'    ' * row.depth}{mark} {row.content}")
    print()


def main():
    tree = locations_tree()

    # Optional picker, leaf-only: countries are headings, cities are options
    city = StateBinding(None)
    picker = TreeOptionalPicker(tree, city, PickerConfig.leaf_only(title="City"))
    picker.open()
    picker.toggle(find_node(tree, "Paris"))
    render(picker)

    # Multi picker, cascading: picking a country picks all its cities
    regions = StateBinding(set())
    picker = TreeMultiPicker(tree, regions, PickerConfig.cascading(title="Regions"))
    picker.toggle(find_node(tree, "Germany"))
    picker.toggle(find_node(tree, "Berlin"))
    render(picker)

    print(f"Stored selection: {sorted(regions.value)}")

    # Same data, leaf-only: the country row is not selectable
    leaves = StateBinding(set())
    picker = TreeMultiPicker(tree, leaves, title="Cities",
                             policy=SelectionPolicy.LEAF_ONLY)
    changed = picker.toggle(find_node(tree, "United Kingdom"))
    print(f"Toggling a country under LEAF_ONLY changed the selection: {changed}")


if __name__ == "__main__":
    main()
