"""Tests for the picker facades.

Covers the documented behaviours of single, optional and multi pickers,
including the country/city scenarios and the toggle properties:
toggling twice restores the selection, cascades are all-or-nothing,
and whatever a toggle inserts is immediately reported as selected.
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from treepicker import (
    PickerConfig,
    PickerConfigurationError,
    PresentationState,
    SelectionBinding,
    SelectionMode,
    SelectionPolicy,
    StateBinding,
    TreeMultiPicker,
    TreeOptionalPicker,
    TreePicker,
    TreeSinglePicker,
    create_picker,
)
from treepicker.testing import Location, location, locations_tree


@pytest.fixture
def tree():
    return locations_tree()


@pytest.fixture
def uk(tree):
    return tree[0]


@pytest.fixture
def london(uk):
    return uk.children[0]


@pytest.fixture
def birmingham(uk):
    return uk.children[1]


def all_nodes(picker):
    return list(picker.traverser.iter_nodes(picker.data))


class TestScenarios:
    """End-to-end country/city scenarios."""

    def test_leaf_only_multi(self, tree, uk, london):
        """Leaf-only multi: leaves toggle, countries are ignored."""
        binding = StateBinding(set())
        picker = TreeMultiPicker(tree, binding, policy=SelectionPolicy.LEAF_ONLY)

        assert picker.toggle(london)
        assert binding.value == {"London"}

        assert not picker.toggle(uk)
        assert binding.value == {"London"}

    def test_cascading_multi(self, tree, uk):
        """Cascading multi: a country toggles itself and all its cities."""
        binding = StateBinding(set())
        picker = TreeMultiPicker(tree, binding, policy=SelectionPolicy.CASCADING)

        picker.toggle(uk)
        assert binding.value == {"United Kingdom", "London", "Birmingham", "Bristol"}

        picker.toggle(uk)
        assert binding.value == set()

    def test_optional_resolves_externally_set_internal_node(self, tree, uk):
        """An internal node set from outside still resolves for display."""
        binding = StateBinding("United Kingdom")
        picker = TreeOptionalPicker(tree, binding, policy=SelectionPolicy.LEAF_ONLY)

        assert picker.selected_node is uk
        assert picker.is_selected(uk)
        assert not picker.is_selectable(uk)
        assert not picker.toggle(uk)
        assert binding.value == "United Kingdom"
        assert picker.selection_content() == "United Kingdom"

    def test_single_always_replaces(self, tree, birmingham):
        """Single picker replaces, never clears."""
        binding = StateBinding("London")
        picker = TreeSinglePicker(tree, binding, policy=SelectionPolicy.ALL_NODES)

        assert picker.toggle(birmingham)
        assert binding.value == "Birmingham"

        assert not picker.toggle(birmingham)
        assert binding.value == "Birmingham"


class TestToggleProperties:
    """Properties that hold for every node."""

    @pytest.mark.parametrize("policy", [SelectionPolicy.LEAF_ONLY, SelectionPolicy.ALL_NODES])
    def test_optional_double_toggle_restores(self, tree, policy):
        # From empty, or from the node's own value; any other value is replaced
        for node in all_nodes(TreeOptionalPicker(tree, StateBinding(None))):
            for start in (None, node.id):
                binding = StateBinding(start)
                picker = TreeOptionalPicker(tree, binding, policy=policy)
                picker.toggle(node)
                picker.toggle(node)
                assert binding.value == start

    @pytest.mark.parametrize("policy", [SelectionPolicy.LEAF_ONLY, SelectionPolicy.ALL_NODES])
    def test_multi_double_toggle_restores(self, tree, policy):
        start = {"Paris", "Germany", "Atlantis"}
        binding = StateBinding(set(start))
        picker = TreeMultiPicker(tree, binding, policy=policy)
        for node in all_nodes(picker):
            picker.toggle(node)
            picker.toggle(node)
            assert binding.value == start

    def test_cascade_is_all_or_nothing(self, tree):
        binding = StateBinding({"London", "Berlin"})
        picker = TreeMultiPicker(tree, binding, policy=SelectionPolicy.CASCADING)

        for root in tree:
            subtree = {n.id for n in picker.traverser.iter_subtree(root)}
            picker.toggle(root)
            states = {value in binding.value for value in subtree}
            assert len(states) == 1

    def test_partial_subtree_is_normalized(self, tree, uk):
        binding = StateBinding({"London"})
        picker = TreeMultiPicker(tree, binding, policy=SelectionPolicy.CASCADING)

        picker.toggle(uk)
        assert binding.value == {"United Kingdom", "London", "Birmingham", "Bristol"}

    def test_cascade_from_selected_root_with_unselected_children(self, tree, uk):
        binding = StateBinding({"United Kingdom", "Paris"})
        picker = TreeMultiPicker(tree, binding, policy=SelectionPolicy.CASCADING)

        picker.toggle(uk)
        assert binding.value == {"Paris"}

    @pytest.mark.parametrize("mode", list(SelectionMode))
    @pytest.mark.parametrize("kind", ["single", "optional", "multi"])
    def test_inserted_value_is_selected_and_resolves(self, tree, mode, kind):
        russia = Location("Russia") if mode is SelectionMode.BY_VALUE else "Russia"
        initial = {"single": russia, "optional": None, "multi": set()}[kind]

        for node in all_nodes(TreeMultiPicker(tree, StateBinding(set()))):
            picker = create_picker(kind, tree, StateBinding(initial),
                                   policy=SelectionPolicy.ALL_NODES, selection_mode=mode)
            picker.toggle(node)

            assert picker.is_selected(node)
            if kind == "multi":
                resolved = picker.selected_nodes
                assert node.id in {n.id for n in resolved}
            else:
                assert picker.selected_node.id == node.id


class TestSinglePicker:

    def test_none_selection_rejected(self, tree):
        with pytest.raises(PickerConfigurationError, match="cannot be None"):
            TreeSinglePicker(tree, StateBinding(None))

    def test_cascading_rejected(self, tree):
        with pytest.raises(PickerConfigurationError, match="CASCADING"):
            TreeSinglePicker(tree, StateBinding("London"), policy=SelectionPolicy.CASCADING)

    def test_unresolvable_selection_shows_nothing(self, tree):
        picker = TreeSinglePicker(tree, StateBinding("Atlantis"))
        assert picker.selected_node is None
        assert picker.selection_content() is None
        assert not any(row.selected for row in picker.rows())

    def test_by_value(self, tree, london, birmingham):
        binding = StateBinding(london)
        picker = TreeSinglePicker(tree, binding, selection_mode=SelectionMode.BY_VALUE)

        assert picker.is_selected(london)
        picker.toggle(birmingham)
        assert binding.value is birmingham

    def test_dismiss_on_select(self, tree, birmingham):
        picker = TreeSinglePicker(tree, StateBinding("London"), dismiss_on_select=True)
        picker.open()
        picker.toggle(birmingham)
        assert picker.state is PresentationState.CLOSED


class TestOptionalPicker:

    def test_empty_state_content(self, tree):
        picker = TreeOptionalPicker(tree, StateBinding(None), nil_selection_title="Nowhere")
        assert picker.selected_node is None
        assert picker.selection_content() == "Nowhere"

    def test_custom_empty_state_renderer(self, tree):
        picker = TreeOptionalPicker(tree, StateBinding(None),
                                    nil_selection_content=lambda: {"text": "-"})
        assert picker.selection_content() == {"text": "-"}

    def test_clear(self, tree):
        binding = StateBinding("Paris")
        picker = TreeOptionalPicker(tree, binding)

        assert picker.clear()
        assert binding.value is None
        assert not picker.clear()

    def test_row_content_renders_selection(self, tree, london):
        picker = TreeOptionalPicker(tree, StateBinding(None),
                                    row_content=lambda node: node.title.upper())
        picker.toggle(london)
        assert picker.selection_content() == "LONDON"


class TestMultiPicker:

    def test_selected_nodes_in_outline_order(self, tree):
        picker = TreeMultiPicker(tree, StateBinding({"Hamburg", "Paris", "Atlantis"}))
        assert [n.title for n in picker.selected_nodes] == ["Paris", "Hamburg"]
        assert picker.selection_content() == ["Paris", "Hamburg"]

    def test_empty_selection_content(self, tree):
        picker = TreeMultiPicker(tree, StateBinding(set()))
        assert picker.selection_content() == "None"

    def test_unresolvable_values_survive_toggles(self, tree, london):
        binding = StateBinding({"Atlantis"})
        picker = TreeMultiPicker(tree, binding)

        picker.toggle(london)
        picker.toggle(london)
        assert binding.value == {"Atlantis"}

    def test_frozenset_container(self, tree, london):
        binding = StateBinding(frozenset())
        picker = TreeMultiPicker(tree, binding)

        picker.toggle(london)
        assert binding.value == frozenset({"London"})
        assert isinstance(binding.value, frozenset)

    def test_by_value_cascade(self, tree, uk):
        binding = StateBinding(set())
        picker = TreeMultiPicker(tree, binding, policy=SelectionPolicy.CASCADING,
                                 selection_mode=SelectionMode.BY_VALUE)

        picker.toggle(uk)
        assert binding.value == {uk, *uk.children}

    def test_cascade_on_empty_internal_node(self, tree):
        binding = StateBinding(set())
        picker = TreeMultiPicker(tree, binding, policy=SelectionPolicy.CASCADING)

        picker.toggle(tree[4])
        assert binding.value == {"Antarctica"}

    def test_unhashable_by_value_toggle_is_noop(self):
        data = [{"id": 1, "children": None}]
        binding = StateBinding(set())
        picker = TreeMultiPicker(data, binding,
                                 identity=lambda n: n["id"],
                                 children=lambda n: n["children"],
                                 selection_mode=SelectionMode.BY_VALUE)

        assert not picker.toggle(data[0])
        assert binding.value == set()
        assert not picker.is_selected(data[0])

    def test_clear(self, tree):
        binding = StateBinding({"Paris"})
        picker = TreeMultiPicker(tree, binding)
        assert picker.clear()
        assert binding.value == set()
        assert not picker.clear()

    def test_multi_stays_open(self, tree, london):
        picker = TreeMultiPicker(tree, StateBinding(set()), dismiss_on_select=True)
        picker.open()
        picker.toggle(london)
        assert picker.is_open


class TestFacadeCommon:

    def test_rows(self, tree):
        picker = TreeOptionalPicker(tree, StateBinding("London"))
        rows = picker.rows()

        assert len(rows) == 14
        first, second = rows[0], rows[1]
        assert (first.identity, first.depth, first.is_leaf, first.selectable, first.selected) == \
            ("United Kingdom", 0, False, False, False)
        assert (second.identity, second.depth, second.is_leaf, second.selectable, second.selected) == \
            ("London", 1, True, True, True)
        assert second.content == "London"

    def test_presentation_state(self, tree):
        picker = TreeOptionalPicker(tree, StateBinding(None))
        assert picker.state is PresentationState.CLOSED
        picker.open()
        assert picker.is_open
        picker.dismiss()
        assert not picker.is_open

    def test_label_from_config(self, tree):
        config = PickerConfig(title="Location")
        picker = TreeOptionalPicker(tree, StateBinding(None), config)
        assert picker.label == "Location"

    def test_overrides_do_not_touch_config(self, tree):
        config = PickerConfig(title="Location")
        picker = TreeOptionalPicker(tree, StateBinding(None), config, title="City")
        assert picker.label == "City"
        assert config.title == "Location"

    def test_unknown_override(self, tree):
        with pytest.raises(PickerConfigurationError, match="colour"):
            TreeOptionalPicker(tree, StateBinding(None), colour="red")

    def test_invalid_binding(self, tree):
        with pytest.raises(PickerConfigurationError, match="get"):
            TreeOptionalPicker(tree, object())

    def test_attribute_binding(self, tree, london):
        class Form:
            city = None

        form = Form()
        picker = TreeOptionalPicker(tree, SelectionBinding.attribute(form, "city"))
        picker.toggle(london)
        assert form.city == "London"

    def test_item_binding(self, tree, london):
        state = {"cities": set()}
        picker = TreeMultiPicker(tree, SelectionBinding.item(state, "cities"))
        picker.toggle(london)
        assert state["cities"] == {"London"}

    def test_custom_identity(self):
        data = [
            {"key": "eu", "items": [{"key": "fr", "items": None}]},
        ]
        binding = StateBinding(None)
        picker = TreeOptionalPicker(data, binding,
                                    identity=lambda n: n["key"],
                                    children=lambda n: n["items"],
                                    row_content=lambda n: n["key"])
        picker.toggle(data[0]["items"][0])
        assert binding.value == "fr"
        assert picker.selected_node is data[0]["items"][0]

    def test_create_picker(self, tree):
        assert isinstance(create_picker("Multi", tree, StateBinding(set())), TreeMultiPicker)
        with pytest.raises(ValueError, match="Unknown picker kind"):
            create_picker("grid", tree, StateBinding(set()))

    def test_nested_tree(self):
        tree = [location("Europe", location("France", location("Paris")))]
        binding = StateBinding(set())
        picker = TreeMultiPicker(tree, binding, policy=SelectionPolicy.CASCADING)

        picker.toggle(tree[0])
        assert binding.value == {"Europe", "France", "Paris"}

    def test_base_picker_is_abstract(self, tree):
        with pytest.raises(TypeError):
            TreePicker(tree, StateBinding(set()))

    def test_identity_errors_propagate(self, tree, uk):
        def broken_identity(node):
            raise TypeError("bad identity")

        picker = TreeMultiPicker(tree, StateBinding({"France"}), identity=broken_identity)
        with pytest.raises(TypeError, match="bad identity"):
            picker.is_selected(uk)
        with pytest.raises(TypeError, match="bad identity"):
            picker.toggle(uk)

    def test_rows_read_children_once_per_node(self, tree):
        calls = []

        def children(node):
            calls.append(node.title)
            return node.children

        picker = TreeMultiPicker(tree, StateBinding(set()), children=children)
        rows = picker.rows()

        assert len(rows) == 14
        assert len(calls) == 14
        assert [row.selectable for row in rows].count(True) == 10
