import pytest

from contrast_widget.app.widget_state import StateStore
from contrast_widget.services.property_menu import (
    MODE_ICON_SVG,
    PropertyMenu,
    PropertyName,
)


def test_items_describe_three_toggles_in_order():
    menu = PropertyMenu(StateStore())
    items = menu.items()
    assert [i.property_name for i in items] == [
        PropertyName.DARK_MODE,
        PropertyName.SHOW_LABELS,
        PropertyName.HORIZONTAL_LAYOUT,
    ]
    assert [i.tooltip for i in items] == ["Dark Mode", "Show Labels", "Horizontal Layout"]
    assert all(i.item_type == "toggle" for i in items)
    assert not any(i.is_toggled for i in items)
    assert items[0].icon == MODE_ICON_SVG
    assert items[1].icon is None


@pytest.mark.parametrize(
    "name, field",
    [
        ("darkMode", "dark_mode"),
        ("showLabels", "show_labels"),
        ("horizontalLayout", "horizontal_layout"),
    ],
)
def test_dispatch_flips_matching_field(name, field):
    store = StateStore()
    menu = PropertyMenu(store)
    assert menu.dispatch(name) is True
    assert store.get(field) is True
    assert menu.dispatch(PropertyName(name)) is False
    assert store.get(field) is False


def test_dispatch_only_touches_its_own_field():
    store = StateStore()
    PropertyMenu(store).dispatch(PropertyName.SHOW_LABELS)
    state = store.snapshot()
    assert state.show_labels is True
    assert state.dark_mode is False and state.horizontal_layout is False


def test_items_reflect_state():
    store = StateStore()
    store.set("horizontal_layout", True)
    toggled = {i.property_name: i.is_toggled for i in PropertyMenu(store).items()}
    assert toggled[PropertyName.HORIZONTAL_LAYOUT] is True
    assert toggled[PropertyName.DARK_MODE] is False


def test_unknown_property_rejected():
    menu = PropertyMenu(StateStore())
    with pytest.raises(ValueError, match="Unexpected property type: fontSize"):
        menu.dispatch("fontSize")
