"""Property menu toggles for the contrast widget.

The widget exposes three display toggles (dark mode, labels, horizontal
layout). Each menu entry is keyed by a ``PropertyName`` and dispatched through
a fixed action map that flips the matching boolean in the ``StateStore``.

Responsibilities:
 - Describe the toggle items for the current state (tooltip, icon, checked flag)
 - Dispatch a property name to its action
 - Reject unknown property names
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import logging
from typing import Callable, Dict, List, Optional

from contrast_widget.app.widget_state import StateStore

__all__ = ["PropertyName", "PropertyMenuItem", "PropertyMenu", "MODE_ICON_SVG"]

_logger = logging.getLogger(__name__)

MODE_ICON_SVG = (
    '<svg fill="none" height="20" viewBox="0 0 40 40" width="20" '
    'xmlns="http://www.w3.org/2000/svg"><path clip-rule="evenodd" '
    'd="m20 38c-9.9411 0-18-8.0589-18-18s8.0589-18 18-18 18 8.0589 18 18-8.0589 '
    "18-18 18zm0-35v34c9.3888 0 17-7.6112 17-17s-7.6112-17-17-17zm.0002 "
    "9.8001c3.9764 0 7.2 3.2235 7.2 7.2 0 3.9764-3.2236 7.2-7.2 7.2zm-.0004 "
    '14.3998c-3.9764 0-7.2-3.2235-7.2-7.2 0-3.9764 3.2236-7.2 7.2-7.2z" '
    'fill="#fff" fill-rule="evenodd"/></svg>'
)


class PropertyName(str, Enum):  # str subclass keeps the persisted wire names
    DARK_MODE = "darkMode"
    SHOW_LABELS = "showLabels"
    HORIZONTAL_LAYOUT = "horizontalLayout"


@dataclass(frozen=True)
class PropertyMenuItem:
    property_name: PropertyName
    tooltip: str
    is_toggled: bool
    icon: Optional[str] = None
    item_type: str = "toggle"


# (state field, tooltip, icon) per menu entry, in display order
_ENTRIES: Dict[PropertyName, tuple[str, str, Optional[str]]] = {
    PropertyName.DARK_MODE: ("dark_mode", "Dark Mode", MODE_ICON_SVG),
    PropertyName.SHOW_LABELS: ("show_labels", "Show Labels", None),
    PropertyName.HORIZONTAL_LAYOUT: ("horizontal_layout", "Horizontal Layout", None),
}


class PropertyMenu:
    """Enum-keyed action map over the widget toggles."""

    def __init__(self, store: StateStore):
        self._store = store
        self._actions: Dict[PropertyName, Callable[[], bool]] = {
            name: self._make_toggle(field) for name, (field, _tip, _icon) in _ENTRIES.items()
        }

    def _make_toggle(self, field: str) -> Callable[[], bool]:
        def _toggle() -> bool:
            value = not self._store.get(field)
            self._store.set(field, value)
            return value

        return _toggle

    def items(self) -> List[PropertyMenuItem]:
        return [
            PropertyMenuItem(
                property_name=name,
                tooltip=tooltip,
                is_toggled=bool(self._store.get(field)),
                icon=icon,
            )
            for name, (field, tooltip, icon) in _ENTRIES.items()
        ]

    def dispatch(self, property_name: str | PropertyName) -> bool:
        """Run the action for *property_name*; returns the new toggle value.

        Raises ValueError for names outside the menu.
        """
        try:
            name = PropertyName(property_name)
        except ValueError:
            raise ValueError(f"Unexpected property type: {property_name}") from None
        value = self._actions[name]()
        _logger.debug("Property %s toggled to %s", name.value, value)
        return value
