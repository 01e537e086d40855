"""ViewModel for the contrast widget.

Separates headless input handling from the Qt view so tests can drive the
widget logic without a running QApplication.

Core Responsibilities:
 - Validate and commit foreground / background hex entries.
 - Route rejected entries to a notification sink, keeping the previous color.
 - Keep the persisted ratio mirror in sync with the committed colors.
 - Resolve the chrome palette for the current dark-mode flag.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Optional, Protocol

from contrast_widget.app.widget_state import StateStore
from contrast_widget.config import settings
from contrast_widget.design.contrast import contrast_ratio, hex_to_rgb
from contrast_widget.design.errors import ContrastError

__all__ = ["ContrastViewModel", "ChromePalette", "NotifySink"]

_logger = logging.getLogger(__name__)


class NotifySink(Protocol):  # noqa: D401 - protocol signature docs implicit
    def __call__(self, message: str, *, error: bool = False) -> object: ...  # pragma: no cover


@dataclass(frozen=True)
class ChromePalette:
    fill: str
    text: str
    swatch_stroke: str
    border: str = "#FFFFFF26"


_LIGHT = ChromePalette(fill="#E6E6E6CC", text="#121212", swatch_stroke="#0000001A")
_DARK = ChromePalette(fill="#121212CC", text="#FFF", swatch_stroke="#FFFFFF1A")


class ContrastViewModel:
    """Input handling and ratio mirroring over a ``StateStore``."""

    def __init__(self, store: StateStore, notify: Optional[NotifySink] = None):
        self.store = store
        self._notify = notify
        self._repair_colors()
        self.sync_ratio()

    # Colors ---------------------------------------------------------
    @property
    def foreground(self) -> str:
        return self.store.get("foreground")

    @property
    def background(self) -> str:
        return self.store.get("background")

    @property
    def ratio(self) -> float:
        return self.store.get("ratio")

    def commit_foreground(self, text: str) -> bool:
        return self._commit_color("foreground", text)

    def commit_background(self, text: str) -> bool:
        return self._commit_color("background", text)

    def _commit_color(self, key: str, text: str) -> bool:
        value = text.strip()
        try:
            hex_to_rgb(value)
        except ContrastError as exc:
            _logger.info("Rejected %s entry %r: %s", key, value, exc)
            if self._notify is not None:
                self._notify(settings.INVALID_HEX_MESSAGE, error=True)
            return False
        self.store.set(key, value)
        self.sync_ratio()
        return True

    def _repair_colors(self) -> None:
        defaults = {
            "foreground": settings.DEFAULT_FOREGROUND,
            "background": settings.DEFAULT_BACKGROUND,
        }
        for key, default in defaults.items():
            try:
                hex_to_rgb(self.store.get(key))
            except ContrastError:
                _logger.warning("Persisted %s is not a usable color; using %s", key, default)
                self.store.set(key, default)

    # Labels ---------------------------------------------------------
    def set_foreground_label(self, text: str) -> None:
        self.store.set("foreground_label", text.strip() or None)

    def set_background_label(self, text: str) -> None:
        self.store.set("background_label", text.strip() or None)

    # Ratio ------------------------------------------------------------
    def sync_ratio(self) -> float:
        """Recompute the ratio; the store is only written when it changed."""
        ratio = contrast_ratio(self.foreground, self.background)
        if ratio != self.store.get("ratio"):
            self.store.set("ratio", ratio)
        return ratio

    def ratio_text(self) -> str:
        return f"{self.ratio:g}"

    # Chrome -----------------------------------------------------------
    def palette(self) -> ChromePalette:
        return _DARK if self.store.get("dark_mode") else _LIGHT

