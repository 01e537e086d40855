"""Widget display state persistence.

Stores the user-editable swatch colors, optional labels, the mirrored ratio
and the three display toggles so the widget reopens exactly as it was left.

Design principles:
- Pure logic (no Qt import) so it can be unit-tested headless.
- Explicit schema with version field to enable future migrations.
- Graceful fallback: corrupt or incompatible files produce defaults instead of raising.
- Key-value surface (get / set by field name) so the view layer never touches
  the file format.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, fields, replace
import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from contrast_widget.config import settings
from contrast_widget.design.contrast import is_valid_hex

__all__ = ["WidgetState", "StateStore", "STATE_VERSION"]

_logger = logging.getLogger(__name__)

STATE_VERSION = 1  # Increment when structure changes

StateListener = Callable[[str, Any], None]


@dataclass(slots=True)
class WidgetState:
    """Serializable widget display state.

    Attributes
    ----------
    version: Schema version for migration handling.
    foreground, background: Committed hex colors (as typed by the user).
    foreground_label, background_label: Optional free-text captions.
    ratio: Last computed contrast ratio (mirror, recomputed on change).
    dark_mode: Dark chrome instead of light.
    show_labels: Whether the caption inputs are visible.
    horizontal_layout: Place the two color inputs side by side.
    """

    version: int = STATE_VERSION
    foreground: str = settings.DEFAULT_FOREGROUND
    background: str = settings.DEFAULT_BACKGROUND
    foreground_label: Optional[str] = None
    background_label: Optional[str] = None
    ratio: float = 0.0
    dark_mode: bool = False
    show_labels: bool = False
    horizontal_layout: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WidgetState":
        def _opt_str(value: Any) -> Optional[str]:
            return value if isinstance(value, str) else None

        return cls(
            version=int(data.get("version", STATE_VERSION)),
            foreground=str(data.get("foreground", settings.DEFAULT_FOREGROUND)),
            background=str(data.get("background", settings.DEFAULT_BACKGROUND)),
            foreground_label=_opt_str(data.get("foreground_label")),
            background_label=_opt_str(data.get("background_label")),
            ratio=float(data.get("ratio", 0.0)),
            dark_mode=bool(data.get("dark_mode", False)),
            show_labels=bool(data.get("show_labels", False)),
            horizontal_layout=bool(data.get("horizontal_layout", False)),
        )


_FIELD_NAMES = frozenset(f.name for f in fields(WidgetState)) - {"version"}


def _resolve_path(base_dir: str | Path | None) -> Path:
    base = Path(base_dir) if base_dir else Path.cwd()
    return base / settings.STATE_FILENAME


def _read_state(path: Path) -> WidgetState:
    if not path.exists():
        return WidgetState()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        state = WidgetState.from_dict(data)
    except (OSError, ValueError, TypeError, AttributeError) as exc:
        _logger.warning("Discarding unreadable widget state %s: %s", path, exc)
        return WidgetState()
    if state.version != STATE_VERSION:
        # Reset to defaults but keep the colors when they still validate.
        _logger.warning(
            "Widget state version %s != %s; resetting", state.version, STATE_VERSION
        )
        fresh = WidgetState()
        if is_valid_hex(state.foreground):
            fresh.foreground = state.foreground
        if is_valid_hex(state.background):
            fresh.background = state.background
        return fresh
    return state


class StateStore:
    """Key-value view over a persisted ``WidgetState``.

    Thread-safety: not thread-safe; access from the GUI thread only.
    """

    def __init__(self, state: WidgetState | None = None, base_dir: str | Path | None = None):
        self._state = state if state is not None else WidgetState()
        self._base_dir = base_dir
        self._listeners: List[StateListener] = []

    @classmethod
    def load(cls, base_dir: str | Path | None = None) -> "StateStore":
        """Load the store from *base_dir* (defaults to CWD)."""
        return cls(_read_state(_resolve_path(base_dir)), base_dir=base_dir)

    # Key-value access ---------------------------------------------
    def get(self, key: str) -> Any:
        if key not in _FIELD_NAMES:
            raise KeyError(key)
        return getattr(self._state, key)

    def set(self, key: str, value: Any) -> bool:
        """Set a field by name. Returns True when the stored value changed."""
        if key not in _FIELD_NAMES:
            raise KeyError(key)
        if getattr(self._state, key) == value:
            return False
        setattr(self._state, key, value)
        for listener in list(self._listeners):
            listener(key, value)
        return True

    def snapshot(self) -> WidgetState:
        return replace(self._state)

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a change listener; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    # Persistence ----------------------------------------------------
    def save(self) -> Path:
        """Persist state atomically. Returns the path written."""
        path = _resolve_path(self._base_dir)
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp = path.with_suffix(path.suffix + ".tmp")
        tmp.write_text(
            json.dumps(self._state.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8"
        )
        tmp.replace(path)
        _logger.debug("Widget state saved to %s", path)
        return path
