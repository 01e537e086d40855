"""Toast notification layer for the contrast widget.

`ToastHost` is the strip under the inputs where notices appear;
`NotificationManager` shows one toast at a time there (a new notice replaces
the previous one), auto-dismisses it and pauses the countdown while hovered.

Usage:
    host = ToastHost(widget)
    manager = NotificationManager(host)
    manager.notify("Please enter a valid HEX value", error=True)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from contrast_widget.config import settings

__all__ = ["ToastHost", "NotificationManager", "TOAST_STYLES"]


@dataclass(frozen=True)
class _ToastStyle:
    background: str
    foreground: str


TOAST_STYLES = {
    "error": _ToastStyle("#B3261E", "#FFFFFF"),
    "info": _ToastStyle("#121212", "#FFFFFF"),
}


class ToastHost(QWidget):
    """Transparent strip holding the visible toast."""

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.setObjectName("toastHost")
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

    def toast_widgets(self) -> List[QWidget]:
        layout = self.layout()
        return [layout.itemAt(i).widget() for i in range(layout.count()) if layout.itemAt(i).widget()]

    def show_toast(self, widget: QWidget) -> None:
        self.layout().addWidget(widget)

    def clear(self) -> None:
        for widget in self.toast_widgets():
            self.layout().removeWidget(widget)
            widget.setParent(None)


class _Toast(QWidget):
    """Toast body; tells the manager when the pointer enters or leaves."""

    def __init__(self, manager: "NotificationManager", severity: str, message: str, parent: QWidget):
        super().__init__(parent)
        self._manager = manager
        style = TOAST_STYLES[severity]
        self.setObjectName("toastWidget")
        self.setProperty("severity", severity)
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.setStyleSheet(
            f"#toastWidget {{ background: {style.background}; border-radius: 8px; }}"
            f" QLabel, QPushButton {{ color: {style.foreground}; background: transparent; border: none; }}"
        )
        row = QHBoxLayout(self)
        row.setContentsMargins(12, 8, 12, 8)
        self.label = QLabel(message, self)
        self.label.setObjectName("toastMessage")
        self.label.setWordWrap(True)
        row.addWidget(self.label, 1)
        close_btn = QPushButton("✕", self)
        close_btn.setObjectName("toastCloseButton")
        close_btn.setFixedSize(20, 20)
        close_btn.clicked.connect(lambda _=False: manager.dismiss())  # type: ignore
        row.addWidget(close_btn, alignment=Qt.AlignmentFlag.AlignTop)

    def enterEvent(self, event):  # type: ignore[override]
        self._manager.pause()
        return super().enterEvent(event)

    def leaveEvent(self, event):  # type: ignore[override]
        self._manager.resume()
        return super().leaveEvent(event)


class NotificationManager:
    """Shows a single toast in a `ToastHost` with an auto-dismiss timer.

    Timers can be disabled so tests need no event loop.
    """

    def __init__(
        self,
        host: ToastHost,
        *,
        timeout_ms: int = settings.NOTIFICATION_TIMEOUT_MS,
        disable_timers: bool = False,
    ) -> None:
        self._host = host
        self._timeout_ms = timeout_ms
        self._timer: Optional[QTimer] = None
        self._remaining_ms = 0
        if not disable_timers:
            self._timer = QTimer(host)
            self._timer.setSingleShot(True)
            self._timer.timeout.connect(self.dismiss)  # type: ignore

    def notify(self, message: str, *, error: bool = False) -> QWidget:
        """Replace the visible toast with *message*."""
        self.dismiss()
        toast = _Toast(self, "error" if error else "info", message, self._host)
        self._host.show_toast(toast)
        if self._timer is not None and self._timeout_ms > 0:
            self._timer.start(self._timeout_ms)
        return toast

    def dismiss(self) -> bool:
        if self._timer is not None:
            self._timer.stop()
        had_toast = bool(self._host.toast_widgets())
        self._host.clear()
        return had_toast

    # Hover pause / resume --------------------------------------
    def pause(self) -> None:
        if self._timer is not None and self._timer.isActive():
            self._remaining_ms = self._timer.remainingTime()
            self._timer.stop()

    def resume(self) -> None:
        if self._timer is not None and self._remaining_ms > 0 and self._host.toast_widgets():
            self._timer.start(max(50, self._remaining_ms))
            self._remaining_ms = 0
