"""Contrast widget view.

Qt presentation of the contrast calculation: a swatch rendering "Aa" and the
current ratio in the foreground color over the background, the two hex
inputs (plus optional caption inputs), and a row of checkable toggles bound
to the property menu. Rejected entries surface as toast notifications.

All state changes flow through `ContrastViewModel` / `StateStore`; the view
re-renders from the store whenever a value changes.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional

from PyQt6.QtCore import Qt, QByteArray
from PyQt6.QtGui import QFont, QIcon, QPixmap
from PyQt6.QtWidgets import (
    QBoxLayout,
    QFrame,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QToolButton,
    QVBoxLayout,
    QWidget,
)

from contrast_widget.app.widget_state import StateStore
from contrast_widget.components.toast_host import NotificationManager, ToastHost
from contrast_widget.design.contrast import hex_to_rgb
from contrast_widget.services.property_menu import PropertyMenu, PropertyName
from contrast_widget.viewmodels.contrast_viewmodel import ContrastViewModel

__all__ = ["ContrastWidget", "qss_color"]

WIDGET_WIDTH = 240
SWATCH_WIDTH = 208


def qss_color(value: str) -> str:
    """Return a QSS color for ``#RGB``, ``#RRGGBB`` or ``#RRGGBBAA`` chrome values.

    Qt reads 8-digit hex as ARGB, so alpha-suffixed values become ``rgba()``.
    """
    v = value.lstrip("#")
    if len(v) == 3:
        v = "".join(ch * 2 for ch in v)
    if len(v) == 8:
        r, g, b, a = (int(v[i : i + 2], 16) for i in (0, 2, 4, 6))
        return f"rgba({r}, {g}, {b}, {a})"
    return f"#{v}"


def _swatch_color(value: str) -> str:
    r, g, b = hex_to_rgb(value)
    return f"rgb({r}, {g}, {b})"


def _svg_icon(svg: str, fill: str) -> QIcon:
    tinted = svg.replace('fill="#fff"', f'fill="{fill}"')
    pixmap = QPixmap()
    pixmap.loadFromData(QByteArray(tinted.encode("utf-8")), "SVG")
    return QIcon(pixmap)


class _HexLineEdit(QLineEdit):
    """Line edit that commits on editing finished and displays upper case."""

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        font = QFont("Roboto Mono")
        font.setPointSize(16)
        font.setWeight(QFont.Weight.Medium)
        font.setCapitalization(QFont.Capitalization.AllUppercase)
        self.setFont(font)


class ContrastWidget(QWidget):
    def __init__(
        self,
        store: StateStore,
        parent: Optional[QWidget] = None,
        *,
        disable_toast_timers: bool = False,
        startup_notice: Optional[str] = None,
    ):
        super().__init__(parent)
        self.setObjectName("contrastWidget")
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.setFixedWidth(WIDGET_WIDTH)
        self.store = store
        self.toast_host = ToastHost(self)
        self.notifications = NotificationManager(
            self.toast_host, disable_timers=disable_toast_timers
        )
        self.viewmodel = ContrastViewModel(store, notify=self.notifications.notify)
        self.menu = PropertyMenu(store)
        self._toggle_buttons: Dict[PropertyName, QToolButton] = {}
        self._build_ui()
        self._unsubscribe = store.subscribe(self._on_state_changed)
        self.refresh()
        if startup_notice:
            self.notifications.notify(startup_notice)

    # Construction -------------------------------------------------
    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(16, 16, 16, 16)
        root.setSpacing(12)

        toolbar = QHBoxLayout()
        toolbar.setSpacing(4)
        toolbar.addStretch(1)
        for item in self.menu.items():
            btn = QToolButton(self)
            btn.setCheckable(True)
            btn.setToolTip(item.tooltip)
            btn.setObjectName(f"toggle_{item.property_name.value}")
            if not item.icon:
                btn.setText(item.tooltip)
            btn.clicked.connect(lambda _=False, n=item.property_name: self.menu.dispatch(n))  # type: ignore
            self._toggle_buttons[item.property_name] = btn
            toolbar.addWidget(btn)
        root.addLayout(toolbar)

        self.swatch = QFrame(self)
        self.swatch.setObjectName("swatch")
        self.swatch.setFixedWidth(SWATCH_WIDTH)
        swatch_layout = QHBoxLayout(self.swatch)
        swatch_layout.setContentsMargins(12, 8, 12, 8)
        swatch_layout.setSpacing(12)
        self.sample_label = QLabel("Aa", self.swatch)
        self.sample_label.setObjectName("sampleLabel")
        self.ratio_label = QLabel(self.swatch)
        self.ratio_label.setObjectName("ratioLabel")
        self.ratio_label.setAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)
        swatch_layout.addWidget(self.sample_label)
        swatch_layout.addWidget(self.ratio_label, 1)
        root.addWidget(self.swatch, alignment=Qt.AlignmentFlag.AlignHCenter)

        self.inputs_layout = QBoxLayout(QBoxLayout.Direction.TopToBottom)
        self.inputs_layout.setSpacing(12)
        (
            self.foreground_title,
            self.foreground_input,
            self.foreground_label_input,
        ) = self._build_color_column(
            "Foreground", self.viewmodel.commit_foreground, self.viewmodel.set_foreground_label
        )
        (
            self.background_title,
            self.background_input,
            self.background_label_input,
        ) = self._build_color_column(
            "Background", self.viewmodel.commit_background, self.viewmodel.set_background_label
        )
        root.addLayout(self.inputs_layout)
        root.addWidget(self.toast_host)

    def _build_color_column(
        self,
        title: str,
        commit: Callable[[str], bool],
        set_label: Callable[[str], None],
    ) -> tuple[QLabel, QLineEdit, QLineEdit]:
        column = QVBoxLayout()
        column.setSpacing(4)
        title_label = QLabel(title, self)
        title_label.setObjectName("columnTitle")
        hex_input = _HexLineEdit(self)
        hex_input.setObjectName(f"{title.lower()}Input")
        hex_input.editingFinished.connect(lambda: self._on_hex_edited(hex_input, commit))  # type: ignore
        label_input = QLineEdit(self)
        label_input.setObjectName(f"{title.lower()}LabelInput")
        label_input.setPlaceholderText("Label")
        label_input.editingFinished.connect(lambda: set_label(label_input.text()))  # type: ignore
        column.addWidget(title_label)
        column.addWidget(hex_input)
        column.addWidget(label_input)
        self.inputs_layout.addLayout(column)
        return title_label, hex_input, label_input

    # Events -------------------------------------------------------
    def _on_hex_edited(self, line_edit: QLineEdit, commit: Callable[[str], bool]) -> None:
        if not commit(line_edit.text()):
            # Rejected: restore the committed value in the field
            self.refresh()

    def _on_state_changed(self, key: str, value: Any) -> None:
        self.refresh()

    def closeEvent(self, event):  # type: ignore[override]
        self.store.save()
        self._unsubscribe()
        return super().closeEvent(event)

    # Rendering ----------------------------------------------------
    def refresh(self) -> None:
        state = self.store.snapshot()
        palette = self.viewmodel.palette()
        fg = _swatch_color(state.foreground)
        bg = _swatch_color(state.background)
        self.setStyleSheet(
            f"#contrastWidget {{ background: {qss_color(palette.fill)};"
            f" border: 1px solid {qss_color(palette.border)}; border-radius: 16px; }}"
            f" #columnTitle {{ color: {qss_color(palette.text)}; font-size: 12px; font-weight: 600; }}"
            f" QLineEdit {{ color: {qss_color(palette.text)}; background: transparent; border: none; }}"
            f" #swatch {{ background: {bg}; border: 1px solid {qss_color(palette.swatch_stroke)};"
            f" border-radius: 8px; }}"
            f" #sampleLabel {{ color: {fg}; font-size: 28px; font-weight: 700; }}"
            f" #ratioLabel {{ color: {fg}; font-size: 28px; font-weight: 500; }}"
        )
        self.ratio_label.setText(self.viewmodel.ratio_text())
        self._set_text(self.foreground_input, state.foreground)
        self._set_text(self.background_input, state.background)
        self._set_text(self.foreground_label_input, state.foreground_label or "")
        self._set_text(self.background_label_input, state.background_label or "")
        self.foreground_label_input.setVisible(state.show_labels)
        self.background_label_input.setVisible(state.show_labels)
        self.inputs_layout.setDirection(
            QBoxLayout.Direction.LeftToRight
            if state.horizontal_layout
            else QBoxLayout.Direction.TopToBottom
        )
        for item in self.menu.items():
            btn = self._toggle_buttons[item.property_name]
            btn.blockSignals(True)
            btn.setChecked(item.is_toggled)
            btn.blockSignals(False)
            if item.icon:
                self._tint_icon(btn, item.icon, qss_color(palette.text))

    @staticmethod
    def _tint_icon(btn: QToolButton, svg: str, fill: str) -> None:
        # The mode icon is drawn white; recolor it to stay visible on light chrome
        if btn.property("iconFill") != fill:
            btn.setIcon(_svg_icon(svg, fill))
            btn.setProperty("iconFill", fill)

    @staticmethod
    def _set_text(line_edit: QLineEdit, text: str) -> None:
        if line_edit.text() != text:
            line_edit.setText(text)
