"""Headless tests for ContrastViewModel (no QApplication required)."""

from __future__ import annotations

from contrast_widget.design.contrast import contrast_ratio
from contrast_widget.app.widget_state import StateStore, WidgetState
from contrast_widget.viewmodels.contrast_viewmodel import ContrastViewModel


class RecordingSink:
    def __init__(self):
        self.calls = []

    def __call__(self, message, *, error=False):
        self.calls.append((message, error))


def _vm(state: WidgetState | None = None):
    sink = RecordingSink()
    return ContrastViewModel(StateStore(state), notify=sink), sink


def test_initial_ratio_is_synced():
    vm, _ = _vm()
    assert vm.ratio == 2.74
    assert vm.store.get("ratio") == 2.74


def test_commit_valid_foreground_updates_ratio():
    vm, sink = _vm()
    assert vm.commit_foreground("  #FFFFFF ") is True
    assert vm.foreground == "#FFFFFF"
    assert vm.ratio == contrast_ratio("#FFFFFF", "#454545")
    assert sink.calls == []


def test_commit_accepts_value_without_hash():
    vm, _ = _vm()
    assert vm.commit_background("000000") is True
    assert vm.background == "000000"


def test_commit_rejects_wrong_length_and_keeps_previous():
    vm, sink = _vm()
    assert vm.commit_foreground("#fff") is False
    assert vm.foreground == "#898989"
    assert sink.calls == [("Please enter a valid HEX value", True)]


def test_commit_rejects_six_non_hex_characters():
    vm, sink = _vm()
    assert vm.commit_background("zzzzzz") is False
    assert vm.background == "#454545"
    assert vm.ratio == 2.74
    assert len(sink.calls) == 1


def test_commit_without_sink_does_not_raise():
    vm = ContrastViewModel(StateStore())
    assert vm.commit_foreground("nope") is False


def test_sync_ratio_only_writes_on_change():
    vm, _ = _vm()
    writes = []
    vm.store.subscribe(lambda key, value: writes.append(key))
    vm.sync_ratio()
    assert writes == []
    vm.commit_foreground("#000000")
    assert writes == ["foreground", "ratio"]


def test_unusable_persisted_colors_are_repaired():
    vm, _ = _vm(WidgetState(foreground="qqqqqq", background="#abc"))
    assert vm.foreground == "#898989"
    assert vm.background == "#454545"


def test_labels_trimmed_and_cleared():
    vm, _ = _vm()
    vm.set_foreground_label("  Body text ")
    assert vm.store.get("foreground_label") == "Body text"
    vm.set_foreground_label("   ")
    assert vm.store.get("foreground_label") is None
    vm.set_background_label("Card")
    assert vm.store.get("background_label") == "Card"


def test_ratio_text_formats_like_display():
    vm, _ = _vm()
    assert vm.ratio_text() == "2.74"
    vm.commit_foreground("#ffffff")
    vm.commit_background("#000000")
    assert vm.ratio_text() == "21"


def test_palette_follows_dark_mode():
    vm, _ = _vm()
    assert vm.palette().fill == "#E6E6E6CC"
    assert vm.palette().text == "#121212"
    vm.store.set("dark_mode", True)
    assert vm.palette().fill == "#121212CC"
    assert vm.palette().swatch_stroke == "#FFFFFF1A"
