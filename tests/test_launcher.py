from contrast_widget.app.widget_state import StateStore
from contrast_widget.config import settings
from contrast_widget.launcher import build_parser, prepare_store, startup_notice


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.data_dir == settings.DATA_DIR
    assert args.reset is False


def test_prepare_store_loads_persisted_state(tmp_path):
    store = StateStore.load(tmp_path)
    store.set("background", "#ffffff")
    store.save()
    assert prepare_store(tmp_path).get("background") == "#ffffff"


def test_prepare_store_reset_discards_state(tmp_path):
    store = StateStore.load(tmp_path)
    store.set("dark_mode", True)
    store.save()
    fresh = prepare_store(tmp_path, reset=True)
    assert fresh.get("dark_mode") is False
    assert not (tmp_path / "widget_state.json").exists()


def test_startup_notice_only_after_reset():
    assert startup_notice(True) == settings.RESET_NOTICE
    assert startup_notice(False) is None
