"""Tests for preferences, the session marker and the local state file."""
import json
from society.context import LANGUAGE_KEY, THEME_KEY, AppContext
from society.models.preferences import Language, Theme
from society.storage.local_state import LocalStateStore


def test_defaults_without_stored_state(tmp_path):
    context = AppContext(LocalStateStore(str(tmp_path / "state.json"))).load()

    assert context.language == Language.ENGLISH
    assert context.theme == Theme.DARK
    assert not context.is_authenticated


def test_preferences_survive_restart(tmp_path):
    path = str(tmp_path / "state.json")
    context = AppContext(LocalStateStore(path)).load()
    context.set_language(Language.BENGALI)
    context.toggle_theme()

    reloaded = AppContext(LocalStateStore(path)).load()
    assert reloaded.language == Language.BENGALI
    assert reloaded.theme == Theme.LIGHT


def test_toggles_flip_between_values(tmp_path):
    context = AppContext(LocalStateStore(str(tmp_path / "state.json"))).load()

    assert context.toggle_language() == Language.BENGALI
    assert context.toggle_language() == Language.ENGLISH
    assert context.toggle_theme() == Theme.LIGHT
    assert context.toggle_theme() == Theme.DARK


def test_unknown_stored_values_fall_back(tmp_path):
    path = tmp_path / "state.json"
    path.write_text(json.dumps({LANGUAGE_KEY: "fr", THEME_KEY: "sepia"}), encoding="utf-8")

    context = AppContext(LocalStateStore(str(path))).load()
    assert context.language == Language.ENGLISH
    assert context.theme == Theme.DARK


def test_session_is_not_persisted(tmp_path):
    path = str(tmp_path / "state.json")
    context = AppContext(LocalStateStore(path)).load()
    context.start_session("treasurer")
    assert context.is_authenticated

    assert not AppContext(LocalStateStore(path)).load().is_authenticated
    context.end_session()
    assert context.session_user is None


def test_corrupt_state_file_reads_as_empty(tmp_path):
    path = tmp_path / "state.json"
    path.write_text("{not json", encoding="utf-8")
    state = LocalStateStore(str(path))

    assert state.get("anything") is None
    state.set("key", "value")
    assert state.get("key") == "value"
    state.remove("key")
    assert state.get("key", "gone") == "gone"
