import pytest

from collage_layout import settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    monkeypatch.delenv(settings.SETTINGS_ENV, raising=False)
    settings.read_settings.cache_clear()
    yield
    settings.read_settings.cache_clear()


def test_packaged_defaults():
    loaded = settings.load_settings()
    assert loaded["layout"] == "dynamic"
    assert (loaded["canvas_width"], loaded["canvas_height"]) == (1920, 1080)
    assert loaded["gap"] == 4


def test_settings_override_from_env(tmp_path, monkeypatch):
    path = tmp_path / "settings.yaml"
    path.write_text("layout: treemap\ngap: 12\ncanvas_width: bad\nunused: 1\n", encoding="utf-8")
    monkeypatch.setenv(settings.SETTINGS_ENV, str(path))

    loaded = settings.load_settings()

    assert loaded["layout"] == "treemap"
    assert loaded["gap"] == 12
    assert loaded["canvas_width"] == 1920
    assert "unused" not in loaded


def test_unknown_layout_in_settings_uses_dynamic(tmp_path, monkeypatch):
    path = tmp_path / "settings.yaml"
    path.write_text("layout: spiral\n", encoding="utf-8")
    monkeypatch.setenv(settings.SETTINGS_ENV, str(path))
    assert settings.load_settings()["layout"] == "dynamic"


def test_broken_settings_file_falls_back(tmp_path, monkeypatch):
    path = tmp_path / "settings.yaml"
    path.write_text("layout: [unclosed\n", encoding="utf-8")
    monkeypatch.setenv(settings.SETTINGS_ENV, str(path))
    assert settings.load_settings() == settings.DEFAULT_SETTINGS


def test_missing_settings_file_falls_back(tmp_path, monkeypatch):
    monkeypatch.setenv(settings.SETTINGS_ENV, str(tmp_path / "nope.yaml"))
    assert settings.load_settings() == settings.DEFAULT_SETTINGS


def test_settings_follow_env_changes(tmp_path, monkeypatch):
    first = tmp_path / "first.yaml"
    first.write_text("gap: 2\n", encoding="utf-8")
    second = tmp_path / "second.yaml"
    second.write_text("gap: 20\n", encoding="utf-8")

    monkeypatch.setenv(settings.SETTINGS_ENV, str(first))
    assert settings.load_settings()["gap"] == 2
    monkeypatch.setenv(settings.SETTINGS_ENV, str(second))
    assert settings.load_settings()["gap"] == 20
    monkeypatch.delenv(settings.SETTINGS_ENV)
    assert settings.load_settings()["gap"] == 4


def test_loaded_settings_are_a_copy():
    loaded = settings.load_settings()
    loaded["gap"] = 99
    assert settings.load_settings()["gap"] == 4
