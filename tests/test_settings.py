from pathlib import Path

import pytest
from pytest import MonkeyPatch

from meteowidget.settings.user import UserSettings

CONFIG_YAML = """\
default_city: Berlin
language: en
timeout: 5
forecast_url: "${FORECAST_HOST}/v1/forecast"
home:
  lat: 55.75
  lon: 37.62
"""


@pytest.fixture(autouse=True)
def isolated(monkeypatch: MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv("METEOWIDGET_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(UserSettings, "DEFAULT_CONFIG_PATHS", [tmp_path / "config.yaml"])


def test_defaults_without_config_file() -> None:
    cfg = UserSettings.load()
    assert cfg.default_city == "Moscow"
    assert cfg.language == "ru"
    assert cfg.timeout == 10
    assert cfg.geocoding_url == "https://geocoding-api.open-meteo.com/v1/search"
    assert cfg.forecast_url == "https://api.open-meteo.com/v1/forecast"
    assert cfg.home is None


def test_load_explicit_path_with_env_interpolation(
    tmp_path: Path, monkeypatch: MonkeyPatch
) -> None:
    monkeypatch.setenv("FORECAST_HOST", "http://localhost:8080")
    path = tmp_path / "custom.yaml"
    path.write_text(CONFIG_YAML, encoding="utf-8")

    cfg = UserSettings.load(path)

    assert cfg.default_city == "Berlin"
    assert cfg.language == "en"
    assert cfg.timeout == 5
    assert cfg.forecast_url == "http://localhost:8080/v1/forecast"
    assert cfg.home is not None and (cfg.home.lat, cfg.home.lon) == (55.75, 37.62)


def test_load_from_env_var(tmp_path: Path, monkeypatch: MonkeyPatch) -> None:
    path = tmp_path / "env.yaml"
    path.write_text("default_city: Paris\n", encoding="utf-8")
    monkeypatch.setenv("METEOWIDGET_CONFIG", str(path))

    assert UserSettings.load().default_city == "Paris"


def test_env_var_pointing_nowhere(tmp_path: Path, monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setenv("METEOWIDGET_CONFIG", str(tmp_path / "missing.yaml"))
    with pytest.raises(FileNotFoundError):
        UserSettings.load()


def test_default_search_path(tmp_path: Path) -> None:
    (tmp_path / "config.yaml").write_text("default_city: Tokyo\n", encoding="utf-8")
    assert UserSettings.load().default_city == "Tokyo"


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert UserSettings.load(path) == UserSettings()


@pytest.mark.parametrize(
    "content",
    [
        "timeout: 0\n",
        "default_city: ''\n",
        "home:\n  lat: 120\n  lon: 0\n",
    ],
)
def test_invalid_config_raises_runtime_error(tmp_path: Path, content: str) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(RuntimeError, match="Invalid configuration"):
        UserSettings.load(path)


def test_unparseable_yaml(tmp_path: Path) -> None:
    path = tmp_path / "broken.yaml"
    path.write_text("home: [unclosed\n", encoding="utf-8")
    with pytest.raises(RuntimeError, match="Unable to read config YAML"):
        UserSettings.load(path)


def test_missing_explicit_path(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        UserSettings.load(tmp_path / "nope.yaml")
