import pytest

from printer import PrinterApi
from setting import AppSettings, EnvAppSettings, LoggingLevel, app_settings


@pytest.fixture
def set_env(settings: AppSettings, monkeypatch):
    monkeypatch.setenv("OCTOPRINT_URL", str(settings.octoprint_url))
    monkeypatch.setenv("OCTOPRINT_API_KEY", settings.octoprint_api_key)
    monkeypatch.setenv("PRINTER_API", settings.printer_api.value)
    monkeypatch.setenv("LOGGING_LEVEL", "DEBUG")


def test_load_env_app_settings(settings: AppSettings, set_env):
    s = EnvAppSettings()

    assert s.octoprint_url == settings.octoprint_url
    assert s.octoprint_api_key == settings.octoprint_api_key
    assert s.printer_api == PrinterApi.Mock
    assert s.logging_level == LoggingLevel.DEBUG


def test_load_env_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text(
        "OCTOPRINT_URL='http://printer.local:5000'\nOCTOPRINT_API_KEY='abc'\n"
    )

    s = EnvAppSettings()

    assert str(s.octoprint_url) == "http://printer.local:5000/"
    assert s.octoprint_api_key == "abc"


def test_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    s = AppSettings()

    assert str(s.octoprint_url) == "http://localhost:5000/"
    assert s.printer_api == PrinterApi.OctoPrint
    assert s.channel_capacity == 1024


def test_app_settings_is_set() -> None:
    assert app_settings is not None
