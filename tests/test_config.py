"""Settings tests — defaults and OCCAM_* environment overrides."""

from occam_razor import __version__
from occam_razor.config import Settings, get_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("OCCAM_HTTP_PORT", raising=False)
    settings = Settings(_env_file=None)
    assert settings.server_name == "occams-razor-mcp-server"
    assert settings.server_version == __version__
    assert settings.http_port == 8000


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("OCCAM_HTTP_PORT", "9100")
    monkeypatch.setenv("OCCAM_LOG_LEVEL", " debug ")
    monkeypatch.setenv("OCCAM_LOG_FORMAT", "json")
    settings = Settings(_env_file=None)
    assert settings.http_port == 9100
    assert settings.log_level == "DEBUG"
    assert settings.log_format == "json"


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
