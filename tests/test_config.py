"""Tests for environment-driven decoder settings."""
from qrislink.config import DecoderSettings, get_settings


def test_defaults():
    settings = DecoderSettings()
    assert settings.strict_validation is False
    assert settings.require_valid_checksum is False
    assert settings.default_currency == "360"
    assert settings.log_ring_size == 200


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("QRIS_STRICT_VALIDATION", "true")
    monkeypatch.setenv("QRIS_REQUIRE_VALID_CRC", "1")
    monkeypatch.setenv("QRIS_DEFAULT_CURRENCY", "840")
    monkeypatch.setenv("LOG_RING_SIZE", "10")
    settings = DecoderSettings()
    assert settings.strict_validation is True
    assert settings.require_valid_checksum is True
    assert settings.default_currency == "840"
    assert settings.log_ring_size == 10


def test_dotenv_file(tmp_path):
    (tmp_path / ".env").write_text("QRIS_DEFAULT_CURRENCY=392\nUNRELATED=1\n", encoding="utf-8")
    assert DecoderSettings().default_currency == "392"


def test_field_names_accepted():
    settings = DecoderSettings(strict_validation=True, default_currency="978")
    assert settings.strict_validation is True
    assert settings.default_currency == "978"


def test_get_settings_is_cached(monkeypatch):
    first = get_settings()
    monkeypatch.setenv("QRIS_DEFAULT_CURRENCY", "840")
    assert get_settings() is first
    get_settings.cache_clear()
    assert get_settings().default_currency == "840"
