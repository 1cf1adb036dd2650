"""Tests for environment-driven settings."""

from geolocate.config import Settings


def test_defaults(monkeypatch):
    for name in ("GOOGLE_MAPS_API_KEY", "GOOGLE_MAPS_REGION", "GEOCODING_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings()
    assert settings.GOOGLE_MAPS_API_KEY == ""
    assert settings.GOOGLE_MAPS_REGION == ""
    assert settings.GEOCODING_TIMEOUT == 10.0


def test_from_environment(monkeypatch):
    monkeypatch.setenv("GOOGLE_MAPS_API_KEY", "abc")
    monkeypatch.setenv("GOOGLE_MAPS_REGION", "es")
    monkeypatch.setenv("GEOCODING_TIMEOUT", "2.5")

    settings = Settings()
    assert settings.GOOGLE_MAPS_API_KEY == "abc"
    assert settings.GOOGLE_MAPS_REGION == "es"
    assert settings.GEOCODING_TIMEOUT == 2.5
