# tests/test_config.py
import pytest

from src.config import Settings


class TestSettings:
    def test_debug_mode_generates_secret_key(self):
        settings = Settings(debug=True, secret_key="")
        assert len(settings.secret_key) >= 32

    def test_production_requires_secret_key(self):
        with pytest.raises(ValueError, match="QUORA_SECRET_KEY is required"):
            Settings(debug=False, secret_key="")

    def test_short_secret_key_is_rejected(self):
        with pytest.raises(ValueError, match="at least 32 characters"):
            Settings(debug=True, secret_key="too-short")

    def test_session_defaults(self):
        settings = Settings(debug=True)
        assert settings.session_ttl_hours == 8
        assert settings.password_hash_iterations == 1000
