import pytest
from pydantic import ValidationError

from app.config.settings import Settings


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        s = Settings()
        assert s.app_env == "dev"

    def test_default_bind_address(self) -> None:
        s = Settings()
        assert s.host == "127.0.0.1"
        assert s.port == 8000

    def test_default_session_cookie(self) -> None:
        s = Settings()
        assert s.session_cookie_name == "resource_session"
        assert s.session_max_age_seconds is None

    def test_default_rules(self) -> None:
        s = Settings()
        assert s.text_max_length == 100
        assert s.min_publication_year == 1500
        assert s.digital_min_size_mb == 1.0
        assert s.digital_max_size_mb == 100.0

    def test_page_rule_is_permissive_by_default(self) -> None:
        s = Settings()
        assert s.physical_min_pages is None


class TestSettingsFromEnv:
    def test_loads_app_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_ENV", "production")
        s = Settings()
        assert s.app_env == "production"

    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings()
        assert s.log_level == "DEBUG"

    def test_loads_port(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "9000")
        s = Settings()
        assert s.port == 9000

    def test_loads_session_secret(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SESSION_SECRET_KEY", "s3cret")
        s = Settings()
        assert s.session_secret_key == "s3cret"

    def test_loads_min_pages(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PHYSICAL_MIN_PAGES", "1")
        s = Settings()
        assert s.physical_min_pages == 1


class TestSettingsValidation:
    def test_invalid_port_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "not_a_number")
        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_size_bound_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DIGITAL_MAX_SIZE_MB", "big")
        with pytest.raises(ValidationError):
            Settings()
