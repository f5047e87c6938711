"""Tests for CodecSettings loading."""

from pathlib import Path

import pytest

from stripe_entities.config import CodecSettings, get_settings


class TestCodecSettings:
    def test_defaults(self) -> None:
        settings = CodecSettings(_env_file=None)

        assert settings.strict_enums is False
        assert settings.log_enum_fallbacks is True

    def test_reads_prefixed_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STRIPE_ENTITIES_STRICT_ENUMS", "1")
        monkeypatch.setenv("STRIPE_ENTITIES_LOG_ENUM_FALLBACKS", "false")

        settings = CodecSettings(_env_file=None)

        assert settings.strict_enums is True
        assert settings.log_enum_fallbacks is False

    def test_environment_names_are_case_insensitive(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("stripe_entities_strict_enums", "true")

        assert CodecSettings(_env_file=None).strict_enums is True

    def test_reads_env_file(self, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("STRIPE_ENTITIES_STRICT_ENUMS=true\n", encoding="utf-8")

        assert CodecSettings(_env_file=env_file).strict_enums is True

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()
