"""Tests for settings."""

from nerstream.config import Settings
from nerstream.models import EntityType, Language


class TestSettings:
    """Tests for environment-driven configuration."""

    def test_defaults(self, monkeypatch):
        for name in ("ENCODING", "ENTITY_TYPES", "LANGUAGE", "LOG_LEVEL"):
            monkeypatch.delenv(f"NERSTREAM_{name}", raising=False)

        config = Settings(_env_file=None)

        assert config.encoding == "utf-8"
        assert config.language == Language.IT
        assert config.log_level == "INFO"
        assert config.entity_filter.enabled_types == list(EntityType)

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("NERSTREAM_ENCODING", "latin-1")
        monkeypatch.setenv("NERSTREAM_ENTITY_TYPES", "PER, gpe")

        config = Settings(_env_file=None)

        assert config.encoding == "latin-1"
        assert config.entity_filter.enabled_types == [EntityType.PER, EntityType.GPE]

    def test_log_level_upper_cased(self, monkeypatch):
        """Lower-case levels should be accepted by logging."""
        monkeypatch.setenv("NERSTREAM_LOG_LEVEL", "debug")

        config = Settings(_env_file=None)

        assert config.log_level == "DEBUG"
