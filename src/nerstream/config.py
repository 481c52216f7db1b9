"""Configuration management for nerstream."""

from pydantic import field_validator
from pydantic_settings import BaseSettings

from nerstream.models import EntityTypeFilter, Language


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Input
    encoding: str = "utf-8"
    language: Language = Language.IT

    # Entity types emitted as spans, comma separated
    entity_types: str = "PER,ORG,LOC,GPE"

    # Logging
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.strip().upper()

    @property
    def entity_filter(self) -> EntityTypeFilter:
        """Build the entity type filter from the configured type names."""
        names = [name for name in self.entity_types.split(",") if name.strip()]
        return EntityTypeFilter.from_names(names)

    class Config:
        env_prefix = "NERSTREAM_"
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
