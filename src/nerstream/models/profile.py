"""Per-language column layouts of the corpus."""

from pydantic import BaseModel, Field

from .base import Language


class LanguageProfile(BaseModel):
    """Column layout and adaptive-data policy for one corpus language."""

    language: Language
    field_count: int = Field(..., ge=1, description="Fields per data line")
    token_column: int = Field(..., ge=0)
    tag_column: int = Field(..., ge=0)
    always_clear_adaptive_data: bool = Field(
        default=False,
        description="Corpus carries no article boundaries, clear every sentence",
    )

    class Config:
        frozen = True


# WORD POS-TAG SC-TAG NE-TAG
ITALIAN = LanguageProfile(
    language=Language.IT,
    field_count=4,
    token_column=0,
    tag_column=3,
    always_clear_adaptive_data=True,
)

PROFILES = {
    Language.IT: ITALIAN,
}


def get_profile(language: Language) -> LanguageProfile:
    """Look up the profile for a language."""
    return PROFILES[Language(language)]
