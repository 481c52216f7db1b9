"""Data models for decoded NER corpus samples.

Model Hierarchy:
- NameSample → Spans (typed token intervals)
- NamedEntityTag: one parsed IOB2 tag per token
- EntityTypeFilter: which entity types become spans
- LanguageProfile: column layout of the corpus
"""

from .base import (
    GENERATE_GPE_ENTITIES,
    GENERATE_LOCATION_ENTITIES,
    GENERATE_ORGANIZATION_ENTITIES,
    GENERATE_PERSON_ENTITIES,
    EntityType,
    EntityTypeFilter,
    Language,
    SpanType,
    TagKind,
)
from .profile import (
    ITALIAN,
    LanguageProfile,
    get_profile,
)
from .sample import NameSample
from .span import Span
from .tag import NamedEntityTag

__all__ = [
    # Base types
    "EntityType",
    "EntityTypeFilter",
    "Language",
    "SpanType",
    "TagKind",
    "GENERATE_PERSON_ENTITIES",
    "GENERATE_ORGANIZATION_ENTITIES",
    "GENERATE_LOCATION_ENTITIES",
    "GENERATE_GPE_ENTITIES",
    # Profiles
    "ITALIAN",
    "LanguageProfile",
    "get_profile",
    # Tags and spans
    "NamedEntityTag",
    "Span",
    # Samples
    "NameSample",
]
