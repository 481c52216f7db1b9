"""Base enums and the entity type filter."""

from enum import Enum
from typing import Iterable

from pydantic import BaseModel, Field


# Legacy bit-set flags, one per entity type
GENERATE_PERSON_ENTITIES = 0x01
GENERATE_ORGANIZATION_ENTITIES = 0x01 << 1
GENERATE_LOCATION_ENTITIES = 0x01 << 2
GENERATE_GPE_ENTITIES = 0x01 << 3


class SpanType(str, Enum):
    """Semantic labels attached to emitted spans."""

    PERSON = "person"
    ORGANIZATION = "organization"
    LOCATION = "location"
    GPE = "gpe"


class EntityType(str, Enum):
    """Entity type suffixes used in the corpus NE column."""

    PER = "PER"  # Person
    ORG = "ORG"  # Organization
    LOC = "LOC"  # Location
    GPE = "GPE"  # Geo-Political Entity

    @property
    def span_type(self) -> SpanType:
        """Semantic label for spans of this type."""
        return _SPAN_TYPES[self]

    @classmethod
    def lookup(cls, name: str) -> "EntityType":
        """Resolve a corpus suffix ("PER") or span label ("person")."""
        key = name.strip()
        for entity_type in cls:
            if key.upper() == entity_type.value or key.lower() == entity_type.span_type.value:
                return entity_type
        raise ValueError(f"Unknown entity type: {name}")


_SPAN_TYPES = {
    EntityType.PER: SpanType.PERSON,
    EntityType.ORG: SpanType.ORGANIZATION,
    EntityType.LOC: SpanType.LOCATION,
    EntityType.GPE: SpanType.GPE,
}


class TagKind(str, Enum):
    """IOB2 position of a token relative to an entity."""

    OUTSIDE = "O"
    BEGIN = "B"
    INSIDE = "I"


class Language(str, Enum):
    """Corpus language profiles."""

    IT = "it"


class EntityTypeFilter(BaseModel):
    """Selects which entity types are emitted as spans.

    Tags of a disabled type are folded into ``O`` before span decoding,
    so they still terminate any open entity but never produce a span.
    """

    person: bool = Field(default=True, description="Emit PER spans")
    organization: bool = Field(default=True, description="Emit ORG spans")
    location: bool = Field(default=True, description="Emit LOC spans")
    gpe: bool = Field(default=True, description="Emit GPE spans")

    class Config:
        frozen = True

    @classmethod
    def all(cls) -> "EntityTypeFilter":
        """Filter with every entity type enabled."""
        return cls()

    @classmethod
    def from_bits(cls, bits: int) -> "EntityTypeFilter":
        """Build a filter from the GENERATE_*_ENTITIES bit-set."""
        return cls(
            person=bool(bits & GENERATE_PERSON_ENTITIES),
            organization=bool(bits & GENERATE_ORGANIZATION_ENTITIES),
            location=bool(bits & GENERATE_LOCATION_ENTITIES),
            gpe=bool(bits & GENERATE_GPE_ENTITIES),
        )

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "EntityTypeFilter":
        """Build a filter enabling only the named types.

        Accepts corpus suffixes (``PER``) or span labels (``person``).
        """
        enabled = {EntityType.lookup(name) for name in names}
        return cls(
            person=EntityType.PER in enabled,
            organization=EntityType.ORG in enabled,
            location=EntityType.LOC in enabled,
            gpe=EntityType.GPE in enabled,
        )

    def is_enabled(self, entity_type: EntityType) -> bool:
        """Check whether spans of the given type are emitted."""
        return {
            EntityType.PER: self.person,
            EntityType.ORG: self.organization,
            EntityType.LOC: self.location,
            EntityType.GPE: self.gpe,
        }[entity_type]

    @property
    def enabled_types(self) -> list[EntityType]:
        """Enabled entity types in declaration order."""
        return [t for t in EntityType if self.is_enabled(t)]
