"""Parsed IOB2 named-entity tags."""

from typing import Optional

from pydantic import BaseModel

from nerstream.errors import InvalidTagError, UnknownEntityTypeError

from .base import EntityType, EntityTypeFilter, TagKind


CODEC_TAG_O = "O"
CODEC_TAG_B = "B-"
CODEC_TAG_I = "I-"


class NamedEntityTag(BaseModel):
    """One token's NE tag: outside, or begin/inside an entity of a type."""

    kind: TagKind
    entity_type: Optional[EntityType] = None

    class Config:
        frozen = True

    @classmethod
    def parse(cls, raw: str) -> "NamedEntityTag":
        """Parse a raw NE column value.

        Raises:
            UnknownEntityTypeError: B-/I- prefix with an unknown type suffix.
            InvalidTagError: Anything else that is not ``O``, ``B-X`` or ``I-X``.
        """
        if raw == CODEC_TAG_O:
            return OUTSIDE

        if raw.startswith(CODEC_TAG_B):
            kind = TagKind.BEGIN
        elif raw.startswith(CODEC_TAG_I):
            kind = TagKind.INSIDE
        else:
            raise InvalidTagError(raw)

        suffix = raw[len(CODEC_TAG_B):]
        try:
            entity_type = EntityType(suffix)
        except ValueError:
            raise UnknownEntityTypeError(raw, suffix) from None

        return cls(kind=kind, entity_type=entity_type)

    def filtered(self, type_filter: EntityTypeFilter) -> "NamedEntityTag":
        """Fold this tag into ``O`` if its type is disabled."""
        if self.entity_type is not None and not type_filter.is_enabled(self.entity_type):
            return OUTSIDE
        return self

    def __str__(self) -> str:
        if self.kind == TagKind.OUTSIDE:
            return CODEC_TAG_O
        return f"{self.kind.value}-{self.entity_type.value}"


OUTSIDE = NamedEntityTag(kind=TagKind.OUTSIDE)
