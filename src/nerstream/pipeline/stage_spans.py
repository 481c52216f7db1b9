"""Span Decoding Stage - Convert IOB2 tag runs into typed spans.

Each raw tag is parsed once into a NamedEntityTag, folded to ``O`` when its
type is filtered out, then fed to a small open/closed state machine:

- ``B-X`` closes any open entity and opens a new one
- ``I-X`` extends the open entity; without one it is an error
- ``O`` closes any open entity

Tags with an unknown type suffix (``B-MISC``, ``I-DATE``) fail while the
sentence is parsed, before any span is emitted, even when they follow an
open entity.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from nerstream.errors import InvalidTagError
from nerstream.models import (
    EntityType,
    EntityTypeFilter,
    NamedEntityTag,
    Span,
    TagKind,
)


def parse_tags(
    raw_tags: Sequence[str],
    type_filter: EntityTypeFilter,
) -> list[NamedEntityTag]:
    """Parse raw NE tags and fold disabled types into ``O``."""
    return [NamedEntityTag.parse(raw).filtered(type_filter) for raw in raw_tags]


@dataclass
class _OpenEntity:
    start: int
    end: int
    entity_type: EntityType

    def close(self) -> Span:
        return Span(start=self.start, end=self.end, type=self.entity_type.span_type)


class SpanDecoder:
    """Decodes one sentence's tag sequence into non-overlapping spans.

    Stateless between calls; the same tags and filter always yield the
    same spans.
    """

    def __init__(self, type_filter: Optional[EntityTypeFilter] = None):
        """Initialize decoder.

        Args:
            type_filter: Entity types to emit (default: all four)
        """
        self.type_filter = type_filter or EntityTypeFilter.all()

    def decode(self, raw_tags: Sequence[str]) -> list[Span]:
        """Decode raw tags into spans ordered by start index.

        Raises:
            InvalidTagError: Malformed tag, or ``I-`` with no open entity.
            UnknownEntityTypeError: ``B-``/``I-`` with an unknown type.
        """
        spans: list[Span] = []
        current: Optional[_OpenEntity] = None

        for i, tag in enumerate(parse_tags(raw_tags, self.type_filter)):
            if tag.kind == TagKind.BEGIN:
                if current is not None:
                    spans.append(current.close())
                current = _OpenEntity(start=i, end=i + 1, entity_type=tag.entity_type)

            elif tag.kind == TagKind.INSIDE:
                if current is None:
                    raise InvalidTagError(
                        raw_tags[i], reason=f"Inside tag without open entity at token {i}"
                    )
                current.end += 1

            else:
                if current is not None:
                    spans.append(current.close())
                    current = None

        # if one entity remains, close it here
        if current is not None:
            spans.append(current.close())

        return spans


def decode_spans(
    raw_tags: Sequence[str],
    type_filter: Optional[EntityTypeFilter] = None,
) -> list[Span]:
    """Decode one sentence's raw NE tags into spans."""
    return SpanDecoder(type_filter).decode(raw_tags)
