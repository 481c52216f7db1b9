"""Decoded samples handed to downstream consumers."""

from pydantic import BaseModel, Field, model_validator

from .span import Span


class NameSample(BaseModel):
    """
    One sentence of tokens with its named-entity spans.

    Samples are built once per sentence by the decoder and not mutated
    afterwards. Spans are ordered by start index and never overlap.
    """

    tokens: tuple[str, ...] = Field(..., min_length=1)
    names: tuple[Span, ...] = Field(default_factory=tuple)
    clear_adaptive_data: bool = Field(
        default=False,
        description="Signal consumers to drop cross-sentence context",
    )

    class Config:
        frozen = True

    @model_validator(mode="after")
    def _check_spans_in_range(self) -> "NameSample":
        for span in self.names:
            if span.end > len(self.tokens):
                raise ValueError(
                    f"Span {span} exceeds sentence length {len(self.tokens)}"
                )
        return self

    def entity_texts(self) -> list[tuple[str, str]]:
        """(type label, covered text) pairs in span order."""
        return [
            (span.type.value, " ".join(span.covered_tokens(self.tokens)))
            for span in self.names
        ]

    def __str__(self) -> str:
        """Inline form: ``<START:person> Mario Rossi <END> vive a Roma``."""
        starts = {span.start: span for span in self.names}
        ends = {span.end for span in self.names}

        parts = []
        for i, token in enumerate(self.tokens):
            if i in ends:
                parts.append("<END>")
            if i in starts:
                parts.append(f"<START:{starts[i].type.value}>")
            parts.append(token)
        if len(self.tokens) in ends:
            parts.append("<END>")
        return " ".join(parts)
