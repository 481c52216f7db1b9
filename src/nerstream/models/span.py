"""Token spans labeled with an entity type."""

from typing import Sequence

from pydantic import BaseModel, Field, model_validator

from .base import SpanType


class Span(BaseModel):
    """Half-open token interval ``[start, end)`` with a semantic label."""

    start: int = Field(..., ge=0, description="First token index (inclusive)")
    end: int = Field(..., ge=1, description="Last token index (exclusive)")
    type: SpanType

    class Config:
        frozen = True

    @model_validator(mode="after")
    def _check_bounds(self) -> "Span":
        if self.start >= self.end:
            raise ValueError(f"Span start {self.start} must be before end {self.end}")
        return self

    def covered_tokens(self, tokens: Sequence[str]) -> list[str]:
        """Tokens inside this span."""
        return list(tokens[self.start:self.end])

    def __str__(self) -> str:
        return f"[{self.start}..{self.end}) {self.type.value}"
