"""Decode IOB2-annotated NER corpora into name samples."""

from nerstream.errors import (
    CorpusFormatError,
    InvalidTagError,
    ResetNotSupportedError,
    StructuralFormatError,
    UnknownEntityTypeError,
)
from nerstream.models import EntityTypeFilter, NameSample, Span, SpanType
from nerstream.pipeline import NameSampleStream

__all__ = [
    "CorpusFormatError",
    "InvalidTagError",
    "ResetNotSupportedError",
    "StructuralFormatError",
    "UnknownEntityTypeError",
    "EntityTypeFilter",
    "NameSample",
    "Span",
    "SpanType",
    "NameSampleStream",
]
