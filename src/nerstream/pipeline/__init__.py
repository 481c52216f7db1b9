"""Pipeline stages for decoding an annotated NER corpus.

Stages:
1. stage_lines - Line sources (file, memory, one-shot iterable)
2. stage_group - Group lines into sentences, handle document markers
3. stage_fields - Validate columns, extract token and NE tag
4. stage_spans - IOB2 tags to typed spans

NameSampleStream in ``stream`` wires the stages together and yields one
NameSample per sentence.
"""

from .stage_fields import FieldExtractor
from .stage_group import DOCSTART, LineGrouper, RawSentence
from .stage_lines import (
    IterableLineSource,
    LineSource,
    PlainTextLineSource,
    StringLineSource,
)
from .stage_spans import SpanDecoder, decode_spans, parse_tags
from .stream import NameSampleStream

__all__ = [
    # Lines
    "LineSource",
    "PlainTextLineSource",
    "StringLineSource",
    "IterableLineSource",
    # Grouping
    "DOCSTART",
    "LineGrouper",
    "RawSentence",
    # Fields
    "FieldExtractor",
    # Spans
    "SpanDecoder",
    "decode_spans",
    "parse_tags",
    # Stream
    "NameSampleStream",
]
