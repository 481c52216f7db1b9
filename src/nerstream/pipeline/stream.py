"""Name sample stream over an Evalita-style NER corpus.

Parser for the Italian NER training files of the Evalita 2007 and 2009
shared tasks. Each data line holds four space-separated columns: the token,
the Elsnet PoS tag, the news story the token belongs to, and the NE tag in
IOB2 format with types PER, ORG, GPE and LOC.

The data carries no article boundaries, so adaptive data is cleared for
every sentence.
"""

import logging
from pathlib import Path
from typing import Iterator, Optional, Union

from nerstream.config import settings
from nerstream.models import (
    EntityTypeFilter,
    Language,
    NameSample,
    get_profile,
)

from .stage_group import LineGrouper
from .stage_lines import LineSource, PlainTextLineSource
from .stage_spans import SpanDecoder


logger = logging.getLogger(__name__)


class NameSampleStream:
    """Reads NameSamples one sentence at a time from a line source.

    Example:
        with NameSampleStream.from_path("train.txt") as samples:
            for sample in samples:
                print(sample)
    """

    def __init__(
        self,
        line_source: LineSource,
        types: Union[EntityTypeFilter, int, None] = None,
        language: Language = Language.IT,
    ):
        """Initialize stream.

        Args:
            line_source: Supplier of corpus lines.
            types: Entity types to emit, as a filter or a GENERATE_* bit-set
                (default from settings)
            language: Corpus language profile.
        """
        if types is None:
            types = settings.entity_filter
        elif isinstance(types, int):
            types = EntityTypeFilter.from_bits(types)

        self.line_source = line_source
        self.type_filter = types
        self.profile = get_profile(language)
        self.grouper = LineGrouper(line_source, self.profile)
        self.decoder = SpanDecoder(types)

    @classmethod
    def from_path(
        cls,
        path: Union[str, Path],
        types: Union[EntityTypeFilter, int, None] = None,
        language: Language = None,
        encoding: str = None,
    ) -> "NameSampleStream":
        """Open a corpus file.

        Args:
            path: Corpus file.
            types: Entity types to emit.
            language: Corpus language (default from settings)
            encoding: File encoding (default from settings)
        """
        source = PlainTextLineSource(path, encoding=encoding)
        return cls(source, types=types, language=language or settings.language)

    def read(self) -> Optional[NameSample]:
        """Read the next sample, or None when the corpus is exhausted."""
        sentence = self.grouper.read_sentence()
        if sentence is None:
            return None

        names = self.decoder.decode(sentence.tags)

        return NameSample(
            tokens=sentence.tokens,
            names=names,
            clear_adaptive_data=sentence.clear_adaptive_data,
        )

    def reset(self) -> None:
        """Rewind to the first sample.

        Raises:
            ResetNotSupportedError: If the line source cannot be rewound.
        """
        logger.debug("Resetting name sample stream")
        self.line_source.reset()

    def close(self) -> None:
        """Close the underlying line source."""
        self.line_source.close()

    def __iter__(self) -> Iterator[NameSample]:
        while (sample := self.read()) is not None:
            yield sample

    def __enter__(self) -> "NameSampleStream":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
