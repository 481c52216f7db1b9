"""Line Grouping Stage - Collect the lines of one sentence.

Sentences are separated by blank lines. A ``-DOCSTART-`` line marks the
start of a new source document and must be followed by a blank line.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from nerstream.errors import StructuralFormatError
from nerstream.models import LanguageProfile

from .stage_fields import FieldExtractor
from .stage_lines import LineSource


logger = logging.getLogger(__name__)

DOCSTART = "-DOCSTART-"


@dataclass
class RawSentence:
    """Tokens and undecoded NE tags of one sentence."""

    tokens: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    clear_adaptive_data: bool = False


def is_blank(line: str) -> bool:
    """Sentence separator lines are empty; whitespace-only lines are data."""
    return line == ""


class LineGrouper:
    """Pulls lines from a source until a sentence is complete."""

    def __init__(self, line_source: LineSource, profile: LanguageProfile):
        self.line_source = line_source
        self.profile = profile
        self.extractor = FieldExtractor(profile)

    def read_sentence(self) -> Optional[RawSentence]:
        """Read the next non-empty sentence.

        Returns:
            The sentence, or None once the input is exhausted.

        Raises:
            StructuralFormatError: On a malformed data line or a non-blank
                line after the document marker.
        """
        while True:
            sentence, exhausted = self._read_block()

            if sentence.tokens:
                return sentence
            if exhausted:
                return None

            logger.debug("Skipping empty sentence")

    def _read_block(self) -> tuple[RawSentence, bool]:
        """Read lines up to the next blank line or end of input.

        Returns:
            Tuple of (sentence, whether the input is exhausted)
        """
        sentence = RawSentence()

        while True:
            line = self.line_source.read()

            if line is None:
                exhausted = True
                break

            if is_blank(line):
                exhausted = False
                break

            if line.startswith(DOCSTART):
                sentence.clear_adaptive_data = True
                self._expect_blank_after_docstart()
                continue

            token, tag = self.extractor.extract(line)
            sentence.tokens.append(token)
            sentence.tags.append(tag)

        if self.profile.always_clear_adaptive_data:
            sentence.clear_adaptive_data = True

        return sentence, exhausted

    def _expect_blank_after_docstart(self) -> None:
        logger.debug("Document boundary")
        following = self.line_source.read()

        # End of input right after the marker leaves nothing to decode
        if following is not None and not is_blank(following):
            raise StructuralFormatError(
                f"Line after {DOCSTART} not empty", following
            )
