"""Line Sources - Supply corpus text one line at a time.

A line source yields lines without their terminators and returns ``None``
once the input is exhausted. Sources backed by a file or an in-memory
buffer can be rewound; one-shot iterables cannot.
"""

import logging
from pathlib import Path
from typing import Iterable, Iterator, Optional, Protocol, Sequence, Union

from nerstream.config import settings
from nerstream.errors import ResetNotSupportedError


logger = logging.getLogger(__name__)


class LineSource(Protocol):
    """Pull-based supplier of text lines."""

    def read(self) -> Optional[str]:
        """Return the next line, or None at end of stream."""
        ...

    def reset(self) -> None:
        """Rewind to the first line."""
        ...

    def close(self) -> None:
        """Release the underlying resource."""
        ...


class _BaseLineSource:
    """Context manager support shared by the concrete sources."""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class PlainTextLineSource(_BaseLineSource):
    """Reads lines from a text file.

    The file is opened lazily on the first read and reopened on reset.
    After close, reads return None until the source is reset.
    """

    def __init__(self, path: Union[str, Path], encoding: str = None):
        """Initialize source.

        Args:
            path: Corpus file to read.
            encoding: Character encoding (default from settings, typically utf-8)
        """
        self.path = Path(path)
        self.encoding = encoding or settings.encoding
        self._file = None
        self._closed = False

        if not self.path.exists():
            raise FileNotFoundError(f"Corpus not found: {self.path}")

    def read(self) -> Optional[str]:
        if self._closed:
            return None
        if self._file is None:
            self._file = open(self.path, "r", encoding=self.encoding, newline=None)

        line = self._file.readline()
        if not line:
            return None
        return line.rstrip("\n")

    def reset(self) -> None:
        logger.debug("Rewinding %s", self.path)
        self._release()
        self._closed = False

    def close(self) -> None:
        self._release()
        self._closed = True

    def _release(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None


class StringLineSource(_BaseLineSource):
    """Serves lines from memory; accepts a text block or a line sequence."""

    def __init__(self, lines: Union[str, Sequence[str]]):
        if isinstance(lines, str):
            lines = lines.splitlines()
        self._lines = list(lines)
        self._position = 0

    def read(self) -> Optional[str]:
        if self._position >= len(self._lines):
            return None
        line = self._lines[self._position]
        self._position += 1
        return line

    def reset(self) -> None:
        self._position = 0

    def close(self) -> None:
        self._position = len(self._lines)


class IterableLineSource(_BaseLineSource):
    """Wraps a one-shot iterable of lines; cannot be rewound."""

    def __init__(self, lines: Iterable[str]):
        self._lines: Optional[Iterator[str]] = iter(lines)

    def read(self) -> Optional[str]:
        if self._lines is None:
            return None
        line = next(self._lines, None)
        if line is None:
            return None
        return line.rstrip("\r\n")

    def reset(self) -> None:
        raise ResetNotSupportedError(
            "Line source wraps a one-shot iterable and cannot be reset"
        )

    def close(self) -> None:
        close = getattr(self._lines, "close", None)
        if close is not None:
            close()
        self._lines = None
