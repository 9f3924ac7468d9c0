"""
A module for reading FASTA input line by line.

Plain and gzip-compressed files are read through the same `LineSource`
interface. Lines are decoded as latin-1 so each character carries the value of
the byte it was read from, and line terminators are kept as they are.

Classes:
    LineSource: Base class of the line readers.
    PlainLineSource: Reads an uncompressed text file.
    GzipLineSource: Reads a gzip-compressed text file.

Functions:
    is_gzip_filename: Check the `.gz` suffix of a file name.
    open_line_source: Pick the reader for a file name.
"""

import gzip
import zlib
from typing import Iterator, Optional, TextIO

import click

from fastaval.lib.alphabet import LINE_TERMINATORS
from fastaval.lib.config import OVERLONG_ERROR, ValidatorSettings
from fastaval.lib.error import InputUnreadableError, LineTooLongError

ENCODING = "latin-1"
GZIP_SUFFIX = ".gz"


class LineSource:
    """
    Base class of the line readers, used as a context manager.

    Each physical line is read with a bounded `readline`, so no line larger
    than `max_line_length` characters (terminator excluded) is ever kept.

    Attributes:
        filename (str): Path of the input file.
        max_line_length (int): Longest accepted line, terminator excluded.
        overlong_lines (str): "error" to fail on longer lines, "truncate" to
            keep their first `max_line_length` characters.
        line_number (int): Number of the last line read, 1-based.
    """

    def __init__(
        self,
        filename: str,
        settings: Optional[ValidatorSettings] = None,
        verbose: bool = False,
    ):
        settings = settings or ValidatorSettings()
        self.filename = str(filename)
        self.max_line_length = settings.max_line_length
        self.overlong_lines = settings.overlong_lines
        self.verbose = verbose
        self.line_number = 0
        self._handle: Optional[TextIO] = None
        self._skip_lf = False

    def _open(self) -> TextIO:
        raise NotImplementedError

    def __enter__(self) -> "LineSource":
        try:
            self._handle = self._open()
        except OSError as e:
            raise InputUnreadableError(self.filename, e.strerror or str(e)) from e
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def close(self):
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def __iter__(self) -> Iterator[str]:
        while True:
            line = self.readline()
            if not line:
                return
            yield line

    def _read(self, size: int) -> str:
        try:
            return self._handle.readline(size)
        except (OSError, EOFError, zlib.error) as e:
            raise InputUnreadableError(self.filename, str(e)) from e

    def readline(self) -> str:
        """
        Read the next line, terminator included, or "" at end of input.

        Raises:
            LineTooLongError: If the line exceeds `max_line_length` and the
                policy is "error".
            InputUnreadableError: If the underlying stream cannot be decoded.
        """
        limit = self.max_line_length
        # Room for a two-character terminator after a line of full length.
        line = self._read(limit + 2)
        if self._skip_lf:
            self._skip_lf = False
            if line == "\n":
                line = self._read(limit + 2)
        if not line:
            return line
        self.line_number += 1

        content = line.rstrip(LINE_TERMINATORS)
        if len(content) <= limit:
            return line
        if self.overlong_lines == OVERLONG_ERROR:
            raise LineTooLongError(limit, self.line_number)

        self._discard_rest_of_line(line)
        if self.verbose:
            click.echo(
                f"[WARN] Line {self.line_number} truncated to {limit} characters",
                err=True,
            )
        return content[:limit] + "\n"

    def _discard_rest_of_line(self, chunk: str):
        while chunk and not chunk.endswith(("\n", "\r")):
            chunk = self._read(self.max_line_length + 2)
        # A CR at the end of a chunk may be the first half of a CRLF pair.
        self._skip_lf = chunk.endswith("\r")


class PlainLineSource(LineSource):
    """Reads lines from an uncompressed file."""

    def _open(self) -> TextIO:
        return open(self.filename, "rt", encoding=ENCODING, newline="")


class GzipLineSource(LineSource):
    """Reads lines from a gzip-compressed file, decompressing on the fly."""

    def _open(self) -> TextIO:
        return gzip.open(self.filename, "rt", encoding=ENCODING, newline="")


def is_gzip_filename(filename: str) -> bool:
    """Check if a file name ends with `.gz`. File content is never inspected."""

    return str(filename).endswith(GZIP_SUFFIX)


def open_line_source(
    filename: str,
    settings: Optional[ValidatorSettings] = None,
    verbose: bool = False,
) -> LineSource:
    """Return the line source matching the file name, not yet opened."""

    cls = GzipLineSource if is_gzip_filename(filename) else PlainLineSource
    return cls(filename, settings=settings, verbose=verbose)
