"""
A module to validate FASTA files in a single streaming pass.

The validator stops at the first violation and reports it as an exit code:

    0: this is a valid fasta file
    1: the first line does not start with a > (or the file can't be read)
    2: the ids are not unique
    4: a sequence line contains characters that do not match /[A-Za-z]/
    8: there is a sequence with zero length in it
    16: a line is longer than the maximum line length
    255: internal errors, eg. unable to allocate memory, etc.

Classes:
    FastaValidator: The record state machine fed one line at a time.

Functions:
    validate: Validate a file and return its exit code.
    check_file: Validate a file and return a `ValidationResult`.
    validate_lines: Validate lines already in memory.
"""

from typing import Iterable, Optional

import click

from fastaval.lib.alphabet import extract_identifier, find_invalid_character, is_header
from fastaval.lib.config import ValidatorSettings
from fastaval.lib.error import (
    BaseError,
    DuplicateIdentifierError,
    EmptySequenceError,
    InternalError,
    InvalidCharacterError,
    MissingHeaderError,
)
from fastaval.lib.io import open_line_source
from fastaval.lib.util_obj import ExitCode, ValidationResult


class FastaValidator:
    """
    The record state machine of a FASTA file.

    Feed every line with `feed()` and call `finish()` at end of input. Each
    instance owns its identifier set, so one instance validates one file.

    Attributes:
        known_ids (dict): Identifiers seen so far, mapped to the line they
            were first seen on.
        record_started (bool): If a header line has been read.
        record_length (int): Characters of sequence data in the current
            record, terminators included.
        line_number (int): Number of lines fed so far.
    """

    def __init__(self):
        self.known_ids = {}
        self.record_started = False
        self.record_length = 0
        self.current_id = ""
        self.line_number = 0

    def feed(self, line: str, line_number: Optional[int] = None):
        """
        Process one line, terminator included.

        Raises:
            MissingHeaderError: If sequence data comes before any header.
            DuplicateIdentifierError: If a header repeats an identifier.
            InvalidCharacterError: If a sequence line holds a rejected character.
            EmptySequenceError: If a header follows a record without sequence.
            InternalError: If `line` is `None`.
        """
        if line is None:
            raise InternalError("Empty line received. Empty string?")
        self.line_number = line_number if line_number is not None else self.line_number + 1

        if is_header(line):
            self._start_record(line)
        else:
            self._add_sequence(line)

    def _start_record(self, line: str):
        if self.record_started and self.record_length == 0:
            raise EmptySequenceError(self.current_id, self.line_number)

        identifier = extract_identifier(line)
        if identifier in self.known_ids:
            raise DuplicateIdentifierError(
                identifier, self.known_ids[identifier], self.line_number
            )
        self.known_ids[identifier] = self.line_number

        self.current_id = identifier
        self.record_length = 0
        self.record_started = True

    def _add_sequence(self, line: str):
        if not self.record_started:
            raise MissingHeaderError(self.line_number)

        found = find_invalid_character(line)
        if found:
            index, char, char_class = found
            raise InvalidCharacterError(char, char_class, index + 1, self.line_number)
        self.record_length += len(line)

    def finish(self):
        """
        Check the state at end of input.

        Raises:
            EmptySequenceError: If the last record, or the whole file, holds
                no sequence data.
        """
        if self.record_length == 0:
            raise EmptySequenceError(self.current_id)

    def run(self, lines: Iterable[str]):
        for line in lines:
            self.feed(line)
        self.finish()


def _report(error: BaseError, filename: str = ""):
    where = f"{filename}: " if filename else ""
    click.echo(f"[ERROR] {where}{error}", err=True)
    if isinstance(error, DuplicateIdentifierError):
        click.echo(
            f"[ERROR] {where}First seen: |{error.identifier}| at line {error.previous_line}",
            err=True,
        )


def _run_guarded(run, filename: str, verbose: bool) -> ValidationResult:
    try:
        run()
    except BaseError as e:
        if verbose:
            _report(e, filename)
        return ValidationResult(False, str(e), int(e.exit_code))
    except MemoryError:
        if verbose:
            click.echo("[ERROR] Out of memory while validating", err=True)
        return ValidationResult(False, "Out of memory", int(ExitCode.INTERNAL_ERROR))
    return ValidationResult(True, "", int(ExitCode.VALID))


def check_file(
    filename: str,
    verbose: bool = False,
    settings: Optional[ValidatorSettings] = None,
) -> ValidationResult:
    """
    Validate a plain or gzip-compressed FASTA file.

    Files whose name ends with `.gz` are decompressed, any other file is read
    as plain text. The file is closed on every exit path.

    Args:
        filename (str): Path of the FASTA file.
        verbose (bool): Write a diagnostic to stderr on failure.
        settings (ValidatorSettings): Line length settings, defaults if `None`.

    Returns:
        ValidationResult: `valid`, a message, and the exit code.
    """

    def run():
        validator = FastaValidator()
        with open_line_source(filename, settings=settings, verbose=verbose) as source:
            for line in source:
                validator.feed(line, source.line_number)
        validator.finish()

    return _run_guarded(run, str(filename), verbose)


def validate(
    filename: str,
    verbose: bool = False,
    settings: Optional[ValidatorSettings] = None,
) -> int:
    """Validate a FASTA file and return its exit code, 0 when valid."""

    return check_file(filename, verbose=verbose, settings=settings).exit_code


def validate_lines(lines: Iterable[str], verbose: bool = False) -> int:
    """Validate lines held in memory and return the exit code."""

    return _run_guarded(lambda: FastaValidator().run(lines), "", verbose).exit_code
