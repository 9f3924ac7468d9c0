"""
A module for small value objects shared across the program.

Classes:
    ExitCode: Exit statuses reported by a validation.
    ValidationResult: Outcome of validating one file.
"""

import enum
from typing import NamedTuple


class ExitCode(enum.IntEnum):
    """Exit statuses of a validation, kept compatible with the fasta_validate tool."""

    VALID = 0
    MISSING_HEADER = 1
    DUPLICATE_ID = 2
    INVALID_CHARACTER = 4
    EMPTY_SEQUENCE = 8
    LINE_TOO_LONG = 16
    INTERNAL_ERROR = 255


EXIT_CODE_DESCRIPTIONS = {
    ExitCode.VALID: "this is a valid fasta file",
    ExitCode.MISSING_HEADER: "the first line does not start with a > (or the file can't be read)",
    ExitCode.DUPLICATE_ID: "the ids are not unique",
    ExitCode.INVALID_CHARACTER: "lines in the sequence (that do not start >) contain characters "
    "that do not match the perl regexp /[A-Za-z]/",
    ExitCode.EMPTY_SEQUENCE: "there is a sequence with zero length in it",
    ExitCode.LINE_TOO_LONG: "a line is longer than the maximum line length",
    ExitCode.INTERNAL_ERROR: "internal errors, eg. unable to allocate memory, etc.",
}


class ValidationResult(NamedTuple):
    valid: bool
    message: str
    exit_code: int = ExitCode.VALID
