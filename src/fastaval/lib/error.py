"""
A module for error classes in the program.

Every error that ends a validation carries the exit code reported for it.

Classes:
    BaseError: Base error class.
    UnsupportedError: Exception raised for unsupported operations.
    InternalError: Exception raised for internal errors.
    DataError: Exception raised for errors related to data.
    InputUnreadableError: Exception raised when the input cannot be opened or read.
    DataInvalidError: Exception raised when data is invalid.
    FastaFormatError: Base class for FASTA structure violations.
    MissingHeaderError: The first line is not a header line.
    DuplicateIdentifierError: A record identifier appears twice.
    InvalidCharacterError: A sequence line holds a character outside the alphabet.
    EmptySequenceError: A record has no sequence data.
    LineTooLongError: A line exceeds the configured maximum length.
"""

from fastaval.lib.util_obj import ExitCode


class BaseError(Exception):
    """Base error class."""

    exit_code = ExitCode.INTERNAL_ERROR


class UnsupportedError(BaseError):
    """Exception raised for unsupported operations."""

    pass


class InternalError(BaseError):
    """Exception raised for internal errors."""

    exit_code = ExitCode.INTERNAL_ERROR


class DataError(BaseError):
    """Exception raised for errors related to data."""

    pass


class InputUnreadableError(DataError):
    """Exception raised when the input file cannot be opened or decoded."""

    exit_code = ExitCode.MISSING_HEADER

    def __init__(self, filename: str, reason: str = ""):
        self.filename = filename
        self.reason = reason
        message = f"Can't open file {filename}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class DataInvalidError(DataError):
    """Exception raised when data is invalid."""

    pass


class FastaFormatError(DataInvalidError):
    """Base class for violations of the FASTA record structure.

    Attributes:
        line_number (int): 1-based line where the violation was found,
            0 when it was found at end of input.
    """

    def __init__(self, message: str, line_number: int = 0):
        self.line_number = line_number
        super().__init__(message)


class MissingHeaderError(FastaFormatError):
    exit_code = ExitCode.MISSING_HEADER

    def __init__(self, line_number: int = 1):
        super().__init__("The first line should start with a >", line_number)


class DuplicateIdentifierError(FastaFormatError):
    exit_code = ExitCode.DUPLICATE_ID

    def __init__(self, identifier: str, previous_line: int, line_number: int = 0):
        self.identifier = identifier
        self.previous_line = previous_line
        super().__init__(
            f"Found a duplicate id: |{identifier}| at line {line_number}", line_number
        )


class InvalidCharacterError(FastaFormatError):
    exit_code = ExitCode.INVALID_CHARACTER

    def __init__(self, char: str, char_class, column: int, line_number: int = 0):
        self.char = char
        self.char_class = char_class
        self.column = column
        super().__init__(
            f"We have a non word character {char!r} (code {ord(char)}) "
            f"at line {line_number}, column {column}",
            line_number,
        )


class EmptySequenceError(FastaFormatError):
    exit_code = ExitCode.EMPTY_SEQUENCE

    def __init__(self, identifier: str = "", line_number: int = 0):
        self.identifier = identifier
        if line_number:
            message = f"We have an empty sequence: |{identifier}|"
        else:
            message = f"At end: We have an empty sequence: |{identifier}|"
        super().__init__(message, line_number)


class LineTooLongError(FastaFormatError):
    exit_code = ExitCode.LINE_TOO_LONG

    def __init__(self, max_line_length: int, line_number: int = 0):
        self.max_line_length = max_line_length
        super().__init__(
            f"Line {line_number} is longer than {max_line_length} characters",
            line_number,
        )
