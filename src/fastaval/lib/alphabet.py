"""
A module for the character checks applied to FASTA lines.

Sequence lines are accepted when every character is an ASCII letter, i.e.
they match `[A-Za-z]`. The check is done with range comparisons on the
character codes rather than a pattern match.

Classes:
    CharClass: Result of checking the characters of a line.

Functions:
    check_characters: Classify the first offending character of a line.
    find_invalid_character: Locate the first offending character of a line.
    extract_identifier: Get the record identifier of a header line.
"""

import enum
from typing import Optional, Tuple

from fastaval.lib.error import InternalError

HEADER_MARKER = ">"
LINE_TERMINATORS = "\r\n"

_LF = 10
_CR = 13
_UPPER_A = 65
_UPPER_Z = 90
_LOWER_A = 97
_LOWER_Z = 122


class CharClass(enum.IntEnum):
    """Outcome of a character check, one member per rejected range."""

    OK = 0
    BELOW_UPPERCASE = 1
    BETWEEN_CASES = 2
    ABOVE_LOWERCASE = 3


def classify_character(char: str) -> CharClass:
    code = ord(char)
    if code < _UPPER_A:
        if code != _LF and code != _CR:
            return CharClass.BELOW_UPPERCASE
    elif _UPPER_Z < code < _LOWER_A:
        return CharClass.BETWEEN_CASES
    elif code > _LOWER_Z:
        return CharClass.ABOVE_LOWERCASE
    return CharClass.OK


def find_invalid_character(line: str) -> Optional[Tuple[int, str, CharClass]]:
    """
    Find the first character of a line outside the accepted classes.

    Args:
        line (str): A sequence line, terminator included or not.

    Returns:
        Optional[Tuple[int, str, CharClass]]: `(index, char, class)` of the
        first rejected character, or `None` if every character is accepted.

    Raises:
        InternalError: If `line` is `None`.
    """
    if line is None:
        raise InternalError("Empty line received. Empty string?")

    for i, char in enumerate(line):
        char_class = classify_character(char)
        if char_class is not CharClass.OK:
            return i, char, char_class
    return None


def check_characters(line: str) -> CharClass:
    """Return `CharClass.OK` if every character of `line` is accepted."""

    found = find_invalid_character(line)
    return found[2] if found else CharClass.OK


def is_header(line: str) -> bool:
    return line.startswith(HEADER_MARKER)


def extract_identifier(line: str) -> str:
    """
    Get the identifier of a header line: everything up to the first space or
    the line terminator, marker included.
    """
    return line.rstrip(LINE_TERMINATORS).split(" ", 1)[0]
