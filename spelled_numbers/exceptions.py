"""
Exception hierarchy for number spelling.

Exceeding the digit limit is NOT an exception: convert() returns the
locale's unsupported message for it. These types cover inputs the
converter refuses outright and defects in locale data.
"""

from __future__ import annotations


class SpellingError(Exception):
    """Base exception for all spelling failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class InvalidNumberError(SpellingError):
    """The value is not a finite number the converter can read."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_NUMBER", message, details)


class NegativeNumberError(SpellingError):
    """Negative values have no agreed sign wording yet."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("NEGATIVE_NUMBER", message, details)


class NumberTooLargeError(SpellingError):
    """A number has more digits than any magnitude category covers."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("NUMBER_TOO_LARGE", message, details)


class MissingWordError(SpellingError):
    """The word table has no entry for a value it must cover."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("MISSING_WORD", message, details)


class UnknownLocaleError(SpellingError):
    """No word table is registered under the requested code."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("UNKNOWN_LOCALE", message, details)
