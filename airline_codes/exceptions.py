"""Airline collection specific exceptions."""

from enum import Enum


class AirlineErrorMessages(Enum):
    """Enum variables with string values representing error messages"""

    INVALID_CODE = "Airline code must be a str or int, got {code_type}"
    INVALID_FORMAT = "Invalid airline codes {iata2!r}, {icao3!r}, {prefix!r}: {reason}"
    DUPLICATE_AIRLINE = "Airline already exists for code(s): {codes}"

    def format_message(self, **kwargs) -> str:
        """Format the enum string value with the passed in keyword arguments"""
        return self.value.format(**kwargs)


class AirlineCollectionError(Exception):
    """Base error for airline collection operations."""

    def __init__(self, error_type: AirlineErrorMessages, **kwargs):
        self.error_type = error_type
        super().__init__(error_type.format_message(**kwargs))


class InvalidAirlineCodeError(AirlineCollectionError, TypeError):
    """Raised when a lookup is given `None` or a value that is not a code."""

    def __init__(self, code: object):
        super().__init__(AirlineErrorMessages.INVALID_CODE, code_type=type(code).__name__)


class AirlineCodeFormatError(AirlineCollectionError, ValueError):
    """Raised when the codes of a new airline don't have the 2/3/3 format."""

    def __init__(self, iata2: str, icao3: str, prefix: str, reason: str):
        super().__init__(
            AirlineErrorMessages.INVALID_FORMAT,
            iata2=iata2,
            icao3=icao3,
            prefix=prefix,
            reason=reason,
        )


class DuplicateAirlineError(AirlineCollectionError, ValueError):
    """Raised when any code of a new airline is already in the collection."""

    def __init__(self, codes: list[str]):
        self.codes = codes
        super().__init__(AirlineErrorMessages.DUPLICATE_AIRLINE, codes=", ".join(codes))
