# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"""Unit tests for the airline collection error module."""

from airline_codes.exceptions import (
    AirlineCodeFormatError,
    AirlineCollectionError,
    AirlineErrorMessages,
    DuplicateAirlineError,
    InvalidAirlineCodeError,
)


def test_format_message_populates_placeholders():
    """Ensure format_message correctly substitutes placeholders."""
    message = AirlineErrorMessages.DUPLICATE_AIRLINE.format_message(codes="AA, AAL")
    assert message == "Airline already exists for code(s): AA, AAL"


def test_invalid_airline_code_error():
    """Ensure InvalidAirlineCodeError names the offending type and is a TypeError."""
    err = InvalidAirlineCodeError(None)
    assert isinstance(err, AirlineCollectionError)
    assert isinstance(err, TypeError)
    assert err.error_type is AirlineErrorMessages.INVALID_CODE
    assert str(err) == "Airline code must be a str or int, got NoneType"


def test_airline_code_format_error():
    """Ensure AirlineCodeFormatError includes the codes and the reason."""
    err = AirlineCodeFormatError("X", "XXX", "999", reason="iata2 must be 2 characters")
    assert isinstance(err, AirlineCollectionError)
    assert isinstance(err, ValueError)
    assert str(err) == "Invalid airline codes 'X', 'XXX', '999': iata2 must be 2 characters"


def test_duplicate_airline_error():
    """Ensure DuplicateAirlineError keeps the colliding codes."""
    err = DuplicateAirlineError(["AA", "001"])
    assert isinstance(err, AirlineCollectionError)
    assert isinstance(err, ValueError)
    assert err.codes == ["AA", "001"]
    assert "Airline already exists for code(s): AA, 001" in str(err)
