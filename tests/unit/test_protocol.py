# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"""Unit tests for the AirlineInfo model."""

import pytest
from pydantic import ValidationError

from airline_codes.protocol import AirlineInfo, AirlineKey


def test_airline_info_strips_and_uppercases_codes() -> None:
    """Test that codes are trimmed and upper-cased, and names are trimmed."""
    airline = AirlineInfo(
        iata2=" zz ",
        icao3="zzz ",
        prefix=" 999",
        iata_name=" ZZ Airline ",
        icao_name="ZZ Air LLC  ",
        call_sign=" ZEDZED ",
        name="  ZZ Air",
    )

    assert airline.key == AirlineKey("ZZ", "ZZZ", "999")
    assert airline.iata_name == "ZZ Airline"
    assert airline.icao_name == "ZZ Air LLC"
    assert airline.call_sign == "ZEDZED"
    assert airline.name == "ZZ Air"


def test_airline_info_defaults() -> None:
    """Test that only the codes are required."""
    airline = AirlineInfo(iata2="ZZ", icao3="ZZZ", prefix="999")

    assert airline.iata_name == ""
    assert airline.icao_name == ""
    assert airline.call_sign is None
    assert airline.name is None


@pytest.mark.parametrize(
    ["iata2", "icao3", "prefix", "field"],
    [
        ("Z", "ZZZ", "999", "iata2"),
        ("ZZZ", "ZZZ", "999", "iata2"),
        ("Z-", "ZZZ", "999", "iata2"),
        ("ZZ", "ZZ", "999", "icao3"),
        ("ZZ", "ZZZZ", "999", "icao3"),
        ("ZZ", "Z Z", "999", "icao3"),
        ("ZZ", "ZZZ", "99", "prefix"),
        ("ZZ", "ZZZ", "9999", "prefix"),
        ("ZZ", "ZZZ", "9A9", "prefix"),
        ("ZZ", "ZZZ", "9²9", "prefix"),
        ("ZZ", "ZZZ", "", "prefix"),
    ],
    ids=[
        "iata2-too-short",
        "iata2-too-long",
        "iata2-punctuation",
        "icao3-too-short",
        "icao3-too-long",
        "icao3-whitespace",
        "prefix-too-short",
        "prefix-too-long",
        "prefix-not-numeric",
        "prefix-not-ascii-digits",
        "prefix-empty",
    ],
)
def test_airline_info_rejects_malformed_codes(
    iata2: str, icao3: str, prefix: str, field: str
) -> None:
    """Test that construction fails when a code doesn't have the expected format."""
    with pytest.raises(ValidationError) as excinfo:
        AirlineInfo(iata2=iata2, icao3=icao3, prefix=prefix)

    assert [error["loc"] for error in excinfo.value.errors()] == [(field,)]


def test_airline_info_rejects_missing_registered_names() -> None:
    """Test that the IATA and ICAO names can be empty but not None."""
    with pytest.raises(ValidationError):
        AirlineInfo(iata2="ZZ", icao3="ZZZ", prefix="999", iata_name=None)


def test_airline_info_codes_are_frozen() -> None:
    """Test that the codes can't be changed after construction."""
    airline = AirlineInfo(iata2="ZZ", icao3="ZZZ", prefix="999")

    with pytest.raises(ValidationError):
        airline.iata2 = "YY"  # type: ignore[misc]

    assert airline.iata2 == "ZZ"


def test_airline_info_name_is_mutable_outside_identity() -> None:
    """Test that renaming an airline leaves its equality and hash unchanged."""
    airline = AirlineInfo(iata2="ZZ", icao3="ZZZ", prefix="999", name="ZZ Air")
    same_airline = AirlineInfo(iata2="ZZ", icao3="ZZZ", prefix="999", name="ZZ Air")
    hash_before_rename = hash(airline)

    airline.name = "  Zed Zed  "

    assert airline.name == "Zed Zed"
    assert airline == same_airline
    assert hash(airline) == hash_before_rename


def test_airline_info_equality_ignores_names() -> None:
    """Test that equality is derived from the three codes only."""
    airline = AirlineInfo(iata2="ZZ", icao3="ZZZ", prefix="999", iata_name="One")
    renamed = AirlineInfo(iata2="zz", icao3="zzz", prefix="999", iata_name="Two")
    other = AirlineInfo(iata2="ZZ", icao3="ZZZ", prefix="998", iata_name="One")

    assert airline == renamed
    assert airline != other
    assert len({airline, renamed, other}) == 2
    assert airline != "ZZ"


@pytest.mark.parametrize(
    ["code", "expected"],
    [
        ("ZZ", True),
        ("zz", True),
        ("ZZZ", True),
        ("zZz", True),
        ("999", True),
        (999, True),
        ("YY", False),
        ("YYY", False),
        ("998", False),
        (998, False),
        ("", False),
        ("²", False),
        ("9²9", False),
    ],
)
def test_airline_info_matches(code: str | int, expected: bool) -> None:
    """Test that an airline matches any of its codes."""
    airline = AirlineInfo(iata2="ZZ", icao3="ZZZ", prefix="999")

    assert airline.matches(code) is expected


@pytest.mark.parametrize(
    ["code", "expected"],
    [("77", True), ("QQQ", True), ("998", True), (998, True), ("77Q", False), (77, False)],
)
def test_airline_info_matches_numeric_iata_code(code: str | int, expected: bool) -> None:
    """Test that an all-digit IATA code matches its airline as well as the prefix does."""
    airline = AirlineInfo(iata2="77", icao3="QQQ", prefix="998")

    assert airline.matches(code) is expected


def test_airline_info_matches_unpadded_prefix() -> None:
    """Test that prefixes match regardless of zero-padding."""
    airline = AirlineInfo(iata2="AA", icao3="AAL", prefix="001")

    assert airline.matches("1")
    assert airline.matches("01")
    assert airline.matches(1)
    assert not airline.matches("10")
    assert not airline.matches("²")


def test_airline_info_matches_all_zero_prefix() -> None:
    """Test that a prefix of zeros matches any zero-padding but not an empty code."""
    airline = AirlineInfo(iata2="ZZ", icao3="ZZZ", prefix="000")

    assert airline.matches("0")
    assert airline.matches("000")
    assert airline.matches(0)
    assert not airline.matches("")
