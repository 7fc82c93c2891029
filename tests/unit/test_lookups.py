# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"""Unit tests for the module level airline lookups."""

import pytest

from airline_codes import (
    AirlineCollection,
    AirlineInfo,
    InvalidAirlineCodeError,
    contains,
    get_airline,
    get_default_collection,
    normalize,
    values,
)
from tests.unit.fake_collection import FakeAirlineCollection


def test_get_airline_scenarios(american_airlines: AirlineInfo) -> None:
    """Test lookups of American Airlines by code, letter case and numeric prefix."""
    airline = get_airline("AA")

    assert airline is not None
    assert airline.key == ("AA", "AAL", "001")
    assert get_airline("aa") is airline
    assert get_airline(1) is airline
    assert get_airline("AAL") == american_airlines


def test_get_airline_none_raises() -> None:
    """Test that a missing code is an invalid argument, not an absent airline."""
    with pytest.raises(InvalidAirlineCodeError) as excinfo:
        get_airline(None)  # type: ignore[arg-type]

    assert isinstance(excinfo.value, TypeError)
    assert "NoneType" in str(excinfo.value)


@pytest.mark.parametrize(
    ["code", "expected"],
    [("aa", "AA"), (1, "001"), ("1", "001"), ("aal", "AAL"), ("xyz", None), (0, None)],
)
def test_normalize_scenarios(code: str | int, expected: str | None) -> None:
    """Test normalization against the default collection."""
    assert normalize(code) == expected


@pytest.mark.parametrize(
    ["code", "expected"], [("AA", True), ("aal", True), (1, True), ("ZZ", False)]
)
def test_contains_scenarios(code: str | int, expected: bool) -> None:
    """Test membership against the default collection."""
    assert contains(code) is expected


def test_values_returns_default_airlines() -> None:
    """Test that values() lists every airline of the default collection."""
    airlines = values()

    assert len(airlines) > 0
    assert all(isinstance(airline, AirlineInfo) for airline in airlines)
    assert airlines == get_default_collection().values()


def test_lookups_on_instance() -> None:
    """Test that passing a collection scopes the lookups to it."""
    airlines = AirlineCollection()
    airlines.remove("AA")
    airlines.add("XX", "XXX", "999")

    assert contains("XX", airlines)
    assert normalize("xxx", airlines) == "XXX"
    assert normalize(999, airlines) == "999"
    assert not contains("AA", airlines)
    assert get_airline(1, airlines) is None

    assert contains("AA")
    assert not contains("XX")


def test_lookups_accept_test_double(
    fake_airlines: FakeAirlineCollection, american_airlines: AirlineInfo
) -> None:
    """Test that any implementation of the collection protocol can be queried."""
    assert get_airline("aal", fake_airlines) == american_airlines
    assert contains(1, fake_airlines)
    assert normalize("aa", fake_airlines) == "AA"
    assert normalize(1, fake_airlines) == "001"
    assert normalize("DL", fake_airlines) is None

    # Integers reach the collection as zero-padded prefixes.
    assert fake_airlines.requested_codes == ["aal", "001", "aa", "001", "DL"]


def test_test_double_add_and_remove(fake_airlines: FakeAirlineCollection) -> None:
    """Test that the test double supports the mutating half of the protocol."""
    fake_airlines.add("XX", "XXX", "999", name="Example")
    fake_airlines.remove("AA")

    assert [airline.iata2 for airline in fake_airlines] == ["XX"]
    assert contains("xx", fake_airlines)
    assert not contains("AA", fake_airlines)


def test_invalid_argument_with_test_double(fake_airlines: FakeAirlineCollection) -> None:
    """Test that argument checks happen before the collection is consulted."""
    with pytest.raises(InvalidAirlineCodeError):
        contains(None, fake_airlines)  # type: ignore[arg-type]

    assert fake_airlines.requested_codes == []


def test_test_double_finds_numeric_iata_code() -> None:
    """Test that the test double resolves an all-digit IATA code to its airline."""
    airline = AirlineInfo(iata2="77", icao3="QQQ", prefix="998")
    fake_airlines = FakeAirlineCollection([airline])

    assert get_airline("77", fake_airlines) is airline
    assert get_airline(998, fake_airlines) is airline
    assert fake_airlines.requested_codes == ["77", "998"]
