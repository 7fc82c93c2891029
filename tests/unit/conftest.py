# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"""Module for test configurations for the unit test directory."""

import pytest

from airline_codes.collection import AirlineCollection
from airline_codes.protocol import AirlineInfo
from tests.unit.fake_collection import FakeAirlineCollection


@pytest.fixture(name="airlines")
def fixture_airlines() -> AirlineCollection:
    """Return a fresh, modifiable copy of the default airline collection."""
    return AirlineCollection()


@pytest.fixture(name="american_airlines")
def fixture_american_airlines() -> AirlineInfo:
    """Return the record expected for American Airlines in the seed data."""
    return AirlineInfo(
        iata2="AA",
        icao3="AAL",
        prefix="001",
        iata_name="American Airlines Inc.",
        icao_name="American Airlines",
        call_sign="American",
        name="American Airlines",
    )


@pytest.fixture(name="fake_airlines")
def fixture_fake_airlines(american_airlines: AirlineInfo) -> FakeAirlineCollection:
    """Return a test double holding a single airline."""
    return FakeAirlineCollection([american_airlines])
