# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"""Unit tests for the seed airline data."""

from airline_codes.data import AIRLINE_DATA
from airline_codes.protocol import AirlineInfo


def test_seed_rows_are_valid_airlines() -> None:
    """Test that every seed row builds an AirlineInfo with unchanged codes."""
    for iata2, icao3, prefix, iata_name, icao_name, name, call_sign in AIRLINE_DATA:
        airline = AirlineInfo(
            iata2=iata2,
            icao3=icao3,
            prefix=prefix,
            iata_name=iata_name,
            icao_name=icao_name,
            call_sign=call_sign,
            name=name,
        )
        assert airline.codes == (iata2, icao3, prefix)


def test_seed_codes_are_unique() -> None:
    """Test that no code is shared by two airlines, in any code space."""
    codes = [code for row in AIRLINE_DATA for code in row[:3]]

    assert len(codes) == len(set(codes)) == 3 * len(AIRLINE_DATA)
