"""Airline reference data lookups by IATA code, ICAO code or numeric prefix.

The module level functions read the built-in, read-only collection:

    >>> get_airline("aa").icao3
    'AAL'
    >>> normalize(1)
    '001'

`AirlineCollection()` returns a private copy that supports `add` and `remove`.
"""

from airline_codes.collection import (
    AirlineCollection,
    ReadOnlyAirlineCollection,
    contains,
    get_airline,
    get_default_collection,
    normalize,
    values,
)
from airline_codes.exceptions import (
    AirlineCodeFormatError,
    AirlineCollectionError,
    DuplicateAirlineError,
    InvalidAirlineCodeError,
)
from airline_codes.protocol import AirlineCollectionProtocol, AirlineInfo, AirlineKey

__all__ = [
    "AirlineCodeFormatError",
    "AirlineCollection",
    "AirlineCollectionError",
    "AirlineCollectionProtocol",
    "AirlineInfo",
    "AirlineKey",
    "DuplicateAirlineError",
    "InvalidAirlineCodeError",
    "ReadOnlyAirlineCollection",
    "contains",
    "get_airline",
    "get_default_collection",
    "normalize",
    "values",
]
