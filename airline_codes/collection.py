"""Airline collections indexed by IATA code, ICAO code and numeric prefix.

Each collection keeps two parallel indexes: every code (upper-cased) points to the
code triplet of its airline, and every triplet points to the airline record. The
default collection is built once from the seed data and never changes. An
`AirlineCollection` instance starts as a copy of it and can be modified freely.
"""

import logging
from functools import cache
from types import MappingProxyType
from typing import Iterator, Mapping, MutableMapping

from pydantic import ValidationError

from airline_codes.data import AIRLINE_DATA
from airline_codes.exceptions import (
    AirlineCodeFormatError,
    DuplicateAirlineError,
    InvalidAirlineCodeError,
)
from airline_codes.protocol import AirlineCollectionProtocol, AirlineInfo, AirlineKey
from airline_codes.utils import (
    is_numeric_code,
    is_short_numeric_code,
    normalize_code_key,
    pad_prefix,
)

logger = logging.getLogger(__name__)


def _lookup_code(code: str | int) -> str:
    """Return the string form of a lookup code. Integers are treated as prefixes."""
    match code:
        case bool():
            raise InvalidAirlineCodeError(code)
        case int():
            return pad_prefix(code)
        case str():
            return code
        case _:
            raise InvalidAirlineCodeError(code)


def _canonical_code(code: str | int, airline: AirlineInfo) -> str | None:
    """Return the code of `airline` in the same code space as `code`."""
    if isinstance(code, int) or is_numeric_code(code):
        return airline.prefix
    match len(code):
        case 2:
            return airline.iata2
        case 3:
            return airline.icao3
        case _:
            return None


def _insert(
    codes: MutableMapping[str, AirlineKey],
    airlines: MutableMapping[AirlineKey, AirlineInfo],
    airline: AirlineInfo,
) -> None:
    """Index `airline` under its three codes. Nothing is written if any code is taken."""
    new_codes = airline.codes
    duplicates = [
        code for code in dict.fromkeys(new_codes) if code in codes or new_codes.count(code) > 1
    ]
    if duplicates:
        raise DuplicateAirlineError(duplicates)

    for code in new_codes:
        codes[code] = airline.key
    airlines[airline.key] = airline


class ReadOnlyAirlineCollection:
    """Lookups over a fixed set of airlines."""

    _codes: Mapping[str, AirlineKey]
    _airlines: Mapping[AirlineKey, AirlineInfo]

    def __init__(
        self,
        codes: Mapping[str, AirlineKey],
        airlines: Mapping[AirlineKey, AirlineInfo],
    ) -> None:
        self._codes = codes
        self._airlines = airlines

    def _find(self, code: str) -> AirlineInfo | None:
        key = self._codes.get(normalize_code_key(code))
        if key is None and is_short_numeric_code(code):
            # Unpadded prefixes such as "1" are accepted for "001".
            key = self._codes.get(pad_prefix(code))
        return self._airlines[key] if key is not None else None

    def get_airline(self, code: str | int) -> AirlineInfo | None:
        """Return the airline matching an IATA code, ICAO code or prefix.

        Letter case is ignored, integers are looked up as zero-padded prefixes and
        unknown codes return None. Raises `InvalidAirlineCodeError` if `code` is
        None or not a str or int.
        """
        return self._find(_lookup_code(code))

    def contains(self, code: str | int) -> bool:
        """Return True if an airline matches `code`."""
        return self.get_airline(code) is not None

    def normalize(self, code: str | int) -> str | None:
        """Return the canonical form of `code`, e.g. "aa" -> "AA", 1 -> "001".

        Numeric codes normalize to the prefix, 2-character codes to the IATA code
        and 3-character codes to the ICAO code. None if no airline matches.
        """
        airline = self.get_airline(code)
        if airline is None:
            return None
        return _canonical_code(code, airline)

    def values(self) -> tuple[AirlineInfo, ...]:
        """Return a snapshot of the airlines in the collection."""
        return tuple(self._airlines.values())

    def __getitem__(self, code: str | int) -> AirlineInfo | None:
        return self.get_airline(code)

    def __contains__(self, code: object) -> bool:
        if isinstance(code, bool) or not isinstance(code, (str, int)):
            return False
        return self.contains(code)

    def __iter__(self) -> Iterator[AirlineInfo]:
        return iter(self.values())

    def __len__(self) -> int:
        return len(self._airlines)


class AirlineCollection(ReadOnlyAirlineCollection):
    """A modifiable copy of the default airline collection.

    Changes only affect this instance. Instances are not synchronized; callers
    sharing one between threads must serialize `add` and `remove` themselves.
    """

    _codes: dict[str, AirlineKey]
    _airlines: dict[AirlineKey, AirlineInfo]

    def __init__(self) -> None:
        default = get_default_collection()
        # Records are copied so changing an airline's name here leaves the default intact.
        super().__init__(
            dict(default._codes),
            {key: airline.model_copy() for key, airline in default._airlines.items()},
        )

    def add(
        self,
        iata2: str,
        icao3: str,
        prefix: str,
        iata_name: str = "",
        icao_name: str = "",
        call_sign: str | None = None,
        name: str | None = None,
    ) -> None:
        """Add a new airline.

        Raises `AirlineCodeFormatError` if the codes are malformed and
        `DuplicateAirlineError` if any of them already belongs to an airline. The
        collection is unchanged when either is raised.
        """
        try:
            airline = AirlineInfo(
                iata2=iata2,
                icao3=icao3,
                prefix=prefix,
                iata_name=iata_name,
                icao_name=icao_name,
                call_sign=call_sign,
                name=name,
            )
        except ValidationError as exc:
            reason = "; ".join(error["msg"] for error in exc.errors())
            raise AirlineCodeFormatError(iata2, icao3, prefix, reason=reason) from exc

        _insert(self._codes, self._airlines, airline)
        logger.debug(f"Added airline {airline.iata2}/{airline.icao3}/{airline.prefix}")

    def remove(self, code: str) -> None:
        """Remove the airline matching `code`. Unknown codes are ignored."""
        airline = self.get_airline(code)
        if airline is None:
            return

        for airline_code in airline.codes:
            self._codes.pop(airline_code, None)
        del self._airlines[airline.key]
        logger.debug(f"Removed airline {airline.iata2}/{airline.icao3}/{airline.prefix}")


@cache
def get_default_collection() -> ReadOnlyAirlineCollection:
    """Build and memoize the process-wide, read-only airline collection."""
    codes: dict[str, AirlineKey] = {}
    airlines: dict[AirlineKey, AirlineInfo] = {}
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
        _insert(codes, airlines, airline)

    logger.debug(f"Loaded {len(airlines)} airlines into the default collection")
    return ReadOnlyAirlineCollection(MappingProxyType(codes), MappingProxyType(airlines))


def get_airline(
    code: str | int, airlines: AirlineCollectionProtocol | None = None
) -> AirlineInfo | None:
    """Return the airline matching `code` in `airlines`, or the default collection."""
    if airlines is None:
        return get_default_collection().get_airline(code)
    return airlines[_lookup_code(code)]


def contains(code: str | int, airlines: AirlineCollectionProtocol | None = None) -> bool:
    """Return True if an airline matches `code`."""
    return get_airline(code, airlines) is not None


def normalize(code: str | int, airlines: AirlineCollectionProtocol | None = None) -> str | None:
    """Return the canonical form of `code`, or None if no airline matches."""
    airline = get_airline(code, airlines)
    if airline is None:
        return None
    return _canonical_code(code, airline)


def values() -> tuple[AirlineInfo, ...]:
    """Return all airlines of the default collection."""
    return get_default_collection().values()
