"""Airline record model and the protocol shared by airline collections."""

from typing import Iterator, NamedTuple, Protocol

from pydantic import BaseModel, ConfigDict, Field, field_validator

from airline_codes.utils import PREFIX_LENGTH, is_numeric_code, normalize_code_key


class AirlineKey(NamedTuple):
    """The code triplet identifying an airline."""

    iata2: str
    icao3: str
    prefix: str


class AirlineInfo(BaseModel):
    """Reference data for a single airline.

    The three codes are validated and frozen at construction. Equality and hashing
    only consider the codes, so the general `name` may be changed afterwards without
    altering the identity of the airline.
    """

    model_config = ConfigDict(str_strip_whitespace=True, validate_assignment=True)

    iata2: str = Field(frozen=True)
    icao3: str = Field(frozen=True)
    prefix: str = Field(frozen=True)
    iata_name: str = Field(default="", frozen=True)
    icao_name: str = Field(default="", frozen=True)
    call_sign: str | None = Field(default=None, frozen=True)
    name: str | None = None

    @field_validator("iata2")
    @classmethod
    def validate_iata2(cls, value: str) -> str:
        """IATA codes are 2 alphanumeric characters."""
        if len(value) != 2 or not value.isalnum():
            raise ValueError("iata2 must be a 2-character alphanumeric code")
        return normalize_code_key(value)

    @field_validator("icao3")
    @classmethod
    def validate_icao3(cls, value: str) -> str:
        """ICAO codes are 3 alphanumeric characters."""
        if len(value) != 3 or not value.isalnum():
            raise ValueError("icao3 must be a 3-character alphanumeric code")
        return normalize_code_key(value)

    @field_validator("prefix")
    @classmethod
    def validate_prefix(cls, value: str) -> str:
        """Prefixes are 3 digits, zero-padded."""
        if len(value) != PREFIX_LENGTH or not is_numeric_code(value):
            raise ValueError(f"prefix must be {PREFIX_LENGTH} numeric characters")
        return value

    @property
    def key(self) -> AirlineKey:
        """Return the code triplet identifying this airline."""
        return AirlineKey(self.iata2, self.icao3, self.prefix)

    @property
    def codes(self) -> tuple[str, str, str]:
        """Return the codes under which this airline is indexed."""
        return self.iata2, self.icao3, self.prefix

    def matches(self, code: str | int) -> bool:
        """Return True if `code` is one of this airline's codes.

        Strings are compared with the IATA and ICAO codes ignoring case, then with
        the prefix regardless of zero-padding, so `1`, `"1"` and `"001"` all match
        `"001"`.
        """
        if isinstance(code, int):
            return code == int(self.prefix)
        if normalize_code_key(code) in (self.iata2, self.icao3):
            return True
        return code != "" and code.lstrip("0") == self.prefix.lstrip("0")

    def __eq__(self, other: object) -> bool:
        if isinstance(other, AirlineInfo):
            return self.key == other.key
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.key)


class AirlineCollectionProtocol(Protocol):
    """Protocol for an airline collection that lookups and consumers depend on.

    Note: the real collection defines more methods than these. Consumers that only
    need to read, add and remove airlines should depend on this protocol so a test
    double can be supplied instead.
    """

    def __getitem__(self, code: str) -> AirlineInfo | None:  # pragma: no cover
        """Return the airline matching `code`, or None."""
        ...

    def add(
        self,
        iata2: str,
        icao3: str,
        prefix: str,
        iata_name: str = "",
        icao_name: str = "",
        call_sign: str | None = None,
        name: str | None = None,
    ) -> None:  # pragma: no cover
        """Add a new airline."""
        ...

    def remove(self, code: str) -> None:  # pragma: no cover
        """Remove the airline matching `code`, if any."""
        ...

    def __iter__(self) -> Iterator[AirlineInfo]:  # pragma: no cover
        """Iterate over the airlines."""
        ...
