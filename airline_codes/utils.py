"""Utilities for normalizing airline codes"""

PREFIX_LENGTH: int = 3


def pad_prefix(code: str | int) -> str:
    """Left-pad a numeric prefix with zeros, e.g. `1` and `"1"` both become `"001"`."""
    return str(code).rjust(PREFIX_LENGTH, "0")


def is_numeric_code(code: str) -> bool:
    """Return True if the code is non-empty and made of ASCII digits only."""
    return code.isascii() and code.isdigit()


def is_short_numeric_code(code: str) -> bool:
    """Return True for an unpadded prefix such as `"1"` or `"45"`."""
    return len(code) < PREFIX_LENGTH and is_numeric_code(code)


def normalize_code_key(code: str) -> str:
    """Return the form under which a code is indexed. Lookups ignore letter case."""
    return code.upper()
