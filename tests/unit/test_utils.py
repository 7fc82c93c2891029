# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"""Unit tests for the airline code utilities."""

import pytest

from airline_codes.utils import (
    is_numeric_code,
    is_short_numeric_code,
    normalize_code_key,
    pad_prefix,
)


@pytest.mark.parametrize(
    ["code", "expected"],
    [(1, "001"), ("1", "001"), (45, "045"), ("45", "045"), ("001", "001"), (125, "125")],
)
def test_pad_prefix(code: str | int, expected: str) -> None:
    """Test that prefixes are zero-padded to three digits."""
    assert pad_prefix(code) == expected


def test_pad_prefix_keeps_longer_codes() -> None:
    """Test that codes of three or more characters are returned unchanged."""
    assert pad_prefix(1234) == "1234"
    assert pad_prefix("AAL") == "AAL"


@pytest.mark.parametrize(
    ["code", "expected"],
    [("001", True), ("1", True), ("", False), ("A1", False), ("-1", False), ("²", False)],
)
def test_is_numeric_code(code: str, expected: bool) -> None:
    """Test detection of all-digit codes."""
    assert is_numeric_code(code) is expected


@pytest.mark.parametrize(
    ["code", "expected"],
    [("1", True), ("01", True), ("001", False), ("", False), ("A", False), ("1A", False)],
)
def test_is_short_numeric_code(code: str, expected: bool) -> None:
    """Test detection of unpadded prefixes."""
    assert is_short_numeric_code(code) is expected


def test_normalize_code_key() -> None:
    """Test that index keys ignore letter case."""
    assert normalize_code_key("aAl") == "AAL"
    assert normalize_code_key("2d") == "2D"
    assert normalize_code_key("001") == "001"
