"""Unit tests for the hex codec in utils.py."""

from __future__ import annotations

import re

import pytest

from praxis.utils import hex_to_number, number_to_hex


class TestNumberToHex:
    """Tests for number_to_hex function."""

    def test_zero(self) -> None:
        assert number_to_hex(0) == "0x0"

    def test_small_values(self) -> None:
        assert number_to_hex(5) == "0x5"
        assert number_to_hex(255) == "0xff"
        assert number_to_hex(4096) == "0x1000"

    def test_lowercase(self) -> None:
        assert number_to_hex(0xABCDEF) == "0xabcdef"

    def test_no_leading_zeros(self) -> None:
        for n in [1, 15, 16, 256, 2**64, 2**255 + 1]:
            result = number_to_hex(n)
            assert re.match(r"^0x[1-9a-f][0-9a-f]*$", result), result

    def test_beyond_machine_integers(self) -> None:
        assert number_to_hex(2**256 - 1) == "0x" + "f" * 64

    def test_rejects_negative(self) -> None:
        with pytest.raises(ValueError):
            number_to_hex(-1)

    def test_rejects_non_integers(self) -> None:
        with pytest.raises(TypeError):
            number_to_hex(1.5)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            number_to_hex(True)
        with pytest.raises(TypeError):
            number_to_hex("0x1")  # type: ignore[arg-type]


class TestHexToNumber:
    """Tests for hex_to_number function."""

    def test_simple_input(self) -> None:
        assert hex_to_number("0x0") == 0
        assert hex_to_number("0x5") == 5
        assert hex_to_number("0x1b4") == 436

    def test_accepts_uppercase_digits(self) -> None:
        assert hex_to_number("0xFF") == 255

    def test_accepts_leading_zeros(self) -> None:
        assert hex_to_number("0x000a") == 10

    def test_widens_past_safe_integer_range(self) -> None:
        # 2**53 + 1 is not representable as a double; must come back exact
        assert hex_to_number("0x20000000000001") == 2**53 + 1
        assert hex_to_number("0x" + "f" * 64) == 2**256 - 1

    @pytest.mark.parametrize("value", ["", "0x", "ff", "0xzz", "0x 1", "-0x1", "0x1\n", "0x1 "])
    def test_rejects_malformed(self, value: str) -> None:
        with pytest.raises(ValueError):
            hex_to_number(value)

    def test_rejects_non_string(self) -> None:
        with pytest.raises(TypeError):
            hex_to_number(5)  # type: ignore[arg-type]

    def test_roundtrip(self) -> None:
        for n in [0, 1, 9, 10, 2**32, 2**53 + 1, 2**256 - 1, 12345678901234567890]:
            assert hex_to_number(number_to_hex(n)) == n
