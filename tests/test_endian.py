from __future__ import annotations

import pytest

from bytegrep.core.endian import encode_uint, normalize_endian


def test_normalize_endian() -> None:
    assert normalize_endian(None) == "big"
    assert normalize_endian("LITTLE") == "little"
    assert normalize_endian(" big ") == "big"
    with pytest.raises(ValueError):
        normalize_endian("native")


def test_encode_uint_minimal() -> None:
    assert encode_uint(0, "big") == b"\x00"
    assert encode_uint(0xFF, "big") == b"\xff"
    assert encode_uint(0x100, "big") == b"\x01\x00"
    assert encode_uint(0x100, "little") == b"\x00\x01"


def test_encode_uint_negative() -> None:
    with pytest.raises(ValueError):
        encode_uint(-1, "big")
