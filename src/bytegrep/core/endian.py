"""Endianness for hex-word patterns: type, normalization, and byte ordering."""

from __future__ import annotations

from typing import Literal

# Type alias for endianness
Endian = Literal["little", "big"]

DEFAULT_ENDIAN: Endian = "big"


def normalize_endian(value: str | None) -> Endian:
    """Normalize an endian value from the command line or a config file.

    Args:
        value: 'big' or 'little' in any case (or None for the default)

    Returns:
        Normalized Endian value

    Raises:
        ValueError: If value is not 'little' or 'big'
    """
    if value is None:
        return DEFAULT_ENDIAN

    value_lower = str(value).strip().lower()
    if value_lower not in ("little", "big"):
        raise ValueError(f"Invalid endian '{value}'. Expected 'little' or 'big'.")

    return value_lower  # type: ignore[return-value]


def encode_uint(value: int, endian: Endian) -> bytes:
    """Encode a non-negative integer in the fewest bytes that hold it.

    Zero still takes one byte. Byte order follows `endian`.
    """
    if value < 0:
        raise ValueError("value must be >= 0")
    size = max(1, (value.bit_length() + 7) // 8)
    return value.to_bytes(size, byteorder=endian)
