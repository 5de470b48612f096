"""Pattern compiler: turn a textual byte spec into a literal byte pattern.

Two notations are accepted:

- individual bytes, e.g. ``"1f 8b 08"`` (one or two hex digits per token,
  endianness ignored)
- a single hex word, e.g. ``"0x088b1f"`` (one integer, byte order chosen by
  the endian argument)
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from bytegrep.core.endian import DEFAULT_ENDIAN, Endian, encode_uint, normalize_endian

HEX_WORD_PREFIX = "0x"

_BYTE_TOKEN = re.compile(r"[0-9a-f]{1,2}")
_HEX_DIGITS = re.compile(r"[0-9a-f]+")


class InvalidPattern(ValueError):
    """Raised when a pattern spec is not valid hex in either notation."""

    def __init__(self, message: str, *, spec: str, token: str | None = None) -> None:
        super().__init__(message)
        self.spec = spec
        self.token = token


@dataclass(frozen=True)
class BytePattern:
    """A non-empty literal byte sequence to search for."""

    data: bytes
    source: str = ""

    def __post_init__(self) -> None:
        if not self.data:
            raise ValueError("BytePattern must hold at least one byte")

    def __len__(self) -> int:
        return len(self.data)

    def hex(self, sep: str = " ") -> str:
        return self.data.hex(sep)


def _compile_bytes(spec: str, text: str) -> bytes:
    tokens = text.split()
    if not tokens:
        raise InvalidPattern(f"{spec!r} is an empty pattern", spec=spec)
    out = bytearray()
    for token in tokens:
        if not _BYTE_TOKEN.fullmatch(token):
            raise InvalidPattern(f"{token} isn't a hexadecimal byte.", spec=spec, token=token)
        out.append(int(token, 16))
    return bytes(out)


def _compile_word(spec: str, text: str, endian: Endian) -> bytes:
    digits = text[len(HEX_WORD_PREFIX) :]
    if not digits:
        raise InvalidPattern(f"{spec!r} has no hex digits after 0x", spec=spec)
    if not _HEX_DIGITS.fullmatch(digits):
        raise InvalidPattern(f"{digits} isn't a hexadecimal word.", spec=spec, token=digits)
    return encode_uint(int(digits, 16), endian)


def compile_pattern(spec: str, endian: Endian | str = DEFAULT_ENDIAN) -> BytePattern:
    """Compile `spec` into a BytePattern.

    A spec starting with ``0x`` is a hex word; anything else is a list of
    whitespace-separated bytes. Input is trimmed and case-insensitive.

    Raises:
        InvalidPattern: If the spec is empty or contains non-hex text.
    """
    order = normalize_endian(endian)
    text = spec.strip().lower()
    if text.startswith(HEX_WORD_PREFIX):
        data = _compile_word(spec, text, order)
    else:
        data = _compile_bytes(spec, text)
    return BytePattern(data=data, source=spec)
