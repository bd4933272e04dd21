"""Mapping between 13-bit symbols and Base-Han code points.

Three disjoint groups of code points are recognized:

- Data range ``[0x4E00, 0x6E00)``: one code point per 13-bit symbol.
- End-of-stream range ``[0x6E00, 0x7E00)``: only ``0x6E00..0x6E0C`` are used,
  the offset being the number of payload bits (0-12) in the final symbol.
  The rest of the range is reserved.
- Padding indicator ``0x8E00``: recognized but never emitted.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..exceptions import InvalidCodePointError

SYMBOL_BITS = 13
SYMBOL_COUNT = 1 << SYMBOL_BITS  # 8192
SYMBOL_MASK = SYMBOL_COUNT - 1

DATA_OFFSET = 0x4E00
END_OFFSET = 0x6E00
END_RANGE_SIZE = 0x1000
MAX_LEFTOVER_BITS = SYMBOL_BITS - 1
PADDING_INDICATOR = 0x8E00


@dataclass(frozen=True)
class DataSymbol:
    """A code point from the data range."""

    symbol: int


@dataclass(frozen=True)
class EndOfStream:
    """An end-of-stream marker.

    Attributes:
        leftover_bits: Payload bits (0-12) carried by the preceding data symbol.
            Zero means the preceding symbol, if any, is entirely payload.
    """

    leftover_bits: int


@dataclass(frozen=True)
class PaddingIndicator:
    """The fixed padding indicator code point."""


Decoded = Union[DataSymbol, EndOfStream, PaddingIndicator]


def encode_symbol(symbol: int) -> int:
    """Map a 13-bit symbol to its data code point.

    Args:
        symbol: Symbol value (0-8191)

    Returns:
        Code point in the data range

    Raises:
        ValueError: If symbol is out of range
    """
    if not 0 <= symbol < SYMBOL_COUNT:
        raise ValueError(f"symbol must be 0-{SYMBOL_COUNT - 1}, got {symbol}")
    return DATA_OFFSET + symbol


def encode_eos(leftover_bits: int) -> int:
    """Map a leftover bit count to its end-of-stream marker.

    Args:
        leftover_bits: Number of payload bits in the final symbol (0-12)

    Returns:
        Code point in ``0x6E00..0x6E0C``

    Raises:
        ValueError: If leftover_bits is out of range
    """
    if not 0 <= leftover_bits <= MAX_LEFTOVER_BITS:
        raise ValueError(f"leftover_bits must be 0-{MAX_LEFTOVER_BITS}, got {leftover_bits}")
    return END_OFFSET + leftover_bits


def to_code_point(value: int | str, position: int | None = None) -> int:
    """Return the integer code point of ``value``.

    Raises:
        InvalidCodePointError: If value is a string that is not exactly one character
    """
    if isinstance(value, str):
        if len(value) != 1:
            raise InvalidCodePointError(
                None, position, f"expected a single character, got {len(value)}"
            )
        return ord(value)
    return value


def decode_code_point(code_point: int | str, position: int | None = None) -> Decoded:
    """Classify a code point.

    Args:
        code_point: Code point as an integer or a single-character string
        position: Index of the code point in the text, used in error messages

    Returns:
        DataSymbol, EndOfStream or PaddingIndicator

    Raises:
        InvalidCodePointError: If the code point is outside every recognized
            range, falls in the reserved part of the end-of-stream range, or
            is a string that is not exactly one character

    Example:
        >>> decode_code_point(0x4E2A)
        DataSymbol(symbol=42)
        >>> decode_code_point(chr(0x6E08))
        EndOfStream(leftover_bits=8)
    """
    code_point = to_code_point(code_point, position)

    if DATA_OFFSET <= code_point < END_OFFSET:
        return DataSymbol(code_point - DATA_OFFSET)

    if END_OFFSET <= code_point < END_OFFSET + END_RANGE_SIZE:
        leftover_bits = code_point - END_OFFSET
        if leftover_bits > MAX_LEFTOVER_BITS:
            raise InvalidCodePointError(code_point, position, "reserved end-of-stream value")
        return EndOfStream(leftover_bits)

    if code_point == PADDING_INDICATOR:
        return PaddingIndicator()

    raise InvalidCodePointError(code_point, position)
