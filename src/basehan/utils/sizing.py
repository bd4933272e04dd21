"""Encoded size calculation utilities.

This module provides functions to calculate the size of Base-Han text
without actually encoding or decoding anything.
"""

from __future__ import annotations

from ..codec.symbols import SYMBOL_BITS


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must be >= 0, got {value}")


def encoded_length(num_bytes: int) -> int:
    """Calculate the number of code points produced by encoding ``num_bytes`` bytes.

    Args:
        num_bytes: Input length in bytes

    Returns:
        Number of code points, end-of-stream marker included

    Raises:
        ValueError: If num_bytes is negative

    Example:
        >>> encoded_length(0)
        1  # marker only
        >>> encoded_length(13)
        9  # 104 bits = 8 symbols + marker
    """
    _check_non_negative("num_bytes", num_bytes)
    return -(-num_bytes * 8 // SYMBOL_BITS) + 1


def leftover_bits(num_bytes: int) -> int:
    """Return the end-of-stream marker value for an input of ``num_bytes`` bytes.

    Args:
        num_bytes: Input length in bytes

    Returns:
        Payload bits in the final symbol (0-12)

    Raises:
        ValueError: If num_bytes is negative
    """
    _check_non_negative("num_bytes", num_bytes)
    return (num_bytes * 8) % SYMBOL_BITS


def max_decoded_length(num_code_points: int) -> int:
    """Calculate the largest byte count that ``num_code_points`` code points can decode to.

    Args:
        num_code_points: Text length in code points, end-of-stream marker included

    Returns:
        Upper bound on decoded bytes (0 if the text cannot hold any data)

    Raises:
        ValueError: If num_code_points is negative
    """
    _check_non_negative("num_code_points", num_code_points)
    if num_code_points <= 1:
        return 0
    return (num_code_points - 1) * SYMBOL_BITS // 8
