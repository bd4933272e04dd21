"""Utility functions for basehan.

This module provides size calculation helpers.
"""

from __future__ import annotations

from .sizing import encoded_length, leftover_bits, max_decoded_length

__all__ = [
    "encoded_length",
    "leftover_bits",
    "max_decoded_length",
]
