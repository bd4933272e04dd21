"""Exception hierarchy for basehan.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from BaseHanError for easy catching of any basehan-specific error.
"""

from __future__ import annotations


class BaseHanError(Exception):
    """Base exception for all basehan errors."""

    pass


class StreamStateError(BaseHanError):
    """Raised when an encoder or decoder is used after it has finished or failed.

    Examples:
        - Calling Encoder.update() after Encoder.finish()
        - Feeding a Decoder again after it raised a DecodeError
    """

    pass


class DecodeError(BaseHanError):
    """Raised when decoding Base-Han text fails.

    Examples:
        - Code point outside every recognized range
        - Text continuing after the end-of-stream marker
        - Text ending before the end-of-stream marker

    Attributes:
        partial: Bytes decoded from the failing call before the error. They are
            for diagnostics only and are not a valid decode result.
    """

    partial: bytes = b""


class InvalidCodePointError(DecodeError):
    """Raised when a code point is not a data symbol or a usable end-of-stream marker.

    Attributes:
        code_point: The offending code point (None if the input was not a
            single character)
        position: Index of the code point in the decoded text (None if unknown)
    """

    def __init__(
        self, code_point: int | None, position: int | None = None, reason: str = ""
    ) -> None:
        self.code_point = code_point
        self.position = position
        where = f" at position {position}" if position is not None else ""
        detail = f": {reason}" if reason else ""
        shown = f" {code_point:#x}" if code_point is not None else ""
        super().__init__(f"Invalid code point{shown}{where}{detail}")


class UnexpectedTrailingDataError(DecodeError):
    """Raised when code points follow the end-of-stream marker."""

    pass


class TruncatedStreamError(DecodeError):
    """Raised when the input ends before an end-of-stream marker was seen.

    The bytes decoded so far are kept in ``partial`` for diagnostics only.
    They are not a valid decode result.
    """

    def __init__(self, message: str, partial: bytes = b"") -> None:
        self.partial = partial
        super().__init__(message)
