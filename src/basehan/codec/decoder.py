"""Base-Han decoder.

This module provides the streaming Decoder state machine and the one-shot
decode() function that convert Base-Han text back to binary data.

The decoder holds back the most recent data symbol until the next code point
arrives. The final data symbol may carry zero padding, and only the marker that
follows it tells how much; holding one symbol back keeps padding bits out of
the output without ever looking past the current code point.
"""

from __future__ import annotations

import enum
import logging
from typing import Iterable, Union

from ..exceptions import (
    DecodeError,
    InvalidCodePointError,
    StreamStateError,
    TruncatedStreamError,
    UnexpectedTrailingDataError,
)
from .bitpack import BitUnpacker
from .symbols import DataSymbol, EndOfStream, decode_code_point, encode_eos, to_code_point

logger = logging.getLogger(__name__)

TextInput = Union[str, Iterable[int]]


class DecoderState(enum.Enum):
    """Decoder state."""

    STREAMING = "streaming"
    DONE = "done"


class Decoder:
    """Incremental Base-Han decoder.

    Code points may be supplied in chunks of any size, as strings or as
    iterables of integer code points.

    Example:
        >>> decoder = Decoder()
        >>> data = decoder.update(encode(b"Hello"))
        >>> decoder.finish()
        >>> data
        b'Hello'
    """

    def __init__(self) -> None:
        self._unpacker = BitUnpacker()
        self._held: int | None = None
        self._state = DecoderState.STREAMING
        self._failed = False
        self._position = 0
        self._output_length = 0

    @property
    def state(self) -> DecoderState:
        """Current decoder state."""
        return self._state

    @property
    def position(self) -> int:
        """Number of code points consumed so far."""
        return self._position

    @property
    def output_length(self) -> int:
        """Number of bytes emitted so far."""
        return self._output_length

    def update(self, chunk: TextInput) -> bytes:
        """Decode a chunk of code points.

        A raised DecodeError carries the bytes decoded from this chunk before
        the failure in ``partial``; they are not counted in output_length.

        Args:
            chunk: Next chunk of Base-Han text, or an iterable of code points

        Returns:
            Bytes completed by this chunk (may be empty)

        Raises:
            InvalidCodePointError: If a code point is not valid at its position
            UnexpectedTrailingDataError: If code points follow the end-of-stream marker
            StreamStateError: If a previous call already raised a DecodeError
        """
        if self._failed:
            raise StreamStateError("Cannot update a decoder after a decode error")

        output = bytearray()
        try:
            for code_point in chunk:
                output += self._consume(code_point)
        except DecodeError as e:
            self._failed = True
            e.partial = bytes(output)
            raise

        self._output_length += len(output)
        return bytes(output)

    def finish(self) -> None:
        """Check that the stream ended with an end-of-stream marker.

        Raises:
            TruncatedStreamError: If no end-of-stream marker has been seen
            StreamStateError: If a previous call already raised a DecodeError
        """
        if self._failed:
            raise StreamStateError("Cannot finish a decoder after a decode error")
        if self._state is DecoderState.STREAMING:
            self._failed = True
            raise TruncatedStreamError(
                f"Input ended after {self._position} code points without an "
                f"end-of-stream marker ({self._output_length} bytes decoded)"
            )

    def _consume(self, code_point: int | str) -> bytes:
        position = self._position
        self._position += 1

        if self._state is DecoderState.DONE:
            raise UnexpectedTrailingDataError(
                f"Code point at position {position} follows the end-of-stream marker"
            )

        value = to_code_point(code_point, position)
        decoded = decode_code_point(value, position)

        if isinstance(decoded, DataSymbol):
            output = b""
            if self._held is not None:
                output = self._unpacker.write_symbol(self._held)
            self._held = decoded.symbol
            return output

        if isinstance(decoded, EndOfStream):
            return self._terminate(decoded.leftover_bits, position)

        # PaddingIndicator
        raise InvalidCodePointError(
            value, position, "padding indicator is not used in streaming mode"
        )

    def _terminate(self, leftover_bits: int, position: int) -> bytes:
        held = self._held
        self._held = None

        if leftover_bits == 0:
            output = self._unpacker.write_symbol(held) if held is not None else b""
        elif held is None:
            raise InvalidCodePointError(
                encode_eos(leftover_bits),
                position,
                f"marker claims {leftover_bits} leftover bits but no data symbol precedes it",
            )
        else:
            output = self._unpacker.write_symbol(held, leftover_bits)

        dropped = self._unpacker.discard()
        if dropped:
            logger.debug("Discarded %d trailing bits at end of stream", dropped)

        self._state = DecoderState.DONE
        return output


def decode(text: TextInput) -> bytes:
    """Decode Base-Han text to binary data.

    Args:
        text: Base-Han text, or an iterable of integer code points

    Returns:
        Decoded bytes

    Raises:
        InvalidCodePointError: If the text contains an unrecognized code point
        UnexpectedTrailingDataError: If anything follows the end-of-stream marker
        TruncatedStreamError: If the text has no end-of-stream marker; the
            error's ``partial`` attribute holds the bytes decoded before the
            input ran out

    Examples:
        ```python
        from basehan import decode

        assert decode("\\u6e00") == b""
        assert decode([0x4E00, 0x6E08]) == b"\\x00"
        ```
    """
    decoder = Decoder()
    data = decoder.update(text)
    try:
        decoder.finish()
    except TruncatedStreamError as e:
        raise TruncatedStreamError(str(e), partial=data) from None
    return data
