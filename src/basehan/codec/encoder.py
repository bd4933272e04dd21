"""Base-Han encoder.

This module provides the streaming Encoder and the one-shot encode() function
that convert binary data to Base-Han text.
"""

from __future__ import annotations

from ..exceptions import StreamStateError
from .bitpack import BitPacker
from .symbols import encode_eos, encode_symbol


class Encoder:
    """Incremental Base-Han encoder.

    Bytes may be supplied in chunks of any size, including one byte at a time.
    The concatenation of every update() result followed by finish() is identical
    to encode() of the concatenated input.

    Example:
        >>> encoder = Encoder()
        >>> text = encoder.update(b"Hello, ")
        >>> text += encoder.update(b"world")
        >>> text += encoder.finish()
        >>> text == encode(b"Hello, world")
        True
    """

    def __init__(self) -> None:
        self._packer = BitPacker()
        self._finished = False

    @property
    def finished(self) -> bool:
        """True once finish() has been called."""
        return self._finished

    def update(self, data: bytes) -> str:
        """Encode a chunk of bytes.

        Args:
            data: Next chunk of input

        Returns:
            Data code points completed by this chunk (may be empty)

        Raises:
            StreamStateError: If the encoder has already finished
        """
        if self._finished:
            raise StreamStateError("Cannot update an encoder after finish()")

        return "".join(chr(encode_symbol(s)) for s in self._packer.write_bytes(data))

    def finish(self) -> str:
        """Terminate the stream.

        Returns:
            The zero-padded final data code point, if any bits are left,
            followed by the end-of-stream marker

        Raises:
            StreamStateError: If the encoder has already finished
        """
        if self._finished:
            raise StreamStateError("Encoder already finished")
        self._finished = True

        symbol, leftover_bits = self._packer.flush()
        tail = chr(encode_eos(leftover_bits))
        if symbol is None:
            return tail
        return chr(encode_symbol(symbol)) + tail


def encode(data: bytes) -> str:
    """Encode binary data to Base-Han text.

    Args:
        data: Bytes to encode (may be empty)

    Returns:
        Base-Han text, always terminated by an end-of-stream marker

    Examples:
        ```python
        from basehan import encode, decode

        text = encode(b"\\x00")
        assert [hex(ord(c)) for c in text] == ["0x4e00", "0x6e08"]
        assert decode(text) == b"\\x00"
        ```
    """
    encoder = Encoder()
    return encoder.update(data) + encoder.finish()
