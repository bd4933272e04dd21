"""Bit-level packing and unpacking between bytes and 13-bit symbols.

Bits are always handled most-significant-bit first: the high bit of each byte
enters the buffer first, and the oldest buffered bit becomes the high bit of
the next symbol (and vice versa when unpacking).

Both classes keep an integer accumulator and never hold a full output unit
between calls, so memory use is constant regardless of stream length.
"""

from __future__ import annotations

from .symbols import SYMBOL_BITS, SYMBOL_COUNT


class BitPacker:
    """Packs bytes into 13-bit symbols.

    Example:
        >>> packer = BitPacker()
        >>> packer.write_bytes(b"\\xff\\xff")
        [8191]
        >>> packer.flush()
        (7168, 3)
    """

    def __init__(self) -> None:
        """Initialize an empty bit packer."""
        self._buffer = 0
        self._nbits = 0

    def write_bytes(self, data: bytes) -> list[int]:
        """Append bytes and return every complete symbol.

        Args:
            data: Bytes to append

        Returns:
            Symbols completed by this call, oldest first
        """
        symbols: list[int] = []
        buffer = self._buffer
        nbits = self._nbits
        for byte in data:
            buffer = (buffer << 8) | byte
            nbits += 8
            if nbits >= SYMBOL_BITS:
                nbits -= SYMBOL_BITS
                symbols.append(buffer >> nbits)
                buffer &= (1 << nbits) - 1
        self._buffer = buffer
        self._nbits = nbits
        return symbols

    def flush(self) -> tuple[int | None, int]:
        """Zero-pad the buffered bits into a final symbol and reset.

        Returns:
            Tuple of (final symbol or None if the buffer was empty, number of
            payload bits in it)
        """
        nbits = self._nbits
        if nbits == 0:
            return None, 0

        symbol = self._buffer << (SYMBOL_BITS - nbits)
        self._buffer = 0
        self._nbits = 0
        return symbol, nbits

    def bit_length(self) -> int:
        """Return the number of buffered bits (0-12)."""
        return self._nbits


class BitUnpacker:
    """Unpacks 13-bit symbols back into bytes.

    Example:
        >>> unpacker = BitUnpacker()
        >>> unpacker.write_symbol(8191)
        b'\\xff'
        >>> unpacker.write_symbol(7168, num_bits=3)
        b'\\xff'
    """

    def __init__(self) -> None:
        """Initialize an empty bit unpacker."""
        self._buffer = 0
        self._nbits = 0

    def write_symbol(self, symbol: int, num_bits: int = SYMBOL_BITS) -> bytes:
        """Append the top ``num_bits`` bits of a symbol and return complete bytes.

        Args:
            symbol: Symbol value (0-8191)
            num_bits: Number of leading bits to keep (1-13); the rest is padding

        Returns:
            Bytes completed by this call

        Raises:
            ValueError: If symbol or num_bits is out of range
        """
        if not 0 <= symbol < SYMBOL_COUNT:
            raise ValueError(f"symbol must be 0-{SYMBOL_COUNT - 1}, got {symbol}")
        if num_bits < 1 or num_bits > SYMBOL_BITS:
            raise ValueError(f"num_bits must be 1-{SYMBOL_BITS}, got {num_bits}")

        buffer = (self._buffer << num_bits) | (symbol >> (SYMBOL_BITS - num_bits))
        nbits = self._nbits + num_bits

        result = bytearray()
        while nbits >= 8:
            nbits -= 8
            result.append(buffer >> nbits)
            buffer &= (1 << nbits) - 1

        self._buffer = buffer
        self._nbits = nbits
        return bytes(result)

    def discard(self) -> int:
        """Drop any bits that do not form a whole byte.

        Returns:
            Number of bits dropped (0-7)
        """
        dropped = self._nbits
        self._buffer = 0
        self._nbits = 0
        return dropped

    def bit_length(self) -> int:
        """Return the number of buffered bits (0-7)."""
        return self._nbits
