"""Unit tests for bitpacking utilities."""

from __future__ import annotations

import pytest

from basehan.codec.bitpack import BitPacker, BitUnpacker


class TestBitPacker:
    """Test BitPacker functionality."""

    def test_single_byte_buffers(self) -> None:
        """Test that one byte does not complete a symbol."""
        packer = BitPacker()
        assert packer.write_bytes(b"\xab") == []
        assert packer.bit_length() == 8

    def test_two_bytes_emit_one_symbol(self) -> None:
        """Test that 16 bits emit one symbol and keep 3 bits."""
        packer = BitPacker()
        symbols = packer.write_bytes(b"\xab\xcd")  # 1010101111001 101

        assert symbols == [0x1579]
        assert packer.bit_length() == 3

    def test_flush_pads_with_zeros(self) -> None:
        """Test that leftover bits are left-aligned and zero-padded."""
        packer = BitPacker()
        packer.write_bytes(b"\xab\xcd")

        symbol, leftover = packer.flush()
        assert leftover == 3
        assert symbol == 0b101 << 10
        assert packer.bit_length() == 0

    def test_flush_empty(self) -> None:
        """Test flushing an empty packer."""
        packer = BitPacker()
        assert packer.flush() == (None, 0)

    def test_exact_multiple_of_13_bits(self) -> None:
        """Test that 13 bytes (104 bits) leave nothing to flush."""
        packer = BitPacker()
        symbols = packer.write_bytes(b"\xff" * 13)

        assert symbols == [8191] * 8
        assert packer.flush() == (None, 0)

    def test_chunking_is_irrelevant(self) -> None:
        """Test that byte-at-a-time writes give the same symbols."""
        data = bytes(range(40))

        whole = BitPacker()
        expected = whole.write_bytes(data)

        split = BitPacker()
        symbols: list[int] = []
        for byte in data:
            symbols.extend(split.write_bytes(bytes([byte])))

        assert symbols == expected
        assert split.flush() == whole.flush()

    def test_buffer_never_reaches_13_bits(self) -> None:
        """Test that at most 12 bits stay buffered between calls."""
        packer = BitPacker()
        for byte in range(100):
            packer.write_bytes(bytes([byte]))
            assert 0 <= packer.bit_length() <= 12


class TestBitUnpacker:
    """Test BitUnpacker functionality."""

    def test_full_symbol(self) -> None:
        """Test that 13 bits emit one byte and keep 5 bits."""
        unpacker = BitUnpacker()
        assert unpacker.write_symbol(0x1579) == b"\xab"
        assert unpacker.bit_length() == 5

    def test_partial_symbol(self) -> None:
        """Test keeping only the leading bits of a padded symbol."""
        unpacker = BitUnpacker()
        unpacker.write_symbol(0x1579)

        assert unpacker.write_symbol(0b101 << 10, num_bits=3) == b"\xcd"
        assert unpacker.bit_length() == 0

    def test_discard(self) -> None:
        """Test dropping bits that do not form a byte."""
        unpacker = BitUnpacker()
        unpacker.write_symbol(0)

        assert unpacker.discard() == 5
        assert unpacker.bit_length() == 0
        assert unpacker.discard() == 0

    def test_symbol_bounds(self) -> None:
        """Test symbol and width range checking."""
        unpacker = BitUnpacker()

        with pytest.raises(ValueError, match="symbol must be"):
            unpacker.write_symbol(8192)

        with pytest.raises(ValueError, match="symbol must be"):
            unpacker.write_symbol(-1)

        with pytest.raises(ValueError, match="num_bits must be"):
            unpacker.write_symbol(0, num_bits=0)

        with pytest.raises(ValueError, match="num_bits must be"):
            unpacker.write_symbol(0, num_bits=14)


class TestRoundTrip:
    """Test packing followed by unpacking."""

    def test_roundtrip_with_padding(self) -> None:
        """Test that the flushed width recovers the exact bytes."""
        data = b"\x12\x34\x56"
        packer = BitPacker()
        symbols = packer.write_bytes(data)
        final, leftover = packer.flush()

        unpacker = BitUnpacker()
        result = b"".join(unpacker.write_symbol(s) for s in symbols)
        assert final is not None
        result += unpacker.write_symbol(final, num_bits=leftover)

        assert result == data
        assert unpacker.bit_length() == 0
