#!/usr/bin/env python3
"""Streaming example for basehan.

This example encodes data in small chunks, as it would arrive from a socket or
a pipe, and decodes it again one code point at a time.
"""

from __future__ import annotations

import io

from basehan import Decoder, Encoder, StreamConfig, decode_stream, encode_stream


def chunked(data: bytes, size: int) -> list[bytes]:
    """Split data into chunks of ``size`` bytes."""
    return [data[i : i + size] for i in range(0, len(data), size)]


def main() -> None:
    """Run the streaming example."""
    payload = bytes(range(64))

    # Incremental encoding
    encoder = Encoder()
    pieces = [encoder.update(chunk) for chunk in chunked(payload, 5)]
    pieces.append(encoder.finish())
    text = "".join(pieces)
    print(f"Encoded {len(payload)} bytes in {len(pieces)} calls -> {len(text)} code points")

    # Incremental decoding, one code point per call
    decoder = Decoder()
    restored = b"".join(decoder.update(char) for char in text)
    decoder.finish()
    print(f"Decoded back to {len(restored)} bytes, match={restored == payload}")

    # File objects
    config = StreamConfig(chunk_size=16)
    text_file = io.StringIO()
    encode_stream(io.BytesIO(payload), text_file, config)

    data_file = io.BytesIO()
    decode_stream(io.StringIO(text_file.getvalue()), data_file, config)
    print(f"File-object round-trip match={data_file.getvalue() == payload}")


if __name__ == "__main__":
    main()
