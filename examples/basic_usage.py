#!/usr/bin/env python3
"""Basic usage example for basehan.

This example demonstrates:
1. Encoding bytes to Base-Han text
2. Inspecting the code points and the end-of-stream marker
3. Decoding back to bytes
4. Handling corrupted input
"""

from __future__ import annotations

from basehan import (
    DecodeError,
    decode,
    decode_code_point,
    encode,
    encoded_length,
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("basehan Basic Usage Example")
    print("=" * 60)
    print()

    payload = b"Hello, world!"

    print("1. Encoding...")
    text = encode(payload)
    print(f"   Input:  {payload!r} ({len(payload)} bytes)")
    print(f"   Output: {text} ({len(text)} code points)")
    print(f"   Predicted length: {encoded_length(len(payload))}")
    print()

    print("2. Code points:")
    for char in text:
        print(f"   U+{ord(char):04X}  {decode_code_point(char)}")
    print()

    print("3. Decoding...")
    decoded = decode(text)
    print(f"   Result: {decoded!r}")
    assert decoded == payload
    print()

    print("4. Corrupted input...")
    for bad in (text[:-1], text + text[0], "A" + text):
        try:
            decode(bad)
        except DecodeError as e:
            print(f"   {type(e).__name__}: {e}")
    print()


if __name__ == "__main__":
    main()
