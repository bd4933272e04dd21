"""Chunked and file-object helpers.

This module drives Encoder and Decoder over iterables of chunks and over
binary/text file objects, reading a bounded amount at a time so that inputs of
any size can be processed in constant memory.
"""

from __future__ import annotations

import logging
from typing import BinaryIO, Iterable, Iterator, TextIO

from .codec import Decoder, Encoder
from .config import StreamConfig
from .exceptions import DecodeError

logger = logging.getLogger(__name__)


def strip_whitespace(text: str) -> str:
    """Remove every whitespace character from ``text``."""
    return "".join(text.split())


def iter_encode(chunks: Iterable[bytes]) -> Iterator[str]:
    """Encode an iterable of byte chunks.

    Args:
        chunks: Input chunks, in order

    Yields:
        Non-empty pieces of Base-Han text; the last one ends with the
        end-of-stream marker

    Example:
        >>> "".join(iter_encode([b"Hel", b"lo"])) == encode(b"Hello")
        True
    """
    encoder = Encoder()
    for chunk in chunks:
        text = encoder.update(chunk)
        if text:
            yield text
    yield encoder.finish()


def iter_decode(chunks: Iterable[str], *, ignore_whitespace: bool = False) -> Iterator[bytes]:
    """Decode an iterable of text chunks.

    Args:
        chunks: Base-Han text chunks, in order
        ignore_whitespace: If True, strip whitespace from every chunk first

    Yields:
        Non-empty pieces of decoded data

    Raises:
        DecodeError: If the text is invalid, continues after the end-of-stream
            marker, or ends before it
    """
    decoder = Decoder()
    for chunk in chunks:
        if ignore_whitespace:
            chunk = strip_whitespace(chunk)
        data = decoder.update(chunk)
        if data:
            yield data
    decoder.finish()


def _read_chunks(src: BinaryIO | TextIO, chunk_size: int) -> Iterator:
    while True:
        chunk = src.read(chunk_size)
        if not chunk:
            return
        logger.debug("Read chunk of %d units", len(chunk))
        yield chunk


def encode_stream(src: BinaryIO, dst: TextIO, config: StreamConfig | None = None) -> int:
    """Encode everything readable from ``src`` and write the text to ``dst``.

    Args:
        src: Binary file object to read from
        dst: Text file object to write to (must accept non-ASCII characters)
        config: Stream settings (defaults to StreamConfig())

    Returns:
        Number of code points written

    Example:
        ```python
        with open("photo.jpg", "rb") as src, open("photo.txt", "w", encoding="utf-8") as dst:
            encode_stream(src, dst)
        ```
    """
    config = config or StreamConfig()
    written = 0
    for text in iter_encode(_read_chunks(src, config.chunk_size)):
        dst.write(text)
        written += len(text)
    logger.debug("Encoded stream: %d code points written", written)
    return written


def decode_stream(src: TextIO, dst: BinaryIO, config: StreamConfig | None = None) -> int:
    """Decode Base-Han text from ``src`` and write the data to ``dst``.

    Args:
        src: Text file object to read from
        dst: Binary file object to write to
        config: Stream settings (defaults to StreamConfig())

    Returns:
        Number of bytes written

    Raises:
        DecodeError: If the text is invalid, continues after the end-of-stream
            marker, or ends before it. Bytes decoded before the error have
            already been written to ``dst``.
    """
    config = config or StreamConfig()
    written = 0
    chunks = _read_chunks(src, config.chunk_size)
    try:
        for data in iter_decode(chunks, ignore_whitespace=config.ignore_whitespace):
            dst.write(data)
            written += len(data)
    except DecodeError as e:
        if e.partial:
            dst.write(e.partial)
        logger.debug("Decode failed after %d bytes: %s", written + len(e.partial), e)
        raise
    logger.debug("Decoded stream: %d bytes written", written)
    return written
