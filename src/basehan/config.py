"""Configuration for stream encoding and decoding.

This module provides the validated configuration model used by the stream
helpers and the command-line tool.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_CHUNK_SIZE = 3 * 1024 * 1024  # 3 MiB


class StreamConfig(BaseModel):
    """Settings for encode_stream() and decode_stream().

    Attributes:
        chunk_size: Number of bytes (encoding) or characters (decoding) read
            from the source per call (default 3 MiB). Any positive value
            yields the same output; it only bounds memory use.
        ignore_whitespace: Strip whitespace characters from text before
            decoding (default True). Text files and terminals usually add a
            trailing newline after the end-of-stream marker.

    Examples:
        ```python
        from basehan import StreamConfig

        config = StreamConfig(chunk_size=4096)
        strict = StreamConfig(ignore_whitespace=False)
        ```
    """

    model_config = ConfigDict(
        # Reject unknown settings
        extra="forbid",
        frozen=True,
    )

    chunk_size: int = Field(default=DEFAULT_CHUNK_SIZE, ge=1, description="Read size per call")
    ignore_whitespace: bool = Field(
        default=True, description="Strip whitespace from text before decoding"
    )
