"""basehan: Base-Han binary-to-text encoding

A Python library that encodes binary data as text, like base64, but using a
large alphabet of CJK ideographs. Every 13 bits of input become one code point
in U+4E00..U+6DFF, and a final end-of-stream marker in U+6E00..U+6E0C records
how many bits of the last symbol are payload.

Key Features:
- Streaming encoder and decoder (feed any chunk size, constant memory)
- No lookahead: every decoder transition depends on the current code point only
- Typed decode errors for invalid, trailing and truncated input
- Command-line tool (`basehan`)

Quick Start:
    >>> from basehan import encode, decode
    >>>
    >>> text = encode(b"Hello, world!")
    >>> decode(text)
    b'Hello, world!'
    >>>
    >>> from basehan import Encoder
    >>> encoder = Encoder()
    >>> text = encoder.update(b"Hello, ") + encoder.update(b"world!") + encoder.finish()
"""

from __future__ import annotations

__version__ = "0.1.0"

from .codec import (  # noqa: E402
    DataSymbol,
    Decoder,
    DecoderState,
    Encoder,
    EndOfStream,
    PaddingIndicator,
    decode,
    decode_code_point,
    encode,
    encode_eos,
    encode_symbol,
)
from .config import StreamConfig  # noqa: E402
from .exceptions import (  # noqa: E402
    BaseHanError,
    DecodeError,
    InvalidCodePointError,
    StreamStateError,
    TruncatedStreamError,
    UnexpectedTrailingDataError,
)
from .streams import decode_stream, encode_stream, iter_decode, iter_encode  # noqa: E402
from .utils import encoded_length, leftover_bits, max_decoded_length  # noqa: E402

__all__ = [
    # Core API
    "encode",
    "decode",
    "Encoder",
    "Decoder",
    "DecoderState",
    # Symbol codec
    "encode_symbol",
    "encode_eos",
    "decode_code_point",
    "DataSymbol",
    "EndOfStream",
    "PaddingIndicator",
    # Exceptions
    "BaseHanError",
    "DecodeError",
    "InvalidCodePointError",
    "UnexpectedTrailingDataError",
    "TruncatedStreamError",
    "StreamStateError",
    # Streams
    "StreamConfig",
    "iter_encode",
    "iter_decode",
    "encode_stream",
    "decode_stream",
    # Sizing
    "encoded_length",
    "leftover_bits",
    "max_decoded_length",
    # Version
    "__version__",
]
