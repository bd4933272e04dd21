"""Base-Han codec.

This module provides the bit packing, symbol mapping, and the streaming
encoder/decoder built on top of them.
"""

from __future__ import annotations

from .decoder import Decoder, DecoderState, decode
from .encoder import Encoder, encode
from .symbols import (
    DataSymbol,
    EndOfStream,
    PaddingIndicator,
    decode_code_point,
    encode_eos,
    encode_symbol,
)

__all__ = [
    "encode",
    "decode",
    "Encoder",
    "Decoder",
    "DecoderState",
    "encode_symbol",
    "encode_eos",
    "decode_code_point",
    "DataSymbol",
    "EndOfStream",
    "PaddingIndicator",
]
