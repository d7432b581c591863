"""b64core API package.

This package provides the encoder, the decoder and a configured codec object.
"""

from b64core.api.codec import Base64Codec, CodecConfig
from b64core.api.decoder import (
    decode,
    decode_any,
    decode_standard,
    decode_url_safe,
    decode_with_lookup,
)
from b64core.api.encoder import (
    encode,
    encode_standard,
    encode_url_safe,
    encoded_length,
)

__all__ = [
    # Codec
    "Base64Codec",
    "CodecConfig",
    # Encoder
    "encode",
    "encode_standard",
    "encode_url_safe",
    "encoded_length",
    # Decoder
    "decode",
    "decode_any",
    "decode_standard",
    "decode_url_safe",
    "decode_with_lookup",
]
