"""b64core: a small Base64 codec.

This package encodes bytes to printable ASCII and back using either the
standard (``+``, ``/``) or the URL-safe (``-``, ``_``) alphabet. Padding is
optional when encoding and ignored when decoding; characters outside the
alphabet are skipped.

Main Components:
    - encode_standard / encode_url_safe: Encode bytes to text
    - decode_standard / decode_url_safe / decode_any: Decode text to bytes
    - Base64Codec: Codec bound to a CodecConfig
    - Alphabet tables: STANDARD and URL_SAFE

Example:
    >>> from b64core import encode_standard, decode_standard
    >>> decode_standard(encode_standard(b"light work.", padding=False))
    b'light work.'
"""

import logging

from b64core.alphabet import STANDARD, URL_SAFE, Alphabet, Variant, build_alphabet, get_alphabet
from b64core.api import (
    Base64Codec,
    CodecConfig,
    decode,
    decode_any,
    decode_standard,
    decode_url_safe,
    encode,
    encode_standard,
    encode_url_safe,
    encoded_length,
)
from b64core.exceptions import Base64CodecError, MalformedEncoding, UnknownVariantError

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Alphabets
    "Alphabet",
    "Variant",
    "STANDARD",
    "URL_SAFE",
    "build_alphabet",
    "get_alphabet",
    # API
    "encode",
    "encode_standard",
    "encode_url_safe",
    "encoded_length",
    "decode",
    "decode_any",
    "decode_standard",
    "decode_url_safe",
    "Base64Codec",
    "CodecConfig",
    # Exceptions
    "Base64CodecError",
    "MalformedEncoding",
    "UnknownVariantError",
]
