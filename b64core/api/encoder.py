"""Base64 encoder.

This module maps 3-byte groups to 4-symbol groups using an alphabet table,
with optional ``=`` padding on the final group.
"""

from __future__ import annotations

from typing import List, Union

from b64core.alphabet import STANDARD, URL_SAFE, Alphabet

BytesLike = Union[bytes, bytearray, memoryview]

PADDING = "="


def encoded_length(size: int, padding: bool = True) -> int:
    """Compute the length of the encoding of ``size`` bytes.

    Args:
        size: Number of input bytes.
        padding: Whether the final group is padded with ``=``.

    Returns:
        ``ceil(size / 3) * 4`` when padded, ``ceil(size * 4 / 3)`` otherwise.
    """
    if padding:
        return (size + 2) // 3 * 4
    return (size * 4 + 2) // 3


def encode(data: BytesLike, alphabet: Alphabet, padding: bool = True) -> str:
    """Encode bytes with the given alphabet.

    Args:
        data: The bytes to encode. May be empty.
        alphabet: The alphabet to map 6-bit values through.
        padding: Whether to complete a short final group with ``=``.

    Returns:
        The encoded text.

    Raises:
        TypeError: If ``data`` is not bytes-like.
    """
    raw = memoryview(data).tobytes()
    symbols = alphabet.symbols
    out: List[str] = []

    for start in range(0, len(raw), 3):
        group = raw[start : start + 3]
        byte_1 = group[0]
        byte_2 = group[1] if len(group) > 1 else 0
        byte_3 = group[2] if len(group) > 2 else 0

        out.append(symbols[byte_1 >> 2])
        out.append(symbols[((byte_1 & 0x03) << 4) | (byte_2 >> 4)])

        if len(group) > 1:
            out.append(symbols[((byte_2 & 0x0F) << 2) | (byte_3 >> 6)])
        elif padding:
            out.append(PADDING)

        if len(group) > 2:
            out.append(symbols[byte_3 & 0x3F])
        elif padding:
            out.append(PADDING)

    return "".join(out)


def encode_standard(data: BytesLike, padding: bool = True) -> str:
    """Encode bytes with the standard alphabet (``+`` and ``/``).

    Example:
        >>> encode_standard(b"Man is distinguished")
        'TWFuIGlzIGRpc3Rpbmd1aXNoZWQ='
        >>> encode_standard(b"Man is distinguished", padding=False)
        'TWFuIGlzIGRpc3Rpbmd1aXNoZWQ'
    """
    return encode(data, STANDARD, padding)


def encode_url_safe(data: BytesLike, padding: bool = True) -> str:
    """Encode bytes with the URL-safe alphabet (``-`` and ``_``)."""
    return encode(data, URL_SAFE, padding)
