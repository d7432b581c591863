"""Base64 decoder.

Decoding is best-effort: characters outside the alphabet (padding,
whitespace, anything foreign) are dropped before grouping, so padded and
unpadded input decode identically. The only failure is a group left with a
single symbol.
"""

from __future__ import annotations

import logging
from typing import List, Sequence, Union

from b64core.alphabet import MIXED_LOOKUP, STANDARD, URL_SAFE, Alphabet, LOOKUP_SIZE
from b64core.exceptions import MalformedEncoding

logger = logging.getLogger(__name__)

EncodedText = Union[str, bytes, bytearray, memoryview]


def _as_text(text: EncodedText) -> str:
    if isinstance(text, str):
        return text
    return bytes(text).decode("latin-1")


def _filter_symbols(text: str, lookup: Sequence[int]) -> List[int]:
    values = []
    for char in text:
        code = ord(char)
        if code < LOOKUP_SIZE and lookup[code] >= 0:
            values.append(lookup[code])

    dropped = len(text) - len(values)
    if dropped:
        logger.debug("ignored %d non-alphabet characters", dropped)

    return values


def _decode_values(values: List[int]) -> bytes:
    out = bytearray()

    for start in range(0, len(values), 4):
        group = values[start : start + 4]
        if len(group) < 2:
            raise MalformedEncoding("broken encoding", position=start)

        a, b = group[0], group[1]
        out.append(((a << 2) | (b >> 4)) & 0xFF)

        if len(group) > 2:
            c = group[2]
            out.append(((b << 4) | (c >> 2)) & 0xFF)

            if len(group) > 3:
                out.append(((c << 6) | group[3]) & 0xFF)

    return bytes(out)


def decode_with_lookup(text: EncodedText, lookup: Sequence[int]) -> bytes:
    """Decode text using a raw code-point lookup table.

    Args:
        text: The encoded text, as ``str`` or ASCII bytes.
        lookup: Symbol value per code point below 128, ``-1`` for non-symbols.

    Returns:
        The decoded bytes.

    Raises:
        MalformedEncoding: If a group is left with a single symbol.
    """
    return _decode_values(_filter_symbols(_as_text(text), lookup))


def decode(text: EncodedText, alphabet: Alphabet) -> bytes:
    """Decode text with the given alphabet.

    Characters that are not symbols of ``alphabet`` are ignored, including
    ``=``, whitespace and the other variant's symbols.

    Args:
        text: The encoded text, as ``str`` or ASCII bytes.
        alphabet: The alphabet the text was encoded with.

    Returns:
        The decoded bytes.

    Raises:
        MalformedEncoding: If the filtered symbol count leaves a remainder of
            one when split into groups of four.
    """
    return decode_with_lookup(text, alphabet.lookup)


def decode_standard(text: EncodedText) -> bytes:
    """Decode text encoded with the standard alphabet.

    Example:
        >>> decode_standard("bGlnaHQgd29yay4=")
        b'light work.'
        >>> decode_standard("bGlnaHQgd29yay4")
        b'light work.'
    """
    return decode(text, STANDARD)


def decode_url_safe(text: EncodedText) -> bytes:
    """Decode text encoded with the URL-safe alphabet."""
    return decode(text, URL_SAFE)


def decode_any(text: EncodedText) -> bytes:
    """Decode text encoded with either alphabet, or a mix of both.

    ``+`` and ``-`` both decode to 62, ``/`` and ``_`` both to 63.
    """
    return decode_with_lookup(text, MIXED_LOOKUP)
