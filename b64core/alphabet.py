"""Alphabet tables for the standard and URL-safe variants.

Each table is built once per process and never mutated afterwards, so the
same instance can be shared freely between callers and threads.
"""

from __future__ import annotations

import logging
import string
from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
from typing import Optional, Tuple, Union

from b64core.exceptions import UnknownVariantError

logger = logging.getLogger(__name__)

ALPHABET_SIZE = 64

# Code points above this are never symbols.
LOOKUP_SIZE = 128

BASE_SYMBOLS = string.ascii_uppercase + string.ascii_lowercase + string.digits


class Variant(Enum):
    """Supported alphabet variants."""

    STANDARD = "standard"
    URL_SAFE = "url-safe"

    @property
    def extra_symbols(self) -> str:
        """The two characters at positions 62 and 63."""
        return "+/" if self is Variant.STANDARD else "-_"

    @classmethod
    def parse(cls, name: Union[str, Variant]) -> Variant:
        """Resolve a variant from its name.

        Accepts ``standard`` and ``url-safe`` (also ``url_safe`` and
        ``urlsafe``), case-insensitively.

        Args:
            name: The variant name, or a Variant which is returned as-is.

        Returns:
            The matching Variant.

        Raises:
            UnknownVariantError: If the name matches no variant.
        """
        if isinstance(name, Variant):
            return name

        normalized = str(name).strip().lower().replace("_", "-")
        if normalized == "urlsafe":
            normalized = "url-safe"

        for variant in cls:
            if variant.value == normalized:
                return variant

        raise UnknownVariantError(f"unknown alphabet variant: {name!r}")


def _build_lookup(symbols: str) -> Tuple[int, ...]:
    table = [-1] * LOOKUP_SIZE
    for value, symbol in enumerate(symbols):
        table[ord(symbol)] = value
    return tuple(table)


@dataclass(frozen=True)
class Alphabet:
    """An ordered 64-symbol alphabet and its inverse lookup.

    Attributes:
        variant: The variant this alphabet was built for.
        symbols: The 64 symbols, indexed by 6-bit value.
        lookup: Symbol value per code point below 128, ``-1`` for non-symbols.
    """

    variant: Variant
    symbols: str
    lookup: Tuple[int, ...] = field(repr=False)

    def symbol(self, value: int) -> str:
        """Return the symbol for a 6-bit value."""
        return self.symbols[value]

    def value(self, char: str) -> Optional[int]:
        """Return the 6-bit value of a symbol, or None if it is not one.

        Anything other than a single character is not a symbol.
        """
        if not isinstance(char, str) or len(char) != 1:
            return None
        code = ord(char)
        if code >= LOOKUP_SIZE:
            return None
        found = self.lookup[code]
        return found if found >= 0 else None

    def __contains__(self, char: object) -> bool:
        return isinstance(char, str) and self.value(char) is not None

    def __len__(self) -> int:
        return len(self.symbols)


def build_alphabet(variant: Variant) -> Alphabet:
    """Build the alphabet table for a variant.

    The table is ``A``-``Z``, ``a``-``z``, ``0``-``9`` followed by the two
    variant-specific symbols.

    Args:
        variant: The variant to build.

    Returns:
        A new Alphabet instance.

    Example:
        >>> build_alphabet(Variant.URL_SAFE).symbols[-2:]
        '-_'
    """
    symbols = BASE_SYMBOLS + variant.extra_symbols
    logger.debug("built %s alphabet", variant.value)
    return Alphabet(variant=variant, symbols=symbols, lookup=_build_lookup(symbols))


@lru_cache(maxsize=None)
def get_alphabet(variant: Variant) -> Alphabet:
    """Return the shared alphabet instance for a variant."""
    return build_alphabet(variant)


STANDARD = get_alphabet(Variant.STANDARD)
URL_SAFE = get_alphabet(Variant.URL_SAFE)

# Accepts both variants' symbols at positions 62 and 63.
MIXED_LOOKUP: Tuple[int, ...] = tuple(
    max(standard, url_safe) for standard, url_safe in zip(STANDARD.lookup, URL_SAFE.lookup)
)
