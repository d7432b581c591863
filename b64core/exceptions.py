"""Exception classes for b64core.

This module defines custom exception types used throughout the b64core library.
"""

from __future__ import annotations

from typing import Optional


class Base64CodecError(Exception):
    """Base exception class for all b64core errors."""

    pass


class MalformedEncoding(Base64CodecError, ValueError):
    """Exception raised when encoded text cannot be decoded.

    Raised when, after dropping every character outside the alphabet, a
    group is left holding a single symbol.

    Attributes:
        position: Index of the dangling symbol among the filtered symbols.
    """

    def __init__(self, message: str = "broken encoding", position: Optional[int] = None) -> None:
        super().__init__(message)
        self.position = position


class UnknownVariantError(Base64CodecError, ValueError):
    """Exception raised when an alphabet variant name is not recognised."""

    pass
