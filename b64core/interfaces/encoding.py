"""Encoding interfaces for b64core.

This module defines protocols for objects that encode bytes to text and
decode text back to bytes.
"""

from __future__ import annotations

from typing import Protocol, Union


class IEncoder(Protocol):
    """Interface for byte-to-text encoding."""

    def encode(self, data: Union[bytes, bytearray, memoryview]) -> str:
        """Encode bytes into text.

        Args:
            data: The bytes to encode.

        Returns:
            The encoded text.
        """
        ...


class IDecoder(Protocol):
    """Interface for text-to-byte decoding."""

    def decode(self, text: Union[str, bytes]) -> bytes:
        """Decode text into bytes.

        Args:
            text: The encoded text.

        Returns:
            The decoded bytes.

        Raises:
            Exception: When the text cannot be decoded.
        """
        ...


class ICodec(IEncoder, IDecoder, Protocol):
    """Interface for objects that both encode and decode."""

    pass
