"""Base64 encoding utilities.

This module provides standard and URL-safe base64 helpers built on b64core.
"""

from b64core import decode_any, encode_standard, encode_url_safe
from b64core.interfaces import ICodec


class Base64(ICodec):
    """Base64 encoding utilities for standard base64 operations.

    This class provides static methods to encode bytes to padded standard
    base64 strings and decode them back to bytes.
    """

    @staticmethod
    def encode(data: bytes) -> str:
        """Encode bytes to a padded standard base64 string.

        Args:
            data: The bytes to encode.

        Returns:
            A standard base64 encoded string.
        """
        return encode_standard(data, padding=True)

    @staticmethod
    def decode(base64_str: str) -> bytes:
        """Decode a base64 string to bytes.

        Accepts both standard and URL-safe symbols, with or without padding.

        Args:
            base64_str: The base64 string to decode.

        Returns:
            The decoded bytes.
        """
        return decode_any(base64_str)


class Base64Url(ICodec):
    """Base64 encoding utilities for URL-safe base64 operations.

    Encoded strings use ``-`` and ``_`` in place of ``+`` and ``/`` and
    carry no ``=`` padding, so they can be placed in URLs and tokens as-is.
    """

    @staticmethod
    def encode(data: bytes) -> str:
        """Encode bytes to an unpadded URL-safe base64 string.

        Args:
            data: The bytes to encode.

        Returns:
            A URL-safe base64 encoded string without padding.
        """
        return encode_url_safe(data, padding=False)

    @staticmethod
    def decode(base64_str: str) -> bytes:
        """Decode a URL-safe base64 string to bytes.

        Padding is optional; standard symbols are accepted too.

        Args:
            base64_str: The base64 string to decode.

        Returns:
            The decoded bytes.
        """
        return decode_any(base64_str)
