"""Encoding reference implementation package.

This package provides reference implementations of the b64core encoding
interfaces for applications embedding the codec.
"""

from .base64 import Base64, Base64Url

__all__ = [
    "Base64",
    "Base64Url",
]
