"""b64core interfaces package.

This package provides protocol definitions for encoders and decoders.
"""

from .encoding import ICodec, IDecoder, IEncoder

__all__ = [
    "ICodec",
    "IDecoder",
    "IEncoder",
]
