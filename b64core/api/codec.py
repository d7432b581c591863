"""Configured codec for b64core.

This module provides the Base64Codec class, which binds an alphabet variant
and a padding policy once so callers can encode and decode without
repeating them.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional

from b64core.alphabet import Alphabet, Variant, get_alphabet
from b64core.api.decoder import EncodedText, decode
from b64core.api.encoder import BytesLike, encode
from b64core.interfaces.encoding import ICodec


_TRUE_FLAGS = {"1", "true", "yes", "on"}
_FALSE_FLAGS = {"0", "false", "no", "off"}


def _parse_flag(name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in _TRUE_FLAGS:
            return True
        if normalized in _FALSE_FLAGS:
            return False
        raise ValueError(f"invalid value for {name}: {value!r}")
    raise TypeError(f"{name} must be a bool, got {type(value).__name__}")


@dataclass(frozen=True)
class CodecConfig:
    """Configuration for a Base64Codec.

    ``variant`` may also be given by name and ``padding`` as 0/1 or one of
    the usual true/false strings; both are normalised on construction.

    Attributes:
        variant: Alphabet variant used for encoding and decoding.
        padding: Whether encoded output is padded with ``=``.
        text_encoding: Character encoding used by encode_text and decode_text.
    """

    variant: Variant = Variant.STANDARD
    padding: bool = True
    text_encoding: str = "utf-8"

    def __post_init__(self) -> None:
        """Normalise variant and padding.

        Raises:
            UnknownVariantError: If the variant name is not recognised.
            TypeError: If padding is not a bool, 0/1 or a string.
            ValueError: If padding is a string that is not a true/false word.
        """
        object.__setattr__(self, "variant", Variant.parse(self.variant))
        object.__setattr__(self, "padding", _parse_flag("padding", self.padding))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> CodecConfig:
        """Create a configuration from a plain mapping.

        Args:
            mapping: Keys matching the attribute names. Values are normalised
                as on direct construction.

        Returns:
            The configuration.

        Raises:
            TypeError: If the mapping contains unknown keys or padding has
                an unsupported type.
            ValueError: If padding is a string that is not a true/false word.
            UnknownVariantError: If the variant name is not recognised.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(mapping) - known
        if unknown:
            raise TypeError(f"unknown codec options: {', '.join(sorted(unknown))}")

        return cls(**dict(mapping))


class Base64Codec(ICodec):
    """Base64 encoder and decoder bound to one configuration.

    Instances hold no mutable state and can be shared between threads.

    Example:
        >>> codec = Base64Codec(CodecConfig(variant=Variant.URL_SAFE, padding=False))
        >>> codec.encode(b"\\xfb\\xff")
        '-_8'
        >>> codec.decode("-_8")
        b'\\xfb\\xff'
    """

    def __init__(self, config: Optional[CodecConfig] = None) -> None:
        """Initialize the codec.

        Args:
            config: Codec configuration. Defaults to padded standard Base64.
        """
        self._config = config or CodecConfig()
        self._alphabet = get_alphabet(self._config.variant)

    @property
    def config(self) -> CodecConfig:
        """The configuration this codec was built with."""
        return self._config

    @property
    def alphabet(self) -> Alphabet:
        """The alphabet table in use."""
        return self._alphabet

    def encode(self, data: BytesLike) -> str:
        """Encode bytes.

        Args:
            data: The bytes to encode.

        Returns:
            The encoded text, padded according to the configuration.
        """
        return encode(data, self._alphabet, self._config.padding)

    def decode(self, text: EncodedText) -> bytes:
        """Decode text, with or without padding.

        Args:
            text: The encoded text.

        Returns:
            The decoded bytes.

        Raises:
            MalformedEncoding: If the text ends in a dangling single symbol.
        """
        return decode(text, self._alphabet)

    def encode_text(self, text: str) -> str:
        """Encode a string using the configured character encoding."""
        return self.encode(text.encode(self._config.text_encoding))

    def decode_text(self, encoded: EncodedText) -> str:
        """Decode to a string using the configured character encoding.

        Raises:
            MalformedEncoding: If the text ends in a dangling single symbol.
            UnicodeDecodeError: If the decoded bytes are not valid in the
                configured character encoding.
        """
        return self.decode(encoded).decode(self._config.text_encoding)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(variant={self._config.variant.value!r}, "
            f"padding={self._config.padding!r})"
        )
