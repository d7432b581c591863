"""Tests for the configured codec and its configuration."""

from __future__ import annotations

import dataclasses

import pytest

from b64core import (
    STANDARD,
    URL_SAFE,
    Base64Codec,
    CodecConfig,
    MalformedEncoding,
    UnknownVariantError,
    Variant,
)


def test_default_codec() -> None:
    """Test that the default codec is padded standard base64."""
    codec = Base64Codec()

    assert codec.config == CodecConfig()
    assert codec.config.variant is Variant.STANDARD
    assert codec.config.padding is True
    assert codec.alphabet is STANDARD
    assert codec.encode(b"\xfb\xff") == "+/8="
    assert codec.decode("+/8=") == b"\xfb\xff"


def test_url_safe_unpadded_codec() -> None:
    """Test a codec configured for unpadded URL-safe output."""
    codec = Base64Codec(CodecConfig(variant=Variant.URL_SAFE, padding=False))

    assert codec.alphabet is URL_SAFE
    assert codec.encode(b"\xfb\xff") == "-_8"
    assert codec.decode("-_8") == b"\xfb\xff"
    assert codec.decode("-_8=") == b"\xfb\xff"


def test_codec_text_helpers() -> None:
    """Test encoding and decoding of strings through a character encoding."""
    codec = Base64Codec()

    assert codec.encode_text("light work.") == "bGlnaHQgd29yay4="
    assert codec.decode_text("bGlnaHQgd29yay4") == "light work."

    message = "héllo wörld ✓"
    assert codec.decode_text(codec.encode_text(message)) == message


def test_codec_text_encoding_option() -> None:
    """Test a non-default character encoding."""
    codec = Base64Codec(CodecConfig(text_encoding="latin-1"))

    assert codec.encode_text("é") == "6Q=="
    assert codec.decode_text("6Q==") == "é"

    with pytest.raises(UnicodeDecodeError):
        Base64Codec().decode_text("6Q==")


def test_codec_propagates_malformed_encoding() -> None:
    """Test that decode errors reach the caller unchanged."""
    codec = Base64Codec()

    with pytest.raises(MalformedEncoding):
        codec.decode("Zm9vY")

    with pytest.raises(MalformedEncoding):
        codec.decode_text("Zm9vY")


def test_config_is_frozen() -> None:
    """Test that configurations cannot be modified after creation."""
    config = CodecConfig()

    with pytest.raises(dataclasses.FrozenInstanceError):
        config.padding = False  # type: ignore[misc]


def test_config_from_mapping() -> None:
    """Test building a configuration from plain values."""
    config = CodecConfig.from_mapping({"variant": "url_safe", "padding": 0})

    assert config == CodecConfig(variant=Variant.URL_SAFE, padding=False, text_encoding="utf-8")
    assert CodecConfig.from_mapping({}) == CodecConfig()
    assert CodecConfig.from_mapping({"variant": Variant.STANDARD}).variant is Variant.STANDARD


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("false", False),
        ("False", False),
        ("0", False),
        ("no", False),
        ("off", False),
        ("true", True),
        (" YES ", True),
        ("1", True),
        (1, True),
        (False, False),
    ],
)
def test_config_from_mapping_padding_values(raw, expected: bool) -> None:
    """Test that padding given as text or 0/1 is read as a flag."""
    config = CodecConfig.from_mapping({"padding": raw})

    assert config.padding is expected


def test_config_from_mapping_rejects_bad_padding() -> None:
    """Test that unreadable padding values are reported."""
    with pytest.raises(ValueError, match="padding"):
        CodecConfig.from_mapping({"padding": "maybe"})

    with pytest.raises(TypeError, match="padding"):
        CodecConfig.from_mapping({"padding": None})

    with pytest.raises(TypeError, match="padding"):
        CodecConfig(padding=2)  # type: ignore[arg-type]


def test_config_accepts_variant_name() -> None:
    """Test that a variant name passed directly is resolved."""
    config = CodecConfig(variant="url-safe")  # type: ignore[arg-type]
    codec = Base64Codec(config)

    assert config.variant is Variant.URL_SAFE
    assert codec.alphabet is URL_SAFE
    assert codec.encode(b"\xfb\xff") == "-_8="


def test_config_rejects_unknown_variant_name() -> None:
    """Test that a bad variant name fails when the config is created."""
    with pytest.raises(UnknownVariantError):
        CodecConfig(variant="base32")  # type: ignore[arg-type]


def test_config_from_mapping_rejects_unknown_keys() -> None:
    """Test that misspelled options are reported."""
    with pytest.raises(TypeError, match="padded"):
        CodecConfig.from_mapping({"padded": True})


def test_config_from_mapping_rejects_unknown_variant() -> None:
    """Test that unknown variant names are reported."""
    with pytest.raises(UnknownVariantError):
        CodecConfig.from_mapping({"variant": "base32"})


def test_codec_repr() -> None:
    """Test the codec representation."""
    codec = Base64Codec(CodecConfig(variant=Variant.URL_SAFE, padding=False))

    assert repr(codec) == "Base64Codec(variant='url-safe', padding=False)"
