"""Unit tests for sanitizing tools – UnicodeNormalizer and MaskTokenValidator."""

from __future__ import annotations

import pytest

from mp_sanitizer.config.validation import (
    ConfigError,
    InvalidMaskTokenConfigError,
    InvalidPatternConfigError,
)
from mp_sanitizer.sanitizing.tools import MaskTokenValidator, UnicodeNormalizer


# ---------------------------------------------------------------------------
# UnicodeNormalizer
# ---------------------------------------------------------------------------


class TestUnicodeNormalizer:
    def test_fullwidth_folded_to_ascii(self) -> None:
        assert UnicodeNormalizer().normalize("ｐａｓｓｗｏｒｄ") == "password"

    def test_ligature_expanded(self) -> None:
        assert UnicodeNormalizer().normalize("ﬁle") == "file"

    def test_plain_ascii_unchanged(self) -> None:
        assert UnicodeNormalizer().normalize("hello world") == "hello world"

    def test_unknown_form_returns_input(self) -> None:
        assert UnicodeNormalizer("BOGUS").normalize("ｔｏｋｅｎ") == "ｔｏｋｅｎ"


# ---------------------------------------------------------------------------
# MaskTokenValidator
# ---------------------------------------------------------------------------


class TestMaskTokenValidatorNormalization:
    def test_plain_word_wrapped_and_uppercased(self) -> None:
        assert MaskTokenValidator().validate("masked") == "[MASKED]"

    def test_already_wrapped_token(self) -> None:
        assert MaskTokenValidator().validate("[redacted]") == "[REDACTED]"

    def test_surrounding_whitespace_trimmed(self) -> None:
        assert MaskTokenValidator().validate("  hidden  ") == "[HIDDEN]"

    def test_nested_brackets_stripped(self) -> None:
        assert MaskTokenValidator().validate("[[x]]") == "[X]"

    def test_default_token_is_stable(self) -> None:
        assert MaskTokenValidator().validate("[MASKED]") == "[MASKED]"


class TestMaskTokenValidatorRejection:
    @pytest.mark.parametrize("token", ["", "   ", "[]", "[ ]"])
    def test_empty_tokens_rejected(self, token: str) -> None:
        with pytest.raises(InvalidMaskTokenConfigError):
            MaskTokenValidator().validate(token)

    def test_too_long_rejected(self) -> None:
        with pytest.raises(InvalidMaskTokenConfigError):
            MaskTokenValidator().validate("a" * 41)

    def test_max_length_boundary_accepted(self) -> None:
        assert MaskTokenValidator().validate("a" * 40) == "[" + "A" * 40 + "]"

    @pytest.mark.parametrize("token", ["base64", "<Script>", "php", "a\x01b", "del\x7f"])
    def test_forbidden_content_rejected(self, token: str) -> None:
        with pytest.raises(InvalidMaskTokenConfigError):
            MaskTokenValidator().validate(token)

    def test_non_string_rejected(self) -> None:
        with pytest.raises(InvalidMaskTokenConfigError):
            MaskTokenValidator().validate(None)  # type: ignore[arg-type]

    def test_custom_max_length(self) -> None:
        validator = MaskTokenValidator(max_length=5)
        assert validator.max_length == 5
        assert validator.validate("abcde") == "[ABCDE]"
        with pytest.raises(InvalidMaskTokenConfigError):
            validator.validate("abcdef")

    def test_custom_forbidden_pattern(self) -> None:
        validator = MaskTokenValidator(forbidden_pattern=r"secret")
        assert validator.validate("base64") == "[BASE64]"
        with pytest.raises(InvalidMaskTokenConfigError):
            validator.validate("top-secret")

    def test_invalid_forbidden_pattern(self) -> None:
        with pytest.raises(InvalidPatternConfigError):
            MaskTokenValidator(forbidden_pattern="(unclosed")

    def test_error_code_and_hierarchy(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            MaskTokenValidator().validate("")
        assert exc_info.value.code == "invalid_mask_token"
        assert exc_info.value.value == ""
