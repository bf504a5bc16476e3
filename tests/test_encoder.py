"""Tests for canonical slug encoding."""

import pytest
from emojiurl.encoder import canonicalize, decode_key, is_already_canonical
from emojiurl.errors import ValidationError


class TestCanonicalize:
    """Test slug -> key encoding."""
    
    def test_deterministic(self):
        """Same slug always yields the same key."""
        assert canonicalize("🐱🐶🐸") == canonicalize("🐱🐶🐸")
    
    def test_ascii_output(self):
        """Keys are ASCII regardless of input script."""
        for raw in ["🐱🐶🐸", "👨‍👩‍👧", "❤️", "日本語", "émoji", "plain"]:
            key = canonicalize(raw)
            assert key
            assert key.isascii()
    
    def test_distinct_slugs_distinct_keys(self):
        """Order and content of glyphs matter."""
        assert canonicalize("🐱🐶") != canonicalize("🐶🐱")
        assert canonicalize("🐱") != canonicalize("🐱🐱")
    
    def test_ascii_slug(self):
        """Pure ASCII slugs keep their text with a trailing delimiter."""
        assert canonicalize("abc") == "abc-"
    
    def test_strips_whitespace(self):
        """Surrounding whitespace does not change the key."""
        assert canonicalize("  🐱🐶🐸\n") == canonicalize("🐱🐶🐸")
    
    def test_nfc_normalization(self):
        """Composed and decomposed forms share a key."""
        assert canonicalize("e\u0301") == canonicalize("\u00e9")
    
    def test_blank(self):
        """Blank slugs encode to an empty key."""
        assert canonicalize("") == ""
        assert canonicalize("   ") == ""


class TestDecodeKey:
    """Test key -> slug decoding."""
    
    def test_round_trip(self):
        """Decoding a key gives back the slug."""
        for raw in ["🐱🐶🐸", "abc", "a🐱b"]:
            assert decode_key(canonicalize(raw)) == raw
    
    def test_non_ascii_key(self):
        """Keys must be ASCII."""
        with pytest.raises(ValidationError):
            decode_key("🐱")
    
    def test_invalid_key(self):
        """Malformed punycode is rejected."""
        with pytest.raises(ValidationError):
            decode_key("a!")


class TestIsAlreadyCanonical:
    """Test detection of encoded keys passed as slugs."""
    
    def test_encoded_emoji_detected(self):
        """A key for an emoji slug is flagged."""
        assert is_already_canonical(canonicalize("🐱🐶🐸"))
        assert is_already_canonical(canonicalize("👍"))
    
    def test_raw_emoji_not_flagged(self):
        """Real emoji slugs are not flagged."""
        assert not is_already_canonical("🐱🐶🐸")
    
    def test_ascii_key_not_flagged(self):
        """A key that decodes to plain ASCII is not an encoded emoji slug."""
        assert not is_already_canonical("abc-")
    
    def test_blank_not_flagged(self):
        """Blank input is not canonical."""
        assert not is_already_canonical("")
        assert not is_already_canonical("  ")
    
    def test_invalid_punycode_not_flagged(self):
        """ASCII that isn't valid punycode is not canonical."""
        assert not is_already_canonical("a!")
    
    def test_surrounding_whitespace(self):
        """Whitespace around a pasted key is ignored."""
        assert is_already_canonical(f" {canonicalize('🐱🐶🐸')} ")
    
    def test_ascii_word_not_flagged(self):
        """Words that decode to non-emoji marks are ordinary slugs."""
        # "job" decodes to U+073C, a Syriac combining mark
        assert decode_key("job") == "\u073c"
        assert not is_already_canonical("job")
    
    def test_marks_only_not_flagged(self):
        """A key for non-pictographic marks alone is not an emoji key."""
        assert not is_already_canonical(canonicalize("\u200d"))
        assert not is_already_canonical(canonicalize("\u2800"))
    
    def test_encoded_dingbat_detected(self):
        """Emoji outside the generator catalog are recognised too."""
        assert is_already_canonical(canonicalize("\u2764\ufe0f"))
