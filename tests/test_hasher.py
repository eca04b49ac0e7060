"""Tests for short code hashing."""

import re

from hashlink.hasher import PERTURB_ALPHABET, hash_url, is_valid_hash, perturb


class TestHashURL:
    """Test the CRC-32 hasher."""

    def test_known_values(self):
        """Matches the standard CRC-32 check values."""
        assert hash_url("123456789") == "cbf43926"
        assert hash_url("The quick brown fox jumps over the lazy dog") == "414fa339"
        assert hash_url("hello") == "3610a686"

    def test_not_zero_padded(self):
        assert hash_url("") == "0"

    def test_deterministic(self):
        url = "https://example.com/very/long/url"
        assert hash_url(url) == hash_url(url)

    def test_format(self):
        for value in ["https://example.com/a", "https://example.com/b", "", "ünïcode ✓", "x" * 5000]:
            code = hash_url(value)
            assert is_valid_hash(code)
            assert 1 <= len(code) <= 8

    def test_lone_surrogate_hashes_as_replacement_character(self):
        code = hash_url("https://example.com/\ud800")

        assert code == hash_url("https://example.com/\ufffd")
        assert is_valid_hash(code)

    def test_distinct_inputs_usually_differ(self):
        assert hash_url("https://example.com/a") != hash_url("https://example.com/b")


class TestPerturb:
    """Test hash input perturbation."""

    def test_alphabet(self):
        assert len(PERTURB_ALPHABET) == 66
        assert set("-_.~") <= set(PERTURB_ALPHABET)

    def test_appends_one_character(self):
        url = "https://example.com/very/long/url"
        pattern = re.compile(f"^{re.escape(url)}[A-Za-z0-9\\-_.~]$")
        for _ in range(50):
            assert pattern.match(perturb(url))


class TestIsValidHash:
    def test_valid(self):
        assert is_valid_hash("abc123")
        assert is_valid_hash("0")
        assert is_valid_hash("ffffffff")

    def test_invalid(self):
        assert not is_valid_hash("")
        assert not is_valid_hash("ABC123")
        assert not is_valid_hash("123456789")
        assert not is_valid_hash("xyz")
