"""
Unit tests for HMAC signing and constant-time verification.
"""

import pytest

from hsjwt import Algorithm, constant_time_compare, sign, verify

HELLO_WORLD_HS256 = "c0zGLzKEFWj0VxWuufTXiRMk5tlI5MbGDAYhzaxIYjo"


class CountingBytes(bytes):
    """bytes that records how many items were read through iteration."""

    reads = 0

    def __iter__(self):
        for item in super().__iter__():
            type(self).reads += 1
            yield item


class TestSign:
    """Tests for sign()."""

    def test_sign_hs256(self):
        """sign() matches the known HS256 vector."""
        assert sign("hello world", b"secret", Algorithm.HS256) == HELLO_WORLD_HS256

    def test_str_secret_is_utf8(self):
        """A str secret signs the same as its UTF-8 bytes."""
        assert sign("hello world", "secret", Algorithm.HS256) == HELLO_WORLD_HS256

    @pytest.mark.parametrize(
        "algorithm,length",
        [(Algorithm.HS256, 43), (Algorithm.HS384, 64), (Algorithm.HS512, 86)],
    )
    def test_signature_length(self, algorithm, length):
        """Signatures are unpadded base64url of the full digest."""
        signature = sign("payload", b"secret", algorithm)
        assert len(signature) == length
        assert "=" not in signature

    def test_deterministic(self):
        """The same input always signs the same way."""
        assert sign("payload", b"k", Algorithm.HS512) == sign("payload", b"k", Algorithm.HS512)

    @pytest.mark.parametrize("secret", [bytearray(b"secret"), memoryview(b"secret")])
    def test_bytes_like_secret(self, secret):
        assert sign("hello world", secret, Algorithm.HS256) == HELLO_WORLD_HS256

    @pytest.mark.parametrize("secret", [5, None, ["s"]])
    def test_rejects_non_bytes_secret(self, secret):
        """Secrets that are not bytes or str raise TypeError."""
        with pytest.raises(TypeError, match="Secret must be bytes or str"):
            sign("hello world", secret, Algorithm.HS256)

    def test_depends_on_secret_and_algorithm(self):
        """Changing the secret or the algorithm changes the signature."""
        base = sign("payload", b"k1", Algorithm.HS256)
        assert sign("payload", b"k2", Algorithm.HS256) != base
        assert sign("payload", b"k1", Algorithm.HS384) != base


class TestVerify:
    """Tests for verify()."""

    def test_verify_hs256(self):
        """verify() accepts the known HS256 vector."""
        assert verify(HELLO_WORLD_HS256, "hello world", b"secret", Algorithm.HS256) is True

    def test_verify_wrong_secret(self):
        """verify() returns False for a different secret."""
        assert verify(HELLO_WORLD_HS256, "hello world", b"other", Algorithm.HS256) is False

    def test_verify_wrong_algorithm(self):
        """verify() returns False when recomputed with another hash."""
        assert verify(HELLO_WORLD_HS256, "hello world", b"secret", Algorithm.HS384) is False

    def test_verify_truncated(self):
        """verify() returns False for a truncated signature."""
        assert verify(HELLO_WORLD_HS256[:-1], "hello world", b"secret", Algorithm.HS256) is False

    @pytest.mark.parametrize("algorithm", [Algorithm.HS256, Algorithm.HS384, Algorithm.HS512])
    def test_verify_length_follows_digest_size(self, algorithm):
        """Signatures of the wrong size for the algorithm are rejected."""
        signature = sign("payload", b"k", algorithm)
        assert verify(signature, "payload", b"k", algorithm) is True
        assert verify(signature + "A", "payload", b"k", algorithm) is False
        assert verify(signature[:-1], "payload", b"k", algorithm) is False

    def test_verify_non_ascii_signature(self):
        """Signatures that are not ASCII never match."""
        forged = HELLO_WORLD_HS256[:-1] + "\udcff"
        assert verify(forged, "hello world", b"secret", Algorithm.HS256) is False


class TestConstantTimeCompare:
    """Tests for constant_time_compare()."""

    def test_equal(self):
        assert constant_time_compare(b"abcdef", b"abcdef") is True

    def test_empty(self):
        assert constant_time_compare(b"", b"") is True

    def test_length_mismatch(self):
        assert constant_time_compare(b"abc", b"abcd") is False

    @pytest.mark.parametrize("position", [0, 1, 20, 42])
    def test_scans_full_length(self, position):
        """Every byte is read no matter where the first difference is."""
        expected = HELLO_WORLD_HS256.encode()
        tampered = bytearray(expected)
        tampered[position] ^= 0x01

        CountingBytes.reads = 0
        assert constant_time_compare(CountingBytes(bytes(tampered)), expected) is False
        assert CountingBytes.reads == len(expected)
