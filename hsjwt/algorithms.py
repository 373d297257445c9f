"""
hsjwt algorithm registry.

The supported algorithms form a closed set. Each one is bound to a hash
function and to the base64url form of its header, which never changes:

    HS256  {"typ":"JWT","alg":"HS256"}  eyJ0eXAiOiJKV1QiLCJhbGciOiJIUzI1NiJ9
    HS384  {"typ":"JWT","alg":"HS384"}  eyJ0eXAiOiJKV1QiLCJhbGciOiJIUzM4NCJ9
    HS512  {"typ":"JWT","alg":"HS512"}  eyJ0eXAiOiJKV1QiLCJhbGciOiJIUzUxMiJ9
"""

from enum import Enum
from typing import Dict, Optional

from cryptography.hazmat.primitives import hashes


class Algorithm(Enum):
    """The algorithms supported for signing and verifying."""

    HS256 = "HS256"
    HS384 = "HS384"
    HS512 = "HS512"

    @property
    def hash_algorithm(self) -> hashes.HashAlgorithm:
        """A fresh hash instance for building an HMAC."""
        return _HASHES[self]()

    @property
    def digest_size(self) -> int:
        """Size in bytes of the raw HMAC output."""
        return _HASHES[self].digest_size

    @property
    def header_b64(self) -> str:
        """Base64url encoding of the canonical header JSON."""
        return _HEADERS[self]

    @classmethod
    def from_name(cls, name: str) -> "Algorithm":
        """
        Parse an algorithm name such as "HS256" (case-insensitive).

        Raises:
            ValueError: If the name is not one of the supported algorithms.
        """
        try:
            return cls(name.strip().upper())
        except (AttributeError, ValueError):
            supported = ", ".join(member.value for member in cls)
            raise ValueError(
                f"Unsupported algorithm {name!r} (expected one of: {supported})"
            ) from None

    @classmethod
    def from_header(cls, encoded: str) -> Optional["Algorithm"]:
        """Map a header literal back to its algorithm, or None if unknown."""
        return _HEADER_LOOKUP.get(encoded)


_HASHES = {
    Algorithm.HS256: hashes.SHA256,
    Algorithm.HS384: hashes.SHA384,
    Algorithm.HS512: hashes.SHA512,
}

_HEADERS: Dict[Algorithm, str] = {
    Algorithm.HS256: "eyJ0eXAiOiJKV1QiLCJhbGciOiJIUzI1NiJ9",
    Algorithm.HS384: "eyJ0eXAiOiJKV1QiLCJhbGciOiJIUzM4NCJ9",
    Algorithm.HS512: "eyJ0eXAiOiJKV1QiLCJhbGciOiJIUzUxMiJ9",
}

_HEADER_LOOKUP: Dict[str, Algorithm] = {encoded: alg for alg, encoded in _HEADERS.items()}
