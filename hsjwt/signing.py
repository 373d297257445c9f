"""
hsjwt signing - HMAC signatures over the token's signed payload.

The signed payload is the "header.claims" text; its signature is the
base64url encoding (no padding) of the raw HMAC digest.
"""

from typing import Union

from cryptography.hazmat.primitives import hmac

from hsjwt.algorithms import Algorithm
from hsjwt.part import b64_encode

Secret = Union[bytes, str]


def _secret_bytes(secret: Secret) -> bytes:
    if isinstance(secret, str):
        return secret.encode("utf-8")
    if isinstance(secret, (bytes, bytearray, memoryview)):
        return bytes(secret)
    raise TypeError(f"Secret must be bytes or str, got {type(secret).__name__}")


def sign(data: str, secret: Secret, algorithm: Algorithm) -> str:
    """
    Sign the payload of a token with the given algorithm.

    Args:
        data: The signed payload ("header.claims").
        secret: Shared secret used as the HMAC key.
        algorithm: Determines the hash function.

    Returns:
        The base64url encoded HMAC of the payload.

    Example:
        >>> sign("hello world", b"secret", Algorithm.HS256)
        'c0zGLzKEFWj0VxWuufTXiRMk5tlI5MbGDAYhzaxIYjo'
    """
    mac = hmac.HMAC(_secret_bytes(secret), algorithm.hash_algorithm)
    mac.update(data.encode("utf-8"))
    return b64_encode(mac.finalize())


def constant_time_compare(left: bytes, right: bytes) -> bool:
    """
    Compare two byte strings without stopping at the first difference.

    Every byte pair is XORed into an accumulator, so the time taken only
    depends on the length of the inputs. Lengths are not secret: signatures
    for a given algorithm always have the same size.
    """
    if len(left) != len(right):
        return False

    result = 0
    for x, y in zip(left, right):
        result |= x ^ y
    return result == 0


def _encoded_length(digest_size: int) -> int:
    # unpadded base64 length of a digest
    return -(-digest_size * 4 // 3)


def verify(signature: str, data: str, secret: Secret, algorithm: Algorithm) -> bool:
    """Compare the signature given with a re-computed signature."""
    if not signature.isascii() or len(signature) != _encoded_length(algorithm.digest_size):
        return False
    expected = sign(data, secret, algorithm)
    return constant_time_compare(signature.encode("utf-8"), expected.encode("utf-8"))
