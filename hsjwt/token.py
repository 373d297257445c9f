"""
hsjwt tokens - encoding and decoding of compact tokens.

A token is three base64url segments joined with dots:

    header.claims.signature

where the signature is the HMAC of "header.claims". Decoding always uses the
algorithm the caller asks for, never the one the token claims to use.
"""

import logging
from typing import Any, Tuple, Type, TypeVar

from hsjwt.algorithms import Algorithm
from hsjwt.errors import InvalidSignature, InvalidToken, WrongAlgorithmHeader
from hsjwt.header import Header
from hsjwt.part import Part
from hsjwt.signing import Secret, sign, verify

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _expect_two(text: str) -> Tuple[str, str]:
    """Split on the last dot into two non-empty halves."""
    parts = text.rsplit(".", 1)
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise InvalidToken("Token must have three non-empty segments")
    return parts[0], parts[1]


def encode(claims: Any, secret: Secret, algorithm: Algorithm = Algorithm.HS256) -> str:
    """
    Encode the claims passed and sign the payload using the algorithm and the secret.

    Args:
        claims: A dict, dataclass, pydantic model or Serializable instance.
        secret: Shared secret (bytes, or str which is UTF-8 encoded).
        algorithm: Signing algorithm (default: HS256).

    Returns:
        The compact token string.

    Raises:
        JsonEncodeError: If the claims cannot be serialized.
        TypeError: If the claims type is not supported.
    """
    encoded_header = Header(algorithm).to_base64()
    encoded_claims = Part(type(claims)).to_base64(claims)
    payload = f"{encoded_header}.{encoded_claims}"
    signature = sign(payload, secret, algorithm)

    return f"{payload}.{signature}"


def decode(
    token: str,
    secret: Secret,
    algorithm: Algorithm = Algorithm.HS256,
    claims_type: Type[T] = dict,
) -> T:
    """
    Decode a token into a claims record.

    The signature is checked before the header or claims are decoded.

    Args:
        token: The compact token string.
        secret: Shared secret the token was signed with.
        algorithm: The algorithm the token must be signed with.
        claims_type: The type to decode the claims into (default: dict).

    Returns:
        The decoded claims.

    Raises:
        InvalidToken: If the token is not three non-empty segments or the
            header is not recognized.
        InvalidSignature: If the signature does not match.
        WrongAlgorithmHeader: If the header names a different algorithm.
        Base64DecodeError, Utf8DecodeError, JsonDecodeError: If the claims
            segment cannot be decoded into claims_type.
    """
    if not isinstance(token, str):
        raise InvalidToken("Token must be a string")
    if not token.isascii():
        raise InvalidToken("Token must be ASCII")

    payload, signature = _expect_two(token)
    encoded_header, encoded_claims = _expect_two(payload)
    if "." in encoded_header:
        raise InvalidToken("Token must have three non-empty segments")

    if not verify(signature, payload, secret, algorithm):
        declared = Algorithm.from_header(encoded_header)
        if declared is not None and declared is not algorithm:
            logger.debug(f"Token header declares {declared.value}, expected {algorithm.value}")
            raise WrongAlgorithmHeader()
        logger.debug("Token signature mismatch")
        raise InvalidSignature()

    header = Header.from_base64(encoded_header)
    if header.alg is not algorithm:
        logger.debug(f"Token header declares {header.alg.value}, expected {algorithm.value}")
        raise WrongAlgorithmHeader()

    return Part(claims_type).from_base64(encoded_claims)
