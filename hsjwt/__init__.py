"""
hsjwt - Create and parse HMAC signed JSON Web Tokens.

Tokens carry an application-defined claims record and are signed with a shared
secret using HS256, HS384 or HS512. Anyone holding the secret can verify a
token and recover its claims without a lookup.

Example:
    >>> import hsjwt
    >>> token = hsjwt.encode({"sub": "b@b.com"}, b"secret", hsjwt.Algorithm.HS256)
    >>> hsjwt.decode(token, b"secret", hsjwt.Algorithm.HS256)
    {'sub': 'b@b.com'}
"""

__version__ = "1.0.0"

from .algorithms import Algorithm
from .header import Header
from .part import Part, Serializable
from .signing import sign, verify, constant_time_compare
from .token import encode, decode
from .errors import (
    JWTError,
    InvalidToken,
    InvalidSignature,
    WrongAlgorithmHeader,
    Base64DecodeError,
    Utf8DecodeError,
    JsonDecodeError,
    JsonEncodeError,
)

__all__ = [
    "__version__",
    # Core
    "encode",
    "decode",
    "sign",
    "verify",
    "constant_time_compare",
    # Types
    "Algorithm",
    "Header",
    "Part",
    "Serializable",
    # Errors
    "JWTError",
    "InvalidToken",
    "InvalidSignature",
    "WrongAlgorithmHeader",
    "Base64DecodeError",
    "Utf8DecodeError",
    "JsonDecodeError",
    "JsonEncodeError",
]
