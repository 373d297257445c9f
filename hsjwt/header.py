"""
hsjwt header part.

The header is never serialized through the JSON codec: each algorithm has
exactly one valid encoding, so both directions are a table lookup. Anything
that is not one of those exact encodings is rejected, which keeps a token
from smuggling in an algorithm outside the supported set.
"""

import logging
from dataclasses import dataclass, field

from hsjwt.algorithms import Algorithm
from hsjwt.errors import InvalidToken

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Header:
    """
    A basic JWT header. The typ is always "JWT" and alg is filled in from
    the algorithm the token is signed with.

    Example:
        >>> Header(Algorithm.HS256).to_base64()
        'eyJ0eXAiOiJKV1QiLCJhbGciOiJIUzI1NiJ9'
    """

    alg: Algorithm
    typ: str = field(default="JWT", init=False)

    def to_base64(self) -> str:
        return self.alg.header_b64

    @classmethod
    def from_base64(cls, encoded: str) -> "Header":
        """
        Parse a base64url header segment.

        Raises:
            InvalidToken: If the segment is not a known header encoding.
        """
        algorithm = Algorithm.from_header(encoded)
        if algorithm is None:
            logger.debug("Rejected unknown header segment")
            raise InvalidToken("Unrecognized token header")
        return cls(algorithm)
