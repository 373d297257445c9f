"""
hsjwt errors.

Every failure raised by encode/decode is a subclass of JWTError, so callers
can catch one type or branch on the specific variant.
"""


class JWTError(Exception):
    """Base exception for token errors."""

    pass


class InvalidToken(JWTError):
    """Raised when a token is not three segments or carries an unknown header."""

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message)


class InvalidSignature(JWTError):
    """Raised when the recomputed signature does not match the token's."""

    def __init__(self, message: str = "Invalid signature"):
        super().__init__(message)


class WrongAlgorithmHeader(JWTError):
    """Raised when the header names a different algorithm than the one requested."""

    def __init__(self, message: str = "Wrong algorithm header"):
        super().__init__(message)


# =============================================================================
# Codec errors
# =============================================================================


class Base64DecodeError(JWTError):
    def __init__(self, message: str = "Invalid base64url segment"):
        super().__init__(message)


class Utf8DecodeError(JWTError):
    def __init__(self, message: str = "Segment is not valid UTF-8"):
        super().__init__(message)


class JsonDecodeError(JWTError):
    def __init__(self, message: str = "Could not decode claims from JSON"):
        super().__init__(message)


class JsonEncodeError(JWTError):
    def __init__(self, message: str = "Could not encode claims to JSON"):
        super().__init__(message)
