"""
hsjwt claims part.

A Part converts a claims record to and from the base64url text used in the
token, with JSON as the intermediate wire form. The claims type decides how
the record becomes JSON:

- classes implementing the Serializable protocol (to_json / from_json)
- pydantic models
- dataclasses
- plain dicts

Example:
    >>> part = Part(dict)
    >>> part.to_base64({"sub": "b@b.com"})
    'eyJzdWIiOiJiQGIuY29tIn0'
    >>> part.from_base64('eyJzdWIiOiJiQGIuY29tIn0')
    {'sub': 'b@b.com'}
"""

import dataclasses
import logging
import re
from typing import Any, Generic, Protocol, Type, TypeVar

import pydantic
from jwcrypto.common import base64url_decode, base64url_encode, json_decode, json_encode

from hsjwt.errors import Base64DecodeError, JsonDecodeError, JsonEncodeError, Utf8DecodeError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# base64url without padding: a length of 1 mod 4 can never be produced
_BASE64URL_RE = re.compile(r"[A-Za-z0-9_-]*")


class Serializable(Protocol):
    """
    Claims types that know how to turn themselves into JSON text and back.

    Example:
        >>> class Claims:
        ...     def __init__(self, sub):
        ...         self.sub = sub
        ...     def to_json(self):
        ...         return json.dumps({"sub": self.sub})
        ...     @classmethod
        ...     def from_json(cls, text):
        ...         return cls(**json.loads(text))
    """

    def to_json(self) -> str: ...

    @classmethod
    def from_json(cls: Type[T], text: str) -> T: ...


def b64_decode(encoded: str) -> bytes:
    """
    Strict base64url decoding.

    Rejects characters outside the url-safe alphabet (including padding)
    instead of skipping them.

    Raises:
        Base64DecodeError: If the text is not valid unpadded base64url.
    """
    if not isinstance(encoded, str) or not _BASE64URL_RE.fullmatch(encoded) or len(encoded) % 4 == 1:
        raise Base64DecodeError()
    try:
        return base64url_decode(encoded)
    except ValueError as e:
        raise Base64DecodeError(f"Invalid base64url segment: {e}") from e


def b64_encode(data: bytes) -> str:
    """Base64url encoding without padding."""
    return base64url_encode(data)


def _is_serializable(claims_type: type) -> bool:
    return callable(getattr(claims_type, "to_json", None)) and callable(
        getattr(claims_type, "from_json", None)
    )


class Part(Generic[T]):
    """
    Base64url codec for one claims type.

    Args:
        claims_type: The type claims are encoded from and decoded into.

    Raises:
        TypeError: If the claims type is not supported.
    """

    def __init__(self, claims_type: Type[T] = dict):
        if not isinstance(claims_type, type):
            raise TypeError(f"Claims type must be a class, got {claims_type!r}")

        if _is_serializable(claims_type):
            self._kind = "serializable"
        elif issubclass(claims_type, pydantic.BaseModel):
            self._kind = "pydantic"
        elif dataclasses.is_dataclass(claims_type):
            self._kind = "dataclass"
        elif issubclass(claims_type, dict):
            self._kind = "dict"
        else:
            raise TypeError(
                f"Unsupported claims type {claims_type.__name__}: use a dict, a dataclass, "
                "a pydantic model or a class with to_json/from_json"
            )

        self.claims_type = claims_type

    def to_base64(self, value: T) -> str:
        """
        Serialize claims and encode them as base64url.

        Raises:
            JsonEncodeError: If the claims cannot be serialized.
        """
        try:
            text = self._dump(value)
        except (TypeError, ValueError) as e:
            raise JsonEncodeError(f"Could not encode claims to JSON: {e}") from e

        return b64_encode(text.encode("utf-8"))

    def from_base64(self, encoded: str) -> T:
        """
        Decode a base64url claims segment into the claims type.

        Raises:
            Base64DecodeError: If the segment is not valid base64url.
            Utf8DecodeError: If the decoded bytes are not UTF-8.
            JsonDecodeError: If the text is not JSON or does not fit the claims type.
        """
        raw = b64_decode(encoded)

        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise Utf8DecodeError(f"Segment is not valid UTF-8: {e}") from e

        try:
            return self._load(text)
        except JsonDecodeError:
            raise
        except (ValueError, TypeError, KeyError) as e:
            logger.debug(f"Claims did not decode into {self.claims_type.__name__}: {e}")
            raise JsonDecodeError(f"Could not decode claims from JSON: {e}") from e

    def _dump(self, value: Any) -> str:
        if self._kind == "serializable":
            return value.to_json()
        if self._kind == "pydantic":
            return json_encode(value.model_dump(mode="json"))
        if self._kind == "dataclass":
            return json_encode(dataclasses.asdict(value))
        return json_encode(value)

    def _load(self, text: str) -> T:
        if self._kind == "serializable":
            return self.claims_type.from_json(text)

        data = json_decode(text)

        if self._kind == "pydantic":
            # ValidationError is a ValueError
            return self.claims_type.model_validate(data)

        if not isinstance(data, dict):
            raise JsonDecodeError(f"Expected a JSON object, got {type(data).__name__}")

        if self._kind == "dataclass":
            return self.claims_type(**data)
        if self.claims_type is dict:
            return data
        return self.claims_type(data)
