"""
Shared pytest fixtures for hsjwt tests.
"""

import json
from dataclasses import dataclass

import pydantic
import pytest


@dataclass
class DataclassClaims:
    sub: str
    company: str


class ModelClaims(pydantic.BaseModel):
    sub: str
    company: str
    admin: bool = False


class CustomClaims:
    """Claims type implementing to_json / from_json itself."""

    def __init__(self, sub: str, company: str):
        self.sub = sub
        self.company = company

    def to_json(self) -> str:
        return json.dumps({"sub": self.sub, "company": self.company})

    @classmethod
    def from_json(cls, text: str) -> "CustomClaims":
        return cls(**json.loads(text))

    def __eq__(self, other):
        return (
            isinstance(other, CustomClaims)
            and self.sub == other.sub
            and self.company == other.company
        )


@pytest.fixture
def secret() -> bytes:
    """Shared secret used for signing in tests."""
    return b"secret"


@pytest.fixture
def sample_claims() -> dict:
    """Claims from the canonical end-to-end scenario."""
    return {"sub": "b@b.com", "company": "ACME"}


@pytest.fixture
def dataclass_claims() -> DataclassClaims:
    return DataclassClaims(sub="b@b.com", company="ACME")


@pytest.fixture
def model_claims() -> ModelClaims:
    return ModelClaims(sub="b@b.com", company="ACME", admin=True)


@pytest.fixture
def custom_claims() -> CustomClaims:
    return CustomClaims(sub="b@b.com", company="ACME")
