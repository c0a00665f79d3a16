# oidc_resolver/models/jwk.py
from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from oidc_resolver.exceptions import KeySetParseError


class JsonWebKeyUse:
    SIG = "sig"
    ENC = "enc"


class JsonWebKey(BaseModel):
    """
    One key record of a JWKS. Unknown members are kept as extras.

    Only `use` and `x5c` drive key selection and are type-checked; the
    remaining members are carried through as published.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    use: str | None = None
    x5c: tuple[str, ...] = Field(
        default=(),
        description="Base64 (not base64url) DER certificates, leaf first",
    )

    kty: Any = None
    kid: Any = None
    alg: Any = None
    key_ops: Any = None
    x5t: Any = None
    x5u: Any = None
    n: Any = None
    e: Any = None


class JsonWebKeySet(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    keys: tuple[JsonWebKey, ...] = ()

    @classmethod
    def from_json(cls, document: str) -> "JsonWebKeySet":
        try:
            payload = json.loads(document)
        except ValueError as exc:
            raise KeySetParseError(f"Key set is not valid JSON: {exc}") from exc

        if not isinstance(payload, dict):
            raise KeySetParseError("Key set must be a JSON object")
        if "keys" not in payload:
            raise KeySetParseError("Key set is missing the 'keys' member")

        try:
            return cls.model_validate(payload)
        except ValidationError as exc:
            raise KeySetParseError(f"Invalid key set: {exc}") from exc
