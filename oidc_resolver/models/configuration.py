# oidc_resolver/models/configuration.py
"""
OpenID Connect discovery metadata.
"""
from __future__ import annotations

import json
from typing import Iterable

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from oidc_resolver.exceptions import ConfigurationParseError
from oidc_resolver.keys.signing import X509SigningKey
from oidc_resolver.models.jwk import JsonWebKey, JsonWebKeySet

# Populated by the resolver, never read from the discovery document
_RESOLVED_FIELDS = ("signing_keys", "json_web_key_set")


class OpenIdConnectConfiguration(BaseModel):
    """
    Provider metadata as published at ``/.well-known/openid-configuration``.

    Every metadata member is optional; no consistency checks are made.
    Members not modelled here are preserved as extras.

    `signing_keys` and `json_web_key_set` start empty and are attached
    once by the resolver through `with_keys`.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="allow",
        arbitrary_types_allowed=True,
    )

    issuer: str | None = None
    authorization_endpoint: str | None = None
    token_endpoint: str | None = None
    userinfo_endpoint: str | None = None
    end_session_endpoint: str | None = None
    check_session_iframe: str | None = None
    registration_endpoint: str | None = None
    introspection_endpoint: str | None = None
    revocation_endpoint: str | None = None
    jwks_uri: str | None = None

    scopes_supported: list[str] = Field(default_factory=list)
    response_types_supported: list[str] = Field(default_factory=list)
    response_modes_supported: list[str] = Field(default_factory=list)
    grant_types_supported: list[str] = Field(default_factory=list)
    subject_types_supported: list[str] = Field(default_factory=list)
    id_token_signing_alg_values_supported: list[str] = Field(default_factory=list)
    token_endpoint_auth_methods_supported: list[str] = Field(default_factory=list)
    claims_supported: list[str] = Field(default_factory=list)

    @field_validator(
        "scopes_supported",
        "response_types_supported",
        "response_modes_supported",
        "grant_types_supported",
        "subject_types_supported",
        "id_token_signing_alg_values_supported",
        "token_endpoint_auth_methods_supported",
        "claims_supported",
        mode="before",
    )
    @classmethod
    def _null_as_empty(cls, value):
        return [] if value is None else value

    signing_keys: tuple[X509SigningKey, ...] = Field(default=(), exclude=True)
    json_web_key_set: JsonWebKeySet = Field(default_factory=JsonWebKeySet, exclude=True)

    @classmethod
    def from_json(cls, document: str) -> "OpenIdConnectConfiguration":
        try:
            payload = json.loads(document)
        except ValueError as exc:
            raise ConfigurationParseError(
                f"Discovery document is not valid JSON: {exc}"
            ) from exc

        if not isinstance(payload, dict):
            raise ConfigurationParseError("Discovery document must be a JSON object")

        for name in _RESOLVED_FIELDS:
            payload.pop(name, None)

        try:
            return cls.model_validate(payload)
        except ValidationError as exc:
            raise ConfigurationParseError(f"Invalid discovery document: {exc}") from exc

    def with_keys(
        self,
        signing_keys: Iterable[X509SigningKey],
        raw_keys: Iterable[JsonWebKey],
    ) -> "OpenIdConnectConfiguration":
        return self.model_copy(
            update={
                "signing_keys": tuple(signing_keys),
                "json_web_key_set": JsonWebKeySet(keys=tuple(raw_keys)),
            }
        )
