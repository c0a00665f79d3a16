from oidc_resolver.models.jwk import JsonWebKey, JsonWebKeySet, JsonWebKeyUse
from oidc_resolver.models.configuration import OpenIdConnectConfiguration

__all__ = [
    "JsonWebKey",
    "JsonWebKeySet",
    "JsonWebKeyUse",
    "OpenIdConnectConfiguration",
]
