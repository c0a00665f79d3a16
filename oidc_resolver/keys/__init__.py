from oidc_resolver.keys.signing import X509SigningKey
from oidc_resolver.keys.selection import (
    extract_signing_keys,
    is_signature_key,
    to_signing_key,
)

__all__ = [
    "X509SigningKey",
    "extract_signing_keys",
    "is_signature_key",
    "to_signing_key",
]
