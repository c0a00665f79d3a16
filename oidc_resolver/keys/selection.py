# oidc_resolver/keys/selection.py
"""
Selection of signing keys from a published JWKS.
"""
from __future__ import annotations

import logging

from oidc_resolver.exceptions import CertificateDecodingError
from oidc_resolver.keys.signing import X509SigningKey
from oidc_resolver.models.jwk import JsonWebKey, JsonWebKeySet, JsonWebKeyUse

logger = logging.getLogger(__name__)


def is_signature_key(jwk: JsonWebKey) -> bool:
    """True when `use` is absent/blank or exactly ``"sig"`` (case-sensitive)."""
    if jwk.use is None or not jwk.use.strip():
        return True
    return jwk.use == JsonWebKeyUse.SIG


def to_signing_key(jwk: JsonWebKey, *, lenient: bool = False) -> X509SigningKey | None:
    """
    Convert a JWK into a signing key, or return None when it does not qualify.

    Only keys carrying exactly one certificate are converted: the leaf is
    used as-is and intermediates are never assembled into a chain.

    Raises:
        CertificateDecodingError: certificate bytes are invalid and
            `lenient` is False
    """
    if not is_signature_key(jwk):
        logger.debug("Skipping key kid=%s use=%s", jwk.kid, jwk.use)
        return None

    if len(jwk.x5c) != 1:
        logger.debug("Skipping key kid=%s with %d x5c entries", jwk.kid, len(jwk.x5c))
        return None

    try:
        return X509SigningKey.from_base64_der(jwk.x5c[0])
    except CertificateDecodingError as exc:
        if not lenient:
            raise
        logger.warning("Skipping key kid=%s with undecodable certificate: %s", jwk.kid, exc)
        return None


def extract_signing_keys(
    key_set: JsonWebKeySet,
    *,
    lenient: bool = False,
) -> tuple[list[X509SigningKey], list[JsonWebKey]]:
    """
    Walk the key set in document order.

    Returns:
        (signing_keys, raw_keys) where raw_keys holds every entry,
        converted or not.
    """
    signing_keys: list[X509SigningKey] = []
    raw_keys: list[JsonWebKey] = []

    for jwk in key_set.keys:
        signing_key = to_signing_key(jwk, lenient=lenient)
        if signing_key is not None:
            signing_keys.append(signing_key)
        raw_keys.append(jwk)

    return signing_keys, raw_keys
