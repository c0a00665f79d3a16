# oidc_resolver/resolver.py
"""
Resolution of an OpenID Connect provider's configuration.

Fetches the discovery document, then the JWKS it points to, and attaches
the certificate-backed signing keys to the returned configuration.
"""
from __future__ import annotations

import asyncio
import logging

import httpx

from oidc_resolver.core.config import settings
from oidc_resolver.exceptions import ArgumentError
from oidc_resolver.keys.selection import extract_signing_keys
from oidc_resolver.models.configuration import OpenIdConnectConfiguration
from oidc_resolver.models.jwk import JsonWebKeySet
from oidc_resolver.retrieval.base import DocumentRetriever
from oidc_resolver.retrieval.http import GenericDocumentRetriever, HttpDocumentRetriever

logger = logging.getLogger(__name__)


async def get_configuration(
    retriever: DocumentRetriever,
    address: str,
    cancel: asyncio.Event | None = None,
    *,
    lenient: bool | None = None,
) -> OpenIdConnectConfiguration:
    """
    Resolve the configuration published at `address`.

    The key set is fetched only when the discovery document names a
    ``jwks_uri``. Both fetches share `retriever` and `cancel`.

    Args:
        retriever: Document source for both fetches.
        address: Discovery document address.
        cancel: Optional event; setting it aborts the pending fetch.
        lenient: Skip keys with undecodable certificates instead of
            failing. Defaults to ``settings.lenient_certificates``.

    Raises:
        ArgumentError: `retriever` is None or `address` is blank
        RetrievalError: either fetch failed
        OperationCancelledError: `cancel` was set
        ConfigurationParseError: malformed discovery document
        KeySetParseError: malformed key set
        CertificateDecodingError: bad certificate bytes (strict mode only)
    """
    if retriever is None:
        raise ArgumentError("retriever")
    if not address or not address.strip():
        raise ArgumentError("address")

    if lenient is None:
        lenient = settings.lenient_certificates

    document = await retriever.get_document(address, cancel)
    config = OpenIdConnectConfiguration.from_json(document)

    if not config.jwks_uri:
        logger.info(
            "Resolved configuration issuer=%s without jwks_uri",
            config.issuer,
        )
        return config

    document = await retriever.get_document(config.jwks_uri, cancel)
    key_set = JsonWebKeySet.from_json(document)

    signing_keys, raw_keys = extract_signing_keys(key_set, lenient=lenient)

    logger.info(
        "Resolved configuration issuer=%s signing_keys=%d keys=%d",
        config.issuer,
        len(signing_keys),
        len(raw_keys),
    )
    return config.with_keys(signing_keys, raw_keys)


async def get_configuration_from_address(
    address: str,
    cancel: asyncio.Event | None = None,
) -> OpenIdConnectConfiguration:
    return await get_configuration(GenericDocumentRetriever(), address, cancel)


async def get_configuration_with_client(
    address: str,
    client: httpx.AsyncClient,
    cancel: asyncio.Event | None = None,
) -> OpenIdConnectConfiguration:
    return await get_configuration(HttpDocumentRetriever(client), address, cancel)


class OpenIdConnectConfigurationRetriever:
    """`ConfigurationRetriever` adapter over `get_configuration`."""

    def __init__(self, *, lenient: bool | None = None) -> None:
        self._lenient = lenient

    async def get_configuration(
        self,
        retriever: DocumentRetriever,
        address: str,
        cancel: asyncio.Event | None = None,
    ) -> OpenIdConnectConfiguration:
        return await get_configuration(retriever, address, cancel, lenient=self._lenient)
