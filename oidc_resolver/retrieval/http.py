# oidc_resolver/retrieval/http.py
"""
HTTP and filesystem document retrievers.
"""
from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from urllib.parse import unquote, urlparse

import httpx

from oidc_resolver.core.config import settings
from oidc_resolver.exceptions import RetrievalError
from oidc_resolver.retrieval.base import DocumentRetriever

logger = logging.getLogger(__name__)


async def _get_text(client: httpx.AsyncClient, address: str) -> str:
    try:
        resp = await client.get(address)
        resp.raise_for_status()
    except httpx.HTTPStatusError as ex:
        logger.warning(
            "Document request failed address=%s status=%s",
            address,
            ex.response.status_code,
        )
        raise RetrievalError(
            address,
            f"Unexpected status {ex.response.status_code}",
            status_code=ex.response.status_code,
        ) from ex
    except httpx.HTTPError as ex:
        logger.warning("Document request failed address=%s error=%s", address, ex)
        raise RetrievalError(address, f"Transport error: {ex}") from ex

    return resp.text


class HttpDocumentRetriever(DocumentRetriever):
    """Retriever backed by a caller-owned ``httpx.AsyncClient``.

    The client's lifecycle (pooling, closing) stays with the caller.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        *,
        require_https: bool | None = None,
    ) -> None:
        self._client = client
        self._require_https = (
            settings.require_https if require_https is None else require_https
        )

    async def _fetch(self, address: str) -> str:
        if self._require_https and urlparse(address).scheme != "https":
            raise RetrievalError(address, "HTTPS is required")

        logger.debug("Fetching %s", address)
        return await _get_text(self._client, address)


class GenericDocumentRetriever(DocumentRetriever):
    """Retriever using a default transport.

    http(s) addresses are fetched with a short-lived client; anything else
    is treated as a local path or ``file://`` URL.
    """

    def __init__(self, timeout: float | None = None) -> None:
        self._timeout = settings.http_timeout if timeout is None else timeout

    async def _fetch(self, address: str) -> str:
        parsed = urlparse(address)

        if parsed.scheme in ("http", "https"):
            logger.debug("Fetching %s", address)
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                return await _get_text(client, address)

        path = Path(unquote(parsed.path)) if parsed.scheme == "file" else Path(address)
        logger.debug("Reading %s", path)
        try:
            return await asyncio.to_thread(path.read_text, encoding="utf-8")
        except (OSError, UnicodeDecodeError) as ex:
            raise RetrievalError(address, f"Cannot read file: {ex}") from ex
