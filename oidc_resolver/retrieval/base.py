# oidc_resolver/retrieval/base.py
from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod

from oidc_resolver.exceptions import ArgumentError, OperationCancelledError

logger = logging.getLogger(__name__)


class DocumentRetriever(ABC):
    """
    Fetches the raw text of a document by address.

    Callers go through `get_document`, which validates the address and
    honours an optional cancellation event. Implementations only provide
    `_fetch`.
    """

    async def get_document(
        self,
        address: str,
        cancel: asyncio.Event | None = None,
    ) -> str:
        if not address or not address.strip():
            raise ArgumentError("address")

        if cancel is None:
            return await self._fetch(address)

        if cancel.is_set():
            raise OperationCancelledError(f"Cancelled before fetching {address}")

        fetch = asyncio.ensure_future(self._fetch(address))
        waiter = asyncio.ensure_future(cancel.wait())
        try:
            await asyncio.wait(
                {fetch, waiter},
                return_when=asyncio.FIRST_COMPLETED,
            )
        finally:
            waiter.cancel()
            if not fetch.done():
                fetch.cancel()
                await asyncio.gather(fetch, return_exceptions=True)

        if fetch.cancelled():
            logger.debug("Fetch of %s cancelled by caller", address)
            raise OperationCancelledError(f"Cancelled while fetching {address}")

        return fetch.result()

    @abstractmethod
    async def _fetch(self, address: str) -> str:
        """Return the document content. Raise RetrievalError on failure."""
        ...
