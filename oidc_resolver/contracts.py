from __future__ import annotations

import asyncio
from typing import Protocol, TypeVar

from oidc_resolver.retrieval.base import DocumentRetriever

T_co = TypeVar("T_co", covariant=True)


class ConfigurationRetriever(Protocol[T_co]):
    async def get_configuration(
        self,
        retriever: DocumentRetriever,
        address: str,
        cancel: asyncio.Event | None = None,
    ) -> T_co:
        ...
