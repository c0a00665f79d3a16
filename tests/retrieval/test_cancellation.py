import asyncio

import pytest

from oidc_resolver.exceptions import OperationCancelledError, RetrievalError


@pytest.mark.asyncio
async def test_already_cancelled_skips_fetch(fake_retriever):
    retriever = fake_retriever({"https://idp/a": "doc"})
    cancel = asyncio.Event()
    cancel.set()

    with pytest.raises(OperationCancelledError):
        await retriever.get_document("https://idp/a", cancel)

    assert retriever.calls == []


@pytest.mark.asyncio
async def test_cancel_during_fetch(fake_retriever):
    retriever = fake_retriever({"https://idp/a": "doc"}, delay=5)
    cancel = asyncio.Event()

    asyncio.get_running_loop().call_later(0.01, cancel.set)

    with pytest.raises(OperationCancelledError):
        await retriever.get_document("https://idp/a", cancel)

    assert retriever.calls == ["https://idp/a"]


@pytest.mark.asyncio
async def test_unset_event_returns_document(fake_retriever):
    retriever = fake_retriever({"https://idp/a": "doc"})

    assert await retriever.get_document("https://idp/a", asyncio.Event()) == "doc"


@pytest.mark.asyncio
async def test_fetch_errors_pass_through_with_event(fake_retriever):
    retriever = fake_retriever({})

    with pytest.raises(RetrievalError):
        await retriever.get_document("https://idp/missing", asyncio.Event())
