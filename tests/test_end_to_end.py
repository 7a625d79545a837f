from __future__ import annotations

from typing import List

import httpx
import pytest

from fake_api import build_app
from zeroentropy import AsyncClient, AuthenticationError, ClientConfig, Conflict, NotFound, RerankDocument


def make_client(api_key: str = "test-key", max_retries: int = 2) -> tuple[AsyncClient, List[float]]:
    transport = httpx.ASGITransport(app=build_app())
    cfg = ClientConfig(api_key=api_key, base_url="http://testserver/v1", max_retries=max_retries)
    client = AsyncClient(cfg, transport=transport)
    sleeps: List[float] = []

    async def fake_sleep(delay: float) -> None:
        sleeps.append(delay)

    client._sleep = fake_sleep
    return client, sleeps


@pytest.mark.asyncio
async def test_collection_document_query_flow() -> None:
    client, _ = make_client()
    async with client:
        created = await client.collections.add("rust_example")
        assert created.message == "Collection created"

        await client.documents.add_text(
            "rust_example",
            "doc1.txt",
            "Rust is a systems programming language focused on safety and performance.",
        )
        await client.documents.add_text(
            "rust_example",
            "doc2.txt",
            "The Rust compiler prevents many common programming errors at compile time.",
        )
        await client.documents.add_text(
            "rust_example",
            "doc3.txt",
            "Cargo is Rust's build system and package manager.",
            metadata={"category": "tutorial"},
        )

        results = await client.queries.top_snippets(
            "rust_example", "performance", 5, include_document_metadata=True
        )
        assert [r.path for r in results.results] == ["doc1.txt"]

        listing = await client.documents.get_info_list("rust_example", limit=2)
        assert [d.path for d in listing.documents] == ["doc1.txt", "doc2.txt"]
        page_two = await client.documents.get_info_list("rust_example", path_gt="doc2.txt")
        assert [d.path for d in page_two.documents] == ["doc3.txt"]
        assert page_two.documents[0].metadata == {"category": "tutorial"}

        names = await client.collections.get_list()
        assert names.collections == ["rust_example"]

        deleted = await client.collections.delete("rust_example")
        assert deleted.message == "Collection deleted"


@pytest.mark.asyncio
async def test_existing_collection_surfaces_as_conflict() -> None:
    client, sleeps = make_client(max_retries=2)
    async with client:
        await client.collections.add("dupe")

        with pytest.raises(Conflict) as excinfo:
            await client.collections.add("dupe")

    assert excinfo.value.message == "Collection already exists"
    assert sleeps == [0.5, 1.0]


@pytest.mark.asyncio
async def test_missing_collection_is_not_found() -> None:
    client, sleeps = make_client()
    async with client:
        with pytest.raises(NotFound) as excinfo:
            await client.collections.delete("ghost")

    assert str(excinfo.value) == "Not found: Collection not found"
    assert sleeps == []


@pytest.mark.asyncio
async def test_wrong_key_uses_raw_body_as_message() -> None:
    client, _ = make_client(api_key="wrong-key")
    async with client:
        with pytest.raises(AuthenticationError) as excinfo:
            await client.collections.get_list()

    # The error body has no "message" field, so the raw text is kept.
    assert excinfo.value.message == '{"detail":"Invalid API key"}'


@pytest.mark.asyncio
async def test_rerank_orders_by_relevance() -> None:
    client, _ = make_client()
    async with client:
        response = await client.models.rerank(
            "systems programming",
            [
                RerankDocument(id="py", text="Python is a high-level programming language"),
                RerankDocument(id="rs", text="Rust is a systems programming language"),
            ],
            top_k=1,
        )

    assert [(r.id, r.index) for r in response.results] == [("rs", 1)]
