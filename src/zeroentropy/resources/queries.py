"""Semantic search endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ..types import (
    Filter,
    LatencyMode,
    TopDocumentsRequest,
    TopDocumentsResponse,
    TopPagesRequest,
    TopPagesResponse,
    TopSnippetsRequest,
    TopSnippetsResponse,
)

if TYPE_CHECKING:  # pragma: no cover
    from ..client import _BaseClient


class Queries:
    def __init__(self, client: "_BaseClient") -> None:
        self._client = client

    def top_documents(
        self,
        collection_name: str,
        query: str,
        k: int,
        *,
        filter: Optional[Filter] = None,
        include_metadata: Optional[bool] = None,
        latency_mode: Optional[LatencyMode] = None,
        reranker: Optional[str] = None,
    ):
        """Return the ``k`` documents most relevant to ``query`` (1-2048)."""
        body = TopDocumentsRequest(
            collection_name=collection_name,
            query=query,
            k=k,
            filter=filter,
            include_metadata=include_metadata,
            latency_mode=latency_mode,
            reranker=reranker,
        )
        return self._client.post("/queries/top-documents", body, TopDocumentsResponse)

    def top_pages(
        self,
        collection_name: str,
        query: str,
        k: int,
        *,
        filter: Optional[Filter] = None,
        include_content: Optional[bool] = None,
        latency_mode: Optional[LatencyMode] = None,
    ):
        """Return the ``k`` most relevant pages (1-1024)."""
        body = TopPagesRequest(
            collection_name=collection_name,
            query=query,
            k=k,
            filter=filter,
            include_content=include_content,
            latency_mode=latency_mode,
        )
        return self._client.post("/queries/top-pages", body, TopPagesResponse)

    def top_snippets(
        self,
        collection_name: str,
        query: str,
        k: int,
        *,
        filter: Optional[Filter] = None,
        include_document_metadata: Optional[bool] = None,
        precise_responses: Optional[bool] = None,
        reranker: Optional[str] = None,
    ):
        body = TopSnippetsRequest(
            collection_name=collection_name,
            query=query,
            k=k,
            filter=filter,
            include_document_metadata=include_document_metadata,
            precise_responses=precise_responses,
            reranker=reranker,
        )
        return self._client.post("/queries/top-snippets", body, TopSnippetsResponse)


__all__ = ["Queries"]
