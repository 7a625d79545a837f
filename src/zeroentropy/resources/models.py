"""Model endpoints (reranking)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Optional

from ..types import RerankDocument, RerankRequest, RerankResponse

if TYPE_CHECKING:  # pragma: no cover
    from ..client import _BaseClient


class Models:
    def __init__(self, client: "_BaseClient") -> None:
        self._client = client

    def rerank(
        self,
        query: str,
        documents: Iterable[RerankDocument],
        *,
        model_id: Optional[str] = None,
        top_k: Optional[int] = None,
    ):
        """Score ``documents`` against ``query``; omit ``model_id`` for the default model."""
        body = RerankRequest(query=query, documents=list(documents), model_id=model_id, top_k=top_k)
        return self._client.post("/models/rerank", body, RerankResponse)


__all__ = ["Models"]
