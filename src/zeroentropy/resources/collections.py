"""Collection management endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..types import CollectionListResponse, CollectionRequest, CollectionResponse, EmptyRequest

if TYPE_CHECKING:  # pragma: no cover
    from ..client import _BaseClient


class Collections:
    def __init__(self, client: "_BaseClient") -> None:
        self._client = client

    def add(self, collection_name: str):
        """Create a collection.

        An existing collection of the same name raises ``Conflict``.
        """
        body = CollectionRequest(collection_name=collection_name)
        return self._client.post("/collections/add-collection", body, CollectionResponse)

    def delete(self, collection_name: str):
        body = CollectionRequest(collection_name=collection_name)
        return self._client.post("/collections/delete-collection", body, CollectionResponse)

    def get_list(self):
        return self._client.post("/collections/get-collection-list", EmptyRequest(), CollectionListResponse)


__all__ = ["Collections"]
