"""Document ingestion and inspection endpoints."""

from __future__ import annotations

import base64
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Union

from ..types import (
    AddDocumentRequest,
    AutoContent,
    DocumentContent,
    DocumentInfoListResponse,
    DocumentInfoResponse,
    DocumentPathRequest,
    DocumentResponse,
    GetDocumentInfoListRequest,
    GetDocumentInfoRequest,
    GetPageInfoRequest,
    IndexStatus,
    Metadata,
    PageInfoResponse,
    TextContent,
    UpdateDocumentRequest,
)

if TYPE_CHECKING:  # pragma: no cover
    from ..client import _BaseClient


class Documents:
    """Document calls for one client.

    Each method returns whatever the client's ``post`` returns: the decoded
    response model for ``Client``, an awaitable of it for ``AsyncClient``.
    """

    def __init__(self, client: "_BaseClient") -> None:
        self._client = client

    def add(
        self,
        collection_name: str,
        path: str,
        content: DocumentContent,
        *,
        metadata: Optional[Metadata] = None,
        overwrite: Optional[bool] = None,
    ):
        body = AddDocumentRequest(
            collection_name=collection_name,
            path=path,
            content=content,
            metadata=metadata,
            overwrite=overwrite,
        )
        return self._client.post("/documents/add-document", body, DocumentResponse)

    def add_text(
        self,
        collection_name: str,
        path: str,
        text: str,
        *,
        metadata: Optional[Metadata] = None,
        overwrite: Optional[bool] = None,
    ):
        return self.add(
            collection_name, path, TextContent(text=text), metadata=metadata, overwrite=overwrite
        )

    def add_pdf(
        self,
        collection_name: str,
        path: str,
        base64_data: str,
        *,
        metadata: Optional[Metadata] = None,
        overwrite: Optional[bool] = None,
    ):
        """Add a base64-encoded PDF; the API runs OCR on it."""
        return self.add(
            collection_name,
            path,
            AutoContent(base64_data=base64_data),
            metadata=metadata,
            overwrite=overwrite,
        )

    def add_pdf_file(
        self,
        collection_name: str,
        path: str,
        file_path: Union[str, Path],
        *,
        metadata: Optional[Metadata] = None,
        overwrite: Optional[bool] = None,
    ):
        """Read a local PDF and upload it under ``path``.

        The file is read before any request is made, so a missing file raises
        ``OSError`` straight away.
        """
        data = Path(file_path).read_bytes()
        encoded = base64.b64encode(data).decode("ascii")
        return self.add_pdf(collection_name, path, encoded, metadata=metadata, overwrite=overwrite)

    def update(
        self,
        collection_name: str,
        path: str,
        *,
        metadata: Optional[Metadata] = None,
        index_status: Optional[IndexStatus] = None,
    ):
        body = UpdateDocumentRequest(
            collection_name=collection_name,
            path=path,
            metadata=metadata,
            index_status=index_status,
        )
        return self._client.post("/documents/update-document", body, DocumentResponse)

    def delete(self, collection_name: str, path: str):
        body = DocumentPathRequest(collection_name=collection_name, path=path)
        return self._client.post("/documents/delete-document", body, DocumentResponse)

    def get_info(self, collection_name: str, path: str, *, include_content: Optional[bool] = None):
        body = GetDocumentInfoRequest(
            collection_name=collection_name, path=path, include_content=include_content
        )
        return self._client.post("/documents/get-document-info", body, DocumentInfoResponse)

    def get_info_list(
        self,
        collection_name: str,
        *,
        limit: Optional[int] = None,
        path_gt: Optional[str] = None,
    ):
        """List documents in path order; pass the last path as ``path_gt`` to page."""
        body = GetDocumentInfoListRequest(collection_name=collection_name, limit=limit, path_gt=path_gt)
        return self._client.post("/documents/get-document-info-list", body, DocumentInfoListResponse)

    def get_page_info(
        self,
        collection_name: str,
        path: str,
        page_number: int,
        *,
        include_content: Optional[bool] = None,
    ):
        body = GetPageInfoRequest(
            collection_name=collection_name,
            path=path,
            page_number=page_number,
            include_content=include_content,
        )
        return self._client.post("/documents/get-page-info", body, PageInfoResponse)


__all__ = ["Documents"]
