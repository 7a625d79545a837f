"""Pydantic models for ZeroEntropy request and response bodies."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field


class TextContent(BaseModel):
    type: Literal["text"] = "text"
    text: str


class AutoContent(BaseModel):
    """Binary content (PDFs, images) the API parses and OCRs itself."""

    type: Literal["auto"] = "auto"
    base64_data: str


DocumentContent = Annotated[Union[TextContent, AutoContent], Field(discriminator="type")]

# Metadata values are strings or lists of strings.
Metadata = Dict[str, Union[str, List[str]]]
Filter = Dict[str, Any]


class LatencyMode(str, Enum):
    LOW = "low"
    HIGH = "high"


class IndexStatus(str, Enum):
    NOT_PARSED = "not_parsed"
    NOT_INDEXED = "not_indexed"
    PARSING = "parsing"
    PARSING_FAILED = "parsing_failed"
    INDEXING = "indexing"
    INDEXING_FAILED = "indexing_failed"
    INDEXED = "indexed"


# Requests


class CollectionRequest(BaseModel):
    collection_name: str


class EmptyRequest(BaseModel):
    pass


class AddDocumentRequest(BaseModel):
    collection_name: str
    path: str
    content: DocumentContent
    metadata: Optional[Metadata] = None
    overwrite: Optional[bool] = None


class UpdateDocumentRequest(BaseModel):
    collection_name: str
    path: str
    metadata: Optional[Metadata] = None
    index_status: Optional[IndexStatus] = None


class DocumentPathRequest(BaseModel):
    collection_name: str
    path: str


class GetDocumentInfoRequest(BaseModel):
    collection_name: str
    path: str
    include_content: Optional[bool] = None


class GetDocumentInfoListRequest(BaseModel):
    collection_name: str
    limit: Optional[int] = None
    path_gt: Optional[str] = None


class GetPageInfoRequest(BaseModel):
    collection_name: str
    path: str
    page_number: int
    include_content: Optional[bool] = None


class TopDocumentsRequest(BaseModel):
    collection_name: str
    query: str
    k: int
    filter: Optional[Filter] = None
    include_metadata: Optional[bool] = None
    latency_mode: Optional[LatencyMode] = None
    reranker: Optional[str] = None


class TopPagesRequest(BaseModel):
    collection_name: str
    query: str
    k: int
    filter: Optional[Filter] = None
    include_content: Optional[bool] = None
    latency_mode: Optional[LatencyMode] = None


class TopSnippetsRequest(BaseModel):
    collection_name: str
    query: str
    k: int
    filter: Optional[Filter] = None
    include_document_metadata: Optional[bool] = None
    # Longer snippets (~2000 chars instead of ~200).
    precise_responses: Optional[bool] = None
    reranker: Optional[str] = None


class RerankDocument(BaseModel):
    id: str
    text: str


class RerankRequest(BaseModel):
    query: str
    documents: List[RerankDocument]
    model_id: Optional[str] = None
    top_k: Optional[int] = None


# Responses


class CollectionResponse(BaseModel):
    message: str


class CollectionListResponse(BaseModel):
    collections: List[str]


class DocumentResponse(BaseModel):
    message: str


class DocumentInfo(BaseModel):
    path: str
    index_status: IndexStatus
    metadata: Optional[Metadata] = None
    content: Optional[DocumentContent] = None


class DocumentInfoResponse(BaseModel):
    document: DocumentInfo


class DocumentInfoListResponse(BaseModel):
    documents: List[DocumentInfo]
    path_gt: Optional[str] = None


class PageInfo(BaseModel):
    path: str
    page_number: int
    content: Optional[str] = None


class PageInfoResponse(BaseModel):
    page: PageInfo


class DocumentResult(BaseModel):
    path: str
    score: float
    metadata: Optional[Metadata] = None


class TopDocumentsResponse(BaseModel):
    results: List[DocumentResult]


class PageResult(BaseModel):
    path: str
    page_number: int
    score: float
    content: Optional[str] = None


class TopPagesResponse(BaseModel):
    results: List[PageResult]


class SnippetResult(BaseModel):
    path: str
    content: str
    score: float
    page_number: Optional[int] = None
    metadata: Optional[Metadata] = None


class TopSnippetsResponse(BaseModel):
    results: List[SnippetResult]


class RerankResult(BaseModel):
    id: str
    score: float
    index: int


class RerankResponse(BaseModel):
    results: List[RerankResult]


__all__ = [
    "AddDocumentRequest",
    "AutoContent",
    "CollectionListResponse",
    "CollectionRequest",
    "CollectionResponse",
    "DocumentContent",
    "DocumentInfo",
    "DocumentInfoListResponse",
    "DocumentInfoResponse",
    "DocumentPathRequest",
    "DocumentResponse",
    "DocumentResult",
    "EmptyRequest",
    "Filter",
    "GetDocumentInfoListRequest",
    "GetDocumentInfoRequest",
    "GetPageInfoRequest",
    "IndexStatus",
    "LatencyMode",
    "Metadata",
    "PageInfo",
    "PageInfoResponse",
    "PageResult",
    "RerankDocument",
    "RerankRequest",
    "RerankResponse",
    "RerankResult",
    "SnippetResult",
    "TextContent",
    "TopDocumentsRequest",
    "TopDocumentsResponse",
    "TopPagesRequest",
    "TopPagesResponse",
    "TopSnippetsRequest",
    "TopSnippetsResponse",
    "UpdateDocumentRequest",
]
