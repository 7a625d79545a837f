from __future__ import annotations

import base64
import json
from pathlib import Path
from typing import Any, Dict, List, Tuple

import httpx
import pytest

from zeroentropy import Client, ClientConfig, IndexStatus, LatencyMode, RerankDocument
from zeroentropy.types import (
    DocumentInfoListResponse,
    PageInfoResponse,
    RerankResponse,
    TopDocumentsResponse,
    TopPagesResponse,
)

BASE = "/v1"


class Recorder:
    """Answers every call with a canned body and records what was sent."""

    def __init__(self, response: Dict[str, Any]) -> None:
        self.response = response
        self.calls: List[Tuple[str, Dict[str, Any]]] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls.append((request.url.path, json.loads(request.content)))
        return httpx.Response(200, json=self.response)


def make_client(recorder: Recorder) -> Client:
    cfg = ClientConfig(api_key="test-key", base_url="https://api.example.com/v1")
    return Client(cfg, transport=httpx.MockTransport(recorder))


@pytest.fixture()
def ok() -> Recorder:
    return Recorder({"message": "ok"})


def test_collection_calls(ok: Recorder) -> None:
    client = make_client(ok)
    client.collections.add("docs")
    client.collections.delete("docs")

    assert ok.calls == [
        (f"{BASE}/collections/add-collection", {"collection_name": "docs"}),
        (f"{BASE}/collections/delete-collection", {"collection_name": "docs"}),
    ]


def test_add_text_omits_unset_options(ok: Recorder) -> None:
    client = make_client(ok)
    client.documents.add_text("docs", "doc1.txt", "Rust is fast")

    assert ok.calls == [
        (
            f"{BASE}/documents/add-document",
            {"collection_name": "docs", "path": "doc1.txt", "content": {"type": "text", "text": "Rust is fast"}},
        )
    ]


def test_add_text_with_metadata_and_overwrite(ok: Recorder) -> None:
    client = make_client(ok)
    client.documents.add_text(
        "docs",
        "doc3.txt",
        "Cargo builds crates",
        metadata={"category": "tutorial", "tags": ["rust", "sdk"]},
        overwrite=True,
    )

    _, body = ok.calls[0]
    assert body["metadata"] == {"category": "tutorial", "tags": ["rust", "sdk"]}
    assert body["overwrite"] is True


def test_add_pdf_file_encodes_bytes(ok: Recorder, tmp_path: Path) -> None:
    pdf = tmp_path / "paper.pdf"
    pdf.write_bytes(b"%PDF-1.4 test")
    client = make_client(ok)

    client.documents.add_pdf_file("papers", "arxiv/paper.pdf", pdf)

    path, body = ok.calls[0]
    assert path == f"{BASE}/documents/add-document"
    assert body["content"] == {"type": "auto", "base64_data": base64.b64encode(b"%PDF-1.4 test").decode()}


def test_add_pdf_file_missing_file_sends_nothing(ok: Recorder, tmp_path: Path) -> None:
    client = make_client(ok)

    with pytest.raises(OSError):
        client.documents.add_pdf_file("papers", "x.pdf", tmp_path / "missing.pdf")

    assert ok.calls == []


def test_update_and_delete_document(ok: Recorder) -> None:
    client = make_client(ok)
    client.documents.update("docs", "doc1.txt", index_status=IndexStatus.NOT_INDEXED)
    client.documents.delete("docs", "doc1.txt")

    assert ok.calls == [
        (
            f"{BASE}/documents/update-document",
            {"collection_name": "docs", "path": "doc1.txt", "index_status": "not_indexed"},
        ),
        (f"{BASE}/documents/delete-document", {"collection_name": "docs", "path": "doc1.txt"}),
    ]


def test_get_info_list_paging() -> None:
    recorder = Recorder(
        {"documents": [{"path": "a.txt", "index_status": "indexing"}], "path_gt": "a.txt"}
    )
    client = make_client(recorder)

    result = client.documents.get_info_list("docs", limit=1, path_gt="0.txt")

    assert isinstance(result, DocumentInfoListResponse)
    assert result.documents[0].index_status is IndexStatus.INDEXING
    assert result.path_gt == "a.txt"
    assert recorder.calls[0][1] == {"collection_name": "docs", "limit": 1, "path_gt": "0.txt"}


def test_get_document_info_and_page_info() -> None:
    recorder = Recorder({"page": {"path": "a.pdf", "page_number": 2, "content": "page two"}})
    client = make_client(recorder)

    page = client.documents.get_page_info("docs", "a.pdf", 2, include_content=True)

    assert isinstance(page, PageInfoResponse)
    assert page.page.content == "page two"
    assert recorder.calls[0] == (
        f"{BASE}/documents/get-page-info",
        {"collection_name": "docs", "path": "a.pdf", "page_number": 2, "include_content": True},
    )

    recorder.response = {"document": {"path": "a.pdf", "index_status": "indexed"}}
    client.documents.get_info("docs", "a.pdf")
    assert recorder.calls[1] == (
        f"{BASE}/documents/get-document-info",
        {"collection_name": "docs", "path": "a.pdf"},
    )


def test_top_documents_request() -> None:
    recorder = Recorder({"results": [{"path": "a.txt", "score": 0.75, "metadata": {"specialty": "Cardiology"}}]})
    client = make_client(recorder)

    result = client.queries.top_documents(
        "ehr",
        "chest pain",
        10,
        filter={"specialty": {"$eq": "Cardiology"}},
        include_metadata=True,
        latency_mode=LatencyMode.LOW,
    )

    assert isinstance(result, TopDocumentsResponse)
    assert result.results[0].metadata == {"specialty": "Cardiology"}
    assert recorder.calls[0] == (
        f"{BASE}/queries/top-documents",
        {
            "collection_name": "ehr",
            "query": "chest pain",
            "k": 10,
            "filter": {"specialty": {"$eq": "Cardiology"}},
            "include_metadata": True,
            "latency_mode": "low",
        },
    )


def test_top_pages_and_snippets_requests() -> None:
    recorder = Recorder({"results": [{"path": "a.pdf", "page_number": 1, "score": 0.5}]})
    client = make_client(recorder)

    pages = client.queries.top_pages("papers", "attention", 3, latency_mode=LatencyMode.HIGH)
    assert isinstance(pages, TopPagesResponse)

    recorder.response = {"results": []}
    client.queries.top_snippets("papers", "attention", 5, precise_responses=True, reranker="zerank-1")

    assert recorder.calls == [
        (
            f"{BASE}/queries/top-pages",
            {"collection_name": "papers", "query": "attention", "k": 3, "latency_mode": "high"},
        ),
        (
            f"{BASE}/queries/top-snippets",
            {
                "collection_name": "papers",
                "query": "attention",
                "k": 5,
                "precise_responses": True,
                "reranker": "zerank-1",
            },
        ),
    ]


def test_rerank_request() -> None:
    recorder = Recorder({"results": [{"id": "doc1", "score": 0.9, "index": 0}]})
    client = make_client(recorder)
    documents = [
        RerankDocument(id="doc1", text="Rust is a systems programming language"),
        RerankDocument(id="doc2", text="Python is a high-level programming language"),
    ]

    result = client.models.rerank("systems programming", documents, top_k=1)

    assert isinstance(result, RerankResponse)
    assert result.results[0].index == 0
    assert recorder.calls[0] == (
        f"{BASE}/models/rerank",
        {
            "query": "systems programming",
            "documents": [
                {"id": "doc1", "text": "Rust is a systems programming language"},
                {"id": "doc2", "text": "Python is a high-level programming language"},
            ],
            "top_k": 1,
        },
    )
