"""Create a collection, index a few documents, search them, clean up.

Usage:
    export ZEROENTROPY_API_KEY="your-api-key"
    python examples/basic.py
"""

from __future__ import annotations

import asyncio
import logging

from zeroentropy import AsyncClient, Conflict

logger = logging.getLogger("examples.basic")
logging.basicConfig(level=logging.INFO)

COLLECTION = "python_example"

DOCUMENTS = {
    "doc1.txt": "Python is a high-level language with a large standard library.",
    "doc2.txt": "httpx offers both a blocking and an asyncio HTTP client.",
    "doc3.txt": "pydantic validates data using Python type hints.",
}


async def main() -> None:
    async with AsyncClient() as client:
        try:
            response = await client.collections.add(COLLECTION)
            logger.info(response.message)
        except Conflict:
            logger.info("Collection %s already exists", COLLECTION)

        for path, text in DOCUMENTS.items():
            metadata = {"category": "tutorial"} if path == "doc3.txt" else None
            await client.documents.add_text(COLLECTION, path, text, metadata=metadata, overwrite=True)

        results = await client.queries.top_snippets(COLLECTION, "type hints", 5, include_document_metadata=True)
        for rank, result in enumerate(results.results, start=1):
            logger.info("%d. %s (score: %.4f) %s", rank, result.path, result.score, result.content)

        listing = await client.documents.get_info_list(COLLECTION, limit=10)
        for doc in listing.documents:
            logger.info("- %s (status: %s)", doc.path, doc.index_status.value)

        await client.collections.delete(COLLECTION)
        logger.info("Collection deleted")


if __name__ == "__main__":
    asyncio.run(main())
