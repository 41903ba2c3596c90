"""Chunked concurrent fetching with per-item failure isolation."""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterable

from yt_transcript_search.models import (
    BatchFailure,
    BatchItemOutcome,
    BatchResult,
    BatchSuccess,
    Transcript,
)

logger = logging.getLogger(__name__)

FetchFn = Callable[[str], Awaitable[Transcript]]


async def _fetch_one(fetch: FetchFn, identifier: str) -> BatchItemOutcome:
    try:
        transcript = await fetch(identifier)
    except Exception as e:
        message = str(e) or type(e).__name__
        logger.warning(f"Batch item {identifier} failed: {message}")
        return BatchFailure(identifier=identifier, error=message)
    return BatchSuccess(identifier=identifier, transcript=transcript)


async def fetch_batch(
    identifiers: Iterable[str],
    fetch: FetchFn,
    concurrency_limit: int = 3,
    pacing_delay: float = 1.0,
) -> BatchResult:
    """Fetch transcripts for ``identifiers`` in chunks of ``concurrency_limit``.

    Members of a chunk run concurrently and the whole chunk is awaited before
    the next one starts. A failing item becomes a BatchFailure without
    affecting the others. ``pacing_delay`` seconds are slept between chunks,
    never after the last one.
    """
    if concurrency_limit < 1:
        raise ValueError(f"concurrency_limit must be >= 1, got {concurrency_limit}")

    items = list(identifiers)
    chunks = [
        items[i:i + concurrency_limit]
        for i in range(0, len(items), concurrency_limit)
    ]
    result = BatchResult()

    for chunk_index, chunk in enumerate(chunks):
        outcomes = await asyncio.gather(*(_fetch_one(fetch, ident) for ident in chunk))
        for outcome in outcomes:
            if isinstance(outcome, BatchSuccess):
                result.transcripts.append(outcome.transcript)
            else:
                result.failures.append(outcome)

        if pacing_delay > 0 and chunk_index < len(chunks) - 1:
            await asyncio.sleep(pacing_delay)

    if result.failures:
        logger.error(
            f"Failed to get transcripts for {len(result.failures)} of "
            f"{len(items)} items: "
            + ", ".join(f.identifier for f in result.failures)
        )
    logger.info(
        f"Batch finished: {result.succeeded}/{len(items)} transcripts "
        f"in {len(chunks)} chunk(s)"
    )
    return result
