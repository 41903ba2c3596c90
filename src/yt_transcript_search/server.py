"""YouTube Transcript Search MCP Server."""

import json
import logging
import sys
import time
from collections import deque
from contextlib import asynccontextmanager
from typing import Annotated, Any, Literal

from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult, TextContent
from pydantic import Field

from yt_transcript_search.cache import TranscriptCache
from yt_transcript_search.config import Mode, Settings, Transport
from yt_transcript_search.errors import TranscriptError
from yt_transcript_search.models import BatchResult, Transcript
from yt_transcript_search.providers.backend import BackendProvider
from yt_transcript_search.providers.standalone import StandaloneProvider
from yt_transcript_search.resolver import CollectionResolver
from yt_transcript_search.service import TranscriptService
from yt_transcript_search.summary import summarize
from yt_transcript_search.utils import format_timestamp

# Logging to stderr (MCP convention)
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger("yt-transcript-search")

# Module-level state, owned by app_lifespan
_service: TranscriptService | None = None
_settings: Settings | None = None
_rate_window = deque()

# Tool annotations for read-only API tools
TOOL_ANNOTATIONS = {
    "readOnlyHint": True,
    "destructiveHint": False,
    "openWorldHint": True,
}

PREVIEW_SEGMENTS = 2


def build_service(settings: Settings) -> TranscriptService:
    """Wire the transcript source, resolver and cache chosen by ``settings``."""
    if settings.mode == Mode.BACKEND:
        source = BackendProvider(
            base_url=settings.backend_url,
            api_key=settings.backend_api_key,
            timeout=settings.request_timeout_seconds,
        )
        logger.info(f"Backend mode: {settings.backend_url}")
    else:
        source = StandaloneProvider()
        logger.info("Standalone mode")

    return TranscriptService(
        source=source,
        resolver=CollectionResolver(),
        cache=TranscriptCache(
            max_size=settings.cache_max_size,
            ttl=settings.cache_ttl_seconds,
        ),
        max_concurrent=settings.batch_max_concurrent,
        pacing_delay=settings.batch_pacing_seconds,
    )


@asynccontextmanager
async def app_lifespan(server: FastMCP):
    global _service, _settings, _rate_window
    _settings = Settings()
    logging.getLogger().setLevel(_settings.log_level.upper())
    _rate_window = deque()
    _service = build_service(_settings)

    logger.info("Server started")
    yield

    if _service:
        await _service.close()
    logger.info("Server stopped")


mcp = FastMCP(
    "YouTube Transcript Search",
    instructions=(
        "Fetch, search and batch-download YouTube transcripts, "
        "including every video of a channel or playlist"
    ),
    lifespan=app_lifespan,
)


def _check_rate_limit():
    """Sliding window rate limit."""
    now = time.time()
    limit = (_settings.rate_limit_per_minute if _settings else 30)
    while _rate_window and _rate_window[0] < now - 60:
        _rate_window.popleft()
    if len(_rate_window) >= limit:
        raise TranscriptError(
            f"Rate limit exceeded ({limit}/min). Try again in a few seconds."
        )
    _rate_window.append(now)


def _get_service() -> TranscriptService:
    if _service is None:
        raise RuntimeError("Server is not initialized")
    return _service


def _text_result(text: str) -> CallToolResult:
    return CallToolResult(content=[TextContent(type="text", text=text)])


def _json_result(payload: Any) -> CallToolResult:
    return _text_result(json.dumps(payload, indent=2, ensure_ascii=False))


def _error_result(tool: str, exc: Exception) -> CallToolResult:
    if isinstance(exc, TranscriptError):
        logger.warning(f"{tool} failed: {exc}")
    else:
        logger.exception(f"Unexpected error in {tool}")
    return CallToolResult(
        content=[TextContent(type="text", text=f"Error: {exc}")],
        isError=True,
    )


def _batch_payload(result: BatchResult, total: int, with_preview: bool = False) -> dict:
    transcripts = []
    for t in result.transcripts:
        item = {
            "video_id": t.video_id,
            "title": t.title,
            "language": t.language,
            "segment_count": len(t.segments),
            "duration": t.total_duration,
        }
        if with_preview:
            item["preview"] = " ".join(s.text for s in t.segments[:PREVIEW_SEGMENTS])
        transcripts.append(item)
    return {
        "processed": result.succeeded,
        "total": total,
        "failed": [{"url": f.identifier, "error": f.error} for f in result.failures],
        "transcripts": transcripts,
    }


# -- MCP Tools --
# Multi-word argument names are camelCase: FastMCP drops unknown arguments,
# so the parameter names must be exactly what clients send.


@mcp.tool(annotations=TOOL_ANNOTATIONS)
async def get_transcript(
    url: Annotated[str, Field(description="YouTube video URL (youtube.com/watch?v=... or youtu.be/...) or video ID")],
    language: Annotated[str, Field(default="en", description="Language code for the transcript (e.g. en, de, es, fr). Used as a label, not verified against the captions")] = "en",
    format: Annotated[Literal["json", "text", "srt", "vtt"], Field(default="json", description="Output format: json for the full structure, text for plain text, srt or vtt for subtitles")] = "json",
) -> CallToolResult:
    """Get the transcript of a YouTube video as JSON, plain text, SRT or VTT."""
    try:
        _check_rate_limit()
        service = _get_service()
        transcript = await service.get_transcript(url, language)
        return _text_result(service.render(transcript, format))
    except Exception as e:
        return _error_result("get_transcript", e)


@mcp.tool(annotations=TOOL_ANNOTATIONS)
async def search_transcript(
    url: Annotated[str, Field(description="YouTube video URL or video ID to search in")],
    query: Annotated[str, Field(description="Text to find in the transcript (substring match, so 'cat' also matches 'category')")],
    contextWindow: Annotated[int, Field(default=30, ge=0, description="Seconds of context requested around matches. Context is currently the 2 segments before and after each match")] = 30,
    caseSensitive: Annotated[bool, Field(default=False, description="Whether the search should be case sensitive")] = False,
    language: Annotated[str, Field(default="en", description="Language code for the transcript")] = "en",
) -> CallToolResult:
    """Search for text within a YouTube video transcript and return matching segments with context."""
    try:
        _check_rate_limit()
        transcript, results = await _get_service().search_video(
            url,
            query,
            case_sensitive=caseSensitive,
            context_window=contextWindow,
            language=language,
        )
        return _json_result({
            "video_id": transcript.video_id,
            "query": query,
            "match_count": len(results),
            "results": [
                {
                    "timestamp": r.segment.start,
                    "time": format_timestamp(r.segment.start),
                    "match_index": r.match_index,
                    "text": r.segment.text,
                    "context": {
                        "before": " ".join(s.text for s in r.context.before),
                        "after": " ".join(s.text for s in r.context.after),
                    },
                }
                for r in results
            ],
        })
    except Exception as e:
        return _error_result("search_transcript", e)


@mcp.tool(annotations=TOOL_ANNOTATIONS)
async def batch_transcripts(
    urls: Annotated[list[str], Field(description="List of YouTube video URLs or IDs to fetch")],
    language: Annotated[str, Field(default="en", description="Language code for all transcripts")] = "en",
    maxConcurrent: Annotated[int, Field(default=3, ge=1, le=10, description="Maximum number of transcripts fetched at the same time")] = 3,
) -> CallToolResult:
    """Fetch transcripts for several YouTube videos; failed videos are listed without failing the batch."""
    try:
        _check_rate_limit()
        limit = _settings.batch_max_urls if _settings else 50
        if len(urls) > limit:
            raise TranscriptError(f"Maximum {limit} videos per batch.")
        result = await _get_service().fetch_batch(
            urls, language=language, max_concurrent=maxConcurrent
        )
        return _json_result(_batch_payload(result, total=len(urls)))
    except Exception as e:
        return _error_result("batch_transcripts", e)


@mcp.tool(annotations=TOOL_ANNOTATIONS)
async def transcript_summary(
    url: Annotated[str, Field(description="YouTube video URL or video ID to summarize")],
    summaryType: Annotated[Literal["brief", "detailed", "topics", "timestamps", "chunks"], Field(default="brief", description="brief: stats and preview, detailed: full text, topics: key sentences, timestamps: every segment with its time, chunks: text grouped into time windows")] = "brief",
    language: Annotated[str, Field(default="en", description="Language code for the transcript")] = "en",
    chunkMinutes: Annotated[int, Field(default=5, ge=1, le=60, description="Window size in minutes for the chunks summary")] = 5,
) -> CallToolResult:
    """Get a condensed view of a transcript, useful for long videos."""
    try:
        _check_rate_limit()
        transcript: Transcript = await _get_service().get_transcript(url, language)
        return _json_result(summarize(transcript, summaryType, chunk_minutes=chunkMinutes))
    except Exception as e:
        return _error_result("transcript_summary", e)


@mcp.tool(annotations=TOOL_ANNOTATIONS)
async def list_collection_videos(
    collectionUrl: Annotated[str, Field(description="YouTube channel (youtube.com/@handle, /channel/, /c/, /user/) or playlist URL")],
    maxVideos: Annotated[int, Field(default=50, ge=1, le=200, description="Maximum number of video URLs to return")] = 50,
) -> CallToolResult:
    """List the video URLs of a YouTube channel or playlist."""
    try:
        _check_rate_limit()
        urls = await _get_service().list_collection_videos(collectionUrl, maxVideos)
        return _json_result({
            "collection_url": collectionUrl,
            "total_urls": len(urls),
            "video_urls": urls,
        })
    except Exception as e:
        return _error_result("list_collection_videos", e)


@mcp.tool(annotations=TOOL_ANNOTATIONS)
async def collection_transcripts(
    collectionUrl: Annotated[str, Field(description="YouTube channel or playlist URL")],
    maxVideos: Annotated[int, Field(default=50, ge=1, le=200, description="Maximum number of videos to fetch transcripts for")] = 50,
    maxConcurrent: Annotated[int, Field(default=3, ge=1, le=10, description="Maximum number of transcripts fetched at the same time")] = 3,
    language: Annotated[str, Field(default="en", description="Language code for all transcripts")] = "en",
) -> CallToolResult:
    """Fetch transcripts for the videos of a YouTube channel or playlist."""
    try:
        _check_rate_limit()
        result = await _get_service().fetch_collection(
            collectionUrl,
            max_videos=maxVideos,
            language=language,
            max_concurrent=maxConcurrent,
        )
        payload = _batch_payload(result, total=result.total, with_preview=True)
        return _json_result({"collection_url": collectionUrl, **payload})
    except Exception as e:
        return _error_result("collection_transcripts", e)


# -- MCP Prompts --


@mcp.prompt()
def summarize_video(
    url: Annotated[str, Field(description="YouTube video URL or video ID to summarize")],
) -> str:
    """Summarize a YouTube video from its transcript."""
    return f"""Use the get_transcript tool with format="text" to fetch the transcript of this video: {url}

If the video is long, call transcript_summary with summaryType="chunks" first.

Then write a summary with:
1. The main topic and key points
2. Notable quotes
3. A one-paragraph conclusion"""


@mcp.prompt()
def find_key_moments(
    url: Annotated[str, Field(description="YouTube video URL or video ID to analyze")],
    topic: Annotated[str, Field(description="Word or phrase to look for in the video")],
) -> str:
    """Find the moments of a video where a topic is discussed."""
    return f"""Use the search_transcript tool to find "{topic}" in this video: {url}

Matches are substring matches, so also try shorter or alternative spellings if nothing is found.

For each match report the timestamp, the surrounding context, and what is said about "{topic}"."""


# -- MCP Resources --


@mcp.resource("youtube://help")
def help_resource() -> str:
    """Usage guide for the transcript search tools."""
    return """# YouTube Transcript Search - Help

## Tools

### get_transcript
Full transcript of one video. Formats: json (default), text, srt, vtt.
The vtt format is the srt output with every comma turned into a period.
- get_transcript(url="https://youtu.be/VIDEO_ID", format="srt")

### search_transcript
Case-insensitive substring search by default. Each match comes with the
2 segments before and after it.
- search_transcript(url="VIDEO_ID", query="machine learning")

### batch_transcripts
Many videos at once, fetched in chunks of maxConcurrent (1-10) with a short
pause between chunks. Videos that fail are listed under "failed".
- batch_transcripts(urls=["VIDEO1", "VIDEO2", "VIDEO3"], maxConcurrent=2)

### transcript_summary
brief, detailed, topics, timestamps or chunks views of a transcript.

### list_collection_videos / collection_transcripts
Video URLs, or transcripts, of a channel (@handle, /channel/, /c/, /user/)
or a playlist (?list=...).

## Tips
- Language codes are labels: captions in the requested language are used, falling back to English.
- Use search_transcript before get_transcript on long videos.
"""


def main():
    settings = Settings()
    if settings.transport == Transport.STREAMABLE_HTTP:
        mcp.run(transport="streamable-http")
    else:
        mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
