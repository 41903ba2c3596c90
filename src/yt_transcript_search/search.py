"""Substring search over transcript segments."""

from yt_transcript_search.models import SearchContext, SearchResult, Transcript

CONTEXT_BEFORE = 2
CONTEXT_AFTER = 2


def search_transcript(
    transcript: Transcript,
    query: str,
    case_sensitive: bool = False,
    context_window: int = 30,
) -> list[SearchResult]:
    """Find every segment whose text contains ``query``.

    Matching is plain substring containment, so "cat" also hits "category".
    Each match carries up to CONTEXT_BEFORE preceding and CONTEXT_AFTER
    following segments. ``context_window`` is accepted for callers that pass
    a time window in seconds but does not change the context size.
    """
    needle = query if case_sensitive else query.lower()
    segments = transcript.segments
    results = []

    for index, segment in enumerate(segments):
        text = segment.text if case_sensitive else segment.text.lower()
        if needle not in text:
            continue
        before = segments[max(0, index - CONTEXT_BEFORE):index]
        after = segments[index + 1:index + 1 + CONTEXT_AFTER]
        results.append(
            SearchResult(
                segment=segment,
                context=SearchContext(before=before, after=after),
                match_index=index,
            )
        )

    return results
