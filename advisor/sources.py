from typing import Any, Iterable, List

from tools.models import Source


def grounding_chunks(response: Any) -> List[Any]:
    """Grounding chunks of the first candidate, or [] if the response carries none."""
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return []
    metadata = getattr(candidates[0], "grounding_metadata", None)
    if metadata is None:
        return []
    return list(getattr(metadata, "grounding_chunks", None) or [])


def map_sources(chunks: Iterable[Any]) -> List[Source]:
    # order is kept: position + 1 is the citation number
    sources = []
    for chunk in chunks:
        web = getattr(chunk, "web", None)
        uri = getattr(web, "uri", None) if web is not None else None
        if not uri:
            continue
        title = getattr(web, "title", None) or uri
        sources.append(Source(uri=uri, title=title))
    return sources
