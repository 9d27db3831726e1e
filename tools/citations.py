import html
import re
from dataclasses import dataclass
from typing import List, Sequence, Union

from tools.models import Source

CITATION_RE = re.compile(r"(\[\d+\])")


@dataclass(frozen=True)
class CitationLink:
    number: int
    uri: str
    title: str


def split_citations(text: str, sources: Sequence[Source]) -> List[Union[str, CitationLink]]:
    """
    Split text on [n] markers (markers kept). A marker whose source exists becomes a
    CitationLink to sources[n-1]; out-of-range markers stay as literal text.
    """
    if not text or not sources:
        return [text]

    pieces: List[Union[str, CitationLink]] = []
    for part in CITATION_RE.split(text):
        if not part:
            continue
        if CITATION_RE.fullmatch(part):
            n = int(part[1:-1])
            if 1 <= n <= len(sources):
                src = sources[n - 1]
                pieces.append(CitationLink(number=n, uri=src.uri, title=src.title))
                continue
        pieces.append(part)
    return pieces


def _attr(value: str) -> str:
    # brackets are entity-encoded so a rendered link never looks like a marker again
    return html.escape(value, quote=True).replace("[", "&#91;").replace("]", "&#93;")


def _anchor(link: CitationLink) -> str:
    title = _attr(link.title)
    href = _attr(link.uri)
    return (
        f'<a href="{href}" target="_blank" rel="noopener noreferrer" title="{title}" '
        f'aria-label="Source {link.number}"><sup>{link.number}</sup></a>'
    )


def link_citations(text: str, sources: Sequence[Source]) -> str:
    """
    Render text for st.markdown(unsafe_allow_html=True) with [n] markers turned into source links.
    Plain text is HTML-escaped; only the citation anchors are markup.
    """
    return "".join(
        _anchor(p) if isinstance(p, CitationLink) else html.escape(p, quote=False)
        for p in split_citations(text, sources)
    )


def format_source(number: int, source: Source) -> str:
    """One line of the sources list: '[n] <a ...>title</a>'."""
    return (
        f'[{number}] <a href="{_attr(source.uri)}" target="_blank" rel="noopener noreferrer">'
        f"{_attr(source.title)}</a>"
    )
