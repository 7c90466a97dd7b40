"""Cross-linking of definitions to the pages of other terms."""

from __future__ import annotations

import re
from typing import AbstractSet, Dict, Iterable, Iterator, List, MutableMapping, Optional, Tuple

from models import Segment, TokenKind
from tokenizer import Tokenizer


_ANCHOR_RE = re.compile(r"(?is)<a\b[^>]*>.*?</a>")


def _split_markup(definition: str) -> Iterator[Tuple[str, bool]]:
    """Yield (piece, is_markup) with existing anchor elements kept whole."""
    cursor = 0
    for match in _ANCHOR_RE.finditer(definition):
        if match.start() > cursor:
            yield definition[cursor : match.start()], False
        yield match.group(0), True
        cursor = match.end()
    if cursor < len(definition):
        yield definition[cursor:], False


def page_href(term: str) -> str:
    return f"{term}.html"


def link_definition(
    definition: str,
    keys: AbstractSet[str],
    term: Optional[str] = None,
    tokenizer: Optional[Tokenizer] = None,
    link_self: bool = False,
) -> List[Segment]:
    """Split one definition into plain and linked segments.

    A word token links when it equals a key exactly. The owning `term` is left
    unlinked unless `link_self` is set. Anchors already present in the
    definition pass through untouched.
    """
    tokenizer = tokenizer or Tokenizer()
    segments: List[Segment] = []
    plain: List[str] = []

    def flush():
        if plain:
            segments.append(Segment(text="".join(plain)))
            plain.clear()

    for piece, is_markup in _split_markup(definition):
        if is_markup:
            plain.append(piece)
            continue
        for token in tokenizer.tokens(piece):
            word = token.text
            if (
                token.kind == TokenKind.WORD
                and word in keys
                and (link_self or word != term)
            ):
                flush()
                segments.append(Segment(text=word, target=word))
            else:
                plain.append(word)

    flush()
    return segments


def render_segments(segments: Iterable[Segment]) -> str:
    parts = []
    for segment in segments:
        if segment.is_link:
            parts.append(f'<a href="{page_href(segment.target)}">{segment.text}</a>')
        else:
            parts.append(segment.text)
    return "".join(parts)


def count_links(segments: Iterable[Segment]) -> int:
    return sum(1 for segment in segments if segment.is_link)


def build_links(
    definitions: Dict[str, str],
    terms: Iterable[str],
    tokenizer: Optional[Tokenizer] = None,
    link_self: bool = False,
) -> Dict[str, List[Segment]]:
    """Link every distinct term of `terms` against a snapshot of `definitions`."""
    tokenizer = tokenizer or Tokenizer()
    snapshot = dict(definitions)
    keys = frozenset(snapshot)

    linked: Dict[str, List[Segment]] = {}
    for term in terms:
        if term in linked or term not in snapshot:
            continue
        linked[term] = link_definition(
            snapshot[term], keys, term=term, tokenizer=tokenizer, link_self=link_self
        )
    return linked


def link_definitions(
    definitions: MutableMapping[str, str],
    terms: Iterable[str],
    tokenizer: Optional[Tokenizer] = None,
    link_self: bool = False,
) -> int:
    """Rewrite definitions in place with links to other terms.

    Returns the number of links inserted.
    """
    linked = build_links(definitions, terms, tokenizer=tokenizer, link_self=link_self)
    for term, segments in linked.items():
        definitions[term] = render_segments(segments)
    return sum(count_links(segments) for segments in linked.values())
