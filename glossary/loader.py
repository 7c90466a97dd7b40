"""Reads term/definition blocks from a line source."""

from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from models import GlossaryCatalog


def _strip_terminator(line: str) -> str:
    return line.rstrip("\r\n")


def _is_blank(line: str) -> bool:
    return not line.strip()


def _has_inner_blank(lines: List[str]) -> bool:
    """True when a blank line sits between two non-blank lines."""
    filled = [index for index, line in enumerate(lines) if not _is_blank(line)]
    if not filled:
        return False
    return any(_is_blank(line) for line in lines[filled[0] : filled[-1] + 1])


def load_terms(source: Iterable[str]) -> Tuple[Dict[str, str], List[str]]:
    """Build the term→definition mapping and the terms in reading order.

    Blocks are a term line, a definition line and any continuation lines, which
    are appended to the definition without a separator until a blank line or the
    end of input. A source with no blank line between its first and last
    non-blank lines is read as strict term/definition pairs, since nothing else
    marks where one block ends; leading and trailing blank lines never change
    the layout.

    A line holding only whitespace counts as blank: it ends a block and is
    never appended to a definition or read as a term.

    A term left without a definition line (a blank line or the end of input
    follows it) is kept with an empty definition. A repeated term keeps its
    last definition and appears in the returned sequence once per occurrence.
    """
    lines = [_strip_terminator(line) for line in source]
    strict_pairs = not _has_inner_blank(lines)

    definitions: Dict[str, str] = {}
    terms: List[str] = []

    index = 0
    while index < len(lines):
        term = lines[index]
        index += 1
        if _is_blank(term):
            continue

        if index >= len(lines) or _is_blank(lines[index]):
            print(f"Glossary warning: term {term!r} has no definition; using an empty one")
            definition = ""
        else:
            parts = [lines[index]]
            index += 1
            if not strict_pairs:
                while index < len(lines) and not _is_blank(lines[index]):
                    parts.append(lines[index])
                    index += 1
            definition = "".join(parts)

        definitions[term] = definition
        terms.append(term)

    return definitions, terms


def load_catalog(source: Iterable[str]) -> GlossaryCatalog:
    definitions, terms = load_terms(source)
    return GlossaryCatalog(definitions=definitions, terms=terms)


def sort_terms(terms: Iterable[str]) -> List[str]:
    """Ordinal, case-sensitive, stable ordering of the raw term strings."""
    return sorted(terms)
