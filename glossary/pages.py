"""HTML rendering for term pages and the glossary index."""

from __future__ import annotations

from typing import Iterable, List, TextIO

from linker import page_href


INDEX_PAGE = "index.html"


def write_lines(sink: TextIO, lines: Iterable[str]) -> None:
    for line in lines:
        sink.write(line + "\n")


def render_term_page(term: str, definition: str) -> List[str]:
    return [
        "<html>",
        "<head>",
        f"<title>{term}</title>",
        "</head>",
        "<body>",
        f'<h2><b><i><font color = "red">{term}</font></i></b></h2>',
        f"<blockquote>{definition}</blockquote>",
        "<hr />",
        f'<p>Return to <a href="{INDEX_PAGE}">index</a></p>',
        "</body>",
        "</html>",
    ]


def emit_term_page(term: str, definition: str, sink: TextIO) -> None:
    """Write the standalone page of one term; `definition` is already linked."""
    write_lines(sink, render_term_page(term, definition))


def render_index(sorted_terms: Iterable[str], title: str = "Glossary") -> List[str]:
    lines = [
        "<html>",
        "<head>",
        f"<title>{title}</title>",
        "</head>",
        "<body>",
        f"<h2>{title}</h2>",
        "<hr />",
        "<h3>Index</h3>",
        "<ul>",
    ]
    for term in sorted_terms:
        lines.append(f'<li><a href="{page_href(term)}">{term}</a></li>')
    lines.extend(["</ul>", "</body>", "</html>"])
    return lines


def emit_index(sorted_terms: Iterable[str], sink: TextIO, title: str = "Glossary") -> None:
    """Write the index page listing `sorted_terms` in the order given."""
    write_lines(sink, render_index(sorted_terms, title=title))
