"""Filesystem-backed input and output for the glossary builder."""

from __future__ import annotations

import os
from contextlib import contextmanager
from pathlib import Path
from typing import Iterable, Iterator, TextIO, Union

from linker import page_href
from pages import INDEX_PAGE, emit_index, emit_term_page


@contextmanager
def open_source(path: Union[str, Path], encoding: str = "utf-8") -> Iterator[TextIO]:
    """Open the glossary text file for line-by-line reading."""
    source = Path(path).expanduser()
    if not source.is_file():
        raise FileNotFoundError(f"Input file not found: {path}")
    with open(source, "r", encoding=encoding, newline="") as handle:
        yield handle


class PageStorage:
    """Output directory with one HTML page per term plus the index page."""

    def __init__(self, root: Union[str, Path], encoding: str = "utf-8"):
        self.pages_dir = Path(root).expanduser()
        self.encoding = encoding

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def ensure_layout(self) -> Path:
        self.pages_dir.mkdir(parents=True, exist_ok=True)
        return self.pages_dir

    @property
    def index_path(self) -> Path:
        return self.pages_dir / INDEX_PAGE

    def page_path(self, term: str) -> Path:
        return self.pages_dir / self._file_name(term)

    @contextmanager
    def open_page(self, file_name: str) -> Iterator[TextIO]:
        path = self.pages_dir / file_name
        with open(path, "w", encoding=self.encoding, newline="\n") as handle:
            yield handle

    def write_term_page(self, term: str, definition: str) -> Path:
        path = self.page_path(term)
        with self.open_page(path.name) as sink:
            emit_term_page(term, definition, sink)
        return path

    def write_index(self, sorted_terms: Iterable[str], title: str = "Glossary") -> Path:
        with self.open_page(INDEX_PAGE) as sink:
            emit_index(sorted_terms, sink, title=title)
        return self.index_path

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _file_name(self, term: str) -> str:
        if not term or term in (".", ".."):
            raise ValueError(f"Term cannot be used as a page name: {term!r}")
        for forbidden in {"/", os.sep, "\x00"}:
            if forbidden in term:
                raise ValueError(f"Term cannot be used as a page name: {term!r}")
        return page_href(term)
