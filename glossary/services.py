"""Service layer for turning a glossary text file into linked HTML pages."""

from __future__ import annotations

from typing import Iterable, List

from linker import link_definitions
from loader import load_catalog, sort_terms
from models import BuildSummaryPayload, GlossaryCatalog, GlossaryConfig
from storage import PageStorage, open_source
from tokenizer import Tokenizer


class GlossaryService:
    """Runs load, sort, link, page output and index output in that order."""

    def __init__(
        self,
        config: GlossaryConfig | None = None,
        storage: PageStorage | None = None,
        tokenizer: Tokenizer | None = None,
    ):
        self.config = config or GlossaryConfig()
        if storage is None:
            if not self.config.output_dir:
                raise ValueError("Must provide an output directory or a storage")
            storage = PageStorage(self.config.output_dir, encoding=self.config.encoding)
        self.storage = storage
        self.tokenizer = tokenizer or Tokenizer()

    def load(self, source: Iterable[str]) -> GlossaryCatalog:
        catalog = load_catalog(source)
        catalog.terms = sort_terms(catalog.terms)
        return catalog

    def link(self, catalog: GlossaryCatalog) -> int:
        """Rewrite the catalog definitions with links; returns the number of links."""
        return link_definitions(
            catalog.definitions,
            catalog.terms,
            tokenizer=self.tokenizer,
            link_self=self.config.link_self_references,
        )

    def build(self, source: Iterable[str]) -> BuildSummaryPayload:
        catalog = self.load(source)
        print(f"Loaded {len(catalog.terms)} terms")

        link_count = self.link(catalog)
        print(f"Linked {link_count} term references")

        self.storage.ensure_layout()
        pages: List[str] = []
        # Duplicates would rewrite an identical page, so each term is emitted once.
        for term in catalog.distinct_terms():
            path = self.storage.write_term_page(term, catalog.definitions[term])
            pages.append(path.name)

        index_path = self.storage.write_index(catalog.terms, title=self.config.index_title)
        print(f"Wrote {len(pages)} pages and index to {self.storage.pages_dir}")

        return BuildSummaryPayload(
            term_count=len(catalog.terms),
            distinct_term_count=len(pages),
            page_count=len(pages),
            link_count=link_count,
            output_dir=str(self.storage.pages_dir),
            index_path=str(index_path),
            pages=pages,
        )

    def build_from_file(self, input_path: str | None = None) -> BuildSummaryPayload:
        path = input_path or self.config.input_path
        if not path:
            raise ValueError("Must provide an input file")
        with open_source(path, encoding=self.config.encoding) as source:
            return self.build(source)
