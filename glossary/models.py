"""Shared models for the glossary builder."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


SEPARATORS = frozenset(" !'.,/:;?")

_TRUTHY = {"1", "true", "yes", "on"}


class TokenKind(str, Enum):
    WORD = "word"
    SEPARATOR = "separator"


@dataclass(frozen=True)
class Token:
    """A maximal run of word or separator characters."""

    text: str
    kind: TokenKind
    start: int = 0


@dataclass(frozen=True)
class Segment:
    """Piece of a linked definition; `target` names the linked term, if any."""

    text: str
    target: Optional[str] = None

    @property
    def is_link(self) -> bool:
        return self.target is not None


@dataclass
class GlossaryCatalog:
    """Terms in reading order plus their definitions."""

    definitions: Dict[str, str] = field(default_factory=dict)
    terms: List[str] = field(default_factory=list)

    def distinct_terms(self) -> List[str]:
        seen = set()
        ordered: List[str] = []
        for term in self.terms:
            if term not in seen:
                seen.add(term)
                ordered.append(term)
        return ordered


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class GlossaryConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    input_path: Optional[str] = Field(default=None, alias="input_path")
    output_dir: Optional[str] = Field(default=None, alias="output_dir")
    index_title: str = Field(default="Glossary", min_length=1)
    link_self_references: bool = Field(default=False, alias="link_self_references")
    encoding: str = "utf-8"

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None) -> "GlossaryConfig":
        env = os.environ if environ is None else environ
        values = {}
        if env.get("GLOSSARY_INPUT"):
            values["input_path"] = env["GLOSSARY_INPUT"]
        if env.get("GLOSSARY_OUTPUT_DIR"):
            values["output_dir"] = env["GLOSSARY_OUTPUT_DIR"]
        if env.get("GLOSSARY_INDEX_TITLE"):
            values["index_title"] = env["GLOSSARY_INDEX_TITLE"]
        if env.get("GLOSSARY_ENCODING"):
            values["encoding"] = env["GLOSSARY_ENCODING"]
        if "GLOSSARY_LINK_SELF" in env:
            values["link_self_references"] = env["GLOSSARY_LINK_SELF"].strip().lower() in _TRUTHY
        return cls(**values)


# ---------------------------------------------------------------------------
# Build results
# ---------------------------------------------------------------------------


class BuildSummaryPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    term_count: int = Field(alias="term_count", ge=0)
    distinct_term_count: int = Field(alias="distinct_term_count", ge=0)
    page_count: int = Field(alias="page_count", ge=0)
    link_count: int = Field(alias="link_count", ge=0)
    output_dir: str = Field(alias="output_dir")
    index_path: str = Field(alias="index_path")
    pages: List[str] = Field(default_factory=list)
