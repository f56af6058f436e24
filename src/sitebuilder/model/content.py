"""Content data structures: shared fragments and extracted page content."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class Fragments:
    """The three shared fragments, loaded once per build and never mutated."""

    navbar: str
    sidebar: str
    wave: str


@dataclass(frozen=True, slots=True)
class ContentBlock:
    # Asset references are canonical root-relative ("img/...", "files/...")
    html: str
    found_marker: bool = True
    source: Path | None = None
