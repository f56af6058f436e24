from __future__ import annotations

import logging
import re
from pathlib import Path

from sitebuilder.model.content import ContentBlock
from sitebuilder.transform.assets import normalize_asset_paths

logger = logging.getLogger(__name__)

MAIN_ID = "main-content"

_MAIN_RE = re.compile(
    r"<main\s+id=(['\"])" + re.escape(MAIN_ID) + r"\1[^>]*>.*?</main>",
    re.IGNORECASE | re.DOTALL,
)


def extract_main(raw_html: str, source: Path | None = None) -> ContentBlock:
    """Isolate the ``<main id="main-content">`` region of a page fragment.

    - Returns the first such region verbatim (non-greedy up to ``</main>``)
    - Falls back to the whole input when the marker is absent
    - Asset references are normalized to the canonical root-relative form,
      whatever depth the source fragment was authored at
    """

    m = _MAIN_RE.search(raw_html)
    if m is None:
        logger.warning(
            "No <main id=%r> found in %s; using the whole fragment as content.",
            MAIN_ID,
            source if source is not None else "page fragment",
        )
        region = raw_html
    else:
        region = m.group(0)

    return ContentBlock(
        html=normalize_asset_paths(region),
        found_marker=m is not None,
        source=source,
    )


def read_content(path: Path) -> ContentBlock:
    """Read a page fragment from disk and extract its content block."""
    return extract_main(path.read_text(encoding="utf-8"), source=path)


__all__ = [
    "MAIN_ID",
    "extract_main",
    "read_content",
]
