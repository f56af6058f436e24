"""Navigation link rewriting for the shared navbar and sidebar fragments.

Every function here is pure: it takes fragment HTML and returns new HTML.
The composition used per page is::

    mark_current(rewrite_nav_links(strip_page_markers(html), link_map), href)

Hrefs are rewritten before the current-page marker is assigned, and the
marker is matched on the literal rewritten href rather than page identity.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping

from sitebuilder.model.context import OutputContext
from sitebuilder.model.pages import NAV_LABELS, PageId

logger = logging.getLogger(__name__)

_PAGE_MARKER_RE = re.compile(r"""\s*\bdata-page\s*=\s*(?:"[^"]*"|'[^']*')""", re.IGNORECASE)

_ANCHOR_RE = re.compile(r"<a\b(?P<attrs>[^>]*)>(?P<label>.*?)</a>", re.IGNORECASE | re.DOTALL)
_OPEN_ANCHOR_RE = re.compile(r"<a\b[^>]*>", re.IGNORECASE)
_HREF_RE = re.compile(r"""\shref\s*=\s*(?:"(?P<dq>[^"]*)"|'(?P<sq>[^']*)')""", re.IGNORECASE)
_ARIA_CURRENT_RE = re.compile(r"""\s*\baria-current\s*=\s*(?:"[^"]*"|'[^']*')""", re.IGNORECASE)

ARIA_CURRENT = ' aria-current="page"'


def _href_value(m: re.Match[str]) -> str:
    value = m.group("dq")
    return value if value is not None else m.group("sq")


def strip_page_markers(html: str) -> str:
    """Remove every ``data-page="..."`` attribute. Idempotent."""
    return _PAGE_MARKER_RE.sub("", html)


def rewrite_nav_links(
    html: str,
    link_map: Mapping[PageId, str],
    labels: Mapping[PageId, str] = NAV_LABELS,
) -> str:
    """Point each labelled navigation anchor at ``link_map[page]``.

    Anchors are located by their visible text (``Home``, ``About Me``, ...)
    and get their href replaced whatever it was before; anchors without an
    href gain one. Other attributes survive, except a stale ``aria-current``.
    A label with no matching anchor leaves the fragment untouched.
    """

    targets = {labels[pid]: href for pid, href in link_map.items() if pid in labels}
    seen: set[str] = set()

    def _repl(m: re.Match[str]) -> str:
        label = m.group("label")
        href = targets.get(label.strip())
        if href is None:
            return m.group(0)
        seen.add(label.strip())
        attrs = _ARIA_CURRENT_RE.sub("", m.group("attrs"))
        new_href = f' href="{href}"'
        if _HREF_RE.search(attrs):
            attrs = _HREF_RE.sub(lambda _m: new_href, attrs, count=1)
        else:
            attrs = new_href + attrs
        return f"<a{attrs}>{label}</a>"

    out = _ANCHOR_RE.sub(_repl, html)
    for label in sorted(set(targets) - seen):
        logger.debug("No navigation anchor labelled %r; left untouched", label)
    return out


def mark_current(html: str, current_href: str) -> str:
    """Add ``aria-current="page"`` to anchors whose href is ``current_href``.

    Returns the fragment unchanged when nothing matches.
    """

    def _repl(m: re.Match[str]) -> str:
        tag = m.group(0)
        href = _HREF_RE.search(tag)
        if href is None or _href_value(href) != current_href:
            return tag
        if _ARIA_CURRENT_RE.search(tag):
            return tag
        return tag[: href.end()] + ARIA_CURRENT + tag[href.end() :]

    return _OPEN_ANCHOR_RE.sub(_repl, html)


def render_nav(
    html: str,
    context: OutputContext,
    current_page: PageId,
    labels: Mapping[PageId, str] = NAV_LABELS,
) -> str:
    """Rewrite a navbar or sidebar fragment for one page in one context."""
    out = strip_page_markers(html)
    out = rewrite_nav_links(out, context.link_map, labels)
    return mark_current(out, context.href_for(current_page))


def current_link_hrefs(html: str) -> list[str]:
    """Return the href of every anchor carrying ``aria-current="page"``."""
    hrefs: list[str] = []
    for m in _OPEN_ANCHOR_RE.finditer(html):
        tag = m.group(0)
        if 'aria-current="page"' not in tag:
            continue
        href = _HREF_RE.search(tag)
        hrefs.append(_href_value(href) if href is not None else "")
    return hrefs


__all__ = [
    "ARIA_CURRENT",
    "current_link_hrefs",
    "mark_current",
    "render_nav",
    "rewrite_nav_links",
    "strip_page_markers",
]
