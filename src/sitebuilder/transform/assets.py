"""Asset path rewriting: canonical root-relative form and per-depth prefixes.

Asset references are ``src``/``href``/``poster`` attribute values, every
candidate URL of a ``srcset`` list, and CSS ``url(...)`` targets that start
with one of the asset directories (``img/``, ``styles/``, ``js/``,
``files/``). Page content is first brought to the canonical form (no leading
``../``) and only then prefixed for the location of the page being written.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator

ASSET_DIRS = ("img", "styles", "js", "files")

_LEAD = r"""(?P<lead>\b(?:src|href|poster)\s*=\s*["']|url\(\s*["']?)"""
_DIRS = "(?:" + "|".join(ASSET_DIRS) + ")/"

# Only matches references with nothing between the quote and the asset dir
_UNPREFIXED_RE = re.compile(_LEAD + "(?P<path>" + _DIRS + ")", re.IGNORECASE)
_RELATIVE_RE = re.compile(_LEAD + r"(?:\.\.?/)+(?P<path>" + _DIRS + ")", re.IGNORECASE)
_ANY_RE = re.compile(_LEAD + r"(?P<up>(?:\.\.?/)*)(?P<path>" + _DIRS + ")", re.IGNORECASE)

_SRCSET_RE = re.compile(
    r"""(?P<lead>\bsrcset\s*=\s*)(?P<q>["'])(?P<value>.*?)(?P=q)""",
    re.IGNORECASE | re.DOTALL,
)
# One candidate URL: start of the list or after a comma
_CANDIDATE_RE = re.compile(
    r"(?P<sep>(?:^|,)\s*)(?P<up>(?:\.\.?/)*)(?P<path>" + _DIRS + ")",
    re.IGNORECASE,
)


def _sub_srcset(html: str, repl: Callable[[re.Match[str]], str]) -> str:
    def _repl(m: re.Match[str]) -> str:
        value = _CANDIDATE_RE.sub(repl, m.group("value"))
        return m.group("lead") + m.group("q") + value + m.group("q")

    return _SRCSET_RE.sub(_repl, html)


def normalize_asset_paths(html: str) -> str:
    """Strip leading ``../`` and ``./`` segments from asset references.

    ``src="../img/a.png"`` and ``src="../../img/a.png"`` both become
    ``src="img/a.png"``; each ``srcset`` candidate is treated the same way.
    """
    html = _RELATIVE_RE.sub(lambda m: m.group("lead") + m.group("path"), html)
    return _sub_srcset(html, lambda m: m.group("sep") + m.group("path"))


def prefix_assets(html: str, prefix: str) -> str:
    """Prefix every unprefixed asset reference with ``prefix``.

    - ``src="img/x.svg"`` -> ``src="../img/x.svg"`` for ``prefix="../"``
    - Already prefixed references are left alone, so nothing is prefixed twice
    - An empty prefix returns ``html`` unchanged
    """
    if not prefix:
        return html

    def _candidate(m: re.Match[str]) -> str:
        if m.group("up"):
            return m.group(0)
        return m.group("sep") + prefix + m.group("path")

    html = _UNPREFIXED_RE.sub(lambda m: m.group("lead") + prefix + m.group("path"), html)
    return _sub_srcset(html, _candidate)


def iter_asset_prefixes(html: str) -> Iterator[tuple[str, str]]:
    """Yield ``(prefix, reference)`` for every asset reference in ``html``, in document order."""
    found = [
        (m.start(), m.group("up"), m.group(0)[len(m.group("lead")) :])
        for m in _ANY_RE.finditer(html)
    ]
    for s in _SRCSET_RE.finditer(html):
        offset = s.start("value")
        for c in _CANDIDATE_RE.finditer(s.group("value")):
            found.append((offset + c.start("up"), c.group("up"), c.group("up") + c.group("path")))
    for _, up, reference in sorted(found):
        yield up, reference


__all__ = [
    "ASSET_DIRS",
    "iter_asset_prefixes",
    "normalize_asset_paths",
    "prefix_assets",
]
