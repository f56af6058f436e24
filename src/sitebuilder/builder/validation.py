"""Consistency checks for rendered pages.

Each check returns a list of human-readable issue messages; an empty list
means the page is consistent. The driver runs them on every planned page
before anything is written.
"""

from __future__ import annotations

from sitebuilder.model.context import OutputContext
from sitebuilder.transform.assets import iter_asset_prefixes
from sitebuilder.transform.links import current_link_hrefs

PAGE_MARKER = "data-page="


def validate_nav(html: str, expected_href: str, where: str) -> list[str]:
    """Exactly one anchor is current and it points at ``expected_href``."""
    issues: list[str] = []
    hrefs = current_link_hrefs(html)
    if len(hrefs) != 1:
        issues.append(f"{where}: expected exactly one current link, found {len(hrefs)}")
    for href in hrefs:
        if href != expected_href:
            issues.append(f"{where}: current link points at {href!r}, expected {expected_href!r}")
    return issues


def validate_document(html: str, context: OutputContext, where: str) -> list[str]:
    """No stray page markers, and every asset reference carries exactly the context prefix."""
    issues: list[str] = []
    if PAGE_MARKER in html:
        issues.append(f"{where}: stray {PAGE_MARKER!r} marker left in output")
    bad = sorted(
        {ref for prefix, ref in iter_asset_prefixes(html) if prefix != context.asset_prefix}
    )
    for ref in bad:
        issues.append(
            f"{where}: asset reference {ref!r} does not match prefix {context.asset_prefix!r}"
        )
    return issues


__all__ = [
    "PAGE_MARKER",
    "validate_document",
    "validate_nav",
]
