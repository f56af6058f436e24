"""Output contexts: where a rendered page sits and how it links to the rest.

Two layouts are produced from the same content:

- clean-URL: ``index.html`` at the root, every other page as ``<id>/index.html``
- legacy-flat: sibling ``<id>.html`` files in a mirror directory one level
  below the root (home is ``home.html`` there, never ``index.html``)
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from sitebuilder.model.pages import PageDescriptor, PageId


class Layout(Enum):
    CLEAN_URL = "clean-url"
    LEGACY_FLAT = "legacy-flat"


@dataclass(frozen=True, slots=True)
class OutputContext:
    layout: Layout
    link_map: Mapping[PageId, str]
    asset_prefix: str  # "" at the root, "../" one level down
    stylesheet_path: str
    script_path: str

    def href_for(self, page_id: PageId) -> str:
        return self.link_map[page_id]


ROOT_LINKS: Mapping[PageId, str] = MappingProxyType(
    {
        PageId.HOME: "./",
        PageId.ABOUT: "about/",
        PageId.EXPERIENCE: "experience/",
        PageId.PROJECTS: "projects/",
    }
)

FOLDER_LINKS: Mapping[PageId, str] = MappingProxyType(
    {
        PageId.HOME: "../",
        PageId.ABOUT: "../about/",
        PageId.EXPERIENCE: "../experience/",
        PageId.PROJECTS: "../projects/",
    }
)

LEGACY_LINKS: Mapping[PageId, str] = MappingProxyType(
    {
        PageId.HOME: "home.html",
        PageId.ABOUT: "about.html",
        PageId.EXPERIENCE: "experience.html",
        PageId.PROJECTS: "projects.html",
    }
)

STYLESHEET = "styles/main.css"
SCRIPT = "js/app.js"


def _context(layout: Layout, link_map: Mapping[PageId, str], prefix: str) -> OutputContext:
    return OutputContext(
        layout=layout,
        link_map=link_map,
        asset_prefix=prefix,
        stylesheet_path=prefix + STYLESHEET,
        script_path=prefix + SCRIPT,
    )


def clean_url_context(page: PageDescriptor) -> OutputContext:
    """Context for ``page`` at its clean-URL location."""
    if page.is_root:
        return _context(Layout.CLEAN_URL, ROOT_LINKS, "")
    return _context(Layout.CLEAN_URL, FOLDER_LINKS, "../")


def legacy_flat_context() -> OutputContext:
    """Context shared by every page of the legacy mirror.

    The mirror always lives one level below the site root, so home gets the
    ``../`` asset prefix as well.
    """
    return _context(Layout.LEGACY_FLAT, LEGACY_LINKS, "../")


def legacy_file_name(page: PageDescriptor) -> str:
    return f"{page.id.value}.html"


__all__ = [
    "FOLDER_LINKS",
    "LEGACY_LINKS",
    "Layout",
    "OutputContext",
    "ROOT_LINKS",
    "clean_url_context",
    "legacy_file_name",
    "legacy_flat_context",
]
