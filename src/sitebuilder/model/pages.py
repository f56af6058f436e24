"""Page registry: the fixed set of pages the site is built from."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PageId(str, Enum):
    """Identity of every page in the site."""

    HOME = "home"
    ABOUT = "about"
    EXPERIENCE = "experience"
    PROJECTS = "projects"


@dataclass(frozen=True, slots=True)
class PageDescriptor:
    id: PageId
    title: str
    body_class: str  # empty string means no class attribute on <body>
    output_path: str  # posix path relative to the output root
    is_root: bool


# Registry order drives reporting order only
PAGES: tuple[PageDescriptor, ...] = (
    PageDescriptor(PageId.HOME, "Home", "", "index.html", True),
    PageDescriptor(PageId.ABOUT, "About Me", "", "about/index.html", False),
    PageDescriptor(PageId.EXPERIENCE, "Experience", "experience-page", "experience/index.html", False),
    PageDescriptor(PageId.PROJECTS, "Projects", "projects-page", "projects/index.html", False),
)

# Visible anchor text of each page's entry in the navbar and sidebar
NAV_LABELS: dict[PageId, str] = {
    PageId.HOME: "Home",
    PageId.ABOUT: "About Me",
    PageId.EXPERIENCE: "Experience",
    PageId.PROJECTS: "Projects",
}


def get_pages() -> tuple[PageDescriptor, ...]:
    return PAGES


def get_page(page_id: PageId | str) -> PageDescriptor:
    """Return the descriptor for ``page_id``.

    Raises:
        ValueError: If ``page_id`` is not a known page id
    """
    key = PageId(page_id)
    return next(page for page in PAGES if page.id is key)


__all__ = [
    "NAV_LABELS",
    "PAGES",
    "PageDescriptor",
    "PageId",
    "get_page",
    "get_pages",
]
