from __future__ import annotations

from pathlib import Path

import pytest

from sitebuilder.model.context import (
    Layout,
    clean_url_context,
    legacy_file_name,
    legacy_flat_context,
)
from sitebuilder.model.options import BuildOptions
from sitebuilder.model.pages import NAV_LABELS, PageId, get_page, get_pages


def test_registry_order_and_root() -> None:
    pages = get_pages()
    assert [p.id for p in pages] == [PageId.HOME, PageId.ABOUT, PageId.EXPERIENCE, PageId.PROJECTS]
    assert [p.is_root for p in pages] == [True, False, False, False]
    assert [p.output_path for p in pages] == [
        "index.html",
        "about/index.html",
        "experience/index.html",
        "projects/index.html",
    ]


def test_body_classes() -> None:
    assert get_page("home").body_class == ""
    assert get_page("about").body_class == ""
    assert get_page(PageId.EXPERIENCE).body_class == "experience-page"
    assert get_page(PageId.PROJECTS).body_class == "projects-page"


def test_get_page_unknown_id() -> None:
    with pytest.raises(ValueError):
        get_page("contact")


def test_every_page_has_a_nav_label() -> None:
    assert set(NAV_LABELS) == {p.id for p in get_pages()}


def test_clean_url_contexts() -> None:
    root = clean_url_context(get_page(PageId.HOME))
    nested = clean_url_context(get_page(PageId.ABOUT))
    assert root.layout is Layout.CLEAN_URL
    assert root.asset_prefix == ""
    assert root.stylesheet_path == "styles/main.css"
    assert root.script_path == "js/app.js"
    assert root.href_for(PageId.HOME) == "./"
    assert root.href_for(PageId.ABOUT) == "about/"

    assert nested.asset_prefix == "../"
    assert nested.stylesheet_path == "../styles/main.css"
    assert nested.script_path == "../js/app.js"
    assert nested.href_for(PageId.HOME) == "../"
    assert nested.href_for(PageId.PROJECTS) == "../projects/"


def test_legacy_context_keeps_prefix_for_home() -> None:
    legacy = legacy_flat_context()
    assert legacy.layout is Layout.LEGACY_FLAT
    assert legacy.asset_prefix == "../"
    assert legacy.href_for(PageId.HOME) == "home.html"
    assert legacy.href_for(PageId.EXPERIENCE) == "experience.html"
    assert legacy_file_name(get_page(PageId.HOME)) == "home.html"


def test_link_maps_are_read_only() -> None:
    ctx = clean_url_context(get_page(PageId.HOME))
    with pytest.raises(TypeError):
        ctx.link_map[PageId.HOME] = "elsewhere/"  # type: ignore[index]


def test_build_options_mirror_defaults(tmp_path: Path) -> None:
    opts = BuildOptions.from_root(tmp_path)
    assert opts.mirror_dir is None
    assert opts.components_dir == tmp_path / "components"
    assert opts.output_dir == tmp_path

    (tmp_path / "pages").mkdir()
    opts = BuildOptions.from_root(tmp_path)
    assert opts.mirror_dir == tmp_path / "pages"

    opts = BuildOptions.from_root(tmp_path, mirror=False, out_dir=tmp_path / "dist")
    assert opts.mirror_dir is None
    assert opts.output_dir == tmp_path / "dist"
    assert opts.to_dict()["mirror_dir"] is None
