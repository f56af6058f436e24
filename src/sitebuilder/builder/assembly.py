from __future__ import annotations

from dataclasses import dataclass, replace

from sitebuilder.builder.templating import Templates, create_environment
from sitebuilder.model.content import ContentBlock, Fragments
from sitebuilder.model.context import OutputContext
from sitebuilder.model.pages import PageDescriptor
from sitebuilder.transform.assets import prefix_assets
from sitebuilder.transform.links import render_nav


@dataclass(frozen=True, slots=True)
class RenderedPage:
    """A finished document plus the fragments it was built from."""

    fragments: Fragments
    html: str


def assemble(
    descriptor: PageDescriptor,
    content: ContentBlock,
    navbar: str,
    sidebar: str,
    wave: str,
    context: OutputContext,
    templates: Templates | None = None,
) -> str:
    """Compose one complete document from already rewritten pieces.

    Pieces are concatenated in a fixed order (skip link, navbar, sidebar,
    content, wave) and inserted verbatim; nothing is parsed or validated.
    """

    templates = templates or create_environment()
    return templates.render_page(
        {
            "title": descriptor.title,
            "body_class": descriptor.body_class,
            "stylesheet_path": context.stylesheet_path,
            "script_path": context.script_path,
            "navbar": navbar,
            "sidebar": sidebar,
            "content": content.html,
            "wave": wave,
        }
    )


def render_fragments(
    descriptor: PageDescriptor,
    fragments: Fragments,
    context: OutputContext,
) -> Fragments:
    """Rewrite the shared fragments for ``descriptor`` in ``context``."""
    prefix = context.asset_prefix
    return Fragments(
        navbar=prefix_assets(render_nav(fragments.navbar, context, descriptor.id), prefix),
        sidebar=prefix_assets(render_nav(fragments.sidebar, context, descriptor.id), prefix),
        wave=prefix_assets(fragments.wave, prefix),
    )


def place_content(content: ContentBlock, context: OutputContext) -> ContentBlock:
    """Prefix the canonical asset references of ``content`` for ``context``."""
    return replace(content, html=prefix_assets(content.html, context.asset_prefix))


def render_page(
    descriptor: PageDescriptor,
    content: ContentBlock,
    fragments: Fragments,
    context: OutputContext,
    templates: Templates | None = None,
) -> RenderedPage:
    """Rewrite every piece for ``context`` and assemble the document."""
    rendered = render_fragments(descriptor, fragments, context)
    html = assemble(
        descriptor,
        place_content(content, context),
        rendered.navbar,
        rendered.sidebar,
        rendered.wave,
        context,
        templates,
    )
    return RenderedPage(rendered, html)


__all__ = [
    "RenderedPage",
    "assemble",
    "place_content",
    "render_fragments",
    "render_page",
]
