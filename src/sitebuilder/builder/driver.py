"""Build driver: load inputs once, plan every page in memory, then write.

Every input is read and every page rendered and validated before the first
file is written, so a missing fragment or page never leaves a half-updated
site behind. The legacy mirror pass reuses the fragments and extracted
content of the clean-URL pass; only the output context differs.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from sitebuilder.builder.assembly import render_page
from sitebuilder.builder.output import atomic_write_text
from sitebuilder.builder.templating import Templates, create_environment
from sitebuilder.builder.validation import validate_document, validate_nav
from sitebuilder.ingest.content_extractor import MAIN_ID, extract_main
from sitebuilder.model.content import ContentBlock, Fragments
from sitebuilder.model.context import (
    OutputContext,
    clean_url_context,
    legacy_file_name,
    legacy_flat_context,
)
from sitebuilder.model.options import BuildOptions
from sitebuilder.model.pages import PageDescriptor, PageId, get_pages

logger = logging.getLogger(__name__)

WrittenCallback = Callable[[str], None] | None

FRAGMENT_FILES = {
    "navbar": "navbar.html",
    "sidebar": "sidebar.html",
    "wave": "wave.html",
}


class BuildError(RuntimeError):
    pass


class MissingInputError(BuildError):
    """A required fragment or page content file does not exist."""

    def __init__(self, path: Path, role: str) -> None:
        super().__init__(f"Missing {role}: {path}")
        self.path = path
        self.role = role


class ValidationError(BuildError):
    def __init__(self, issues: list[str]) -> None:
        super().__init__(f"{len(issues)} consistency issue(s) found; nothing was written")
        self.issues = issues


@dataclass(slots=True)
class PlannedPage:
    descriptor: PageDescriptor
    context: OutputContext
    target: Path
    html: str
    issues: list[str] = field(default_factory=list)


@dataclass(slots=True)
class BuildReport:
    written: list[Path] = field(default_factory=list)
    issues: list[str] = field(default_factory=list)


def _read_input(path: Path, role: str) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise MissingInputError(path, role) from exc
    except UnicodeDecodeError as exc:
        raise BuildError(f"Cannot decode {role} {path}: {exc}") from exc
    except OSError as exc:
        raise BuildError(f"Cannot read {role} {path}: {exc}") from exc


def display_path(path: Path, root: Path) -> str:
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return str(path)


def load_fragments(components_dir: Path) -> Fragments:
    """Read the three shared fragments."""
    texts = {
        name: _read_input(components_dir / filename, f"{name} fragment")
        for name, filename in FRAGMENT_FILES.items()
    }
    return Fragments(**texts)


def resolve_source(options: BuildOptions, descriptor: PageDescriptor) -> Path:
    """Where the content fragment of ``descriptor`` is read from.

    ``pages/<id>.html`` when the pages directory exists, otherwise the page's
    previously generated clean-URL output.
    """
    if options.pages_dir.is_dir():
        return options.pages_dir / f"{descriptor.id.value}.html"
    return options.output_dir / descriptor.output_path


def load_contents(options: BuildOptions) -> dict[PageId, ContentBlock]:
    """Read and extract the content of every registered page."""
    contents: dict[PageId, ContentBlock] = {}
    for descriptor in get_pages():
        source = resolve_source(options, descriptor)
        raw = _read_input(source, f"content for page '{descriptor.id.value}'")
        contents[descriptor.id] = extract_main(raw, source=source)
        logger.debug("Extracted content for %s from %s", descriptor.id.value, source)
    return contents


def _plan_page(
    descriptor: PageDescriptor,
    content: ContentBlock,
    fragments: Fragments,
    context: OutputContext,
    target: Path,
    where: str,
    templates: Templates,
) -> PlannedPage:
    rendered = render_page(descriptor, content, fragments, context, templates)
    expected = context.href_for(descriptor.id)
    issues = [
        *validate_nav(rendered.fragments.navbar, expected, f"{where} navbar"),
        *validate_nav(rendered.fragments.sidebar, expected, f"{where} sidebar"),
        *validate_document(rendered.html, context, where),
    ]
    return PlannedPage(descriptor, context, target, rendered.html, issues)


def _overwrites_unmarked_source(content: ContentBlock, target: Path) -> bool:
    # The rendered document has no main marker of its own to extract from.
    return not content.found_marker and content.source == target


def plan_build(
    options: BuildOptions,
    fragments: Fragments,
    contents: dict[PageId, ContentBlock],
    templates: Templates | None = None,
) -> list[PlannedPage]:
    """Render every (page, context) pair in memory, clean-URL pass first.

    A page whose content had no main marker is never written over its own
    source file; the next build would read the whole document back as
    content.
    """
    templates = templates or create_environment(options.templates_dir)
    jobs = [
        (descriptor, clean_url_context(descriptor), options.output_dir / descriptor.output_path)
        for descriptor in get_pages()
    ]
    if options.mirror_dir is not None:
        legacy = legacy_flat_context()
        jobs.extend(
            (descriptor, legacy, options.mirror_dir / legacy_file_name(descriptor))
            for descriptor in get_pages()
        )

    planned: list[PlannedPage] = []
    for descriptor, context, target in jobs:
        content = contents[descriptor.id]
        where = display_path(target, options.root)
        if _overwrites_unmarked_source(content, target):
            logger.warning(
                "%s has no <main id=%r>; not writing it over its own source", where, MAIN_ID
            )
            continue
        planned.append(
            _plan_page(descriptor, content, fragments, context, target, where, templates)
        )
    return planned


def run_build(options: BuildOptions, on_written: WrittenCallback = None) -> BuildReport:
    """Rebuild the whole site.

    Raises:
        MissingInputError: A fragment or page content file does not exist
        ValidationError: ``options.strict`` is set and a page is inconsistent
        BuildError: Any other read failure
    """
    logger.info("Build options: %s", options.to_dict())
    fragments = load_fragments(options.components_dir)
    contents = load_contents(options)
    planned = plan_build(options, fragments, contents)

    report = BuildReport()
    for page in planned:
        for issue in page.issues:
            logger.warning(issue)
            report.issues.append(issue)
    if report.issues and options.strict:
        raise ValidationError(report.issues)

    for page in planned:
        atomic_write_text(page.target, page.html)
        report.written.append(page.target)
        logger.debug("Wrote %s (%s)", page.target, page.context.layout.value)
        if on_written is not None:
            on_written(display_path(page.target, options.root))

    logger.info("Wrote %d file(s)", len(report.written))
    return report


__all__ = [
    "BuildError",
    "BuildReport",
    "FRAGMENT_FILES",
    "MissingInputError",
    "PlannedPage",
    "ValidationError",
    "display_path",
    "load_contents",
    "load_fragments",
    "plan_build",
    "resolve_source",
    "run_build",
]
