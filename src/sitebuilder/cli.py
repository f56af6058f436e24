"""CLI interface for sitebuilder."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from sitebuilder import __version__
from sitebuilder.builder.driver import BuildError, ValidationError, run_build
from sitebuilder.builder.templating import PAGE_TEMPLATE, write_default_templates
from sitebuilder.model.options import BuildOptions

app = typer.Typer(
    name="sitebuilder",
    help="Assemble the portfolio site from shared components and page content.",
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _build(
    root: Path,
    out_dir: Path | None,
    mirror: bool | None,
    templates_dir: Path | None,
    strict: bool,
) -> None:
    options = BuildOptions.from_root(
        root,
        out_dir=out_dir,
        mirror=mirror,
        templates_dir=templates_dir,
        strict=strict,
    )
    try:
        report = run_build(options, on_written=lambda name: typer.echo(f"Wrote {name}"))
    except ValidationError as exc:
        for msg in exc.issues:
            typer.echo(f"⚠️  {msg}", err=True)
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1) from exc
    except BuildError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1) from exc

    for msg in report.issues:
        typer.echo(f"⚠️  {msg}", err=True)


@app.command()
def build(
    root: Annotated[
        Path,
        typer.Option(
            "--root",
            help="Site root holding components/ and pages/ (default: current directory)",
            exists=True,
            file_okay=False,
            dir_okay=True,
        ),
    ] = Path("."),
    out_dir: Annotated[
        Path | None,
        typer.Option(
            "--out-dir",
            help="Output directory for clean-URL pages (default: the site root)",
        ),
    ] = None,
    mirror: Annotated[
        bool | None,
        typer.Option(
            "--mirror/--no-mirror",
            help="Write the legacy flat mirror to pages/ (default: only if pages/ exists)",
        ),
    ] = None,
    templates_dir: Annotated[
        Path | None,
        typer.Option(
            "--templates-dir",
            help=f"Directory whose {PAGE_TEMPLATE} overrides the built-in document shell",
        ),
    ] = None,
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Fail without writing when a page is inconsistent"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log every step"),
    ] = False,
) -> None:
    """
    Rebuild every page of the site.

    Prints one line per file written. Any missing component or page content
    aborts the build before anything is written.

    Examples:

        # Rebuild the site in the current directory
        sitebuilder

        # Rebuild another checkout without touching pages/
        sitebuilder build --root ../site --no-mirror
    """
    _configure_logging(verbose)
    _build(root, out_dir, mirror, templates_dir, strict)


@app.command("init-templates")
def init_templates(
    target: Annotated[
        Path,
        typer.Argument(help="Directory to write the built-in page template to"),
    ],
) -> None:
    """Write the built-in document shell so it can be customised."""
    write_default_templates(target)
    typer.echo(f"Wrote {target / PAGE_TEMPLATE}")


@app.command()
def version() -> None:
    """Show version information."""
    typer.echo(f"sitebuilder version {__version__}")


def version_callback(value: bool) -> None:
    """Version callback for --version flag."""
    if value:
        typer.echo(f"sitebuilder version {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = None,
) -> None:
    """
    sitebuilder - Assemble the portfolio site from shared components.

    Run without a command to rebuild the site in the current directory:
    index.html plus about/, experience/ and projects/ clean-URL pages, and the
    legacy flat mirror in pages/ when that directory exists.
    """
    if ctx.invoked_subcommand is None:
        _configure_logging(False)
        _build(Path("."), None, None, None, False)


if __name__ == "__main__":  # pragma: no cover - executed only via `python -m`
    app()
