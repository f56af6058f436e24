"""Build configuration for sitebuilder.

Every path is derived from a single site root by convention:

- ``<root>/components``: navbar.html, sidebar.html, wave.html
- ``<root>/pages``: one content fragment per page id (optional)
- ``<root>``: clean-URL output
- ``<root>/pages``: legacy-flat mirror, enabled when that directory exists
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

COMPONENTS_DIRNAME = "components"
PAGES_DIRNAME = "pages"


@dataclass(frozen=True)
class BuildOptions:
    """Where the build reads from and writes to."""

    root: Path
    components_dir: Path
    pages_dir: Path
    output_dir: Path

    # Legacy-flat mirror directory; None disables the mirror pass
    mirror_dir: Path | None = None

    # Optional directory whose page.html overrides the built-in document shell
    templates_dir: Path | None = None

    # Treat validation issues as fatal
    strict: bool = False

    @classmethod
    def from_root(
        cls,
        root: Path,
        *,
        out_dir: Path | None = None,
        mirror: bool | None = None,
        templates_dir: Path | None = None,
        strict: bool = False,
    ) -> BuildOptions:
        """Build options from CLI argument values.

        Args:
            root: Site root holding ``components/`` and ``pages/``
            out_dir: Clean-URL output root (default: ``root``)
            mirror: Force the legacy mirror on or off; ``None`` enables it
                only when ``<root>/pages`` exists
            templates_dir: Directory overriding the document shell
            strict: Abort on validation issues

        Returns:
            BuildOptions with every path resolved against ``root``
        """
        root = Path(root)
        pages_dir = root / PAGES_DIRNAME
        if mirror is None:
            mirror = pages_dir.is_dir()
        return cls(
            root=root,
            components_dir=root / COMPONENTS_DIRNAME,
            pages_dir=pages_dir,
            output_dir=Path(out_dir) if out_dir is not None else root,
            mirror_dir=pages_dir if mirror else None,
            templates_dir=templates_dir,
            strict=strict,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        return {
            "root": str(self.root),
            "components_dir": str(self.components_dir),
            "pages_dir": str(self.pages_dir),
            "output_dir": str(self.output_dir),
            "mirror_dir": str(self.mirror_dir) if self.mirror_dir is not None else None,
            "templates_dir": str(self.templates_dir) if self.templates_dir is not None else None,
            "strict": self.strict,
        }


__all__ = [
    "BuildOptions",
    "COMPONENTS_DIRNAME",
    "PAGES_DIRNAME",
]
