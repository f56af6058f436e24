from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jinja2 import (
    BaseLoader,
    ChoiceLoader,
    DictLoader,
    Environment,
    FileSystemLoader,
    StrictUndefined,
)

PAGE_TEMPLATE = "page.html"

# Fragments and content arrive pre-rendered and are inserted verbatim
DEFAULT_PAGE_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{{ title }}</title>
    <link rel="stylesheet" href="{{ stylesheet_path }}">
</head>
<body{% if body_class %} class="{{ body_class }}"{% endif %}>
    <a href="#main-content" class="skip-link">Skip to main content</a>
    {{ navbar|safe }}
    {{ sidebar|safe }}
    {{ content|safe }}
    {{ wave|safe }}
    <script src="{{ script_path }}" defer></script>
</body>
</html>
"""


@dataclass(frozen=True)
class Templates:
    env: Environment

    def render_page(self, context: dict[str, Any]) -> str:
        tpl = self.env.get_template(PAGE_TEMPLATE)
        return str(tpl.render(**context))


def create_environment(templates_dir: Path | None = None) -> Templates:
    """Build the template environment for the document shell.

    A ``page.html`` in ``templates_dir`` takes precedence over the built-in one.
    """
    loaders: list[BaseLoader] = []
    if templates_dir is not None:
        loaders.append(FileSystemLoader(str(templates_dir)))
    loaders.append(DictLoader({PAGE_TEMPLATE: DEFAULT_PAGE_TEMPLATE}))
    env = Environment(
        loader=ChoiceLoader(loaders),
        undefined=StrictUndefined,
        autoescape=True,
        keep_trailing_newline=True,
    )
    return Templates(env=env)


def write_default_templates(target_dir: Path) -> None:
    """Write the built-in document shell to ``target_dir`` for customisation."""
    target_dir.mkdir(parents=True, exist_ok=True)
    (target_dir / PAGE_TEMPLATE).write_text(DEFAULT_PAGE_TEMPLATE, encoding="utf-8")
