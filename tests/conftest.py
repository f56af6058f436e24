import logging
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


NAVBAR = """\
<nav class="navbar">
    <a href="index.html" class="nav-logo"><img src="img/logo.svg" alt="Logo"></a>
    <button class="nav-hamburger" aria-label="Open menu"><span></span></button>
    <ul class="nav-links">
        <li><a href="#" data-page="home">Home</a></li>
        <li><a href="#" data-page="about">About Me</a></li>
        <li><a href="#" data-page="experience">Experience</a></li>
        <li><a href="#" data-page="projects">Projects</a></li>
    </ul>
</nav>"""

SIDEBAR = """\
<div class="nav-sidebar-backdrop"></div>
<aside class="nav-sidebar" aria-hidden="true">
    <button class="nav-sidebar-close" aria-label="Close menu">&times;</button>
    <nav class="nav-sidebar-nav">
        <a href="index.html">Home</a>
        <a href="about.html">About Me</a>
        <a href="experience.html">Experience</a>
        <a href="projects.html">Projects</a>
    </nav>
    <a href="files/resume.pdf" class="nav-sidebar-resume">Resume</a>
</aside>"""

WAVE = """<div class="wave" aria-hidden="true"><img src="img/wave.svg" alt=""></div>"""

PAGES = {
    "home": """\
<!DOCTYPE html>
<html><body>
<main id="main-content" class="home">
    <h1>Hello</h1>
    <img src="img/photo.jpg" alt="Portrait">
</main>
</body></html>
""",
    "about": """\
<main id="main-content">
    <img src="../img/photo.jpg" alt="Portrait">
    <a href="../files/cv.pdf">Download CV</a>
</main>
""",
    "experience": """\
<main id="main-content">
    <div class="experience-grid">
        <article class="experience-card" data-company="Acme">
            <img src="../img/acme.png" alt="Acme">
        </article>
    </div>
</main>
""",
    "projects": """\
<main id="main-content">
    <div class="projects-grid">
        <article class="projects-card"><img src="../img/p1.png" alt=""></article>
    </div>
</main>
""",
}


def make_site(
    root: Path,
    *,
    overrides: dict[str, str | None] | None = None,
    with_pages_dir: bool = True,
) -> Path:
    """Write a small site (components plus page content) under ``root``.

    ``overrides`` replaces page sources by id; a ``None`` value leaves that
    page out.
    """
    components = root / "components"
    components.mkdir(parents=True, exist_ok=True)
    (components / "navbar.html").write_text(NAVBAR, encoding="utf-8")
    (components / "sidebar.html").write_text(SIDEBAR, encoding="utf-8")
    (components / "wave.html").write_text(WAVE, encoding="utf-8")

    sources: dict[str, str | None] = {**PAGES, **(overrides or {})}
    for page_id, html in sources.items():
        if html is None:
            continue
        if with_pages_dir:
            path = root / "pages" / f"{page_id}.html"
        elif page_id == "home":
            path = root / "index.html"
        else:
            path = root / page_id / "index.html"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(html, encoding="utf-8")
    return root


@pytest.fixture
def site_factory():
    return make_site


@pytest.fixture
def site(tmp_path: Path) -> Path:
    return make_site(tmp_path / "site")


@pytest.fixture
def isolate_logging():
    """Isolate logging configuration between tests to prevent CI issues.

    The CLI calls ``logging.basicConfig``; without this, a StreamHandler bound
    to CliRunner's temporary stream can outlive the test.
    """
    original_handlers = logging.root.handlers[:]
    original_level = logging.root.level

    logging.root.handlers.clear()
    logging.root.addHandler(logging.NullHandler())

    yield

    logging.root.handlers.clear()
    logging.root.handlers.extend(original_handlers)
    logging.root.setLevel(original_level)
