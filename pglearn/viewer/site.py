"""
Static site export - Render every route to an HTML file.

Layout of the output directory:
    index.html                     landing page
    lessons/<route>/index.html     one page per catalog lesson
    404.html                       not-found page
    catalog.json                   catalog in its persisted layout
"""

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from pglearn.classroom import (
    HOME_PATH,
    ContentLoader,
    Navigator,
    RouteTable,
    build_route_table,
)
from pglearn.schemas import Catalog, LessonContent
from pglearn.utils import CONTENT_DIR, write_json_document

from .lesson import get_page_metadata, render_lesson
from .navigation import render_navigation
from .page import render_home, render_not_found, render_page

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_DIR = Path("site")
NOT_FOUND_FILENAME = "404.html"
CATALOG_EXPORT_FILENAME = "catalog.json"


@dataclass
class ContentCheck:
    """Result of validating the content directory."""
    catalog: Catalog
    routes: RouteTable
    lessons: dict[str, LessonContent]
    orphan_paths: list[str] = field(default_factory=list)  # documents not in the catalog


@dataclass
class BuildReport:
    output_dir: Path
    pages: list[Path] = field(default_factory=list)
    orphan_paths: list[str] = field(default_factory=list)


def make_static_href(base_url: str = "/") -> Callable[[str], str]:
    """
    Link targets for exported pages.

    Pages are written as <route>/index.html, so "/lessons/joins" links to
    "<base>/lessons/joins/".
    """
    base = base_url.rstrip("/")

    def href_for(path: str) -> str:
        if path == HOME_PATH:
            return f"{base}/"
        return f"{base}{path}/"

    return href_for


def page_file(output_dir: Path, path: str) -> Path:
    """Output file for a route path."""
    if path == HOME_PATH:
        return output_dir / "index.html"
    return output_dir / path.strip("/") / "index.html"


def check_content(loader: ContentLoader) -> ContentCheck:
    """
    Validate catalog and lesson documents.

    Raises:
        pydantic.ValidationError: Malformed catalog or lesson document
        RouteError / MissingLessonError: Duplicate routes, missing documents
        ValueError: Lesson document filed under the wrong route
    """
    catalog = loader.load_catalog()
    routes = build_route_table(catalog, loader)

    lessons = {}
    for route in routes:
        lessons[route.path] = route.load()

    orphan_paths = [path for path in loader.get_all_lesson_paths() if path not in routes]
    for path in orphan_paths:
        logger.warning("Lesson document not referenced by the catalog: %s", path)

    logger.info(
        "Content OK: %d phases, %d lessons, %d code samples",
        len(catalog.phases),
        len(lessons),
        sum(len(list(lesson.iter_code_samples())) for lesson in lessons.values()),
    )
    return ContentCheck(catalog=catalog, routes=routes, lessons=lessons, orphan_paths=orphan_paths)


def check_clean_target(output_dir: Path, content_dir: Path) -> None:
    """
    Refuse to clean a directory that holds the sources.

    Raises:
        ValueError: If output_dir is the working directory or the project root,
            or is or contains content_dir
    """
    target = Path(output_dir).resolve()
    content = Path(content_dir).resolve()
    protected = {Path.cwd().resolve(), CONTENT_DIR.parent.resolve(), content}
    if target in protected or target in content.parents:
        raise ValueError(f"Refusing to clean {output_dir}: it contains the site sources")


def write_page(file_path: Path, document: str) -> None:
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with open(file_path, "w", encoding="utf-8") as f:
        f.write(document)


def build_site(
    loader: ContentLoader,
    output_dir: Path = DEFAULT_OUTPUT_DIR,
    base_url: str = "/",
    clean: bool = False,
) -> BuildReport:
    """
    Export the whole site as static HTML.

    Args:
        loader: Content loader for the content directory
        output_dir: Directory to write pages into
        base_url: URL prefix the site is served under
        clean: Remove output_dir before writing (refused when it holds the
            sources, see check_clean_target)

    Returns:
        BuildReport listing written files
    """
    check = check_content(loader)
    catalog = check.catalog
    navigator = Navigator(catalog)
    href_for = make_static_href(base_url)

    output_dir = Path(output_dir)
    if clean:
        check_clean_target(output_dir, loader.content_dir)
    if clean and output_dir.exists():
        logger.info("Removing %s", output_dir)
        shutil.rmtree(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    report = BuildReport(output_dir=output_dir, orphan_paths=check.orphan_paths)

    # Landing page
    tree = navigator.get_navigation_tree(HOME_PATH)
    home = render_page(
        render_home(tree, catalog.title, href_for),
        render_navigation(tree, catalog.title, href_for),
        {"title": catalog.title, "description": f"{catalog.title}: lessons in SQL and Prisma"},
    )
    home_file = page_file(output_dir, HOME_PATH)
    write_page(home_file, home)
    report.pages.append(home_file)

    # Lesson pages
    for route in check.routes:
        lesson = check.lessons[route.path]
        tree = navigator.get_navigation_tree(route.path)
        document = render_page(
            render_lesson(lesson),
            render_navigation(tree, catalog.title, href_for),
            get_page_metadata(lesson),
        )
        file_path = page_file(output_dir, route.path)
        write_page(file_path, document)
        report.pages.append(file_path)
        logger.debug("Wrote %s", file_path)

    # Not-found page (nothing highlighted)
    tree = navigator.get_navigation_tree("")
    not_found = render_page(
        render_not_found("", href_for),
        render_navigation(tree, catalog.title, href_for),
        {"title": f"Page not found - {catalog.title}", "description": ""},
    )
    not_found_file = output_dir / NOT_FOUND_FILENAME
    write_page(not_found_file, not_found)
    report.pages.append(not_found_file)

    write_json_document(output_dir / CATALOG_EXPORT_FILENAME, catalog.to_document())

    logger.info("Wrote %d pages to %s", len(report.pages), output_dir)
    return report
