"""
Route table - explicit mapping from route paths to lesson pages.

The table is built once from the catalog and validated up front, so a
duplicate route or a catalog entry without a lesson document is caught
before any page is served or exported.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, Optional

from pglearn.schemas import Catalog, Lesson, LessonContent, Phase

from .loader import ContentLoader

logger = logging.getLogger(__name__)

HOME_PATH = "/"


class RouteError(ValueError):
    """Route table could not be built."""


class MissingLessonError(RouteError):
    """Catalog lessons without a lesson document."""

    def __init__(self, paths: list[str]):
        self.paths = paths
        super().__init__(f"No lesson document for: {', '.join(paths)}")


def normalize_path(path: Optional[str]) -> str:
    """
    Normalize a requested path for lookup.

    Drops query string and fragment, and a trailing slash, so that
    "/lessons/joins/" and "/lessons/joins?x=1" match "/lessons/joins".
    An empty path is the home page.
    """
    if not path:
        return HOME_PATH
    path = path.split("?", 1)[0].split("#", 1)[0].strip()
    if not path.startswith("/"):
        path = "/" + path
    if len(path) > 1:
        path = path.rstrip("/") or HOME_PATH
    return path


@dataclass(frozen=True)
class LessonRoute:
    """A registered lesson page."""
    phase: Phase
    lesson: Lesson
    loader: ContentLoader

    @property
    def path(self) -> str:
        return self.lesson.path

    def load(self) -> Optional[LessonContent]:
        """Load this page's content."""
        return self.loader.get_lesson_content(self.lesson.path)


class RouteTable:
    """Ordered path -> LessonRoute mapping."""

    def __init__(self, routes: list[LessonRoute]):
        self._routes: dict[str, LessonRoute] = {}
        for route in routes:
            if route.path in self._routes:
                raise RouteError(f"Duplicate route: {route.path}")
            self._routes[route.path] = route

    def __len__(self) -> int:
        return len(self._routes)

    def __contains__(self, path: str) -> bool:
        return path in self._routes

    def __iter__(self) -> Iterator[LessonRoute]:
        return iter(self._routes.values())

    def paths(self) -> list[str]:
        """All registered paths in catalog order."""
        return list(self._routes)

    def resolve(self, path: str) -> Optional[LessonRoute]:
        """Look up the route for a requested path (normalized first)."""
        return self._routes.get(normalize_path(path))


def build_route_table(catalog: Catalog, loader: ContentLoader, require_content: bool = True) -> RouteTable:
    """
    Build the route table for every lesson in the catalog.

    Args:
        catalog: Validated catalog
        loader: Content loader used to locate lesson documents
        require_content: Raise MissingLessonError if any catalog lesson
            has no document

    Raises:
        RouteError: If a path is registered twice
        MissingLessonError: If lesson documents are missing
    """
    routes = [
        LessonRoute(phase=phase, lesson=lesson, loader=loader)
        for phase, lesson in catalog.iter_lessons()
    ]
    table = RouteTable(routes)

    if require_content:
        missing = [route.path for route in table if not loader.has_lesson(route.path)]
        if missing:
            raise MissingLessonError(missing)

    logger.info("Registered %d lesson routes", len(table))
    return table
