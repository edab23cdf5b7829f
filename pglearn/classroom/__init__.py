"""
PostgreSQL Learning Classroom - Runtime components for loading and navigating lessons.

This module provides:
- ContentLoader: Load the catalog and lesson documents from content/
- Navigator: Navigation tree, active-lesson highlighting and sequencing
- RouteTable: Explicit path -> lesson page mapping
"""

from .loader import (
    ContentLoader,
    LESSON_ROUTE_PREFIX,
)

from .navigator import (
    Navigator,
    NavigationLesson,
    NavigationPhase,
    build_navigation,
)

from .routes import (
    HOME_PATH,
    RouteError,
    MissingLessonError,
    LessonRoute,
    RouteTable,
    build_route_table,
    normalize_path,
)

__all__ = [
    # Loader
    "ContentLoader",
    "LESSON_ROUTE_PREFIX",
    # Navigator
    "Navigator",
    "NavigationLesson",
    "NavigationPhase",
    "build_navigation",
    # Routes
    "HOME_PATH",
    "RouteError",
    "MissingLessonError",
    "LessonRoute",
    "RouteTable",
    "build_route_table",
    "normalize_path",
]
