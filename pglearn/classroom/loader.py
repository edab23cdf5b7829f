"""
ContentLoader - Load the catalog and lesson documents from content/.

Provides read-only access to:
- The curriculum catalog (catalog.yaml)
- Lesson content documents (lessons/**/*.json, mirroring route paths)
"""

import logging
from pathlib import Path
from typing import Optional

from pglearn.schemas import Catalog, LessonContent
from pglearn.utils import (
    CATALOG_FILENAME,
    LESSONS_DIRNAME,
    load_json_document,
    load_yaml_document,
    get_lesson_documents,
)

logger = logging.getLogger(__name__)

LESSON_ROUTE_PREFIX = "/lessons/"


class ContentLoader:
    """
    Load site content from a content directory.

    Documents are read from disk on every call; callers that render many
    pages (the Streamlit app) cache the loader and its results.
    """

    def __init__(self, content_dir: str | Path):
        """
        Initialize loader with path to the content directory.

        Args:
            content_dir: Directory holding catalog.yaml and lessons/
        """
        self.content_dir = Path(content_dir)
        if not self.content_dir.is_dir():
            raise FileNotFoundError(f"Content directory not found: {content_dir}")

    @property
    def catalog_path(self) -> Path:
        return self.content_dir / CATALOG_FILENAME

    @property
    def lessons_dir(self) -> Path:
        return self.content_dir / LESSONS_DIRNAME

    # -------------------------------------------------------------------------
    # Catalog
    # -------------------------------------------------------------------------

    def load_catalog(self) -> Catalog:
        """
        Load and validate the catalog.

        Raises:
            FileNotFoundError: If catalog.yaml is missing
            pydantic.ValidationError: If the catalog is malformed or has
                duplicate phase ids / lesson paths
        """
        document = load_yaml_document(self.catalog_path)
        catalog = Catalog.model_validate(document)
        logger.debug(
            "Loaded catalog from %s: %d phases, %d lessons",
            self.catalog_path, len(catalog.phases), catalog.lesson_count,
        )
        return catalog

    # -------------------------------------------------------------------------
    # Lessons
    # -------------------------------------------------------------------------

    def lesson_file(self, path: str) -> Path:
        """
        Map a lesson route to its document.

        /lessons/joins -> lessons/joins.json
        /lessons/practical-queries/joins -> lessons/practical-queries/joins.json
        """
        if not path.startswith(LESSON_ROUTE_PREFIX):
            raise ValueError(f"Not a lesson route: {path!r}")
        relative = path[len(LESSON_ROUTE_PREFIX):].strip("/")
        if not relative or ".." in relative.split("/"):
            raise ValueError(f"Not a lesson route: {path!r}")
        return self.lessons_dir / f"{relative}.json"

    def lesson_path_for_file(self, file_path: Path) -> str:
        """Inverse of lesson_file(): route path for a lesson document."""
        relative = file_path.relative_to(self.lessons_dir).with_suffix("")
        return LESSON_ROUTE_PREFIX + relative.as_posix()

    def has_lesson(self, path: str) -> bool:
        """Check whether a lesson document exists for a route."""
        try:
            return self.lesson_file(path).is_file()
        except ValueError:
            return False

    def get_lesson_content(self, path: str) -> Optional[LessonContent]:
        """
        Get full lesson content for a route.

        Returns None if no document exists for the route. A document that
        exists but does not validate raises pydantic.ValidationError.
        """
        if not self.has_lesson(path):
            return None

        file_path = self.lesson_file(path)
        lesson = LessonContent.model_validate(load_json_document(file_path))
        if lesson.path != path:
            raise ValueError(
                f"Lesson document {file_path} declares path {lesson.path!r}, expected {path!r}"
            )
        logger.debug("Loaded lesson %s from %s", path, file_path)
        return lesson

    def get_all_lesson_paths(self) -> list[str]:
        """Get the route of every lesson document on disk, sorted."""
        return [
            self.lesson_path_for_file(file_path)
            for file_path in get_lesson_documents(self.content_dir)
        ]

    def get_lesson_count(self) -> int:
        """Get number of lesson documents on disk."""
        return len(get_lesson_documents(self.content_dir))
