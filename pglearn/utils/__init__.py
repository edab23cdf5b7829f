"""PostgreSQL Learning utilities."""

from .content_loader import (
    CONTENT_DIR,
    CATALOG_FILENAME,
    LESSONS_DIRNAME,
    load_yaml_document,
    load_json_document,
    write_json_document,
    get_lesson_documents,
)

__all__ = [
    "CONTENT_DIR",
    "CATALOG_FILENAME",
    "LESSONS_DIRNAME",
    "load_yaml_document",
    "load_json_document",
    "write_json_document",
    "get_lesson_documents",
]
