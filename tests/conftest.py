"""Shared fixtures: a small hand-written catalog and content directories."""

import json

import pytest
import yaml

from pglearn.classroom import ContentLoader
from pglearn.schemas import Catalog
from pglearn.utils import CONTENT_DIR


SMALL_CATALOG = {
    "title": "Test Curriculum",
    "phases": [
        {
            "id": "p1",
            "title": "Phase 1",
            "lessons": [
                {"id": "a", "title": "A", "path": "/lessons/a"},
                {"id": "b", "title": "B", "path": "/lessons/b"},
            ],
        },
        {
            "id": "p2",
            "title": "Phase 2",
            "lessons": [
                {"id": "c", "title": "C & D", "path": "/lessons/nested/c"},
            ],
        },
    ],
}


def make_lesson_document(path: str, title: str) -> dict:
    return {
        "path": path,
        "metadata": {"title": f"{title} - Test", "description": f"About {title}"},
        "heading": title,
        "intro": [{"type": "paragraph", "text": f"Intro to <strong>{title}</strong>."}],
        "sections": [
            {
                "title": "Example",
                "blocks": [
                    {
                        "type": "code",
                        "title": "SQL",
                        "language": "sql",
                        "code": "SELECT * FROM users\nWHERE id = $1;",
                    },
                    {
                        "type": "code",
                        "title": "Prisma",
                        "language": "typescript",
                        "code": "const msg = `Hello ${user.name} <admin>`;",
                    },
                ],
            }
        ],
    }


def write_content_dir(root, catalog_document: dict, skip_paths=()) -> None:
    """Write catalog.yaml and one lesson document per catalog lesson."""
    root.mkdir(parents=True, exist_ok=True)
    with open(root / "catalog.yaml", "w", encoding="utf-8") as f:
        yaml.safe_dump(catalog_document, f, allow_unicode=True, sort_keys=False)

    for phase in catalog_document["phases"]:
        for lesson in phase["lessons"]:
            if lesson["path"] in skip_paths:
                continue
            file_path = root / "lessons" / (lesson["path"][len("/lessons/"):] + ".json")
            file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(file_path, "w", encoding="utf-8") as f:
                json.dump(make_lesson_document(lesson["path"], lesson["title"]), f)


@pytest.fixture
def small_catalog() -> Catalog:
    return Catalog.model_validate(SMALL_CATALOG)


@pytest.fixture
def content_dir(tmp_path):
    root = tmp_path / "content"
    write_content_dir(root, SMALL_CATALOG)
    return root


@pytest.fixture
def loader(content_dir) -> ContentLoader:
    return ContentLoader(content_dir)


@pytest.fixture(scope="session")
def shipped_loader() -> ContentLoader:
    return ContentLoader(CONTENT_DIR)


@pytest.fixture(scope="session")
def shipped_catalog(shipped_loader) -> Catalog:
    return shipped_loader.load_catalog()
