"""
Content document loader for PostgreSQL Learning.

Reads the YAML catalog and JSON lesson documents from the content/ directory.
"""

import json
from pathlib import Path
from typing import Any

import yaml


# Default content directory (relative to project root)
CONTENT_DIR = Path(__file__).parent.parent.parent / "content"

CATALOG_FILENAME = "catalog.yaml"
LESSONS_DIRNAME = "lessons"


def load_yaml_document(file_path: Path) -> Any:
    """
    Load a YAML document.

    Args:
        file_path: Path to the .yaml file

    Returns:
        Parsed document (dicts, lists and scalars)

    Raises:
        FileNotFoundError: If the file doesn't exist
        yaml.YAMLError: If YAML parsing fails
    """
    if not file_path.exists():
        raise FileNotFoundError(f"Content document not found: {file_path}")

    with open(file_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def load_json_document(file_path: Path) -> Any:
    """
    Load a JSON document.

    Raises:
        FileNotFoundError: If the file doesn't exist
        json.JSONDecodeError: If JSON parsing fails
    """
    if not file_path.exists():
        raise FileNotFoundError(f"Content document not found: {file_path}")

    with open(file_path, "r", encoding="utf-8") as f:
        return json.load(f)


def write_json_document(file_path: Path, document: Any) -> None:
    """Write a JSON document (UTF-8, indented, trailing newline)."""
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with open(file_path, "w", encoding="utf-8") as f:
        json.dump(document, f, ensure_ascii=False, indent=2)
        f.write("\n")


def get_lesson_documents(content_dir: Path | None = None) -> list[Path]:
    """
    List all lesson documents below content/lessons/.

    Args:
        content_dir: Optional custom content directory

    Returns:
        Sorted list of .json paths
    """
    dir_path = (content_dir or CONTENT_DIR) / LESSONS_DIRNAME
    if not dir_path.exists():
        return []
    return sorted(dir_path.rglob("*.json"))
