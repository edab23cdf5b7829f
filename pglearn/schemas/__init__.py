"""
PostgreSQL Learning Schemas - Pydantic models for the lesson site.

This module exports all schema classes for:
- Catalog: phases, lessons, route paths
- Lesson: lesson content, sections, content blocks, code samples
"""

# Catalog schemas
from .catalog import (
    Lesson,
    Phase,
    Catalog,
    DEFAULT_SITE_TITLE,
    find_duplicates,
)

# Lesson schemas
from .lesson import (
    ContentBlockBase,
    CodeSample,
    Paragraph,
    Heading,
    BulletList,
    Table,
    CalloutTone,
    Callout,
    Columns,
    ContentBlock,
    Section,
    LessonMetadata,
    LessonContent,
    iter_code_samples,
)

__all__ = [
    # Catalog
    'Lesson',
    'Phase',
    'Catalog',
    'DEFAULT_SITE_TITLE',
    'find_duplicates',
    # Lesson
    'ContentBlockBase',
    'CodeSample',
    'Paragraph',
    'Heading',
    'BulletList',
    'Table',
    'CalloutTone',
    'Callout',
    'Columns',
    'ContentBlock',
    'Section',
    'LessonMetadata',
    'LessonContent',
    'iter_code_samples',
]
