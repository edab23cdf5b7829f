"""
Catalog schemas for PostgreSQL Learning.

Defines Pydantic models for the curriculum structure:
- Lessons (title + route path)
- Phases (ordered groups of lessons)
- Catalog (ordered phases, validated for unique routes)

The catalog is static data: models are frozen and collections are tuples.
"""

from typing import Iterator, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


DEFAULT_SITE_TITLE = "PostgreSQL Learning"


def find_duplicates(values: list[str]) -> list[str]:
    """Return values that occur more than once, in first-seen order."""
    seen = set()
    duplicates = []
    for value in values:
        if value in seen and value not in duplicates:
            duplicates.append(value)
        seen.add(value)
    return duplicates


# -----------------------------------------------------------------------------
# Lesson and phase
# -----------------------------------------------------------------------------

class Lesson(BaseModel):
    """
    A single lesson entry in the catalog.

    `path` is the identity of a lesson (routing and highlighting use it);
    `id` is a human-readable slug and may repeat across phases.
    """
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    path: str = Field(..., pattern=r'^/\S*$')

    @field_validator('title')
    @classmethod
    def title_not_blank(cls, v):
        if not v.strip():
            raise ValueError('Lesson title must not be blank')
        return v

    @field_validator('path')
    @classmethod
    def path_is_canonical(cls, v):
        # Requested paths are matched after dropping query, fragment and trailing slash
        if '?' in v or '#' in v or (v != '/' and v.endswith('/')):
            raise ValueError(f'Lesson path must not end with "/" or carry a query or fragment: {v}')
        return v


class Phase(BaseModel):
    """An ordered group of lessons; display order is curriculum order."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    lessons: tuple[Lesson, ...] = Field(..., min_length=1)

    @field_validator('lessons')
    @classmethod
    def lesson_ids_unique(cls, v):
        duplicates = find_duplicates([lesson.id for lesson in v])
        if duplicates:
            raise ValueError(f'Duplicate lesson ids within phase: {", ".join(duplicates)}')
        return v


# -----------------------------------------------------------------------------
# Catalog
# -----------------------------------------------------------------------------

class Catalog(BaseModel):
    """Full curriculum: phases in display order."""
    model_config = ConfigDict(frozen=True)

    title: str = DEFAULT_SITE_TITLE
    phases: tuple[Phase, ...]

    @model_validator(mode='after')
    def identities_unique(self):
        phase_duplicates = find_duplicates([phase.id for phase in self.phases])
        if phase_duplicates:
            raise ValueError(f'Duplicate phase ids: {", ".join(phase_duplicates)}')

        path_duplicates = find_duplicates([lesson.path for _, lesson in self.iter_lessons()])
        if path_duplicates:
            raise ValueError(f'Duplicate lesson paths: {", ".join(path_duplicates)}')
        return self

    def get_phases(self) -> tuple[Phase, ...]:
        """Get all phases in curriculum order."""
        return self.phases

    def iter_lessons(self) -> Iterator[tuple[Phase, Lesson]]:
        """Iterate (phase, lesson) pairs in curriculum order."""
        for phase in self.phases:
            for lesson in phase.lessons:
                yield phase, lesson

    def get_lesson(self, path: str) -> Optional[Lesson]:
        """Get the lesson registered at a route path."""
        for _, lesson in self.iter_lessons():
            if lesson.path == path:
                return lesson
        return None

    def get_phase_for_path(self, path: str) -> Optional[Phase]:
        """Get the phase that owns the lesson at a route path."""
        for phase, lesson in self.iter_lessons():
            if lesson.path == path:
                return phase
        return None

    @property
    def lesson_count(self) -> int:
        """Total number of lessons across all phases."""
        return sum(len(phase.lessons) for phase in self.phases)

    def to_document(self) -> dict:
        """Serialize to the persisted catalog layout (plain dicts and lists)."""
        return {
            "title": self.title,
            "phases": [
                {
                    "id": phase.id,
                    "title": phase.title,
                    "lessons": [
                        {"id": lesson.id, "title": lesson.title, "path": lesson.path}
                        for lesson in phase.lessons
                    ],
                }
                for phase in self.phases
            ],
        }
