"""
Navigator - Curriculum navigation and active-lesson highlighting.

Provides:
- Navigation tree (phases + lessons, with the current route marked active)
- Next/previous lesson navigation
- Lesson position within the curriculum
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from pglearn.schemas import Catalog, Lesson, Phase


@dataclass(frozen=True)
class NavigationLesson:
    """Lesson with navigation metadata."""
    lesson: Lesson
    is_active: bool


@dataclass(frozen=True)
class NavigationPhase:
    """Phase with its lessons in catalog order."""
    phase: Phase
    lessons: list[NavigationLesson]

    @property
    def has_active(self) -> bool:
        return any(nav_lesson.is_active for nav_lesson in self.lessons)


def build_navigation(phases: Iterable[Phase], current_path: str) -> list[NavigationPhase]:
    """
    Build the sidebar structure for a route.

    A lesson is active iff its path equals current_path exactly. Phases and
    lessons keep catalog order. An empty or unknown path marks nothing.
    """
    return [
        NavigationPhase(
            phase=phase,
            lessons=[
                NavigationLesson(lesson=lesson, is_active=lesson.path == current_path)
                for lesson in phase.lessons
            ],
        )
        for phase in phases
    ]


class Navigator:
    """
    Navigate through the curriculum.

    Wraps a Catalog with ordered, path-keyed lookups.
    """

    def __init__(self, catalog: Catalog):
        """
        Initialize navigator.

        Args:
            catalog: Catalog instance (loaded once, shared by reference)
        """
        self.catalog = catalog
        self._lesson_order: list[Lesson] = [lesson for _, lesson in catalog.iter_lessons()]
        self._lesson_index: dict[str, int] = {
            lesson.path: idx for idx, lesson in enumerate(self._lesson_order)
        }

    @property
    def total_lessons(self) -> int:
        """Total number of lessons."""
        return len(self._lesson_order)

    # -------------------------------------------------------------------------
    # Navigation tree
    # -------------------------------------------------------------------------

    def get_navigation_tree(self, current_path: str) -> list[NavigationPhase]:
        """Get the full curriculum tree with the lesson at current_path active."""
        return build_navigation(self.catalog.get_phases(), current_path)

    def get_active_lessons(self, current_path: str) -> list[Lesson]:
        """Get lessons whose path equals current_path (normally zero or one)."""
        return [lesson for lesson in self._lesson_order if lesson.path == current_path]

    # -------------------------------------------------------------------------
    # Sequencing
    # -------------------------------------------------------------------------

    def get_first_lesson(self) -> Optional[Lesson]:
        """Get the first lesson in the curriculum."""
        return self._lesson_order[0] if self._lesson_order else None

    def get_next_lesson(self, current_path: str) -> Optional[Lesson]:
        """Get the lesson after current_path in curriculum order."""
        if current_path not in self._lesson_index:
            return None
        current_idx = self._lesson_index[current_path]
        if current_idx + 1 >= len(self._lesson_order):
            return None
        return self._lesson_order[current_idx + 1]

    def get_previous_lesson(self, current_path: str) -> Optional[Lesson]:
        """Get the lesson before current_path in curriculum order."""
        if current_path not in self._lesson_index:
            return None
        current_idx = self._lesson_index[current_path]
        if current_idx <= 0:
            return None
        return self._lesson_order[current_idx - 1]

    def get_lesson_position(self, current_path: str) -> tuple[int, int]:
        """
        Get lesson position as (current, total).

        Returns (0, total) if lesson not found.
        """
        if current_path not in self._lesson_index:
            return (0, len(self._lesson_order))
        return (self._lesson_index[current_path] + 1, len(self._lesson_order))
