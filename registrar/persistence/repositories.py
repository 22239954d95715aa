"""
Repository pattern implementations for data access.
"""

import logging
from typing import Callable, List, Optional, TypeVar, Generic

from ..core.entities import Student, Teacher, Course, Enrollment
from ..core.interfaces import Repository
from ..core.exceptions import NullArgumentError

logger = logging.getLogger(__name__)

T = TypeVar('T')


class InMemoryRepository(Repository[T], Generic[T]):
    """Ordered in-memory collection keyed by a caller-supplied ID function.

    Lookups are linear scans. IDs are assumed unique but never checked, so
    ``add`` accepts duplicates and ``update`` may change an item's ID to one
    that is already taken.
    """

    def __init__(self, id_getter: Callable[[T], str], entity_type: str = "entity"):
        self._items: List[T] = []
        self._id_getter = id_getter
        self._entity_type = entity_type

    def add(self, item: T) -> None:
        """Append an item."""
        if item is None:
            raise NullArgumentError("item")
        self._items.append(item)
        logger.debug("Added %s %s", self._entity_type, self._id_getter(item))

    def remove(self, item: T) -> None:
        """Remove the first item equal to ``item``; no-op if absent."""
        if item is None:
            raise NullArgumentError("item")
        try:
            self._items.remove(item)
        except ValueError:
            logger.debug("Remove skipped, %s not stored", self._entity_type)
            return
        logger.debug("Removed %s %s", self._entity_type, self._id_getter(item))

    def update(self, item: T) -> None:
        """Replace the item sharing ``item``'s ID in place; no-op if none does."""
        if item is None:
            raise NullArgumentError("item")
        entity_id = self._id_getter(item)
        for index, existing in enumerate(self._items):
            if self._id_getter(existing) == entity_id:
                self._items[index] = item
                logger.debug("Updated %s %s", self._entity_type, entity_id)
                return
        logger.debug("Update skipped, no %s with ID %s", self._entity_type, entity_id)

    def get_by_id(self, entity_id: str) -> Optional[T]:
        for item in self._items:
            if self._id_getter(item) == entity_id:
                return item
        return None

    def get_all(self) -> List[T]:
        return list(self._items)

    def find(self, predicate: Callable[[T], bool]) -> List[T]:
        return [item for item in self._items if predicate(item)]

    def __len__(self) -> int:
        return len(self._items)


class StudentRepository(InMemoryRepository[Student]):
    """Repository for Student entities."""

    def __init__(self):
        super().__init__(lambda student: student.id, "student")


class TeacherRepository(InMemoryRepository[Teacher]):
    """Repository for Teacher entities."""

    def __init__(self):
        super().__init__(lambda teacher: teacher.id, "teacher")


class CourseRepository(InMemoryRepository[Course]):
    """Repository for Course entities."""

    def __init__(self):
        super().__init__(lambda course: course.id, "course")


class EnrollmentRepository(InMemoryRepository[Enrollment]):
    """Repository for Enrollment entities, keyed by student and course."""

    def __init__(self):
        super().__init__(lambda e: f"{e.student_id}_{e.course_id}", "enrollment")
