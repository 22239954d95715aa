"""
Course service: validation over the course repository.
"""

import logging
from typing import List, Optional

from ..core.entities import Course
from ..core.interfaces import Repository
from ..core.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

MIN_CREDITS = 1
MAX_CREDITS = 10


class CourseService:
    """Service for adding and listing courses."""

    def __init__(self, course_repository: Repository[Course]):
        self._course_repository = course_repository

    def add_course(self, course_id: str, name: str, credits: int) -> Course:
        self._validate_course_data(course_id, name, credits)
        course = Course(course_id, name, credits)
        self._course_repository.add(course)
        logger.info("Course %s added", course_id)
        return course

    def remove_course(self, course_id: str) -> None:
        # Enrollments referencing the course are left in place.
        course = self._course_repository.get_by_id(course_id)
        if course is None:
            logger.debug("No course with ID %s to remove", course_id)
            return
        self._course_repository.remove(course)
        logger.info("Course %s removed", course_id)

    def get_course(self, course_id: str) -> Optional[Course]:
        return self._course_repository.get_by_id(course_id)

    def get_all_courses(self) -> List[Course]:
        return self._course_repository.get_all()

    def _validate_course_data(self, course_id: str, name: str, credits: int) -> None:
        if not course_id or not course_id.strip():
            raise InvalidArgumentError("Course ID cannot be empty", field="id")
        if not name or not name.strip():
            raise InvalidArgumentError("Course name cannot be empty", field="name")
        if credits < MIN_CREDITS or credits > MAX_CREDITS:
            raise InvalidArgumentError(
                f"Credits must be between {MIN_CREDITS} and {MAX_CREDITS}", field="credits"
            )
