"""
Student service: validation and queries over the student repository.
"""

import logging
from typing import List, Optional

from ..core.entities import Student
from ..core.interfaces import Repository
from ..core.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

MIN_AGE = 0
MAX_AGE = 150
MIN_GPA = 0.0
MAX_GPA = 4.0
DEFAULT_HIGH_GPA = 8.0


class StudentService:
    """Service for validating and querying student records."""

    def __init__(self, student_repository: Repository[Student]):
        self._student_repository = student_repository

    def add_student(self, student_id: str, name: str, age: int, gpa: float) -> Student:
        """Validate and add a student. Duplicate IDs are not rejected."""
        self._validate_student_data(student_id, name, age, gpa)
        student = Student(student_id, name, age, gpa)
        self._student_repository.add(student)
        logger.info("Student %s added", student_id)
        return student

    def remove_student(self, student_id: str) -> None:
        """Remove a student by ID. Unknown IDs are ignored."""
        student = self._student_repository.get_by_id(student_id)
        if student is None:
            logger.debug("No student with ID %s to remove", student_id)
            return
        self._student_repository.remove(student)
        logger.info("Student %s removed", student_id)

    def update_student(self, student_id: str, name: str, age: int, gpa: float) -> None:
        """Replace an existing student's fields.

        Takes effect only when a student with ``student_id`` is already stored;
        otherwise nothing is inserted.
        """
        self._validate_student_data(student_id, name, age, gpa)
        student = Student(student_id, name, age, gpa)
        self._student_repository.update(student)
        logger.info("Student %s update requested", student_id)

    def get_student(self, student_id: str) -> Optional[Student]:
        return self._student_repository.get_by_id(student_id)

    def get_all_students(self) -> List[Student]:
        return self._student_repository.get_all()

    def find_students_by_name(self, fragment: str) -> List[Student]:
        """Case-insensitive substring search on student names."""
        needle = fragment.casefold()
        return self._student_repository.find(lambda s: needle in s.name.casefold())

    def get_students_with_high_gpa(self, min_gpa: float = DEFAULT_HIGH_GPA) -> List[Student]:
        return self._student_repository.find(lambda s: s.gpa >= min_gpa)

    def get_students_sorted_by_name(self) -> List[Student]:
        return sorted(self._student_repository.get_all(), key=lambda s: s.name.casefold())

    def get_students_sorted_by_gpa(self) -> List[Student]:
        """Highest GPA first; ties keep insertion order."""
        return sorted(self._student_repository.get_all(), key=lambda s: s.gpa, reverse=True)

    def _validate_student_data(self, student_id: str, name: str, age: int, gpa: float) -> None:
        if not student_id or not student_id.strip():
            raise InvalidArgumentError("Student ID cannot be empty", field="id")
        if not name or not name.strip():
            raise InvalidArgumentError("Student name cannot be empty", field="name")
        if not (MIN_AGE <= age <= MAX_AGE):
            raise InvalidArgumentError("Invalid age", field="age")
        if not (MIN_GPA <= gpa <= MAX_GPA):
            raise InvalidArgumentError("GPA must be between 0 and 4.0", field="gpa")
