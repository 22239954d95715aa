"""
Enrollment service with existence checks against students and courses.
"""

import logging
from typing import List

from ..core.entities import Student, Course, Enrollment
from ..core.interfaces import Repository
from ..core.exceptions import ReferenceNotFoundError

logger = logging.getLogger(__name__)


class EnrollmentService:
    """Service for creating and cancelling enrollments."""

    def __init__(self, enrollment_repository: Repository[Enrollment],
                 student_repository: Repository[Student],
                 course_repository: Repository[Course]):
        self._enrollment_repository = enrollment_repository
        self._student_repository = student_repository
        self._course_repository = course_repository

    def enroll_student(self, student_id: str, course_id: str) -> Enrollment:
        """Enroll a student in a course.

        Both IDs must refer to stored records. Enrolling the same pair twice
        creates a second enrollment.
        """
        self._validate_enrollment(student_id, course_id)
        enrollment = Enrollment(student_id, course_id)
        self._enrollment_repository.add(enrollment)
        logger.info("Student %s enrolled in course %s", student_id, course_id)
        return enrollment

    def cancel_enrollment(self, student_id: str, course_id: str) -> None:
        """Cancel the first matching enrollment. Missing pairs are ignored."""
        matches = self._enrollment_repository.find(
            lambda e: e.student_id == student_id and e.course_id == course_id
        )
        if not matches:
            logger.debug("No enrollment of %s in %s to cancel", student_id, course_id)
            return
        self._enrollment_repository.remove(matches[0])
        logger.info("Enrollment of %s in %s cancelled", student_id, course_id)

    def get_all_enrollments(self) -> List[Enrollment]:
        return self._enrollment_repository.get_all()

    def get_enrollments_for_student(self, student_id: str) -> List[Enrollment]:
        return self._enrollment_repository.find(lambda e: e.student_id == student_id)

    def get_enrollments_for_course(self, course_id: str) -> List[Enrollment]:
        return self._enrollment_repository.find(lambda e: e.course_id == course_id)

    def _validate_enrollment(self, student_id: str, course_id: str) -> None:
        if self._student_repository.get_by_id(student_id) is None:
            raise ReferenceNotFoundError("Student", student_id)
        if self._course_repository.get_by_id(course_id) is None:
            raise ReferenceNotFoundError("Course", course_id)
