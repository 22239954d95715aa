"""
Persistence module providing the in-memory repositories.
"""

from .repositories import (
    InMemoryRepository, StudentRepository, TeacherRepository,
    CourseRepository, EnrollmentRepository
)

__all__ = [
    "InMemoryRepository",
    "StudentRepository",
    "TeacherRepository",
    "CourseRepository",
    "EnrollmentRepository",
]
