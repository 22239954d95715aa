"""
Services module containing the validation and query layer.
"""

from .student_service import StudentService
from .course_service import CourseService
from .enrollment_service import EnrollmentService
from .report_service import ReportService

__all__ = [
    "StudentService",
    "CourseService",
    "EnrollmentService",
    "ReportService",
]
