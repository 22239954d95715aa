import os
import sys

import pytest

CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.dirname(CURRENT_DIR)
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from registrar.config import Settings
from registrar.persistence import StudentRepository, CourseRepository, EnrollmentRepository
from registrar.services import StudentService, CourseService, EnrollmentService, ReportService


@pytest.fixture
def student_repository():
    return StudentRepository()


@pytest.fixture
def course_repository():
    return CourseRepository()


@pytest.fixture
def enrollment_repository():
    return EnrollmentRepository()


@pytest.fixture
def student_service(student_repository):
    return StudentService(student_repository)


@pytest.fixture
def course_service(course_repository):
    return CourseService(course_repository)


@pytest.fixture
def enrollment_service(enrollment_repository, student_repository, course_repository):
    return EnrollmentService(enrollment_repository, student_repository, course_repository)


@pytest.fixture
def report_service(student_service, course_service, enrollment_service):
    return ReportService(student_service, course_service, enrollment_service)


@pytest.fixture
def settings():
    return Settings()
