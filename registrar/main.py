"""
Main entry point for the Registrar application.
"""

import logging
import sys
from typing import Optional

from .config import Settings, apply_overrides, load_settings
from .core.exceptions import RegistrarException
from .persistence import (
    StudentRepository, TeacherRepository, CourseRepository, EnrollmentRepository
)
from .services import StudentService, CourseService, EnrollmentService, ReportService
from .api.rest_api import RegistrarRestAPI
from .ui.console import SchoolManagementUI

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True
    )


class RegistrarPlatform:
    """Builds the repositories and services and hands them to a front end."""

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or Settings()

        self._repositories = {
            'student': StudentRepository(),
            'teacher': TeacherRepository(),
            'course': CourseRepository(),
            'enrollment': EnrollmentRepository()
        }

        self.student_service = StudentService(self._repositories['student'])
        self.course_service = CourseService(self._repositories['course'])
        self.enrollment_service = EnrollmentService(
            self._repositories['enrollment'],
            self._repositories['student'],
            self._repositories['course']
        )
        self.report_service = ReportService(
            self.student_service, self.course_service, self.enrollment_service
        )
        logger.debug("Platform initialized")

    @property
    def settings(self) -> Settings:
        return self._settings

    def create_rest_api(self) -> RegistrarRestAPI:
        return RegistrarRestAPI(
            self.student_service,
            self.course_service,
            self.enrollment_service,
            self.report_service,
            self._settings
        )

    def create_console(self, **kwargs) -> SchoolManagementUI:
        return SchoolManagementUI(
            self.student_service,
            self.enrollment_service,
            self.course_service,
            self.report_service,
            self._settings,
            **kwargs
        )

    def create_sample_data(self) -> None:
        """Load a small set of students, courses and enrollments."""
        students = [
            ("S001", "Alice Johnson", 19, 3.6),
            ("S002", "Bob Smith", 20, 2.9),
            ("S003", "Carol Davis", 21, 3.9),
            ("S004", "David Wilson", 22, 3.1),
        ]
        for student_id, name, age, gpa in students:
            self.student_service.add_student(student_id, name, age, gpa)

        courses = [
            ("CS101", "Introduction to Programming", 3),
            ("MATH101", "Calculus I", 4),
            ("ENG101", "English Composition", 3),
        ]
        for course_id, name, credits in courses:
            self.course_service.add_course(course_id, name, credits)

        for student_id, course_id in [("S001", "CS101"), ("S002", "CS101"),
                                      ("S003", "MATH101"), ("S001", "MATH101")]:
            self.enrollment_service.enroll_student(student_id, course_id)

        logger.info("Sample data created")

    def run_demo(self) -> None:
        """Load sample data and print the report."""
        self.create_sample_data()
        print(self.report_service.format_report(self.report_service.generate_report()))

    def run_console(self) -> None:
        self.create_console().run()

    def run_server(self) -> None:
        import uvicorn

        api = self.create_rest_api()
        logger.info("Starting REST server on %s:%s", self._settings.rest_host, self._settings.rest_port)
        uvicorn.run(
            api.app,
            host=self._settings.rest_host,
            port=self._settings.rest_port,
            log_level=self._settings.log_level.lower()
        )


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Registrar student record manager")
    parser.add_argument("--config", type=str, help="Configuration file path")
    parser.add_argument("--serve", action="store_true", help="Run the REST API instead of the console")
    parser.add_argument("--host", type=str, help="REST server host")
    parser.add_argument("--port", type=int, help="REST server port")
    parser.add_argument("--demo", action="store_true", help="Run demo mode")
    parser.add_argument("--seed", action="store_true", help="Load sample data on startup")
    parser.add_argument("--log-level", type=str, help="Logging level")

    args = parser.parse_args(argv)

    try:
        settings = load_settings(args.config)
    except RegistrarException as e:
        parser.error(e.message)

    overrides = {}
    if args.host is not None:
        overrides['rest_host'] = args.host
    if args.port is not None:
        overrides['rest_port'] = args.port
    if args.log_level is not None:
        overrides['log_level'] = args.log_level.upper()
    if args.seed:
        overrides['seed_sample_data'] = True
    if overrides:
        try:
            settings = apply_overrides(settings, overrides)
        except RegistrarException as e:
            parser.error(e.message)

    configure_logging(settings.log_level)
    platform = RegistrarPlatform(settings)

    if args.demo:
        platform.run_demo()
        return

    if settings.seed_sample_data:
        platform.create_sample_data()

    try:
        if args.serve:
            platform.run_server()
        else:
            platform.run_console()
    except KeyboardInterrupt:
        print("\nShutting down...")


if __name__ == "__main__":
    main()
