"""
Console user interface for the Registrar application.

The UI owns no records. It reads lines, parses them into primitives, calls
the services and prints the results. Every sub-menu action runs inside one
recovery boundary that reports the error and returns to the menu.
"""

import logging
from typing import Callable, Iterable, Optional

from ..config import Settings
from ..core.exceptions import RegistrarException
from ..services import StudentService, CourseService, EnrollmentService, ReportService

logger = logging.getLogger(__name__)

EXIT_CHOICE = 99
BACK_CHOICE = 9


class SchoolManagementUI:
    """Menu-driven console front end."""

    def __init__(self, student_service: StudentService, enrollment_service: EnrollmentService,
                 course_service: CourseService, report_service: ReportService,
                 settings: Settings,
                 input_func: Optional[Callable[[str], str]] = None,
                 output_func: Optional[Callable[..., None]] = None):
        self._student_service = student_service
        self._enrollment_service = enrollment_service
        self._course_service = course_service
        self._report_service = report_service
        self._settings = settings
        self._input = input_func or input
        self._output = output_func or print

    def run(self) -> None:
        """Run the main menu loop until the user exits or input ends."""
        try:
            while True:
                self._display_main_menu()
                choice = self._get_user_choice()

                if choice == 1:
                    self._handle_student_management()
                elif choice == 2:
                    self._handle_enrollment_management()
                elif choice == 3:
                    self._handle_course_management()
                elif choice == 4:
                    self._display_report()
                elif choice == EXIT_CHOICE:
                    self._output("Goodbye!")
                    return
                else:
                    self._output("Invalid choice. Please try again.")
        except EOFError:
            logger.debug("Input closed, leaving console UI")
            self._output("\nGoodbye!")

    def _display_main_menu(self) -> None:
        self._output(f"\n============= {self._settings.app_name.upper()} MAIN MENU =============")
        self._output("1. Student Management")
        self._output("2. Enrollment Management")
        self._output("3. Course Management")
        self._output("4. Generate Report")
        self._output("99. Exit")

    def _get_user_choice(self) -> int:
        try:
            return int(self._input("Enter your choice: ").strip())
        except ValueError:
            return 0

    def _prompt(self, message: str) -> str:
        return self._input(message)

    def _run_submenu(self, title: str, options: Iterable[str], actions: dict) -> None:
        while True:
            self._output(f"\n--- {title} ---")
            for option in options:
                self._output(option)

            choice = self._get_user_choice()
            if choice == BACK_CHOICE:
                break

            action = actions.get(choice)
            if action is None:
                self._output("Invalid choice.")
                continue

            try:
                action()
            except (RegistrarException, ValueError) as e:
                logger.debug("Action %s failed: %s", choice, e)
                self._output(f"Error: {e}")

    # Student management

    def _handle_student_management(self) -> None:
        self._run_submenu(
            "STUDENT MANAGEMENT",
            [
                "1. Add Student",
                "2. Remove Student",
                "3. Update Student",
                "4. Display All Students",
                "5. Find Students by Name",
                "6. Show High GPA Students",
                "7. Sort by Name",
                "8. Sort by GPA",
                "9. Back to Main Menu",
            ],
            {
                1: self._add_student,
                2: self._remove_student,
                3: self._update_student,
                4: self._display_all_students,
                5: self._find_students_by_name,
                6: self._show_high_gpa_students,
                7: self._display_students_sorted_by_name,
                8: self._display_students_sorted_by_gpa,
            }
        )

    def _add_student(self) -> None:
        student_id = self._prompt("Enter student ID: ")
        name = self._prompt("Enter student name: ")
        age = int(self._prompt("Enter student age: "))
        gpa = float(self._prompt("Enter student GPA: "))

        self._student_service.add_student(student_id, name, age, gpa)
        self._output("Student added successfully!")

    def _remove_student(self) -> None:
        student_id = self._prompt("Enter student ID to remove: ")
        self._student_service.remove_student(student_id)
        self._output("Student removed successfully!")

    def _update_student(self) -> None:
        student_id = self._prompt("Enter student ID to update: ")
        name = self._prompt("Enter new name: ")
        age = int(self._prompt("Enter new age: "))
        gpa = float(self._prompt("Enter new GPA: "))

        self._student_service.update_student(student_id, name, age, gpa)
        self._output("Student updated successfully!")

    def _display_all_students(self) -> None:
        students = self._student_service.get_all_students()
        if not students:
            self._output("No students found.")
            return
        self._print_items("All Students:", students)

    def _find_students_by_name(self) -> None:
        name = self._prompt("Enter name to search: ")
        students = self._student_service.find_students_by_name(name)
        if not students:
            self._output("No students found with that name.")
            return
        self._print_items(f"Students with name containing '{name}':", students)

    def _show_high_gpa_students(self) -> None:
        threshold = self._settings.high_gpa_threshold
        students = self._student_service.get_students_with_high_gpa(threshold)
        if not students:
            self._output("No students with high GPA found.")
            return
        self._print_items(f"Students with GPA >= {threshold:.1f}:", students)

    def _display_students_sorted_by_name(self) -> None:
        self._print_items("Students sorted by name:",
                          self._student_service.get_students_sorted_by_name())

    def _display_students_sorted_by_gpa(self) -> None:
        self._print_items("Students sorted by GPA (highest first):",
                          self._student_service.get_students_sorted_by_gpa())

    # Enrollment management

    def _handle_enrollment_management(self) -> None:
        self._run_submenu(
            "ENROLLMENT MANAGEMENT",
            [
                "1. Enroll Student",
                "2. Cancel Enrollment",
                "3. Display All Enrollments",
                "4. Display Enrollments for Student",
                "9. Back to Main Menu",
            ],
            {
                1: self._enroll_student,
                2: self._cancel_enrollment,
                3: self._display_all_enrollments,
                4: self._display_student_enrollments,
            }
        )

    def _enroll_student(self) -> None:
        student_id = self._prompt("Enter student ID: ")
        course_id = self._prompt("Enter course ID: ")
        self._enrollment_service.enroll_student(student_id, course_id)
        self._output("Student enrolled successfully!")

    def _cancel_enrollment(self) -> None:
        student_id = self._prompt("Enter student ID: ")
        course_id = self._prompt("Enter course ID: ")
        self._enrollment_service.cancel_enrollment(student_id, course_id)
        self._output("Enrollment cancelled successfully!")

    def _display_all_enrollments(self) -> None:
        enrollments = self._enrollment_service.get_all_enrollments()
        if not enrollments:
            self._output("No enrollments found.")
            return
        self._print_items("All Enrollments:", enrollments)

    def _display_student_enrollments(self) -> None:
        student_id = self._prompt("Enter student ID: ")
        enrollments = self._enrollment_service.get_enrollments_for_student(student_id)
        if not enrollments:
            self._output(f"No enrollments found for student {student_id}.")
            return
        self._print_items(f"Enrollments for student {student_id}:", enrollments)

    # Course management

    def _handle_course_management(self) -> None:
        self._run_submenu(
            "COURSE MANAGEMENT",
            [
                "1. Add Course",
                "2. Remove Course",
                "3. Display All Courses",
                "9. Back to Main Menu",
            ],
            {
                1: self._add_course,
                2: self._remove_course,
                3: self._display_all_courses,
            }
        )

    def _add_course(self) -> None:
        course_id = self._prompt("Enter course ID: ")
        name = self._prompt("Enter course name: ")
        credits = int(self._prompt("Enter course credits: "))
        self._course_service.add_course(course_id, name, credits)
        self._output("Course added successfully!")

    def _remove_course(self) -> None:
        course_id = self._prompt("Enter course ID to remove: ")
        self._course_service.remove_course(course_id)
        self._output("Course removed successfully!")

    def _display_all_courses(self) -> None:
        courses = self._course_service.get_all_courses()
        if not courses:
            self._output("No courses found.")
            return
        self._print_items("All Courses:", courses)

    # Report

    def _display_report(self) -> None:
        report = self._report_service.generate_report()
        self._output(self._report_service.format_report(report))

    def _print_items(self, header: str, items: Iterable) -> None:
        self._output(f"\n{header}")
        for item in items:
            self._output(str(item))
