import pytest

from registrar.config import Settings
from registrar.ui import SchoolManagementUI


@pytest.fixture
def run_ui(student_service, enrollment_service, course_service, report_service):
    """Run the console with scripted input and return everything printed"""
    def _run(lines, settings=None):
        inputs = iter(lines)
        output = []

        def fake_input(prompt):
            try:
                return next(inputs)
            except StopIteration:
                raise EOFError

        ui = SchoolManagementUI(
            student_service, enrollment_service, course_service, report_service,
            settings or Settings(),
            input_func=fake_input,
            output_func=lambda *args: output.append(" ".join(str(a) for a in args))
        )
        ui.run()
        return "\n".join(output)
    return _run


def test_exit(run_ui):
    output = run_ui(["99"])
    assert "MAIN MENU" in output
    assert output.endswith("Goodbye!")


def test_invalid_main_choice(run_ui):
    output = run_ui(["abc", "99"])
    assert "Invalid choice. Please try again." in output


def test_add_and_display_student(run_ui, student_service):
    output = run_ui(["1", "1", "S1", "Alice", "20", "3.5", "4", "9", "99"])

    assert "Student added successfully!" in output
    assert "Student[Id=S1, Name=Alice, Age=20, GPA=3.50]" in output
    assert student_service.get_student("S1").gpa == 3.5


def test_validation_error_is_reported_and_loop_continues(run_ui, student_service):
    output = run_ui(["1", "1", "S1", "Alice", "151", "3.0", "4", "9", "99"])

    assert "Error: Invalid age" in output
    assert "No students found." in output
    assert student_service.get_all_students() == []


def test_non_numeric_age_is_reported(run_ui, student_service):
    output = run_ui(["1", "1", "S1", "Alice", "twenty", "9", "99"])

    assert "Error: " in output
    assert student_service.get_all_students() == []


def test_sort_and_search(run_ui, student_service):
    student_service.add_student("S1", "Bob", 20, 3.0)
    student_service.add_student("S2", "alice", 20, 4.0)

    output = run_ui(["1", "7", "5", "ALI", "5", "zzz", "9", "99"])

    sorted_block = output.split("Students sorted by name:")[1]
    assert sorted_block.index("alice") < sorted_block.index("Bob")
    assert "Students with name containing 'ALI':" in output
    assert "No students found with that name." in output


def test_high_gpa_uses_configured_threshold(run_ui, student_service):
    student_service.add_student("S1", "Alice", 20, 3.8)
    student_service.add_student("S2", "Bob", 20, 2.0)

    output = run_ui(["1", "6", "9", "99"], settings=Settings(high_gpa_threshold=3.5))

    assert "Students with GPA >= 3.5:" in output
    assert "Name=Alice" in output
    assert "Name=Bob" not in output


def test_high_gpa_default_threshold(run_ui, student_service):
    student_service.add_student("S1", "Alice", 20, 4.0)

    output = run_ui(["1", "6", "9", "99"])

    assert "No students with high GPA found." in output


def test_enrollment_flow(run_ui, student_service, course_service, enrollment_service):
    student_service.add_student("S1", "Alice", 20, 3.0)

    output = run_ui([
        "3", "1", "C1", "Algorithms", "4", "9",
        "2", "1", "S1", "C1", "1", "S1", "C9", "4", "S1", "2", "S1", "C1", "3", "9",
        "99",
    ])

    assert "Course added successfully!" in output
    assert "Student enrolled successfully!" in output
    assert "Error: Course with ID C9 not found" in output
    assert "Enrollments for student S1:" in output
    assert "Enrollment cancelled successfully!" in output
    assert "No enrollments found." in output
    assert enrollment_service.get_all_enrollments() == []


def test_report(run_ui, student_service):
    student_service.add_student("S1", "Alice", 20, 3.0)

    output = run_ui(["4", "99"])

    assert "=== REGISTRAR REPORT ===" in output
    assert "Students:    1" in output


def test_end_of_input_exits(run_ui):
    output = run_ui(["1"])
    assert output.endswith("Goodbye!")
