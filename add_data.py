"""
Script to add sample data to a running Registrar server via the REST API.
Make sure the server is running before executing this script.

Usage:
    python add_data.py
"""

import requests
import json
import sys
import os


def _console_supports_utf8() -> bool:
    enc = getattr(sys.stdout, "encoding", None)
    return enc is not None and "utf" in enc.lower()


_OK_CHAR = "✓" if _console_supports_utf8() else "[OK]"
_FAIL_CHAR = "✗" if _console_supports_utf8() else "[FAIL]"


def _detect_base_url() -> str:
    """Determine a reachable BASE_URL.

    Priority: environment variable `REGISTRAR_BASE_URL`, then common local ports.
    If nothing responds, fall back to http://127.0.0.1:8000.
    """
    env = os.environ.get("REGISTRAR_BASE_URL")
    if env:
        return env

    candidates = [
        "http://127.0.0.1:8000",
        "http://127.0.0.1:8888",
        "http://localhost:8000",
    ]

    for c in candidates:
        try:
            resp = requests.get(f"{c}/health", timeout=0.5)
            if resp.status_code == 200:
                return c
        except requests.exceptions.RequestException:
            continue

    return candidates[0]


BASE_URL = _detect_base_url()


def check_server():
    """Check if the server is running."""
    try:
        response = requests.get(f"{BASE_URL}/health", timeout=2)
        if response.status_code == 200:
            print(f"{_OK_CHAR} Server is running")
            return True
    except requests.exceptions.RequestException:
        pass
    print(f"{_FAIL_CHAR} Server is not running!")
    print("\nPlease start the server first:")
    print("  python -m registrar.main --serve --port 8000")
    return False


def _post(path, data, label):
    try:
        response = requests.post(f"{BASE_URL}{path}", json=data, timeout=5)
    except requests.exceptions.RequestException as e:
        print(f"{_FAIL_CHAR} Error creating {label}: {e}")
        return None
    if response.status_code == 201:
        print(f"{_OK_CHAR} Created {label}")
        return response.json()
    print(f"{_FAIL_CHAR} Failed to create {label}: {response.text}")
    return None


def create_student(student_id, name, age, gpa):
    """Create a new student."""
    data = {"id": student_id, "name": name, "age": age, "gpa": gpa}
    return _post("/students", data, f"student: {name} ({student_id})")


def create_course(course_id, name, credits):
    """Create a new course."""
    data = {"id": course_id, "name": name, "credits": credits}
    return _post("/courses", data, f"course: {course_id} - {name}")


def enroll_student(student_id, course_id):
    """Enroll a student in a course."""
    data = {"student_id": student_id, "course_id": course_id}
    return _post("/enrollments", data, f"enrollment: {student_id} in {course_id}")


def list_students():
    """List all students, sorted by name."""
    try:
        response = requests.get(f"{BASE_URL}/students", params={"sort": "name"}, timeout=5)
    except requests.exceptions.RequestException as e:
        print(f"{_FAIL_CHAR} Error listing students: {e}")
        return []
    if response.status_code != 200:
        print(f"{_FAIL_CHAR} Failed to list students: {response.text}")
        return []

    students = response.json()
    print(f"\n{'='*60}")
    print(f"Students ({len(students)})")
    print(f"{'='*60}")
    for student in students:
        print(f"  {student['id']:8} | {student['name']:20} | age {student['age']:3} | GPA {student['gpa']:.2f}")
    return students


def get_statistics():
    """Get the records summary."""
    try:
        response = requests.get(f"{BASE_URL}/statistics", timeout=5)
    except requests.exceptions.RequestException as e:
        print(f"{_FAIL_CHAR} Error getting statistics: {e}")
        return None
    if response.status_code != 200:
        print(f"{_FAIL_CHAR} Failed to get statistics: {response.text}")
        return None

    stats = response.json()
    print(f"\n{'='*60}")
    print("Statistics")
    print(f"{'='*60}")
    print(json.dumps(stats['statistics'], indent=2))
    return stats


def main():
    """Main execution."""
    print("="*60)
    print("Registrar - Data Addition Script")
    print("="*60)
    print()

    if not check_server():
        sys.exit(1)

    print("\nCreating students...")
    create_student("S001", "Alice Johnson", 19, 3.6)
    create_student("S002", "Bob Smith", 20, 2.9)
    create_student("S003", "Carol Davis", 21, 3.9)
    create_student("S004", "David Wilson", 22, 3.1)
    create_student("S005", "Emma Brown", 18, 3.4)

    print("\nCreating courses...")
    create_course("CS101", "Introduction to Programming", 3)
    create_course("CS201", "Data Structures", 4)
    create_course("MATH101", "Calculus I", 4)
    create_course("ENG101", "English Composition", 3)

    print("\nEnrolling students...")
    enroll_student("S001", "CS101")
    enroll_student("S002", "CS101")
    enroll_student("S003", "MATH101")
    enroll_student("S004", "CS201")
    enroll_student("S005", "ENG101")
    enroll_student("S001", "MATH101")

    list_students()
    get_statistics()

    print("\n" + "="*60)
    print(f"{_OK_CHAR} Sample data added successfully!")
    print("="*60)
    print("\nYou can now:")
    print(f"  - View API docs: {BASE_URL}/docs")
    print(f"  - List students: curl {BASE_URL}/students")
    print(f"  - Get statistics: curl {BASE_URL}/statistics")
    print()


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print(f"\n\n{_FAIL_CHAR} Interrupted by user")
        sys.exit(1)
