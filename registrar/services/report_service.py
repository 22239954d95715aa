"""
Report service producing a summary of the stored records.
"""

from typing import Any, Dict

from .student_service import StudentService
from .course_service import CourseService
from .enrollment_service import EnrollmentService


class ReportService:
    """Read-only summary over students, courses and enrollments."""

    def __init__(self, student_service: StudentService, course_service: CourseService,
                 enrollment_service: EnrollmentService):
        self._student_service = student_service
        self._course_service = course_service
        self._enrollment_service = enrollment_service

    def generate_report(self) -> Dict[str, Any]:
        students = self._student_service.get_students_sorted_by_gpa()
        courses = self._course_service.get_all_courses()
        enrollments = self._enrollment_service.get_all_enrollments()

        average_gpa = None
        if students:
            average_gpa = round(sum(s.gpa for s in students) / len(students), 2)

        enrollments_per_course = {course.id: 0 for course in courses}
        for enrollment in enrollments:
            if enrollment.course_id in enrollments_per_course:
                enrollments_per_course[enrollment.course_id] += 1

        return {
            'total_students': len(students),
            'total_courses': len(courses),
            'total_enrollments': len(enrollments),
            'average_gpa': average_gpa,
            'top_student': students[0].to_dict() if students else None,
            'enrollments_per_course': enrollments_per_course
        }

    @staticmethod
    def format_report(report: Dict[str, Any]) -> str:
        lines = [
            "=== REGISTRAR REPORT ===",
            f"Students:    {report['total_students']}",
            f"Courses:     {report['total_courses']}",
            f"Enrollments: {report['total_enrollments']}",
        ]
        if report['average_gpa'] is None:
            lines.append("Average GPA: n/a")
        else:
            lines.append(f"Average GPA: {report['average_gpa']:.2f}")
        top = report['top_student']
        if top is not None:
            lines.append(f"Top student: {top['name']} ({top['id']}), GPA {top['gpa']:.2f}")
        if report['enrollments_per_course']:
            lines.append("Enrollments per course:")
            for course_id, count in report['enrollments_per_course'].items():
                lines.append(f"  {course_id}: {count}")
        return "\n".join(lines)
