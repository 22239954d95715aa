"""
Core entities for the Registrar application.

Entities are plain records compared by value. They carry no behaviour beyond
construction, display formatting and conversion to dictionaries.
"""

from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Any, Dict


@dataclass
class Student:
    """Student record."""
    id: str
    name: str
    age: int
    gpa: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def __str__(self) -> str:
        return f"Student[Id={self.id}, Name={self.name}, Age={self.age}, GPA={self.gpa:.2f}]"


@dataclass
class Teacher:
    """Teacher record."""
    id: str
    name: str
    major: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def __str__(self) -> str:
        return f"Teacher[Id={self.id}, Name={self.name}, Major={self.major}]"


@dataclass
class Course:
    """Course record."""
    id: str
    name: str
    credits: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def __str__(self) -> str:
        return f"Course[Id={self.id}, Name={self.name}, Credits={self.credits}]"


@dataclass
class Enrollment:
    """A student's enrollment in a course, stamped at creation time."""
    student_id: str
    course_id: str
    enrollment_date: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'student_id': self.student_id,
            'course_id': self.course_id,
            'enrollment_date': self.enrollment_date.isoformat()
        }

    def __str__(self) -> str:
        return (f"Enrollment[StudentId={self.student_id}, CourseId={self.course_id}, "
                f"Date={self.enrollment_date:%Y-%m-%d %H:%M:%S}]")


@dataclass
class Grade:
    """Grade record."""
    student_id: str
    course_id: str
    score: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def __str__(self) -> str:
        return f"Grade[StudentId={self.student_id}, CourseId={self.course_id}, Score={self.score:.2f}]"
