import pytest

from registrar.core.entities import Course
from registrar.core.exceptions import InvalidArgumentError


@pytest.mark.parametrize("credits", [1, 10])
def test_add_course_accepts_credit_boundaries(course_service, credits):
    course = course_service.add_course("C1", "Algorithms", credits)
    assert course_service.get_course("C1") == course == Course("C1", "Algorithms", credits)


@pytest.mark.parametrize("credits", [0, 11])
def test_add_course_rejects_out_of_range_credits(course_service, credits):
    with pytest.raises(InvalidArgumentError, match="Credits must be between 1 and 10"):
        course_service.add_course("C1", "Algorithms", credits)


@pytest.mark.parametrize("course_id,name,message", [
    ("", "Algorithms", "Course ID cannot be empty"),
    ("C1", " ", "Course name cannot be empty"),
])
def test_add_course_rejects_blank_fields(course_service, course_id, name, message):
    with pytest.raises(InvalidArgumentError) as exc_info:
        course_service.add_course(course_id, name, 3)
    assert exc_info.value.message == message


def test_remove_course(course_service):
    course_service.add_course("C1", "Algorithms", 4)
    course_service.add_course("C2", "Databases", 3)

    course_service.remove_course("C1")
    course_service.remove_course("C1")

    assert [c.id for c in course_service.get_all_courses()] == ["C2"]
