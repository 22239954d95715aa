"""
REST API implementation for the Registrar application using FastAPI.
"""

import logging
from typing import Optional, Dict, Any, List
from datetime import datetime, timezone
from pydantic import BaseModel

from fastapi import FastAPI, HTTPException, Query, Response, status
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import Settings
from ..core.entities import Student, Course, Enrollment
from ..core.exceptions import InvalidArgumentError, ReferenceNotFoundError
from ..services import StudentService, CourseService, EnrollmentService, ReportService

logger = logging.getLogger(__name__)


# Pydantic models for API
class StudentCreate(BaseModel):
    id: str
    name: str
    age: int
    gpa: float


class StudentUpdate(BaseModel):
    name: str
    age: int
    gpa: float


class StudentResponse(BaseModel):
    id: str
    name: str
    age: int
    gpa: float


class CourseCreate(BaseModel):
    id: str
    name: str
    credits: int


class CourseResponse(BaseModel):
    id: str
    name: str
    credits: int


class EnrollmentRequest(BaseModel):
    student_id: str
    course_id: str


class EnrollmentResponse(BaseModel):
    student_id: str
    course_id: str
    enrollment_date: datetime


class StatisticsResponse(BaseModel):
    success: bool
    message: str
    statistics: Dict[str, Any]


class RegistrarRestAPI:
    """REST API over the Registrar services."""

    def __init__(self, student_service: StudentService, course_service: CourseService,
                 enrollment_service: EnrollmentService, report_service: ReportService,
                 settings: Settings):
        self._student_service = student_service
        self._course_service = course_service
        self._enrollment_service = enrollment_service
        self._report_service = report_service
        self._settings = settings

        # Create FastAPI app
        self.app = FastAPI(
            title=f"{settings.app_name} API",
            description="Student, course and enrollment records",
            version=__version__,
            docs_url="/docs",
            redoc_url="/redoc"
        )

        self.app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

        self._setup_routes()

    def _setup_routes(self):
        """Setup API routes."""

        @self.app.get("/", response_model=Dict[str, str])
        async def root():
            """Root endpoint."""
            return {
                "message": f"{self._settings.app_name} API",
                "version": __version__,
                "docs": "/docs"
            }

        @self.app.get("/health", response_model=Dict[str, str])
        async def health_check():
            """Health check endpoint."""
            return {"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()}

        # Student endpoints
        @self.app.post("/students", response_model=StudentResponse, status_code=status.HTTP_201_CREATED)
        async def create_student(student_data: StudentCreate):
            """Create a new student."""
            try:
                student = self._student_service.add_student(
                    student_data.id, student_data.name, student_data.age, student_data.gpa
                )
            except InvalidArgumentError as e:
                raise HTTPException(status_code=400, detail=e.message)
            return self._student_to_response(student)

        @self.app.get("/students", response_model=List[StudentResponse])
        async def list_students(sort: Optional[str] = Query(None, pattern=r'^(name|gpa)$')):
            """List all students, optionally sorted by name or GPA."""
            if sort == "name":
                students = self._student_service.get_students_sorted_by_name()
            elif sort == "gpa":
                students = self._student_service.get_students_sorted_by_gpa()
            else:
                students = self._student_service.get_all_students()
            return [self._student_to_response(student) for student in students]

        @self.app.get("/students/search", response_model=List[StudentResponse])
        async def search_students(name: str = Query(...)):
            """Find students whose name contains the given text."""
            students = self._student_service.find_students_by_name(name)
            return [self._student_to_response(student) for student in students]

        @self.app.get("/students/high-gpa", response_model=List[StudentResponse])
        async def high_gpa_students(min_gpa: Optional[float] = None):
            """List students at or above a GPA threshold."""
            threshold = self._settings.high_gpa_threshold if min_gpa is None else min_gpa
            students = self._student_service.get_students_with_high_gpa(threshold)
            return [self._student_to_response(student) for student in students]

        @self.app.get("/students/{student_id}", response_model=StudentResponse)
        async def get_student(student_id: str):
            """Get a student by ID."""
            student = self._student_service.get_student(student_id)
            if student is None:
                raise HTTPException(status_code=404, detail="Student not found")
            return self._student_to_response(student)

        @self.app.put("/students/{student_id}", response_model=StudentResponse)
        async def update_student(student_id: str, student_data: StudentUpdate):
            """Update an existing student."""
            if self._student_service.get_student(student_id) is None:
                raise HTTPException(status_code=404, detail="Student not found")
            try:
                self._student_service.update_student(
                    student_id, student_data.name, student_data.age, student_data.gpa
                )
            except InvalidArgumentError as e:
                raise HTTPException(status_code=400, detail=e.message)
            return self._student_to_response(self._student_service.get_student(student_id))

        @self.app.delete("/students/{student_id}", status_code=status.HTTP_204_NO_CONTENT,
                         response_class=Response)
        async def delete_student(student_id: str):
            """Remove a student. Unknown IDs are ignored."""
            self._student_service.remove_student(student_id)
            return Response(status_code=status.HTTP_204_NO_CONTENT)

        # Course endpoints
        @self.app.post("/courses", response_model=CourseResponse, status_code=status.HTTP_201_CREATED)
        async def create_course(course_data: CourseCreate):
            """Create a new course."""
            try:
                course = self._course_service.add_course(
                    course_data.id, course_data.name, course_data.credits
                )
            except InvalidArgumentError as e:
                raise HTTPException(status_code=400, detail=e.message)
            return self._course_to_response(course)

        @self.app.get("/courses", response_model=List[CourseResponse])
        async def list_courses():
            """List all courses."""
            return [self._course_to_response(course) for course in self._course_service.get_all_courses()]

        @self.app.get("/courses/{course_id}", response_model=CourseResponse)
        async def get_course(course_id: str):
            """Get a course by ID."""
            course = self._course_service.get_course(course_id)
            if course is None:
                raise HTTPException(status_code=404, detail="Course not found")
            return self._course_to_response(course)

        # Enrollment endpoints
        @self.app.post("/enrollments", response_model=EnrollmentResponse,
                       status_code=status.HTTP_201_CREATED)
        async def enroll_student(enrollment_data: EnrollmentRequest):
            """Enroll a student in a course."""
            try:
                enrollment = self._enrollment_service.enroll_student(
                    enrollment_data.student_id, enrollment_data.course_id
                )
            except ReferenceNotFoundError as e:
                raise HTTPException(status_code=404, detail=e.message)
            return self._enrollment_to_response(enrollment)

        @self.app.get("/enrollments", response_model=List[EnrollmentResponse])
        async def list_enrollments():
            """List all enrollments."""
            enrollments = self._enrollment_service.get_all_enrollments()
            return [self._enrollment_to_response(e) for e in enrollments]

        @self.app.delete("/enrollments/{student_id}/{course_id}",
                         status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
        async def cancel_enrollment(student_id: str, course_id: str):
            """Cancel an enrollment. Missing enrollments are ignored."""
            self._enrollment_service.cancel_enrollment(student_id, course_id)
            return Response(status_code=status.HTTP_204_NO_CONTENT)

        # Statistics endpoints
        @self.app.get("/statistics", response_model=StatisticsResponse)
        async def get_statistics():
            """Get the records summary."""
            return StatisticsResponse(
                success=True,
                message="Statistics retrieved successfully",
                statistics=self._report_service.generate_report()
            )

    def _student_to_response(self, student: Student) -> StudentResponse:
        """Convert Student entity to response model."""
        return StudentResponse(id=student.id, name=student.name, age=student.age, gpa=student.gpa)

    def _course_to_response(self, course: Course) -> CourseResponse:
        """Convert Course entity to response model."""
        return CourseResponse(id=course.id, name=course.name, credits=course.credits)

    def _enrollment_to_response(self, enrollment: Enrollment) -> EnrollmentResponse:
        """Convert Enrollment entity to response model."""
        return EnrollmentResponse(
            student_id=enrollment.student_id,
            course_id=enrollment.course_id,
            enrollment_date=enrollment.enrollment_date
        )
