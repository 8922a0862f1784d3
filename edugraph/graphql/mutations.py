"""
GraphQL mutation resolvers for EduGraph.

Each mutation translates its GraphQL input into the request body the
backend expects and issues exactly one call.
"""

import strawberry
from strawberry.types import Info
from typing import Any, Dict, Optional

from edugraph.core.normalize import delete_succeeded
from edugraph.core.refs import ref_id, to_number
from edugraph.graphql.types import (
    Course,
    Student,
    StudentCourse,
    _course_to_type,
    _project_one,
    _student_course_to_type,
    _student_to_type,
)


# === Input Types ===

@strawberry.input
class StudentInput:
    """Input for creating or replacing a student."""
    first_name: str
    last_name: str
    email: str
    university_id: strawberry.ID


@strawberry.input
class CourseInput:
    """Input for creating a course."""
    name: str
    instructor: str
    category: str
    schedule: str


@strawberry.input
class CourseUpdateInput:
    """Input for updating a course."""
    name: Optional[str] = None
    instructor: Optional[str] = None
    category: Optional[str] = None
    schedule: Optional[str] = None


@strawberry.input
class StudentCourseInput:
    """Input for enrolling a student in a course."""
    student_id: strawberry.ID = strawberry.field(name="student_id")
    course: strawberry.ID


# === Body Builders ===

def student_body(input: StudentInput) -> Dict[str, Any]:
    """
    Build the student service body.

    The flat ``universityId`` becomes a nested ``university`` object with a
    numeric id. When no university id is given the object is sent empty.
    """
    university: Dict[str, Any] = {}
    if input.university_id:
        university["id"] = to_number(input.university_id)
    return {
        "firstName": input.first_name,
        "lastName": input.last_name,
        "email": input.email,
        "university": university,
    }


def course_body(input: Any) -> Dict[str, Any]:
    """Build the course service body (create and update share the shape)."""
    return {
        "name": input.name,
        "instructor": input.instructor,
        "category": input.category,
        "schedule": input.schedule,
    }


def enrollment_body(input: StudentCourseInput) -> Dict[str, Any]:
    """Build the enrollment body, reducing both references to numbers."""
    student_id = ref_id(input.student_id)
    course_id = ref_id(input.course)
    body: Dict[str, Any] = {}
    if student_id is not None:
        body["student_id"] = to_number(student_id)
    if course_id is not None:
        body["course"] = to_number(course_id)
    return body


# === Mutations ===

@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    # === Students ===

    @strawberry.mutation
    async def add_student(self, info: Info, input: StudentInput) -> Optional[Student]:
        """Create a student."""
        result = await info.context["backends"].students.add(student_body(input))
        return _project_one(result, _student_to_type)

    @strawberry.mutation
    async def update_student(
        self,
        info: Info,
        id: strawberry.ID,
        input: StudentInput,
    ) -> Optional[Student]:
        """Replace a student's details."""
        result = await info.context["backends"].students.update(
            id, student_body(input)
        )
        return _project_one(result, _student_to_type)

    @strawberry.mutation
    async def delete_student(self, info: Info, id: strawberry.ID) -> Optional[bool]:
        """Delete a student."""
        result = await info.context["backends"].students.delete(id)
        return delete_succeeded(result)

    # === Courses ===

    @strawberry.mutation
    async def add_course(self, info: Info, input: CourseInput) -> Optional[Course]:
        """Create a course."""
        result = await info.context["backends"].courses.add(course_body(input))
        return _project_one(result, _course_to_type)

    @strawberry.mutation
    async def update_course(
        self,
        info: Info,
        id: strawberry.ID,
        input: CourseUpdateInput,
    ) -> Optional[Course]:
        """Update a course; omitted fields are sent as null."""
        result = await info.context["backends"].courses.update(
            id, course_body(input)
        )
        return _project_one(result, _course_to_type)

    @strawberry.mutation
    async def delete_course(self, info: Info, id: strawberry.ID) -> Optional[bool]:
        """Delete a course."""
        result = await info.context["backends"].courses.delete(id)
        return delete_succeeded(result)

    # === Enrollments ===

    @strawberry.mutation
    async def add_student_course(
        self,
        info: Info,
        input: StudentCourseInput,
    ) -> Optional[StudentCourse]:
        """Enroll a student in a course."""
        result = await info.context["backends"].courses.enroll(
            enrollment_body(input)
        )
        return _project_one(result, _student_course_to_type)
