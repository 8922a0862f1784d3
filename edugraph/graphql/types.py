"""
GraphQL type definitions for EduGraph.

All GraphQL types are defined using Strawberry's decorator-based approach.
Backend payloads are projected onto these types by the ``_x_to_type``
converters below; fields a backend adds beyond the declared shape are
dropped there.
"""

import strawberry
from strawberry.types import Info
from typing import Any, Callable, List, Optional, TypeVar

from edugraph.clients.http import ApiResult, JsonResult
from edugraph.core.refs import first_ref_id, id_param, ref_id


T = TypeVar("T")


class UnexpectedPayloadError(TypeError):
    """A backend reply did not have the shape a list field requires."""


# === Entity Types ===

@strawberry.type
class University:
    """A university, embedded in student records."""
    id: Optional[strawberry.ID] = None
    name: Optional[str] = None
    location: Optional[str] = None


@strawberry.type
class Student:
    """A student record."""
    id: Optional[strawberry.ID] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    university: Optional[University] = None


@strawberry.type
class Course:
    """A course record."""
    id: Optional[strawberry.ID] = None
    name: Optional[str] = None
    instructor: Optional[str] = None
    category: Optional[str] = None
    schedule: Optional[str] = None


@strawberry.type
class StudentCourse:
    """An enrollment linking a student to a course."""
    id: Optional[strawberry.ID] = None
    student_ref: strawberry.Private[Optional[Any]] = None
    course_ref: strawberry.Private[Optional[Any]] = None

    @strawberry.field
    async def student(self, info: Info) -> Optional[Student]:
        """Look up the enrolled student in the student service."""
        if self.student_ref is None:
            return None
        backends = info.context["backends"]
        result = await backends.students.search(id=id_param(self.student_ref))
        return _first(result, _student_to_type)

    @strawberry.field
    async def course(self, info: Info) -> Optional[Course]:
        """Look up the enrolled course in the course service."""
        if self.course_ref is None:
            return None
        backends = info.context["backends"]
        result = await backends.courses.search(id=id_param(self.course_ref))
        return _first(result, _course_to_type)


@strawberry.type
class AIResult:
    """Text produced by the AI service."""
    result: Optional[str] = None


# === Helper Functions ===

def _id(value: Any) -> Optional[strawberry.ID]:
    """Expose a backend id as a GraphQL ID."""
    if value is None:
        return None
    return strawberry.ID(str(value))


def _str(value: Any) -> Optional[str]:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def _university_to_type(data: Any) -> Optional[University]:
    """Convert a university payload to University."""
    if not isinstance(data, dict):
        return None
    return University(
        id=_id(data.get("id")),
        name=_str(data.get("name")),
        location=_str(data.get("location")),
    )


def _student_to_type(data: dict) -> Student:
    """Convert a student payload to Student."""
    return Student(
        id=_id(data.get("id")),
        first_name=_str(data.get("firstName")),
        last_name=_str(data.get("lastName")),
        email=_str(data.get("email")),
        university=_university_to_type(data.get("university")),
    )


def _course_to_type(data: dict) -> Course:
    """Convert a course payload to Course."""
    return Course(
        id=_id(data.get("id")),
        name=_str(data.get("name")),
        instructor=_str(data.get("instructor")),
        category=_str(data.get("category")),
        schedule=_str(data.get("schedule")),
    )


def _student_course_to_type(data: dict) -> StudentCourse:
    """
    Convert an enrollment payload to StudentCourse.

    The student may be referenced by ``student_id`` or an embedded
    ``student`` object; the course by ``course`` holding either an id or
    an embedded object. Both are reduced to plain ids here.
    """
    return StudentCourse(
        id=_id(data.get("id")),
        student_ref=first_ref_id(data.get("student_id"), data.get("student")),
        course_ref=ref_id(data.get("course")),
    )


def _project_one(result: ApiResult, convert: Callable[[dict], T]) -> Optional[T]:
    """Project a single-object reply; anything but a JSON object gives None."""
    if isinstance(result, JsonResult) and isinstance(result.value, dict):
        return convert(result.value)
    return None


def _project_list(result: ApiResult, convert: Callable[[dict], T]) -> List[T]:
    """
    Project a list reply.

    Raises:
        UnexpectedPayloadError: If the reply is not a JSON array
    """
    if not (isinstance(result, JsonResult) and isinstance(result.value, list)):
        raise UnexpectedPayloadError(
            f"Expected a list from backend, got {_describe(result)}"
        )
    return [convert(item) for item in result.value if isinstance(item, dict)]


def _first(result: ApiResult, convert: Callable[[dict], T]) -> Optional[T]:
    """Return the first element of a list reply, or None."""
    if isinstance(result, JsonResult) and isinstance(result.value, list):
        for item in result.value[:1]:
            if isinstance(item, dict):
                return convert(item)
    return None


def _describe(result: ApiResult) -> str:
    if isinstance(result, JsonResult):
        return type(result.value).__name__
    return "non-JSON text"
