"""
GraphQL query resolvers for EduGraph.

Each field issues exactly one call to a backend service.
"""

import strawberry
from strawberry.types import Info
from typing import Annotated, List, Optional

from edugraph.core.normalize import ai_result_text
from edugraph.graphql.types import (
    AIResult,
    Course,
    Student,
    StudentCourse,
    _course_to_type,
    _project_list,
    _student_course_to_type,
    _student_to_type,
)


@strawberry.type
class Query:
    """Root GraphQL query type."""

    # === Students ===

    @strawberry.field
    async def get_all_students(self, info: Info) -> Optional[List[Optional[Student]]]:
        """List every student (GET /student/getAll)."""
        result = await info.context["backends"].students.get_all()
        return _project_list(result, _student_to_type)

    @strawberry.field
    async def student_search(
        self,
        info: Info,
        id: Optional[strawberry.ID] = None,
        university: Optional[strawberry.ID] = None,
        name: Optional[str] = None,
    ) -> Optional[List[Optional[Student]]]:
        """Search students; only the supplied filters are sent."""
        result = await info.context["backends"].students.search(
            id=id, university=university, name=name
        )
        return _project_list(result, _student_to_type)

    # === Courses ===

    @strawberry.field
    async def get_all_courses(self, info: Info) -> Optional[List[Optional[Course]]]:
        """List every course (GET /courses/getall/)."""
        result = await info.context["backends"].courses.get_all()
        return _project_list(result, _course_to_type)

    @strawberry.field
    async def courses_search(
        self,
        info: Info,
        name: Optional[str] = None,
        instructor: Optional[str] = None,
        category: Optional[str] = None,
    ) -> Optional[List[Optional[Course]]]:
        """Search courses; only the supplied filters are sent."""
        result = await info.context["backends"].courses.search(
            name=name, instructor=instructor, category=category
        )
        return _project_list(result, _course_to_type)

    @strawberry.field
    async def student_courses(
        self,
        info: Info,
        student_id: Annotated[
            Optional[strawberry.ID], strawberry.argument(name="student_id")
        ] = None,
        course: Optional[strawberry.ID] = None,
    ) -> Optional[List[Optional[StudentCourse]]]:
        """List enrollments, optionally filtered by student and course."""
        result = await info.context["backends"].courses.enrollments(
            student_id=student_id, course=course
        )
        return _project_list(result, _student_course_to_type)

    # === AI ===

    @strawberry.field
    async def summarize(self, info: Info, text: str) -> Optional[AIResult]:
        """Summarize a piece of text."""
        result = await info.context["backends"].ai.summarize(text)
        return AIResult(result=ai_result_text(result))

    @strawberry.field
    async def translate(
        self,
        info: Info,
        text: str,
        src: str,
        target: str,
    ) -> Optional[AIResult]:
        """Translate text from ``src`` to ``target`` language."""
        result = await info.context["backends"].ai.translate(text, src, target)
        return AIResult(result=ai_result_text(result))
