"""
REST backend clients.

One class per backend service. Every method maps to exactly one relay call
and returns the raw ApiResult; shaping the reply for the graph is left to
the resolvers.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional
from urllib.parse import urlencode

from edugraph.clients.http import ApiResult, RestRelay
from edugraph.config.settings import Settings


def build_query(params: Dict[str, Any]) -> str:
    """
    Build a query string from the supplied arguments only.

    Arguments that are None or empty strings are left out entirely
    rather than sent as empty values. Insertion order is kept.
    """
    present = [
        (key, str(value))
        for key, value in params.items()
        if value is not None and value != ""
    ]
    return urlencode(present)


class StudentBackend:
    """Client for the student records service."""

    def __init__(self, relay: RestRelay, base_url: str):
        self.relay = relay
        self.base_url = base_url

    async def get_all(self) -> ApiResult:
        return await self.relay.call("GET", f"{self.base_url}/student/getAll")

    async def search(
        self,
        id: Optional[str] = None,
        university: Optional[str] = None,
        name: Optional[str] = None,
    ) -> ApiResult:
        query = build_query({"id": id, "university": university, "name": name})
        return await self.relay.call(
            "GET", f"{self.base_url}/student/search?{query}"
        )

    async def add(self, body: Dict[str, Any]) -> ApiResult:
        return await self.relay.call("POST", f"{self.base_url}/student/add", body)

    async def update(self, student_id: str, body: Dict[str, Any]) -> ApiResult:
        return await self.relay.call(
            "PUT", f"{self.base_url}/student/update/{student_id}", body
        )

    async def delete(self, student_id: str) -> ApiResult:
        return await self.relay.call(
            "DELETE", f"{self.base_url}/student/delete/{student_id}"
        )


class CourseBackend:
    """Client for the course records service (courses and enrollments)."""

    def __init__(self, relay: RestRelay, base_url: str):
        self.relay = relay
        self.base_url = base_url

    async def get_all(self) -> ApiResult:
        return await self.relay.call("GET", f"{self.base_url}/courses/getall/")

    async def search(
        self,
        id: Optional[str] = None,
        name: Optional[str] = None,
        instructor: Optional[str] = None,
        category: Optional[str] = None,
    ) -> ApiResult:
        query = build_query({
            "id": id,
            "name": name,
            "instructor": instructor,
            "category": category,
        })
        return await self.relay.call("GET", f"{self.base_url}/courses/?{query}")

    async def add(self, body: Dict[str, Any]) -> ApiResult:
        return await self.relay.call("POST", f"{self.base_url}/courses/", body)

    async def update(self, course_id: str, body: Dict[str, Any]) -> ApiResult:
        return await self.relay.call(
            "PUT", f"{self.base_url}/courses/{course_id}/", body
        )

    async def delete(self, course_id: str) -> ApiResult:
        return await self.relay.call(
            "DELETE", f"{self.base_url}/courses/delete/{course_id}/"
        )

    async def enrollments(
        self,
        student_id: Optional[str] = None,
        course: Optional[str] = None,
    ) -> ApiResult:
        query = build_query({"student_id": student_id, "course": course})
        return await self.relay.call(
            "GET", f"{self.base_url}/student-courses/?{query}"
        )

    async def enroll(self, body: Dict[str, Any]) -> ApiResult:
        return await self.relay.call(
            "POST", f"{self.base_url}/student-courses/", body
        )


class AIBackend:
    """Client for the AI text service."""

    def __init__(self, relay: RestRelay, base_url: str):
        self.relay = relay
        self.base_url = base_url

    async def summarize(self, text: str) -> ApiResult:
        return await self.relay.call(
            "POST", f"{self.base_url}/chatbot/summarize/", {"text": text}
        )

    async def translate(self, text: str, src: str, target: str) -> ApiResult:
        return await self.relay.call(
            "POST",
            f"{self.base_url}/chatbot/translate/",
            {
                "text": text,
                "src_language": src,
                "target_language": target,
            },
        )


@dataclass(frozen=True)
class Backends:
    """The three backend clients sharing one relay."""
    students: StudentBackend
    courses: CourseBackend
    ai: AIBackend
    relay: RestRelay

    async def aclose(self) -> None:
        await self.relay.aclose()


def create_backends(settings: Settings, transport=None) -> Backends:
    """
    Build backend clients from settings.

    Args:
        settings: Gateway settings
        transport: Optional httpx transport passed through to the relay

    Returns:
        Backends container
    """
    relay = RestRelay(timeout=settings.backend_timeout, transport=transport)
    return Backends(
        students=StudentBackend(relay, settings.student_base),
        courses=CourseBackend(relay, settings.course_base),
        ai=AIBackend(relay, settings.ai_base),
        relay=relay,
    )
