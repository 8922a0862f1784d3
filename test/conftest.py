"""
Shared fixtures and configuration for EduGraph tests.

Backends are faked with an in-memory campus served through
``httpx.MockTransport`` so every outbound request can be inspected.
"""

import json
import itertools
from urllib.parse import parse_qs

import httpx
import pytest


STUDENT_BASE = "http://students.test"
COURSE_BASE = "http://courses.test"
AI_BASE = "http://ai.test"


# =============================================================================
# Fake Backends
# =============================================================================

class FakeCampus:
    """
    In-memory stand-in for the three REST services.

    Records every request in ``requests``. Individual routes can be forced to
    reply with a fixed ``httpx.Response`` through ``replies``, keyed by
    ``(method, host, path)``.
    """

    def __init__(self):
        self.requests = []
        self.replies = {}
        self._ids = itertools.count(100)
        self.universities = {
            3: {"id": 3, "name": "Tech University", "location": "Boston"},
        }
        self.students = {
            5: {
                "id": 5,
                "firstName": "Ada",
                "lastName": "Lovelace",
                "email": "ada@example.edu",
                "university": self.universities[3],
                "enrolledSince": "2021-09-01",
            },
        }
        self.courses = {
            7: {
                "id": 7,
                "name": "Algorithms",
                "instructor": "Knuth",
                "category": "CS",
                "schedule": "Mon 10:00",
                "room": "B12",
            },
        }
        self.enrollments = {
            1: {"id": 1, "student_id": 5, "course": 7},
        }

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(lambda request: self.handle(request))

    # -------------------------------------------------------------------------

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, request.url.host, request.url.path)
        if key in self.replies:
            return self.replies[key]

        if request.url.host == "students.test":
            return self._students(request)
        if request.url.host == "courses.test":
            return self._courses(request)
        if request.url.host == "ai.test":
            return self._ai(request)
        return httpx.Response(404, text="Not Found")

    def _body(self, request):
        return json.loads(request.content) if request.content else None

    def _params(self, request):
        return {k: v[0] for k, v in parse_qs(request.url.query.decode()).items()}

    def _students(self, request):
        path = request.url.path
        if request.method == "GET" and path == "/student/getAll":
            return httpx.Response(200, json=list(self.students.values()))
        if request.method == "GET" and path == "/student/search":
            params = self._params(request)
            found = list(self.students.values())
            if "id" in params:
                found = [s for s in found if str(s["id"]) == params["id"]]
            if "university" in params:
                found = [
                    s for s in found
                    if str((s.get("university") or {}).get("id")) == params["university"]
                ]
            if "name" in params:
                found = [
                    s for s in found
                    if params["name"] in (s["firstName"], s["lastName"])
                ]
            return httpx.Response(200, json=found)
        if request.method == "POST" and path == "/student/add":
            return httpx.Response(201, json=self._save_student(next(self._ids), request))
        if request.method == "PUT" and path.startswith("/student/update/"):
            student_id = int(path.rsplit("/", 1)[1])
            return httpx.Response(200, json=self._save_student(student_id, request))
        if request.method == "DELETE" and path.startswith("/student/delete/"):
            student_id = int(path.rsplit("/", 1)[1])
            removed = self.students.pop(student_id, None)
            return httpx.Response(200, json={"success": removed is not None})
        return httpx.Response(404, text="Not Found")

    def _save_student(self, student_id, request):
        body = self._body(request)
        university_id = body.get("university", {}).get("id")
        student = {
            "id": student_id,
            "firstName": body["firstName"],
            "lastName": body["lastName"],
            "email": body["email"],
            "university": self.universities.get(university_id),
        }
        self.students[student_id] = student
        return student

    def _courses(self, request):
        path = request.url.path
        if request.method == "GET" and path == "/courses/getall/":
            return httpx.Response(200, json=list(self.courses.values()))
        if request.method == "GET" and path == "/courses/":
            params = self._params(request)
            found = [
                c for c in self.courses.values()
                if all(str(c.get(k)) == v for k, v in params.items())
            ]
            return httpx.Response(200, json=found)
        if request.method == "POST" and path == "/courses/":
            course = dict(self._body(request), id=next(self._ids))
            self.courses[course["id"]] = course
            return httpx.Response(201, json=course)
        if request.method == "PUT" and path.startswith("/courses/"):
            course_id = int(path.strip("/").rsplit("/", 1)[1])
            body = self._body(request)
            course = self.courses.setdefault(course_id, {"id": course_id})
            course.update({k: v for k, v in body.items() if v is not None})
            return httpx.Response(200, json=course)
        if request.method == "DELETE" and path.startswith("/courses/delete/"):
            course_id = int(path.strip("/").rsplit("/", 1)[1])
            self.courses.pop(course_id, None)
            return httpx.Response(200, json={"detail": f"Course {course_id} deleted"})
        if request.method == "GET" and path == "/student-courses/":
            params = self._params(request)
            found = [
                e for e in self.enrollments.values()
                if all(str(e.get(k)) == v for k, v in params.items())
            ]
            return httpx.Response(200, json=found)
        if request.method == "POST" and path == "/student-courses/":
            enrollment = dict(self._body(request), id=next(self._ids))
            self.enrollments[enrollment["id"]] = enrollment
            return httpx.Response(201, json=enrollment)
        return httpx.Response(404, text="Not Found")

    def _ai(self, request):
        body = self._body(request)
        if request.url.path == "/chatbot/summarize/":
            return httpx.Response(200, json={"result": f"summary of {body['text']}"})
        if request.url.path == "/chatbot/translate/":
            return httpx.Response(200, json={
                "result": f"{body['src_language']}->{body['target_language']}: {body['text']}"
            })
        return httpx.Response(404, text="Not Found")

    # -------------------------------------------------------------------------

    def reply(self, method, url, response):
        """Force a fixed reply for one route."""
        parsed = httpx.URL(url)
        self.replies[(method, parsed.host, parsed.path)] = response

    def last(self):
        return self.requests[-1]

    def sent_json(self, index=-1):
        return json.loads(self.requests[index].content)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def settings():
    """Settings pointing at the fake campus."""
    from edugraph.config.settings import Settings
    return Settings(
        student_base=STUDENT_BASE,
        course_base=COURSE_BASE,
        ai_base=AI_BASE,
    )


@pytest.fixture
def campus():
    """A fresh fake campus."""
    return FakeCampus()


@pytest.fixture
def backends(settings, campus):
    """Backend clients wired to the fake campus."""
    from edugraph.clients.backends import create_backends
    return create_backends(settings, transport=campus.transport)


@pytest.fixture
def execute(backends):
    """Run a GraphQL document against the schema with fake backends."""
    from edugraph.graphql import schema, get_context

    async def _execute(query, variables=None):
        return await schema.execute(
            query,
            variable_values=variables,
            context_value=get_context(backends),
        )

    return _execute
