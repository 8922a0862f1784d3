"""
EduGraph - GraphQL gateway for campus services

Stitches three independent REST services (student records, course records
and AI text services) into a single GraphQL graph.

Key Features:
- One REST call per query or mutation field
- Enrollment edges resolved against the student and course services
- JSON replies with raw-text fallback for non-JSON bodies
"""

__version__ = "0.1.0"
__author__ = "EduGraph Team"
