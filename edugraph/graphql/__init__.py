"""
GraphQL API module for EduGraph.

Provides:
- Type definitions for students, courses, enrollments and AI results
- Query resolvers
- Mutation resolvers
- Relationship resolvers stitching enrollments to students and courses
"""

from edugraph.graphql.schema import schema, get_context, get_graphql_router

__all__ = [
    "schema",
    "get_context",
    "get_graphql_router",
]
