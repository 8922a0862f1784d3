"""
GraphQL schema definition for EduGraph.

Combines queries and mutations into a unified schema and exposes it as a
FastAPI router.
"""

import strawberry
from strawberry.fastapi import GraphQLRouter

from edugraph.clients.backends import Backends
from edugraph.graphql.queries import Query
from edugraph.graphql.mutations import Mutation


# Create the schema
schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
)


def get_context(backends: Backends) -> dict:
    """
    Build GraphQL context with dependencies.

    Args:
        backends: Backend clients the resolvers call

    Returns:
        Context dict for resolvers
    """
    return {"backends": backends}


def get_graphql_router(backends: Backends) -> GraphQLRouter:
    """
    Create a FastAPI-compatible GraphQL router.

    Args:
        backends: Backend clients shared by every request

    Returns:
        GraphQLRouter to mount in FastAPI app
    """
    async def context_getter() -> dict:
        """Build context for a request."""
        return get_context(backends)

    return GraphQLRouter(
        schema=schema,
        context_getter=context_getter,
        graphql_ide="graphiql",
    )

