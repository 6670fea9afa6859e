"""
GraphQL Schema
==============

Schema assembly and the FastAPI router serving it.
"""
import strawberry
from strawberry.fastapi import GraphQLRouter

from car_rental.api.v1.context import get_context
from car_rental.api.v1.mutations import Mutation
from car_rental.api.v1.queries import Query
from car_rental.core.config import Settings

schema = strawberry.Schema(query=Query, mutation=Mutation)


def create_graphql_router(settings: Settings) -> GraphQLRouter:
    """
    Create the router serving the GraphQL endpoint.

    Args:
        settings: Application settings (GraphiQL toggle)

    Returns:
        GraphQLRouter to include under the configured GraphQL path
    """
    return GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if settings.graphql_ide else None,
    )
