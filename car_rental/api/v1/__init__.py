"""
API v1 Package
===============

Version 1 GraphQL API.
"""
from .schema import create_graphql_router, schema

__all__ = ["create_graphql_router", "schema"]
