"""
gql_resolver_types
==================

Generate TypeScript resolver declarations from a GraphQL schema so that
request-handling code gets compile-time field and type checking.
"""

from importlib.metadata import PackageNotFoundError, version


def get_version() -> str:
    """Return the installed package version or '0.0.0' when unavailable."""
    try:
        return version("gql-resolver-types")
    except PackageNotFoundError:
        return "0.0.0"


__all__ = ["get_version"]
