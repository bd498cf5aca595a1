# Copyright 2026-present Kensho Technologies, LLC.
"""Policies selecting which directives and types of a schema get printed."""
from typing import NamedTuple

from funcy import complement
from graphql import GraphQLDirective, GraphQLNamedType

from ..typedefs import DirectiveFilterType, TypeFilterType


# Directives defined by the GraphQL specification itself, rather than by the schema's author.
SPECIFIED_DIRECTIVE_NAMES = frozenset({"skip", "include", "deprecated"})

# Scalars every GraphQL schema has, which therefore never need to be defined in SDL.
BUILTIN_SCALAR_NAMES = frozenset({"String", "Boolean", "Int", "Float", "ID"})

# Names starting with this prefix are reserved for the introspection system.
INTROSPECTION_TYPE_PREFIX = "__"

# Operation name -> the root type name that makes an explicit schema definition unnecessary.
DEFAULT_ROOT_TYPE_NAMES = {
    "query": "Query",
    "mutation": "Mutation",
    "subscription": "Subscription",
}


class SchemaPrintingPolicy(NamedTuple):
    """The pair of predicates deciding which directives and types make it into the output."""

    directive_filter: DirectiveFilterType
    type_filter: TypeFilterType


def is_specified_directive(directive: GraphQLDirective) -> bool:
    """Return True if the directive is one of the directives defined by the GraphQL spec."""
    return directive.name in SPECIFIED_DIRECTIVE_NAMES


def is_introspection_type(graphql_type: GraphQLNamedType) -> bool:
    """Return True if the type is part of the introspection system, e.g. __Schema or __Type."""
    return graphql_type.name.startswith(INTROSPECTION_TYPE_PREFIX)


def is_defined_type(graphql_type: GraphQLNamedType) -> bool:
    """Return True if the type was defined by the schema's author."""
    return (
        not is_introspection_type(graphql_type) and graphql_type.name not in BUILTIN_SCALAR_NAMES
    )


DEFINED_TYPES_POLICY = SchemaPrintingPolicy(
    directive_filter=complement(is_specified_directive),
    type_filter=is_defined_type,
)

INTROSPECTION_POLICY = SchemaPrintingPolicy(
    directive_filter=is_specified_directive,
    type_filter=is_introspection_type,
)
