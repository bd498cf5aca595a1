# Copyright 2026-present Kensho Technologies, LLC.
"""Print GraphQL schemas as schema definition language (SDL) documents."""
import logging
from typing import Optional, Tuple

from graphql import GraphQLObjectType, GraphQLSchema

from .definition_printing import print_directive, print_type
from .filtering import (
    DEFAULT_ROOT_TYPE_NAMES,
    DEFINED_TYPES_POLICY,
    INTROSPECTION_POLICY,
    SchemaPrintingPolicy,
)


logger = logging.getLogger(__name__)

# The query root of the otherwise empty schema whose introspection types get printed.
INTROSPECTION_SCHEMA_QUERY_TYPE_NAME = "Root"


def _get_root_types(
    schema: GraphQLSchema,
) -> Tuple[Tuple[str, Optional[GraphQLObjectType]], ...]:
    """Return (operation name, root type) pairs in the order they appear in a schema definition."""
    return (
        ("query", schema.query_type),
        ("mutation", schema.mutation_type),
        ("subscription", schema.subscription_type),
    )


def print_schema_definition(schema: GraphQLSchema) -> Optional[str]:
    """Return the "schema { ... }" block, or None if the root types follow the naming convention."""
    root_types = _get_root_types(schema)

    uses_default_root_type_names = all(
        root_type is None or root_type.name == DEFAULT_ROOT_TYPE_NAMES[operation]
        for operation, root_type in root_types
    )
    if uses_default_root_type_names:
        return None

    operations = "".join(
        "  {}: {}\n".format(operation, root_type.name)
        for operation, root_type in root_types
        if root_type is not None
    )
    return "schema {\n" + operations + "}"


def print_filtered_schema(schema: GraphQLSchema, policy: SchemaPrintingPolicy) -> str:
    """Return the SDL of the schema's directives and types that satisfy the given policy.

    Args:
        schema: GraphQL schema object to print. It is only read, never modified.
        policy: SchemaPrintingPolicy whose predicates select the directives and types to print

    Returns:
        str, the schema definition block (if one is needed), followed by the selected directives
        in schema order, followed by the selected types sorted by name, all separated by blank lines

    Raises:
        UnrecognizedTypeKindError: if a selected type or default value type cannot be printed
        InvalidDefaultValueError: if a default value does not match its declared type
    """
    if policy.directive_filter is None or policy.type_filter is None:
        raise AssertionError(f"Received a schema printing policy without predicates: {policy}")

    directives = [
        directive for directive in schema.directives if policy.directive_filter(directive)
    ]
    types = sorted(
        (
            graphql_type
            for graphql_type in schema.type_map.values()
            if policy.type_filter(graphql_type)
        ),
        key=lambda graphql_type: graphql_type.name,
    )
    logger.debug(
        "Printing %d of %d directives and %d of %d types.",
        len(directives),
        len(schema.directives),
        len(types),
        len(schema.type_map),
    )

    sections = []
    schema_definition = print_schema_definition(schema)
    if schema_definition is not None:
        sections.append(schema_definition)
    sections.extend(print_directive(directive) for directive in directives)
    sections.extend(print_type(graphql_type) for graphql_type in types)

    return "\n\n".join(sections)


def print_schema(schema: GraphQLSchema) -> str:
    """Return the SDL of the types and directives defined by the schema's author."""
    return print_filtered_schema(schema, DEFINED_TYPES_POLICY)


def print_introspection_schema() -> str:
    """Return the SDL of the introspection types and the directives defined by the GraphQL spec."""
    query_root = GraphQLObjectType(INTROSPECTION_SCHEMA_QUERY_TYPE_NAME, fields={})
    return print_filtered_schema(GraphQLSchema(query=query_root), INTROSPECTION_POLICY)
