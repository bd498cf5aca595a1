# Copyright 2026-present Kensho Technologies, LLC.
"""Print default values of arguments and input fields as GraphQL literals."""
import json
import math
from typing import Any, Mapping

from graphql import (
    GraphQLBoolean,
    GraphQLEnumType,
    GraphQLError,
    GraphQLFloat,
    GraphQLInputObjectType,
    GraphQLInputType,
    GraphQLInt,
    GraphQLList,
    GraphQLNonNull,
    GraphQLScalarType,
)
from graphql.pyutils import Undefined

from ..exceptions import InvalidDefaultValueError, UnrecognizedTypeKindError


def print_string_literal(value: str) -> str:
    """Return the given text as a double-quoted GraphQL string literal."""
    # JSON string escaping covers quotes, backslashes and control characters exactly the way
    # GraphQL string literals expect. Non-ASCII characters are valid in GraphQL source text.
    return json.dumps(value, ensure_ascii=False)


def _print_float(value: Any) -> str:
    """Return the canonical text of a Float literal."""
    float_value = float(value)
    if not math.isfinite(float_value):
        raise InvalidDefaultValueError(
            "Cannot represent non-finite value {} as a GraphQL Float literal.".format(value)
        )
    return repr(float_value)


def _print_scalar_value(value: Any, scalar_type: GraphQLScalarType) -> str:
    """Return the literal for a value of the given scalar type."""
    if scalar_type.name == GraphQLFloat.name:
        return _print_float(value)
    elif scalar_type.name == GraphQLInt.name:
        return str(int(value))
    elif scalar_type.name == GraphQLBoolean.name:
        return "true" if value else "false"
    else:
        # String, ID and all custom scalars are printed as strings.
        return print_string_literal(str(value))


def _print_enum_value(value: Any, enum_type: GraphQLEnumType) -> str:
    """Return the symbolic name of the enum value that represents the given value."""
    try:
        return enum_type.serialize(value)
    except GraphQLError as e:
        raise InvalidDefaultValueError(
            "Default value {} is not a value of enum {}.".format(value, enum_type.name)
        ) from e


def _print_input_object_value(value: Any, input_object_type: GraphQLInputObjectType) -> str:
    """Return the object literal for the given mapping, following the mapping's own order."""
    if not isinstance(value, Mapping):
        raise InvalidDefaultValueError(
            "Expected a mapping as the default value of input object {}, but got: {}".format(
                input_object_type.name, value
            )
        )

    printed_fields = []
    for field_name, field_value in value.items():
        try:
            field_type = input_object_type.fields[field_name].type
        except KeyError as e:
            raise InvalidDefaultValueError(
                "Default value for input object {} refers to field {}, which the input object "
                "does not declare. Declared fields: {}".format(
                    input_object_type.name, field_name, list(input_object_type.fields)
                )
            ) from e
        printed_fields.append("{}: {}".format(field_name, print_value(field_value, field_type)))

    return "{" + ", ".join(printed_fields) + "}"


def _print_list_value(value: Any, list_type: GraphQLList) -> str:
    """Return the list literal for the given sequence, preserving its order."""
    if not isinstance(value, (list, tuple)):
        raise InvalidDefaultValueError(
            "Expected a list or tuple as the default value of type {}, but got: {}".format(
                list_type, value
            )
        )
    return "[" + ", ".join(print_value(element, list_type.of_type) for element in value) + "]"


def print_value(value: Any, graphql_type: GraphQLInputType) -> str:
    """Return the GraphQL literal representing the given value of the given type.

    Args:
        value: raw default value, shaped according to graphql_type: a list or tuple for list types,
               a mapping of field name to field value for input object types, the internal value
               of an enum value for enum types, and a plain Python value for scalar types.
        graphql_type: the declared type of the value. Non-null wrappers are transparent.

    Returns:
        str, the literal as it would appear after "=" in an argument or input field definition

    Raises:
        InvalidDefaultValueError: if the value (or any value nested within it) is null, or its
                                  shape does not match the declared type
        UnrecognizedTypeKindError: if the declared type cannot carry a literal value
    """
    if value is None or value is Undefined:
        raise InvalidDefaultValueError(
            "Cannot print a null value of type {} as part of a default value.".format(graphql_type)
        )

    if isinstance(graphql_type, GraphQLNonNull):
        return print_value(value, graphql_type.of_type)
    elif isinstance(graphql_type, GraphQLList):
        return _print_list_value(value, graphql_type)
    elif isinstance(graphql_type, GraphQLScalarType):
        return _print_scalar_value(value, graphql_type)
    elif isinstance(graphql_type, GraphQLEnumType):
        return _print_enum_value(value, graphql_type)
    elif isinstance(graphql_type, GraphQLInputObjectType):
        return _print_input_object_value(value, graphql_type)
    else:
        raise UnrecognizedTypeKindError(
            "Unexpected type {} ({}) for default value {}.".format(
                graphql_type, type(graphql_type).__name__, value
            )
        )
