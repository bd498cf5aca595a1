# Copyright 2026-present Kensho Technologies, LLC.
"""Print the SDL definitions of named types and directives."""
from typing import Dict, Union

from graphql import (
    GraphQLArgument,
    GraphQLDirective,
    GraphQLEnumType,
    GraphQLInputField,
    GraphQLInputObjectType,
    GraphQLInterfaceType,
    GraphQLNamedType,
    GraphQLObjectType,
    GraphQLScalarType,
    GraphQLUnionType,
)
from graphql.pyutils import Undefined
from graphql.type.directives import DEFAULT_DEPRECATION_REASON
from graphql.type.introspection import TypeKind

from ..exceptions import UnrecognizedTypeKindError
from ..typedefs import DeprecatableType, TypePrinterType
from .value_printing import print_string_literal, print_value


def print_deprecated(field_or_enum_value: DeprecatableType) -> str:
    """Return the @deprecated annotation of a field or enum value, or "" if it is not deprecated."""
    deprecation_reason = field_or_enum_value.deprecation_reason
    if deprecation_reason is None:
        return ""
    elif deprecation_reason in ("", DEFAULT_DEPRECATION_REASON):
        return " @deprecated"
    else:
        return " @deprecated(reason: {})".format(print_string_literal(deprecation_reason))


def print_input_value(name: str, input_value: Union[GraphQLArgument, GraphQLInputField]) -> str:
    """Return the definition of an argument or input field, including any default value."""
    definition = "{}: {}".format(name, input_value.type)

    # An explicit null default is indistinguishable from no default in the printed schema.
    default_value = input_value.default_value
    if default_value is Undefined or default_value is None:
        return definition
    return definition + " = " + print_value(default_value, input_value.type)


def print_args(args: Dict[str, GraphQLArgument]) -> str:
    """Return the parenthesized argument definitions, or "" if there are no arguments."""
    if not args:
        return ""
    return "(" + ", ".join(print_input_value(name, arg) for name, arg in args.items()) + ")"


def print_fields(graphql_type: Union[GraphQLObjectType, GraphQLInterfaceType]) -> str:
    """Return the field definitions of an object or interface type, one indented line each."""
    return "\n".join(
        "  {}{}: {}{}".format(name, print_args(field.args), field.type, print_deprecated(field))
        for name, field in graphql_type.fields.items()
    )


def _print_scalar(scalar_type: GraphQLScalarType) -> str:
    return "scalar {}".format(scalar_type.name)


def _print_implemented_interfaces(
    graphql_type: Union[GraphQLObjectType, GraphQLInterfaceType]
) -> str:
    """Return the " implements A, B" clause of a type, or "" if it implements no interfaces."""
    if not graphql_type.interfaces:
        return ""
    return " implements " + ", ".join(interface.name for interface in graphql_type.interfaces)


def _print_object(object_type: GraphQLObjectType) -> str:
    return "type {}{} {{\n{}\n}}".format(
        object_type.name, _print_implemented_interfaces(object_type), print_fields(object_type)
    )


def _print_interface(interface_type: GraphQLInterfaceType) -> str:
    return "interface {}{} {{\n{}\n}}".format(
        interface_type.name,
        _print_implemented_interfaces(interface_type),
        print_fields(interface_type),
    )


def _print_union(union_type: GraphQLUnionType) -> str:
    return "union {} = {}".format(
        union_type.name, " | ".join(member_type.name for member_type in union_type.types)
    )


def _print_enum(enum_type: GraphQLEnumType) -> str:
    values = "\n".join(
        "  {}{}".format(name, print_deprecated(enum_value))
        for name, enum_value in enum_type.values.items()
    )
    return "enum {} {{\n{}\n}}".format(enum_type.name, values)


def _print_input_object(input_object_type: GraphQLInputObjectType) -> str:
    fields = "\n".join(
        "  " + print_input_value(name, input_field)
        for name, input_field in input_object_type.fields.items()
    )
    return "input {} {{\n{}\n}}".format(input_object_type.name, fields)


TYPE_KIND_PRINTERS: Dict[TypeKind, TypePrinterType] = {
    TypeKind.SCALAR: _print_scalar,
    TypeKind.OBJECT: _print_object,
    TypeKind.INTERFACE: _print_interface,
    TypeKind.UNION: _print_union,
    TypeKind.ENUM: _print_enum,
    TypeKind.INPUT_OBJECT: _print_input_object,
}


def get_type_kind(graphql_type: GraphQLNamedType) -> TypeKind:
    """Return the kind of the given named type, raising UnrecognizedTypeKindError if it has none."""
    if isinstance(graphql_type, GraphQLScalarType):
        return TypeKind.SCALAR
    elif isinstance(graphql_type, GraphQLObjectType):
        return TypeKind.OBJECT
    elif isinstance(graphql_type, GraphQLInterfaceType):
        return TypeKind.INTERFACE
    elif isinstance(graphql_type, GraphQLUnionType):
        return TypeKind.UNION
    elif isinstance(graphql_type, GraphQLEnumType):
        return TypeKind.ENUM
    elif isinstance(graphql_type, GraphQLInputObjectType):
        return TypeKind.INPUT_OBJECT
    else:
        raise UnrecognizedTypeKindError(
            "Cannot determine the kind of type {} ({}), it is not a named GraphQL type.".format(
                graphql_type, type(graphql_type).__name__
            )
        )


def print_type(graphql_type: GraphQLNamedType) -> str:
    """Return the SDL definition of the given named type."""
    return TYPE_KIND_PRINTERS[get_type_kind(graphql_type)](graphql_type)


def print_directive(directive: GraphQLDirective) -> str:
    """Return the SDL definition of the given directive."""
    return "directive @{}{} on {}".format(
        directive.name,
        print_args(directive.args),
        " | ".join(location.name for location in directive.locations),
    )
