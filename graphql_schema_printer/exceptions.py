# Copyright 2026-present Kensho Technologies, LLC.
class GraphQLSchemaPrintingError(Exception):
    """Generic error when printing a GraphQL schema."""


class UnrecognizedTypeKindError(GraphQLSchemaPrintingError):
    """Exception raised when a type's kind has no printer associated with it.

    This indicates that the schema model produced a type that cannot be represented in SDL, e.g.:
    - a wrapper type (list or non-null) where a named type definition was expected;
    - a subclass of a GraphQL type class that is not one of the known type kinds;
    - a default value declared with a type that cannot carry a literal value.
    """


class InvalidDefaultValueError(GraphQLSchemaPrintingError):
    """Exception raised when a default value does not match the shape of its declared type.

    For example:
    - an input object default value refers to a field the input object does not declare;
    - an enum default value is not one of the enum's values;
    - a list default value is not a list, or an input object default value is not a mapping;
    - a null value is nested within a list or input object default value.
    """
