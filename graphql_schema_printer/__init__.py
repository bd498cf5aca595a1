# Copyright 2026-present Kensho Technologies, LLC.
"""Commonly-used functions and data types from this package."""
from .exceptions import (  # noqa
    GraphQLSchemaPrintingError,
    InvalidDefaultValueError,
    UnrecognizedTypeKindError,
)
from .schema_printing import (  # noqa
    print_filtered_schema,
    print_introspection_schema,
    print_schema,
)
from .schema_printing.definition_printing import print_directive, print_type  # noqa
from .schema_printing.filtering import (  # noqa
    DEFINED_TYPES_POLICY,
    INTROSPECTION_POLICY,
    SchemaPrintingPolicy,
)
from .schema_printing.value_printing import print_value  # noqa


__package_name__ = "graphql-schema-printer"
__version__ = "1.0.0"
