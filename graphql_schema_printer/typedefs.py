# Copyright 2026-present Kensho Technologies, LLC.
from typing import Callable, Union

from graphql import GraphQLDirective, GraphQLEnumValue, GraphQLField, GraphQLNamedType


# Predicate deciding whether a directive definition is printed.
DirectiveFilterType = Callable[[GraphQLDirective], bool]

# Predicate deciding whether a named type definition is printed.
TypeFilterType = Callable[[GraphQLNamedType], bool]

# Function turning a named type definition into its SDL text.
TypePrinterType = Callable[[GraphQLNamedType], str]

# Schema elements that may carry a deprecation reason.
DeprecatableType = Union[GraphQLField, GraphQLEnumValue]
