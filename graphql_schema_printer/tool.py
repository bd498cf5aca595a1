#!/usr/bin/env python
# Copyright 2026-present Kensho Technologies, LLC.
"""Utility modeled after json.tool, prints the SDL of a schema read from stdin to stdout.

Used as: python -m graphql_schema_printer.tool [--introspection]
"""
import argparse
import logging
import sys
from typing import List, Optional

from graphql import GraphQLError, build_ast_schema, parse

from . import print_introspection_schema, print_schema


logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    """Read a GraphQL schema from standard input, and output its canonical SDL to standard output."""
    parser = argparse.ArgumentParser(
        prog="graphql-schema-printer",
        description="Print a GraphQL schema, read as SDL from stdin, in canonical form.",
    )
    parser.add_argument(
        "--introspection",
        action="store_true",
        help="ignore stdin and print the introspection types and spec-defined directives",
    )
    args = parser.parse_args(argv)

    if args.introspection:
        sys.stdout.write(print_introspection_schema() + "\n")
        return 0

    schema_text = sys.stdin.read()
    try:
        schema = build_ast_schema(parse(schema_text))
    except (GraphQLError, TypeError) as e:
        logger.error("Could not build a schema from the given SDL: %s", e)
        return 1

    sys.stdout.write(print_schema(schema) + "\n")
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    sys.exit(main())
