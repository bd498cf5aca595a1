from graphql import build_ast_schema, parse

from graphql_schema_printer import print_schema

schema_text = '''
schema {
    query: StarWarsQuery
}

interface Character {
    id: ID!
    name: String
}

type Droid implements Character {
    id: ID!
    name: String
    primaryFunction: String @deprecated(reason: "Use function instead.")
}

type StarWarsQuery {
    droid(id: ID!, weight: Float = 1.5, tags: [String] = ["a", "b"]): Droid
}
'''

# Build the schema with graphql-core, then print it in canonical form.
schema = build_ast_schema(parse(schema_text))
print(print_schema(schema))
