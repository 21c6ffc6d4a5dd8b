import pytest
from graphql import DocumentNode, parse

SCHEMA = """
enum Role {
  ADMIN
  MEMBER
}

interface Node {
  id: ID!
}

type User {
  id: ID!
  name: String
  age: Int!
  score: Float
  active: Boolean!
  role: Role
  tags: [String!]
  friends(first: Int, after: ID!): [User]!
}

input UserFilter {
  role: Role!
  nameContains: String
  ids: [ID!]
}

type Query {
  user(id: ID!): String!
  users(filter: UserFilter): [User!]!
  me: User
}
"""


@pytest.fixture()
def schema_text() -> str:
    return SCHEMA


@pytest.fixture()
def document(schema_text: str) -> DocumentNode:
    return parse(schema_text)
