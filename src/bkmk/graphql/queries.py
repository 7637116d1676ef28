# Bookmarks server GraphQL documents

QUERIES_QUERY = """\
{
  __schema {
    queryType {
      fields {
        name
      }
    }
  }
}
"""

MUTATIONS_QUERY = """\
{
  __schema {
    mutationType {
      fields {
        name
      }
    }
  }
}
"""

LOGIN_QUERY = """\
mutation Login($username: String!, $password: String!, $remember: Boolean!) {
  login(username: $username, password: $password, remember: $remember) {
    accessToken
  }
}
"""
