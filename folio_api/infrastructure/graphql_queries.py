"""
WPGraphQL query documents.

Posts come from the core ``posts`` connection; projects from the Pods custom
post type ``projet``, whose fields (``extrait``, ``description``, ``client``,
``lienDuSiteLiveSite``, ``images``) are exposed in camelCase on the node.
"""

MEDIA_FIELDS = """
            sourceUrl
            mediaDetails {
              sizes {
                name
                sourceUrl
              }
            }
"""

POST_FIELDS = f"""
        id
        databaseId
        slug
        date
        title
        content
        excerpt
        link
        featuredImage {{
          node {{{MEDIA_FIELDS}          }}
        }}
"""

# Pods fields registered on the post type; only selected when the site exposes them
POST_CUSTOM_FIELDS = """
        image
        summary
        images
        team
        tag
"""

PROJECT_FIELDS = f"""
        id
        slug
        date
        title
        link
        extrait
        description
        client
        lienDuSiteLiveSite
        images {{
          nodes {{{MEDIA_FIELDS}          }}
        }}
"""

PAGE_INFO = """
      pageInfo {
        hasNextPage
        endCursor
      }
"""


def _post_fields(custom_fields: bool) -> str:
    return POST_FIELDS + POST_CUSTOM_FIELDS if custom_fields else POST_FIELDS


def posts_paginated_query(custom_fields: bool = False) -> str:
    fields = _post_fields(custom_fields)
    return f"""
  query GetPosts($first: Int!, $after: String) {{
    posts(first: $first, after: $after, where: {{ status: PUBLISH }}) {{
      nodes {{{fields}      }}{PAGE_INFO}    }}
  }}
"""


def posts_query(custom_fields: bool = False) -> str:
    fields = _post_fields(custom_fields)
    return f"""
  query GetPosts($first: Int!) {{
    posts(first: $first, where: {{ status: PUBLISH }}) {{
      nodes {{{fields}      }}
    }}
  }}
"""


def post_by_slug_query(custom_fields: bool = False) -> str:
    fields = _post_fields(custom_fields)
    return f"""
  query GetPostBySlug($slug: String!) {{
    postBy(slug: $slug) {{{fields}    }}
  }}
"""


GET_PROJECTS_PAGINATED_QUERY = f"""
  query GetProjects($first: Int!, $after: String) {{
    projets(first: $first, after: $after, where: {{ status: PUBLISH }}) {{
      nodes {{{PROJECT_FIELDS}      }}{PAGE_INFO}    }}
  }}
"""

GET_PROJECTS_QUERY = f"""
  query GetProjects($first: Int!) {{
    projets(first: $first, where: {{ status: PUBLISH }}) {{
      nodes {{{PROJECT_FIELDS}      }}
    }}
  }}
"""

GET_PROJECT_BY_SLUG_QUERY = f"""
  query GetProjectBySlug($slug: String!) {{
    projetBy(slug: $slug) {{{PROJECT_FIELDS}    }}
  }}
"""
