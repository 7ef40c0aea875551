"""Transport payload to canonical record transforms.

One pure function per (transport, entity) pair. WordPress field names stop
here; nothing past these functions sees ``acf``, ``_embedded`` or Pods names.
"""
from .posts import post_from_graphql, post_from_rest
from .projects import project_from_graphql, project_from_rest
from .comments import comment_from_rest
from .common import parse_images, parse_team

__all__ = [
    "post_from_graphql",
    "post_from_rest",
    "project_from_graphql",
    "project_from_rest",
    "comment_from_rest",
    "parse_images",
    "parse_team",
]
