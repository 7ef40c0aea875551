"""Canonical content records shared by every transport.

Records are immutable and rebuilt on every fetch. ``slug`` is the only
identifier that is stable across transports: REST ids and GraphQL
``databaseId`` values of the same content are not guaranteed to match.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class TeamMember:
    name: str = ""
    role: str = ""
    avatar: str = ""
    linked_in: str = ""


@dataclass(frozen=True)
class PostMetadata:
    title: str
    published_at: str
    summary: str = ""
    image: str = ""
    images: List[str] = field(default_factory=list)
    tag: str = ""
    team: List[TeamMember] = field(default_factory=list)
    link: str = ""


@dataclass(frozen=True)
class Post:
    slug: str
    metadata: PostMetadata
    content: str = ""
    id: Optional[int] = None


@dataclass(frozen=True)
class ProjectMetadata:
    title: str
    published_at: str
    summary: str = ""
    image: str = ""
    images: List[str] = field(default_factory=list)
    team: List[TeamMember] = field(default_factory=list)
    link: str = ""
    client: str = ""


@dataclass(frozen=True)
class Project:
    slug: str
    metadata: ProjectMetadata
    content: str = ""


@dataclass(frozen=True)
class Comment:
    id: int
    author_name: str
    author_email: str
    author_url: str
    content: str
    date: str
    date_gmt: str = ""
    parent: int = 0
    status: str = ""


@dataclass(frozen=True)
class CommentSubmission:
    author_name: str
    author_email: str
    content: str
    author_url: str = ""
    post_id: Optional[int] = None
    post_slug: str = ""
    parent_id: int = 0


@dataclass(frozen=True)
class CommentReceipt:
    comment_id: Optional[int]
    status: str
    endpoint: str


@dataclass(frozen=True)
class SitemapEntry:
    url: str
    last_modified: str
