"""
API Request/Response Schemas using Pydantic.

Structure of HTTP requests and responses for the Folio content API. Field
names on the wire are camelCase, matching what the site's page renderers read.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

from folio_api.domain.entities import (
    Comment,
    CommentReceipt,
    Post,
    Project,
    SitemapEntry,
    TeamMember,
)


class WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


# Content schemas
class TeamMemberSchema(WireModel):
    name: str = Field("", description="Member name")
    role: str = Field("", description="Role on the post or project")
    avatar: str = Field("", description="Avatar image URL")
    linked_in: str = Field("", alias="linkedIn", description="External profile URL")

    @classmethod
    def from_entity(cls, member: TeamMember) -> TeamMemberSchema:
        return cls(name=member.name, role=member.role, avatar=member.avatar, linked_in=member.linked_in)


class PostMetadataSchema(WireModel):
    title: str = Field(..., description="Entity-decoded title")
    published_at: str = Field(..., alias="publishedAt", description="ISO publication date")
    summary: str = Field("", description="Plain-text summary")
    image: str = Field("", description="Featured image URL")
    images: List[str] = Field(default_factory=list, description="Ordered image URLs")
    tag: str = Field("", description="Post tag")
    team: List[TeamMemberSchema] = Field(default_factory=list, description="Credited team")
    link: str = Field("", description="Permalink")


class PostSchema(WireModel):
    slug: str = Field(..., description="Stable identifier across transports")
    id: Optional[int] = Field(None, description="WordPress id (differs between REST and GraphQL)")
    content: str = Field("", description="Raw HTML content")
    metadata: PostMetadataSchema

    @classmethod
    def from_entity(cls, post: Post) -> PostSchema:
        meta = post.metadata
        return cls(
            slug=post.slug,
            id=post.id,
            content=post.content,
            metadata=PostMetadataSchema(
                title=meta.title,
                published_at=meta.published_at,
                summary=meta.summary,
                image=meta.image,
                images=list(meta.images),
                tag=meta.tag,
                team=[TeamMemberSchema.from_entity(member) for member in meta.team],
                link=meta.link,
            ),
        )


class ProjectMetadataSchema(WireModel):
    title: str = Field(..., description="Entity-decoded title")
    published_at: str = Field(..., alias="publishedAt", description="ISO publication date")
    summary: str = Field("", description="Plain-text summary")
    image: str = Field("", description="Featured image URL")
    images: List[str] = Field(default_factory=list, description="Ordered gallery URLs")
    team: List[TeamMemberSchema] = Field(default_factory=list, description="Credited team")
    link: str = Field("", description="Live site URL or permalink")
    client: str = Field("", description="Client name")


class ProjectSchema(WireModel):
    slug: str = Field(..., description="Stable identifier across transports")
    content: str = Field("", description="Long-form description HTML")
    metadata: ProjectMetadataSchema

    @classmethod
    def from_entity(cls, project: Project) -> ProjectSchema:
        meta = project.metadata
        return cls(
            slug=project.slug,
            content=project.content,
            metadata=ProjectMetadataSchema(
                title=meta.title,
                published_at=meta.published_at,
                summary=meta.summary,
                image=meta.image,
                images=list(meta.images),
                team=[TeamMemberSchema.from_entity(member) for member in meta.team],
                link=meta.link,
                client=meta.client,
            ),
        )


# Comment schemas
class CommentSchema(WireModel):
    id: int = Field(..., description="WordPress comment id")
    author_name: str = Field(..., alias="authorName")
    author_email: str = Field("", alias="authorEmail")
    author_url: str = Field("", alias="authorUrl")
    content: str = Field("", description="Rendered HTML")
    date: str = Field("", description="Local date")
    date_gmt: str = Field("", alias="dateGmt")
    parent: int = Field(0, description="Parent comment id, 0 for top-level")

    @classmethod
    def from_entity(cls, comment: Comment) -> CommentSchema:
        return cls(
            id=comment.id,
            author_name=comment.author_name,
            author_email=comment.author_email,
            author_url=comment.author_url,
            content=comment.content,
            date=comment.date,
            date_gmt=comment.date_gmt,
            parent=comment.parent,
        )


class CommentListResponse(WireModel):
    success: bool = Field(default=True, description="Whether the operation was successful")
    comments: List[CommentSchema] = Field(default_factory=list)


class CommentCreate(WireModel):
    post_id: Optional[int] = Field(None, alias="postId", description="WordPress post id")
    post_slug: str = Field("", alias="postSlug", description="Post slug, used when no id is known")
    parent_id: int = Field(0, alias="parentId", description="Parent comment id")
    author_name: str = Field("", alias="authorName", max_length=255)
    author_email: str = Field("", alias="authorEmail", max_length=255)
    author_url: str = Field("", alias="authorUrl", max_length=1000)
    content: str = Field("", description="Comment text", max_length=10000)


class CommentCreateResponse(WireModel):
    success: bool = Field(default=True, description="Whether the operation was successful")
    message: str = Field("Comment sent", description="Human readable status")
    comment_id: Optional[int] = Field(None, alias="commentId")
    status: str = Field("hold", description="WordPress comment status")

    @classmethod
    def from_receipt(cls, receipt: CommentReceipt) -> CommentCreateResponse:
        return cls(comment_id=receipt.comment_id, status=receipt.status)


# Sitemap schemas
class SitemapEntrySchema(WireModel):
    url: str
    last_modified: str = Field(..., alias="lastModified")

    @classmethod
    def from_entity(cls, entry: SitemapEntry) -> SitemapEntrySchema:
        return cls(url=entry.url, last_modified=entry.last_modified)
