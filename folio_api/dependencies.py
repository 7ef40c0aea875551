from __future__ import annotations

from typing import Iterator

import httpx
from fastapi import Depends

from folio_api.config import settings
from folio_api.application.content_gateway import ContentGateway
from folio_api.application.comment_service import CommentService
from folio_api.application.comment_validation_service import CommentValidationService
from folio_api.application.sitemap_service import SitemapService
from folio_api.domain.strategies import StrategyChainFactory
from folio_api.infrastructure.graphql_strategy import GraphQLContentStrategy
from folio_api.infrastructure.rest_client import WordPressRestClient
from folio_api.infrastructure.rest_strategy import RestContentStrategy
from folio_api.infrastructure.revalidate import RevalidatePolicy

USER_AGENT = "FolioContentAPI/1.0"


def get_http_client() -> Iterator[httpx.Client]:
    client = httpx.Client(
        timeout=settings.HTTP_TIMEOUT,
        follow_redirects=True,
        headers={"User-Agent": USER_AGENT},
    )
    try:
        yield client
    finally:
        client.close()


def get_rest_client(http: httpx.Client = Depends(get_http_client)) -> WordPressRestClient:
    return WordPressRestClient(http, settings.WORDPRESS_URL, settings.REST_PATH)


def build_content_gateway(http: httpx.Client) -> ContentGateway:
    policy = RevalidatePolicy(
        listing_seconds=settings.LISTING_REVALIDATE_SECONDS,
        item_seconds=settings.ITEM_REVALIDATE_SECONDS,
    )
    graphql = GraphQLContentStrategy(
        http,
        settings.WORDPRESS_URL,
        path=settings.GRAPHQL_PATH,
        page_size=settings.GRAPHQL_PAGE_SIZE,
        fallback_limit=settings.GRAPHQL_FALLBACK_LIMIT,
        policy=policy,
        post_custom_fields=settings.GRAPHQL_POST_CUSTOM_FIELDS,
    )
    rest = RestContentStrategy(
        WordPressRestClient(http, settings.WORDPRESS_URL, settings.REST_PATH),
        per_page=settings.REST_PER_PAGE,
        policy=policy,
    )
    strategies = StrategyChainFactory.build(settings.USE_WORDPRESS_GRAPHQL, graphql, rest)
    return ContentGateway(strategies)


def get_content_gateway(http: httpx.Client = Depends(get_http_client)) -> ContentGateway:
    return build_content_gateway(http)


def get_comment_validation_service() -> CommentValidationService:
    return CommentValidationService(min_length=settings.COMMENT_MIN_LENGTH)


def get_comment_service(
    rest: WordPressRestClient = Depends(get_rest_client),
    validator: CommentValidationService = Depends(get_comment_validation_service),
) -> CommentService:
    return CommentService(
        rest,
        validator,
        custom_endpoint_path=settings.CUSTOM_COMMENTS_PATH,
        per_page=settings.REST_PER_PAGE,
    )


def get_sitemap_service(gateway: ContentGateway = Depends(get_content_gateway)) -> SitemapService:
    return SitemapService(gateway, settings.SITE_BASE_URL, settings.SITE_ROUTES)
