from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional

import httpx

from folio_api.domain.errors import ContentSourceError, SchemaMismatchError
from folio_api.domain.strategies import EntityKind, Record, Selector
from folio_api.infrastructure import graphql_queries as queries
from folio_api.infrastructure.graphql_client import GraphQLClient
from folio_api.infrastructure.revalidate import RevalidatePolicy
from folio_api.transforms import post_from_graphql, project_from_graphql

logger = logging.getLogger(__name__)


class _QuerySet:
    def __init__(
        self,
        connection: str,
        single: str,
        paginated_query: str,
        simple_query: str,
        by_slug_query: str,
        transform: Callable[[Dict[str, Any]], Record],
    ) -> None:
        self.connection = connection
        self.single = single
        self.paginated_query = paginated_query
        self.simple_query = simple_query
        self.by_slug_query = by_slug_query
        self.transform = transform


def build_query_sets(post_custom_fields: bool = False) -> Dict[EntityKind, _QuerySet]:
    return {
        EntityKind.POST: _QuerySet(
            connection="posts",
            single="postBy",
            paginated_query=queries.posts_paginated_query(post_custom_fields),
            simple_query=queries.posts_query(post_custom_fields),
            by_slug_query=queries.post_by_slug_query(post_custom_fields),
            transform=post_from_graphql,
        ),
        EntityKind.PROJECT: _QuerySet(
            connection="projets",
            single="projetBy",
            paginated_query=queries.GET_PROJECTS_PAGINATED_QUERY,
            simple_query=queries.GET_PROJECTS_QUERY,
            by_slug_query=queries.GET_PROJECT_BY_SLUG_QUERY,
            transform=project_from_graphql,
        ),
    }


class GraphQLContentStrategy:
    """Primary transport: WPGraphQL with cursor pagination."""

    name = "graphql"

    def __init__(
        self,
        http: httpx.Client,
        base_url: str,
        path: str = "/graphql",
        page_size: int = 100,
        fallback_limit: int = 100,
        policy: Optional[RevalidatePolicy] = None,
        post_custom_fields: bool = False,
    ) -> None:
        self._http = http
        self._base_url = base_url
        self._path = path
        self._page_size = page_size
        self._fallback_limit = fallback_limit
        self._policy = policy or RevalidatePolicy()
        self._query_sets = build_query_sets(post_custom_fields)

    def fetch(self, kind: EntityKind, selector: Selector) -> List[Record]:
        client = GraphQLClient.for_site(self._http, self._base_url, self._path)
        query_set = self._query_sets[kind]
        headers = self._policy.headers_for(selector)

        if selector.is_single:
            node = self._fetch_node(client, query_set, selector.slug, headers)
            if node is None:
                logger.info(f"[GraphQL] No {kind.value} found for slug '{selector.slug}'")
                return []
            return [query_set.transform(node)]

        nodes = self._fetch_all_nodes(client, query_set, headers)
        records: List[Record] = []
        for node in nodes:
            try:
                records.append(query_set.transform(node))
            except SchemaMismatchError as e:
                logger.warning(f"[GraphQL] Skipping malformed {kind.value} in listing: {e}")
        logger.info(f"[GraphQL] {len(records)} {kind.value}(s) fetched")
        return records

    def _fetch_node(
        self,
        client: GraphQLClient,
        query_set: _QuerySet,
        slug: str,
        headers: Dict[str, str],
    ) -> Optional[Dict[str, Any]]:
        data = client.request(query_set.by_slug_query, {"slug": slug}, headers=headers)
        if query_set.single not in data:
            raise SchemaMismatchError(f"GraphQL response has no '{query_set.single}' field")
        node = data[query_set.single]
        if node is not None and not isinstance(node, dict):
            raise SchemaMismatchError(f"'{query_set.single}' is not an object")
        return node

    def _fetch_all_nodes(
        self,
        client: GraphQLClient,
        query_set: _QuerySet,
        headers: Dict[str, str],
    ) -> List[Dict[str, Any]]:
        try:
            return self._paginate(client, query_set, headers)
        except ContentSourceError as e:
            # Connection without pageInfo (older Pods setups): one capped query
            logger.warning(f"[GraphQL] Paginated '{query_set.connection}' query failed, using single query: {e}")

        data = client.request(query_set.simple_query, {"first": self._fallback_limit}, headers=headers)
        nodes = self._connection(data, query_set.connection).get("nodes") or []
        if len(nodes) >= self._fallback_limit:
            logger.warning(
                f"[GraphQL] '{query_set.connection}' reached the {self._fallback_limit} item cap, "
                f"later items are not listed"
            )
        return list(nodes)

    def _paginate(
        self,
        client: GraphQLClient,
        query_set: _QuerySet,
        headers: Dict[str, str],
    ) -> List[Dict[str, Any]]:
        nodes: List[Dict[str, Any]] = []
        after: Optional[str] = None
        while True:
            variables = {"first": self._page_size, "after": after}
            data = client.request(query_set.paginated_query, variables, headers=headers)
            connection = self._connection(data, query_set.connection)

            page_info = connection.get("pageInfo")
            if not isinstance(page_info, dict):
                raise SchemaMismatchError(f"'{query_set.connection}' does not expose pageInfo")

            batch = connection.get("nodes") or []
            nodes.extend(batch)

            after = page_info.get("endCursor")
            # Short page or explicit end: stop without another round trip
            if len(batch) < self._page_size or not page_info.get("hasNextPage") or not after:
                return nodes

    @staticmethod
    def _connection(data: Dict[str, Any], key: str) -> Dict[str, Any]:
        connection = data.get(key)
        if not isinstance(connection, dict):
            raise SchemaMismatchError(f"GraphQL response has no '{key}' connection")
        return connection
