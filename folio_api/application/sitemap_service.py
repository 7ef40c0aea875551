"""Service building the public sitemap from static routes and content."""
from __future__ import annotations

import xml.etree.ElementTree as ET
from datetime import date
from typing import List, Sequence

from folio_api.application.content_gateway import ContentGateway
from folio_api.domain.entities import SitemapEntry

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"


class SitemapService:
    """Maps static routes, posts and projects to ``{url, lastModified}`` pairs."""

    def __init__(
        self,
        gateway: ContentGateway,
        base_url: str,
        routes: Sequence[str],
        clock: type[date] = date,
    ) -> None:
        self._gateway = gateway
        self._base_url = base_url.rstrip("/")
        self._routes = list(routes)
        self._clock = clock

    def entries(self) -> List[SitemapEntry]:
        today = self._clock.today().isoformat()
        static = [
            SitemapEntry(url=f"{self._base_url}{route if route != '/' else ''}", last_modified=today)
            for route in self._routes
        ]
        blogs = [
            SitemapEntry(url=f"{self._base_url}/blog/{post.slug}", last_modified=post.metadata.published_at)
            for post in self._gateway.list_posts()
        ]
        works = [
            SitemapEntry(url=f"{self._base_url}/projets/{project.slug}", last_modified=project.metadata.published_at)
            for project in self._gateway.list_projects()
        ]
        return static + blogs + works

    @staticmethod
    def render_xml(entries: Sequence[SitemapEntry]) -> str:
        """Sitemap protocol document for the given entries."""
        urlset = ET.Element("urlset", xmlns=SITEMAP_NAMESPACE)
        for entry in entries:
            url = ET.SubElement(urlset, "url")
            ET.SubElement(url, "loc").text = entry.url
            if entry.last_modified:
                ET.SubElement(url, "lastmod").text = entry.last_modified
        body = ET.tostring(urlset, encoding="unicode")
        return f'<?xml version="1.0" encoding="UTF-8"?>\n{body}'
