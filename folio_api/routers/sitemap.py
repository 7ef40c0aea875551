from fastapi import APIRouter, Depends, Response
from folio_api.schemas.api_schemas import SitemapEntrySchema
from folio_api.dependencies import get_sitemap_service
from folio_api.application.sitemap_service import SitemapService
from typing import List

router = APIRouter()

@router.get("/sitemap", response_model=List[SitemapEntrySchema])
def get_sitemap(service: SitemapService = Depends(get_sitemap_service)):
    """
    Sitemap entries: static routes, then blog posts, then projects.
    """
    return [SitemapEntrySchema.from_entity(entry) for entry in service.entries()]

@router.get("/sitemap.xml")
def get_sitemap_xml(service: SitemapService = Depends(get_sitemap_service)):
    """
    Sitemap protocol XML document.
    """
    return Response(content=service.render_xml(service.entries()), media_type="application/xml")
