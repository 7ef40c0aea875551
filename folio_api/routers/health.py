"""
Health check endpoints for the API.
"""
from fastapi import APIRouter
from typing import Dict, Any
from datetime import datetime

from folio_api.config import settings
from folio_api.infrastructure.rest_client import normalize_base_url

router = APIRouter()

@router.get("/health")
async def health_check() -> Dict[str, Any]:
    """
    Basic health check endpoint.
    Returns API status and version information.
    """
    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
        "version": settings.VERSION,
        "environment": settings.ENVIRONMENT
    }

@router.get("/health/content")
async def content_health() -> Dict[str, Any]:
    """
    Content source configuration.
    Reports which WordPress site is used and which transport is tried first.
    No request is made to WordPress.
    """
    base_url = normalize_base_url(settings.WORDPRESS_URL)
    transports = ["graphql", "rest"] if settings.USE_WORDPRESS_GRAPHQL else ["rest"]
    
    return {
        "status": "healthy" if base_url else "not_configured",
        "timestamp": datetime.now().isoformat(),
        "wordpress_url": base_url or None,
        "transports": transports,
    }
