from fastapi import APIRouter, Path, Query, Depends
from folio_api.schemas.api_schemas import ProjectSchema
from folio_api.dependencies import get_content_gateway
from folio_api.application.content_gateway import ContentGateway
from folio_api.domain.errors import NotFoundError
from folio_api.domain.specifications import ProjectForClient, filter_by_specification
from typing import List, Optional

router = APIRouter()

@router.get("/projects", response_model=List[ProjectSchema])
def list_projects(
    client: Optional[str] = Query(None, description="Only projects whose client matches"),
    gateway: ContentGateway = Depends(get_content_gateway)
):
    """
    Retrieve all published projects. Empty when WordPress is unavailable.
    """
    projects = gateway.list_projects()
    if client:
        projects = filter_by_specification(projects, ProjectForClient(client))
    return [ProjectSchema.from_entity(project) for project in projects]

@router.get("/projects/{slug}", response_model=ProjectSchema)
def get_project(
    slug: str = Path(..., title="The slug of the project to retrieve"),
    gateway: ContentGateway = Depends(get_content_gateway)
):
    """
    Get a specific project by slug.
    """
    project = gateway.get_project_by_slug(slug)
    if not project:
        raise NotFoundError(f"Project not found: {slug}")
    return ProjectSchema.from_entity(project)
