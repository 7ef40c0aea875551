from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from folio_api.routers import posts, projects, comments, sitemap, health
from folio_api.domain.errors import (
    ConfigurationError,
    ContentSourceError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from folio_api.application.event_handlers import register_event_handlers

app = FastAPI(
    title="Folio Content API",
    description="Canonical WordPress content for the portfolio site",
    version="1.0.0",
)

# Register domain event handlers on startup
@app.on_event("startup")
async def startup_event():
    register_event_handlers()
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Allows all origins
    allow_credentials=True,
    allow_methods=["*"],  # Allows all methods
    allow_headers=["*"],  # Allows all headers
)


def _error(status_code: int, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": str(exc), "success": False})


# Domain error handlers
@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return _error(404, exc)


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return _error(400, exc)


@app.exception_handler(ForbiddenError)
async def forbidden_handler(request: Request, exc: ForbiddenError):
    return _error(403, exc)


@app.exception_handler(ConfigurationError)
async def configuration_error_handler(request: Request, exc: ConfigurationError):
    return _error(500, exc)


@app.exception_handler(ContentSourceError)
async def content_source_error_handler(request: Request, exc: ContentSourceError):
    return _error(502, exc)

# Include routers
app.include_router(health.router, tags=["Health"])  # Health check endpoints first
app.include_router(posts.router, tags=["Posts"])
app.include_router(projects.router, tags=["Projects"])
app.include_router(comments.router, tags=["Comments"])
app.include_router(sitemap.router, tags=["Sitemap"])

@app.get("/")
async def root():
    return {"message": "Welcome to the Folio Content API. See /docs for API documentation"}
