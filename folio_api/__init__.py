"""
Folio Content API Package

Directory Structure:
├── routers/           # FastAPI route handlers
├── schemas/           # Pydantic models for API requests/responses
│   └── api_schemas.py # HTTP request/response structures (camelCase wire names)
├── domain/            # Canonical records, errors, events, strategy protocol
├── application/       # Content gateway, comments, sitemap services
├── infrastructure/    # WordPress GraphQL and REST transports
├── transforms/        # Transport payload -> canonical record mapping
├── text/              # Entity decoding, tag stripping, heading anchors
└── config.py          # Application configuration

Record Types Clarification:
1. **Canonical records** (folio_api.domain.entities): transport-independent
   Post/Project/Comment values built fresh on every fetch
2. **API Schemas** (folio_api.schemas.api_schemas): Pydantic models for HTTP
   responses, serialized with the camelCase names the site expects

The gateway tries WPGraphQL first and falls back to the REST API; page
renderers always get a well-typed, possibly empty, result.
"""
