from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    """Application settings."""
    
    # API settings
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    API_RELOAD: bool = True
    
    # Version and environment
    VERSION: str = "0.1.0"
    ENVIRONMENT: str = "development"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"
    
    # WordPress content source
    WORDPRESS_URL: str = ""
    USE_WORDPRESS_GRAPHQL: bool = True
    GRAPHQL_PATH: str = "/graphql"
    GRAPHQL_POST_CUSTOM_FIELDS: bool = False  # select Pods image/summary/images/team/tag on posts
    REST_PATH: str = "/wp-json/wp/v2"
    CUSTOM_COMMENTS_PATH: str = "/wp-json/custom/v1/comments"
    HTTP_TIMEOUT: float = 10.0
    
    # Paging
    GRAPHQL_PAGE_SIZE: int = 100
    GRAPHQL_FALLBACK_LIMIT: int = 100  # cap of the non-paginated listing query
    REST_PER_PAGE: int = 100
    
    # Caching hints sent with outgoing requests (seconds)
    LISTING_REVALIDATE_SECONDS: int = 60
    ITEM_REVALIDATE_SECONDS: int = 3600
    
    # Site / sitemap
    SITE_BASE_URL: str = "http://localhost:3000"
    SITE_ROUTES: List[str] = ["/", "/about", "/blog", "/projets", "/gallery"]
    
    # Comments
    COMMENT_MIN_LENGTH: int = 10
    
    class Config:
        env_file = ".env"

settings = Settings()
