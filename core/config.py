from pydantic_settings import BaseSettings
from functools import lru_cache
from pathlib import Path


class Settings(BaseSettings):
    # App
    APP_NAME: str = "Posts API"
    APP_VERSION: str = "1.0.0"
    APP_DESCRIPTION: str = """
    Social posting API.

    ## Features
    * Post creation, retrieval and deletion
    * Like toggling
    * Comments on posts

    Every /posts endpoint requires a bearer token.
    """
    DOCS_URL: str = "/docs"
    REDOC_URL: str = "/redoc"
    OPENAPI_URL: str = "/openapi.json"
    OPENAPI_TAGS: list[dict] = [
        {
            "name": "posts",
            "description": "Post creation, retrieval, likes and comments"
        },
        {
            "name": "health",
            "description": "Service health checks"
        }
    ]
    LICENSE_INFO: dict = {
        "name": "MIT",
        "url": "https://opensource.org/licenses/MIT",
        "identifier": "MIT",
    }

    # CORS
    CORS_ALLOWED_ORIGINS: list[str] = ["http://localhost:3000", "http://localhost"]

    # Database
    DATABASE_URL: str = "sqlite:///./posts.db"
    DB_ECHO: bool = False

    # JWT
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # Where the identity guard looks for a token besides the Authorization header
    AUTH_HEADER_NAME: str = "x-auth-token"
    AUTH_COOKIE_NAME: str = "access_token"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "console"  # console | json

    # Metrics
    METRICS_ENABLED: bool = True

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    # Get the current file's directory
    current_dir = Path(__file__).resolve().parent
    # Go up one level to the project root
    project_dir = current_dir.parent

    # Initialize settings with explicit .env path
    return Settings(_env_file=project_dir / ".env")
