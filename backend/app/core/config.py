"""
Application configuration settings.
Loads from .env file first (overrides shell env for local dev), then pydantic reads from environment.
Production: set env vars in the platform (Docker, K8s, etc.); .env is optional.

All backend-related configs and constants are centralized here.
"""
from pathlib import Path

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve .env path: backend/.env (absolute path, works regardless of cwd)
_BASE_DIR = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = (_BASE_DIR / ".env").resolve()

# When .env doesn't exist (prod), this is a no-op; platform env vars are used.
# override=False so values exported by the shell or the test harness win.
if _ENV_FILE.exists():
    load_dotenv(_ENV_FILE, override=False)


class Settings(BaseSettings):
    """Application settings. Source: env vars (after dotenv load)."""

    # App
    app_name: str = "DevConnector"
    app_version: str = "1.0.0"
    port: int = 5000
    cors_origins: list[str] = ["*"]

    # Database
    database_url: str = "sqlite:///./devconnector.db"

    # Auth
    secret_key: str = "your-secret-key-change-in-production"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24 * 5

    # GitHub
    github_token: str = ""
    github_api_url: str = "https://api.github.com"
    github_repos_per_page: int = 5

    # HTTP / network
    http_request_timeout: int = 30

    # Not-found status per route family (profile routes answer 400, post routes 404)
    profile_not_found_status: int = 400
    post_not_found_status: int = 404

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE) if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()


# --- Constants (non-env, business config) ---

# Registration
PASSWORD_MIN_LENGTH: int = 6

# Gravatar avatar derived from the account email
GRAVATAR_BASE_URL: str = "https://www.gravatar.com/avatar"
GRAVATAR_SIZE: str = "200"
GRAVATAR_RATING: str = "pg"
GRAVATAR_DEFAULT: str = "mm"

# Profile social links, in the order they are rendered
SOCIAL_NETWORKS: tuple[str, ...] = ("youtube", "twitter", "facebook", "linkedin", "instagram")
