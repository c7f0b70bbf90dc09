from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # GitHub - optional personal access token
    # Empty string = unauthenticated requests (60 requests/hr instead of 5,000)
    github_token: str = ""
    github_api_url: str = "https://api.github.com"
    github_api_version: str = "2022-11-28"

    # Shared HTTP client
    github_request_timeout: float = 30.0  # seconds
    github_connect_timeout: float = 5.0  # seconds
    github_max_connections: int = 10

    # Commit activity statistics are computed lazily by GitHub (202 Accepted)
    # Retries are sequential with a fixed delay, no backoff
    commit_activity_max_retries: int = 3
    commit_activity_retry_delay: float = 1.0  # seconds

    # Application
    debug: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]

    @property
    def github_token_configured(self) -> bool:
        """Check if a GitHub token is configured."""
        return bool(self.github_token.strip())


settings = Settings()
