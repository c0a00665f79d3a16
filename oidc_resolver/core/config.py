from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Resolver configuration (env driven)."""

    model_config = SettingsConfigDict(
        env_prefix="OIDC_RESOLVER_",
        env_file=".env",
        extra="ignore",
    )

    log_level: str = Field(default="INFO")

    http_timeout: float = Field(
        default=10.0,
        description="Timeout in seconds for the default HTTP transport",
    )
    require_https: bool = Field(
        default=False,
        description="Reject non-https addresses in HttpDocumentRetriever",
    )
    lenient_certificates: bool = Field(
        default=False,
        description="Skip key entries with undecodable certificates instead of failing",
    )


settings = Settings()
