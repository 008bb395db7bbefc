"""
Central settings for the server, read from the environment (and an optional .env file).
"""

from typing import Literal, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_PREFIX = "SHADCN_VUE_MCP_"


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    http_timeout_seconds: float = Field(
        default=15.0,
        gt=0,
        description="Timeout per documentation request (seconds).",
    )
    user_agent: str = Field(
        default="shadcn-vue-mcp/0.1",
        min_length=1,
    )
    log_level: str = Field(default="INFO")

    icon_library: Literal["lucide", "@nuxt/icon"] = Field(
        default="lucide",
        description="Icon set recommended by the component creation prompt.",
    )
    docs_tokens: int = Field(
        default=700,
        ge=100,
        description="Token budget requested per component from the docs API.",
    )

    metadata_cache_max_age_seconds: float = Field(default=24 * 60 * 60, gt=0)
    metadata_cache_max_size: int = Field(default=100, ge=1)

    ai_api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices(f"{ENV_PREFIX}AI_API_KEY", "OPENROUTER_API_KEY", "ai_api_key"),
    )
    ai_model: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices(f"{ENV_PREFIX}AI_MODEL", "OPENROUTER_MODEL_ID", "ai_model"),
    )
    ai_base_url: str = Field(default="https://openrouter.ai/api/v1", min_length=8)
    ai_timeout_seconds: float = Field(default=60.0, gt=0)
    ai_max_retries: int = Field(default=2, ge=0, le=10)

    @property
    def ai_enabled(self) -> bool:
        return bool(self.ai_api_key and self.ai_model)
