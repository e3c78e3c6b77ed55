from typing import Any

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ApiConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    host: str = Field(default="0.0.0.0", validation_alias="API_HOST")
    port: int = Field(default=8000, validation_alias="API_PORT")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    recents_max: int = Field(default=100, validation_alias="API_RECENTS_MAX")
    event_log_path: str = Field(default="data/events/usage_events.jsonl", validation_alias="EVENT_LOG_PATH")
    feedback_log_path: str = Field(default="data/events/guide_feedback.jsonl", validation_alias="FEEDBACK_LOG_PATH")

    catalog_path: str | None = Field(default=None, validation_alias="TRIAGE_CATALOG_PATH")
    catalog_reload_enabled: bool = Field(default=False, validation_alias="TRIAGE_CATALOG_RELOAD_ENABLED")
    triage_max_results: int = Field(default=20, ge=1, validation_alias="TRIAGE_MAX_RESULTS")
    default_device: str | None = Field(default="windows", validation_alias="TRIAGE_DEFAULT_DEVICE")
    hybrid_default: bool = Field(default=True, validation_alias="TRIAGE_HYBRID_DEFAULT")

    mcp_transport: str = Field(default="stdio", validation_alias="TRIAGE_MCP_TRANSPORT")
    mcp_host: str = Field(default="127.0.0.1", validation_alias="TRIAGE_MCP_HOST")
    mcp_port: int = Field(default=8765, validation_alias="TRIAGE_MCP_PORT")
    mcp_path: str = Field(default="/mcp", validation_alias="TRIAGE_MCP_PATH")
    mcp_url: str | None = Field(default=None, validation_alias="TRIAGE_MCP_URL")

    @field_validator("catalog_path", "default_device", "mcp_url", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> str | None:
        if value is None:
            return None
        text = str(value).strip()
        return text or None

    @field_validator("default_device")
    @classmethod
    def _lower_device(cls, value: str | None) -> str | None:
        return value.lower() if value else None

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: Any) -> str:
        text = str(value or "").strip().upper()
        return text or "INFO"

    @model_validator(mode="after")
    def _hydrate_default_url(self) -> "ApiConfig":
        if not self.mcp_url and self.mcp_transport == "streamable_http":
            normalized_path = self.mcp_path if self.mcp_path.startswith("/") else f"/{self.mcp_path}"
            self.mcp_url = f"http://{self.mcp_host}:{self.mcp_port}{normalized_path}"
        return self

    @classmethod
    def from_env(cls) -> "ApiConfig":
        return cls()
