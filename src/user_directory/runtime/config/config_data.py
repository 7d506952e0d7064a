"""Pydantic models for parsing the config.yaml configuration file.

These models correspond to the ``config`` section of config.yaml and handle
validation and type conversion of the YAML data.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator, model_validator


class AppConfig(BaseModel):
    """Application configuration model."""

    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )
    host: str = Field(default="localhost", description="Application host")
    port: int = Field(default=8000, description="Application port")
    title: str = Field(default="User Directory API", description="OpenAPI title")

    @property
    def base_url(self) -> str:
        """Construct the base URL from host and port."""
        scheme = "https" if self.environment == "production" else "http"
        return f"{scheme}://{self.host}:{self.port}"


def _token_text(value: Any) -> str:
    """Return ``value`` if YAML read it as a string.

    Unquoted values such as ``yes``, ``0123`` or ``1e3`` become booleans and
    numbers whose original text cannot be recovered, so they are rejected.
    """
    if isinstance(value, str):
        return value
    raise ValueError(
        f"auth token {value!r} was not read as text; quote it in config.yaml"
    )


class AuthConfig(BaseModel):
    """Bearer token allow-list."""

    tokens: list[str] = Field(
        default_factory=list,
        description="Valid bearer tokens; an empty list rejects every API request",
    )

    @field_validator("tokens", mode="before")
    @classmethod
    def split_tokens(cls, value: Any) -> Any:
        # A single environment variable may carry several comma-separated tokens
        if value is None:
            return []
        if isinstance(value, str):
            return [token.strip() for token in value.split(",") if token.strip()]
        if isinstance(value, list):
            return [_token_text(item) for item in value]
        return [_token_text(value)]


class PaginationConfig(BaseModel):
    """Paging limits for the list endpoint."""

    default_take: int = Field(default=50, ge=1, description="Default page size")
    max_take: int = Field(default=200, ge=1, description="Largest page size served")

    @model_validator(mode="after")
    def check_bounds(self) -> PaginationConfig:
        if self.default_take > self.max_take:
            raise ValueError("default_take cannot exceed max_take")
        return self


class StoreConfig(BaseModel):
    """In-memory store configuration."""

    shards: int = Field(default=16, ge=1, description="Number of lock shards")


class LoggingConfig(BaseModel):
    """Logging configuration model."""

    level: str = Field(default="INFO", description="Logging level")
    format: Literal["json", "plain"] = Field(default="plain", description="Log format")
    file: str | None = Field(default=None, description="Log file path")
    max_size_mb: int = Field(default=10, description="Maximum log file size in MB")
    backup_count: int = Field(
        default=5, description="Number of backup log files to keep"
    )

    @field_validator("file", mode="before")
    @classmethod
    def blank_file_disables_sink(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class ConfigData(BaseModel):
    """Root configuration model that matches the config.yaml structure."""

    app: AppConfig = Field(
        default_factory=AppConfig, description="Application configuration"
    )
    auth: AuthConfig = Field(
        default_factory=AuthConfig, description="Authentication configuration"
    )
    pagination: PaginationConfig = Field(
        default_factory=PaginationConfig, description="Pagination configuration"
    )
    store: StoreConfig = Field(
        default_factory=StoreConfig, description="Store configuration"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
