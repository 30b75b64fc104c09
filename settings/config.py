"""Configuration settings using Pydantic."""
from typing import Literal, Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


PROJECT_TYPE_ALIASES = {
    # "angular" was the historical name of the generic profile
    "angular": "generic",
}


def normalize_project_type(value: str) -> str:
    value = value.strip().lower()
    return PROJECT_TYPE_ALIASES.get(value, value)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MCP_CI_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Paths
    project_root: str = Field(default=".", description="Base directory to index")
    target: Optional[str] = Field(default=None, description="Optional subdirectory within the project root")
    output_path: str = Field(default="semantic-chunks.json")

    # Extraction
    include_code: bool = Field(default=False, description="Copy source text into chunks")
    project_type: Literal["generic", "playwright"] = Field(default="generic")

    # Scanning
    file_extensions: list[str] = Field(default=[".js", ".ts", ".tsx"])
    ignore_patterns: list[str] = Field(default=["node_modules"])
    respect_gitignore: bool = Field(default=True)
    max_file_size: int = Field(default=1_000_000, description="Skip files larger than this many bytes")

    @field_validator("project_type", mode="before")
    @classmethod
    def _normalize_project_type(cls, value):
        if isinstance(value, str):
            return normalize_project_type(value)
        return value


def get_settings() -> Settings:
    """Factory function to get settings instance."""
    return Settings()
