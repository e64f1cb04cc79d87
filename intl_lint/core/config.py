"""Lint options and process settings."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PROJECT_PATH = "./app"
DEFAULT_TRANSLATION_PATH = "./translations/en-us.yaml"

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class LintOptions(BaseModel):
    """Options for one lint run (built from CLI flags or by library callers)."""

    silent: bool = False
    path: str = DEFAULT_PROJECT_PATH
    translation_path: str = DEFAULT_TRANSLATION_PATH

    model_config = ConfigDict(frozen=True)

    def _resolve(self, raw: str, cwd: Optional[Path]) -> Path:
        base = Path(cwd) if cwd is not None else Path.cwd()
        return (base / raw).resolve()

    def project_root(self, cwd: Optional[Path] = None) -> Path:
        return self._resolve(self.path, cwd)

    def translation_file(self, cwd: Optional[Path] = None) -> Path:
        return self._resolve(self.translation_path, cwd)


class Settings(BaseSettings):
    """Process settings. Only diagnostics and presentation read these."""

    DEBUG: bool = False
    LOG_LEVEL: str = "WARNING"
    LOG_JSON: bool = False

    # Report presentation
    REPORT_PREFIX: str = "[Fleetbase]"
    RULE_WIDTH: int = Field(default=80, ge=1)

    model_config = SettingsConfigDict(
        env_prefix="INTL_LINT_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _normalize_level(cls, v):
        level = str(v).strip().upper() or "WARNING"
        if level not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}")
        return level


settings = Settings()
