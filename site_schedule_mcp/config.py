"""Environment-driven settings for the site schedule MCP server."""

import os

from pydantic import BaseModel, ConfigDict, Field, field_validator

from site_schedule_mcp.enums import ZoomLevel

ENV_PREFIX = "SITE_SCHEDULE_"


class Settings(BaseModel):
    """Runtime settings. Every field can be overridden with a SITE_SCHEDULE_* variable."""

    model_config = ConfigDict(str_strip_whitespace=True, frozen=True)

    log_level: str = Field(default="WARNING", description="Level name for the stderr log handler")
    default_zoom: ZoomLevel = Field(default=ZoomLevel.WEEK, description="Zoom used when a tool call omits one")
    max_rounds: int = Field(default=10, description="Resolver round cap used by the tools", ge=1, le=100)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("default_zoom", mode="before")
    @classmethod
    def normalize_zoom(cls, v: object) -> object:
        return v.lower() if isinstance(v, str) else v


def load_settings(environ: dict[str, str] | None = None) -> Settings:
    """
    Build Settings from environment variables.

    Args:
        environ: Mapping to read instead of os.environ (used by tests)

    Returns:
        Validated Settings; raises pydantic.ValidationError on bad values
    """
    env = os.environ if environ is None else environ
    values: dict[str, str] = {}
    for name in Settings.model_fields:
        raw = env.get(ENV_PREFIX + name.upper())
        if raw is not None and raw.strip():
            values[name] = raw
    return Settings.model_validate(values)


settings = load_settings()
