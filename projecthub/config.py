"""
Environment configuration for ProjectHub.

Settings are read from the process environment (optionally seeded from a
``.env`` file by the entry points), validated once and cached for the
lifetime of the process.
"""
import logging
import os
from functools import lru_cache
from typing import Dict, List, Literal, Mapping, Optional

from pydantic import AnyUrl, BaseModel, ConfigDict, Field, TypeAdapter, field_validator
from pydantic import ValidationError as PydanticValidationError

from projecthub.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

_URL_ADAPTER = TypeAdapter(AnyUrl)

DEFAULT_SESSION_MAX_AGE = 604800  # 7 days
DEFAULT_APP_URL = "http://localhost:3000"


class Settings(BaseModel):
    """Validated, immutable process configuration"""

    model_config = ConfigDict(frozen=True)

    # Database
    database_url: str = Field(..., alias="DATABASE_URL", min_length=1)

    # Session & Auth
    session_secret: str = Field(..., alias="SESSION_SECRET", min_length=32)
    session_max_age: int = Field(DEFAULT_SESSION_MAX_AGE, alias="SESSION_MAX_AGE", gt=0)

    # App
    node_env: Literal["development", "production", "test"] = Field("development", alias="NODE_ENV")
    app_url: str = Field(DEFAULT_APP_URL, alias="NEXT_PUBLIC_APP_URL")

    # Security
    bcrypt_rounds: int = Field(12, alias="BCRYPT_ROUNDS", ge=10, le=15)

    # Rate limiting
    rate_limit_max: int = Field(10, alias="RATE_LIMIT_MAX", gt=0)
    rate_limit_window_ms: int = Field(60000, alias="RATE_LIMIT_WINDOW_MS", gt=0)

    @field_validator('database_url')
    @classmethod
    def validate_database_url(cls, v):
        if not v.strip():
            raise ValueError('DATABASE_URL is required')
        return v

    @field_validator('app_url')
    @classmethod
    def validate_app_url(cls, v):
        try:
            _URL_ADAPTER.validate_python(v)
        except ValueError as exc:
            raise ValueError('NEXT_PUBLIC_APP_URL must be a valid URL') from exc
        return v

    @property
    def is_development(self) -> bool:
        return self.node_env == "development"

    @property
    def is_production(self) -> bool:
        return self.node_env == "production"

    @property
    def is_test(self) -> bool:
        return self.node_env == "test"


def _flatten_errors(exc: PydanticValidationError) -> List[Dict[str, str]]:
    errors = []
    for error in exc.errors():
        loc = error.get("loc") or ("",)
        errors.append({"field": str(loc[0]), "message": error.get("msg", "")})
    return errors


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Validate configuration from ``environ`` (defaults to ``os.environ``).

    Raises:
        ConfigurationError: a required variable is missing or a value
            violates its constraint.
    """
    source = os.environ if environ is None else environ
    try:
        return Settings.model_validate(dict(source))
    except PydanticValidationError as exc:
        errors = _flatten_errors(exc)
        logger.error("Invalid environment variables: %s", errors)
        raise ConfigurationError("Invalid environment variables", errors=errors) from exc


@lru_cache(maxsize=None)
def get_settings() -> Settings:
    """Return process settings, validating the environment on first call only."""
    return load_settings()
