"""Settings used for the API."""

import hashlib
import secrets
from typing import Literal

from pydantic import BaseModel, Field, computed_field


def generate_auth_token() -> str:
    """Generates a secure auth token."""
    random_bytes = secrets.token_hex(32)
    return hashlib.sha256(random_bytes.encode()).hexdigest()


class APISettings(BaseModel):
    """Settings used for the API."""

    API_V1_PREFIX: str = Field(default="/api/v1", frozen=True)
    TOKEN_HEADER_NAME: str = Field(default="x-udf-samples-api", frozen=True)
    TOKEN_ENV_VAR: str = Field(default="UDF_SAMPLES_API_TOKEN", frozen=True)
    TOKEN: str = Field(
        default_factory=generate_auth_token, pattern=r"^[a-fA-F0-9]{64}$"
    )
    FETCH_TIMEOUT_SECONDS: float = Field(default=30.0, gt=0)

    environment: Literal["local", "production"] = "local"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["console", "json"] = "console"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_production(self) -> bool:
        """Whether the API runs in a production environment."""
        return self.environment == "production"


settings = APISettings()


async def get_settings() -> APISettings:
    """Returns the API settings.

    This can be used for dependency injection in FastAPI routes.
    """
    return settings
