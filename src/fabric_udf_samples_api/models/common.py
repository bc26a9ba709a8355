"""Common response models from the API."""

from typing import Literal

from pydantic import BaseModel


class HealthCheck(BaseModel):
    """Returns "ok" if the route is functioning correctly."""

    status: Literal["ok"] = "ok"


class Ok(BaseModel):
    """Returns "ok" if the request was handled successfully."""

    status: Literal["ok"] = "ok"
