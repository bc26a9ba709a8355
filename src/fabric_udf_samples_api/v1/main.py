"""The main router for /api/v1."""

from fastapi import APIRouter, Depends

from fabric_udf_samples_api.config import settings
from fabric_udf_samples_api.deps import verify_auth_token
from fabric_udf_samples_api.models import Ok
from fabric_udf_samples_api.v1.responses import AuthResponses

from .routes import samples

api_v1_router = APIRouter(
    prefix=settings.API_V1_PREFIX,
    tags=["v1"],
    dependencies=[Depends(verify_auth_token)],
)

api_v1_router.include_router(samples.router)


@api_v1_router.get(
    "/health",
    response_model=Ok,
    summary="A health check on the /v1 routes.",
    description=(
        "This route requires a valid token to return 200 OK. It can be used to "
        "check if the client is authorized."
    ),
    responses=AuthResponses,
)
async def v1_health_check() -> Ok:
    """Simple health check endpoint."""
    return Ok()
