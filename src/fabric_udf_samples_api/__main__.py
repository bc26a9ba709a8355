"""The main entry point for fabric-udf-samples-api."""

import asyncio
import os

import uvicorn
from fastapi import FastAPI
from fastapi.routing import APIRoute

from .config import settings
from .logging import get_logger, setup_logging
from .models import HealthCheck
from .v1.main import api_v1_router

logger = get_logger(__name__)


def custom_generate_unique_id(route: APIRoute) -> str:
    """Generates a unique id per route."""
    return f"{route.tags[0]}-{route.name}"


app = FastAPI(
    title="Fabric UDF Samples API",
    openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
    generate_unique_id_function=custom_generate_unique_id,
)
app.include_router(api_v1_router)


@app.get(
    "/health",
    tags=["app"],
    response_model=HealthCheck,
    summary="A health check on the application",
    description=(
        "This route requires no form of authentication or authorization. "
        "It can be used to check if the application is running and responsive."
    ),
)
async def health_check() -> HealthCheck:
    """Simple health check endpoint."""
    return HealthCheck()


def run_server(
    *,
    host: str = "127.0.0.1",
    port: int = 8001,
    token: str | None = None,
) -> None:
    """Starts the API server.

    The token is taken from the argument, else from the UDF_SAMPLES_API_TOKEN
    environment variable. If neither is set the generated token is logged.
    """
    if token is None:
        token = os.environ.get(settings.TOKEN_ENV_VAR) or None
    if token:
        settings.TOKEN = token

    setup_logging(settings)

    if not token:
        logger.warning(
            "api_token_generated",
            token=settings.TOKEN,
            header=settings.TOKEN_HEADER_NAME,
            env_var=settings.TOKEN_ENV_VAR,
        )

    server_config = uvicorn.Config(app=app, host=host, port=port, log_config=None)
    server = uvicorn.Server(server_config)

    asyncio.run(server.serve())


if __name__ == "__main__":
    run_server()
