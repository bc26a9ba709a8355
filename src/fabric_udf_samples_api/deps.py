"""Dependencies injected into FastAPI."""

from typing import Annotated

from fastapi import Depends, HTTPException, Security
from fastapi.security import APIKeyHeader

from fabric_udf_samples_api.cache import ContentCache, content_cache
from fabric_udf_samples_api.config import settings
from fabric_udf_samples_api.interfaces import SamplesRepoAPI
from fabric_udf_samples_api.services.samples import SamplesService

api_token_header = APIKeyHeader(name=settings.TOKEN_HEADER_NAME)

TokenHeaderDep = Annotated[str, Security(api_token_header)]


async def verify_auth_token(req_token: TokenHeaderDep) -> TokenHeaderDep:
    """Verifies the request token vs the stored one."""
    if req_token != settings.TOKEN:
        raise HTTPException(status_code=401, detail="Not authorized")
    return req_token


async def get_content_cache() -> ContentCache:
    """Returns the process-wide content cache."""
    return content_cache


ContentCacheDep = Annotated[ContentCache, Depends(get_content_cache)]


async def get_samples_service(cache: ContentCacheDep) -> SamplesService:
    """Returns a SamplesService backed by the samples repository."""
    return SamplesService(
        SamplesRepoAPI(timeout=settings.FETCH_TIMEOUT_SECONDS), cache
    )


SamplesServiceDep = Annotated[SamplesService, Depends(get_samples_service)]
