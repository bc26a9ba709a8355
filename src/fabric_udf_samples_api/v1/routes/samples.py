"""Routes for retrieving Microsoft Fabric User Data Function samples."""

from textwrap import dedent

from fastapi import APIRouter, HTTPException

from fabric_udf_samples_api.catalog import CATALOG
from fabric_udf_samples_api.deps import SamplesServiceDep
from fabric_udf_samples_api.exceptions import (
    FetchError,
    NoMappingError,
    SamplesValidationError,
)
from fabric_udf_samples_api.logging import get_logger
from fabric_udf_samples_api.models.samples import (
    CatalogEntry,
    UserDataFunctionSamples,
)
from fabric_udf_samples_api.v1.responses import AuthResponses, GetSamplesResponses

logger = get_logger(__name__)

router = APIRouter(prefix="/udf", tags=["udf"])


@router.get(
    "/samples",
    response_model=UserDataFunctionSamples,
    summary="Retrieves Python sample functions for Fabric User Data Functions",
    description=dedent(
        """
        Retrieves Python sample functions and code for Microsoft Fabric User Data
        Functions from the official samples repository.

        The `resource` parameter specifies what type of samples to retrieve:

        - `samples-list`: the markdown index of all available samples
        - `warehouse`: Fabric warehouse operations
        - `lakehouse`: Fabric lakehouse operations
        - `sqldb`: SQL database operations
        - `variablelibrary`: Variable Library operations
        - `datamanipulation`: data manipulation with pandas/numpy
        - `udfdatatypes`: UDF data types

        The `action` parameter is required for every resource except
        `samples-list`:

        - `all`: all sample files for the resource
        - `query`: query/read samples
        - `write`: write/export samples
        - `specific`: a single file given by `filename`, e.g.
          `Warehouse/query_data_from_warehouse.py`

        Fetched files are cached for the lifetime of the server.
        """
    ),
    responses=GetSamplesResponses,
)
async def get_samples(
    samples_service: SamplesServiceDep,
    resource: str | None = None,
    action: str | None = None,
    filename: str | None = None,
) -> UserDataFunctionSamples:
    """Returns the sample content for a resource and action."""
    try:
        return await samples_service.get_samples(resource, action, filename)
    except SamplesValidationError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except NoMappingError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except FetchError as e:
        logger.error(
            "samples_request_failed",
            resource=resource,
            action=action,
            status_code=e.status_code,
            transport=e.transport,
        )
        raise HTTPException(
            status_code=e.status_code or 502,
            detail=f"Failed to fetch content from GitHub: {e.message}",
        ) from e
    except Exception as e:
        logger.exception("samples_request_failed", resource=resource, action=action)
        raise HTTPException(status_code=500, detail=str(e)) from e


@router.get(
    "/catalog",
    response_model=list[CatalogEntry],
    summary="Lists the sample files known for every resource and action",
    description=dedent(
        """
        Returns every resource and action combination that maps to sample files,
        with the files in the order they are combined by `/udf/samples`.
        The `samples-list` resource and the `specific` action are not listed as
        they do not map to catalogued files.
        """
    ),
    responses=AuthResponses,
)
async def get_catalog() -> list[CatalogEntry]:
    """Returns the sample catalog."""
    return [
        CatalogEntry(resource=resource, action=action, files=list(files))
        for (resource, action), files in CATALOG.items()
    ]
