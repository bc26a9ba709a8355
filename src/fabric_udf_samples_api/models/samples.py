"""Models (schemas) for the User Data Function samples routes."""

from enum import StrEnum

from pydantic import BaseModel, Field


class ResourceCategory(StrEnum):
    """The kinds of sample resources that can be requested."""

    samples_list = "samples-list"
    warehouse = "warehouse"
    lakehouse = "lakehouse"
    sqldb = "sqldb"
    variablelibrary = "variablelibrary"
    datamanipulation = "datamanipulation"
    udfdatatypes = "udfdatatypes"


class SampleAction(StrEnum):
    """Narrows a resource category down to a subset of its sample files."""

    all = "all"
    query = "query"
    write = "write"
    specific = "specific"


class UserDataFunctionSamples(BaseModel):
    """Sample content returned for a resource request."""

    resource: ResourceCategory = Field(examples=["warehouse"])
    """The resource category that was requested."""

    action: SampleAction | None = Field(default=None, examples=["all"])
    """The action that was requested, if any."""

    content: str
    """The fetched content.

    For the samples list this is the raw index document. For code samples every
    file is preceded by a '# File: <path>' header."""


class CatalogEntry(BaseModel):
    """A resource and action pair known to the catalog."""

    resource: ResourceCategory
    action: SampleAction
    files: list[str]
    """Sample file paths, in the order they are combined."""
