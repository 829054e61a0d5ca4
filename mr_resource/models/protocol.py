"""Request and response documents exchanged over stdin/stdout."""

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from mr_resource.models.metadata import Metadata
from mr_resource.models.source import Source
from mr_resource.models.version import Version


class CommitStatusState(str, Enum):
    """Commit status states accepted by GitLab."""

    CANCELED = "canceled"
    RUNNING = "running"
    PENDING = "pending"
    FAILED = "failed"
    SUCCESS = "success"


class CheckRequest(BaseModel):
    """Input of ``check``: source and the last known version, if any."""

    model_config = ConfigDict(extra="ignore", hide_input_in_errors=True)

    source: Source
    version: Version | None = None


class InParams(BaseModel):
    """``params`` of a get step."""

    model_config = ConfigDict(extra="ignore")

    skip_clone: bool | None = Field(default=None, description="Only write metadata, do not clone")


class InRequest(BaseModel):
    """Input of ``in``."""

    model_config = ConfigDict(extra="ignore", hide_input_in_errors=True)

    source: Source
    version: Version
    params: InParams | None = None


class OutParams(BaseModel):
    """``params`` of a put step."""

    model_config = ConfigDict(extra="ignore")

    resource_name: str = Field(..., min_length=1, description="Name of the get step holding the marker file")
    status: CommitStatusState = Field(..., description="Commit status to report")
    pipeline_name: str | None = Field(
        default=None,
        description="Status name template; supports %BUILD_*% placeholders",
    )
    coverage: float | None = Field(default=None, ge=0, le=100, description="Total code coverage percentage")


class OutRequest(BaseModel):
    """Input of ``out``."""

    model_config = ConfigDict(extra="ignore", hide_input_in_errors=True)

    source: Source
    params: OutParams


class ResourceResponse(BaseModel):
    """Output of ``in`` and ``out``."""

    version: Version
    metadata: List[Metadata] = Field(default_factory=list)
