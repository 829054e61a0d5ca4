"""Source configuration shared by check, in and out."""

from typing import List
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, field_validator

from mr_resource.services.path_filter import compile_patterns


def _project_path(uri: str) -> str:
    path = urlparse(uri).path.strip("/")
    if path.endswith(".git"):
        path = path[: -len(".git")]
    return path


class Source(BaseModel):
    """Resource ``source`` block from the pipeline configuration."""

    model_config = ConfigDict(frozen=True, extra="ignore", hide_input_in_errors=True)

    uri: str = Field(..., description="Project URL, e.g. https://gitlab.com/group/project.git")
    private_token: str = Field(..., description="GitLab access token", repr=False)
    labels: List[str] | None = Field(default=None, description="Only merge requests carrying all these labels")
    paths: List[str] | None = Field(default=None, description="Glob patterns; at least one changed path must match")
    skip_draft: bool = Field(default=False, description="Ignore draft merge requests")

    @field_validator("uri")
    @classmethod
    def _check_uri(cls, value: str) -> str:
        parsed = urlparse(value)
        if not parsed.scheme or not parsed.hostname:
            raise ValueError(f"uri must be an absolute URL with a host, got {value!r}")
        if not _project_path(value):
            raise ValueError(f"uri has no project path: {value!r}")
        return value

    @field_validator("paths")
    @classmethod
    def _check_paths(cls, value: List[str] | None) -> List[str] | None:
        if value is not None:
            compile_patterns(value)
        return value

    @property
    def api_url(self) -> str:
        """GitLab REST API base for the host in ``uri``."""
        parsed = urlparse(self.uri)
        host = parsed.hostname or ""
        if parsed.port:
            host = f"{host}:{parsed.port}"
        return f"{parsed.scheme}://{host}/api/v4"

    @property
    def project_path(self) -> str:
        """Project path (``group/project``) from ``uri``."""
        return _project_path(self.uri)
