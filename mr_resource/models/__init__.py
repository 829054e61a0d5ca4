"""Data models for the resource (Pydantic)."""

from mr_resource.models.merge_request import Commit, CommitStatus, MergeRequest, Project
from mr_resource.models.metadata import Metadata
from mr_resource.models.protocol import (
    CheckRequest,
    CommitStatusState,
    InParams,
    InRequest,
    OutParams,
    OutRequest,
    ResourceResponse,
)
from mr_resource.models.source import Source
from mr_resource.models.version import Version

__all__ = [
    "CheckRequest",
    "Commit",
    "CommitStatus",
    "CommitStatusState",
    "InParams",
    "InRequest",
    "MergeRequest",
    "Metadata",
    "OutParams",
    "OutRequest",
    "Project",
    "ResourceResponse",
    "Source",
    "Version",
]
