"""Abstract base for Git platform adapters."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List

from mr_resource.models import Commit, CommitStatus, CommitStatusState, MergeRequest, Project


class GitPlatformError(Exception):
    """Raised when a Git platform API call fails."""

    pass


class GitPlatformAdapter(ABC):
    """Query interface to the host of the merge requests.

    ``project`` is a project path (``group/project``) or a numeric project ID.
    """

    @abstractmethod
    def list_open_merge_requests(
        self,
        project: str | int,
        updated_after: datetime | None = None,
        labels: List[str] | None = None,
        skip_draft: bool = False,
    ) -> List[MergeRequest]:
        """List open merge requests, oldest update first."""
        ...

    @abstractmethod
    def get_merge_request(self, project: str | int, iid: int) -> MergeRequest:
        """Fetch one merge request by IID."""
        ...

    @abstractmethod
    def get_merge_request_changes(self, project: str | int, iid: int) -> List[str]:
        """Return the paths changed by a merge request."""
        ...

    @abstractmethod
    def get_commit(self, project: str | int, sha: str) -> Commit:
        """Fetch a commit record."""
        ...

    @abstractmethod
    def get_project(self, project: str | int) -> Project:
        """Fetch a project record."""
        ...

    @abstractmethod
    def create_commit_status(
        self,
        project: str | int,
        sha: str,
        state: CommitStatusState,
        name: str,
        target_url: str,
        coverage: float | None = None,
    ) -> CommitStatus:
        """Post a commit status and return the stored status."""
        ...
