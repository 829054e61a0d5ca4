"""GitLab records consumed by the resource: merge requests, commits, projects."""

from typing import List

from pydantic import BaseModel, Field


class MergeRequest(BaseModel):
    """Open merge request as returned by the GitLab API."""

    iid: int
    title: str = ""
    labels: List[str] = Field(default_factory=list)
    sha: str
    author: str = ""
    updated_at: str = ""
    source_project_id: int
    source_branch: str
    web_url: str = ""
    draft: bool = False


class Commit(BaseModel):
    """Commit record; only the commit time is used."""

    committed_date: str


class Project(BaseModel):
    """Project record with the HTTP clone URL."""

    http_url_to_repo: str


class CommitStatus(BaseModel):
    """Commit status as returned after posting it."""

    status: str
