"""Git operations: clone and checkout of merge request revisions."""

from mr_resource.services.git._run import GitRunnerError
from mr_resource.services.git.clone import authenticated_url, clone_at_revision

__all__ = [
    "GitRunnerError",
    "authenticated_url",
    "clone_at_revision",
]
