"""Git platform adapters."""

from mr_resource.adapters.base import GitPlatformAdapter, GitPlatformError
from mr_resource.adapters.gitlab import GitLabAdapter

__all__ = ["GitPlatformAdapter", "GitPlatformError", "GitLabAdapter"]
