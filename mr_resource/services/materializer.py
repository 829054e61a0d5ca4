"""Fetch step (``in``): metadata, optional clone, marker file."""

import logging
from pathlib import Path
from typing import List

from mr_resource.adapters.base import GitPlatformAdapter
from mr_resource.models import InParams, MergeRequest, Metadata, Source, Version
from mr_resource.services.git import clone_at_revision
from mr_resource.services.marker import write_marker

log = logging.getLogger("mr_resource.in")


def should_clone(params: InParams | None) -> bool:
    """Clone unless ``skip_clone`` is explicitly true."""
    return params is None or params.skip_clone is not True


def merge_request_metadata(mr: MergeRequest) -> List[Metadata]:
    """Metadata shown for a merge request: url, author, title."""
    return [
        Metadata(name="url", value=mr.web_url),
        Metadata(name="author", value=mr.author),
        Metadata(name="title", value=mr.title),
    ]


def materialize(
    source: Source,
    version: Version,
    directory: Path,
    host: GitPlatformAdapter,
    params: InParams | None = None,
) -> List[Metadata]:
    """Fetch ``version`` into ``directory`` and return its metadata.

    The marker file is written whether or not the repository was cloned,
    so ``out`` can always find the version.

    Raises:
        GitPlatformError: If a host call fails.
        GitRunnerError: If clone or checkout fails.
        MarkerFileError: If the marker file cannot be written.
    """
    mr = host.get_merge_request(source.project_path, version.number)

    if should_clone(params):
        project = host.get_project(mr.source_project_id)
        log.info("Cloning repository...")
        clone_at_revision(
            project.http_url_to_repo,
            branch=mr.source_branch,
            sha=version.sha,
            directory=directory,
            token=source.private_token,
            log=log,
        )
    else:
        log.info("Skipping clone of !%s", version.iid)

    write_marker(directory, version)
    return merge_request_metadata(mr)
