"""Put step (``out``): post the build status onto the merge request commit."""

import logging
from pathlib import Path
from typing import List, Tuple

from mr_resource.adapters.base import GitPlatformAdapter
from mr_resource.config import BuildEnvironment
from mr_resource.models import Metadata, OutParams, Source, Version
from mr_resource.services.instance_vars import instance_vars_suffix
from mr_resource.services.marker import read_marker
from mr_resource.services.materializer import merge_request_metadata

log = logging.getLogger("mr_resource.out")


def build_url(build: BuildEnvironment) -> str:
    """Link to the running build, with instance variables as query string."""
    return (
        f"{build.atc_external_url}/teams/{build.build_team_name}"
        f"/pipelines/{build.build_pipeline_name}/jobs/{build.build_job_name}"
        f"/builds/{build.build_name}{instance_vars_suffix(build.build_pipeline_instance_vars)}"
    )


def status_name(template: str | None, build: BuildEnvironment) -> str:
    """Commit status name; ``{team}::{pipeline}`` unless a template is set."""
    if template is None:
        return f"{build.build_team_name}::{build.build_pipeline_name}"
    return (
        template.replace("%BUILD_PIPELINE_NAME%", build.build_pipeline_name)
        .replace("%BUILD_JOB_NAME%", build.build_job_name)
        .replace("%BUILD_TEAM_NAME%", build.build_team_name)
        .replace("%BUILD_PIPELINE_INSTANCE_VARS%", instance_vars_suffix(build.build_pipeline_instance_vars))
    )


def report(
    source: Source,
    params: OutParams,
    build: BuildEnvironment,
    directory: Path,
    host: GitPlatformAdapter,
) -> Tuple[Version, List[Metadata]]:
    """Post ``params.status`` for the version fetched by ``params.resource_name``.

    Returns:
        The reported version and metadata (url, author, title, status).

    Raises:
        MarkerFileError: If the marker file is missing or invalid.
        GitPlatformError: If a host call fails.
    """
    version = read_marker(Path(directory) / params.resource_name)
    mr = host.get_merge_request(source.project_path, version.number)

    name = status_name(params.pipeline_name, build)
    target_url = build_url(build)
    log.info("Setting %s status %r on %s", params.status.value, name, version.sha)
    response = host.create_commit_status(
        mr.source_project_id,
        version.sha,
        state=params.status,
        name=name,
        target_url=target_url,
        coverage=params.coverage,
    )

    metadata = merge_request_metadata(mr)
    metadata.append(Metadata(name="status", value=response.status))
    return version, metadata
