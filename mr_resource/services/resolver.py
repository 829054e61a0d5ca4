"""Version resolution for ``check``: open merge requests -> ordered versions.

Steps:
1. List open merge requests of the project, oldest update first. The host
   filters by labels, drafts and (with a prior version) update time.
2. Drop drafts the host still returned when ``skip_draft`` is set.
3. With path patterns, keep only merge requests touching a matching path.
4. Fetch each survivor's head commit for its authoritative commit time;
   ``updated_at`` also moves on label or title edits.
5. Keep only commits strictly newer than the prior version, then sort by
   commit time and IID.

Any host error aborts the whole resolution; no partial list is returned.
"""

import logging
from typing import Dict, List

from mr_resource.adapters.base import GitPlatformAdapter
from mr_resource.models import MergeRequest, Source, Version
from mr_resource.services.path_filter import matches_any

log = logging.getLogger("mr_resource.check")


def _touches_paths(host: GitPlatformAdapter, source: Source, mr: MergeRequest) -> bool:
    if not source.paths:
        return True
    changed = host.get_merge_request_changes(source.project_path, mr.iid)
    if matches_any(changed, source.paths):
        return True
    log.debug("Skipping !%s: no changed path matches %s", mr.iid, source.paths)
    return False


def _version_of(host: GitPlatformAdapter, mr: MergeRequest) -> Version:
    commit = host.get_commit(mr.source_project_id, mr.sha)
    return Version(iid=str(mr.iid), committed_date=commit.committed_date, sha=mr.sha)


def resolve_versions(
    source: Source,
    host: GitPlatformAdapter,
    prior: Version | None = None,
) -> List[Version]:
    """Return versions newer than ``prior``, ascending by commit time.

    Args:
        source: Validated source configuration.
        host: Host query interface.
        prior: Last version seen by the CI system, if any.

    Returns:
        One version per qualifying merge request; empty if none qualify.
    """
    merge_requests = host.list_open_merge_requests(
        source.project_path,
        updated_after=prior.committed_at if prior else None,
        labels=source.labels,
        skip_draft=source.skip_draft,
    )
    log.info("Found %d open merge request(s) in %s", len(merge_requests), source.project_path)

    by_iid: Dict[int, Version] = {}
    for mr in merge_requests:
        if source.skip_draft and mr.draft:
            continue
        if not _touches_paths(host, source, mr):
            continue
        version = _version_of(host, mr)
        if prior is not None and version.committed_at <= prior.committed_at:
            continue
        by_iid[mr.iid] = version

    versions = sorted(by_iid.values(), key=lambda v: v.sort_key)
    log.info("Resolved %d new version(s)", len(versions))
    return versions
