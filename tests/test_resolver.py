"""Tests for mr_resource.services.resolver (check)."""

import pytest

from mr_resource.adapters.base import GitPlatformError
from mr_resource.models import Source, Version
from mr_resource.services.resolver import resolve_versions
from tests.fakes import FakeHost, make_mr


def _with_paths(source: Source, paths: list[str]) -> Source:
    return source.model_copy(update={"paths": paths})


def test_no_merge_requests_yields_empty_list(host: FakeHost, source: Source) -> None:
    """No open merge requests is an empty result, not an error."""
    assert resolve_versions(source, host) == []


def test_first_check_returns_all_sorted_by_commit_time(host: FakeHost, source: Source) -> None:
    """Without a prior version every merge request becomes a version, oldest commit first."""
    host.merge_requests = [make_mr(1), make_mr(2), make_mr(3)]
    host.commit_dates = {
        "sha1": "2024-01-03T00:00:00Z",
        "sha2": "2024-01-01T00:00:00Z",
        "sha3": "2024-01-02T00:00:00Z",
    }

    versions = resolve_versions(source, host)

    assert [v.iid for v in versions] == ["2", "3", "1"]
    assert versions[0] == Version(iid="2", committed_date="2024-01-01T00:00:00Z", sha="sha2")


def test_commit_is_read_from_source_project(host: FakeHost, source: Source) -> None:
    """The commit lookup uses the merge request's source project (forks)."""
    host.merge_requests = [make_mr(1, source_project_id=99)]
    host.commit_dates = {"sha1": "2024-01-01T00:00:00Z"}

    resolve_versions(source, host)

    assert ("commit", 99, "sha1") in host.calls


def test_prior_version_excludes_older_and_equal_commits(host: FakeHost, source: Source) -> None:
    """Only commits strictly newer than the prior version are returned."""
    host.merge_requests = [make_mr(1), make_mr(2), make_mr(3)]
    host.commit_dates = {
        "sha1": "2024-01-01T00:00:00Z",
        "sha2": "2024-01-02T00:00:00Z",
        "sha3": "2024-01-03T00:00:00Z",
    }
    prior = Version(iid="2", committed_date="2024-01-02T00:00:00Z", sha="sha2")

    versions = resolve_versions(source, host, prior=prior)

    assert [v.iid for v in versions] == ["3"]
    assert all(v.committed_at > prior.committed_at for v in versions)


def test_prior_version_passed_as_updated_after(host: FakeHost, source: Source) -> None:
    """The host query is narrowed to merge requests updated after the prior commit."""
    prior = Version(iid="2", committed_date="2024-01-02T00:00:00Z", sha="sha2")

    resolve_versions(source, host, prior=prior)

    _, project, updated_after, labels, skip_draft = host.calls[0]
    assert project == "group/project"
    assert updated_after == prior.committed_at
    assert labels is None
    assert skip_draft is False


def test_labels_and_skip_draft_forwarded_to_host(host: FakeHost, source: Source) -> None:
    """Label and draft filters are delegated to the host query."""
    configured = source.model_copy(update={"labels": ["ci", "ready"], "skip_draft": True})

    resolve_versions(configured, host)

    assert host.calls[0][3] == ["ci", "ready"]
    assert host.calls[0][4] is True


def test_skip_draft_drops_drafts_returned_by_host(host: FakeHost, source: Source) -> None:
    """Drafts are excluded even if the host returned them."""
    host.merge_requests = [make_mr(1, draft=True), make_mr(2)]
    host.commit_dates = {"sha1": "2024-01-01T00:00:00Z", "sha2": "2024-01-01T00:00:00Z"}

    versions = resolve_versions(source.model_copy(update={"skip_draft": True}), host)

    assert [v.iid for v in versions] == ["2"]


def test_drafts_kept_by_default(host: FakeHost, source: Source) -> None:
    """Without skip_draft, drafts are versions like any other."""
    host.merge_requests = [make_mr(1, draft=True)]
    host.commit_dates = {"sha1": "2024-01-01T00:00:00Z"}

    assert [v.iid for v in resolve_versions(source, host)] == ["1"]


def test_path_patterns_filter_by_changes(host: FakeHost, source: Source) -> None:
    """A merge request is kept iff a changed path matches a pattern."""
    host.merge_requests = [make_mr(1), make_mr(2), make_mr(3)]
    host.changes = {1: ["README.md"], 2: ["docs/index.md", "src/app.py"], 3: []}
    host.commit_dates = {"sha2": "2024-01-01T00:00:00Z"}

    versions = resolve_versions(_with_paths(source, ["src/*.py", "lib/*"]), host)

    assert [v.iid for v in versions] == ["2"]
    assert ("commit", 42, "sha1") not in host.calls


def test_without_path_patterns_changes_are_not_fetched(host: FakeHost, source: Source) -> None:
    """Change sets are only fetched when patterns are configured."""
    host.merge_requests = [make_mr(1)]
    host.commit_dates = {"sha1": "2024-01-01T00:00:00Z"}

    resolve_versions(source, host)

    assert not [c for c in host.calls if c[0] == "changes"]


def test_change_set_failure_aborts_resolution(host: FakeHost, source: Source) -> None:
    """A failing host call mid-loop fails the whole check."""
    host.merge_requests = [make_mr(1), make_mr(2), make_mr(3)]
    host.changes = {1: ["src/a.py"], 3: ["src/c.py"]}
    host.failing_changes = {2}
    host.commit_dates = {"sha1": "2024-01-01T00:00:00Z", "sha3": "2024-01-03T00:00:00Z"}

    with pytest.raises(GitPlatformError):
        resolve_versions(_with_paths(source, ["src/*"]), host)


def test_equal_commit_times_ordered_by_iid(host: FakeHost, source: Source) -> None:
    """Ties on commit time are broken by IID."""
    host.merge_requests = [make_mr(10), make_mr(9)]
    host.commit_dates = {"sha10": "2024-01-01T00:00:00Z", "sha9": "2024-01-01T00:00:00Z"}

    assert [v.iid for v in resolve_versions(source, host)] == ["9", "10"]


def test_duplicate_merge_requests_yield_one_version(host: FakeHost, source: Source) -> None:
    """A merge request listed twice (e.g. across pages) yields one version."""
    host.merge_requests = [make_mr(1), make_mr(1)]
    host.commit_dates = {"sha1": "2024-01-01T00:00:00Z"}

    assert len(resolve_versions(source, host)) == 1
