"""GitLab REST API (v4) adapter."""

import logging
from datetime import datetime
from typing import Any, Dict, List
from urllib.parse import quote

import requests

from mr_resource.adapters.base import GitPlatformAdapter, GitPlatformError
from mr_resource.models import Commit, CommitStatus, CommitStatusState, MergeRequest, Project

PER_PAGE = 100

log = logging.getLogger("mr_resource.gitlab")


def _project_id(project: str | int) -> str:
    """URL-encode a project path; numeric IDs pass through."""
    return quote(str(project), safe="")


def _merge_request_from_api(data: Dict[str, Any]) -> MergeRequest:
    author = data.get("author") or {}
    return MergeRequest(
        iid=data["iid"],
        title=data.get("title") or "",
        labels=data.get("labels") or [],
        sha=data["sha"],
        author=author.get("name", ""),
        updated_at=data.get("updated_at") or "",
        source_project_id=data["source_project_id"],
        source_branch=data["source_branch"],
        web_url=data.get("web_url") or "",
        draft=bool(data.get("draft") or data.get("work_in_progress")),
    )


class GitLabAdapter(GitPlatformAdapter):
    """GitLab API implementation."""

    def __init__(self, token: str, api_url: str = "https://gitlab.com/api/v4") -> None:
        self._api_url = api_url.rstrip("/")
        self._session = requests.Session()
        self._session.headers["PRIVATE-TOKEN"] = token
        self._session.headers["Accept"] = "application/json"

    def _request(
        self,
        method: str,
        path: str,
        params: Dict[str, Any] | None = None,
        json: Dict[str, Any] | None = None,
    ) -> requests.Response:
        url = f"{self._api_url}{path}" if path.startswith("/") else f"{self._api_url}/{path}"
        log.debug("%s %s params=%s", method, path, params)
        try:
            resp = self._session.request(method, url, params=params, json=json, timeout=30)
        except requests.RequestException as e:
            raise GitPlatformError(f"{method} {path}: {e}") from e
        if resp.status_code >= 400:
            msg = resp.text or resp.reason or str(resp.status_code)
            try:
                body = resp.json()
            except ValueError:
                body = None
            if isinstance(body, dict):
                msg = str(body.get("message") or body.get("error") or msg)
            raise GitPlatformError(f"{resp.status_code}: {msg}")
        return resp

    def _get_all_pages(self, path: str, params: Dict[str, Any]) -> List[Dict[str, Any]]:
        """GET every page of a list endpoint, following ``X-Next-Page``."""
        items: List[Dict[str, Any]] = []
        page: str | None = "1"
        while page:
            resp = self._request("GET", path, params={**params, "per_page": PER_PAGE, "page": page})
            items.extend(resp.json() or [])
            page = (resp.headers.get("X-Next-Page") or "").strip() or None
        return items

    def list_open_merge_requests(
        self,
        project: str | int,
        updated_after: datetime | None = None,
        labels: List[str] | None = None,
        skip_draft: bool = False,
    ) -> List[MergeRequest]:
        params: Dict[str, Any] = {
            "state": "opened",
            "order_by": "updated_at",
            "sort": "asc",
        }
        if updated_after is not None:
            params["updated_after"] = updated_after.isoformat()
        if labels:
            params["labels"] = ",".join(labels)
        if skip_draft:
            params["wip"] = "no"
        data = self._get_all_pages(f"/projects/{_project_id(project)}/merge_requests", params)
        return [_merge_request_from_api(d) for d in data]

    def get_merge_request(self, project: str | int, iid: int) -> MergeRequest:
        resp = self._request("GET", f"/projects/{_project_id(project)}/merge_requests/{iid}")
        return _merge_request_from_api(resp.json())

    def get_merge_request_changes(self, project: str | int, iid: int) -> List[str]:
        resp = self._request("GET", f"/projects/{_project_id(project)}/merge_requests/{iid}/changes")
        changes = (resp.json() or {}).get("changes") or []
        return [c["new_path"] for c in changes if c.get("new_path")]

    def get_commit(self, project: str | int, sha: str) -> Commit:
        resp = self._request("GET", f"/projects/{_project_id(project)}/repository/commits/{sha}")
        return Commit(committed_date=resp.json()["committed_date"])

    def get_project(self, project: str | int) -> Project:
        data = self._request("GET", f"/projects/{_project_id(project)}").json()
        return Project(http_url_to_repo=data["http_url_to_repo"])

    def create_commit_status(
        self,
        project: str | int,
        sha: str,
        state: CommitStatusState,
        name: str,
        target_url: str,
        coverage: float | None = None,
    ) -> CommitStatus:
        payload: Dict[str, Any] = {
            "state": CommitStatusState(state).value,
            "name": name,
            "target_url": target_url,
        }
        if coverage is not None:
            payload["coverage"] = coverage
        resp = self._request("POST", f"/projects/{_project_id(project)}/statuses/{sha}", json=payload)
        return CommitStatus(status=resp.json()["status"])
