"""Clone a merge request's source branch and pin it to one commit."""

import logging
from pathlib import Path
from urllib.parse import quote, urlsplit, urlunsplit

from mr_resource.services.git._run import _run_git

CLONE_USERNAME = "oauth2"


def authenticated_url(url: str, token: str, username: str = CLONE_USERNAME) -> str:
    """Embed token credentials into an HTTP(S) clone URL.

    Non-HTTP URLs (e.g. SSH) are returned unchanged.
    """
    parts = urlsplit(url)
    if parts.scheme not in ("http", "https") or not token:
        return url
    host = parts.hostname or ""
    if parts.port:
        host = f"{host}:{parts.port}"
    netloc = f"{quote(username, safe='')}:{quote(token, safe='')}@{host}"
    return urlunsplit((parts.scheme, netloc, parts.path, parts.query, parts.fragment))


def clone_at_revision(
    url: str,
    branch: str,
    sha: str,
    directory: Path,
    token: str,
    log: logging.Logger | None = None,
) -> None:
    """Clone ``branch`` of ``url`` into ``directory`` and hard-reset to ``sha``.

    Raises:
        GitRunnerError: If the clone fails or ``sha`` cannot be resolved.
    """
    directory = Path(directory).resolve()
    directory.mkdir(parents=True, exist_ok=True)
    secrets = [token, quote(token, safe="")]
    remote = authenticated_url(url, token)
    _run_git(
        ["clone", "--branch", branch, "--", remote, str(directory)],
        cwd=directory,
        log=log,
        secrets=secrets,
    )
    _run_git(["reset", "--hard", sha], cwd=directory, log=log)
    if log:
        log.info("Checked out %s (%s)", branch, sha)
