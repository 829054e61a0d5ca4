"""Internal helpers: run git commands, GitRunnerError."""

import logging
import subprocess
from pathlib import Path
from typing import Iterable


class GitRunnerError(Exception):
    """Raised when a git command fails."""

    pass


def _redact(text: str, secrets: Iterable[str]) -> str:
    for secret in secrets:
        if secret:
            text = text.replace(secret, "*****")
    return text


def _run_git(
    args: list[str],
    cwd: Path,
    log: logging.Logger | None = None,
    secrets: Iterable[str] = (),
) -> None:
    """Run git command; raise GitRunnerError on non-zero exit.

    Occurrences of ``secrets`` are masked in logged and raised messages.
    """
    cmd = ["git"] + args
    secrets = list(secrets)
    shown = _redact(" ".join(args), secrets)
    try:
        subprocess.run(cmd, cwd=cwd, check=True, capture_output=True, text=True)
    except subprocess.CalledProcessError as e:
        err = _redact((e.stderr or e.stdout or "").strip(), secrets)
        if log:
            log.warning("git %s failed: %s", shown, err)
        raise GitRunnerError(f"git {shown}: {err}") from e
    except FileNotFoundError as e:
        raise GitRunnerError("git not found") from e
