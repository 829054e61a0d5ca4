"""Marker file handing the fetched version from ``in`` to ``out``."""

import logging
from pathlib import Path

from pydantic import ValidationError

from mr_resource.models.version import Version

MARKER_FILENAME = ".merge-request.json"

log = logging.getLogger("mr_resource.marker")


class MarkerFileError(Exception):
    """Raised when the marker file cannot be written, read or parsed."""

    pass


def marker_path(directory: Path) -> Path:
    """Path of the marker file inside a get step's directory."""
    return Path(directory) / MARKER_FILENAME


def write_marker(directory: Path, version: Version) -> Path:
    """Write ``version`` as pretty JSON to the marker file."""
    path = marker_path(directory)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(version.model_dump_json(indent=2), encoding="utf-8")
    except OSError as e:
        raise MarkerFileError(f"failed to create `{MARKER_FILENAME}`: {e}") from e
    log.debug("Wrote %s for merge request !%s", path, version.iid)
    return path


def read_marker(directory: Path) -> Version:
    """Load the version written by ``in``."""
    path = marker_path(directory)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise MarkerFileError(f"failed to read `{MARKER_FILENAME}` from {directory}: {e}") from e
    try:
        return Version.model_validate_json(raw)
    except ValidationError as e:
        raise MarkerFileError(f"failed to parse `{MARKER_FILENAME}` from {directory}: {e}") from e
