"""Resource entry point.

Three commands, each reading one JSON request on stdin and writing one
JSON response on stdout: ``check``, ``in <directory>``, ``out <directory>``.
Usage: mr-resource check | mr-resource in DIR | mr-resource out DIR (or the
``check`` / ``in`` / ``out`` scripts installed for the CI image).
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import IO

from mr_resource.adapters import GitLabAdapter
from mr_resource.config import LoggingConfig, load_build_environment
from mr_resource.logging import ResourceLogging
from mr_resource.models import CheckRequest, InRequest, OutRequest, ResourceResponse, Source
from mr_resource.services.materializer import materialize
from mr_resource.services.reporter import report
from mr_resource.services.resolver import resolve_versions

COMMANDS = ("check", "in", "out")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI: command and, for in/out, the build directory."""
    parser = argparse.ArgumentParser(
        prog="mr-resource",
        description="GitLab merge request resource - check, in or out",
    )
    parser.add_argument("command", choices=COMMANDS, help="Resource command to run")
    parser.add_argument(
        "directory",
        nargs="?",
        type=Path,
        help="Destination (in) or build sources (out) directory",
    )
    args = parser.parse_args(argv)
    if args.command != "check" and args.directory is None:
        parser.error(f"{args.command} requires a directory argument")
    return args


def _adapter(source: Source) -> GitLabAdapter:
    return GitLabAdapter(token=source.private_token, api_url=source.api_url)


def run_check(raw: str) -> str:
    """Resolve new versions; returns the JSON array to print."""
    request = CheckRequest.model_validate_json(raw)
    versions = resolve_versions(request.source, _adapter(request.source), prior=request.version)
    return json.dumps([v.model_dump(mode="json") for v in versions], indent=2)


def run_in(raw: str, directory: Path) -> str:
    """Fetch one version into ``directory``; returns the JSON response."""
    request = InRequest.model_validate_json(raw)
    metadata = materialize(
        request.source,
        request.version,
        directory,
        _adapter(request.source),
        params=request.params,
    )
    return ResourceResponse(version=request.version, metadata=metadata).model_dump_json(indent=2)


def run_out(raw: str, directory: Path) -> str:
    """Report a build status; returns the JSON response."""
    request = OutRequest.model_validate_json(raw)
    build = load_build_environment()
    version, metadata = report(request.source, request.params, build, directory, _adapter(request.source))
    return ResourceResponse(version=version, metadata=metadata).model_dump_json(indent=2)


def main(argv: list[str] | None = None, stdin: IO[str] | None = None, stdout: IO[str] | None = None) -> int:
    """Entry point: run one command; 0 on success, 1 on any error."""
    args = parse_args(argv)
    ResourceLogging(LoggingConfig()).setup()
    log = logging.getLogger(f"mr_resource.{args.command}")

    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    try:
        raw = stdin.read()
        if args.command == "check":
            output = run_check(raw)
        elif args.command == "in":
            output = run_in(raw, args.directory)
        else:
            output = run_out(raw, args.directory)
    except Exception as e:
        log.error("%s failed: %s", args.command, e)
        log.debug("Traceback", exc_info=True)
        return 1

    print(output, file=stdout)
    return 0


def check() -> None:
    """Console script ``check``."""
    sys.exit(main(["check", *sys.argv[1:]]))


def in_() -> None:
    """Console script ``in``."""
    sys.exit(main(["in", *sys.argv[1:]]))


def out() -> None:
    """Console script ``out``."""
    sys.exit(main(["out", *sys.argv[1:]]))


if __name__ == "__main__":
    sys.exit(main())
