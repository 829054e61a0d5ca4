"""Process configuration from the environment.

The ``source`` and ``params`` blocks arrive on stdin (see
``mr_resource.models``); everything the CI system passes through the
environment is loaded here.
"""

from typing import Any, Dict

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingConfig(BaseSettings):
    """Logging settings."""

    model_config = SettingsConfigDict(env_prefix="LOGGING_", extra="ignore")

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format",
    )


class BuildEnvironment(BaseSettings):
    """Build coordinates exposed to put steps (Concourse build metadata)."""

    model_config = SettingsConfigDict(extra="ignore", env_ignore_empty=True)

    atc_external_url: str = Field(..., description="External URL of the CI web UI")
    build_team_name: str = Field(..., description="Team of the running build")
    build_pipeline_name: str = Field(..., description="Pipeline of the running build")
    build_job_name: str = Field(..., description="Job of the running build")
    build_name: str = Field(..., description="Build number/name within the job")
    # JSON object, e.g. {"branch": "main"} for instanced pipelines
    build_pipeline_instance_vars: Dict[str, Any] | None = Field(
        default=None,
        description="Pipeline instance variables (nested JSON object)",
    )


def load_build_environment() -> BuildEnvironment:
    """Load build coordinates from the process environment.

    Raises:
        pydantic.ValidationError: If a required variable is missing.
    """
    return BuildEnvironment()
