"""Version: one merge request's head commit at a point in time."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO 8601 timestamp from GitLab into an aware datetime.

    Naive timestamps are treated as UTC.

    Raises:
        ValueError: If the value is not a valid ISO 8601 timestamp.
    """
    dt = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


class Version(BaseModel):
    """Merge request head commit tracked between invocations.

    ``committed_date`` keeps the host's exact string so the version
    round-trips through the marker file unchanged.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    iid: str = Field(..., description="Merge request IID within the project")
    committed_date: str = Field(..., description="Commit timestamp of the head commit (ISO 8601)")
    sha: str = Field(..., description="Head commit SHA")

    @field_validator("iid", mode="before")
    @classmethod
    def _iid_to_str(cls, value: object) -> object:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("iid")
    @classmethod
    def _check_iid(cls, value: str) -> str:
        if not value.isdigit():
            raise ValueError(f"merge request iid must be a number, got {value!r}")
        return value

    @field_validator("committed_date")
    @classmethod
    def _check_committed_date(cls, value: str) -> str:
        parse_timestamp(value)
        return value

    @property
    def number(self) -> int:
        """IID as an integer, for API paths."""
        return int(self.iid)

    @property
    def committed_at(self) -> datetime:
        """Commit time as an aware datetime."""
        return parse_timestamp(self.committed_date)

    @property
    def sort_key(self) -> tuple[datetime, int]:
        """Total order: commit time ascending, then IID."""
        return (self.committed_at, self.number)
