"""Metadata entry emitted alongside a version."""

from pydantic import BaseModel


class Metadata(BaseModel):
    """Name/value pair shown in the build log."""

    name: str
    value: str
