"""Shared fixtures: an in-memory GitLab host and a source configuration."""

import pytest

from mr_resource.models import Source
from tests.fakes import FakeHost


@pytest.fixture
def host() -> FakeHost:
    return FakeHost()


@pytest.fixture
def source() -> Source:
    return Source(uri="https://gitlab.example.com/group/project.git", private_token="secret-token")
