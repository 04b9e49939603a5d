"""Test configuration and fixtures."""

from uuid import uuid4

import logfire
import pytest

from discuss.domain.value import ParentId

# Keep telemetry local during tests
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def parent_id() -> ParentId:
    """A fresh parent entity ID."""
    return ParentId(uuid4())
