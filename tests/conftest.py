"""Shared fixtures for archivist tests."""

from datetime import datetime, timezone

import pytest

from archivist.core.model import ContentDates

CREATED = datetime(2019, 4, 13, 20, 22, 1, tzinfo=timezone.utc)


@pytest.fixture
def dates() -> ContentDates:
    return ContentDates(created=CREATED, last_modified=CREATED)
