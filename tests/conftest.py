"""Pytest fixtures shared by the API tests."""

from datetime import datetime, timezone
from unittest.mock import patch

import pytest
from django.contrib.auth.models import User
from rest_framework.test import APIClient

from notes.models import Note


@pytest.fixture
def user(db) -> User:
    return User.objects.create_user(username="alice", email="alice@example.com", password="s3cret-pass!")


@pytest.fixture
def other_user(db) -> User:
    return User.objects.create_user(username="bob", email="bob@example.com", password="s3cret-pass!")


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def auth_client(user) -> APIClient:
    client = APIClient()
    client.force_authenticate(user=user)
    return client


@pytest.fixture
def other_client(other_user) -> APIClient:
    client = APIClient()
    client.force_authenticate(user=other_user)
    return client


@pytest.fixture
def frozen_now():
    """Pin the application clock to 2024-01-10 09:00 UTC."""
    moment = datetime(2024, 1, 10, 9, 0, tzinfo=timezone.utc)
    with patch("core.clock.now", return_value=moment):
        yield moment


@pytest.fixture
def make_note(user):
    def _make(title, content="", owner=None):
        return Note.objects.create(user=owner or user, title=title, content=content)

    return _make
