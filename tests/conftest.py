"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from showcase.domain.model import Profile, Work
from showcase.domain.value import FileType, ProfileId, WorkCategory, WorkId
from showcase.interface.api.app import create_app
from tests.di import build_test_container


def make_profile(
    username: str = "alice",
    email: str | None = None,
    avatar_url: str | None = None,
) -> Profile:
    """Build a profile for tests."""
    return Profile(
        id=ProfileId(uuid4()),
        username=username,
        email=email or f"{username}@example.com",
        avatar_url=avatar_url,
    )


def make_work(
    author_id: ProfileId | None = None,
    title: str = "Neural Style Transfer",
    description: str = "Paintings in the style of a photo",
    category: WorkCategory = WorkCategory.AI_ART,
    file_type: FileType = FileType.IMAGE,
    file_url: str = "https://storage.test/storage/v1/object/public/works/uploads/1-a.png",
    vote_count: int = 0,
    age_minutes: int = 0,
    author_username: str | None = None,
) -> Work:
    """Build a work for tests.

    age_minutes pushes created_at into the past, so larger values are older.
    """
    created_at = datetime.now(timezone.utc) - timedelta(minutes=age_minutes)
    return Work(
        id=WorkId(uuid4()),
        title=title,
        description=description,
        author_id=author_id or ProfileId(uuid4()),
        category=category,
        file_type=file_type,
        file_url=file_url,
        vote_count=vote_count,
        created_at=created_at,
        updated_at=created_at,
        author_username=author_username,
    )


def work_fields(**overrides) -> dict:
    """Valid create-work payload."""
    fields = {
        "title": "Robot Arm",
        "description": "A six-axis arm that sorts lego",
        "detailed_description": None,
        "category": "robotics",
        "file_type": "video",
        "file_url": "https://storage.test/storage/v1/object/public/works/uploads/1-b.mp4",
    }
    fields.update(overrides)
    return fields


@pytest.fixture
def container():
    """Mocked container shared by every request of one test client."""
    return build_test_container()


@pytest.fixture
def client(container):
    """Test client over an app wired to in-memory persistence and storage."""
    with TestClient(create_app(container)) as test_client:
        yield test_client


def login(client: TestClient, email: str, username: str | None = None) -> dict:
    """Log in through the API; the session cookie stays on the client."""
    body = {"email": email}
    if username:
        body["username"] = username
    response = client.post("/auth/login", json=body)
    assert response.status_code == 200, response.text
    return response.json()["profile"]
