"""Shared fixtures for the site generator tests"""
import pytest
from types import SimpleNamespace
from unittest.mock import AsyncMock

from fastapi.testclient import TestClient

from sitegen_api.core.archive_builder import ArchiveBuilder
from sitegen_api.core.artifact_store import ArtifactStore
from sitegen_api.core.completion_client import CompletionClient
from sitegen_api.core.config import Settings
from sitegen_api.main import create_app


def make_completion(content):
    """Build an object shaped like an OpenAI chat completion response"""
    message = SimpleNamespace(role="assistant", content=content)
    return SimpleNamespace(
        choices=[SimpleNamespace(index=0, message=message)],
        usage=SimpleNamespace(total_tokens=42),
    )


def make_openai(*contents):
    """Fake AsyncOpenAI whose create() returns the given contents in order"""
    create = AsyncMock(side_effect=[make_completion(c) for c in contents])
    return SimpleNamespace(
        chat=SimpleNamespace(completions=SimpleNamespace(create=create)),
        close=AsyncMock(),
    )


@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        openai_api_key="sk-test",
        artifact_dir=tmp_path / "generated-site",
        archive_staging_dir=tmp_path / "staging",
    )


@pytest.fixture
def store(settings):
    return ArtifactStore(settings.artifact_dir)


@pytest.fixture
def builder(settings):
    return ArchiveBuilder(settings.archive_staging_dir)


@pytest.fixture
def fake_openai():
    """Fake SDK client; tests set create.side_effect / return_value as needed"""
    return make_openai()


@pytest.fixture
def app(settings, store, builder, fake_openai):
    return create_app(
        settings,
        completion_client=CompletionClient(fake_openai),
        artifact_store=store,
        archive_builder=builder,
    )


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
