"""Shared fixtures: in-memory stores and a fake rendering service."""

import pytest

from mockups.engine import PreviewPipeline
from mockups.services import CompositionService, StatusPoller
from mockups.stores import InMemoryArtworkRepository, InMemoryIntegrationLog

from tests.helpers import FakeRenderClient


@pytest.fixture
def repository():
    return InMemoryArtworkRepository()


@pytest.fixture
def integration_log():
    return InMemoryIntegrationLog()


@pytest.fixture
def render_client():
    return FakeRenderClient()


@pytest.fixture
def composition(render_client, integration_log):
    return CompositionService(render_client, integration_log, submit_retries=0)


@pytest.fixture
def pipeline(repository, integration_log, composition, render_client):
    return PreviewPipeline(
        repository=repository,
        integration_log=integration_log,
        composition=composition,
        status_poller=StatusPoller(render_client),
    )
