import pytest
from fastapi.testclient import TestClient

from audio_notes.dependencies import get_config, get_llm_factory
from audio_notes.main import create_app
from tests.helpers import StubLLMService, make_config


@pytest.fixture
def stub_llm():
    return StubLLMService(['{"transcript": "hello there", "summary": "- greeting"}'])


@pytest.fixture
def app_config():
    return make_config()


@pytest.fixture
def client(stub_llm, app_config):
    app = create_app()
    app.dependency_overrides[get_config] = lambda: app_config
    app.dependency_overrides[get_llm_factory] = lambda: (lambda _config: stub_llm)
    with TestClient(app) as test_client:
        yield test_client
