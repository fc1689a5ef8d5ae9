import base64

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_feedback_service
from main import app
from services.openai_service import ProfileFeedbackService
from tests.fakes import make_openai_mock, make_png


@pytest.fixture
def png_bytes() -> bytes:
    return make_png()


@pytest.fixture
def png_data_url(png_bytes) -> str:
    return "data:image/png;base64," + base64.b64encode(png_bytes).decode()


@pytest.fixture
def openai_mock():
    return make_openai_mock()


@pytest.fixture
def client(openai_mock):
    service = ProfileFeedbackService(api_key="test-key", client=openai_mock)
    app.dependency_overrides[get_feedback_service] = lambda: service
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
