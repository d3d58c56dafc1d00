"""
Shared fixtures for the API tests.
"""

from io import BytesIO

import pytest
from fastapi.testclient import TestClient
from PIL import Image


@pytest.fixture
def png_bytes():
    """A small valid PNG upload."""
    buffer = BytesIO()
    Image.new("RGB", (64, 32), color="white").save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def client():
    """Test client for the FastAPI app."""
    from main import app

    return TestClient(app)
