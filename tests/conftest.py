import os
import sys

import pytest

# Ensure the project root is on the path so `gemini_mcp` can be imported
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "test_key")
    return "test_key"


@pytest.fixture
def no_api_key(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
