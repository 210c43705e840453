"""Shared fixtures for the Reddit listing client tests."""

import json
from pathlib import Path
from typing import Any, Callable, Dict

import httpx
import pytest

DATA_DIR = Path(__file__).parent / "data"


def load_json(name: str) -> Dict[str, Any]:
    with open(DATA_DIR / name, "r", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def listing_payload() -> Dict[str, Any]:
    """Three-post r/Python listing: a stickied self post, an image and a crosspost."""
    return load_json("subreddit_python.json")


@pytest.fixture
def mock_http_client() -> Callable[..., httpx.AsyncClient]:
    """
    Factory for an ``httpx.AsyncClient`` whose requests are answered by ``handler``.

    The handler receives the ``httpx.Request`` and returns an ``httpx.Response``
    (sync or async), or raises an httpx exception to simulate network failures.
    """
    def factory(handler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return factory
