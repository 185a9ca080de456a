"""Tests for the :mod:`aervix_club.adapters.gemini` module."""

import asyncio
import json

import httpx

from aervix_club.adapters.base import FALLBACK_INSIGHT
from aervix_club.adapters.gemini import GeminiInsightProvider


def make_provider(handler) -> GeminiInsightProvider:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return GeminiInsightProvider("KEY", model="test-model", client=client)


def test_request_shape_and_text() -> None:
    """The prompt is posted to the model endpoint and the reply text returned."""
    captured: dict[str, httpx.Request] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["request"] = request
        body = {"candidates": [{"content": {"parts": [{"text": "1. Use "}, {"text": "a fuse."}]}}]}
        return httpx.Response(200, json=body)

    provider = make_provider(handler)
    tips = asyncio.run(provider.get_board_insights("Arduino Uno"))
    assert tips == "1. Use a fuse."

    request = captured["request"]
    assert request.headers["x-goog-api-key"] == "KEY"
    assert request.url.path.endswith("/models/test-model:generateContent")
    prompt = json.loads(request.content)["contents"][0]["parts"][0]["text"]
    assert "Arduino Uno" in prompt


def test_http_error_falls_back() -> None:
    provider = make_provider(lambda request: httpx.Response(500, json={"error": "boom"}))
    assert asyncio.run(provider.get_board_insights("Arduino Nano")) == FALLBACK_INSIGHT


def test_transport_error_falls_back() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("offline", request=request)

    provider = make_provider(handler)
    assert asyncio.run(provider.get_board_insights("Arduino Nano")) == FALLBACK_INSIGHT


def test_unexpected_shape_falls_back() -> None:
    provider = make_provider(lambda request: httpx.Response(200, json={"candidates": []}))
    assert asyncio.run(provider.get_board_insights("Arduino Mega 2560")) == FALLBACK_INSIGHT

    provider = make_provider(lambda request: httpx.Response(200, text="not json"))
    assert asyncio.run(provider.get_board_insights("Arduino Mega 2560")) == FALLBACK_INSIGHT

    # parts that are not objects
    body = {"candidates": [{"content": {"parts": ["tip"]}}]}
    provider = make_provider(lambda request: httpx.Response(200, json=body))
    assert asyncio.run(provider.get_board_insights("Arduino Uno")) == FALLBACK_INSIGHT

    body = {"candidates": ["not an object"]}
    provider = make_provider(lambda request: httpx.Response(200, json=body))
    assert asyncio.run(provider.get_board_insights("Arduino Uno")) == FALLBACK_INSIGHT
