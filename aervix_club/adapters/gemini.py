"""Gemini adapter implementing :class:`~aervix_club.adapters.base.InsightProvider`.

The adapter only covers a single text-generation call. It uses :mod:`httpx`
to talk to the Generative Language REST API directly, which keeps the
implementation dependency light while remaining fully asynchronous.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from .base import FALLBACK_INSIGHT, InsightProvider

log = logging.getLogger("aervix.insights")


def build_prompt(board_name: str) -> str:
    return (
        f"Provide 3 unique pro-tips for working with {board_name} in electronics "
        "projects for an engineering student. Keep it concise."
    )


class GeminiInsightProvider(InsightProvider):
    """Provider that asks a Gemini model for board tips."""

    api_base = "https://generativelanguage.googleapis.com/v1beta"

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-3-flash-preview",
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Store the ``api_key``, ``model`` name and optional HTTP ``client``."""
        self.api_key = api_key
        self.model = model
        self.client = client or httpx.AsyncClient(timeout=30.0)

    # ------------------------------------------------------------------
    async def get_board_insights(self, board_name: str) -> str:
        """Ask the model for tips on ``board_name``.

        Any transport error, non-success status or unexpected response shape
        is logged and answered with :data:`FALLBACK_INSIGHT`.
        """
        url = f"{self.api_base}/models/{self.model}:generateContent"
        headers = {"x-goog-api-key": self.api_key}
        payload = {"contents": [{"parts": [{"text": build_prompt(board_name)}]}]}
        try:
            response = await self.client.post(url, json=payload, headers=headers)
            response.raise_for_status()
            data: dict[str, Any] = response.json()
            parts = data["candidates"][0]["content"]["parts"]
            text = "".join(
                p.get("text", "") for p in parts if isinstance(p, dict)
            ).strip()
        except (httpx.HTTPError, ValueError, KeyError, IndexError, TypeError, AttributeError):
            log.exception("Gemini request for %s failed", board_name)
            return FALLBACK_INSIGHT
        return text or FALLBACK_INSIGHT

    async def close(self) -> None:
        """Close the underlying :class:`httpx.AsyncClient`."""
        await self.client.aclose()
