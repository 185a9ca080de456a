"""Base interface for board-insight providers."""

from __future__ import annotations

from abc import ABC, abstractmethod

FALLBACK_INSIGHT = "Ensure proper power supply and double-check your pin connections."


class InsightProvider(ABC):
    """Abstract source of short tips for working with a board."""

    @abstractmethod
    async def get_board_insights(self, board_name: str) -> str:
        """Return free-form tips for ``board_name``.

        Implementations return :data:`FALLBACK_INSIGHT` instead of raising.
        """
