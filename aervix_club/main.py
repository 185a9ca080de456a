from __future__ import annotations

import asyncio
import sys
from pathlib import Path

from .adapters.gemini import GeminiInsightProvider
from .config import load_settings
from .core.backend import JSONFileBackend
from .core.storage import ClubStorage
from .data.boards import BOARDS, get_board
from .logging_config import setup_logging


def main(argv: list[str] | None = None) -> int:
    settings = load_settings()
    log = setup_logging(settings.log_level)
    args = sys.argv[1:] if argv is None else argv
    if not args:
        log.error("Usage: python -m aervix_club.main <board_id>")
        return 2
    board = get_board(args[0])
    if board is None:
        log.error(
            "Unknown board %r. Choose one of: %s",
            args[0],
            ", ".join(b.board_id for b in BOARDS),
        )
        return 2
    if not settings.gemini_api_key:
        log.warning("GEMINI_API_KEY is not set; tips will fall back to the default.")

    # read-only: never create the data file just to count projects
    logged = 0
    if Path(settings.data_path).is_file():
        storage = ClubStorage(JSONFileBackend(settings.data_path))
        logged = sum(1 for t in storage.list_all_tasks() if t.board_id == board.board_id)
    provider = GeminiInsightProvider(settings.gemini_api_key, model=settings.gemini_model)

    async def runner() -> str:
        try:
            return await provider.get_board_insights(board.name)
        finally:
            await provider.close()

    tips = asyncio.run(runner())
    print(f"{board.name} ({board.specs.microcontroller}) - {logged} project(s) logged")
    print(tips)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
