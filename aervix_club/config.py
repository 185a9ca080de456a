import os
from dataclasses import dataclass

@dataclass(frozen=True)
class Settings:
    data_path: str = "aervix_data.json"
    gemini_api_key: str = ""
    gemini_model: str = "gemini-3-flash-preview"
    # name understood by logging, e.g. "DEBUG"
    log_level: str = "INFO"

def load_settings() -> Settings:
    return Settings(
        data_path=os.getenv("AERVIX_DATA_PATH", "").strip() or "aervix_data.json",
        gemini_api_key=os.getenv("GEMINI_API_KEY", "").strip(),
        gemini_model=os.getenv("GEMINI_MODEL", "").strip() or "gemini-3-flash-preview",
        log_level=os.getenv("AERVIX_LOG_LEVEL", "").strip().upper() or "INFO",
    )
