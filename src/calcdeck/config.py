import logging
import os
from functools import lru_cache
from pathlib import Path

BUNDLED_TABLES_DIR = Path(__file__).parent / "tables" / "data"

DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]


class Settings:
    def __init__(self) -> None:
        tables_dir = os.environ.get("CALCDECK_TABLES_DIR")
        self.tables_dir = Path(tables_dir) if tables_dir else BUNDLED_TABLES_DIR

        origins = os.environ.get("CALCDECK_CORS_ORIGINS")
        self.cors_origins = (
            [o.strip() for o in origins.split(",") if o.strip()]
            if origins
            else list(DEFAULT_CORS_ORIGINS)
        )

        level_name = os.environ.get("CALCDECK_LOG_LEVEL", "INFO").upper()
        self.log_level = logging.getLevelName(level_name)
        if not isinstance(self.log_level, int):
            self.log_level = logging.INFO


@lru_cache
def get_settings() -> Settings:
    return Settings()
