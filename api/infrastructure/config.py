from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    duckdb_path: str
    viacep_url: str
    viacep_timeout: float
    cors_origins: tuple[str, ...]
    log_level: str
    debug: bool


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    origins = os.environ.get("CORS_ORIGINS", "http://localhost:3000")
    return Settings(
        duckdb_path=os.environ.get("DUCKDB_PATH", ":memory:"),
        viacep_url=os.environ.get("VIACEP_URL", "https://viacep.com.br/ws").rstrip("/"),
        viacep_timeout=float(os.environ.get("VIACEP_TIMEOUT", "9.0")),
        cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
        log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        debug=os.environ.get("API_DEBUG", "false").lower() == "true",
    )
