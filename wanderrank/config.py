from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent / ".env")


def _as_bool(val: str | None, default: bool = False) -> bool:
    if val is None:
        return default
    return val.lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class EngineConfig:
    cache_enabled: bool = _as_bool(os.getenv("WANDERRANK_CACHE_ENABLED"), True)
    cache_ttl: float = float(os.getenv("WANDERRANK_CACHE_TTL", "300"))
    cache_max_entries: int = int(os.getenv("WANDERRANK_CACHE_MAX_ENTRIES", "512"))


DEFAULT_ENGINE_CONFIG = EngineConfig()
