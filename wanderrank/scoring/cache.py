"""
Memo cache for ranked candidate lists.

Entries expire after a TTL and the oldest entry is evicted once the cache is
full.  All access goes through one lock so request threads can share it.
"""
from __future__ import annotations

import hashlib
import json
import threading
import time
from collections import OrderedDict
from typing import Any

from ..config import DEFAULT_ENGINE_CONFIG

_cache: OrderedDict[str, tuple[float, Any]] = OrderedDict()
_lock = threading.Lock()
_hits: int = 0
_misses: int = 0


def make_key(key_dict: dict) -> str:
    normalized = json.dumps(key_dict, sort_keys=True, default=str)
    return hashlib.sha256(normalized.encode()).hexdigest()[:16]


def cache_get(key_dict: dict, ttl: float = DEFAULT_ENGINE_CONFIG.cache_ttl) -> Any | None:
    global _hits, _misses
    key = make_key(key_dict)
    with _lock:
        entry = _cache.get(key)
        if entry and time.time() - entry[0] < ttl:
            _hits += 1
            return entry[1]
        if entry:
            del _cache[key]
        _misses += 1
        return None


def cache_set(
    key_dict: dict,
    value: Any,
    max_entries: int = DEFAULT_ENGINE_CONFIG.cache_max_entries,
) -> None:
    key = make_key(key_dict)
    with _lock:
        _cache.pop(key, None)
        _cache[key] = (time.time(), value)
        while len(_cache) > max(max_entries, 1):
            _cache.popitem(last=False)


def get_cache_stats() -> dict:
    with _lock:
        total = _hits + _misses
        return {
            "size": len(_cache),
            "hits": _hits,
            "misses": _misses,
            "hit_rate": round(_hits / total * 100, 1) if total > 0 else 0.0,
        }


def clear_cache() -> None:
    global _hits, _misses
    with _lock:
        _cache.clear()
        _hits = 0
        _misses = 0
