from __future__ import annotations

from collections import Counter
from typing import Any

from ..scoring.cache import get_cache_stats


def compute_analytics(events: list[dict[str, Any]]) -> dict[str, Any]:
    searches = [e for e in events if e["type"] == "search"]
    total = len(searches)

    # Average response time
    times = [s["response_time_ms"] for s in searches if "response_time_ms" in s]
    avg_time = round(sum(times) / len(times), 1) if times else 0.0

    # Strategy usage
    strategy_usage = dict(Counter(s.get("strategy", "unknown") for s in searches))

    # Top interests
    interest_counter: Counter[str] = Counter()
    for s in searches:
        for i in s.get("interests", []) or []:
            interest_counter[i] += 1
    top_interests = [{"name": n, "count": c} for n, c in interest_counter.most_common(10)]

    # Reason frequency across returned recommendations
    reason_counter: Counter[str] = Counter()
    for s in searches:
        for r in s.get("reasons", []) or []:
            reason_counter[r] += 1

    alias_searches = sum(1 for s in searches if s.get("expand_aliases"))
    empty_results = sum(1 for s in searches if not s.get("results_returned"))

    return {
        "total_searches": total,
        "avg_response_time_ms": avg_time,
        "strategy_usage": strategy_usage,
        "top_interests": top_interests,
        "reason_frequency": dict(reason_counter.most_common()),
        "alias_expansion_rate": round(alias_searches / total * 100, 1) if total else 0.0,
        "empty_result_searches": empty_results,
        "cache_stats": get_cache_stats(),
    }
