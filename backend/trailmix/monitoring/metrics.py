"""In-memory request metrics for the /metrics endpoint."""
import time
from collections.abc import MutableMapping
from threading import Lock

_start_time = time.monotonic()
_counts: MutableMapping[str, int] = {}
_nearby_results: MutableMapping[str, int] = {}
_lock = Lock()


def _status_bucket(status_code: int) -> str:
    if 200 <= status_code < 300:
        return "2xx"
    if 400 <= status_code < 500:
        return "4xx"
    if status_code >= 500:
        return "5xx"
    return "other"


def record_request(status_code: int) -> None:
    bucket = _status_bucket(status_code)
    with _lock:
        _counts[bucket] = _counts.get(bucket, 0) + 1


def record_nearby_query(result_count: int) -> None:
    """Count nearby searches and how many of them came back empty."""
    with _lock:
        _nearby_results["queries"] = _nearby_results.get("queries", 0) + 1
        if result_count == 0:
            _nearby_results["empty"] = _nearby_results.get("empty", 0) + 1


def reset_metrics() -> None:
    with _lock:
        _counts.clear()
        _nearby_results.clear()


def get_metrics() -> dict:
    with _lock:
        counts = dict(_counts)
        nearby = dict(_nearby_results)
    uptime_seconds = time.monotonic() - _start_time
    return {
        "requests_total": sum(counts.values()),
        "requests_2xx": counts.get("2xx", 0),
        "requests_4xx": counts.get("4xx", 0),
        "requests_5xx": counts.get("5xx", 0),
        "nearby_queries": nearby.get("queries", 0),
        "nearby_empty_results": nearby.get("empty", 0),
        "uptime_seconds": round(uptime_seconds, 1),
    }
