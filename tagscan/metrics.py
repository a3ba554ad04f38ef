"""Minimal in-memory metrics collector.

Purpose:
    - Counters and simple latency samples for tag helper discovery.
    - Zero external deps; can be swapped by an exporter later.

Core API (intentionally tiny):
    inc(name, labels=None, value=1)
    observe(name, value, labels=None)
    snapshot() -> dict (copy for safe reading)

Thread-safety: coarse RLock; overhead negligible for low event volume.

Metric names (documented for discoverability):
    - events_emitted_total{event}
    - handler_exceptions_total{event}
    - config_env_override_total{path}
    - tag_helper_resolve_total{assembly}
    - tag_helper_descriptors_total{assembly}
    - tag_helper_resolve_latency_ms{assembly}
    - tag_helper_lookup_rejected_total{error_type}
    - tag_helper_types_discovered_total{assembly}
"""
from __future__ import annotations

from threading import RLock
from time import time
from typing import Dict, Tuple, Any

_COUNTERS: Dict[Tuple[str, Tuple[Tuple[str, str], ...]], float] = {}
_HIST: Dict[Tuple[str, Tuple[Tuple[str, str], ...]], list] = {}
_LOCK = RLock()


def _norm_labels(labels: dict[str, Any] | None) -> Tuple[Tuple[str, str], ...]:
    if not labels:
        return tuple()
    return tuple(sorted((str(k), str(v)) for k, v in labels.items()))


def _label_str(labels: Tuple[Tuple[str, str], ...]) -> str:
    if not labels:
        return ""
    return "{" + ",".join(f"{k}={v}" for k, v in labels) + "}"


def inc(
    name: str,
    labels: dict[str, Any] | None = None,
    value: float = 1.0,
) -> None:
    key = (name, _norm_labels(labels))
    with _LOCK:
        _COUNTERS[key] = _COUNTERS.get(key, 0.0) + value


def observe(
    name: str,
    value: float,
    labels: dict[str, Any] | None = None,
) -> None:
    key = (name, _norm_labels(labels))
    with _LOCK:
        _HIST.setdefault(key, []).append(value)


def snapshot() -> dict[str, Any]:
    with _LOCK:
        counters: dict[str, float] = {}
        for (name, labels), v in _COUNTERS.items():
            counters[name + _label_str(labels)] = v
        hist = {}
        for (name, labels), vals in _HIST.items():
            if not vals:
                continue
            hist[name + _label_str(labels)] = {
                "count": len(vals),
                "min": min(vals),
                "max": max(vals),
                "p50": sorted(vals)[len(vals) // 2],
                "last": vals[-1],
            }
        return {
            "ts": time(),
            "counters": counters,
            "histograms": hist,
        }


def reset_for_tests() -> None:  # pragma: no cover
    with _LOCK:
        _COUNTERS.clear()
        _HIST.clear()


__all__ = [
    "inc",
    "observe",
    "snapshot",
    "reset_for_tests",
]


# ------------------- Helper wrappers -------------------

def inc_lookup_rejected(error_type: str) -> None:
    """Increment rejected lookup counter (one per invalid lookup text)."""
    if error_type:
        inc("tag_helper_lookup_rejected_total", {"error_type": error_type})


def record_resolution(
    assembly: str, descriptor_count: int, latency_ms: float
) -> None:
    """Record a completed resolve call for ``assembly``."""
    labels = {"assembly": assembly}
    inc("tag_helper_resolve_total", labels)
    if descriptor_count:
        inc("tag_helper_descriptors_total", labels, value=descriptor_count)
    observe("tag_helper_resolve_latency_ms", latency_ms, labels)


__all__ += ["inc_lookup_rejected", "record_resolution"]
