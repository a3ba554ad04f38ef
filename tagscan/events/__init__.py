"""Event dataclasses + any-subscriber bridge.

Per-event subscriptions go through `tagscan.eventbus`. This module exposes
`on(handler)` / `subscribe(handler)` where handler(name, payload) receives
every event, and wires the metrics collector as a permanent subscriber.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict
from time import time
from typing import Any, Callable, Dict, List, Protocol

from tagscan import metrics as _metrics
from tagscan.errors import validate_error_type
from tagscan.eventbus import emit as _emit_bus

EventHandler = Callable[[str, Dict[str, Any]], None]


class SupportsEvent(Protocol):  # pragma: no cover
    def to_event(self) -> Dict[str, Any]:  # noqa: D401
        ...


@dataclass(slots=True)
class BaseEvent:
    def to_event(self) -> Dict[str, Any]:  # noqa: D401
        data = asdict(self)
        data["ts"] = data.get("ts") or time()
        return data


@dataclass(slots=True)
class TagHelperAssemblyScanned(BaseEvent):
    assembly_name: str
    module_count: int
    type_count: int


@dataclass(slots=True)
class TagHelperDescriptorsResolved(BaseEvent):
    assembly_name: str
    type_name: str | None  # None when no type filter was given
    descriptor_count: int
    latency_ms: float


@dataclass(slots=True)
class TagHelperLookupRejected(BaseEvent):
    lookup_text: str | None
    error_type: str

    def __post_init__(self) -> None:
        validate_error_type(self.error_type)


_ANY_SUBS: List[EventHandler] = []


def _metrics_collector(
    name: str, payload: Dict[str, Any]
) -> None:  # noqa: D401
    if name == "TagHelperDescriptorsResolved":
        _metrics.record_resolution(
            payload.get("assembly_name", "unknown"),
            payload.get("descriptor_count", 0),
            payload.get("latency_ms", 0.0),
        )
    elif name == "TagHelperLookupRejected":
        _metrics.inc_lookup_rejected(payload.get("error_type", "unknown"))
    elif name == "TagHelperAssemblyScanned":
        _metrics.inc(
            "tag_helper_types_discovered_total",
            {"assembly": payload.get("assembly_name", "unknown")},
            value=payload.get("type_count", 0),
        )


_ANY_SUBS.append(_metrics_collector)


def emit(ev: BaseEvent | SupportsEvent) -> None:
    name = ev.__class__.__name__
    payload = ev.to_event()
    _emit_bus(name, payload)
    for h in list(_ANY_SUBS):  # copy for isolation
        try:
            h(name, dict(payload))
        except Exception:  # noqa: BLE001
            _metrics.inc("handler_exceptions_total", {"event": name})


def on(handler: EventHandler) -> None:
    _ANY_SUBS.append(handler)


def subscribe(handler: EventHandler):
    on(handler)

    def _unsub() -> None:  # noqa: D401
        try:
            _ANY_SUBS.remove(handler)
        except ValueError:
            pass
    return _unsub


def reset_listeners_for_tests() -> None:  # pragma: no cover
    _ANY_SUBS.clear()
    _ANY_SUBS.append(_metrics_collector)


__all__ = [
    "emit",
    "on",
    "subscribe",
    "BaseEvent",
    "TagHelperAssemblyScanned",
    "TagHelperDescriptorsResolved",
    "TagHelperLookupRejected",
    "reset_listeners_for_tests",
]
