"""Central error taxonomy enforcement.

Every exception raised by tagscan carries an ``error_type`` code and every
event that reports a failure repeats it. Codes outside this set are a bug.
"""
from __future__ import annotations

_ALLOWED_ERROR_TYPES = {
    # lookup
    "invalid-lookup-text",
    # type discovery
    "invalid-assembly-name",
    "assembly-not-found",
    "assembly-load-failed",
    # config
    "config-invalid",
    # infra
    "event-handler-error",
}


def validate_error_type(code: str) -> str:
    assert (
        code in _ALLOWED_ERROR_TYPES
    ), f"Unknown error_type '{code}' (not in taxonomy)"
    return code


def known_error_types() -> frozenset[str]:
    return frozenset(_ALLOWED_ERROR_TYPES)


__all__ = ["validate_error_type", "known_error_types"]
