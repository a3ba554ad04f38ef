"""Tag helper exception hierarchy."""
from __future__ import annotations

from tagscan.errors import validate_error_type


class TagHelperError(Exception):
    """Base tag helper exception."""

    error_type = "unknown"


class InvalidLookupTextError(TagHelperError, ValueError):
    """Raised when a lookup text is not ``assembly`` or ``type, assembly``."""

    error_type = validate_error_type("invalid-lookup-text")

    def __init__(self, lookup_text: str | None):
        self.lookup_text = lookup_text
        super().__init__(
            f"Invalid tag helper lookup text '{lookup_text}'. "
            "The lookup text format is: \"typeName, assemblyName\" "
            "or \"assemblyName\"."
        )


class InvalidAssemblyNameError(TagHelperError, ValueError):
    """Raised when type discovery is asked for an empty assembly name."""

    error_type = validate_error_type("invalid-assembly-name")


class AssemblyNotFoundError(TagHelperError):
    """Raised when the named assembly (module) cannot be found."""

    error_type = validate_error_type("assembly-not-found")

    def __init__(self, assembly_name: str, message: str | None = None):
        self.assembly_name = assembly_name
        super().__init__(
            message or f"Tag helper assembly not found: {assembly_name}"
        )


class AssemblyLoadError(TagHelperError):
    """Raised when the assembly exists but importing it fails.

    Typical reasons: syntax error, failing import inside the module,
    exception raised at module import time.
    """

    error_type = validate_error_type("assembly-load-failed")

    def __init__(self, assembly_name: str, message: str):
        self.assembly_name = assembly_name
        super().__init__(message)
