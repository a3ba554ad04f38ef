"""Discovery schema: how helper types are found and named."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class DiscoveryConfig(BaseModel):
    # Stripped from class names when deriving default tag names.
    type_suffix: str = Field("TagHelper", pattern=r"^[A-Za-z0-9_]*$")
    scan_submodules: bool = True

    model_config = ConfigDict(extra="forbid")
