"""Descriptor value types produced by the descriptor factory."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class ContentBehavior(str, Enum):
    """How a tag helper treats the element content it is applied to."""

    NONE = "none"
    APPEND = "append"
    MODIFY = "modify"
    PREPEND = "prepend"
    REPLACE = "replace"


@dataclass(frozen=True)
class TagHelperAttributeDescriptor:
    name: str  # HTML attribute name
    property_name: str
    type_name: str


@dataclass(frozen=True)
class TagHelperDescriptor:
    tag_name: str
    type_name: str
    assembly_name: str
    attributes: Tuple[TagHelperAttributeDescriptor, ...] = ()
    content_behavior: ContentBehavior = ContentBehavior.NONE
