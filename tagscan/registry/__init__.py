"""Tag helper registry: discovery, descriptor construction, resolution.

Responsibilities:
- Import an assembly (module / package) and find its tag helper types
- Build descriptors (tag names, attributes, content behavior) per type
- Resolve "typeName, assemblyName" lookup text to descriptors
- Index descriptors by tag name for element matching
"""

from .descriptor_factory import create_descriptors, to_html_case  # noqa: F401
from .provider import CATCH_ALL_TARGET, TagHelperDescriptorProvider  # noqa: F401
from .resolver import (  # noqa: F401
    AssemblyDescriptorProvider,
    DescriptorProvider,
    LookupRequest,
    TagHelperDescriptorResolver,
    parse_lookup_text,
)
from .type_resolver import TagHelperTypeResolver, is_tag_helper  # noqa: F401

__all__ = [
    "create_descriptors",
    "to_html_case",
    "CATCH_ALL_TARGET",
    "TagHelperDescriptorProvider",
    "AssemblyDescriptorProvider",
    "DescriptorProvider",
    "LookupRequest",
    "TagHelperDescriptorResolver",
    "parse_lookup_text",
    "TagHelperTypeResolver",
    "is_tag_helper",
]
