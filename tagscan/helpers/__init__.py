"""Tag helper types: authoring base class, descriptors, exceptions."""

from .base import (  # noqa: F401
    TagHelper,
    content_behavior,
    html_attribute_name,
    html_element_name,
)
from .descriptor import (  # noqa: F401
    ContentBehavior,
    TagHelperAttributeDescriptor,
    TagHelperDescriptor,
)
from .exceptions import (  # noqa: F401
    AssemblyLoadError,
    AssemblyNotFoundError,
    InvalidAssemblyNameError,
    InvalidLookupTextError,
    TagHelperError,
)

__all__ = [
    "TagHelper",
    "content_behavior",
    "html_attribute_name",
    "html_element_name",
    "ContentBehavior",
    "TagHelperAttributeDescriptor",
    "TagHelperDescriptor",
    "AssemblyLoadError",
    "AssemblyNotFoundError",
    "InvalidAssemblyNameError",
    "InvalidLookupTextError",
    "TagHelperError",
]
