"""Descriptor construction: tag helper class → descriptors (one per tag)."""
from __future__ import annotations

import inspect
import re
import typing
from abc import ABC
from typing import Any, Dict, List

from tagscan.config import get_config
from tagscan.helpers.base import (
    TagHelper,
    declared_attribute_names,
    declared_content_behavior,
    declared_element_names,
)
from tagscan.helpers.descriptor import (
    TagHelperAttributeDescriptor,
    TagHelperDescriptor,
)

_HTML_CASE_BOUNDARY = re.compile(
    r"(?<!^)((?<=[a-zA-Z0-9])[A-Z][a-z])|((?<=[a-z])[A-Z])"
)
_SKIP_BASES = (object, ABC, TagHelper)


def to_html_case(name: str) -> str:
    """``MyInput`` / ``my_input`` → ``my-input``; ``HTMLParser`` → ``html-parser``."""
    dashed = name.replace("_", "-")
    return _HTML_CASE_BOUNDARY.sub(lambda m: "-" + m.group(0), dashed).lower()


def _type_display(annotation: Any) -> str:
    if isinstance(annotation, str):
        return annotation
    if isinstance(annotation, type):
        if annotation.__module__ == "builtins":
            return annotation.__qualname__
        return f"{annotation.__module__}.{annotation.__qualname__}"
    return str(annotation)


def _is_class_var(annotation: Any) -> bool:
    if isinstance(annotation, str):
        return annotation.startswith(("ClassVar", "typing.ClassVar"))
    return annotation is typing.ClassVar or (
        typing.get_origin(annotation) is typing.ClassVar
    )


def _property_type(prop: property) -> str:
    ret = inspect.get_annotations(prop.fget).get("return") if prop.fget else None
    if ret is None and prop.fset is not None:
        hints = inspect.get_annotations(prop.fset)
        params = [v for k, v in hints.items() if k != "return"]
        ret = params[0] if params else None
    return _type_display(ret) if ret is not None else "typing.Any"


def _writable_members(cls: type) -> Dict[str, str]:
    """Public settable members → type name, base classes first."""
    members: Dict[str, str] = {}
    for klass in reversed(cls.__mro__):
        if klass in _SKIP_BASES:
            continue
        for name, ann in inspect.get_annotations(klass).items():
            if name.startswith("_") or _is_class_var(ann):
                continue
            members[name] = _type_display(ann)
        for name, value in vars(klass).items():
            if name.startswith("_") or not isinstance(value, property):
                continue
            if value.fset is None:
                members.pop(name, None)
            else:
                members[name] = _property_type(value)
    return members


def _tag_names(cls: type, type_suffix: str) -> List[str]:
    declared = declared_element_names(cls)
    if declared:
        return list(dict.fromkeys(declared))
    name = cls.__name__
    if type_suffix and name.endswith(type_suffix) and len(name) > len(type_suffix):
        name = name[: -len(type_suffix)]
    return [to_html_case(name)]


def create_descriptors(
    component_type: type, type_suffix: str | None = None
) -> List[TagHelperDescriptor]:
    if type_suffix is None:
        type_suffix = get_config().discovery.type_suffix
    overrides = declared_attribute_names(component_type)
    attributes = tuple(
        TagHelperAttributeDescriptor(
            name=overrides.get(member) or to_html_case(member),
            property_name=member,
            type_name=type_name,
        )
        for member, type_name in _writable_members(component_type).items()
    )
    type_name = f"{component_type.__module__}.{component_type.__qualname__}"
    behavior = declared_content_behavior(component_type)
    return [
        TagHelperDescriptor(
            tag_name=tag_name,
            type_name=type_name,
            assembly_name=component_type.__module__,
            attributes=attributes,
            content_behavior=behavior,
        )
        for tag_name in _tag_names(component_type, type_suffix)
    ]


__all__ = ["create_descriptors", "to_html_case"]
