"""Tag helper authoring API.

A tag helper is a public, concrete subclass of :class:`TagHelper`. Its
metadata is declared with class decorators:

    @html_element_name("input", "textarea")
    @html_attribute_name(asp_for="for")
    @content_behavior(ContentBehavior.MODIFY)
    class FormFieldTagHelper(TagHelper):
        asp_for: str
        placeholder: str | None = None

        def process(self, context, output): ...

Element names are read from the decorated class only (subclasses get their
own default name); attribute names and content behavior are inherited.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Tuple, TypeVar

from .descriptor import ContentBehavior

ELEMENT_NAMES_ATTR = "__tag_helper_element_names__"
ATTRIBUTE_NAMES_ATTR = "__tag_helper_attribute_names__"
CONTENT_BEHAVIOR_ATTR = "__tag_helper_content_behavior__"

T = TypeVar("T", bound=type)


class TagHelper(ABC):
    @abstractmethod
    def process(self, context: Any, output: Any) -> None:
        """Apply the helper to one matched element."""


def _require_names(kind: str, names) -> None:
    for name in names:
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"{kind} cannot be empty: {name!r}")


def html_element_name(*names: str) -> Callable[[T], T]:
    """Target the decorated helper at the given element names."""
    if not names:
        raise ValueError("html_element_name requires at least one name")
    _require_names("Element name", names)

    def decorate(cls: T) -> T:
        setattr(cls, ELEMENT_NAMES_ATTR, tuple(n.strip() for n in names))
        return cls

    return decorate


def html_attribute_name(**mapping: str) -> Callable[[T], T]:
    """Override the HTML attribute name of individual members."""
    _require_names("Attribute name", mapping.values())

    def decorate(cls: T) -> T:
        inherited: Dict[str, str] = dict(getattr(cls, ATTRIBUTE_NAMES_ATTR, {}))
        inherited.update({k: v.strip() for k, v in mapping.items()})
        setattr(cls, ATTRIBUTE_NAMES_ATTR, inherited)
        return cls

    return decorate


def content_behavior(behavior: ContentBehavior | str) -> Callable[[T], T]:
    value = ContentBehavior(behavior)

    def decorate(cls: T) -> T:
        setattr(cls, CONTENT_BEHAVIOR_ATTR, value)
        return cls

    return decorate


def declared_element_names(cls: type) -> Tuple[str, ...]:
    return cls.__dict__.get(ELEMENT_NAMES_ATTR, ())


def declared_attribute_names(cls: type) -> Dict[str, str]:
    return dict(getattr(cls, ATTRIBUTE_NAMES_ATTR, {}))


def declared_content_behavior(cls: type) -> ContentBehavior:
    return getattr(cls, CONTENT_BEHAVIOR_ATTR, ContentBehavior.NONE)
