"""Tag-name index over resolved descriptors."""
from __future__ import annotations

from typing import Dict, Iterable, List

from tagscan.helpers.descriptor import TagHelperDescriptor

CATCH_ALL_TARGET = "*"


class TagHelperDescriptorProvider:
    """Answers which tag helpers apply to an element.

    Tag names match case-insensitively. Descriptors registered for the
    catch-all target ``*`` apply to every element and are returned first.
    """

    def __init__(
        self, descriptors: Iterable[TagHelperDescriptor] = ()
    ) -> None:
        self._by_tag: Dict[str, List[TagHelperDescriptor]] = {}
        self._all: List[TagHelperDescriptor] = []
        for descriptor in descriptors:
            self.register(descriptor)

    @staticmethod
    def _key(tag_name: str) -> str:
        return tag_name.casefold()

    def register(self, descriptor: TagHelperDescriptor) -> None:
        self._by_tag.setdefault(self._key(descriptor.tag_name), []).append(
            descriptor
        )
        self._all.append(descriptor)

    def get_tag_helpers(self, tag_name: str) -> List[TagHelperDescriptor]:
        matches = list(self._by_tag.get(CATCH_ALL_TARGET, ()))
        if tag_name != CATCH_ALL_TARGET:
            matches.extend(self._by_tag.get(self._key(tag_name), ()))
        return matches

    @property
    def descriptors(self) -> List[TagHelperDescriptor]:
        return list(self._all)

    def __len__(self) -> int:
        return len(self._all)
