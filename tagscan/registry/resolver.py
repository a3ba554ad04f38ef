"""Tag helper descriptor resolution from lookup text.

Lookup text formats:
    "assemblyName"
    "typeName, assemblyName"

The assembly is always the last segment. Descriptors come from a
descriptor provider (``assembly name -> descriptors``) injected at
construction; the default scans the assembly on every call. Tooling that
resolves the same assemblies repeatedly can pass a memoizing provider.
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

from tagscan.events import (
    TagHelperDescriptorsResolved,
    TagHelperLookupRejected,
    emit,
)
from tagscan.helpers.descriptor import TagHelperDescriptor
from tagscan.helpers.exceptions import InvalidLookupTextError

from .descriptor_factory import create_descriptors
from .type_resolver import TagHelperTypeResolver

logger = logging.getLogger(__name__)

LOOKUP_DELIMITER = ","

DescriptorProvider = Callable[[str], Iterable[TagHelperDescriptor]]
DescriptorFactory = Callable[[type], Iterable[TagHelperDescriptor]]


@dataclass(frozen=True)
class LookupRequest:
    assembly_name: str
    type_name: Optional[str] = None


def parse_lookup_text(lookup_text: str | None) -> LookupRequest:
    """Split lookup text into assembly and optional type name.

    Segments are trimmed and blank ones dropped, so ``" , Asm"`` names only
    an assembly while ``",,"`` names nothing.
    """
    segments = [
        s.strip() for s in (lookup_text or "").split(LOOKUP_DELIMITER)
    ]
    segments = [s for s in segments if s]
    if not lookup_text or len(segments) not in (1, 2):
        raise InvalidLookupTextError(lookup_text)
    if len(segments) == 2:
        return LookupRequest(assembly_name=segments[1], type_name=segments[0])
    return LookupRequest(assembly_name=segments[0])


class AssemblyDescriptorProvider:
    """Type discovery followed by per-type descriptor construction.

    One type may yield zero, one or many descriptors; the results are
    flattened in type order.
    """

    def __init__(
        self,
        type_resolver: TagHelperTypeResolver | None = None,
        descriptor_factory: DescriptorFactory | None = None,
    ) -> None:
        self._type_resolver = type_resolver or TagHelperTypeResolver()
        self._create = descriptor_factory or create_descriptors

    def __call__(self, assembly_name: str) -> List[TagHelperDescriptor]:
        tag_helper_types = self._type_resolver.resolve(assembly_name)
        return [
            descriptor
            for helper_type in tag_helper_types
            for descriptor in self._create(helper_type)
        ]


class TagHelperDescriptorResolver:
    def __init__(
        self,
        type_resolver: TagHelperTypeResolver | None = None,
        *,
        descriptor_provider: DescriptorProvider | None = None,
    ) -> None:
        self._type_resolver = type_resolver or TagHelperTypeResolver()
        self._descriptor_provider = (
            descriptor_provider
            or AssemblyDescriptorProvider(self._type_resolver)
        )

    def resolve(self, lookup_text: str | None) -> List[TagHelperDescriptor]:
        """Resolve descriptors named by ``lookup_text``.

        Raises InvalidLookupTextError for malformed lookup text. Errors from
        type discovery or descriptor construction propagate unchanged.
        """
        try:
            request = parse_lookup_text(lookup_text)
        except InvalidLookupTextError as e:
            emit(
                TagHelperLookupRejected(
                    lookup_text=lookup_text, error_type=e.error_type
                )
            )
            raise

        t0 = time.perf_counter()
        descriptors = list(self._descriptor_provider(request.assembly_name))
        if request.type_name is not None:
            descriptors = [
                d for d in descriptors if d.type_name == request.type_name
            ]
        latency_ms = (time.perf_counter() - t0) * 1000
        logger.debug(
            "resolved lookup=%r assembly=%s type=%s descriptors=%d",
            lookup_text,
            request.assembly_name,
            request.type_name,
            len(descriptors),
        )
        emit(
            TagHelperDescriptorsResolved(
                assembly_name=request.assembly_name,
                type_name=request.type_name,
                descriptor_count=len(descriptors),
                latency_ms=round(latency_ms, 3),
            )
        )
        return descriptors


__all__ = [
    "AssemblyDescriptorProvider",
    "DescriptorProvider",
    "LookupRequest",
    "TagHelperDescriptorResolver",
    "parse_lookup_text",
]
