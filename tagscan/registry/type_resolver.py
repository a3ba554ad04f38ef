"""Type discovery: assembly (module / package) name → tag helper classes."""
from __future__ import annotations

import importlib
import inspect
import logging
import pkgutil
from types import ModuleType
from typing import List

from tagscan.config import get_config
from tagscan.events import TagHelperAssemblyScanned, emit
from tagscan.helpers.base import TagHelper
from tagscan.helpers.exceptions import (
    AssemblyLoadError,
    AssemblyNotFoundError,
    InvalidAssemblyNameError,
)

logger = logging.getLogger(__name__)


def is_tag_helper(obj: object) -> bool:
    """Public, concrete, non-generic ``TagHelper`` subclass."""
    if not inspect.isclass(obj) or obj is TagHelper:
        return False
    if not issubclass(obj, TagHelper):
        return False
    if obj.__name__.startswith("_") or "<locals>" in obj.__qualname__:
        return False
    if inspect.isabstract(obj):
        return False
    # Unparameterised Generic[T] subclasses are open types.
    return not getattr(obj, "__parameters__", ())


def _defined_in(cls: type, assembly_name: str) -> bool:
    module = getattr(cls, "__module__", "") or ""
    return module == assembly_name or module.startswith(assembly_name + ".")


class TagHelperTypeResolver:
    """Imports an assembly and returns the tag helper types it defines.

    ``scan_submodules=None`` defers to ``discovery.scan_submodules`` from the
    config at call time.
    """

    def __init__(self, scan_submodules: bool | None = None) -> None:
        self._scan_submodules = scan_submodules

    def resolve(self, assembly_name: str | None) -> List[type]:
        if not assembly_name:
            raise InvalidAssemblyNameError(
                "Tag helper assembly name cannot be empty or None."
            )
        modules = self._load_modules(assembly_name)
        types: List[type] = []
        seen: set[type] = set()
        for module in modules:
            for obj in list(vars(module).values()):
                if not is_tag_helper(obj) or obj in seen:
                    continue
                if not _defined_in(obj, assembly_name):
                    continue
                seen.add(obj)
                types.append(obj)
        logger.debug(
            "scanned assembly=%s modules=%d tag_helpers=%d",
            assembly_name,
            len(modules),
            len(types),
        )
        emit(
            TagHelperAssemblyScanned(
                assembly_name=assembly_name,
                module_count=len(modules),
                type_count=len(types),
            )
        )
        return types

    # --- module loading --------------------------------------------------
    def _scan_enabled(self) -> bool:
        if self._scan_submodules is not None:
            return self._scan_submodules
        return get_config().discovery.scan_submodules

    def _load_modules(self, assembly_name: str) -> List[ModuleType]:
        root = _import_assembly(assembly_name)
        if not self._scan_enabled() or not hasattr(root, "__path__"):
            return [root]
        return _walk_package(root, assembly_name)


def _import_assembly(assembly_name: str) -> ModuleType:
    try:
        return importlib.import_module(assembly_name)
    except ModuleNotFoundError as e:
        missing = e.name or ""
        if missing and (
            assembly_name == missing
            or assembly_name.startswith(missing + ".")
        ):
            raise AssemblyNotFoundError(assembly_name) from e
        raise AssemblyLoadError(
            assembly_name,
            f"Failed to load tag helper assembly {assembly_name}: {e}",
        ) from e
    except Exception as e:  # noqa: BLE001
        raise AssemblyLoadError(
            assembly_name,
            f"Failed to load tag helper assembly {assembly_name}: {e}",
        ) from e


def _walk_package(package: ModuleType, assembly_name: str) -> List[ModuleType]:
    """Package first, then its submodules depth-first in name order."""
    found = [package]
    infos = sorted(
        pkgutil.iter_modules(package.__path__, package.__name__ + "."),
        key=lambda info: info.name,
    )
    for info in infos:
        # __main__ is an entry point, not part of the helper surface.
        if info.name.rpartition(".")[2] == "__main__":
            continue
        try:
            sub = importlib.import_module(info.name)
        except Exception as e:  # noqa: BLE001
            raise AssemblyLoadError(
                assembly_name,
                f"Failed to load module {info.name} of tag helper "
                f"assembly {assembly_name}: {e}",
            ) from e
        if info.ispkg:
            found.extend(_walk_package(sub, assembly_name))
        else:
            found.append(sub)
    return found
