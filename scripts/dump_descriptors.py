"""Print tag helper descriptors for a lookup text as a Markdown table.

Usage (inside venv):
  python scripts/dump_descriptors.py "acme_tag_helpers"
  python scripts/dump_descriptors.py "acme_tag_helpers.forms.InputTagHelper, acme_tag_helpers"
  python scripts/dump_descriptors.py "acme_tag_helpers" --tag aside
"""
from __future__ import annotations

import argparse
import os
import sys
from typing import List, Sequence

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:  # pragma: no cover
    sys.path.insert(0, ROOT)

from tagscan.config import ConfigError  # noqa: E402
from tagscan.helpers import TagHelperDescriptor, TagHelperError  # noqa: E402
from tagscan.observability import configure_logging  # noqa: E402
from tagscan.registry import (  # noqa: E402
    TagHelperDescriptorProvider,
    TagHelperDescriptorResolver,
)


def format_table(descriptors: Sequence[TagHelperDescriptor]) -> str:  # noqa: D401
    lines = [
        "| Tag | Type | Attributes | Content |",
        "|-----|------|------------|---------|",
    ]
    for d in descriptors:
        attrs = ", ".join(f"{a.name}:{a.type_name}" for a in d.attributes)
        lines.append(
            f"| {d.tag_name} | {d.type_name} | {attrs or '-'} "
            f"| {d.content_behavior.value} |"
        )
    return "\n".join(lines)


def main(argv: List[str] | None = None) -> int:  # noqa: D401
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("lookup_text", help='"assembly" or "type, assembly"')
    parser.add_argument(
        "--path",
        action="append",
        default=[],
        help="extra directory to put on sys.path before importing",
    )
    parser.add_argument(
        "--tag",
        help="only show helpers that apply to this element (catch-all included)",
    )
    args = parser.parse_args(argv)
    for extra in args.path:
        if extra not in sys.path:
            sys.path.insert(0, extra)
    try:
        configure_logging()
        descriptors = TagHelperDescriptorResolver().resolve(args.lookup_text)
    except (TagHelperError, ConfigError) as e:
        sys.stderr.write(f"[{e.error_type}] {e}\n")
        return 1
    if args.tag:
        descriptors = TagHelperDescriptorProvider(descriptors).get_tag_helpers(
            args.tag
        )
    sys.stdout.write(format_table(descriptors) + "\n")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
