"""Module re-exporting a helper it does not define."""
from __future__ import annotations

from acme_tag_helpers.forms import InputTagHelper  # noqa: F401
from tagscan.helpers import TagHelper


class LinkTagHelper(TagHelper):
    href: str

    def process(self, context, output):
        pass
