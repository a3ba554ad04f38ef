"""Sample tag helper assembly used by the test suite."""
from __future__ import annotations

from tagscan.helpers import TagHelper, html_element_name

from .forms import InputTagHelper  # noqa: F401


@html_element_name("*")
class CatchAllTagHelper(TagHelper):
    def process(self, context, output):
        pass
