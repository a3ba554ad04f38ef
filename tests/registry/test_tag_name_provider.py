from tagscan.helpers import TagHelperDescriptor
from tagscan.registry import (
    CATCH_ALL_TARGET,
    TagHelperDescriptorProvider,
    TagHelperDescriptorResolver,
)


def _d(tag: str, type_name: str) -> TagHelperDescriptor:
    return TagHelperDescriptor(
        tag_name=tag, type_name=type_name, assembly_name="asm"
    )


def test_matches_tag_names_case_insensitively():
    div = _d("div", "DivHelper")
    other = _d("span", "SpanHelper")
    provider = TagHelperDescriptorProvider([div, other])
    assert provider.get_tag_helpers("DIV") == [div]
    assert provider.get_tag_helpers("Span") == [other]


def test_catch_all_descriptors_come_first():
    div = _d("div", "DivHelper")
    star = _d(CATCH_ALL_TARGET, "StarHelper")
    provider = TagHelperDescriptorProvider([div, star])
    assert provider.get_tag_helpers("div") == [star, div]
    assert provider.get_tag_helpers("p") == [star]


def test_catch_all_lookup_does_not_duplicate():
    star = _d(CATCH_ALL_TARGET, "StarHelper")
    provider = TagHelperDescriptorProvider([star])
    assert provider.get_tag_helpers(CATCH_ALL_TARGET) == [star]


def test_no_match_returns_empty_list():
    provider = TagHelperDescriptorProvider()
    assert provider.get_tag_helpers("div") == []
    assert len(provider) == 0


def test_register_keeps_registration_order():
    a = _d("div", "A")
    b = _d("DIV", "B")
    provider = TagHelperDescriptorProvider()
    provider.register(a)
    provider.register(b)
    assert provider.get_tag_helpers("div") == [a, b]
    assert provider.descriptors == [a, b]


def test_index_resolved_assembly():
    descriptors = TagHelperDescriptorResolver().resolve("acme_tag_helpers")
    provider = TagHelperDescriptorProvider(descriptors)
    matched = [d.type_name for d in provider.get_tag_helpers("ASIDE")]
    assert matched == [
        "acme_tag_helpers.CatchAllTagHelper",
        "acme_tag_helpers.layout.sections.SectionTagHelper",
    ]
