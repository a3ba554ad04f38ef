import pytest

from tagscan.helpers import AssemblyLoadError, AssemblyNotFoundError
from tagscan.registry import (
    AssemblyDescriptorProvider,
    TagHelperDescriptorResolver,
    TagHelperTypeResolver,
)


def test_assembly_lookup_returns_descriptors_in_scan_order():
    descriptors = TagHelperDescriptorResolver().resolve("acme_tag_helpers")
    assert [d.tag_name for d in descriptors] == [
        "input",
        "*",
        "form",
        "section",
        "aside",
        "named-section",
    ]


def test_type_lookup_returns_all_descriptors_of_that_type():
    descriptors = TagHelperDescriptorResolver().resolve(
        "acme_tag_helpers.layout.sections.SectionTagHelper, acme_tag_helpers"
    )
    assert [d.tag_name for d in descriptors] == ["section", "aside"]


def test_type_lookup_uses_full_type_name():
    resolver = TagHelperDescriptorResolver()
    assert resolver.resolve("SectionTagHelper, acme_tag_helpers") == []


def test_unknown_assembly_propagates_not_found():
    with pytest.raises(AssemblyNotFoundError):
        TagHelperDescriptorResolver().resolve("Some.Type, no_such_assembly_q")


def test_load_failure_propagates(make_assembly):
    make_assembly({"faulty_assembly.py": "1 / 0\n"})
    with pytest.raises(AssemblyLoadError) as exc:
        TagHelperDescriptorResolver().resolve("faulty_assembly")
    assert isinstance(exc.value.__cause__, ZeroDivisionError)


def test_injected_type_resolver_is_used_by_default_provider():
    resolver = TagHelperDescriptorResolver(
        TagHelperTypeResolver(scan_submodules=False)
    )
    tags = [d.tag_name for d in resolver.resolve("acme_tag_helpers")]
    assert tags == ["input", "*"]


def test_provider_flattens_zero_one_or_many_descriptors():
    from acme_tag_helpers.forms import FormTagHelper, InputTagHelper

    class FixedTypes:
        def resolve(self, assembly_name):
            return [InputTagHelper, FormTagHelper, InputTagHelper]

    fanout = {InputTagHelper: ["i1", "i2"], FormTagHelper: []}
    provider = AssemblyDescriptorProvider(
        FixedTypes(), descriptor_factory=lambda t: fanout[t]
    )
    assert provider("anything") == ["i1", "i2", "i1", "i2"]


def test_memoizing_provider_can_be_injected():
    calls = []
    base = AssemblyDescriptorProvider()
    cache = {}

    def memoized(assembly_name):
        calls.append(assembly_name)
        if assembly_name not in cache:
            cache[assembly_name] = base(assembly_name)
        return cache[assembly_name]

    resolver = TagHelperDescriptorResolver(descriptor_provider=memoized)
    first = resolver.resolve("acme_tag_helpers")
    second = resolver.resolve(
        "acme_tag_helpers.forms.FormTagHelper, acme_tag_helpers"
    )
    assert len(first) == 6
    assert [d.tag_name for d in second] == ["form"]
    assert calls == ["acme_tag_helpers", "acme_tag_helpers"]
    assert list(cache) == ["acme_tag_helpers"]
