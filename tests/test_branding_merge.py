import copy

import pytest

from nextmove.domain.branding_defaults import DEFAULT_BRANDING, MERGED_SECTIONS, PAGE_SECTIONS
from nextmove.services.branding.merge import merge_branding


@pytest.mark.parametrize("persisted", [None, {}])
def test_missing_document_yields_defaults(persisted):
    assert merge_branding(persisted) == DEFAULT_BRANDING


def test_default_contact_page_values():
    contact = merge_branding({})["pages"]["contact"]

    assert contact["email"] == "djeylanidjitte@gmail.com"
    assert contact["phone"] == "+221 77 000 00 00"
    assert contact["address"] == "Dakar, Sénégal"


def test_top_level_override_keeps_every_other_default():
    merged = merge_branding({"primary_color": "#ff0000"})

    assert merged["primary_color"] == "#ff0000"
    expected = copy.deepcopy(DEFAULT_BRANDING)
    expected["primary_color"] = "#ff0000"
    assert merged == expected


def test_partial_page_keeps_sibling_fields_and_pages():
    merged = merge_branding({"pages": {"about": {"title": "Custom Title"}}})

    assert merged["pages"]["about"]["title"] == "Custom Title"
    assert merged["pages"]["about"]["subtitle"] == DEFAULT_BRANDING["pages"]["about"]["subtitle"]
    assert merged["pages"]["contact"] == DEFAULT_BRANDING["pages"]["contact"]
    assert merged["pages"]["privacy"] == DEFAULT_BRANDING["pages"]["privacy"]


@pytest.mark.parametrize("section", MERGED_SECTIONS)
def test_single_key_section_is_completed_from_defaults(section):
    first_key = next(iter(DEFAULT_BRANDING[section]))
    merged = merge_branding({section: {first_key: "override"}})

    assert merged[section][first_key] == "override"
    assert set(merged[section]) == set(DEFAULT_BRANDING[section])
    for key, value in DEFAULT_BRANDING[section].items():
        if key != first_key:
            assert merged[section][key] == value


def test_explicit_falsy_values_win_over_defaults():
    merged = merge_branding({"hero": {"title": None, "subtitle": ""}, "platform_name": ""})

    assert merged["hero"]["title"] is None
    assert merged["hero"]["subtitle"] == ""
    assert merged["hero"]["cta1"] == DEFAULT_BRANDING["hero"]["cta1"]
    assert merged["platform_name"] == ""


@pytest.mark.parametrize("bad", [None, "", "oops", 0, ["a"]])
def test_non_object_section_overrides_nothing(bad):
    merged = merge_branding({"seo": bad, "pages": {"about": bad}})

    assert merged["seo"] == DEFAULT_BRANDING["seo"]
    assert merged["pages"]["about"] == DEFAULT_BRANDING["pages"]["about"]


def test_unknown_fields_are_kept_as_is():
    merged = merge_branding({
        "marketing_banner": {"text": "Promo"},
        "pages": {"faq": {"title": "FAQ"}},
    })

    # not in the merge list: replaced wholesale, never completed from defaults
    assert merged["marketing_banner"] == {"text": "Promo"}
    assert merged["pages"]["faq"] == {"title": "FAQ"}
    for name in PAGE_SECTIONS:
        assert merged["pages"][name] == DEFAULT_BRANDING["pages"][name]


def test_non_object_document_is_ignored():
    assert merge_branding(["not", "a", "dict"]) == DEFAULT_BRANDING


def test_merge_is_idempotent():
    once = merge_branding({"hero": {"title": "Hello"}, "pages": {"contact": {"email": "a@b.c"}}})
    assert merge_branding(once) == once


def test_result_does_not_alias_defaults():
    merged = merge_branding({})
    merged["hero"]["title"] = "mutated"
    merged["pages"]["about"]["title"] = "mutated"

    assert DEFAULT_BRANDING["hero"]["title"] != "mutated"
    assert DEFAULT_BRANDING["pages"]["about"]["title"] != "mutated"
