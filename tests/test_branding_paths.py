import pytest

from nextmove.services.branding.paths import get_path, set_path


@pytest.fixture()
def current():
    return {
        "platform_name": "NextMove Cargo",
        "hero": {"title": "Hi", "subtitle": "There"},
        "pages": {"about": {"title": "About"}, "contact": {"email": "x@y.z"}},
    }


def test_sets_nested_leaf_without_mutating_input(current):
    updated = set_path(current, "pages.about.title", "Qui sommes-nous")

    assert updated["pages"]["about"]["title"] == "Qui sommes-nous"
    assert current["pages"]["about"]["title"] == "About"
    assert updated is not current
    assert updated["pages"] is not current["pages"]
    assert updated["pages"]["about"] is not current["pages"]["about"]


def test_untouched_branches_are_shared(current):
    updated = set_path(current, "pages.about.title", "New")

    assert updated["hero"] is current["hero"]
    assert updated["pages"]["contact"] is current["pages"]["contact"]


def test_top_level_key(current):
    updated = set_path(current, "platform_name", "Acme")

    assert updated["platform_name"] == "Acme"
    assert current["platform_name"] == "NextMove Cargo"


def test_creates_missing_and_replaces_non_object_levels(current):
    updated = set_path(current, "social_media.facebook", "https://fb.com/nextmove")
    assert updated["social_media"] == {"facebook": "https://fb.com/nextmove"}

    current["seo"] = "broken"
    updated = set_path(current, "seo.default_title", "T")
    assert updated["seo"] == {"default_title": "T"}


@pytest.mark.parametrize("path", ["", ".hero", "hero.", "pages..title"])
def test_rejects_empty_segments(current, path):
    with pytest.raises(ValueError):
        set_path(current, path, "x")


def test_get_path(current):
    assert get_path(current, "pages.contact.email") == "x@y.z"
    assert get_path(current, "pages.privacy.title") is None
    assert get_path(current, "hero.title.deeper", "missing") == "missing"
