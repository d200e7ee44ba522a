"""Unit tests for site configuration validation."""

from __future__ import annotations

import pytest

from nixgrok_docs.config import (
    DuplicateSlugError,
    LogoConfig,
    MalformedEntryError,
    NavigationGroup,
    NavigationLeaf,
    SiteConfigError,
    SiteConfiguration,
    SiteMetadata,
    SocialLink,
    iter_leaves,
    validate_site_configuration,
)


def _metadata(**overrides: object) -> SiteMetadata:
    values: dict[str, object] = {
        "title": "Docs",
        "description": "Fixture docs",
        "logo": LogoConfig(src="./src/assets/logo.svg"),
        "social": (SocialLink("github", "https://github.com/example/docs"),),
        "custom_css": ("./src/styles/custom.css",),
    }
    values.update(overrides)
    return SiteMetadata(**values)  # type: ignore[arg-type]


def _site(*groups: NavigationGroup, **metadata: object) -> SiteConfiguration:
    return SiteConfiguration(metadata=_metadata(**metadata), sidebar=groups)


def _group(label: str, *slugs: str) -> NavigationGroup:
    return NavigationGroup(
        label=label,
        items=tuple(NavigationLeaf(label=slug.title() or "x", slug=slug) for slug in slugs),
    )


def test_example_scenario_preserves_order() -> None:
    site = validate_site_configuration(
        _site(
            _group("Getting Started", "introduction", "quick-start", "installation"),
            _group("Configuration", "config/basic", "config/advanced"),
        )
    )
    assert len(site.sidebar) == 2
    first, second = site.groups
    assert first.label == "Getting Started"
    assert [leaf.slug for leaf in first.items] == [
        "introduction",
        "quick-start",
        "installation",
    ]
    assert second.label == "Configuration"
    assert [leaf.slug for leaf in second.items] == ["config/basic", "config/advanced"]


def test_validate_returns_same_object() -> None:
    site = _site(_group("A", "a"))
    assert validate_site_configuration(site) is site


@pytest.mark.parametrize(
    ("slug", "fragment"),
    [
        ("", "missing a 'slug'"),
        ("/introduction", "must not start with '/'"),
        ("Config/Basic", "lowercase and path-like"),
        ("config//basic", "lowercase and path-like"),
        ("config/basic/", "lowercase and path-like"),
    ],
)
def test_rejects_malformed_slugs(slug: str, fragment: str) -> None:
    site = _site(_group("Guide", "intro", slug))
    with pytest.raises(MalformedEntryError, match=fragment) as excinfo:
        validate_site_configuration(site)
    assert excinfo.value.path == "sidebar[0].items[1]"


def test_rejects_empty_group_label() -> None:
    site = _site(_group("Guide", "intro"), _group("  ", "other"))
    with pytest.raises(MalformedEntryError, match=r"sidebar\[1\]") as excinfo:
        validate_site_configuration(site)
    assert excinfo.value.path == "sidebar[1]"


def test_rejects_empty_leaf_label() -> None:
    group = NavigationGroup(label="Guide", items=(NavigationLeaf(label="", slug="x"),))
    with pytest.raises(MalformedEntryError, match="missing a 'label'"):
        validate_site_configuration(_site(group))


def test_duplicate_slug_reports_both_paths() -> None:
    site = _site(_group("A", "intro", "setup"), _group("B", "usage", "setup"))
    with pytest.raises(DuplicateSlugError) as excinfo:
        validate_site_configuration(site)
    error = excinfo.value
    assert error.slug == "setup"
    assert error.first_path == "sidebar[0].items[1]"
    assert error.second_path == "sidebar[1].items[1]"
    assert "sidebar[0].items[1]" in str(error)
    assert "sidebar[1].items[1]" in str(error)


def test_errors_share_base_class() -> None:
    with pytest.raises(SiteConfigError):
        validate_site_configuration(_site(_group("A", "x", "x")))
    assert issubclass(SiteConfigError, ValueError)


def test_nested_groups_are_validated() -> None:
    inner = NavigationGroup(label="Inner", items=(NavigationLeaf("Deep", "/deep"),))
    outer = NavigationGroup(label="Outer", items=(NavigationLeaf("Top", "top"), inner))
    with pytest.raises(MalformedEntryError) as excinfo:
        validate_site_configuration(_site(outer))
    assert excinfo.value.path == "sidebar[0].items[1].items[0]"


def test_iter_leaves_is_depth_first() -> None:
    inner = NavigationGroup(label="Inner", items=(NavigationLeaf("B", "b"),))
    outer = NavigationGroup(
        label="Outer",
        items=(NavigationLeaf("A", "a"), inner, NavigationLeaf("C", "c")),
    )
    assert [(path, leaf.slug) for path, leaf in iter_leaves((outer,))] == [
        ("sidebar[0].items[0]", "a"),
        ("sidebar[0].items[1].items[0]", "b"),
        ("sidebar[0].items[2]", "c"),
    ]


@pytest.mark.parametrize(
    ("overrides", "path"),
    [
        ({"title": ""}, "title"),
        ({"logo": LogoConfig(src=" ")}, "logo.src"),
        ({"social": (SocialLink("", "https://example.com"),)}, "social[0]"),
        ({"social": (SocialLink("github", "github.com/x"),)}, "social[0]"),
        ({"custom_css": ("./a.css", "")}, "customCss[1]"),
    ],
)
def test_rejects_malformed_metadata(overrides: dict[str, object], path: str) -> None:
    with pytest.raises(MalformedEntryError) as excinfo:
        validate_site_configuration(_site(_group("A", "a"), **overrides))
    assert excinfo.value.path == path
