"""Typed dataclasses describing the documentation site navigation."""

from __future__ import annotations

import dataclasses as dc
import typing as typ


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


class MalformedEntryError(SiteConfigError):
    """Raised when a node or metadata field is missing a required value."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(message)


class DuplicateSlugError(SiteConfigError):
    """Raised when two navigation leaves share the same slug."""

    def __init__(self, slug: str, first_path: str, second_path: str) -> None:
        self.slug = slug
        self.first_path = first_path
        self.second_path = second_path
        msg = (
            f"Duplicate slug '{slug}' declared at {first_path} and {second_path}."
        )
        super().__init__(msg)


class DanglingSlugError(SiteConfigError):
    """Raised when navigation leaves reference content that does not exist."""

    def __init__(self, missing: list[tuple[str, str]]) -> None:
        self.missing = missing
        listing = ", ".join(f"{slug!r} at {path}" for path, slug in missing)
        msg = f"No content document found for: {listing}."
        super().__init__(msg)


@dc.dataclass(frozen=True, slots=True)
class LogoConfig:
    """Logo asset reference resolved downstream by the site framework."""

    src: str


@dc.dataclass(frozen=True, slots=True)
class SocialLink:
    """A single social platform link rendered in the page chrome."""

    platform: str
    href: str


@dc.dataclass(frozen=True, slots=True)
class SiteMetadata:
    """Global page chrome: title, description, logo and styling."""

    title: str
    description: str
    logo: LogoConfig
    social: tuple[SocialLink, ...] = ()
    custom_css: tuple[str, ...] = ()

    @property
    def social_links(self) -> dict[str, str]:
        """Return the social links as an ordered platform to URL mapping."""
        return {link.platform: link.href for link in self.social}


@dc.dataclass(frozen=True, slots=True)
class NavigationLeaf:
    """Sidebar entry pointing at a single content document."""

    label: str
    slug: str


@dc.dataclass(frozen=True, slots=True)
class NavigationGroup:
    """Collapsible sidebar section holding leaves or nested groups."""

    label: str
    items: tuple[NavItem, ...] = ()


NavItem: typ.TypeAlias = "NavigationGroup | NavigationLeaf"


@dc.dataclass(frozen=True, slots=True)
class SiteConfiguration:
    """Site metadata together with the ordered sidebar tree."""

    metadata: SiteMetadata
    sidebar: tuple[NavItem, ...]

    @property
    def groups(self) -> list[NavigationGroup]:
        """Return the top-level sidebar groups in declaration order."""
        return [item for item in self.sidebar if isinstance(item, NavigationGroup)]


__all__ = [
    "DanglingSlugError",
    "DuplicateSlugError",
    "LogoConfig",
    "MalformedEntryError",
    "NavItem",
    "NavigationGroup",
    "NavigationLeaf",
    "SiteConfigError",
    "SiteConfiguration",
    "SiteMetadata",
    "SocialLink",
]
