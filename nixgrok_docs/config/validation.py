"""Fail-fast structural checks for site configurations.

Every construction path (the embedded descriptor and the YAML loader) funnels
its result through :func:`validate_site_configuration` so that malformed
entries and duplicate slugs abort the build before the site framework sees
them. Node positions are reported as ``sidebar[1].items[0]`` style paths.
"""

from __future__ import annotations

import typing as typ

from .._constants import SLUG_PATTERN
from .models import (
    DuplicateSlugError,
    MalformedEntryError,
    NavigationGroup,
    NavigationLeaf,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import NavItem, SiteConfiguration, SiteMetadata


def validate_site_configuration(config: SiteConfiguration) -> SiteConfiguration:
    """Validate ``config`` and return it unchanged.

    Parameters
    ----------
    config : SiteConfiguration
        Fully constructed site configuration.

    Returns
    -------
    SiteConfiguration
        The same object, so callers can validate inline.

    Raises
    ------
    MalformedEntryError
        If a label or slug is empty, a slug breaks the slug convention, or a
        metadata field is missing.
    DuplicateSlugError
        If two leaves share a slug; both node paths are reported.
    """
    _validate_metadata(config.metadata)
    _validate_nodes(config.sidebar, "sidebar")
    _validate_unique_slugs(config.sidebar)
    return config


def iter_leaves(
    items: cabc.Iterable[NavItem], prefix: str = "sidebar"
) -> cabc.Iterator[tuple[str, NavigationLeaf]]:
    """Yield ``(path, leaf)`` pairs depth-first in declaration order."""
    for index, item in enumerate(items):
        path = f"{prefix}[{index}]"
        match item:
            case NavigationGroup():
                yield from iter_leaves(item.items, f"{path}.items")
            case NavigationLeaf():
                yield path, item


def _validate_metadata(metadata: SiteMetadata) -> None:
    if not metadata.title.strip():
        raise MalformedEntryError("title", "Site metadata requires a 'title'.")
    if not metadata.logo.src.strip():
        raise MalformedEntryError("logo.src", "Site logo requires a 'src' path.")
    for index, link in enumerate(metadata.social):
        path = f"social[{index}]"
        if not link.platform.strip():
            msg = f"Social link at {path} is missing a platform name."
            raise MalformedEntryError(path, msg)
        if not link.href.startswith(("https://", "http://")):
            msg = f"Social link '{link.platform}' at {path} needs an http(s) URL."
            raise MalformedEntryError(path, msg)
    for index, stylesheet in enumerate(metadata.custom_css):
        if not stylesheet.strip():
            path = f"customCss[{index}]"
            msg = f"Stylesheet entry at {path} is empty."
            raise MalformedEntryError(path, msg)


def _validate_nodes(items: cabc.Sequence[NavItem], prefix: str) -> None:
    for index, item in enumerate(items):
        path = f"{prefix}[{index}]"
        match item:
            case NavigationGroup():
                if not item.label.strip():
                    msg = f"Navigation group at {path} is missing a 'label'."
                    raise MalformedEntryError(path, msg)
                _validate_nodes(item.items, f"{path}.items")
            case NavigationLeaf():
                _validate_leaf(item, path)
            case _:
                msg = f"Navigation node at {path} is neither a group nor a leaf."
                raise MalformedEntryError(path, msg)


def _validate_leaf(leaf: NavigationLeaf, path: str) -> None:
    if not leaf.label.strip():
        msg = f"Navigation leaf at {path} is missing a 'label'."
        raise MalformedEntryError(path, msg)
    if not leaf.slug:
        msg = f"Navigation leaf '{leaf.label}' at {path} is missing a 'slug'."
        raise MalformedEntryError(path, msg)
    if leaf.slug.startswith("/"):
        msg = f"Slug '{leaf.slug}' at {path} must not start with '/'."
        raise MalformedEntryError(path, msg)
    if not SLUG_PATTERN.match(leaf.slug):
        msg = (
            f"Slug '{leaf.slug}' at {path} must be lowercase and path-like "
            "(for example 'config/basic')."
        )
        raise MalformedEntryError(path, msg)


def _validate_unique_slugs(items: cabc.Sequence[NavItem]) -> None:
    seen: dict[str, str] = {}
    for path, leaf in iter_leaves(items):
        if leaf.slug in seen:
            raise DuplicateSlugError(leaf.slug, seen[leaf.slug], path)
        seen[leaf.slug] = path


__all__ = ["iter_leaves", "validate_site_configuration"]
