"""Load site descriptor YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ

from ruamel.yaml import YAML

from .helpers import _optional_str, _string_list, _text
from .models import (
    LogoConfig,
    MalformedEntryError,
    NavigationGroup,
    NavigationLeaf,
    SiteConfigError,
    SiteConfiguration,
    SiteMetadata,
    SocialLink,
)
from .validation import validate_site_configuration

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .models import NavItem


def load_site_descriptor(path: Path) -> SiteConfiguration:
    """Load a YAML site descriptor describing metadata and sidebar layout.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML descriptor (for example, ``site.yaml``).

    Returns
    -------
    SiteConfiguration
        Validated site metadata and sidebar tree, in declaration order.

    Raises
    ------
    FileNotFoundError
        If the descriptor does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If the ``site`` or ``sidebar`` sections are missing, or any node fails
        validation (see :func:`validate_site_configuration`).
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from nixgrok_docs.config import load_site_descriptor
    >>> config = load_site_descriptor(Path("site.yaml"))  # doctest: +SKIP
    >>> config.groups[0].label  # doctest: +SKIP
    'Getting Started'
    """
    if not path.exists():
        msg = f"Descriptor file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    site_raw = raw.get("site")
    if not isinstance(site_raw, dict):
        msg = "Descriptor requires a 'site' mapping."
        raise SiteConfigError(msg)
    sidebar_raw = raw.get("sidebar")
    if not isinstance(sidebar_raw, list):
        msg = "Descriptor requires a 'sidebar' list."
        raise SiteConfigError(msg)

    config = SiteConfiguration(
        metadata=_build_metadata(site_raw),
        sidebar=_build_items(sidebar_raw, "sidebar"),
    )
    return validate_site_configuration(config)


def _build_metadata(payload: typ.Mapping[str, typ.Any]) -> SiteMetadata:
    """Build SiteMetadata from the ``site`` mapping."""
    logo = payload.get("logo")
    if isinstance(logo, dict):
        logo = logo.get("src")
    social_raw = payload.get("social") or {}
    if not isinstance(social_raw, dict):
        msg = "Site 'social' must map platform names to URLs."
        raise SiteConfigError(msg)
    custom_css = payload.get("custom_css")
    if custom_css is not None and not isinstance(custom_css, str | list):
        msg = "Site 'custom_css' must be a path or a list of paths."
        raise MalformedEntryError("customCss", msg)
    return SiteMetadata(
        title=_optional_str(payload.get("title")) or "",
        description=_optional_str(payload.get("description")) or "",
        logo=LogoConfig(src=_optional_str(logo) or ""),
        social=tuple(
            SocialLink(platform=_text(platform), href=_text(href))
            for platform, href in social_raw.items()
        ),
        custom_css=tuple(_string_list(custom_css)),
    )


def _build_items(payload: list[typ.Any], prefix: str) -> tuple[NavItem, ...]:
    """Convert raw sidebar nodes into groups and leaves, preserving order."""
    items: list[NavItem] = []
    for index, node in enumerate(payload):
        path = f"{prefix}[{index}]"
        match node:
            case {"items": _, "slug": _}:
                msg = (
                    f"Navigation node at {path} declares both 'items' and 'slug'; "
                    "a node is either a group or a leaf."
                )
                raise MalformedEntryError(path, msg)
            case {"items": list() as children}:
                items.append(
                    NavigationGroup(
                        label=_optional_str(node.get("label")) or "",
                        items=_build_items(children, f"{path}.items"),
                    )
                )
            case {"items": _}:
                msg = f"Navigation group at {path} needs 'items' to be a list."
                raise MalformedEntryError(path, msg)
            case {"slug": slug}:
                items.append(
                    NavigationLeaf(
                        label=_optional_str(node.get("label")) or "",
                        slug=_optional_str(slug) or "",
                    )
                )
            case _:
                msg = (
                    f"Navigation node at {path} needs either an 'items' list "
                    "or a 'slug'."
                )
                raise MalformedEntryError(path, msg)
    return tuple(items)


__all__ = ["load_site_descriptor"]
