"""Typed site configuration for the documentation sidebar and page chrome.

This subpackage defines the immutable dataclasses that describe the site
metadata and navigation tree (:class:`SiteConfiguration`,
:class:`NavigationGroup`, :class:`NavigationLeaf`), the fail-fast validator
shared by every construction path, and :func:`load_site_descriptor`, which
reads an alternative descriptor from YAML.

Examples
--------
>>> from pathlib import Path
>>> from nixgrok_docs.config import load_site_descriptor
>>> site = load_site_descriptor(Path("site.yaml"))  # doctest: +SKIP
>>> [group.label for group in site.groups]  # doctest: +SKIP
['Getting Started', 'Configuration']
"""

from .loader import load_site_descriptor
from .models import (
    DanglingSlugError,
    DuplicateSlugError,
    LogoConfig,
    MalformedEntryError,
    NavigationGroup,
    NavigationLeaf,
    NavItem,
    SiteConfigError,
    SiteConfiguration,
    SiteMetadata,
    SocialLink,
)
from .validation import iter_leaves, validate_site_configuration

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
    "iter_leaves",
    "load_site_descriptor",
    "validate_site_configuration",
]
