"""Embedded navigation descriptor for the ngrok NixOS service documentation.

The literals below declare the site chrome and sidebar consumed by the
Starlight integration. Group and entry order is rendering order. :func:`build`
assembles them into a validated :class:`SiteConfiguration`; no files are read
and repeated calls return equal values.

>>> from nixgrok_docs.descriptor import build
>>> site = build()
>>> site.groups[0].label
'Getting Started'
>>> [leaf.slug for leaf in site.groups[0].items]
['introduction', 'quick-start', 'installation']
"""

from __future__ import annotations

from .config import (
    LogoConfig,
    NavigationGroup,
    NavigationLeaf,
    SiteConfiguration,
    SiteMetadata,
    SocialLink,
    validate_site_configuration,
)

TITLE = "ngrok NixOS Service"
DESCRIPTION = "Comprehensive documentation for the ngrok NixOS service module"
LOGO_SRC = "./src/assets/logo.svg"
SOCIAL: tuple[tuple[str, str], ...] = (
    ("github", "https://github.com/yourusername/nixgrok"),
)
CUSTOM_CSS: tuple[str, ...] = ("./src/styles/custom.css",)

SIDEBAR: tuple[tuple[str, tuple[tuple[str, str], ...]], ...] = (
    (
        "Getting Started",
        (
            ("Introduction", "introduction"),
            ("Quick Start", "quick-start"),
            ("Installation", "installation"),
        ),
    ),
    (
        "Configuration",
        (
            ("Basic Configuration", "config/basic"),
            ("Advanced Configuration", "config/advanced"),
            ("Security Options", "config/security"),
            ("Performance Tuning", "config/performance"),
        ),
    ),
    (
        "Authentication",
        (
            ("HTTP Basic Auth", "auth/basic"),
            ("OAuth Integration", "auth/oauth"),
            ("OIDC Support", "auth/oidc"),
            ("Webhook Verification", "auth/webhooks"),
            ("Mutual TLS", "auth/mtls"),
        ),
    ),
    (
        "Examples",
        (
            ("Basic Setup", "examples/basic"),
            ("Multi-Service", "examples/advanced"),
            ("OAuth Protected", "examples/oauth"),
            ("Enterprise Setup", "examples/enterprise"),
        ),
    ),
    (
        "Flake-Parts",
        (
            ("Overview", "flake-parts/overview"),
            ("Templates", "flake-parts/templates"),
            ("Modules", "flake-parts/modules"),
            ("Usage Patterns", "flake-parts/usage"),
        ),
    ),
    (
        "Testing",
        (
            ("VM Testing", "testing/vm"),
            ("Cross-Platform", "testing/cross-platform"),
            ("Continuous Integration", "testing/ci"),
        ),
    ),
    (
        "Deployment",
        (
            ("Production Setup", "deployment/production"),
            ("Monitoring", "deployment/monitoring"),
            ("Security Hardening", "deployment/security"),
            ("Troubleshooting", "deployment/troubleshooting"),
        ),
    ),
    (
        "Reference",
        (
            ("Configuration Options", "reference/options"),
            ("Service Management", "reference/services"),
            ("CLI Commands", "reference/cli"),
            ("API Reference", "reference/api"),
        ),
    ),
)


def build() -> SiteConfiguration:
    """Return the validated site configuration declared in this module.

    Raises
    ------
    SiteConfigError
        If any declared label or slug is empty or malformed, or a slug is
        declared twice.
    """
    metadata = SiteMetadata(
        title=TITLE,
        description=DESCRIPTION,
        logo=LogoConfig(src=LOGO_SRC),
        social=tuple(SocialLink(platform, href) for platform, href in SOCIAL),
        custom_css=CUSTOM_CSS,
    )
    sidebar = tuple(
        NavigationGroup(
            label=label,
            items=tuple(NavigationLeaf(label=name, slug=slug) for name, slug in leaves),
        )
        for label, leaves in SIDEBAR
    )
    return validate_site_configuration(
        SiteConfiguration(metadata=metadata, sidebar=sidebar)
    )


__all__ = ["build"]
