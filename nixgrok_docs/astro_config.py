"""Export a site configuration in the shape the Starlight integration expects.

:func:`starlight_options` returns the options mapping passed to
``starlight({...})``, and :func:`astro_config` wraps it in the
``{integrations: [...]}`` envelope accepted by ``defineConfig``.
:class:`AstroConfigWriter` renders the same options into an
``astro.config.mjs`` module with Jinja2 so the Astro build consumes the
descriptor without hand-editing JavaScript.

>>> from pathlib import Path
>>> from nixgrok_docs.descriptor import build
>>> writer = AstroConfigWriter(build())
>>> writer.run(Path("docs/astro.config.mjs"))  # doctest: +SKIP
PosixPath('docs/astro.config.mjs')
"""

from __future__ import annotations

import json
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from ._constants import STARLIGHT_INTEGRATION
from .config import NavigationGroup, NavigationLeaf

if typ.TYPE_CHECKING:
    from .config import NavItem, SiteConfiguration


def starlight_options(config: SiteConfiguration) -> dict[str, typ.Any]:
    """Return the Starlight integration options for ``config``.

    Keys follow the integration's option names (``customCss``) and sidebar
    items keep declaration order.
    """
    metadata = config.metadata
    return {
        "title": metadata.title,
        "description": metadata.description,
        "social": metadata.social_links,
        "logo": {"src": metadata.logo.src},
        "customCss": list(metadata.custom_css),
        "sidebar": sidebar_entries(config.sidebar),
    }


def astro_config(config: SiteConfiguration) -> dict[str, typ.Any]:
    """Return the ``defineConfig`` payload wrapping the Starlight options."""
    return {
        "integrations": [
            {"name": STARLIGHT_INTEGRATION, "options": starlight_options(config)}
        ]
    }


def sidebar_entries(items: typ.Iterable[NavItem]) -> list[dict[str, typ.Any]]:
    """Convert sidebar nodes into ``{label, items}`` / ``{label, slug}`` dicts."""
    entries: list[dict[str, typ.Any]] = []
    for item in items:
        match item:
            case NavigationGroup():
                entries.append(
                    {"label": item.label, "items": sidebar_entries(item.items)}
                )
            case NavigationLeaf():
                entries.append({"label": item.label, "slug": item.slug})
    return entries


def _js_literal(value: object) -> str:
    """Encode ``value`` as a JavaScript literal."""
    return json.dumps(value, ensure_ascii=False)


class AstroConfigWriter:
    """Render ``astro.config.mjs`` from a site configuration."""

    def __init__(
        self, config: SiteConfiguration, *, templates_dir: Path | None = None
    ) -> None:
        """Initialize the writer and Jinja environment.

        Parameters
        ----------
        config : SiteConfiguration
            Validated configuration, typically from
            :func:`nixgrok_docs.descriptor.build`.
        templates_dir : Path, optional
            Directory containing ``astro.config.mjs.jinja``. Defaults to the
            ``nixgrok_docs/templates`` directory when ``None``.
        """
        self.config = config
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(self.templates_dir),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters["js"] = _js_literal
        self.template = self.env.get_template("astro.config.mjs.jinja")

    def render(self) -> str:
        """Return the rendered module source."""
        options = starlight_options(self.config)
        source = self.template.render(
            integration=STARLIGHT_INTEGRATION, options=options
        )
        if not source.endswith("\n"):
            source += "\n"
        return source

    def run(self, output_path: Path) -> Path:
        """Write the rendered module to ``output_path`` and return it."""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render(), encoding="utf-8")
        return output_path


__all__ = [
    "AstroConfigWriter",
    "astro_config",
    "sidebar_entries",
    "starlight_options",
]
