"""Cyclopts CLI entrypoint for the documentation site navigation.

The ``sitenav`` console script defined here renders ``astro.config.mjs`` from
the navigation descriptor, validates the descriptor (optionally against the
Starlight content directory), and prints the sidebar tree. Every command uses
the embedded descriptor unless ``--config`` points at a YAML descriptor.

Examples
--------
Regenerate the Astro config for the docs site:

>>> from nixgrok_docs.cli import main
>>> main()  # doctest: +SKIP

Check that every sidebar slug has a content document:

>>> from nixgrok_docs.cli import app
>>> app(["check", "--content-dir", "docs/src/content/docs"])  # doctest: +SKIP
"""

from __future__ import annotations

import json
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import DEFAULT_ASTRO_CONFIG
from .astro_config import AstroConfigWriter, sidebar_entries
from .config import iter_leaves, load_site_descriptor
from .content import ensure_content_exists
from .descriptor import build

if typ.TYPE_CHECKING:
    from .config import SiteConfiguration

app = App(name="sitenav", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _load(config: Path | None) -> SiteConfiguration:
    """Return the YAML descriptor at ``config`` or the embedded one."""
    if config is None:
        return build()
    return load_site_descriptor(config)


@app.command(help="Render astro.config.mjs from the navigation descriptor.")
def render(
    *,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to a YAML site descriptor")
    ] = None,
    output: typ.Annotated[
        Path, Parameter(help="Where to write astro.config.mjs")
    ] = DEFAULT_ASTRO_CONFIG,
) -> None:
    """Write the Astro configuration module for the documentation site.

    Parameters
    ----------
    config : Path or None, optional
        YAML descriptor to load; when ``None`` (default) the embedded
        descriptor is used.
    output : Path, optional
        Destination of the rendered module; defaults to
        ``docs/astro.config.mjs``.

    Raises
    ------
    SiteConfigError
        If the descriptor fails validation; nothing is written.
    """
    site = _load(config)
    written = AstroConfigWriter(site).run(output)
    print(f"wrote {_format_path(written)}")


@app.command(help="Validate the descriptor and optionally its content slugs.")
def check(
    *,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to a YAML site descriptor")
    ] = None,
    content_dir: typ.Annotated[
        Path | None,
        Parameter(help="Starlight content directory (src/content/docs)"),
    ] = None,
) -> None:
    """Validate the descriptor, failing on the first structural problem.

    When ``content_dir`` is given, every sidebar slug must also resolve to a
    markdown document below it; all dangling slugs are reported together.
    """
    site = _load(config)
    if content_dir is not None:
        ensure_content_exists(site, content_dir)
    entries = sum(1 for _ in iter_leaves(site.sidebar))
    print(f"ok: {len(site.groups)} groups, {entries} entries")


@app.command(help="Print the sidebar tree as JSON.")
def sidebar(
    *,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to a YAML site descriptor")
    ] = None,
) -> None:
    """Print the Starlight ``sidebar`` array in declaration order."""
    site = _load(config)
    print(json.dumps(sidebar_entries(site.sidebar), indent=2, ensure_ascii=False))


def main() -> None:
    """Invoke the Cyclopts application that powers the `sitenav` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
