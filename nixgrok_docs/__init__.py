"""Navigation and metadata descriptor for the ngrok NixOS service docs site.

This package declares the Starlight sidebar and page chrome as typed,
immutable data, validates it, and exposes the ``sitenav`` CLI that renders
``astro.config.mjs`` for the Astro build.

Exports
-------
- ``build``: Return the validated embedded site configuration.
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from nixgrok_docs import build
>>> len(build().groups)
8
"""

from __future__ import annotations

from .cli import app, main
from .descriptor import build

__all__ = ["app", "build", "main"]
