"""Common literal values used across nixgrok_docs.

These constants keep the slug convention, content file suffixes and default
paths centralized so the validator, content index, CLI and tests import the
same values without drifting.

Examples
--------
>>> from nixgrok_docs import _constants
>>> bool(_constants.SLUG_PATTERN.match("config/basic"))
True
>>> bool(_constants.SLUG_PATTERN.match("/config/basic"))
False
"""

import re
from pathlib import Path

SLUG_PATTERN = re.compile(r"^[a-z0-9][a-z0-9._-]*(?:/[a-z0-9][a-z0-9._-]*)*$")
CONTENT_EXTENSIONS = (".md", ".mdx", ".mdoc")
STARLIGHT_INTEGRATION = "@astrojs/starlight"
DEFAULT_ASTRO_CONFIG = Path("docs/astro.config.mjs")
