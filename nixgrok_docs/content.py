"""Index Starlight content documents by slug and report dangling references.

The site framework resolves sidebar slugs against ``src/content/docs`` and
fails its own build when one is missing. :class:`ContentIndex` mirrors that
lookup locally so ``sitenav check --content-dir`` can report every dangling
slug at once, before the framework build starts.
"""

from __future__ import annotations

import re
import typing as typ
from pathlib import Path

from ._constants import CONTENT_EXTENSIONS
from .config import DanglingSlugError, iter_leaves

if typ.TYPE_CHECKING:
    from .config import SiteConfiguration


_SEGMENT_STRIP = re.compile(r"[^\w\- ]")


def _slugify_segment(segment: str) -> str:
    """Slugify one path segment the way Starlight derives document ids."""
    return _SEGMENT_STRIP.sub("", segment.lower()).replace(" ", "-")


def _slug_for(path: Path, root: Path) -> str:
    """Return the content slug for ``path`` relative to ``root``.

    Each segment is lowercased, stripped of punctuation other than ``-`` and
    ``_``, and has spaces replaced by ``-``.
    """
    relative = path.relative_to(root).with_suffix("")
    if relative.name == "index" and relative.parent != Path():
        relative = relative.parent
    return "/".join(_slugify_segment(part) for part in relative.parts)


class ContentIndex:
    """Set of slugs backed by a content document."""

    def __init__(self, slugs: typ.Iterable[str]) -> None:
        self.slugs = frozenset(slugs)

    @classmethod
    def from_directory(cls, root: Path) -> ContentIndex:
        """Scan ``root`` for markdown documents and index their slugs.

        Raises
        ------
        FileNotFoundError
            If ``root`` is not an existing directory.
        """
        if not root.is_dir():
            msg = f"Content directory '{root}' not found."
            raise FileNotFoundError(msg)
        return cls(
            _slug_for(path, root)
            for path in root.rglob("*")
            if path.is_file() and path.suffix.lower() in CONTENT_EXTENSIONS
        )

    def __contains__(self, slug: object) -> bool:
        return slug in self.slugs

    def __len__(self) -> int:
        return len(self.slugs)

    def missing(self, config: SiteConfiguration) -> list[tuple[str, str]]:
        """Return ``(path, slug)`` for leaves without a content document."""
        return [
            (path, leaf.slug)
            for path, leaf in iter_leaves(config.sidebar)
            if leaf.slug not in self.slugs
        ]


def ensure_content_exists(config: SiteConfiguration, root: Path) -> ContentIndex:
    """Raise :class:`DanglingSlugError` unless every slug has a document."""
    index = ContentIndex.from_directory(root)
    missing = index.missing(config)
    if missing:
        raise DanglingSlugError(missing)
    return index


__all__ = ["ContentIndex", "ensure_content_exists"]
