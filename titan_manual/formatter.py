"""Format a single manual page for inclusion in the assembled PDF source."""

from __future__ import annotations

import logging
from pathlib import Path

from titan_manual._constants import DEFAULT_ASSET_PREFIX
from titan_manual.rewriter import replace_front_matter, replace_image_paths

LOGGER = logging.getLogger(__name__)

PAGE_SEPARATOR = "\n\n"


class DocumentFormatter:
    """Read manual pages from ``docs_root`` and rewrite them for pandoc."""

    def __init__(
        self,
        docs_root: Path,
        *,
        asset_prefix: str = DEFAULT_ASSET_PREFIX,
        base_dir: Path | None = None,
    ) -> None:
        """Configure the formatter.

        Parameters
        ----------
        docs_root : Path
            Directory holding the Markdown sources, e.g. ``../docs``.
        asset_prefix : str, optional
            Relative root substituted into site-absolute image targets.
        base_dir : Path, optional
            Directory the rewritten image targets are checked against; this
            is the directory pandoc runs from.
        """
        self.docs_root = docs_root
        self.asset_prefix = asset_prefix
        self.base_dir = base_dir

    def format(self, filename: str) -> str:
        """Return the formatted Markdown for ``filename``.

        A missing source logs a warning and contributes an empty string, so
        the page is skipped rather than failing the build.
        """
        path = self.docs_root / filename
        if not path.exists():
            LOGGER.warning("%s: Not found", filename)
            return ""

        content = path.read_text(encoding="utf-8")
        content = replace_front_matter(filename, content)
        content = replace_image_paths(
            filename,
            content,
            asset_prefix=self.asset_prefix,
            base_dir=self.base_dir,
        )
        return content + PAGE_SEPARATOR


def format_markdown(
    docs_root: Path,
    filename: str,
    *,
    asset_prefix: str = DEFAULT_ASSET_PREFIX,
    base_dir: Path | None = None,
) -> str:
    """Format one page without keeping a :class:`DocumentFormatter` around."""
    formatter = DocumentFormatter(
        docs_root, asset_prefix=asset_prefix, base_dir=base_dir
    )
    return formatter.format(filename)


__all__ = ["PAGE_SEPARATOR", "DocumentFormatter", "format_markdown"]
