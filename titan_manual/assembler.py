"""Assemble the manual pages named by the sidebar into one Markdown file.

:class:`ManualAssembler` reads the sidebar manifest once, formats every page
in sidebar order (optionally limited to one section), writes the result to
the staging file, and hands that file to :class:`PandocRenderer`.

Example
-------
>>> from titan_manual.config import load_build_config
>>> from titan_manual.assembler import ManualAssembler
>>> assembler = ManualAssembler(load_build_config())  # doctest: +SKIP
>>> assembler.run(section="cues").output_path  # doctest: +SKIP
PosixPath('output/2020-01-02 03-04-05 Titan 12.0 Manual 02 January 2020.pdf')
"""

from __future__ import annotations

import logging
import typing as typ

from titan_manual.formatter import DocumentFormatter
from titan_manual.manifest import Manifest, load_manifest
from titan_manual.renderer import PandocRenderer

if typ.TYPE_CHECKING:
    from pathlib import Path

    from titan_manual.config import BuildConfig
    from titan_manual.renderer import RenderResult

LOGGER = logging.getLogger(__name__)

MARKDOWN_SUFFIX = ".md"


class ManualAssembler:
    """Drive formatting and rendering for one build configuration."""

    def __init__(
        self,
        config: BuildConfig,
        *,
        renderer: PandocRenderer | None = None,
    ) -> None:
        self.config = config
        self.formatter = DocumentFormatter(
            config.resolve(config.docs_root),
            asset_prefix=config.asset_prefix,
            base_dir=config.root,
        )
        self.renderer = renderer or PandocRenderer(config.pandoc, cwd=config.root)

    def load_manifest(self) -> Manifest:
        """Read the sidebar manifest named by the configuration."""
        return load_manifest(
            self.config.resolve(self.config.sidebar_path),
            key=self.config.manifest_key,
        )

    def assemble(self, section: str | None = None) -> str:
        """Return the concatenated Markdown for the selected sections.

        Parameters
        ----------
        section : str or None, optional
            Case-insensitive section name; ``None`` includes every section.

        Returns
        -------
        str
            Formatted pages in sidebar order. Empty when ``section`` matches
            nothing.
        """
        manifest = self.load_manifest()
        parts: list[str] = []
        count = 0
        matched = False
        for name, identifiers in manifest.select(section):
            matched = True
            LOGGER.info("Adding section %s (%d pages)", name, len(identifiers))
            for identifier in identifiers:
                parts.append(self.formatter.format(identifier + MARKDOWN_SUFFIX))
                count += 1
        if section and not matched:
            LOGGER.warning("No pages matched section '%s'", section)
        LOGGER.debug("Formatted %d pages", count)
        return "".join(parts)

    def write_staging(self, markdown: str) -> Path:
        """Write ``markdown`` to the staging file and return its path on disk."""
        path = self.config.resolve(self.config.staging_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(markdown, encoding="utf-8")
        return path

    def build_markdown(self, section: str | None = None) -> Path:
        """Assemble the selection and write it, without rendering."""
        return self.write_staging(self.assemble(section))

    def run(
        self, version: str | None = None, section: str | None = None
    ) -> RenderResult:
        """Assemble, write the staging file, and render it to PDF.

        Raises
        ------
        FileNotFoundError
            If the sidebar manifest is missing.
        ManifestError
            If the sidebar manifest cannot be parsed.
        RenderError
            If pandoc fails; the staging file has already been written.
        """
        self.build_markdown(section)
        return self.renderer.render(
            self.config.staging_path, version or self.config.version
        )


__all__ = ["MARKDOWN_SUFFIX", "ManualAssembler"]
