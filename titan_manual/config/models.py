"""Typed dataclasses describing the manual build configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from titan_manual._constants import (
    DEFAULT_ASSET_PREFIX,
    DEFAULT_DOCS_ROOT,
    DEFAULT_HIGHLIGHT_STYLE,
    DEFAULT_MANIFEST_KEY,
    DEFAULT_METADATA_FILE,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_PANDOC,
    DEFAULT_PDF_ENGINE,
    DEFAULT_PRODUCT,
    DEFAULT_SIDEBAR_PATH,
    DEFAULT_STAGING_PATH,
    DEFAULT_TEMPLATE,
    DEFAULT_VERSION,
)


class BuildConfigError(ValueError):
    """Raised when the build configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class PandocOptions:
    """Settings passed through to the pandoc invocation.

    Attributes
    ----------
    executable : str
        Name or path of the pandoc binary.
    template : Path
        LaTeX template given to ``--template``.
    metadata_file : Path
        YAML metadata given to ``--metadata-file``.
    pdf_engine : str
        Engine selected with ``--pdf-engine``.
    highlight_style : str
        Code highlighting style given to ``--highlight-style``.
    output_dir : Path
        Directory the PDF is written into.
    product : str
        Product name prefixed to the version in titles and file names.
    """

    executable: str = DEFAULT_PANDOC
    template: Path = DEFAULT_TEMPLATE
    metadata_file: Path = DEFAULT_METADATA_FILE
    pdf_engine: str = DEFAULT_PDF_ENGINE
    highlight_style: str = DEFAULT_HIGHLIGHT_STYLE
    output_dir: Path = DEFAULT_OUTPUT_DIR
    product: str = DEFAULT_PRODUCT


@dc.dataclass(slots=True)
class BuildConfig:
    """Where the manual sources live and where build artifacts go.

    Every path is relative to ``root`` unless already absolute; use
    :meth:`resolve` to obtain the path on disk.
    """

    root: Path = dc.field(default_factory=Path)
    sidebar_path: Path = DEFAULT_SIDEBAR_PATH
    manifest_key: str = DEFAULT_MANIFEST_KEY
    docs_root: Path = DEFAULT_DOCS_ROOT
    asset_prefix: str = DEFAULT_ASSET_PREFIX
    staging_path: Path = DEFAULT_STAGING_PATH
    version: str = DEFAULT_VERSION
    pandoc: PandocOptions = dc.field(default_factory=PandocOptions)

    def resolve(self, path: Path) -> Path:
        """Return ``path`` anchored at :attr:`root`."""
        return path if path.is_absolute() else self.root / path


__all__ = ["BuildConfig", "BuildConfigError", "PandocOptions"]
