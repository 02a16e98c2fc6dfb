"""Common literal values used across titan_manual.

These constants keep the repository-relative paths and renderer defaults in
one place so the configuration loader, CLI, and tests agree on them.

Examples
--------
>>> from titan_manual import _constants
>>> _constants.DEFAULT_VERSION
'12.0'
>>> _constants.PDF_FILENAME_TEMPLATE.format(
...     isodate="2020-01-02 03-04-05", label="Titan 12.0", date="02 January 2020"
... )
'2020-01-02 03-04-05 Titan 12.0 Manual 02 January 2020.pdf'
"""

from pathlib import Path

DEFAULT_VERSION = "12.0"
DEFAULT_PRODUCT = "Titan"

DEFAULT_SIDEBAR_PATH = Path("../website/sidebars.json")
DEFAULT_MANIFEST_KEY = "docs"
DEFAULT_DOCS_ROOT = Path("../docs")
DEFAULT_ASSET_PREFIX = "../website/static"
DEFAULT_STAGING_PATH = Path("output/pdf.md")

DEFAULT_PANDOC = "pandoc"
DEFAULT_TEMPLATE = Path("PDF/eisvogel_avo.latex")
DEFAULT_METADATA_FILE = Path("PDF/header.yaml")
DEFAULT_PDF_ENGINE = "xelatex"
DEFAULT_HIGHLIGHT_STYLE = "kate"
DEFAULT_OUTPUT_DIR = Path("output")

DATE_FORMAT = "%d %B %Y"
ISODATE_FORMAT = "%Y-%m-%d %H-%M-%S"
PDF_FILENAME_TEMPLATE = "{isodate} {label} Manual {date}.pdf"
