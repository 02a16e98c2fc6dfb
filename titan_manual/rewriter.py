r"""Rewrite manual pages so they can be concatenated into one pandoc document.

Each page on the documentation site starts with a front-matter block and
references screenshots with site-absolute paths (``/img/cues/cue.png``). The
PDF build needs headings with stable anchors instead of front matter, and
image paths pandoc can resolve from the build directory.

Grammar
-------
Front matter
    A line that is exactly ``---`` opens a block, which closes at the next line
    that is exactly ``---`` (trailing blanks are allowed on both). Matching is
    non-greedy, so a later ``---`` horizontal rule never extends the block. A
    block qualifies when one of its lines reads ``title: <value>``; the key is
    case-insensitive and the value keeps word characters and spaces only.
    An opening quote is skipped, so ``title: "Cue Stacks"`` yields
    ``Cue Stacks``; the closing quote ends the value. A bare ``[\w ]*`` match
    would yield an empty title for quoted values. Only the first qualifying
    block is rewritten.
Images
    ``![alt](/path)`` where the target starts with exactly one ``/``.
    Protocol-relative (``//host/...``), external, and relative targets are left
    alone. ``alt`` may not contain ``]`` and the target may not contain ``)``.

Example
-------
>>> from titan_manual.rewriter import replace_front_matter, title_anchor
>>> title_anchor("cues/creating-a-cue.md")
'#cues-creating-a-cue.md'
>>> print(replace_front_matter("cues.md", "---\nid: cues\ntitle: Cues\n---\nBody"))
# {#cues.md}
\part{Cues}
Body
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from titan_manual._constants import DEFAULT_ASSET_PREFIX

LOGGER = logging.getLogger(__name__)

FRONT_MATTER_PATTERN = re.compile(
    r"^---[ \t]*\r?\n(?P<body>.*?)^---[ \t]*\r?$", re.MULTILINE | re.DOTALL
)
TITLE_PATTERN = re.compile(
    r"^title:[ \t]*[\"']?(?P<title>[\w ]*)", re.MULTILINE | re.IGNORECASE
)
IMAGE_PATTERN = re.compile(r"!\[(?P<alt>[^\]]*)\]\(/(?!/)(?P<src>[^)]*)\)")


def title_anchor(filename: str) -> str:
    """Return the heading anchor for ``filename``.

    Only the first ``/`` is replaced, so ``a/b/c.md`` becomes ``#a-b/c.md``.
    """
    return "#" + filename.replace("/", "-", 1)


def _heading_for(filename: str, title: str) -> str:
    anchor = title_anchor(filename)
    if "/" in filename:
        # sub page: "# Creating a Cue {#cues-creating-a-cue.md}"
        return f"# {title} {{{anchor}}}"
    # section page: anchor heading followed by a LaTeX part marker
    return f"# {{{anchor}}}\n\\part{{{title}}}"


def replace_front_matter(filename: str, content: str) -> str:
    """Replace the first titled front-matter block with a heading.

    Parameters
    ----------
    filename : str
        Document path relative to the docs root, including the ``.md``
        extension, e.g. ``cues/creating-a-cue.md``. A ``/`` marks a sub page.
    content : str
        Raw Markdown text of the document.

    Returns
    -------
    str
        ``content`` with the block replaced, or unchanged when no block
        carries a ``title`` line.
    """
    for block in FRONT_MATTER_PATTERN.finditer(content):
        title_match = TITLE_PATTERN.search(block.group("body"))
        if title_match is None:
            continue
        title = title_match.group("title").rstrip()
        heading = _heading_for(filename, title)
        return content[: block.start()] + heading + content[block.end() :]
    return content


def replace_image_paths(
    filename: str,
    content: str,
    *,
    asset_prefix: str = DEFAULT_ASSET_PREFIX,
    base_dir: Path | None = None,
) -> str:
    """Rewrite site-absolute image targets to paths under ``asset_prefix``.

    Parameters
    ----------
    filename : str
        Document path used to label warnings.
    content : str
        Markdown text, normally after :func:`replace_front_matter`.
    asset_prefix : str, optional
        Prefix substituted for the leading ``/`` of each target; defaults to
        ``../website/static``.
    base_dir : Path, optional
        Directory the rewritten targets are resolved against when checking
        that the image exists; defaults to the working directory.

    Returns
    -------
    str
        Text with every matching reference rewritten. References whose image
        is missing are removed; references without alt text are kept. Both
        cases log a warning.
    """
    prefix = asset_prefix.rstrip("/")
    root = base_dir if base_dir is not None else Path()

    def _rewrite(match: re.Match[str]) -> str:
        alt = match.group("alt")
        src = f"{prefix}/{match.group('src')}"
        if not (root / src).exists():
            LOGGER.warning("%s: Image '%s' not found", filename, src)
            return ""
        if not alt:
            LOGGER.warning("%s: No alt text set for '%s'", filename, src)
        return f"![{alt}]({src})"

    return IMAGE_PATTERN.sub(_rewrite, content)


__all__ = [
    "FRONT_MATTER_PATTERN",
    "IMAGE_PATTERN",
    "TITLE_PATTERN",
    "replace_front_matter",
    "replace_image_paths",
    "title_anchor",
]
