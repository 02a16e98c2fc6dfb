"""Cyclopts CLI entrypoint for building the Titan manual PDF.

The ``titan-manual`` console script assembles the documentation pages listed
in the website sidebar into ``output/pdf.md`` and renders it with pandoc.
Typical usage is running ``titan-manual`` from the ``parse`` directory of the
documentation repository, or ``titan-manual --section cues`` to typeset a
single section while editing it.

Examples
--------
Build the full manual for the default version:

>>> from titan_manual.cli import main
>>> main()  # doctest: +SKIP

Write only the assembled Markdown for one section:

>>> from titan_manual.cli import app
>>> app(["assemble", "--section", "cues"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .assembler import ManualAssembler
from .config import load_build_config

app = App(
    name="titan-manual",
    version="0.0.1",
    config=cyclopts.config.Env("INPUT_", command=False),  # type: ignore[unknown-argument]
)

LOG_FORMAT = "%(levelname)s: %(message)s"


def _display_path(path: Path, cwd: Path | None = None) -> str:
    """Return ``path`` as printed after a build, shortened below ``cwd``."""
    base = cwd or Path.cwd()
    if path.is_absolute() and path.is_relative_to(base):
        return str(path.relative_to(base))
    return str(path)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        force=True,
    )


def _build_assembler(config: Path | None, root: Path | None) -> ManualAssembler:
    return ManualAssembler(load_build_config(config, root=root))


@app.default
def pdf(
    *,
    manversion: typ.Annotated[
        str | None,
        Parameter(
            name=["--manversion", "-v"],
            help="Manual version to produce, e.g. 12.0 (default from config)",
        ),
    ] = None,
    section: typ.Annotated[
        str | None,
        Parameter(
            name=["--section", "-s"],
            help="Only output this sidebar section, e.g. synergy",
        ),
    ] = None,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to the build configuration YAML")
    ] = None,
    root: typ.Annotated[
        Path | None,
        Parameter(help="Directory relative paths are resolved from"),
    ] = None,
    verbose: typ.Annotated[bool, Parameter(help="Enable debug logging")] = False,
) -> None:
    """Assemble the manual and render it to PDF with pandoc.

    Parameters
    ----------
    manversion : str or None, optional
        Version stamped into the title page and PDF file name. ``None``
        (default) uses ``defaults.version`` from the configuration, which is
        ``12.0`` unless overridden.
    section : str or None, optional
        Case-insensitive sidebar section to restrict the PDF to. ``None``
        (default) includes every section.
    config : Path or None, optional
        Build configuration file; the built-in defaults apply when omitted.
    root : Path or None, optional
        Override the directory that configured relative paths start from.
    verbose : bool, optional
        Log debug detail in addition to progress and warnings.

    Returns
    -------
    None
        Writes the staging Markdown and the PDF, printing both paths.

    Raises
    ------
    RenderError
        If pandoc exits with a failure. The staging Markdown is kept.
    """
    _configure_logging(verbose)
    assembler = _build_assembler(config, root)
    result = assembler.run(version=manversion, section=section)
    staging = assembler.config.resolve(assembler.config.staging_path)
    print(f"wrote {_display_path(staging)}")
    print(f"wrote {_display_path(result.output_path)}")


@app.command(help="Write the assembled Markdown without running pandoc.")
def assemble(
    *,
    section: typ.Annotated[
        str | None,
        Parameter(name=["--section", "-s"], help="Only output this sidebar section"),
    ] = None,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to the build configuration YAML")
    ] = None,
    root: typ.Annotated[
        Path | None,
        Parameter(help="Directory relative paths are resolved from"),
    ] = None,
    verbose: typ.Annotated[bool, Parameter(help="Enable debug logging")] = False,
) -> None:
    """Assemble the selected pages into the staging Markdown file."""
    _configure_logging(verbose)
    path = _build_assembler(config, root).build_markdown(section)
    print(f"wrote {_display_path(path)}")


@app.command(help="List the sidebar sections and their page counts.")
def sections(
    *,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to the build configuration YAML")
    ] = None,
    root: typ.Annotated[
        Path | None,
        Parameter(help="Directory relative paths are resolved from"),
    ] = None,
) -> None:
    """Print each sidebar section in manual order."""
    manifest = _build_assembler(config, root).load_manifest()
    for name, identifiers in manifest.select():
        print(f"{name}: {len(identifiers)} pages")


def main() -> None:
    """Invoke the Cyclopts application behind the ``titan-manual`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
