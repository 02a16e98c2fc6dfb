"""Build the Titan user manual PDF from the documentation website sources.

This package exposes the CLI entry points used by ``titan-manual`` to assemble
the sidebar-ordered Markdown pages into one document and typeset it with
pandoc.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``ManualAssembler``: Library entry point for scripted builds.

Examples
--------
>>> from titan_manual import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .assembler import ManualAssembler
from .cli import app, main

__all__ = ["ManualAssembler", "app", "main"]
