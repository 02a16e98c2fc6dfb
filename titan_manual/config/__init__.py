"""Load and validate the configuration for manual PDF builds.

This subpackage reads an optional ``manual.yaml`` file, merges it over the
built-in defaults that describe the documentation repository layout, and
returns a :class:`BuildConfig` consumed by the assembler and renderer.

Examples
--------
>>> from pathlib import Path
>>> from titan_manual.config import load_build_config
>>> config = load_build_config(Path("parse/manual.yaml"))  # doctest: +SKIP
>>> config.resolve(config.sidebar_path)  # doctest: +SKIP
PosixPath('parse/../website/sidebars.json')
"""

from .loader import load_build_config
from .models import BuildConfig, BuildConfigError, PandocOptions

__all__ = ["BuildConfig", "BuildConfigError", "PandocOptions", "load_build_config"]
