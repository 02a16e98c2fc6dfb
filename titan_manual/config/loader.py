"""Load the manual build configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .models import BuildConfig, BuildConfigError, PandocOptions


def _optional_path(value: object | None, fallback: Path) -> Path:
    """Return ``value`` as a Path, or ``fallback`` when unset."""
    if value is None or value == "":
        return fallback
    return Path(str(value))


def _optional_str(value: object | None, fallback: str) -> str:
    """Return a stripped string value, or ``fallback`` when unset or empty."""
    if value is None:
        return fallback
    text = str(value).strip()
    return text or fallback


def _version_str(value: object | None, fallback: str) -> str:
    """Return the manual version, rejecting YAML numbers such as ``12.10``."""
    if value is None:
        return fallback
    if not isinstance(value, str):
        msg = (
            f"'version' must be a quoted string (got {value!r}); "
            "write it as version: \"12.10\"."
        )
        raise BuildConfigError(msg)
    return _optional_str(value, fallback)


def _as_mapping(value: object | None, *, section: str) -> typ.Mapping[str, typ.Any]:
    """Return ``value`` as a mapping, treating an empty section as ``{}``."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        msg = f"'{section}' must be a mapping."
        raise BuildConfigError(msg)
    return value


def _build_pandoc_options(payload: typ.Mapping[str, typ.Any]) -> PandocOptions:
    """Build PandocOptions from the ``pandoc`` mapping, keeping defaults."""
    base = PandocOptions()
    return PandocOptions(
        executable=_optional_str(payload.get("executable"), base.executable),
        template=_optional_path(payload.get("template"), base.template),
        metadata_file=_optional_path(payload.get("metadata_file"), base.metadata_file),
        pdf_engine=_optional_str(payload.get("pdf_engine"), base.pdf_engine),
        highlight_style=_optional_str(payload.get("highlight_style"), base.highlight_style),
        output_dir=_optional_path(payload.get("output_dir"), base.output_dir),
        product=_optional_str(payload.get("product"), base.product),
    )


def load_build_config(path: Path | None = None, *, root: Path | None = None) -> BuildConfig:
    """Load the YAML configuration describing where the manual is built.

    Parameters
    ----------
    path : Path or None, optional
        Configuration file. ``None`` returns the built-in defaults, which
        match the repository layout (sidebar in ``../website``, pages in
        ``../docs``).
    root : Path or None, optional
        Directory relative paths are anchored at. Defaults to the directory
        holding ``path``, or the working directory when no file is given.

    Returns
    -------
    BuildConfig
        Parsed configuration with defaults applied.

    Raises
    ------
    FileNotFoundError
        If ``path`` is given but does not exist.
    BuildConfigError
        If the YAML is not a mapping, a section has the wrong shape, or
        ``version`` is not a quoted string.

    Examples
    --------
    >>> from titan_manual.config import load_build_config
    >>> load_build_config().version
    '12.0'
    """
    if path is None:
        return BuildConfig(root=root or Path())

    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise BuildConfigError(msg)

    defaults = _as_mapping(loaded.get("defaults"), section="defaults")
    pandoc = _as_mapping(loaded.get("pandoc"), section="pandoc")
    base = BuildConfig()

    return BuildConfig(
        root=root or path.parent,
        sidebar_path=_optional_path(defaults.get("sidebar_path"), base.sidebar_path),
        manifest_key=_optional_str(defaults.get("manifest_key"), base.manifest_key),
        docs_root=_optional_path(defaults.get("docs_root"), base.docs_root),
        asset_prefix=_optional_str(defaults.get("asset_prefix"), base.asset_prefix),
        staging_path=_optional_path(defaults.get("staging_path"), base.staging_path),
        version=_version_str(defaults.get("version"), base.version),
        pandoc=_build_pandoc_options(pandoc),
    )


__all__ = ["load_build_config"]
