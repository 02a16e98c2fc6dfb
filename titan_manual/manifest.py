"""Load the website sidebar that defines the order of the manual.

The sidebar maps section names to the ordered list of page identifiers shown
on the documentation site, for example::

    {"docs": {"Introduction": ["intro"], "Cues": ["cues", "cues/creating-a-cue"]}}

The PDF follows exactly that order. Sidebars may be JSON (the site generator's
``sidebars.json``) or YAML; subcategory objects are flattened into their ids.

Example
-------
>>> from titan_manual.manifest import Manifest
>>> manifest = Manifest({"Intro": ["a"], "Cues": ["b", "c"]})
>>> manifest.identifiers("cues")
['b', 'c']
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import json
import typing as typ

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from titan_manual._constants import DEFAULT_MANIFEST_KEY

if typ.TYPE_CHECKING:
    from pathlib import Path

YAML_SUFFIXES = (".yaml", ".yml")


class ManifestError(ValueError):
    """Raised when the sidebar manifest cannot be read or has the wrong shape."""


@dc.dataclass(slots=True)
class Manifest:
    """Ordered mapping of section names to page identifiers.

    Attributes
    ----------
    sections : dict[str, list[str]]
        Section name to identifiers (relative paths without ``.md``), in
        sidebar order.
    """

    sections: dict[str, list[str]] = dc.field(default_factory=dict)

    def select(
        self, section: str | None = None
    ) -> cabc.Iterator[tuple[str, list[str]]]:
        """Yield ``(name, identifiers)`` pairs, optionally filtered by name.

        The filter is an exact, case-insensitive match; a filter that matches
        nothing yields nothing.
        """
        wanted = section.lower() if section else None
        for name, identifiers in self.sections.items():
            if wanted is None or name.lower() == wanted:
                yield name, identifiers

    def identifiers(self, section: str | None = None) -> list[str]:
        """Return the selected identifiers in order, duplicates included."""
        return [
            identifier
            for _name, identifiers in self.select(section)
            for identifier in identifiers
        ]


def _flatten_entries(section: str, entries: object) -> list[str]:
    """Return identifiers for a section, expanding subcategory objects."""
    if not isinstance(entries, list):
        msg = f"Section '{section}' must list page identifiers."
        raise ManifestError(msg)

    identifiers: list[str] = []
    for entry in entries:
        match entry:
            case str():
                identifiers.append(entry)
            case {"ids": list() as ids}:
                identifiers.extend(_flatten_entries(section, ids))
            case _:
                msg = f"Section '{section}' has an unsupported entry: {entry!r}"
                raise ManifestError(msg)
    return identifiers


def _read_document(path: Path) -> object:
    text = path.read_text(encoding="utf-8")
    try:
        if path.suffix.lower() in YAML_SUFFIXES:
            loader = YAML(typ="safe")
            loader.version = (1, 2)
            return loader.load(text)
        return json.loads(text)
    except (json.JSONDecodeError, YAMLError) as exc:
        msg = f"Unable to parse sidebar manifest '{path}': {exc}"
        raise ManifestError(msg) from exc


def load_manifest(path: Path, *, key: str = DEFAULT_MANIFEST_KEY) -> Manifest:
    """Load the sidebar at ``path`` and return the sections under ``key``.

    Parameters
    ----------
    path : Path
        Sidebar file; ``.yaml``/``.yml`` files are read as YAML, anything
        else as JSON.
    key : str, optional
        Top-level key holding the section mapping; defaults to ``"docs"``.

    Returns
    -------
    Manifest
        Sections and identifiers in file order.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    ManifestError
        If the file cannot be parsed or ``key`` does not hold a mapping of
        section names to identifier lists.
    """
    if not path.exists():
        msg = f"Sidebar manifest '{path}' not found."
        raise FileNotFoundError(msg)

    loaded = _read_document(path)
    if not isinstance(loaded, dict):
        msg = "Top-level sidebar structure must be a mapping."
        raise ManifestError(msg)

    raw_sections = loaded.get(key)
    if not isinstance(raw_sections, dict):
        msg = f"Sidebar manifest '{path}' has no '{key}' mapping."
        raise ManifestError(msg)

    sections = {
        str(name): _flatten_entries(str(name), entries)
        for name, entries in raw_sections.items()
    }
    return Manifest(sections=sections)


__all__ = ["Manifest", "ManifestError", "load_manifest"]
