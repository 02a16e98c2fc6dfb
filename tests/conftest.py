"""Shared fixtures that lay out a miniature documentation repository.

The layout mirrors the real repository: pages under ``docs/``, the sidebar and
static assets under ``website/``, and the build running from ``parse/`` so the
default relative paths (``../docs``, ``../website/static``) resolve.
"""

from __future__ import annotations

import json
import typing as typ

import pytest

from titan_manual.config import BuildConfig

if typ.TYPE_CHECKING:
    from pathlib import Path

RepoFactory = typ.Callable[..., BuildConfig]

INTRO_PAGE = "---\nid: intro\ntitle: Introduction\n---\n\nWelcome to Titan.\n"
CUES_PAGE = (
    "---\nid: cues\ntitle: Cues\n---\n\n"
    "![Cue list](/img/cues/cue-list.png)\n"
)
CREATING_A_CUE_PAGE = (
    "---\nid: creating-a-cue\ntitle: Creating a Cue\nsidebar_label: Create\n---\n\n"
    "Press Record.\n\n"
    "![](/img/cues/record.png)\n"
    "![Missing screenshot](/img/cues/missing.png)\n"
)


def _build_repo(
    root: Path,
    sidebar: dict[str, typ.Any],
    pages: dict[str, str],
    images: typ.Iterable[str] = (),
) -> BuildConfig:
    website = root / "website"
    (website / "static").mkdir(parents=True, exist_ok=True)
    (website / "sidebars.json").write_text(json.dumps(sidebar), encoding="utf-8")
    for identifier, content in pages.items():
        page = root / "docs" / f"{identifier}.md"
        page.parent.mkdir(parents=True, exist_ok=True)
        page.write_text(content, encoding="utf-8")
    for image in images:
        target = website / "static" / image
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(b"\x89PNG")
    build_dir = root / "parse"
    build_dir.mkdir(exist_ok=True)
    return BuildConfig(root=build_dir)


@pytest.fixture
def make_repo(tmp_path: Path) -> RepoFactory:
    """Return a factory that writes a docs tree and returns its BuildConfig."""

    def _factory(
        sidebar: dict[str, typ.Any],
        pages: dict[str, str],
        images: typ.Iterable[str] = (),
    ) -> BuildConfig:
        return _build_repo(tmp_path, sidebar, pages, images)

    return _factory


@pytest.fixture
def manual_repo(make_repo: RepoFactory) -> BuildConfig:
    """Return a BuildConfig for a small manual with two sections."""
    return make_repo(
        {
            "docs": {
                "Introduction": ["intro"],
                "Cues": ["cues", "cues/creating-a-cue"],
            }
        },
        {
            "intro": INTRO_PAGE,
            "cues": CUES_PAGE,
            "cues/creating-a-cue": CREATING_A_CUE_PAGE,
        },
        images=["img/cues/cue-list.png", "img/cues/record.png"],
    )
