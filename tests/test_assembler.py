"""Tests for assembling the manual in sidebar order and handing it to pandoc."""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import pytest

from titan_manual.assembler import ManualAssembler
from titan_manual.config import BuildConfig
from titan_manual.manifest import ManifestError
from titan_manual.renderer import PandocRenderer, RenderError, RenderResult

if typ.TYPE_CHECKING:
    from pytest_mock import MockerFixture

SIMPLE_SIDEBAR = {"docs": {"intro": ["a"], "cues": ["b", "c"]}}
SIMPLE_PAGES = {"a": "Page A\n", "b": "Page B\n", "c": "Page C\n"}


@pytest.fixture
def simple_repo(make_repo: typ.Callable[..., BuildConfig]) -> BuildConfig:
    return make_repo(SIMPLE_SIDEBAR, SIMPLE_PAGES)


def _fake_renderer(mocker: MockerFixture) -> typ.Any:
    renderer = mocker.Mock(spec=PandocRenderer)
    renderer.render.return_value = RenderResult(
        command=["pandoc"], output_path=Path("output/manual.pdf"), returncode=0
    )
    return renderer


def test_assembles_every_section_in_order(simple_repo: BuildConfig) -> None:
    output = ManualAssembler(simple_repo).assemble()
    assert output == "Page A\n\n\nPage B\n\n\nPage C\n\n\n"


@pytest.mark.parametrize("section", ["cues", "CUES", "Cues"])
def test_section_filter_limits_output(simple_repo: BuildConfig, section: str) -> None:
    output = ManualAssembler(simple_repo).assemble(section)
    assert output == "Page B\n\n\nPage C\n\n\n"


def test_unmatched_section_produces_empty_output(
    simple_repo: BuildConfig, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.WARNING, logger="titan_manual.assembler"):
        output = ManualAssembler(simple_repo).assemble("synergy")

    assert output == ""
    assert "No pages matched section 'synergy'" in caplog.text


def test_duplicates_and_missing_pages(
    make_repo: typ.Callable[..., BuildConfig],
) -> None:
    config = make_repo(
        {"docs": {"one": ["a", "gone"], "two": ["a"]}}, {"a": "Page A\n"}
    )

    output = ManualAssembler(config).assemble()

    assert output == "Page A\n\n\nPage A\n\n\n"


def test_assembly_is_deterministic(manual_repo: BuildConfig) -> None:
    assembler = ManualAssembler(manual_repo)

    first = assembler.assemble()
    second = assembler.assemble()

    assert first == second
    assert first.index("\\part{Introduction}") < first.index("\\part{Cues}")
    assert first.index("\\part{Cues}") < first.index("# Creating a Cue")


def test_run_writes_staging_file_and_renders_once(
    manual_repo: BuildConfig, mocker: MockerFixture
) -> None:
    renderer = _fake_renderer(mocker)
    assembler = ManualAssembler(manual_repo, renderer=renderer)

    result = assembler.run(version="12.1", section="cues")

    staging = manual_repo.root / "output" / "pdf.md"
    text = staging.read_text(encoding="utf-8")
    assert text.startswith("# {#cues.md}\n\\part{Cues}\n")
    assert "Introduction" not in text
    renderer.render.assert_called_once_with(Path("output/pdf.md"), "12.1")
    assert result.output_path == Path("output/manual.pdf")


def test_run_defaults_to_configured_version(
    manual_repo: BuildConfig, mocker: MockerFixture
) -> None:
    renderer = _fake_renderer(mocker)

    ManualAssembler(manual_repo, renderer=renderer).run()

    renderer.render.assert_called_once_with(Path("output/pdf.md"), "12.0")


def test_run_renders_even_when_nothing_matches(
    simple_repo: BuildConfig, mocker: MockerFixture
) -> None:
    renderer = _fake_renderer(mocker)

    ManualAssembler(simple_repo, renderer=renderer).run(section="synergy")

    assert (simple_repo.root / "output" / "pdf.md").read_text(encoding="utf-8") == ""
    renderer.render.assert_called_once()


def test_missing_manifest_aborts_before_rendering(
    tmp_path: Path, mocker: MockerFixture
) -> None:
    renderer = _fake_renderer(mocker)
    config = BuildConfig(root=tmp_path / "parse")
    assembler = ManualAssembler(config, renderer=renderer)

    with pytest.raises(FileNotFoundError):
        assembler.run()

    renderer.render.assert_not_called()
    assert not (tmp_path / "parse" / "output" / "pdf.md").exists()


def test_malformed_manifest_is_fatal(
    simple_repo: BuildConfig, mocker: MockerFixture
) -> None:
    simple_repo.resolve(simple_repo.sidebar_path).write_text("{", encoding="utf-8")
    renderer = _fake_renderer(mocker)

    with pytest.raises(ManifestError):
        ManualAssembler(simple_repo, renderer=renderer).run()

    renderer.render.assert_not_called()


def test_render_failure_keeps_staging_file(
    simple_repo: BuildConfig, mocker: MockerFixture
) -> None:
    renderer = mocker.Mock(spec=PandocRenderer)
    renderer.render.side_effect = RenderError("pandoc exited with status 1")

    with pytest.raises(RenderError):
        ManualAssembler(simple_repo, renderer=renderer).run()

    staging = simple_repo.root / "output" / "pdf.md"
    assert staging.read_text(encoding="utf-8") == "Page A\n\n\nPage B\n\n\nPage C\n\n\n"
