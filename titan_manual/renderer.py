"""Invoke pandoc to typeset the assembled manual as a PDF.

The command mirrors the manual's historical build: the Eisvogel-derived LaTeX
template, a shared metadata file, a table of contents, and title page fields
(date, footers, subtitle) computed at render time. The process runs
synchronously without a shell; a non-zero exit is raised as
:class:`RenderError` carrying the captured output.

Example
-------
>>> import datetime as dt
>>> from titan_manual.config import PandocOptions
>>> from titan_manual.renderer import PandocRenderer
>>> renderer = PandocRenderer(PandocOptions())
>>> labels = renderer.build_labels("12.0", dt.datetime(2020, 1, 2, 3, 4, 5))
>>> labels.version_label
'Titan 12.0'
>>> renderer.output_path(labels).name
'2020-01-02 03-04-05 Titan 12.0 Manual 02 January 2020.pdf'
"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import logging
import subprocess
import time
import typing as typ
from pathlib import Path

from titan_manual._constants import DATE_FORMAT, ISODATE_FORMAT, PDF_FILENAME_TEMPLATE

if typ.TYPE_CHECKING:
    from titan_manual.config import PandocOptions

LOGGER = logging.getLogger(__name__)

Runner = typ.Callable[..., "subprocess.CompletedProcess[str]"]
Clock = typ.Callable[[], dt.datetime]


@dc.dataclass(slots=True, frozen=True)
class RenderLabels:
    """Date and version strings stamped into the PDF and its file name."""

    date: str
    isodate: str
    version_label: str


@dc.dataclass(slots=True)
class RenderResult:
    """Outcome of one pandoc invocation.

    Attributes
    ----------
    command : list[str]
        Arguments passed to the process.
    output_path : Path
        Where the PDF was (or would have been) written.
    returncode : int
        Exit status of pandoc.
    stdout : str
        Captured standard output.
    stderr : str
        Captured standard error.
    elapsed : float
        Wall-clock seconds spent waiting for pandoc.
    """

    command: list[str]
    output_path: Path
    returncode: int
    stdout: str = ""
    stderr: str = ""
    elapsed: float = 0.0

    @property
    def ok(self) -> bool:
        """Return ``True`` when pandoc exited successfully."""
        return self.returncode == 0


class RenderError(RuntimeError):
    """Raised when pandoc cannot be started or exits with a failure."""

    def __init__(self, message: str, result: RenderResult | None = None) -> None:
        super().__init__(message)
        self.result = result


class PandocRenderer:
    """Build and run the pandoc command for the manual."""

    def __init__(
        self,
        options: PandocOptions,
        *,
        cwd: Path | None = None,
        clock: Clock | None = None,
        runner: Runner | None = None,
    ) -> None:
        """Initialize the renderer.

        Parameters
        ----------
        options : PandocOptions
            Template, metadata, engine and naming settings.
        cwd : Path, optional
            Directory pandoc runs in; relative paths in ``options`` and the
            source path are interpreted from there. Defaults to the working
            directory.
        clock : callable, optional
            Returns the current time; injected by tests.
        runner : callable, optional
            ``subprocess.run`` compatible callable; injected by tests.
        """
        self.options = options
        self.cwd = cwd or Path()
        self._clock = clock or dt.datetime.now
        self._runner = runner or subprocess.run

    def build_labels(self, version: str, now: dt.datetime | None = None) -> RenderLabels:
        """Return the date and version labels for a render started at ``now``."""
        moment = now or self._clock()
        return RenderLabels(
            date=moment.strftime(DATE_FORMAT),
            isodate=moment.strftime(ISODATE_FORMAT),
            version_label=f"{self.options.product} {version}",
        )

    def output_path(self, labels: RenderLabels) -> Path:
        """Return the PDF path, relative to :attr:`cwd` unless configured absolute."""
        filename = PDF_FILENAME_TEMPLATE.format(
            isodate=labels.isodate, label=labels.version_label, date=labels.date
        )
        return self.options.output_dir / filename

    def build_command(self, source: Path, labels: RenderLabels) -> list[str]:
        """Return the pandoc argument list for ``source``."""
        opts = self.options
        return [
            opts.executable,
            "--template",
            str(opts.template),
            "-o",
            str(self.output_path(labels)),
            f"--pdf-engine={opts.pdf_engine}",
            "--highlight-style",
            opts.highlight_style,
            "--metadata-file",
            str(opts.metadata_file),
            "--toc",
            "-fmarkdown-implicit_figures",
            "--self-contained",
            "-M",
            f"date={labels.date}",
            "-M",
            f"footer-center={labels.date}",
            "-M",
            f"footer-left={labels.version_label} Manual",
            "-M",
            f"subtitle={labels.version_label}",
            str(source),
        ]

    def render(self, source: Path, version: str) -> RenderResult:
        """Render ``source`` to PDF, blocking until pandoc exits.

        Parameters
        ----------
        source : Path
            Assembled Markdown file, relative to :attr:`cwd` or absolute.
        version : str
            Manual version, e.g. ``"12.0"``.

        Returns
        -------
        RenderResult
            Command, output location, exit status, captured output, and
            elapsed time.

        Raises
        ------
        RenderError
            If pandoc is not installed or exits with a non-zero status.
        """
        LOGGER.info("Producing PDF")
        labels = self.build_labels(version)
        command = self.build_command(source, labels)
        output_path = self.cwd / self.output_path(labels)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        started = time.perf_counter()
        try:
            completed = self._runner(  # noqa: S603
                command,
                cwd=self.cwd,
                check=False,
                text=True,
                capture_output=True,
            )
        except FileNotFoundError as exc:
            msg = f"Unable to run '{self.options.executable}': {exc}"
            raise RenderError(msg) from exc
        elapsed = time.perf_counter() - started

        result = RenderResult(
            command=command,
            output_path=output_path,
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
            elapsed=elapsed,
        )
        if result.stderr.strip():
            LOGGER.warning("stderr: %s", result.stderr.strip())
        if not result.ok:
            msg = f"pandoc exited with status {result.returncode}"
            LOGGER.error("error: %s", msg)
            raise RenderError(msg, result)

        LOGGER.info("PDF produced in %.1fs", elapsed)
        return result


__all__ = [
    "PandocRenderer",
    "RenderError",
    "RenderLabels",
    "RenderResult",
]
