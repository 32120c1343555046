#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clashview/report.py
"""Terminal reports for test runs.

:class:`TestRunReporter` prints one block per test run: a status badge and
the test title, then, for failed runs, the test input, the expected output,
the word diff of the actual output and any captured standard error.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Iterable, Optional

from clashview.diff.renderer import DiffStats, OutputDiffRenderer
from clashview.options import DiffOptions
from clashview.style import Stylesheet
from clashview.testcase import Success, TestRun, Timeout, UnableToRun

logger = logging.getLogger(__name__)


class TestRunReporter:
    """Write test run reports to a stream.

    Parameters
    ----------
    style : Stylesheet
        Stylesheet used for every part of the report
    stream : IO[str], optional
        Destination; defaults to ``sys.stdout`` at write time
    show_input : bool, default True
        Include the test input in reports of failed runs
    diff_options : DiffOptions, optional
        Options for the actual-output diff

    """

    __test__ = False

    def __init__(
        self,
        style: Stylesheet,
        stream: Optional[IO[str]] = None,
        show_input: bool = True,
        diff_options: Optional[DiffOptions] = None,
    ):
        """Initialize the reporter."""
        self.style = style
        self.stream = stream
        self.show_input = show_input
        self.diff_options = diff_options

    def _write(self, text: str) -> None:
        stream = self.stream or sys.stdout
        stream.write(text)
        stream.flush()

    def _section(self, title: str) -> None:
        self._write(f"{self.style.secondary_title(title)}\n")

    def badge(self, run: TestRun) -> str:
        """Return the painted status badge of ``run``."""
        result = run.result
        if isinstance(result, Success):
            return self.style.success(result.label)
        if isinstance(result, UnableToRun):
            return self.style.error(result.label)
        return self.style.failure(result.label)

    def report(self, run: TestRun) -> Optional[DiffStats]:
        """Write the report of one test run.

        Parameters
        ----------
        run : TestRun
            The run to report

        Returns
        -------
        DiffStats or None
            Statistics of the output diff, or None when no diff was written

        """
        self._write(f"{self.badge(run)} {run.testcase.styled_title(self.style)}\n")
        if run.is_successful:
            return None

        if self.show_input:
            self._section("===== INPUT =====")
            self._write(f"{run.testcase.styled_input(self.style)}\n")

        self._section("===== EXPECTED =====")
        self._write(f"{run.testcase.styled_output(self.style)}\n")

        if isinstance(run.result, UnableToRun):
            logger.debug("Test %d could not run: %s", run.testcase.index, run.result.error_msg)
            self._section("===== ERROR =====")
            self._write(f"{self.style.error(run.result.error_msg)}\n")
            return None

        self._section("===== ACTUAL =====")
        renderer = OutputDiffRenderer(self.style, stream=self.stream, options=self.diff_options)
        stats = renderer.render(run.expected, run.actual)

        if run.stderr:
            self._section("===== STDERR =====")
            self._write(f"{self.style.stderr(run.stderr.rstrip())}\n")
        if isinstance(run.result, Timeout):
            self._write(f"{self.style.dim('(timed out)')}\n")
        return stats

    def summary(self, runs: Iterable[TestRun]) -> bool:
        """Write the pass count of ``runs`` and return True when every run passed."""
        runs = list(runs)
        passed = sum(1 for run in runs if run.is_successful)
        all_passed = passed == len(runs)
        paint = self.style.success if all_passed else self.style.failure
        self._write(f"{paint(f'{passed}/{len(runs)} tests passed')}\n")
        return all_passed
