#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clashview/testcase.py
"""Test cases and the outcome of running a solution against them.

Loading test cases from clash data and running programs happen elsewhere;
this module only holds the values the renderers consume.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from clashview.style import Stylesheet
from clashview.whitespace import styled_channel


@dataclass(frozen=True)
class TestCase:
    """One clash test case.

    Parameters
    ----------
    title : str
        Test case title
    test_in : str
        Input fed to the program
    test_out : str
        Expected program output
    index : int, default 1
        1-based display index
    is_validator : bool, default False
        Whether the case is a hidden validator

    """

    __test__ = False

    title: str
    test_in: str
    test_out: str
    index: int = 1
    is_validator: bool = False

    def __post_init__(self) -> None:
        """Validate the display index.

        Raises
        ------
        ValueError
            If ``index`` is smaller than 1.

        """
        if self.index < 1:
            raise ValueError(f"index must be 1-based, got {self.index}")

    def styled_title(self, style: Stylesheet) -> str:
        """Return ``#<index> <title>`` painted with the title role."""
        return style.title(f"#{self.index} {self.title}")

    def styled_input(self, style: Stylesheet) -> str:
        """Return the input, with visible whitespace if the sheet defines input glyphs."""
        return styled_channel(self.test_in, style.input, style.input_whitespace)

    def styled_output(self, style: Stylesheet) -> str:
        """Return the expected output, with visible whitespace if the sheet defines output glyphs."""
        return styled_channel(self.test_out, style.output, style.output_whitespace)


# =============================================================================
# Run results
# =============================================================================


@dataclass(frozen=True)
class Success:
    """The program printed the expected output."""

    label = "PASS"


@dataclass(frozen=True)
class UnableToRun:
    """The program could not be started."""

    error_msg: str

    label = "ERROR"


@dataclass(frozen=True)
class WrongOutput:
    """The program finished but printed something else."""

    stdout: str
    stderr: str = ""

    label = "FAIL"


@dataclass(frozen=True)
class RuntimeFailure:
    """The program exited with an error."""

    stdout: str
    stderr: str = ""

    label = "FAIL"


@dataclass(frozen=True)
class Timeout:
    """The program was stopped after running too long."""

    stdout: str
    stderr: str = ""

    label = "TIMEOUT"


TestResult = Union[Success, UnableToRun, WrongOutput, RuntimeFailure, Timeout]


@dataclass(frozen=True)
class TestRun:
    """A test case paired with the result of running a solution on it."""

    __test__ = False

    testcase: TestCase
    result: TestResult

    @property
    def expected(self) -> str:
        """Expected output of the test case."""
        return self.testcase.test_out

    @property
    def actual(self) -> str:
        """Captured output; the expected output on success, empty when the program never ran."""
        if isinstance(self.result, Success):
            return self.expected
        if isinstance(self.result, UnableToRun):
            return ""
        return self.result.stdout

    @property
    def stderr(self) -> str:
        """Captured standard error, empty when none was captured."""
        return getattr(self.result, "stderr", "")

    @property
    def is_successful(self) -> bool:
        """True when the result is a success."""
        return isinstance(self.result, Success)
