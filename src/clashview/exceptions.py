#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clashview/exceptions.py
"""Custom exceptions for the clashview library.

Formatting, whitespace visualization and diff rendering are total over
string input and never raise these errors. They are reserved for the
surfaces that accept user-supplied settings: stylesheets and configuration
files.

Exception Hierarchy
-------------------
- ClashviewError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidStyleError (unknown style role or bad style definition)

  - ConfigError (configuration file discovery and loading)

"""

from __future__ import annotations

from pathlib import Path
from typing import Any


class ClashviewError(Exception):
    """Base exception class for all clashview-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(ClashviewError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidStyleError(ValidationError):
    """Exception raised for an unknown style role or an unparsable style definition.

    Parameters
    ----------
    message : str
        Description of the style error
    role : str, optional
        The stylesheet role being looked up or assigned
    definition : str, optional
        The rich style definition that failed to parse
    original_error : Exception, optional
        Typically the ``rich.errors.StyleSyntaxError`` raised by rich

    """

    def __init__(
        self,
        message: str,
        role: str | None = None,
        definition: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the style error."""
        super().__init__(message, parameter_name=role, parameter_value=definition, original_error=original_error)
        self.role = role
        self.definition = definition


class ConfigError(ClashviewError):
    """Exception raised when a configuration file cannot be read or understood.

    Parameters
    ----------
    message : str
        Description of the configuration error
    config_path : str or Path, optional
        Path of the offending configuration file
    original_error : Exception, optional
        The parser or I/O error that caused this error

    """

    def __init__(
        self,
        message: str,
        config_path: str | Path | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the configuration error."""
        super().__init__(message, original_error=original_error)
        self.config_path = str(config_path) if config_path is not None else None
