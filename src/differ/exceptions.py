#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the differ library.

The diff core is made of total functions over well-formed input, so the
hierarchy is small. Catching :class:`DifferError` catches every
library-specific error.

Exception Hierarchy
-------------------
- DifferError (base exception)

  - ValidationError (parameter/option validation)
    - ConfigError (configuration file discovery and loading)

  - UnsupportedFormatError (unknown render format identifiers)

  - CyclicStructureError (self-referencing records passed to the object differ)

"""

from __future__ import annotations

from typing import Any, Sequence


class DifferError(Exception):
    """Base exception class for all differ-specific errors.

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


class ValidationError(DifferError):
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


class ConfigError(ValidationError):
    """Exception raised when a configuration file cannot be read or is invalid.

    Parameters
    ----------
    message : str
        Description of the problem
    config_path : str, optional
        Path of the offending configuration file
    original_error : Exception, optional
        The underlying parse or I/O error

    """

    def __init__(self, message: str, config_path: str | None = None, original_error: Exception | None = None):
        """Initialize the configuration error."""
        super().__init__(message, parameter_name="config", parameter_value=config_path, original_error=original_error)
        self.config_path = config_path


class UnsupportedFormatError(DifferError):
    """Exception raised when a diff is requested in an unknown output format.

    Parameters
    ----------
    format_type : str
        The format identifier that was requested
    supported_formats : sequence of str, optional
        Identifiers that are accepted, listed in the message
    message : str, optional
        Custom error message

    Attributes
    ----------
    format_type : str
        The rejected format identifier
    supported_formats : list[str]
        Available formats

    """

    def __init__(
        self,
        format_type: str,
        supported_formats: Sequence[str] | None = None,
        message: str | None = None,
    ):
        """Initialize the format error."""
        self.format_type = format_type
        self.supported_formats = list(supported_formats or [])
        if message is None:
            message = f"Unknown format: '{format_type}'"
            if self.supported_formats:
                message += f". Supported formats: {', '.join(self.supported_formats)}"
        super().__init__(message)


class CyclicStructureError(DifferError):
    """Exception raised when the object differ revisits a record on its own path.

    Parameters
    ----------
    path : sequence
        Keys from the root to the record that closes the cycle

    """

    def __init__(self, path: Sequence[Any]):
        """Initialize the error with the path of the cycle."""
        self.path = tuple(path)
        dotted = ".".join(str(key) for key in self.path) or "<root>"
        super().__init__(f"Cyclic structure detected at path: {dotted}")
