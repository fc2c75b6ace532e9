#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the shortcode2html library.

Malformed markup is never an error: unbalanced tags and unterminated quotes
degrade to literal text. The exceptions below cover the remaining failure
modes, which are configuration mistakes, handler failures in strict mode and
failing injected capabilities.

Exception Hierarchy
-------------------
- Shortcode2HtmlError (base exception)

  - ValidationError (parameter/option validation)
    - ConfigurationError (invalid registry configuration)

  - RenderingError (handler failure while rendering in strict mode)

  - CapabilityError (injected capability failure)
    - PathResolutionError (path could not be turned into a URL)

"""

from typing import Any


class Shortcode2HtmlError(Exception):
    """Base exception class for all shortcode2html-specific errors.

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


class ValidationError(Shortcode2HtmlError):
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


class ConfigurationError(ValidationError):
    """Exception raised when a registry configuration cannot be used.

    Raised while the registry is being built, before any text is rendered.
    Typical causes are an entry naming a handler that does not exist or a
    default value that the handler cannot accept (e.g. a non-numeric
    ``length`` for the random tag).

    Parameters
    ----------
    message : str
        Description of the configuration problem
    tag_name : str, optional
        The tag whose configuration entry is invalid
    parameter_name : str, optional
        The offending default attribute, if any
    parameter_value : any, optional
        The offending value
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        tag_name: str | None = None,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the configuration error."""
        super().__init__(
            message,
            parameter_name=parameter_name,
            parameter_value=parameter_value,
            original_error=original_error,
        )
        self.tag_name = tag_name


class RenderingError(Shortcode2HtmlError):
    """Exception raised when a handler fails and strict mode is enabled.

    Parameters
    ----------
    message : str
        Description of the failure
    tag_name : str, optional
        Name of the tag whose handler failed
    original_error : Exception, optional
        The exception raised by the handler

    """

    def __init__(self, message: str, tag_name: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error=original_error)
        self.tag_name = tag_name


class CapabilityError(Shortcode2HtmlError):
    """Base exception for failures of injected capabilities."""

    pass


class PathResolutionError(CapabilityError):
    """Exception raised when a path cannot be resolved to a URL.

    The renderer never lets this escape: it logs a warning and falls back to
    the raw path value.

    Parameters
    ----------
    path : str
        The path that could not be resolved
    message : str, optional
        Custom error message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the path resolution error."""
        if message is None:
            message = f"Cannot resolve path: {path!r}"
        super().__init__(message, original_error=original_error)
        self.path = path
