#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the apidoc2md library.

This module defines specialized exception classes for the error conditions
that can occur while emitting Markdown from a documentation-comment tree.

Exception Hierarchy
-------------------
- ApiDoc2MdError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for an emitter)

  - RenderingError (output generation failures)
    - UnsupportedNodeKindError (node kind the emitter does not handle)
    - CodeDestinationNotSupportedError (no code-destination link renderer)
    - UnresolvedReferenceError (declaration reference could not be resolved)

"""

from typing import Any


class ApiDoc2MdError(Exception):
    """Base exception class for all apidoc2md-specific errors.

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


class ValidationError(ApiDoc2MdError):
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


class InvalidOptionsError(ValidationError):
    """Exception raised when an emitter receives the wrong options class.

    Parameters
    ----------
    emitter_name : str
        Name of the emitter that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        emitter_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{emitter_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'. "
                f"Please provide the correct options type for the emitter."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.emitter_name = emitter_name
        self.expected_type = expected_type
        self.received_type = received_type


class RenderingError(ApiDoc2MdError):
    """Exception raised when output rendering fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class UnsupportedNodeKindError(RenderingError):
    """Exception raised when the emitter reaches a node kind it cannot write.

    This signals a mismatch between the producer of the tree and the emitter.
    New node kinds must be handled explicitly by a derived emitter.

    Parameters
    ----------
    kind : str
        The kind of the offending node

    """

    def __init__(self, kind: str):
        """Initialize the unsupported node kind error."""
        super().__init__(f"Unsupported element kind: {kind}", rendering_stage="write_node")
        self.kind = kind


class CodeDestinationNotSupportedError(RenderingError):
    """Exception raised when a link targets a declaration but no renderer exists for it.

    The base emitter cannot turn a declaration reference into a URL. Subclasses
    must override ``write_link_tag_with_code_destination`` to support them.

    Parameters
    ----------
    reference : str
        The declaration reference in TSDoc notation

    """

    def __init__(self, reference: str):
        """Initialize the code destination error."""
        super().__init__(
            f"write_link_tag_with_code_destination() is not implemented; cannot render link to '{reference}'",
            rendering_stage="write_link_tag_with_code_destination",
        )
        self.reference = reference


class UnresolvedReferenceError(RenderingError):
    """Exception raised when a declaration reference does not resolve.

    Only raised when the emitter options ask for strict link resolution.

    Parameters
    ----------
    reference : str
        The declaration reference in TSDoc notation

    """

    def __init__(self, reference: str):
        """Initialize the unresolved reference error."""
        super().__init__(f'Unable to resolve reference "{reference}"', rendering_stage="write_link_tag")
        self.reference = reference
