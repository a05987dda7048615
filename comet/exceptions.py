"""Comet SDK exceptions.

This module defines the exception hierarchy for the Comet Python SDK.
All exceptions inherit from :class:`CometException`.

Example:
    Handling conversion errors::

        from comet.exceptions import (
            CometException,
            MalformedInputError,
            TypeMismatchError,
        )

        try:
            location = DestinationLocation.from_json(body)
        except TypeMismatchError as e:
            print(f"{e.field}: expected {e.expected}, got {e.actual}")
        except MalformedInputError:
            print("Server sent invalid JSON")
        except CometException as e:
            print(f"Comet error: {e}")
"""

from typing import Any, Optional


class CometException(Exception):
    """Base class for all Comet SDK exceptions.

    Args:
        message: The error message describing the exception.
        cause: The underlying exception that caused this error, if any.

    Attributes:
        cause: The underlying cause of this exception, if any.
    """

    def __init__(self, message: str = "", cause: Exception = None):
        super().__init__(message)
        self.cause = cause


class ConfigurationException(CometException):
    """Raised when there is a configuration error.

    Example:
        - Negative JSON indent
        - Unknown log level name
        - Unreadable or invalid YAML configuration file
    """
    pass


class SchemaDefinitionError(CometException):
    """Raised when a record type declares an invalid schema.

    This is a programming error in a model declaration, detected when
    the record class is created.

    Example:
        - Two fields sharing the same wire name
        - Two fields sharing the same local attribute name
    """
    pass


class SerializationException(CometException):
    """Base class for errors converting between JSON and typed records."""
    pass


class TypeMismatchError(SerializationException, TypeError):
    """Raised when a JSON value does not have the declared type.

    Args:
        field: Dotted path of the offending field, or ``"top-level"``.
        expected: Name of the expected type.
        actual: Name of the type that was received.

    Attributes:
        field: Dotted path of the offending field.
        expected: Name of the expected type.
        actual: Name of the type that was received.

    Example:
        >>> try:
        ...     B2DestinationLocation.from_dict({"MaxConnections": "4"})
        ... except TypeMismatchError as e:
        ...     print(e.field)
        B2DestinationLocation.MaxConnections
    """

    def __init__(self, field: str, expected: str, actual: str, cause: Exception = None):
        super().__init__(f"'{field}' expected {expected}, got {actual}", cause=cause)
        self._field = field
        self._expected = expected
        self._actual = actual

    @property
    def field(self) -> str:
        """Get the path of the field that failed to convert."""
        return self._field

    @property
    def expected(self) -> str:
        """Get the expected type name."""
        return self._expected

    @property
    def actual(self) -> str:
        """Get the received type name."""
        return self._actual


class MalformedInputError(SerializationException, ValueError):
    """Raised when input text cannot be decoded.

    Example:
        - Truncated or otherwise invalid JSON text
        - A byte-sequence field holding invalid base64
    """
    pass


class APIResponseError(CometException):
    """Raised for application-level error responses from the Comet Server.

    Wraps the parsed :class:`comet.models.api.CometAPIResponseMessage`.
    Network-level failures belong to the HTTP client and are not
    represented here.

    Args:
        detail: The parsed response envelope.

    Example:
        >>> try:
        ...     raise_for_status(body)
        ... except APIResponseError as e:
        ...     print(e.detail.status, e.detail.message)
    """

    def __init__(self, detail: Any, cause: Optional[Exception] = None):
        super().__init__(f"{detail.message} ({detail.status})", cause=cause)
        self._detail = detail

    @property
    def detail(self) -> Any:
        """Get the server's response envelope."""
        return self._detail

    @property
    def status(self) -> int:
        """Get the server-reported status code."""
        return self._detail.status
