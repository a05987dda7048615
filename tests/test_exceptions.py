"""Unit tests for comet.exceptions module."""

import pytest

from comet.exceptions import (
    APIResponseError,
    CometException,
    ConfigurationException,
    MalformedInputError,
    SchemaDefinitionError,
    SerializationException,
    TypeMismatchError,
)
from comet.models.api import CometAPIResponseMessage


class TestCometException:
    """Tests for CometException base class."""

    def test_create_with_message(self):
        exc = CometException("test error")
        assert str(exc) == "test error"
        assert exc.cause is None

    def test_create_with_cause(self):
        cause = ValueError("original")
        exc = CometException("wrapped", cause=cause)
        assert exc.cause is cause

    def test_create_empty(self):
        assert str(CometException()) == ""


class TestExceptionHierarchy:
    """Tests for the exception class hierarchy."""

    @pytest.mark.parametrize(
        "exc_class",
        [
            ConfigurationException,
            SchemaDefinitionError,
            SerializationException,
            MalformedInputError,
        ],
    )
    def test_inherits_from_comet_exception(self, exc_class):
        exc = exc_class("test")
        assert isinstance(exc, CometException)

    def test_serialization_errors(self):
        assert issubclass(TypeMismatchError, SerializationException)
        assert issubclass(MalformedInputError, SerializationException)

    def test_builtin_bases(self):
        assert issubclass(TypeMismatchError, TypeError)
        assert issubclass(MalformedInputError, ValueError)

    def test_catch_as_base(self):
        with pytest.raises(CometException):
            raise TypeMismatchError("f", "number", "string")


class TestTypeMismatchError:
    """Tests for TypeMismatchError."""

    def test_attributes(self):
        exc = TypeMismatchError("B2DestinationLocation.MaxConnections", "number", "string")
        assert exc.field == "B2DestinationLocation.MaxConnections"
        assert exc.expected == "number"
        assert exc.actual == "string"

    def test_message(self):
        exc = TypeMismatchError("top-level", "object", "array")
        assert str(exc) == "'top-level' expected object, got array"

    def test_cause(self):
        cause = KeyError("x")
        assert TypeMismatchError("f", "a", "b", cause=cause).cause is cause


class TestAPIResponseError:
    """Tests for APIResponseError."""

    def test_message(self):
        detail = CometAPIResponseMessage(status=404, message="No such user")
        exc = APIResponseError(detail)
        assert str(exc) == "No such user (404)"
        assert exc.detail is detail
        assert exc.status == 404
