"""API response envelopes."""

from typing import Any

from comet.exceptions import APIResponseError
from comet.logging import get_logger
from comet.serialization import NUMBER, STRING, FieldDescriptor, TypedRecord


_logger = get_logger("api")

ERROR_STATUS_THRESHOLD = 400


class CometAPIResponseMessage(TypedRecord):
    """Generic status reply returned by most mutating API calls.

    ``status`` follows HTTP conventions: 2xx is success, 4xx and above is a
    failure described by ``message``.
    """

    FIELDS = (
        FieldDescriptor("Status", "status", NUMBER, doc="HTTP status code"),
        FieldDescriptor("Message", "message", STRING),
    )

    @property
    def ok(self) -> bool:
        return self.status < ERROR_STATUS_THRESHOLD


class TotpRegeneratedResponse(TypedRecord):
    FIELDS = (
        FieldDescriptor("Status", "status", NUMBER),
        FieldDescriptor("Message", "message", STRING),
        FieldDescriptor("Image", "image", STRING),
        FieldDescriptor("URL", "url", STRING),
        FieldDescriptor("ProfileHash", "profile_hash", STRING),
    )


class SessionKeyRegeneratedResponse(TypedRecord):
    FIELDS = (
        FieldDescriptor("Status", "status", NUMBER),
        FieldDescriptor("Message", "message", STRING),
        FieldDescriptor("SessionKey", "session_key", STRING),
        FieldDescriptor("SessionType", "session_type", STRING),
    )


def raise_for_status(obj: Any) -> Any:
    """Raise if a decoded API response reports an error.

    Args:
        obj: A decoded JSON response body.

    Returns:
        ``obj`` unchanged when it does not carry an error status.

    Raises:
        APIResponseError: If ``obj`` has a numeric ``Status`` of 400 or more.
        TypeMismatchError: If the error envelope itself is malformed.
    """
    if not isinstance(obj, dict):
        return obj
    status = obj.get("Status")
    if isinstance(status, bool) or not isinstance(status, (int, float)):
        return obj
    if status < ERROR_STATUS_THRESHOLD:
        return obj
    detail = CometAPIResponseMessage.from_dict(obj)
    _logger.debug("API error response: %s (%s)", detail.message, detail.status)
    raise APIResponseError(detail)
