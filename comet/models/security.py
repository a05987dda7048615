"""Second-factor registration records.

The U2F types are kept for servers older than Comet 21.12.0, which
replaced U2F with WebAuthn.
"""

from comet.serialization import (
    BYTES,
    NUMBER,
    STRING,
    FieldDescriptor,
    TypedRecord,
    array_of,
    record_of,
)


class AdminU2FRegistration(TypedRecord):
    """A U2F key registered to an administrator account.

    Deprecated since Comet 21.12.0.
    """

    FIELDS = (
        FieldDescriptor("Description", "description", STRING),
        FieldDescriptor("RegisterTime", "register_time", NUMBER),
        FieldDescriptor("Registration", "registration", BYTES),
    )


class U2FRegisteredKey(TypedRecord):
    FIELDS = (
        FieldDescriptor("AppID", "app_id", STRING),
        FieldDescriptor("KeyHandle", "key_handle", STRING),
        FieldDescriptor("Version", "version", STRING),
    )


class U2FSignRequest(TypedRecord):
    """Deprecated since Comet 21.12.0."""

    FIELDS = (
        FieldDescriptor("ChallengeID", "challenge_id", STRING),
        FieldDescriptor("ChallengeData", "challenge_data", STRING),
        FieldDescriptor("AppID", "app_id", STRING),
        FieldDescriptor("RegisteredKeys", "registered_keys", array_of(record_of(U2FRegisteredKey))),
    )


class U2FSignResponse(TypedRecord):
    """Deprecated since Comet 21.12.0."""

    FIELDS = (
        FieldDescriptor("ChallengeID", "challenge_id", STRING),
        FieldDescriptor("KeyHandle", "key_handle", STRING),
        FieldDescriptor("Signature", "signature", STRING),
        FieldDescriptor("ClientData", "client_data", STRING),
    )


class WebAuthnCredentialDescriptor(TypedRecord):
    """Identifies a WebAuthn credential.

    Follows the browser WebAuthn API, so the wire names are lowerCamelCase
    and the credential ID travels as base64.
    """

    FIELDS = (
        FieldDescriptor("type", "type", STRING),
        FieldDescriptor("id", "credential_id", BYTES),
        FieldDescriptor("transports", "transport", array_of(STRING), omit_empty=True),
    )
