"""Live server event records."""

from comet.serialization import ANY, NUMBER, STRING, FieldDescriptor, TypedRecord


class StreamableEvent(TypedRecord):
    """An event delivered on the server's live event stream.

    ``data`` is left undecoded because its shape depends on ``type``.
    """

    FIELDS = (
        FieldDescriptor("Actor", "actor", STRING),
        FieldDescriptor("OwnerOrganizationID", "owner_organization_id", STRING),
        FieldDescriptor("ResourceID", "resource_id", STRING, omit_empty=True),
        FieldDescriptor("Type", "type", NUMBER, doc="One of the SEVT_ constants"),
        FieldDescriptor("Timestamp", "timestamp", NUMBER, omit_empty=True),
        FieldDescriptor("TypeString", "type_string", STRING, omit_empty=True),
        FieldDescriptor("Data", "data", ANY, optional=True),
    )
