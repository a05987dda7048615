"""Stored data, snapshot and bucket records."""

from comet.models.jobs import ContentMeasurement, SizeMeasurement
from comet.serialization import (
    BOOLEAN,
    NUMBER,
    STRING,
    FieldDescriptor,
    TypedRecord,
    array_of,
    record_of,
)


class StoredObject(TypedRecord):
    """One entry of a snapshot directory listing.

    The wire format uses short keys (``mtime``, ``dname``, ``r``, ...) to
    keep large listings small. Mail fields are only present for Office 365
    items, and the recursive counters only when the server measured them.
    """

    FIELDS = (
        FieldDescriptor("name", "name", STRING, doc="Unique within this directory tree"),
        FieldDescriptor("mtime", "modify_time", NUMBER, doc="Unix timestamp in seconds"),
        FieldDescriptor("type", "type", STRING, doc="One of the STOREDOBJECTTYPE_ constants"),
        FieldDescriptor("subtree", "subtree", STRING),
        FieldDescriptor("size", "size", NUMBER, doc="Bytes"),
        FieldDescriptor("dname", "display_name", STRING, omit_empty=True),
        FieldDescriptor("itemClass", "item_class", STRING, omit_empty=True),
        FieldDescriptor("from", "from_", STRING, omit_empty=True),
        FieldDescriptor("to", "to", STRING, omit_empty=True),
        FieldDescriptor("rtime", "received_date_time", NUMBER, omit_empty=True),
        FieldDescriptor("has_attachments", "has_attachments", BOOLEAN, optional=True),
        FieldDescriptor("stime", "start_time", NUMBER, omit_empty=True, doc="Unix timestamp in seconds"),
        FieldDescriptor("etime", "end_time", NUMBER, omit_empty=True, doc="Unix timestamp in seconds"),
        FieldDescriptor("r", "recursive_count_known", BOOLEAN, optional=True),
        FieldDescriptor("f", "recursive_files", NUMBER, omit_empty=True),
        FieldDescriptor("b", "recursive_bytes", NUMBER, omit_empty=True),
        FieldDescriptor("d", "recursive_folders", NUMBER, omit_empty=True),
    )


class VaultSnapshot(TypedRecord):
    FIELDS = (
        FieldDescriptor("Snapshot", "snapshot", STRING),
        FieldDescriptor("EngineType", "engine_type", STRING),
        FieldDescriptor("Source", "source", STRING),
        FieldDescriptor("CreateTime", "create_time", NUMBER),
        FieldDescriptor(
            "HasOriginalPathInfo", "has_original_path_info", BOOLEAN,
            doc="Available in Comet 20.12.4 and later",
        ),
        FieldDescriptor(
            "Tags", "tags", array_of(STRING), omit_empty=True,
            doc="Available in Comet 25.9.4 and later",
        ),
    )


class SearchClause(TypedRecord):
    """A node of a search expression tree.

    Leaf clauses compare ``rule_field`` against ``rule_value``; group
    clauses combine ``clause_children``.
    """

    FIELDS = (
        FieldDescriptor("ClauseType", "clause_type", STRING),
        FieldDescriptor("RuleField", "rule_field", STRING),
        FieldDescriptor("RuleOperator", "rule_operator", STRING),
        FieldDescriptor("RuleValue", "rule_value", STRING),
        FieldDescriptor(
            "ClauseChildren", "clause_children", array_of(record_of("SearchClause")),
            omit_empty=True,
        ),
    )


class BucketProperties(TypedRecord):
    FIELDS = (
        FieldDescriptor("CreateTime", "create_time", NUMBER),
        FieldDescriptor("ReadWriteKeyFormat", "read_write_key_format", NUMBER),
        FieldDescriptor("ReadWriteKey", "read_write_key", STRING),
        FieldDescriptor("Size", "size", record_of(SizeMeasurement)),
    )


class DestinationStatistics(TypedRecord):
    FIELDS = (
        FieldDescriptor("ClientProvidedSize", "client_provided_size", record_of(SizeMeasurement)),
        FieldDescriptor(
            "ClientProvidedContent", "client_provided_content", record_of(ContentMeasurement)
        ),
        FieldDescriptor(
            "LastSuccessfulDeepVerify_GUID", "last_successful_deep_verify__guid", STRING,
            omit_empty=True,
        ),
        FieldDescriptor(
            "LastSuccessfulDeepVerify_StartTime", "last_successful_deep_verify__start_time",
            NUMBER, omit_empty=True,
        ),
        FieldDescriptor(
            "LastSuccessfulDeepVerify_EndTime", "last_successful_deep_verify__end_time",
            NUMBER, omit_empty=True,
        ),
    )
