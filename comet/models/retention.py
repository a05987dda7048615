"""Retention policy records."""

from comet.serialization import NUMBER, FieldDescriptor, TypedRecord, array_of, record_of


class RetentionRange(TypedRecord):
    """One rule of a retention policy.

    Which of the numeric fields apply depends on ``type``, one of the
    :class:`comet.definitions.RetentionRangeType` values.
    """

    FIELDS = (
        FieldDescriptor("Type", "type", NUMBER),
        FieldDescriptor("Timestamp", "timestamp", NUMBER),
        FieldDescriptor("Jobs", "jobs", NUMBER),
        FieldDescriptor("Days", "days", NUMBER),
        FieldDescriptor("Weeks", "weeks", NUMBER),
        FieldDescriptor("Months", "months", NUMBER),
        FieldDescriptor("WeekOffset", "week_offset", NUMBER),
        FieldDescriptor("MonthOffset", "month_offset", NUMBER),
    )


class RetentionPolicy(TypedRecord):
    """Retention policy for a Storage Vault or Protected Item.

    With ``mode`` set to ``RetentionMode.KEEP_EVERYTHING`` the ranges are
    ignored.
    """

    FIELDS = (
        FieldDescriptor("Mode", "mode", NUMBER),
        FieldDescriptor("Ranges", "ranges", array_of(record_of(RetentionRange))),
    )
