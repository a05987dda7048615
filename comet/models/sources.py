"""Protected Item (backup source) records."""

from comet.models.jobs import BackupJobDetail
from comet.models.retention import RetentionPolicy
from comet.serialization import (
    BOOLEAN,
    NUMBER,
    STRING,
    FieldDescriptor,
    TypedRecord,
    array_of,
    map_of,
    record_of,
)


class SourceStatistics(TypedRecord):
    FIELDS = (
        FieldDescriptor("LastStartTime", "last_start_time", NUMBER),
        FieldDescriptor("LastBackupJob", "last_backup_job", record_of(BackupJobDetail)),
        FieldDescriptor(
            "LastSuccessfulBackupJob", "last_successful_backup_job", record_of(BackupJobDetail)
        ),
    )


class SourceConfig(TypedRecord):
    """A Protected Item as stored in a user profile.

    ``engine_props`` holds engine-specific settings as strings; their keys
    depend on ``engine``.
    """

    FIELDS = (
        FieldDescriptor("Engine", "engine", STRING, doc="One of the ENGINE_BUILTIN_ constants"),
        FieldDescriptor("Description", "description", STRING),
        FieldDescriptor("OwnerDevice", "owner_device", STRING),
        FieldDescriptor("CreateTime", "create_time", NUMBER, doc="Unix timestamp in seconds"),
        FieldDescriptor("ModifyTime", "modify_time", NUMBER, doc="Unix timestamp in seconds"),
        FieldDescriptor("PreExec", "pre_exec", array_of(STRING), doc="Commands to run before the job"),
        FieldDescriptor(
            "ThawExec", "thaw_exec", array_of(STRING),
            doc="Commands to run after taking a disk snapshot",
        ),
        FieldDescriptor("PostExec", "post_exec", array_of(STRING), doc="Commands to run after the job"),
        FieldDescriptor("EngineProps", "engine_props", map_of(STRING)),
        FieldDescriptor("PolicySourceID", "policy_source_id", STRING),
        FieldDescriptor("ExistingUserUpdate", "existing_user_update", BOOLEAN),
        FieldDescriptor(
            "OverrideDestinationRetention", "override_destination_retention",
            map_of(record_of(RetentionPolicy)), omit_empty=True,
        ),
        FieldDescriptor("Statistics", "statistics", record_of(SourceStatistics), omit_empty=True),
    )


class SourceBasicInfo(TypedRecord):
    FIELDS = (
        FieldDescriptor("Engine", "engine", STRING),
        FieldDescriptor("Description", "description", STRING),
        FieldDescriptor("O365AccountCount", "o365account_count", NUMBER),
        FieldDescriptor("TotalVmCount", "total_vm_count", NUMBER),
        FieldDescriptor("Size", "size", NUMBER),
        FieldDescriptor(
            "OverrideDestinationRetention", "override_destination_retention",
            map_of(record_of(RetentionPolicy)), omit_empty=True,
        ),
    )
