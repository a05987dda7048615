"""Comet Backup SDK data types."""

from comet.config import ClientConfig, JsonConfig
from comet.exceptions import (
    CometException,
    ConfigurationException,
    SchemaDefinitionError,
    SerializationException,
    TypeMismatchError,
    MalformedInputError,
    APIResponseError,
)
from comet.logging import configure_logging, get_logger, set_level
from comet.serialization import FieldDescriptor, Schema, TypedRecord
from comet.models import (
    CometAPIResponseMessage,
    SessionKeyRegeneratedResponse,
    TotpRegeneratedResponse,
    raise_for_status,
    AzureDestinationLocation,
    B2DestinationLocation,
    CometDestinationLocation,
    DestinationLocation,
    LocalDestinationLocation,
    S3DestinationLocation,
    SFTPDestinationLocation,
    SpannedDestinationLocation,
    StorjDestinationLocation,
    SwiftDestinationLocation,
    WebDavDestinationLocation,
    DiskDrive,
    LiveUserConnection,
    OSInfo,
    Partition,
    StreamableEvent,
    BackupJobDetail,
    BackupJobProgress,
    ContentMeasurement,
    ContentMeasurementComponent,
    SizeMeasurement,
    TimeSpan,
    RetentionPolicy,
    RetentionRange,
    AdminU2FRegistration,
    U2FRegisteredKey,
    U2FSignRequest,
    U2FSignResponse,
    WebAuthnCredentialDescriptor,
    SourceBasicInfo,
    SourceConfig,
    SourceStatistics,
    BucketProperties,
    DestinationStatistics,
    SearchClause,
    StoredObject,
    VaultSnapshot,
)

__all__ = [
    "ClientConfig",
    "JsonConfig",
    "CometException",
    "ConfigurationException",
    "SchemaDefinitionError",
    "SerializationException",
    "TypeMismatchError",
    "MalformedInputError",
    "APIResponseError",
    "configure_logging",
    "get_logger",
    "set_level",
    "FieldDescriptor",
    "Schema",
    "TypedRecord",
    "CometAPIResponseMessage",
    "SessionKeyRegeneratedResponse",
    "TotpRegeneratedResponse",
    "raise_for_status",
    "AzureDestinationLocation",
    "B2DestinationLocation",
    "CometDestinationLocation",
    "DestinationLocation",
    "LocalDestinationLocation",
    "S3DestinationLocation",
    "SFTPDestinationLocation",
    "SpannedDestinationLocation",
    "StorjDestinationLocation",
    "SwiftDestinationLocation",
    "WebDavDestinationLocation",
    "DiskDrive",
    "LiveUserConnection",
    "OSInfo",
    "Partition",
    "StreamableEvent",
    "BackupJobDetail",
    "BackupJobProgress",
    "ContentMeasurement",
    "ContentMeasurementComponent",
    "SizeMeasurement",
    "TimeSpan",
    "RetentionPolicy",
    "RetentionRange",
    "AdminU2FRegistration",
    "U2FRegisteredKey",
    "U2FSignRequest",
    "U2FSignResponse",
    "WebAuthnCredentialDescriptor",
    "SourceBasicInfo",
    "SourceConfig",
    "SourceStatistics",
    "BucketProperties",
    "DestinationStatistics",
    "SearchClause",
    "StoredObject",
    "VaultSnapshot",
]

__version__ = "0.1.0"
