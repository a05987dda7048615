"""Comet Server API data structures."""

from comet.models.api import (
    CometAPIResponseMessage,
    SessionKeyRegeneratedResponse,
    TotpRegeneratedResponse,
    raise_for_status,
)
from comet.models.destinations import (
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
)
from comet.models.devices import DiskDrive, LiveUserConnection, OSInfo, Partition
from comet.models.events import StreamableEvent
from comet.models.jobs import (
    BackupJobDetail,
    BackupJobProgress,
    ContentMeasurement,
    ContentMeasurementComponent,
    SizeMeasurement,
    TimeSpan,
)
from comet.models.retention import RetentionPolicy, RetentionRange
from comet.models.security import (
    AdminU2FRegistration,
    U2FRegisteredKey,
    U2FSignRequest,
    U2FSignResponse,
    WebAuthnCredentialDescriptor,
)
from comet.models.sources import SourceBasicInfo, SourceConfig, SourceStatistics
from comet.models.storage import (
    BucketProperties,
    DestinationStatistics,
    SearchClause,
    StoredObject,
    VaultSnapshot,
)

__all__ = [
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
