"""Job and measurement records."""

from comet.serialization import NUMBER, STRING, FieldDescriptor, TypedRecord, array_of, record_of


class SizeMeasurement(TypedRecord):
    FIELDS = (
        FieldDescriptor("Size", "size", NUMBER),
        FieldDescriptor("MeasureStarted", "measure_started", NUMBER, doc="Unix timestamp"),
        FieldDescriptor("MeasureCompleted", "measure_completed", NUMBER, doc="Unix timestamp"),
    )


class ContentMeasurementComponent(TypedRecord):
    FIELDS = (
        FieldDescriptor("Bytes", "bytes", NUMBER),
        FieldDescriptor("UsedBy", "used_by", array_of(STRING)),
    )


class ContentMeasurement(TypedRecord):
    FIELDS = (
        FieldDescriptor("MeasureStarted", "measure_started", NUMBER),
        FieldDescriptor("MeasureCompleted", "measure_completed", NUMBER),
        FieldDescriptor("Components", "components", array_of(record_of(ContentMeasurementComponent))),
    )


class BackupJobProgress(TypedRecord):
    """Live progress counters reported by a running job."""

    FIELDS = (
        FieldDescriptor("Counter", "counter", NUMBER),
        FieldDescriptor("SentTime", "sent_time", NUMBER, doc="Unix timestamp"),
        # wire name is misspelled by the server
        FieldDescriptor("RecievedTime", "recieved_time", NUMBER, doc="Unix timestamp"),
        FieldDescriptor("BytesDone", "bytes_done", NUMBER),
        FieldDescriptor("ItemsDone", "items_done", NUMBER),
    )


class BackupJobDetail(TypedRecord):
    """Summary of one job, as stored in the server job history.

    ``classification`` is a :class:`comet.definitions.JobClassification`
    value and ``status`` a :class:`comet.definitions.JobStatus` value.
    The Office 365 and virtual machine counters are only sent for jobs
    of those engine types.
    """

    FIELDS = (
        FieldDescriptor("GUID", "guid", STRING),
        FieldDescriptor("Username", "username", STRING),
        FieldDescriptor("Classification", "classification", NUMBER),
        FieldDescriptor("Status", "status", NUMBER),
        FieldDescriptor("StartTime", "start_time", NUMBER, doc="Unix timestamp"),
        FieldDescriptor("EndTime", "end_time", NUMBER, doc="Unix timestamp"),
        FieldDescriptor("SourceGUID", "source_guid", STRING),
        FieldDescriptor("DestinationGUID", "destination_guid", STRING),
        FieldDescriptor("DeviceID", "device_id", STRING),
        FieldDescriptor("SnapshotID", "snapshot_id", STRING, omit_empty=True),
        FieldDescriptor("ClientVersion", "client_version", STRING),
        FieldDescriptor("TotalDirectories", "total_directories", NUMBER),
        FieldDescriptor("TotalFiles", "total_files", NUMBER),
        FieldDescriptor("TotalSize", "total_size", NUMBER),
        FieldDescriptor("TotalChunks", "total_chunks", NUMBER),
        FieldDescriptor("UploadSize", "upload_size", NUMBER),
        FieldDescriptor("DownloadSize", "download_size", NUMBER),
        FieldDescriptor("TotalVmCount", "total_vm_count", NUMBER, omit_empty=True),
        FieldDescriptor("TotalMailsCount", "total_mails_count", NUMBER, omit_empty=True),
        FieldDescriptor("TotalSitesCount", "total_sites_count", NUMBER, omit_empty=True),
        FieldDescriptor("TotalAccountsCount", "total_accounts_count", NUMBER, omit_empty=True),
        FieldDescriptor(
            "TotalLicensedMailsCount", "total_licensed_mails_count", NUMBER, omit_empty=True
        ),
        FieldDescriptor(
            "TotalUnlicensedMailsCount", "total_unlicensed_mails_count", NUMBER, omit_empty=True
        ),
        FieldDescriptor("CancellationID", "cancellation_id", STRING, omit_empty=True),
        FieldDescriptor("Progress", "progress", record_of(BackupJobProgress), omit_empty=True),
        FieldDescriptor(
            "DestinationSizeStart", "destination_size_start", record_of(SizeMeasurement),
            omit_empty=True,
        ),
        FieldDescriptor(
            "DestinationSizeEnd", "destination_size_end", record_of(SizeMeasurement),
            omit_empty=True,
        ),
    )


class TimeSpan(TypedRecord):
    FIELDS = (
        FieldDescriptor("FrequencyType", "frequency_type", NUMBER),
        FieldDescriptor("Seconds", "seconds", NUMBER),
    )
