"""Constants defined by the Comet Server API.

Record fields that carry one of these values are plain numbers, so a
value introduced by a newer server still parses and round-trips. Compare
against these enums with ``==``; ``IntEnum`` members equal their ints.

Example:
    >>> from comet.definitions import DestinationType, is_job_failed
    >>> location.destination_type == DestinationType.B2
    True
    >>> is_job_failed(job.status)
    False
"""

from enum import IntEnum
from typing import Any


APPLICATION_VERSION = "23.3.5"
APPLICATION_VERSION_MAJOR = 23
APPLICATION_VERSION_MINOR = 3
APPLICATION_VERSION_REVISION = 5

DEFAULT_LANGUAGE = "en_US"
DEFAULT_TIMEZONE = "UTC"

SEVERITY_INFO = "I"
SEVERITY_WARNING = "W"
SEVERITY_ERROR = "E"

RETENTIONRANGE_MAXINT = 1_125_899_906_842_624
SCHEDULE_MAX_RANDOM_DELAY_SECS = 18_000


class DestinationType(IntEnum):
    """Storage Vault location types (``DestinationLocation.DestinationType``)."""

    INVALID = 0
    S3 = 1000
    SFTP = 1001
    LOCALCOPY = 1002
    COMET = 1003
    FTP = 1004
    AZUREBLOB = 1005
    SPANNED = 1006
    SWIFT = 1007
    B2 = 1008
    STORJ = 1009
    LATEST = 1100
    ALL = 1101


class SftpAuthMode(IntEnum):
    """SFTP authentication modes (``SFTPAuthMode``)."""

    NATIVE = 0
    PASSWORD = 1
    PRIVATEKEY = 2


class JobClassification(IntEnum):
    """Kinds of job (``BackupJobDetail.Classification``)."""

    UNKNOWN = 4000
    BACKUP = 4001
    RESTORE = 4002
    RETENTION = 4003
    UNLOCK = 4004
    DELETE_CUSTOM = 4005
    REMEASURE = 4006
    UPDATE = 4007
    IMPORT = 4008
    REINDEX = 4009
    DEEPVERIFY = 4010
    UNINSTALL = 4011


class JobStatus(IntEnum):
    """Job status codes (``BackupJobDetail.Status``).

    Codes are grouped in ranges: 5xxx succeeded, 6xxx running, 7xxx failed.
    """

    STOP_SUCCESS = 5000
    RUNNING_INDETERMINATE = 6000
    RUNNING_ACTIVE = 6001
    RUNNING_REVIVED = 6002
    FAILED_TIMEOUT = 7000
    FAILED_WARNING = 7001
    FAILED_ERROR = 7002
    FAILED_QUOTA = 7003
    FAILED_SCHEDULEMISSED = 7004
    FAILED_CANCELLED = 7005
    FAILED_SKIPALREADYRUNNING = 7006
    FAILED_ABANDONED = 7007


JOB_STATUS_STOP_SUCCESS_RANGE = range(5000, 6000)
JOB_STATUS_RUNNING_RANGE = range(6000, 7000)
JOB_STATUS_FAILED_RANGE = range(7000, 8000)


class RetentionMode(IntEnum):
    """Retention policy modes (``RetentionPolicy.Mode``)."""

    KEEP_EVERYTHING = 801
    DELETE_EXCEPT = 802


class RetentionRangeType(IntEnum):
    """Retention range types (``RetentionRange.Type``)."""

    MOST_RECENT_X_JOBS = 900
    NEWER_THAN_X = 901
    JOBS_SINCE = 902
    FIRST_JOB_FOR_EACH_LAST_X_DAYS = 903
    RESERVED904 = 904
    FIRST_JOB_FOR_LAST_X_MONTHS = 905
    FIRST_JOB_FOR_LAST_X_WEEKS = 906
    LAST_X_BACKUPS_ONE_FOR_EACH_DAY = 907
    LAST_X_BACKUPS_ONE_FOR_EACH_WEEK = 908
    LAST_X_BACKUPS_ONE_FOR_EACH_MONTH = 909


class ScheduleFrequency(IntEnum):
    """Schedule frequency types (``TimeSpan.FrequencyType``)."""

    ONCEONLY = 8010
    DAILY = 8011
    HOURLY = 8012
    WEEKLY = 8013
    MONTHLY = 8014
    PERIODIC = 8015


def _status_in(status: Any, status_range: range) -> bool:
    if isinstance(status, bool) or not isinstance(status, int):
        return False
    return status in status_range


def is_job_success(status: Any) -> bool:
    """Check whether a job status code is in the success range."""
    return _status_in(status, JOB_STATUS_STOP_SUCCESS_RANGE)


def is_job_running(status: Any) -> bool:
    """Check whether a job status code is in the running range."""
    return _status_in(status, JOB_STATUS_RUNNING_RANGE)


def is_job_failed(status: Any) -> bool:
    """Check whether a job status code is in the failed range."""
    return _status_in(status, JOB_STATUS_FAILED_RANGE)
