"""Shared pytest fixtures for Comet SDK tests."""

import logging

import pytest

import comet.logging as comet_logging
from comet.config import ClientConfig, JsonConfig
from comet.logging import COMET_ROOT_LOGGER


@pytest.fixture(autouse=True)
def reset_comet_logging():
    """Restore the comet logger after tests that configure it."""
    logger = logging.getLogger(COMET_ROOT_LOGGER)
    handlers = list(logger.handlers)
    level = logger.level
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
    logger.setLevel(level)
    comet_logging._handler = None


@pytest.fixture
def default_config():
    """Create a default ClientConfig."""
    return ClientConfig()


@pytest.fixture
def pretty_json_config():
    """Create a JsonConfig producing indented, sorted output."""
    return JsonConfig(indent=2, sort_keys=True)


@pytest.fixture
def b2_payload():
    """A B2 location as sent by a newer server, with one unrecognized key."""
    return {
        "AccountID": "abc",
        "Key": "k1",
        "Bucket": "b1",
        "Prefix": "p/",
        "MaxConnections": 4,
        "Extra": "future-field",
    }


@pytest.fixture
def spanned_location_payload(b2_payload):
    """A spanned destination combining a B2 and an S3 location."""
    return {
        "DestinationType": 1006,
        "SpanTargets": [
            {"DestinationType": 1008, "B2": b2_payload},
            {
                "DestinationType": 1000,
                "S3Server": "s3.example.com",
                "S3UsesTLS": True,
                "S3BucketName": "backups",
            },
        ],
        "SpanUseStaticSlots": True,
    }


@pytest.fixture
def backup_job_payload():
    """A completed backup job from the job history."""
    return {
        "GUID": "b1f0e8a4-job",
        "Username": "alice",
        "Classification": 4001,
        "Status": 5000,
        "StartTime": 1700000000,
        "EndTime": 1700000600,
        "SourceGUID": "src-1",
        "DestinationGUID": "dst-1",
        "DeviceID": "device-1",
        "SnapshotID": "snap-1",
        "ClientVersion": "23.3.5",
        "TotalDirectories": 12,
        "TotalFiles": 340,
        "TotalSize": 1048576,
        "TotalChunks": 20,
        "UploadSize": 524288,
        "DownloadSize": 0,
        "Progress": {
            "Counter": 3,
            "SentTime": 1700000500,
            "RecievedTime": 1700000501,
            "BytesDone": 524288,
            "ItemsDone": 340,
        },
        "DestinationSizeEnd": {"Size": 2097152, "MeasureStarted": 1700000601, "MeasureCompleted": 1700000602},
    }
