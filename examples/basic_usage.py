"""Basic usage example for the Comet Backup SDK.

This example demonstrates how to:
- Parse a server response into typed records
- Keep fields added by newer servers
- Check an API reply for an error status
- Write records back out as JSON
"""

import json
import logging

from comet import (
    APIResponseError,
    ClientConfig,
    DestinationLocation,
    TypeMismatchError,
    configure_logging,
    raise_for_status,
)
from comet.definitions import DestinationType


VAULT_RESPONSE = """
{
    "DestinationType": 1006,
    "SpanTargets": [
        {"DestinationType": 1008, "B2": {"AccountID": "abc", "Bucket": "b1", "MaxConnections": 4}},
        {"DestinationType": 1000, "S3Server": "s3.example.com", "S3UsesTLS": true}
    ],
    "SpanUseStaticSlots": true,
    "ImmutableCopies": 2
}
"""


def main():
    config = ClientConfig.from_yaml_string("log_level: DEBUG\njson:\n  indent: 2\n")
    configure_logging(config)

    # Parse a spanned Storage Vault location
    location = DestinationLocation.from_json(VAULT_RESPONSE)
    if location.destination_type == DestinationType.SPANNED:
        for target in location.span_targets:
            print(f"Target type {target.destination_type}")
        print(f"B2 bucket: {location.span_targets[0].b2.bucket}")

    # Fields this SDK does not know about are kept
    print(f"Unrecognized fields: {location.unknown_json_fields}")

    # Write it back, e.g. to send in an update request
    print(location.to_json(config.json))

    # Type errors name the offending field
    try:
        DestinationLocation.from_dict({"SpanTargets": [{"B2": {"MaxConnections": "4"}}]})
    except TypeMismatchError as e:
        print(f"Rejected: {e}")

    # Error envelopes become exceptions
    try:
        raise_for_status(json.loads('{"Status": 403, "Message": "Access denied"}'))
    except APIResponseError as e:
        logging.getLogger(__name__).warning("Server refused: %s", e)


if __name__ == "__main__":
    main()
