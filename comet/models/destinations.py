"""Storage Vault location records.

Each ``*DestinationLocation`` type holds the connection settings for one
storage provider. :class:`DestinationLocation` is the combined form that
the server stores, with every provider's settings side by side and the
active one selected by ``destination_type``.
"""

from comet.serialization import (
    BOOLEAN,
    NUMBER,
    STRING,
    FieldDescriptor,
    TypedRecord,
    array_of,
    record_of,
)


class SwiftDestinationLocation(TypedRecord):
    """Connection settings for OpenStack Swift."""

    FIELDS = (
        FieldDescriptor("Username", "username", STRING, omit_empty=True),
        FieldDescriptor("APIKey", "apikey", STRING, omit_empty=True),
        FieldDescriptor("Region", "region", STRING, omit_empty=True),
        FieldDescriptor("AuthURL", "auth_url", STRING, omit_empty=True),
        FieldDescriptor("Domain", "domain", STRING, omit_empty=True),
        FieldDescriptor("Tenant", "tenant", STRING, omit_empty=True),
        FieldDescriptor("TenantDomain", "tenant_domain", STRING, omit_empty=True),
        FieldDescriptor("TenantID", "tenant_id", STRING, omit_empty=True),
        FieldDescriptor("TrustID", "trust_id", STRING, omit_empty=True),
        FieldDescriptor("AuthToken", "auth_token", STRING, omit_empty=True),
        FieldDescriptor("Prefix", "prefix", STRING, omit_empty=True),
        FieldDescriptor("Container", "container", STRING, omit_empty=True),
        FieldDescriptor("DefaultContainerPolicy", "default_container_policy", STRING, omit_empty=True),
    )


class B2DestinationLocation(TypedRecord):
    """Connection settings for the Backblaze B2 native API."""

    FIELDS = (
        FieldDescriptor("AccountID", "account_id", STRING, omit_empty=True, doc="Key ID"),
        FieldDescriptor("Key", "key", STRING, omit_empty=True, doc="Application Key"),
        FieldDescriptor("Bucket", "bucket", STRING, omit_empty=True),
        FieldDescriptor("Prefix", "prefix", STRING, omit_empty=True),
        FieldDescriptor(
            "MaxConnections", "max_connections", NUMBER, omit_empty=True,
            deprecated="21.9.7",
        ),
        FieldDescriptor(
            "HideDeletedFiles", "hide_deleted_files", BOOLEAN, optional=True,
            doc="Hide files instead of deleting them",
        ),
    )


class WebDavDestinationLocation(TypedRecord):
    FIELDS = (
        FieldDescriptor("DavServer", "dav_server", STRING, omit_empty=True),
        FieldDescriptor("UserName", "user_name", STRING, omit_empty=True),
        FieldDescriptor("AccessKey", "access_key", STRING, omit_empty=True),
        FieldDescriptor("Path", "path", STRING, omit_empty=True),
    )


class StorjDestinationLocation(TypedRecord):
    FIELDS = (
        FieldDescriptor("SatelliteAddress", "satellite_address", STRING),
        FieldDescriptor("APIKey", "apikey", STRING),
        FieldDescriptor("Passphrase", "passphrase", STRING),
        FieldDescriptor("StorjBucket", "storj_bucket", STRING),
        FieldDescriptor("StorjBucketPrefix", "storj_bucket_prefix", STRING, omit_empty=True),
    )


class AzureDestinationLocation(TypedRecord):
    FIELDS = (
        FieldDescriptor("AZBAccountName", "azbaccount_name", STRING),
        FieldDescriptor("AZBAccountKey", "azbaccount_key", STRING),
        FieldDescriptor("AZBContainer", "azbcontainer", STRING),
        FieldDescriptor(
            "AZBRealm", "azbrealm", STRING,
            doc="Base URL for the Azure Blob Storage service; blank for the global default",
        ),
        FieldDescriptor("AZBPrefix", "azbprefix", STRING),
    )


class LocalDestinationLocation(TypedRecord):
    FIELDS = (
        FieldDescriptor("LocalcopyPath", "localcopy_path", STRING),
        FieldDescriptor("LocalcopyWinSMBUsername", "localcopy_win_smbusername", STRING),
        FieldDescriptor("LocalcopyWinSMBPassword", "localcopy_win_smbpassword", STRING),
        FieldDescriptor("LocalcopyWinSMBPasswordFormat", "localcopy_win_smbpassword_format", NUMBER),
    )


class SFTPDestinationLocation(TypedRecord):
    FIELDS = (
        FieldDescriptor("SFTPServer", "sftpserver", STRING),
        FieldDescriptor("SFTPUsername", "sftpusername", STRING),
        FieldDescriptor("SFTPRemotePath", "sftpremote_path", STRING),
        FieldDescriptor("SFTPAuthMode", "sftpauth_mode", NUMBER, doc="One of SftpAuthMode"),
        FieldDescriptor("SFTPPassword", "sftppassword", STRING),
        FieldDescriptor("SFTPPrivateKey", "sftpprivate_key", STRING, doc="OpenSSH format"),
        FieldDescriptor(
            "SFTPCustomAuth_UseKnownHostsFile", "sftpcustom_auth__use_known_hosts_file", BOOLEAN
        ),
        FieldDescriptor(
            "SFTPCustomAuth_KnownHostsFile", "sftpcustom_auth__known_hosts_file", STRING
        ),
    )


class S3DestinationLocation(TypedRecord):
    FIELDS = (
        FieldDescriptor("S3Server", "s3server", STRING),
        FieldDescriptor("S3UsesTLS", "s3uses_tls", BOOLEAN),
        FieldDescriptor("S3AccessKey", "s3access_key", STRING),
        FieldDescriptor("S3SecretKey", "s3secret_key", STRING),
        FieldDescriptor("S3BucketName", "s3bucket_name", STRING),
        FieldDescriptor("S3Subdir", "s3subdir", STRING),
        FieldDescriptor("S3CustomRegion", "s3custom_region", STRING),
        FieldDescriptor("S3UsesV2Signing", "s3uses_v2signing", BOOLEAN),
        FieldDescriptor("S3RemoveDeleted", "s3remove_deleted", BOOLEAN),
        FieldDescriptor("S3ObjectLockMode", "s3object_lock_mode", NUMBER),
        FieldDescriptor("S3ObjectLockDays", "s3object_lock_days", NUMBER),
    )


class CometDestinationLocation(TypedRecord):
    FIELDS = (
        FieldDescriptor(
            "CometServer", "comet_server", STRING,
            doc="Storage Role URL, including http/https and trailing slash",
        ),
        FieldDescriptor("CometBucket", "comet_bucket", STRING),
        FieldDescriptor("CometBucketKey", "comet_bucket_key", STRING),
    )


class DestinationLocation(TypedRecord):
    """Underlying storage location of a Storage Vault.

    Available in Comet 17.3.3 and later; before that these settings were
    embedded in the vault configuration itself.
    """

    FIELDS = (
        FieldDescriptor("DestinationType", "destination_type", NUMBER, doc="One of DestinationType"),
        FieldDescriptor("CometServer", "comet_server", STRING),
        FieldDescriptor("CometBucket", "comet_bucket", STRING),
        FieldDescriptor("CometBucketKey", "comet_bucket_key", STRING),
        FieldDescriptor("S3Server", "s3server", STRING),
        FieldDescriptor("S3UsesTLS", "s3uses_tls", BOOLEAN),
        FieldDescriptor("S3AccessKey", "s3access_key", STRING),
        FieldDescriptor("S3SecretKey", "s3secret_key", STRING),
        FieldDescriptor("S3BucketName", "s3bucket_name", STRING),
        FieldDescriptor("S3Subdir", "s3subdir", STRING),
        FieldDescriptor("S3CustomRegion", "s3custom_region", STRING),
        FieldDescriptor("S3UsesV2Signing", "s3uses_v2signing", BOOLEAN),
        FieldDescriptor("S3RemoveDeleted", "s3remove_deleted", BOOLEAN),
        FieldDescriptor("S3ObjectLockMode", "s3object_lock_mode", NUMBER),
        FieldDescriptor("S3ObjectLockDays", "s3object_lock_days", NUMBER),
        FieldDescriptor("SFTPServer", "sftpserver", STRING),
        FieldDescriptor("SFTPUsername", "sftpusername", STRING),
        FieldDescriptor("SFTPRemotePath", "sftpremote_path", STRING),
        FieldDescriptor("SFTPAuthMode", "sftpauth_mode", NUMBER),
        FieldDescriptor("SFTPPassword", "sftppassword", STRING),
        FieldDescriptor("SFTPPrivateKey", "sftpprivate_key", STRING),
        FieldDescriptor(
            "SFTPCustomAuth_UseKnownHostsFile", "sftpcustom_auth__use_known_hosts_file", BOOLEAN
        ),
        FieldDescriptor(
            "SFTPCustomAuth_KnownHostsFile", "sftpcustom_auth__known_hosts_file", STRING
        ),
        FieldDescriptor("FTPServer", "ftpserver", STRING),
        FieldDescriptor("FTPUsername", "ftpusername", STRING),
        FieldDescriptor("FTPPassword", "ftppassword", STRING),
        FieldDescriptor("FTPBaseUseHomeDirectory", "ftpbase_use_home_directory", BOOLEAN),
        FieldDescriptor("FTPCustomBaseDirectory", "ftpcustom_base_directory", STRING),
        FieldDescriptor("FTPSMode", "ftpsmode", NUMBER),
        FieldDescriptor("FTPPort", "ftpport", NUMBER),
        FieldDescriptor(
            "FTPMaxConnections", "ftpmax_connections", NUMBER,
            doc="Zero selects a system default, not unlimited",
        ),
        FieldDescriptor("FTPAcceptInvalidSSL", "ftpaccept_invalid_ssl", BOOLEAN),
        FieldDescriptor("AZBAccountName", "azbaccount_name", STRING),
        FieldDescriptor("AZBAccountKey", "azbaccount_key", STRING),
        FieldDescriptor("AZBContainer", "azbcontainer", STRING),
        FieldDescriptor("AZBRealm", "azbrealm", STRING),
        FieldDescriptor("AZBPrefix", "azbprefix", STRING),
        FieldDescriptor("LocalcopyPath", "localcopy_path", STRING),
        FieldDescriptor("LocalcopyWinSMBUsername", "localcopy_win_smbusername", STRING),
        FieldDescriptor("LocalcopyWinSMBPassword", "localcopy_win_smbpassword", STRING),
        FieldDescriptor("LocalcopyWinSMBPasswordFormat", "localcopy_win_smbpassword_format", NUMBER),
        FieldDescriptor("Swift", "swift", record_of(SwiftDestinationLocation)),
        FieldDescriptor("B2", "b2", record_of(B2DestinationLocation)),
        FieldDescriptor("WebDav", "web_dav", record_of(WebDavDestinationLocation)),
        FieldDescriptor("Storj", "storj", record_of(StorjDestinationLocation)),
        FieldDescriptor(
            "SpanTargets", "span_targets", array_of(record_of("DestinationLocation")),
            doc="Underlying destinations combined and presented as one",
        ),
        FieldDescriptor("SpanUseStaticSlots", "span_use_static_slots", BOOLEAN),
        FieldDescriptor("Tag", "tag", STRING),
    )


class SpannedDestinationLocation(TypedRecord):
    FIELDS = (
        FieldDescriptor("SpanTargets", "span_targets", array_of(record_of(DestinationLocation))),
        FieldDescriptor("SpanUseStaticSlots", "span_use_static_slots", BOOLEAN),
    )
