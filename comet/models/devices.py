"""Device, disk and live-connection records."""

from comet.serialization import (
    BOOLEAN,
    NUMBER,
    STRING,
    FieldDescriptor,
    TypedRecord,
    array_of,
    record_of,
)


class OSInfo(TypedRecord):
    """Operating system details reported by a device.

    Unlike most types, the wire names are all lowercase.
    """

    FIELDS = (
        FieldDescriptor("version", "version", STRING, omit_empty=True),
        FieldDescriptor("distribution", "distribution", STRING, omit_empty=True),
        FieldDescriptor("build", "build", STRING, omit_empty=True),
        FieldDescriptor("os", "os", STRING, omit_empty=True),
        FieldDescriptor("arch", "arch", STRING, omit_empty=True),
    )


class Partition(TypedRecord):
    FIELDS = (
        FieldDescriptor("DeviceName", "device_name", STRING),
        FieldDescriptor("Filesystem", "filesystem", STRING),
        FieldDescriptor("VolumeName", "volume_name", STRING),
        FieldDescriptor("VolumeGuid", "volume_guid", STRING),
        FieldDescriptor("VolumeSerial", "volume_serial", STRING),
        FieldDescriptor("MountPoints", "mount_points", array_of(STRING)),
        FieldDescriptor("ReadOffset", "read_offset", NUMBER),
        FieldDescriptor("Size", "size", NUMBER),
        FieldDescriptor("UsedSize", "used_size", NUMBER),
        FieldDescriptor("Flags", "flags", NUMBER),
        FieldDescriptor("BytesPerFilesystemCluster", "bytes_per_filesystem_cluster", NUMBER),
    )


_DISK_GEOMETRY_NOTICE = (
    "24.6.x: reported from the disk driver if available, otherwise emulated "
    "from LBA addressing; the value is not used"
)


class DiskDrive(TypedRecord):
    """A physical or virtual disk attached to a device."""

    FIELDS = (
        FieldDescriptor("ID", "id", STRING),
        FieldDescriptor("DeviceName", "device_name", STRING),
        FieldDescriptor("Caption", "caption", STRING),
        FieldDescriptor("Model", "model", STRING),
        FieldDescriptor("SerialNumber", "serial_number", STRING),
        FieldDescriptor("Size", "size", NUMBER),
        FieldDescriptor("Partitions", "partitions", array_of(record_of(Partition))),
        FieldDescriptor("DeviceParents", "device_parents", array_of(STRING)),
        FieldDescriptor("Flags", "flags", NUMBER),
        FieldDescriptor("Cylinders", "cylinders", NUMBER, deprecated=_DISK_GEOMETRY_NOTICE),
        FieldDescriptor("Heads", "heads", NUMBER, deprecated=_DISK_GEOMETRY_NOTICE),
        FieldDescriptor("Sectors", "sectors", NUMBER, deprecated=_DISK_GEOMETRY_NOTICE),
        FieldDescriptor("SectorSize", "sector_size", NUMBER),
    )


class LiveUserConnection(TypedRecord):
    """A device currently connected to the server."""

    FIELDS = (
        FieldDescriptor("Username", "username", STRING),
        FieldDescriptor("DeviceID", "device_id", STRING),
        FieldDescriptor("ReportedVersion", "reported_version", STRING),
        FieldDescriptor("ReportedPlatform", "reported_platform", STRING),
        FieldDescriptor(
            "ReportedPlatformVersion", "reported_platform_version", record_of(OSInfo),
            omit_empty=True,
        ),
        FieldDescriptor("DeviceTimeZone", "device_time_zone", STRING, omit_empty=True),
        FieldDescriptor("IPAddress", "ipaddress", STRING, omit_empty=True),
        FieldDescriptor("ConnectionTime", "connection_time", NUMBER),
        FieldDescriptor("AllowsFilenames", "allows_filenames", BOOLEAN),
    )
