"""Unit tests for comet.models.devices module."""

from comet.models import DiskDrive, LiveUserConnection, OSInfo, Partition


class TestOSInfo:
    """Tests for OSInfo."""

    def test_lowercase_wire_names(self):
        info = OSInfo.from_dict({"version": "10.0", "distribution": "", "build": "19045", "os": "windows", "arch": "amd64"})
        assert info.os == "windows"
        assert info.arch == "amd64"
        assert OSInfo.schema().wire_names == ["version", "distribution", "build", "os", "arch"]

    def test_capitalized_keys_are_unknown(self):
        info = OSInfo.from_dict({"OS": "linux"})
        assert info.os == ""
        assert info.unknown_json_fields == {"OS": "linux"}


class TestDiskDrive:
    """Tests for DiskDrive and Partition."""

    def test_parse(self):
        drive = DiskDrive.from_dict(
            {
                "ID": "disk0",
                "DeviceName": "\\\\.\\PhysicalDrive0",
                "Size": 512110190592,
                "Partitions": [
                    {"DeviceName": "C:", "Filesystem": "NTFS", "MountPoints": ["C:\\"], "Size": 511000000000}
                ],
                "DeviceParents": None,
                "Cylinders": 62260,
                "Heads": 255,
                "Sectors": 63,
                "SectorSize": 512,
            }
        )
        assert isinstance(drive.partitions[0], Partition)
        assert drive.partitions[0].mount_points == ["C:\\"]
        assert drive.device_parents == []
        assert drive.cylinders == 62260

    def test_geometry_deprecated(self):
        schema = DiskDrive.schema()
        for wire_name in ("Cylinders", "Heads", "Sectors"):
            assert schema.get_field(wire_name).is_deprecated
        assert not schema.get_field("SectorSize").is_deprecated

    def test_partition_conflicts_pass_through(self):
        conflicts = [{"PartitionA": 0, "PartitionB": 1}]
        drive = DiskDrive.from_dict({"PartitionConflicts": conflicts})
        assert drive.to_dict()["PartitionConflicts"] == conflicts


class TestLiveUserConnection:
    """Tests for LiveUserConnection."""

    def test_parse(self):
        conn = LiveUserConnection.from_dict(
            {
                "Username": "alice",
                "DeviceID": "device-1",
                "ReportedVersion": "23.3.5",
                "ReportedPlatform": "windows",
                "ReportedPlatformVersion": {"version": "10.0", "os": "windows"},
                "IPAddress": "203.0.113.7",
                "ConnectionTime": 1700000000,
                "AllowsFilenames": True,
            }
        )
        assert conn.reported_platform_version.version == "10.0"
        assert conn.ipaddress == "203.0.113.7"
        assert conn.allows_filenames is True

    def test_optional_fields_omitted(self):
        conn = LiveUserConnection(username="alice")
        conn.device_time_zone = None
        conn.ipaddress = None
        conn.reported_platform_version = None
        d = conn.to_dict()
        assert "DeviceTimeZone" not in d
        assert "IPAddress" not in d
        assert "ReportedPlatformVersion" not in d
        assert d["AllowsFilenames"] is False
