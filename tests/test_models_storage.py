"""Unit tests for comet.models.storage and comet.models.events modules."""

import pytest

from comet.exceptions import TypeMismatchError
from comet.models import (
    BucketProperties,
    ContentMeasurement,
    DestinationStatistics,
    SearchClause,
    SizeMeasurement,
    StoredObject,
    StreamableEvent,
    VaultSnapshot,
)


class TestStoredObject:
    """Tests for StoredObject."""

    def test_short_wire_names(self):
        obj = StoredObject.from_dict(
            {
                "name": "report.docx",
                "mtime": 1700000000,
                "type": "file",
                "subtree": "",
                "size": 20480,
                "dname": "Quarterly report",
                "from": "alice@example.com",
                "has_attachments": True,
                "r": True,
                "f": 3,
                "b": 4096,
                "d": 1,
            }
        )
        assert obj.modify_time == 1700000000
        assert obj.display_name == "Quarterly report"
        assert obj.from_ == "alice@example.com"
        assert obj.has_attachments is True
        assert obj.recursive_count_known is True
        assert obj.recursive_files == 3
        assert obj.recursive_bytes == 4096
        assert obj.recursive_folders == 1

    def test_optional_booleans_omitted(self):
        d = StoredObject(name="a").to_dict()
        assert "has_attachments" not in d
        assert "r" not in d
        assert d["name"] == "a"
        assert d["mtime"] == 0

    def test_round_trip(self):
        obj = StoredObject(name="a", size=5, recursive_count_known=False)
        assert StoredObject.from_json(obj.to_json()) == obj


class TestVaultSnapshot:
    """Tests for VaultSnapshot."""

    def test_parse(self):
        snap = VaultSnapshot.from_dict(
            {
                "Snapshot": "snap-1",
                "EngineType": "engine1/file",
                "Source": "src-1",
                "CreateTime": 1700000000,
                "HasOriginalPathInfo": True,
                "Tags": ["weekly"],
            }
        )
        assert snap.has_original_path_info is True
        assert snap.tags == ["weekly"]

    def test_defaults(self):
        d = VaultSnapshot().to_dict()
        assert d["HasOriginalPathInfo"] is False
        assert d["Tags"] == []


class TestSearchClause:
    """Tests for the recursive SearchClause."""

    def test_nested(self):
        clause = SearchClause.from_dict(
            {
                "ClauseType": "and",
                "ClauseChildren": [
                    {"ClauseType": "", "RuleField": "Name", "RuleOperator": "str_contains", "RuleValue": "tax"},
                    {
                        "ClauseType": "or",
                        "ClauseChildren": [
                            {"RuleField": "Size", "RuleOperator": "int_gt", "RuleValue": "1024"}
                        ],
                    },
                ],
            }
        )
        assert clause.clause_children[0].rule_value == "tax"
        grandchild = clause.clause_children[1].clause_children[0]
        assert isinstance(grandchild, SearchClause)
        assert grandchild.rule_field == "Size"
        assert grandchild.clause_children == []

    def test_nested_error_path(self):
        with pytest.raises(TypeMismatchError) as exc_info:
            SearchClause.from_dict({"ClauseChildren": [{"ClauseChildren": [{"RuleValue": 5}]}]})
        assert exc_info.value.field == "SearchClause.ClauseChildren[0].ClauseChildren[0].RuleValue"

    def test_round_trip(self):
        clause = SearchClause(
            clause_type="and",
            clause_children=[SearchClause(rule_field="Name", rule_operator="str_eq", rule_value="x")],
        )
        assert SearchClause.from_json(clause.to_json()) == clause


class TestBucketAndStatistics:
    """Tests for BucketProperties and DestinationStatistics."""

    def test_bucket_properties(self):
        bucket = BucketProperties.from_dict(
            {
                "CreateTime": 1700000000,
                "ReadWriteKeyFormat": 0,
                "ReadWriteKey": "secret",
                "Size": {"Size": 100, "MeasureStarted": 1, "MeasureCompleted": 2},
            }
        )
        assert isinstance(bucket.size, SizeMeasurement)
        assert bucket.size.size == 100

    def test_destination_statistics(self):
        stats = DestinationStatistics.from_dict(
            {
                "ClientProvidedSize": {"Size": 1},
                "ClientProvidedContent": {"Components": [{"Bytes": 1, "UsedBy": ["src-1"]}]},
                "LastSuccessfulDeepVerify_GUID": "job-9",
            }
        )
        assert isinstance(stats.client_provided_content, ContentMeasurement)
        assert stats.last_successful_deep_verify__guid == "job-9"

    def test_deep_verify_omitted_when_none(self):
        stats = DestinationStatistics()
        stats.last_successful_deep_verify__guid = None
        stats.last_successful_deep_verify__start_time = None
        stats.last_successful_deep_verify__end_time = None
        d = stats.to_dict()
        assert list(d) == ["ClientProvidedSize", "ClientProvidedContent"]


class TestStreamableEvent:
    """Tests for StreamableEvent."""

    def test_opaque_data(self):
        event = StreamableEvent.from_dict(
            {
                "Actor": "admin",
                "OwnerOrganizationID": "org-1",
                "ResourceID": "user-1",
                "Type": 4101,
                "Timestamp": 1700000000,
                "Data": {"Username": "alice", "Nested": [1, None, {"a": True}]},
            }
        )
        assert event.data == {"Username": "alice", "Nested": [1, None, {"a": True}]}
        assert event.to_dict()["Data"] == event.data

    def test_data_omitted_when_absent(self):
        event = StreamableEvent.from_dict({"Actor": "admin", "Type": 4100})
        assert event.data is None
        assert "Data" not in event.to_dict()

    def test_null_data(self):
        event = StreamableEvent.from_dict({"Data": None})
        assert event.data is None
