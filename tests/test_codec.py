"""Unit tests for comet.serialization.codec module."""

import pytest

from comet.exceptions import MalformedInputError, SchemaDefinitionError, TypeMismatchError
from comet.serialization import (
    ANY,
    BOOLEAN,
    BYTES,
    NUMBER,
    STRING,
    FieldDescriptor,
    FieldKind,
    TypedRecord,
    array_of,
    json_type_name,
    map_of,
    record_of,
)


class Leaf(TypedRecord):
    FIELDS = (FieldDescriptor("Name", "name", STRING),)


class Tree(TypedRecord):
    FIELDS = (
        FieldDescriptor("Name", "name", STRING),
        FieldDescriptor("Children", "children", array_of(record_of("Tree"))),
    )


class Dangling(TypedRecord):
    FIELDS = (FieldDescriptor("Ref", "ref", record_of("NoSuchRecord")),)


class TestJsonTypeName:
    """Tests for json_type_name."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (None, "null"),
            (True, "boolean"),
            (False, "boolean"),
            (0, "number"),
            (2.5, "number"),
            ("x", "string"),
            ([], "array"),
            ((1, 2), "array"),
            ({}, "object"),
            (b"raw", "bytes"),
        ],
    )
    def test_names(self, value, expected):
        assert json_type_name(value) == expected


class TestFieldKind:
    """Tests for FieldKind enum."""

    def test_values(self):
        assert FieldKind.BOOLEAN == 0
        assert FieldKind.RECORD == 4
        assert FieldKind.ANY == 7

    def test_codec_kinds(self):
        assert BOOLEAN.kind == FieldKind.BOOLEAN
        assert NUMBER.kind == FieldKind.NUMBER
        assert STRING.kind == FieldKind.STRING
        assert BYTES.kind == FieldKind.BYTES
        assert ANY.kind == FieldKind.ANY
        assert record_of(Leaf).kind == FieldKind.RECORD
        assert array_of(STRING).kind == FieldKind.ARRAY
        assert map_of(STRING).kind == FieldKind.MAP


class TestScalarCodecs:
    """Tests for boolean, number, string and any codecs."""

    def test_boolean(self):
        assert BOOLEAN.decode(True, "f") is True
        assert BOOLEAN.default() is False

    def test_boolean_rejects_number(self):
        with pytest.raises(TypeMismatchError) as exc_info:
            BOOLEAN.decode(1, "Rec.Flag")
        assert exc_info.value.field == "Rec.Flag"
        assert exc_info.value.expected == "boolean"
        assert exc_info.value.actual == "number"

    def test_number_int_and_float(self):
        assert NUMBER.decode(4, "f") == 4
        assert NUMBER.decode(2.5, "f") == 2.5
        assert NUMBER.default() == 0

    def test_number_rejects_bool(self):
        with pytest.raises(TypeMismatchError) as exc_info:
            NUMBER.decode(True, "f")
        assert exc_info.value.actual == "boolean"

    def test_number_rejects_string(self):
        with pytest.raises(TypeMismatchError) as exc_info:
            NUMBER.decode("4", "B2DestinationLocation.MaxConnections")
        assert exc_info.value.expected == "number"
        assert exc_info.value.actual == "string"
        assert "B2DestinationLocation.MaxConnections" in str(exc_info.value)

    def test_string(self):
        assert STRING.decode("abc", "f") == "abc"
        assert STRING.default() == ""

    def test_string_rejects_null(self):
        with pytest.raises(TypeMismatchError) as exc_info:
            STRING.decode(None, "f")
        assert exc_info.value.actual == "null"

    def test_any_passes_through(self):
        payload = {"nested": [1, "two", None]}
        assert ANY.decode(payload, "f") is payload
        assert ANY.encode(payload) is payload
        assert ANY.default() is None

    def test_describe(self):
        assert NUMBER.describe() == "number"
        assert ANY.describe() == "any"


class TestBytesCodec:
    """Tests for BytesCodec."""

    def test_decode(self):
        assert BYTES.decode("SGVsbG8=", "f") == b"Hello"

    def test_encode(self):
        assert BYTES.encode(b"Hello") == "SGVsbG8="

    def test_encode_bytearray(self):
        assert BYTES.encode(bytearray(b"Hello")) == "SGVsbG8="

    def test_encode_none(self):
        assert BYTES.encode(None) is None

    def test_empty(self):
        assert BYTES.default() == b""
        assert BYTES.decode("", "f") == b""
        assert BYTES.encode(b"") == ""

    def test_invalid_base64(self):
        with pytest.raises(MalformedInputError) as exc_info:
            BYTES.decode("not base64!", "Rec.Data")
        assert "Rec.Data" in str(exc_info.value)
        assert exc_info.value.cause is not None

    def test_rejects_non_string(self):
        with pytest.raises(TypeMismatchError) as exc_info:
            BYTES.decode([72, 105], "f")
        assert exc_info.value.expected == "string"
        assert exc_info.value.actual == "array"


class TestRecordCodec:
    """Tests for RecordCodec."""

    def test_decode(self):
        codec = record_of(Leaf)
        leaf = codec.decode({"Name": "a"}, "Parent.Leaf")
        assert isinstance(leaf, Leaf)
        assert leaf.name == "a"

    def test_decode_rejects_non_object(self):
        with pytest.raises(TypeMismatchError) as exc_info:
            record_of(Leaf).decode("a", "Parent.Leaf")
        assert exc_info.value.expected == "object"
        assert exc_info.value.actual == "string"

    def test_encode(self):
        assert record_of(Leaf).encode(Leaf(name="a")) == {"Name": "a"}
        assert record_of(Leaf).encode(None) is None

    def test_default_is_fresh_record(self):
        codec = record_of(Leaf)
        first = codec.default()
        second = codec.default()
        assert first == Leaf()
        assert first is not second

    def test_forward_reference(self):
        tree = Tree.from_dict({"Name": "root", "Children": [{"Name": "child", "Children": []}]})
        assert isinstance(tree.children[0], Tree)
        assert tree.children[0].name == "child"

    def test_unresolved_forward_reference(self):
        with pytest.raises(SchemaDefinitionError):
            Dangling()

    def test_repr(self):
        assert repr(record_of(Leaf)) == "RecordCodec(Leaf)"
        assert repr(record_of("Leaf")) == "RecordCodec(Leaf)"


class TestArrayCodec:
    """Tests for ArrayCodec."""

    def test_decode(self):
        assert array_of(NUMBER).decode([1, 2, 3], "f") == [1, 2, 3]

    def test_decode_null(self):
        assert array_of(NUMBER).decode(None, "f") == []

    def test_decode_element_path(self):
        with pytest.raises(TypeMismatchError) as exc_info:
            array_of(NUMBER).decode([1, "x"], "Rec.Values")
        assert exc_info.value.field == "Rec.Values[1]"

    def test_decode_rejects_object(self):
        with pytest.raises(TypeMismatchError) as exc_info:
            array_of(NUMBER).decode({}, "f")
        assert exc_info.value.expected == "array"
        assert exc_info.value.actual == "object"

    def test_encode(self):
        assert array_of(BYTES).encode([b"Hello"]) == ["SGVsbG8="]
        assert array_of(NUMBER).encode(None) == []

    def test_nested(self):
        codec = array_of(array_of(STRING))
        assert codec.decode([["a"], None, []], "f") == [["a"], [], []]

    def test_repr(self):
        assert repr(array_of(NUMBER)) == "ArrayCodec(NumberCodec())"


class TestMapCodec:
    """Tests for MapCodec."""

    def test_decode(self):
        assert map_of(STRING).decode({"a": "1", "b": "2"}, "f") == {"a": "1", "b": "2"}

    def test_decode_keeps_order(self):
        decoded = map_of(NUMBER).decode({"z": 1, "a": 2}, "f")
        assert list(decoded) == ["z", "a"]

    def test_decode_null(self):
        assert map_of(STRING).decode(None, "f") == {}

    def test_decode_value_path(self):
        with pytest.raises(TypeMismatchError) as exc_info:
            map_of(STRING).decode({"a": 1}, "Rec.Props")
        assert exc_info.value.field == "Rec.Props['a']"

    def test_decode_rejects_non_string_key(self):
        with pytest.raises(TypeMismatchError) as exc_info:
            map_of(STRING).decode({1: "x"}, "Rec.Props")
        assert exc_info.value.expected == "string key"
        assert exc_info.value.actual == "int"

    def test_decode_rejects_array(self):
        with pytest.raises(TypeMismatchError) as exc_info:
            map_of(STRING).decode([], "f")
        assert exc_info.value.expected == "object"

    def test_map_of_records(self):
        decoded = map_of(record_of(Leaf)).decode({"k": {"Name": "a"}}, "f")
        assert decoded["k"] == Leaf(name="a")
        assert map_of(record_of(Leaf)).encode(decoded) == {"k": {"Name": "a"}}

    def test_encode_none(self):
        assert map_of(STRING).encode(None) == {}
