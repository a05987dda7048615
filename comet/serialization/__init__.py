"""Comet serialization package."""

from comet.serialization.codec import (
    FieldKind,
    FieldCodec,
    BooleanCodec,
    NumberCodec,
    StringCodec,
    BytesCodec,
    AnyCodec,
    RecordCodec,
    ArrayCodec,
    MapCodec,
    BOOLEAN,
    NUMBER,
    STRING,
    BYTES,
    ANY,
    record_of,
    array_of,
    map_of,
    json_type_name,
)
from comet.serialization.schema import FieldDescriptor, Schema
from comet.serialization.record import TypedRecord

__all__ = [
    "FieldKind",
    "FieldCodec",
    "BooleanCodec",
    "NumberCodec",
    "StringCodec",
    "BytesCodec",
    "AnyCodec",
    "RecordCodec",
    "ArrayCodec",
    "MapCodec",
    "BOOLEAN",
    "NUMBER",
    "STRING",
    "BYTES",
    "ANY",
    "record_of",
    "array_of",
    "map_of",
    "json_type_name",
    "FieldDescriptor",
    "Schema",
    "TypedRecord",
]
