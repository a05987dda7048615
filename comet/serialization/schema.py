"""Record schemas: the table mapping wire names to local fields."""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

from comet.exceptions import SchemaDefinitionError
from comet.serialization.codec import FieldCodec


@dataclass
class FieldDescriptor:
    """Describes one declared field of a record.

    Attributes:
        wire_name: Key used in the JSON object, e.g. ``"AccountID"``.
        name: Local attribute name, e.g. ``"account_id"``.
        codec: Conversion rules for the field's semantic type.
        optional: If True the field is unset (``None``) after ``clear()``
            instead of holding the codec's zero value.
        omit_empty: If True the field is left out of ``to_dict()`` output
            while its value is ``None``.
        deprecated: Deprecation notice for legacy fields, if any.
        doc: Short description of the field.
    """

    wire_name: str
    name: str
    codec: FieldCodec
    optional: bool = False
    omit_empty: bool = False
    deprecated: Optional[str] = None
    doc: str = ""

    def __post_init__(self):
        # unset optional fields are never written as null
        if self.optional:
            self.omit_empty = True

    @property
    def kind(self):
        """Get the semantic type of the field."""
        return self.codec.kind

    @property
    def is_deprecated(self) -> bool:
        return self.deprecated is not None

    def default(self) -> Any:
        """Get a fresh default value for the field."""
        if self.optional:
            return None
        return self.codec.default()


@dataclass
class Schema:
    """Ordered field table for one record type."""

    type_name: str
    fields: List[FieldDescriptor] = field(default_factory=list)

    def __post_init__(self):
        self._by_wire: Dict[str, FieldDescriptor] = {}
        self._by_name: Dict[str, FieldDescriptor] = {}
        declared = self.fields
        self.fields = []
        for f in declared:
            self._register(f)

    def _register(self, descriptor: FieldDescriptor) -> None:
        if descriptor.wire_name in self._by_wire:
            raise SchemaDefinitionError(
                f"{self.type_name}: duplicate wire name {descriptor.wire_name!r}"
            )
        if descriptor.name in self._by_name:
            raise SchemaDefinitionError(
                f"{self.type_name}: duplicate field name {descriptor.name!r}"
            )
        if descriptor.name == "unknown_json_fields":
            raise SchemaDefinitionError(
                f"{self.type_name}: 'unknown_json_fields' is reserved"
            )
        self.fields.append(descriptor)
        self._by_wire[descriptor.wire_name] = descriptor
        self._by_name[descriptor.name] = descriptor

    def get_field(self, wire_name: str) -> Optional[FieldDescriptor]:
        """Get a field descriptor by wire name."""
        return self._by_wire.get(wire_name)

    def get_by_name(self, name: str) -> Optional[FieldDescriptor]:
        """Get a field descriptor by local attribute name."""
        return self._by_name.get(name)

    def add_field(self, descriptor: FieldDescriptor) -> FieldDescriptor:
        """Append a field to the schema."""
        self._register(descriptor)
        return descriptor

    @property
    def wire_names(self) -> List[str]:
        return [f.wire_name for f in self.fields]

    @property
    def names(self) -> List[str]:
        return [f.name for f in self.fields]

    def __iter__(self) -> Iterator[FieldDescriptor]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def __contains__(self, wire_name: object) -> bool:
        return wire_name in self._by_wire
