"""Typed records backed by a declarative schema.

Every Comet API data structure is a :class:`TypedRecord` subclass that
lists its fields once, as a table of :class:`FieldDescriptor` entries.
Parsing and serialization are driven entirely by that table.

Example:
    Declaring and using a record::

        class RetentionRange(TypedRecord):
            FIELDS = (
                FieldDescriptor("Type", "type", NUMBER),
                FieldDescriptor("Jobs", "jobs", NUMBER),
            )

        r = RetentionRange.from_json('{"Type": 900, "Jobs": 5, "Extra": 1}')
        r.jobs                  # 5
        r.unknown_json_fields   # {"Extra": 1}
        r.to_dict()             # {"Type": 900, "Jobs": 5, "Extra": 1}

Any key that the schema does not declare is kept in
``unknown_json_fields`` and written back unchanged, so records survive a
round trip through an older client without losing newer server fields.
"""

import copy
import json
from typing import Any, Dict, Optional, Tuple, Type, TypeVar

from comet.config import JsonConfig
from comet.exceptions import MalformedInputError, SerializationException, TypeMismatchError
from comet.logging import get_logger
from comet.serialization.codec import FieldKind, json_type_name
from comet.serialization.schema import FieldDescriptor, Schema


_logger = get_logger("serialization")

R = TypeVar("R", bound="TypedRecord")

_COLLECTION_KINDS = (FieldKind.ARRAY, FieldKind.MAP)


def _reject_constant(name: str) -> Any:
    # NaN, Infinity and -Infinity are not valid JSON
    raise MalformedInputError(f"Failed to parse JSON: invalid constant {name!r}")


class TypedRecord:
    """Base class for schema-driven JSON records.

    Subclasses set ``FIELDS`` to a tuple of :class:`FieldDescriptor`. The
    class schema is built once, when the subclass is created.

    Args:
        **kwargs: Initial values for declared fields, by local name.
            ``unknown_json_fields`` may also be given.

    Attributes:
        unknown_json_fields: Wire keys not declared by the schema, with
            their raw values.
    """

    FIELDS: Tuple[FieldDescriptor, ...] = ()
    _schema: Schema = Schema("TypedRecord")

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls._schema = Schema(cls.__name__, list(cls.FIELDS))
        for descriptor in cls._schema:
            descriptor.codec.bind(cls)

    def __init__(self, **kwargs):
        self.clear()
        for name, value in kwargs.items():
            if name == "unknown_json_fields":
                self.unknown_json_fields = copy.deepcopy(dict(value))
            elif self._schema.get_by_name(name) is None:
                raise TypeError(
                    f"{type(self).__name__}() got an unexpected keyword argument {name!r}"
                )
            else:
                setattr(self, name, value)

    @classmethod
    def schema(cls) -> Schema:
        """Get the field table of this record type."""
        return cls._schema

    @classmethod
    def default(cls: Type[R]) -> R:
        """Create an instance with every field at its default value."""
        return cls()

    def clear(self) -> None:
        """Reset every field to its default and drop unknown fields."""
        for descriptor in self._schema:
            setattr(self, descriptor.name, descriptor.default())
        self.unknown_json_fields: Dict[str, Any] = {}

    @classmethod
    def from_dict(cls: Type[R], obj: Any) -> R:
        """Create a record from a decoded JSON object.

        Args:
            obj: A dict as produced by :func:`json.loads`.

        Returns:
            A new record instance.

        Raises:
            TypeMismatchError: If ``obj`` is not a dict, or a declared
                field holds a value of the wrong type.
            MalformedInputError: If a byte-sequence field is not valid base64.
        """
        return cls().load_dict(obj)

    @classmethod
    def from_json(cls: Type[R], text: Any) -> R:
        """Create a record from JSON text.

        Raises:
            TypeMismatchError: If ``text`` is not a string or the decoded
                value does not match the schema.
            MalformedInputError: If ``text`` is not valid JSON.
        """
        return cls().load_json(text)

    def load_dict(self: R, obj: Any) -> R:
        """Parse a decoded JSON object into this record, in place.

        Keys present in ``obj`` overwrite the matching fields; fields not
        mentioned keep their current values. If any key fails to convert,
        the record is left unchanged.

        Returns:
            This record.
        """
        return self._load(obj)

    def load_json(self: R, text: Any) -> R:
        """Parse JSON text into this record, in place.

        Returns:
            This record.
        """
        if not isinstance(text, str):
            raise TypeMismatchError("top-level", "string", json_type_name(text))
        try:
            data = json.loads(text, parse_constant=_reject_constant)
            return self._load(data)
        except json.JSONDecodeError as e:
            raise MalformedInputError(f"Failed to parse JSON: {e}", cause=e) from e
        except RecursionError as e:
            raise MalformedInputError("Failed to parse JSON: nesting too deep", cause=e) from e

    def _load(self: R, obj: Any, path: Optional[str] = None) -> R:
        if not isinstance(obj, dict):
            raise TypeMismatchError(path or "top-level", "object", json_type_name(obj))
        base = path or type(self).__name__

        values: Dict[str, Any] = {}
        unknown: Dict[str, Any] = {}
        for key, value in obj.items():
            descriptor = self._schema.get_field(key)
            if descriptor is None:
                unknown[key] = copy.deepcopy(value)
            elif value is None and descriptor.optional and descriptor.kind not in _COLLECTION_KINDS:
                values[descriptor.name] = None
            else:
                values[descriptor.name] = descriptor.codec.decode(value, f"{base}.{key}")

        for name, value in values.items():
            setattr(self, name, value)
        if unknown:
            _logger.debug("%s: preserving unrecognized fields %s", base, list(unknown))
            self.unknown_json_fields.update(unknown)
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert the record to a JSON-compatible dict.

        Declared fields come first, in schema order; ``omit_empty`` fields
        are skipped while ``None``. Unknown fields are merged last and win
        over a declared field with the same wire name. Unknown values are
        copied, so the result never aliases the record.
        """
        result: Dict[str, Any] = {}
        for descriptor in self._schema:
            value = getattr(self, descriptor.name)
            if value is None and descriptor.omit_empty:
                continue
            result[descriptor.wire_name] = descriptor.codec.encode(value)
        result.update(copy.deepcopy(self.unknown_json_fields))
        return result

    def to_json(self, config: Optional[JsonConfig] = None) -> str:
        """Convert the record to JSON text.

        Args:
            config: Output formatting options. Defaults to compact output
                in wire order.

        Raises:
            SerializationException: If a value cannot be written as JSON,
                such as a NaN or infinite float.
        """
        config = config or JsonConfig()
        try:
            return json.dumps(self.to_dict(), allow_nan=False, **config.dumps_kwargs())
        except (TypeError, ValueError) as e:
            raise SerializationException(f"Failed to serialize to JSON: {e}", cause=e) from e

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        for descriptor in self._schema:
            if getattr(self, descriptor.name) != getattr(other, descriptor.name):
                return False
        return self.unknown_json_fields == other.unknown_json_fields

    __hash__ = None

    def __repr__(self) -> str:
        parts = [f"{d.name}={getattr(self, d.name)!r}" for d in self._schema]
        if self.unknown_json_fields:
            parts.append(f"unknown_json_fields={self.unknown_json_fields!r}")
        return f"{type(self).__name__}({', '.join(parts)})"
