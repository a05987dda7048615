"""Field codecs for JSON record serialization.

A codec converts one field value between its wire form (a value produced
by :func:`json.loads`) and its typed in-memory form. Every field of a
record schema owns exactly one codec; container codecs wrap the codec of
their elements.

Example:
    Declaring field types::

        from comet.serialization.codec import STRING, NUMBER, array_of, map_of, record_of

        tags = array_of(STRING)
        limits = map_of(NUMBER)
        ranges = array_of(record_of(RetentionRange))
"""

import base64
import sys
from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Any, Dict, List, Optional, Type, Union

from comet.exceptions import MalformedInputError, SchemaDefinitionError, TypeMismatchError


class FieldKind(IntEnum):
    """Semantic type identifiers for record fields."""

    BOOLEAN = 0
    NUMBER = 1
    STRING = 2
    BYTES = 3
    RECORD = 4
    ARRAY = 5
    MAP = 6
    ANY = 7


def json_type_name(value: Any) -> str:
    """Get the JSON type name of a decoded value.

    Args:
        value: A value as produced by :func:`json.loads`.

    Returns:
        One of ``null``, ``boolean``, ``number``, ``string``, ``array``,
        ``object``, or the Python type name for anything else.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


class FieldCodec(ABC):
    """Base interface for field codecs.

    Codecs are stateless apart from forward-reference resolution, so a
    single instance may be shared between fields.
    """

    @property
    @abstractmethod
    def kind(self) -> FieldKind:
        """Get the semantic type handled by this codec."""
        pass

    @abstractmethod
    def default(self) -> Any:
        """Get a fresh zero value for this type."""
        pass

    @abstractmethod
    def decode(self, value: Any, path: str) -> Any:
        """Convert a wire value into its typed form.

        Args:
            value: The raw value from the decoded JSON tree.
            path: Dotted field path, used in error messages.

        Returns:
            The typed value.

        Raises:
            TypeMismatchError: If the value has the wrong JSON type.
            MalformedInputError: If the value cannot be decoded.
        """
        pass

    @abstractmethod
    def encode(self, value: Any) -> Any:
        """Convert a typed value back into a JSON-compatible value."""
        pass

    def describe(self) -> str:
        """Get the JSON type name used in error messages."""
        return self.kind.name.lower()

    def bind(self, owner: type) -> None:
        """Attach the codec to the record class that declares it."""
        pass

    def mismatch(self, value: Any, path: str) -> TypeMismatchError:
        return TypeMismatchError(path, self.describe(), json_type_name(value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class BooleanCodec(FieldCodec):
    """Codec for JSON ``true``/``false``."""

    @property
    def kind(self) -> FieldKind:
        return FieldKind.BOOLEAN

    def default(self) -> bool:
        return False

    def decode(self, value: Any, path: str) -> bool:
        if not isinstance(value, bool):
            raise self.mismatch(value, path)
        return value

    def encode(self, value: Any) -> Any:
        return value


class NumberCodec(FieldCodec):
    """Codec for JSON numbers.

    Integers and floats are kept as received. Booleans are rejected even
    though Python treats them as integers.
    """

    @property
    def kind(self) -> FieldKind:
        return FieldKind.NUMBER

    def default(self) -> int:
        return 0

    def decode(self, value: Any, path: str) -> Union[int, float]:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise self.mismatch(value, path)
        return value

    def encode(self, value: Any) -> Any:
        return value


class StringCodec(FieldCodec):
    """Codec for JSON strings."""

    @property
    def kind(self) -> FieldKind:
        return FieldKind.STRING

    def default(self) -> str:
        return ""

    def decode(self, value: Any, path: str) -> str:
        if not isinstance(value, str):
            raise self.mismatch(value, path)
        return value

    def encode(self, value: Any) -> Any:
        return value


class BytesCodec(FieldCodec):
    """Codec for byte sequences carried as base64 strings.

    Uses the standard alphabet with padding and no line wrapping.
    """

    @property
    def kind(self) -> FieldKind:
        return FieldKind.BYTES

    def default(self) -> bytes:
        return b""

    def describe(self) -> str:
        return "string"

    def decode(self, value: Any, path: str) -> bytes:
        if not isinstance(value, str):
            raise self.mismatch(value, path)
        try:
            return base64.b64decode(value, validate=True)
        except ValueError as e:
            raise MalformedInputError(f"'{path}' is not valid base64: {e}", cause=e) from e

    def encode(self, value: Any) -> Optional[str]:
        if value is None:
            return None
        return base64.b64encode(bytes(value)).decode("ascii")


class AnyCodec(FieldCodec):
    """Codec for opaque values, passed through without validation."""

    @property
    def kind(self) -> FieldKind:
        return FieldKind.ANY

    def default(self) -> Any:
        return None

    def decode(self, value: Any, path: str) -> Any:
        return value

    def encode(self, value: Any) -> Any:
        return value


class RecordCodec(FieldCodec):
    """Codec for a nested record.

    Args:
        record_type: The record class, or the name of a record class defined
            in the same module as the declaring record. Names are resolved
            on first use, which allows self-referencing types.
    """

    def __init__(self, record_type: Union[Type, str]):
        self._record_type = record_type
        self._module: Optional[str] = None

    @property
    def kind(self) -> FieldKind:
        return FieldKind.RECORD

    @property
    def record_type(self) -> Type:
        """Get the nested record class, resolving a forward reference if needed."""
        if isinstance(self._record_type, str):
            module = sys.modules.get(self._module) if self._module else None
            resolved = getattr(module, self._record_type, None)
            if resolved is None:
                raise SchemaDefinitionError(
                    f"Cannot resolve record type {self._record_type!r} in module {self._module!r}"
                )
            self._record_type = resolved
        return self._record_type

    def describe(self) -> str:
        return "object"

    def bind(self, owner: type) -> None:
        if isinstance(self._record_type, str) and self._module is None:
            self._module = owner.__module__

    def default(self) -> Any:
        return self.record_type()

    def decode(self, value: Any, path: str) -> Any:
        if not isinstance(value, dict):
            raise self.mismatch(value, path)
        record = self.record_type()
        record._load(value, path)
        return record

    def encode(self, value: Any) -> Optional[Dict[str, Any]]:
        if value is None:
            return None
        return value.to_dict()

    def __repr__(self) -> str:
        name = self._record_type if isinstance(self._record_type, str) else self._record_type.__name__
        return f"RecordCodec({name})"


class ArrayCodec(FieldCodec):
    """Codec for a JSON array whose elements share one codec.

    A ``null`` wire value decodes to an empty list.
    """

    def __init__(self, item: FieldCodec):
        self._item = item

    @property
    def kind(self) -> FieldKind:
        return FieldKind.ARRAY

    @property
    def item(self) -> FieldCodec:
        """Get the element codec."""
        return self._item

    def bind(self, owner: type) -> None:
        self._item.bind(owner)

    def default(self) -> List[Any]:
        return []

    def decode(self, value: Any, path: str) -> List[Any]:
        if value is None:
            return []
        if not isinstance(value, (list, tuple)):
            raise self.mismatch(value, path)
        return [self._item.decode(v, f"{path}[{i}]") for i, v in enumerate(value)]

    def encode(self, value: Any) -> List[Any]:
        if value is None:
            return []
        return [self._item.encode(v) for v in value]

    def __repr__(self) -> str:
        return f"ArrayCodec({self._item!r})"


class MapCodec(FieldCodec):
    """Codec for a JSON object with string keys and uniformly typed values.

    A ``null`` wire value decodes to an empty dict. Key order is kept.
    """

    def __init__(self, item: FieldCodec):
        self._item = item

    @property
    def kind(self) -> FieldKind:
        return FieldKind.MAP

    @property
    def item(self) -> FieldCodec:
        """Get the value codec."""
        return self._item

    def describe(self) -> str:
        return "object"

    def bind(self, owner: type) -> None:
        self._item.bind(owner)

    def default(self) -> Dict[str, Any]:
        return {}

    def decode(self, value: Any, path: str) -> Dict[str, Any]:
        if value is None:
            return {}
        if not isinstance(value, dict):
            raise self.mismatch(value, path)
        result = {}
        for k, v in value.items():
            if not isinstance(k, str):
                raise TypeMismatchError(f"{path}[{k!r}]", "string key", type(k).__name__)
            result[k] = self._item.decode(v, f"{path}[{k!r}]")
        return result

    def encode(self, value: Any) -> Dict[str, Any]:
        if value is None:
            return {}
        return {k: self._item.encode(v) for k, v in value.items()}

    def __repr__(self) -> str:
        return f"MapCodec({self._item!r})"


BOOLEAN = BooleanCodec()
NUMBER = NumberCodec()
STRING = StringCodec()
BYTES = BytesCodec()
ANY = AnyCodec()


def record_of(record_type: Union[Type, str]) -> RecordCodec:
    """Create a codec for a nested record type (or forward-referenced name)."""
    return RecordCodec(record_type)


def array_of(item: FieldCodec) -> ArrayCodec:
    """Create a codec for an array of ``item`` values."""
    return ArrayCodec(item)


def map_of(item: FieldCodec) -> MapCodec:
    """Create a codec for a string-keyed map of ``item`` values."""
    return MapCodec(item)
