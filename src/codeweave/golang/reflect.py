"""Map Python type annotations onto Go types.

Generators that describe their data with dataclasses can emit the matching
Go declarations without spelling every type by hand. Named types that live
in another package are resolved through a callback, normally
Unit.named_type, so that their imports are registered on the way.

Mapping:
    bool, int, float, str       -> bool, int, float64, string
    bytes                       -> []byte
    Any, object                 -> any
    list[T], Sequence[T]        -> []T
    tuple[T, ...]               -> []T
    tuple[T, T, T]              -> [3]T
    set[T], frozenset[T]        -> map[T]struct{}
    dict[K, V], Mapping[K, V]   -> map[K]V
    T | None                    -> *T
    datetime / timedelta        -> time.Time / time.Duration
    dataclass or Enum subclass  -> named type in the local package

Anything else raises UnsupportedConstructError.

"""

from __future__ import annotations

import dataclasses
import datetime
import enum
import types
import typing
from collections.abc import Callable, Mapping, Sequence, Set
from typing import Annotated, Any, Union

from codeweave.errors import UnsupportedConstructError
from codeweave.golang.nodes import (
    ANY,
    BOOL,
    BYTE,
    FLOAT64,
    INT,
    STRING,
    Field,
    IntLit,
    MapType,
    NamedType,
    PointerType,
    SliceType,
    StructType,
    Tag,
    Type,
)
from codeweave.utils.text import is_identifier, to_pascal

type NamedTypeFactory = Callable[[str, str], NamedType]

TAG_METADATA_KEY = "go_tag"
DOC_METADATA_KEY = "doc"

_SCALARS: dict[object, Type] = {
    bool: BOOL,
    int: INT,
    float: FLOAT64,
    str: STRING,
    Any: ANY,
    object: ANY,
}

# (name, import path) of well-known library types
_LIBRARY_TYPES: dict[type, tuple[str, str]] = {
    datetime.datetime: ("Time", "time"),
    datetime.timedelta: ("Duration", "time"),
}

_SEQUENCES = (list, Sequence)
_SETS = (set, frozenset, Set)
_MAPPINGS = (dict, Mapping)

_EMPTY_STRUCT = StructType()


def _local_named_type(name: str, path: str) -> NamedType:
    if path:
        raise UnsupportedConstructError(f"{path}.{name}", "needs a unit to import its package")
    return NamedType(name)


def go_type(annotation: object, named_type: NamedTypeFactory = _local_named_type) -> Type:
    """Go type for a Python annotation.

    Args:
        annotation: A class or typing construct
        named_type: Factory for (name, import path) references

    Raises:
        UnsupportedConstructError: The annotation has no Go counterpart
    """
    origin = typing.get_origin(annotation)
    args = typing.get_args(annotation)

    if origin is Annotated:
        return go_type(args[0], named_type)

    if annotation in _SCALARS:
        return _SCALARS[annotation]

    if annotation is bytes:
        return SliceType(BYTE)

    if isinstance(annotation, type):
        if annotation in _LIBRARY_TYPES:
            name, path = _LIBRARY_TYPES[annotation]
            return named_type(name, path)
        if dataclasses.is_dataclass(annotation) or issubclass(annotation, enum.Enum):
            if not is_identifier(annotation.__name__):
                raise UnsupportedConstructError(annotation, "has no usable Go type name")
            return named_type(annotation.__name__, "")

    if origin is Union or origin is types.UnionType:
        present = [arg for arg in args if arg is not type(None)]
        if len(present) == 1 and len(present) < len(args):
            return PointerType(go_type(present[0], named_type))
        raise UnsupportedConstructError(annotation, "is a union Go cannot express")

    if origin is tuple:
        if len(args) == 2 and args[1] is Ellipsis:
            return SliceType(go_type(args[0], named_type))
        if args and all(arg == args[0] for arg in args):
            return SliceType(go_type(args[0], named_type), IntLit(len(args)))
        raise UnsupportedConstructError(annotation, "is a heterogeneous tuple")

    if origin in _SEQUENCES and len(args) == 1:
        return SliceType(go_type(args[0], named_type))

    if origin in _SETS and len(args) == 1:
        return MapType(go_type(args[0], named_type), _EMPTY_STRUCT)

    if origin in _MAPPINGS and len(args) == 2:
        return MapType(go_type(args[0], named_type), go_type(args[1], named_type))

    raise UnsupportedConstructError(annotation, "has no Go type")


def go_struct(cls: type, named_type: NamedTypeFactory = _local_named_type) -> StructType:
    """Struct type for a dataclass.

    Field names are converted to PascalCase so they are exported. Each
    field gets a ``json`` tag with its Python name, plus ``omitempty`` for
    optional fields; a ``go_tag`` mapping in the field metadata replaces
    the default tags, and a ``doc`` string becomes the field comment.

    Example:
        >>> @dataclasses.dataclass
        ... class User:
        ...     user_id: int
        >>> go_struct(User).fields[0].name
        'UserId'

    """
    if not (isinstance(cls, type) and dataclasses.is_dataclass(cls)):
        raise UnsupportedConstructError(cls, "is not a dataclass")

    hints = typing.get_type_hints(cls, include_extras=True)
    fields: list[Field] = []

    for dc_field in dataclasses.fields(cls):
        name = to_pascal(dc_field.name)
        if not is_identifier(name):
            raise UnsupportedConstructError(dc_field.name, "has no usable Go field name")

        typ = go_type(hints[dc_field.name], named_type)
        fields.append(
            Field(
                type=typ,
                name=name,
                tags=_field_tags(dc_field, typ),
                doc=dc_field.metadata.get(DOC_METADATA_KEY, ""),
            )
        )

    return StructType(tuple(fields))


def _field_tags(dc_field: dataclasses.Field, typ: Type) -> tuple[Tag, ...]:
    override = dc_field.metadata.get(TAG_METADATA_KEY)
    if override is not None:
        return tuple(Tag(key, value) for key, value in override.items())

    value = dc_field.name
    if isinstance(typ, PointerType):
        value += ",omitempty"
    return (Tag("json", value),)


__all__ = ["DOC_METADATA_KEY", "TAG_METADATA_KEY", "go_struct", "go_type"]
