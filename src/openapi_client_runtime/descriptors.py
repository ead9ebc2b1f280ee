"""Type descriptors driving response deserialization.

Generated endpoint and model code declares types with a small string grammar::

    String | Integer | Float | Boolean | Date | DateTime | Object | File
    Array<T>
    Hash<String, T>
    <ModelName>

:func:`parse_type_descriptor` turns such a string into a tree of
:class:`Primitive`, :class:`ArrayOf`, :class:`MapOf` and :class:`Named`
nodes. Results are cached, so each distinct string is parsed only once.
"""

import re
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache

from openapi_client_runtime.errors.exceptions import InvalidTypeDescriptorError


class PrimitiveKind(str, Enum):
    STRING = "String"
    INTEGER = "Integer"
    FLOAT = "Float"
    BOOLEAN = "Boolean"
    DATE = "Date"
    DATETIME = "DateTime"
    OBJECT = "Object"
    FILE = "File"


_PRIMITIVES = {kind.value: kind for kind in PrimitiveKind} | {
    "BOOLEAN": PrimitiveKind.BOOLEAN,
    "Binary": PrimitiveKind.FILE,
    "ByteArray": PrimitiveKind.FILE,
}

_ARRAY_RE = re.compile(r"^Array\s*<\s*(?P<item>.+?)\s*>$")
_HASH_RE = re.compile(r"^Hash\s*<\s*(?P<key>[^,<>]+?)\s*,\s*(?P<value>.+?)\s*>$")
_NAME_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_.]*$")


@dataclass(frozen=True)
class Primitive:
    kind: PrimitiveKind

    def __str__(self) -> str:
        return self.kind.value


@dataclass(frozen=True)
class ArrayOf:
    item: "TypeDescriptor"

    def __str__(self) -> str:
        return f"Array<{self.item}>"


@dataclass(frozen=True)
class MapOf:
    """``Hash<String, T>``; keys are always strings."""

    value: "TypeDescriptor"

    def __str__(self) -> str:
        return f"Hash<String, {self.value}>"


@dataclass(frozen=True)
class Named:
    """A model type looked up in the model registry."""

    name: str

    def __str__(self) -> str:
        return self.name


TypeDescriptor = Primitive | ArrayOf | MapOf | Named


def _balanced(text: str) -> bool:
    depth = 0
    for char in text:
        if char == "<":
            depth += 1
        elif char == ">":
            depth -= 1
            if depth < 0:
                return False
    return depth == 0


@lru_cache(maxsize=None)
def parse_type_descriptor(text: str) -> TypeDescriptor:
    """Parse a descriptor string such as ``Hash<String, Array<Pet>>``.

    Raises:
        InvalidTypeDescriptorError: If the string does not follow the grammar.
    """
    source = text.strip()
    if not source or not _balanced(source):
        raise InvalidTypeDescriptorError(f"invalid type descriptor: {text!r}")

    if source in _PRIMITIVES:
        return Primitive(_PRIMITIVES[source])

    match = _ARRAY_RE.match(source)
    if match and _balanced(match["item"]):
        return ArrayOf(parse_type_descriptor(match["item"]))

    match = _HASH_RE.match(source)
    if match and _balanced(match["value"]):
        if match["key"] != "String":
            raise InvalidTypeDescriptorError(f"only String keys are supported in {text!r}")
        return MapOf(parse_type_descriptor(match["value"]))

    if _NAME_RE.match(source):
        return Named(source)
    raise InvalidTypeDescriptorError(f"invalid type descriptor: {text!r}")


def as_descriptor(value: "str | TypeDescriptor") -> TypeDescriptor:
    """Accept either a descriptor string or an already parsed descriptor."""
    if isinstance(value, str):
        return parse_type_descriptor(value)
    if isinstance(value, TypeDescriptor):
        return value
    raise InvalidTypeDescriptorError(f"not a type descriptor: {value!r}")
