"""Response deserialization into primitives, containers and models.

The :class:`Deserializer` decodes a response body according to its
Content-Type and then converts the decoded value recursively, driven by a
type descriptor (see :mod:`openapi_client_runtime.descriptors`).

Example:
    ```python
    deserializer = Deserializer(registry)
    pets = deserializer.deserialize(response, "Array<Pet>")
    by_name = deserializer.convert({"rex": {"id": 1}}, "Hash<String, Pet>")
    ```
"""

import json
import logging
from datetime import date, datetime
from typing import Any

from openapi_client_runtime.descriptors import (
    ArrayOf,
    MapOf,
    Named,
    Primitive,
    PrimitiveKind,
    TypeDescriptor,
    as_descriptor,
)
from openapi_client_runtime.errors.exceptions import ParseError, TypeMismatchError
from openapi_client_runtime.models import ModelRegistry
from openapi_client_runtime.negotiation import DEFAULT_CONTENT_TYPE, is_json_mime
from openapi_client_runtime.transport.base import ApiResponse

logger = logging.getLogger(__name__)

_TRUE_STRINGS = frozenset(["true", "t", "yes", "y", "1"])
_FALSE_STRINGS = frozenset(["false", "f", "no", "n", "0"])

# Descriptors that fall back to the raw body when it is not valid JSON.
_TEXTUAL_KINDS = frozenset([PrimitiveKind.STRING, PrimitiveKind.DATE, PrimitiveKind.DATETIME])


class Deserializer:
    """Convert responses and decoded JSON into typed values.

    Args:
        registry: Model registry used to resolve named model types.
    """

    def __init__(self, registry: ModelRegistry) -> None:
        self.registry = registry

    def deserialize(self, response: ApiResponse, return_type: "str | TypeDescriptor") -> Any:
        """Deserialize ``response`` into ``return_type``.

        Bodies with a JSON Content-Type (or none at all) are decoded as JSON;
        any other Content-Type yields the body string itself. ``File``
        descriptors return the raw response bytes unmodified, even when empty.

        Raises:
            ParseError: If the body should be JSON but is malformed.
            TypeMismatchError: If the decoded value does not fit ``return_type``.
            UnknownModelError: If a model name is not registered.
        """
        descriptor = as_descriptor(return_type)
        if isinstance(descriptor, Primitive) and descriptor.kind is PrimitiveKind.FILE:
            return response.content

        body = response.body
        if not body:
            return None

        content_type = response.content_type or DEFAULT_CONTENT_TYPE
        if is_json_mime(content_type):
            try:
                data = json.loads(body)
            except ValueError as e:
                if isinstance(descriptor, Primitive) and descriptor.kind in _TEXTUAL_KINDS:
                    data = body
                else:
                    raise ParseError(f"invalid JSON response body: {e}", body=body) from e
        else:
            logger.debug(f"Treating {content_type} response body as text")
            data = body

        return self.convert(data, descriptor)

    def convert(self, data: Any, return_type: "str | TypeDescriptor") -> Any:
        """Convert already decoded ``data`` into ``return_type``."""
        descriptor = as_descriptor(return_type)
        if data is None:
            return None

        if isinstance(descriptor, Primitive):
            return self._convert_primitive(data, descriptor)

        if isinstance(descriptor, ArrayOf):
            if not isinstance(data, list):
                raise TypeMismatchError(
                    f"expected a JSON array for {descriptor}, got {type(data).__name__}",
                    descriptor=descriptor,
                    value=data,
                )
            return [self.convert(item, descriptor.item) for item in data]

        if isinstance(descriptor, MapOf):
            if not isinstance(data, dict):
                raise TypeMismatchError(
                    f"expected a JSON object for {descriptor}, got {type(data).__name__}",
                    descriptor=descriptor,
                    value=data,
                )
            return {str(key): self.convert(value, descriptor.value) for key, value in data.items()}

        return self._build_model(data, descriptor)

    def _build_model(self, data: Any, descriptor: Named) -> Any:
        spec = self.registry.get(descriptor.name)
        if not isinstance(data, dict):
            raise TypeMismatchError(
                f"expected a JSON object for model {descriptor.name}, got {type(data).__name__}",
                descriptor=descriptor,
                value=data,
            )

        instance = spec.new()
        for key, raw in data.items():
            model_field = spec.field_for_key(key)
            if model_field is None or raw is None:
                continue
            model_field.set(instance, self.convert(raw, model_field.type))
        return instance

    def _convert_primitive(self, data: Any, descriptor: Primitive) -> Any:
        kind = descriptor.kind
        try:
            if kind is PrimitiveKind.OBJECT or kind is PrimitiveKind.FILE:
                return data
            if kind is PrimitiveKind.STRING:
                return _to_string(data)
            if kind is PrimitiveKind.INTEGER:
                if isinstance(data, bool):
                    raise ValueError("booleans are not integers")
                return int(data)
            if kind is PrimitiveKind.FLOAT:
                if isinstance(data, bool):
                    raise ValueError("booleans are not numbers")
                return float(data)
            if kind is PrimitiveKind.BOOLEAN:
                return _to_bool(data)
            if kind is PrimitiveKind.DATETIME:
                return _to_datetime(data)
            if kind is PrimitiveKind.DATE:
                return _to_date(data)
        except (TypeError, ValueError) as e:
            raise TypeMismatchError(
                f"cannot convert {data!r} to {descriptor}: {e}",
                descriptor=descriptor,
                value=data,
            ) from e
        raise TypeMismatchError(f"unhandled primitive {descriptor}", descriptor=descriptor, value=data)


def _to_string(data: Any) -> str:
    if isinstance(data, str):
        return data
    if isinstance(data, bool):
        return "true" if data else "false"
    if isinstance(data, dict | list):
        raise TypeError(f"{type(data).__name__} is not a scalar")
    return str(data)


def _to_bool(data: Any) -> bool:
    if isinstance(data, bool):
        return data
    if isinstance(data, int) and data in (0, 1):
        return bool(data)
    if isinstance(data, str):
        lowered = data.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    raise ValueError("not a boolean")


def _to_datetime(data: Any) -> datetime:
    if isinstance(data, datetime):
        return data
    if not isinstance(data, str):
        raise TypeError(f"{type(data).__name__} is not a date-time string")
    return datetime.fromisoformat(data)


def _to_date(data: Any) -> date:
    if isinstance(data, datetime):
        return data.date()
    if isinstance(data, date):
        return data
    if not isinstance(data, str):
        raise TypeError(f"{type(data).__name__} is not a date string")
    if "T" in data:
        return datetime.fromisoformat(data).date()
    return date.fromisoformat(data)
