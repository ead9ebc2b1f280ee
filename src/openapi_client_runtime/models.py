"""Model registry consulted by the deserializer and the hash projector.

Generated model classes are plain data holders. Each one is registered with a
static field table describing, in declaration order, the attribute name, the
type descriptor, and the JSON key of every field.

Example:
    ```python
    from dataclasses import dataclass

    from openapi_client_runtime.models import ModelField, ModelRegistry

    registry = ModelRegistry()


    @registry.model(
        "Pet",
        fields=[
            ModelField("id", "Integer"),
            ModelField("name", "String"),
            ModelField("photo_urls", "Array<String>", json_key="photoUrls"),
        ],
    )
    @dataclass
    class Pet:
        id: int | None = None
        name: str | None = None
        photo_urls: list[str] | None = None
    ```
"""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

from openapi_client_runtime.descriptors import TypeDescriptor, as_descriptor
from openapi_client_runtime.errors.exceptions import UnknownModelError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ModelField:
    """One declared model field.

    Attributes:
        name: Python attribute name on the model instance.
        type: Type descriptor (string or parsed) for the field's values.
        json_key: Key used on the wire. Defaults to ``name``.
    """

    name: str
    type: "str | TypeDescriptor"
    json_key: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "type", as_descriptor(self.type))
        if self.json_key is None:
            object.__setattr__(self, "json_key", self.name)

    def get(self, instance: Any) -> Any:
        return getattr(instance, self.name, None)

    def set(self, instance: Any, value: Any) -> None:
        setattr(instance, self.name, value)


@dataclass(frozen=True)
class ModelSpec:
    """Registry entry: a zero-argument factory plus the ordered field table."""

    name: str
    factory: Callable[[], Any]
    fields: tuple[ModelField, ...]
    _by_json_key: dict[str, ModelField] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_by_json_key", {f.json_key: f for f in self.fields})

    def field_for_key(self, json_key: str) -> ModelField | None:
        return self._by_json_key.get(json_key)

    def new(self) -> Any:
        return self.factory()


class ModelRegistry:
    """Map of model type names to :class:`ModelSpec` entries."""

    def __init__(self) -> None:
        self._specs: dict[str, ModelSpec] = {}
        self._by_type: dict[type, ModelSpec] = {}

    def register(
        self,
        name: str,
        factory: Callable[[], Any],
        fields: Iterable[ModelField],
    ) -> ModelSpec:
        """Register a model under ``name``; re-registering replaces the entry."""
        spec = ModelSpec(name=name, factory=factory, fields=tuple(fields))
        if name in self._specs:
            logger.debug(f"Replacing registered model '{name}'")
        self._specs[name] = spec
        if isinstance(factory, type):
            self._by_type[factory] = spec
        return spec

    def model(self, name: str | None = None, *, fields: Iterable[ModelField]):
        """Class decorator registering the decorated class as a model."""

        def decorator(cls):
            self.register(name or cls.__name__, cls, fields)
            return cls

        return decorator

    def get(self, name: str) -> ModelSpec:
        try:
            return self._specs[name]
        except KeyError:
            raise UnknownModelError(f"unknown model type: {name}", model_name=name) from None

    def spec_for(self, instance: Any) -> ModelSpec | None:
        """Return the spec registered for ``instance``'s class, if any."""
        for cls in type(instance).__mro__:
            spec = self._by_type.get(cls)
            if spec is not None:
                return spec
        return None

    def is_model(self, instance: Any) -> bool:
        return self.spec_for(instance) is not None

    def __contains__(self, name: str) -> bool:
        return name in self._specs

    def __len__(self) -> int:
        return len(self._specs)

    def object_to_hash(self, instance: Any) -> dict[str, Any]:
        """Project a model instance to an ordered ``{json_key: value}`` mapping.

        Fields whose value is ``None`` are omitted; empty lists and dicts are
        kept. The projection is shallow: nested models are returned as model
        instances and are only expanded by the serialization layer.

        Raises:
            UnknownModelError: If ``instance`` is not a registered model.
        """
        spec = self.spec_for(instance)
        if spec is None:
            type_name = type(instance).__name__
            raise UnknownModelError(f"{type_name} is not a registered model", model_name=type_name)

        projected: dict[str, Any] = {}
        for model_field in spec.fields:
            value = model_field.get(instance)
            if value is not None:
                projected[model_field.json_key] = value
        return projected
