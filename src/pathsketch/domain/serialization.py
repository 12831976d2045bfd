"""Tagged value form for serializable shape entities.

Every serializable class declares a ``type_name`` and a pair of
``to_dict``/``from_dict`` methods for its minimal field set. This module
wraps those fields with the kind tag so polymorphic values (edges, shapes)
can be decoded without knowing their class in advance:

    {"$type": "QuadraticBezierEdge", "$value": {"ctrl": [{"x": 1, "y": 1}]}}
"""

from typing import Any, Protocol, TypeVar

from pathsketch.exceptions import GeometryError, SerializationError

TYPE_KEY = "$type"
VALUE_KEY = "$value"


class Serializable(Protocol):
    """Structural type of entities that can be tagged."""

    type_name: str

    def to_dict(self) -> dict[str, Any]: ...


_T = TypeVar("_T")

_REGISTRY: dict[str, type] = {}


def register_type(cls: type[_T]) -> type[_T]:
    """Class decorator adding a class to the kind-tag registry."""
    _REGISTRY[cls.type_name] = cls  # type: ignore[attr-defined]
    return cls


def encode(entity: Serializable) -> dict[str, Any]:
    """Serialize an entity into its tagged form.

    Args:
        entity: Registered entity instance

    Returns:
        Dictionary with the kind tag and the entity's fields
    """
    return {TYPE_KEY: entity.type_name, VALUE_KEY: entity.to_dict()}


def decode(data: Any, expected: type[_T]) -> _T:
    """Rebuild an entity from its tagged form.

    Args:
        data: Tagged dictionary produced by ``encode``
        expected: Base class the decoded entity must be an instance of

    Returns:
        Newly constructed entity

    Raises:
        SerializationError: If the data is malformed, the tag is unknown, or
            the decoded entity is not an instance of ``expected``
    """
    if not isinstance(data, dict) or TYPE_KEY not in data:
        raise SerializationError(f"Expected a tagged value, got {data!r}")

    type_name = data[TYPE_KEY]
    cls = _REGISTRY.get(type_name)
    if cls is None:
        raise SerializationError(f"Unknown entity type '{type_name}'")
    if not issubclass(cls, expected):
        raise SerializationError(
            f"Expected {expected.__name__}, got '{type_name}'"
        )

    try:
        return cls.from_dict(data.get(VALUE_KEY, {}))  # type: ignore[attr-defined]
    except SerializationError:
        raise
    except (KeyError, TypeError, ValueError, GeometryError) as e:
        raise SerializationError(f"Invalid '{type_name}' value: {e}") from e


def registered_types() -> list[str]:
    """List the kind tags known to the registry."""
    return sorted(_REGISTRY)
