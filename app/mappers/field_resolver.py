"""Field lookup across the payload shapes Ortto sends.

A logical field can arrive as a top-level key, inside one of the nested
``fields`` / ``data`` / ``attributes`` containers, or as an entry of a
descriptor array (``[{"field": key, "value": v}, ...]``). Each shape
implements ``lookup(key)``; the resolver tries them in order.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from app.schemas.webhook import FieldAliases, ResolvedFields

_NESTED_PATHS: tuple[tuple[str, ...], ...] = (
    ("fields",),
    ("data",),
    ("data", "fields"),
    ("attributes",),
    ("attributes", "fields"),
)

_DESCRIPTOR_PATHS: tuple[tuple[str, ...], ...] = (
    ("fields",),
    ("data", "fields"),
    ("attributes", "fields"),
)


def normalize_value(value: Any) -> str | None:
    """Return ``value`` as a non-empty string, or None when it is absent."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        return value.strip() or None
    return None


def _walk(payload: Mapping, path: tuple[str, ...]) -> Any:
    node: Any = payload
    for part in path:
        if not isinstance(node, Mapping):
            return None
        node = node.get(part)
    return node


class FlatShape:
    def __init__(self, payload: Mapping):
        self._payload = payload

    def lookup(self, key: str) -> str | None:
        return normalize_value(self._payload.get(key))


class NestedContainersShape:
    def __init__(self, payload: Mapping):
        self._containers = [
            c for c in (_walk(payload, p) for p in _NESTED_PATHS)
            if isinstance(c, Mapping)
        ]

    def lookup(self, key: str) -> str | None:
        for container in self._containers:
            value = normalize_value(container.get(key))
            if value is not None:
                return value
        return None


class DescriptorArrayShape:
    def __init__(self, payload: Mapping):
        self._descriptors = [
            d
            for arr in (_walk(payload, p) for p in _DESCRIPTOR_PATHS)
            if isinstance(arr, Sequence) and not isinstance(arr, (str, bytes))
            for d in arr
            if isinstance(d, Mapping)
        ]

    def lookup(self, key: str) -> str | None:
        for descriptor in self._descriptors:
            name = descriptor.get("field") or descriptor.get("key")
            if name != key:
                continue
            value = normalize_value(descriptor.get("value"))
            if value is not None:
                return value
        return None


PayloadShape = FlatShape | NestedContainersShape | DescriptorArrayShape

SHAPES: tuple[type[PayloadShape], ...] = (
    FlatShape,
    NestedContainersShape,
    DescriptorArrayShape,
)


class FieldResolver:
    def __init__(
        self,
        aliases: FieldAliases | None = None,
        shapes: Sequence[type[PayloadShape]] = SHAPES,
    ):
        self.aliases = aliases or FieldAliases()
        self._shapes = tuple(shapes)

    def resolve(self, payload: Any, field_name: str) -> str | None:
        if not isinstance(payload, Mapping):
            return None
        for shape in self._shapes:
            value = shape(payload).lookup(field_name)
            if value is not None:
                return value
        return None

    def resolve_any(self, payload: Any, aliases: Sequence[str]) -> str | None:
        for alias in aliases:
            value = self.resolve(payload, alias)
            if value is not None:
                return value
        return None

    def extract_fields(self, payload: Any) -> ResolvedFields:
        return ResolvedFields(
            country_code=self.resolve_any(payload, self.aliases.country_code),
            prompt=self.resolve_any(payload, self.aliases.prompt),
            contact_id=self.resolve_any(payload, self.aliases.contact_id),
            email=self.resolve_any(payload, self.aliases.email),
        )
