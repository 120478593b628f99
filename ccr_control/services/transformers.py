"""Transformer registry as seen by the control plane.

The host application owns the real registry; the control plane only needs
``get_all_transformers()`` returning an ordered name -> descriptor mapping.
"""

from typing import Any, Dict, Mapping, Optional, Protocol


class TransformerRegistry(Protocol):
    def get_all_transformers(self) -> Mapping[str, Any]:
        ...


class InMemoryTransformerRegistry:
    """Dict-backed registry, used standalone and in tests."""

    def __init__(self, transformers: Optional[Mapping[str, Any]] = None):
        self._transformers: Dict[str, Any] = dict(transformers or {})

    def register(self, name: str, descriptor: Any) -> None:
        self._transformers[name] = descriptor

    def get_all_transformers(self) -> Mapping[str, Any]:
        return dict(self._transformers)


def endpoint_of(descriptor: Any) -> Optional[str]:
    """Return the descriptor's ``endPoint`` whether it is a mapping or an object."""
    if descriptor is None:
        return None
    if isinstance(descriptor, Mapping):
        return descriptor.get("endPoint")
    return getattr(descriptor, "endPoint", None)
