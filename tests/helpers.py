"""Utilidades de test: store en memoria y fábricas de recursos."""

from typing import Any, Dict, List, Optional, Tuple

from deriva.core.errors import NotFoundError
from deriva.core.resources import Resource


def make_obj(kind: str, name: str, namespace: Optional[str] = "default", **fields: Any) -> Dict[str, Any]:
    metadata: Dict[str, Any] = {"name": name}
    if namespace:
        metadata["namespace"] = namespace
    obj: Dict[str, Any] = {"apiVersion": "v1", "kind": kind, "metadata": metadata}
    obj.update(fields)
    return obj


class MemoryStore:
    """LiveStore en memoria; registra cada get y puede fallar por nombre."""

    def __init__(
        self,
        objects: Optional[List[Dict[str, Any]]] = None,
        failures: Optional[Dict[str, Exception]] = None,
    ):
        self.objects: Dict[Tuple[str, str, str], Dict[str, Any]] = {}
        self.failures = failures or {}
        self.calls: List[Tuple[str, Optional[str], str]] = []
        for obj in objects or []:
            r = Resource(obj)
            self.objects[(r.kind, r.namespace, r.name)] = obj

    def get(self, resource: Resource, namespace: Optional[str]) -> Dict[str, Any]:
        self.calls.append((resource.kind, namespace, resource.name))
        if resource.name in self.failures:
            raise self.failures[resource.name]
        key = (resource.kind, namespace or "", resource.name)
        if key not in self.objects:
            raise NotFoundError(f"{resource.kind} {resource.name} not found")
        return self.objects[key]
