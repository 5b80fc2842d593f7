"""
Store de snapshot: estado real exportado a disco (YAML/JSON).
Útil para CI sin acceso al API y para pruebas reproducibles.
"""

import copy
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Tuple

from deriva.core.errors import NotFoundError, StoreError, ValidationError
from deriva.core.loader import load_resources
from deriva.core.resources import Resource, fq_name


class SnapshotStore:
    """Indexa los objetos exportados por (kind, namespace, name)"""

    def __init__(self, objects: Iterable[Dict[str, Any]] = (), default_namespace: str = "default"):
        self.default_namespace = default_namespace
        self._objects: Dict[Tuple[str, str, str], Dict[str, Any]] = {}
        for obj in objects:
            self.add(obj)

    @classmethod
    def from_path(cls, path: Path, default_namespace: str = "default") -> "SnapshotStore":
        try:
            resources = load_resources([path])
        except ValidationError as e:
            raise StoreError(f"Snapshot inválido: {e}", cause=e) from e
        return cls((r.object for r in resources), default_namespace=default_namespace)

    def add(self, obj: Dict[str, Any]) -> None:
        resource = Resource(obj)
        self._objects[resource.identity()] = obj

    def get(self, resource: Resource, namespace: Optional[str]) -> Dict[str, Any]:
        key = (resource.kind, namespace or "", resource.name)
        obj = self._objects.get(key)
        if obj is None and namespace == self.default_namespace:
            # Exportaciones sin metadata.namespace: solo valen para el namespace por defecto
            obj = self._objects.get((resource.kind, "", resource.name))
        if obj is None:
            raise NotFoundError(f"{resource.kind} {fq_name(resource)} not found")
        # Copia: ninguna comparación puede alterar el estado compartido
        return copy.deepcopy(obj)

    def __len__(self) -> int:
        return len(self._objects)
