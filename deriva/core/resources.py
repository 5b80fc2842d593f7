"""
Recursos declarados: documento estructurado + identidad (kind, namespace, name).

Lógica pura; sin I/O. La resolución kind → nombre de recurso REST es una
tabla mínima (pluralización), suficiente para etiquetas y rutas HTTP.
"""

import json
from typing import Any, Dict, Optional, Tuple


# Kinds sin namespace: nunca reciben el namespace por defecto
CLUSTER_SCOPED_KINDS = frozenset({
    "APIService",
    "ClusterRole",
    "ClusterRoleBinding",
    "CustomResourceDefinition",
    "MutatingWebhookConfiguration",
    "Namespace",
    "Node",
    "PersistentVolume",
    "PriorityClass",
    "StorageClass",
    "ValidatingWebhookConfiguration",
})

# Kind cuyo contenido se considera sensible (redacción con --omit-secrets)
SENSITIVE_KIND = "Secret"

_IRREGULAR_PLURALS = {
    "endpoints": "endpoints",
}


class Resource:
    """Documento declarado o vivo con identidad extraíble."""

    def __init__(self, obj: Dict[str, Any], source: Optional[str] = None):
        self.object = obj
        self.source = source  # archivo de origen, solo para mensajes

    @property
    def api_version(self) -> str:
        return str(self.object.get("apiVersion") or "")

    @property
    def kind(self) -> str:
        return str(self.object.get("kind") or "")

    @property
    def metadata(self) -> Dict[str, Any]:
        meta = self.object.get("metadata")
        return meta if isinstance(meta, dict) else {}

    @property
    def name(self) -> str:
        return str(self.metadata.get("name") or "")

    @property
    def namespace(self) -> str:
        return str(self.metadata.get("namespace") or "")

    @property
    def is_cluster_scoped(self) -> bool:
        return self.kind in CLUSTER_SCOPED_KINDS

    @property
    def is_sensitive(self) -> bool:
        return self.kind == SENSITIVE_KIND

    def identity(self) -> Tuple[str, str, str]:
        return (self.kind, self.namespace, self.name)

    def __repr__(self) -> str:
        return f"Resource({self.kind}/{fq_name(self)})"


def resource_name_for(kind: str) -> str:
    """
    Nombre de recurso REST para un kind (plural en minúsculas).
    Pod → pods, Ingress → ingresses, NetworkPolicy → networkpolicies.
    """
    lower = kind.lower()
    if not lower:
        return ""
    if lower in _IRREGULAR_PLURALS:
        return _IRREGULAR_PLURALS[lower]
    if lower.endswith(("s", "x", "z", "ch", "sh")):
        return lower + "es"
    if lower.endswith("y") and lower[-2:-1] not in ("a", "e", "i", "o", "u"):
        return lower[:-1] + "ies"
    return lower + "s"


def fq_name(resource: Resource) -> str:
    """Nombre calificado: namespace.name, o solo name si no hay namespace."""
    if resource.namespace:
        return f"{resource.namespace}.{resource.name}"
    return resource.name


def describe(resource: Resource) -> str:
    """Etiqueta legible usada en todos los resultados (incluidos errores)."""
    return f"{resource_name_for(resource.kind)} {fq_name(resource)}"


def effective_namespace(resource: Resource, default_namespace: str) -> Optional[str]:
    """Namespace con el que se consulta el store; None para kinds sin namespace."""
    if resource.is_cluster_scoped:
        return None
    return resource.namespace or default_namespace or None


def canonical_text(obj: Any) -> str:
    """Forma canónica: JSON indentado con claves ordenadas (sin diffs espurios por orden)."""
    return json.dumps(obj, indent=2, sort_keys=True, ensure_ascii=False)


def sort_key(resource: Resource) -> Tuple[str, str, str, str]:
    """Orden alfabético determinista: kind, namespace, name y, como desempate, el documento."""
    return resource.identity() + (canonical_text(resource.object),)
