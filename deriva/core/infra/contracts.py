"""
Contratos que deben implementar los stores de estado real.

El core solo define interfaces; la implementación vive en deriva/providers/*.
"""

from typing import Any, Dict, Optional, Protocol

from deriva.core.resources import Resource


class LiveStore(Protocol):
    """
    Contrato mínimo de un store remoto (API HTTP, snapshot en disco, etc.).
    Solo lectura: nunca modifica el estado real.
    """

    def get(self, resource: Resource, namespace: Optional[str]) -> Dict[str, Any]:
        """
        Devuelve el objeto vivo que corresponde a la identidad del recurso.

        Raises:
            NotFoundError: el objeto no existe en el store
            StoreError: cualquier otro fallo al leer
        """
        ...
