"""
Store HTTP - lectura de objetos vivos desde un API estilo Kubernetes
"""

from typing import Any, Dict, Optional

import requests

from deriva.core.errors import NotFoundError, StoreError
from deriva.core.resources import Resource, resource_name_for


class HttpStore:
    """Cliente de solo lectura para el API remoto"""

    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        timeout: float = 10.0,
        verify: bool = True,
    ):
        """
        Inicializa el cliente

        Args:
            base_url: URL base del API (ej: https://cluster.example:6443)
            token: Bearer token; sin token no se envía Authorization
            timeout: Timeout por petición en segundos
            verify: Verificar certificado TLS
        """
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self.verify = verify

    def url_for(self, resource: Resource, namespace: Optional[str]) -> str:
        """Ruta REST: /api/v1/... para el grupo core, /apis/<grupo>/<versión>/... para el resto."""
        api_version = resource.api_version or "v1"
        prefix = "/api/v1" if api_version == "v1" else f"/apis/{api_version}"
        scope = f"/namespaces/{namespace}" if namespace else ""
        return f"{self.base_url}{prefix}{scope}/{resource_name_for(resource.kind)}/{resource.name}"

    def get(self, resource: Resource, namespace: Optional[str]) -> Dict[str, Any]:
        url = self.url_for(resource, namespace)
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"

        try:
            response = requests.get(url, headers=headers, timeout=self.timeout, verify=self.verify)
        except requests.exceptions.Timeout as e:
            raise StoreError(f"Timeout al conectar con {self.base_url}", cause=e) from e
        except requests.exceptions.RequestException as e:
            raise StoreError(f"Error de conexión con {self.base_url}: {e}", cause=e) from e

        if response.status_code == 404:
            raise NotFoundError(f"{url} not found")
        if response.status_code != 200:
            raise StoreError(f"HTTP {response.status_code}: {response.text[:200]}")

        try:
            data = response.json()
        except ValueError as e:
            raise StoreError(f"Respuesta no JSON desde {url}", cause=e) from e
        if not isinstance(data, dict):
            raise StoreError(f"Respuesta inesperada desde {url}: se esperaba un objeto")
        return data
