"""
Errores de deriva.

El core solo define excepciones; la CLI se encarga del formato de salida.
"""

from typing import Optional


class DerivaError(Exception):
    """Error base de deriva."""
    pass


class ValidationError(DerivaError):
    """Documento declarado inválido (no es un mapa, falta kind, etc.)."""
    pass


class ConfigError(DerivaError):
    """Error de configuración (archivo faltante, formato o valor inválido)."""
    pass


class StoreError(DerivaError):
    """Fallo al leer el estado real desde el store remoto."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class NotFoundError(StoreError):
    """El objeto no existe en el store. Es un resultado normal, no un fallo."""
    pass


class MaskingContractError(DerivaError):
    """
    Violación de contrato al enmascarar: apareció un tipo que no es JSON.

    Es fatal: indica un bug de canonicalización aguas arriba y debe
    detener la ejecución completa, no solo el recurso actual.
    """
    pass
