"""
Core: enmascarado, comparación y renderizado del diff.

No depende de la CLI ni de los providers; el estado real llega por el
contrato LiveStore (deriva.core.infra).
"""

from deriva.core.errors import DerivaError, ValidationError, ConfigError

__all__ = ["DerivaError", "ValidationError", "ConfigError"]
