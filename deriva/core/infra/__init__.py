"""
Contratos para stores de estado real.

Los providers (http, snapshot) implementan estos contratos;
el core no depende de ningún provider concreto.
"""

from deriva.core.infra.contracts import LiveStore

__all__ = ["LiveStore"]
