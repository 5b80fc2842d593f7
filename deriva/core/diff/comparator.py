"""
Comparación de un recurso declarado contra su objeto vivo.

Resultado único por recurso: sin cambios, error, solo declarado o distinto.
Los fallos se localizan en el recurso; solo MaskingContractError se propaga.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from deriva.core.diff.masker import remove_map_fields
from deriva.core.diff.render import diff_lines, format_diff, is_unchanged
from deriva.core.errors import NotFoundError, StoreError, ValidationError
from deriva.core.infra.contracts import LiveStore
from deriva.core.resources import (
    Resource,
    canonical_text,
    describe,
    effective_namespace,
    resource_name_for,
)

logger = logging.getLogger(__name__)


class DiffStrategy(str, Enum):
    """all: compara estructuras completas; subset: enmascara el objeto vivo antes."""
    ALL = "all"
    SUBSET = "subset"

    @classmethod
    def parse(cls, value: str) -> "DiffStrategy":
        normalized = (value or "").strip().lower()
        if normalized == "full":
            return cls.ALL
        return cls(normalized)


class Classification(Enum):
    """Estado de la comparación entre objeto declarado y vivo"""
    UNCHANGED = "unchanged"
    ERROR = "error"
    ONLY_DECLARED = "only_declared"
    CHANGED = "changed"


@dataclass(frozen=True)
class ComparisonResult:
    """Resultado inmutable de comparar un recurso"""
    desc: str
    classification: Classification
    details: str = ""  # solo si CHANGED
    error: Optional[BaseException] = None  # solo si ERROR

    @property
    def is_difference(self) -> bool:
        return self.classification in (Classification.ONLY_DECLARED, Classification.CHANGED)


def failed(desc: str, error: BaseException) -> ComparisonResult:
    return ComparisonResult(desc=desc, classification=Classification.ERROR, error=error)


def outcome(desc: str, classification: Classification, details: str = "") -> ComparisonResult:
    return ComparisonResult(desc=desc, classification=classification, details=details)


class Comparator:
    """Compara recursos declarados contra un LiveStore"""

    def __init__(
        self,
        store: LiveStore,
        strategy: DiffStrategy = DiffStrategy.ALL,
        default_namespace: str = "default",
        omit_secrets: bool = False,
        color: bool = False,
    ):
        self.store = store
        self.strategy = strategy
        self.default_namespace = default_namespace
        self.omit_secrets = omit_secrets
        self.color = color

    def compare(self, resource: Resource) -> ComparisonResult:
        desc = describe(resource)

        if not resource.name:
            return failed(desc, ValidationError(
                f"Error fetching one of the {resource_name_for(resource.kind)}: it does not have a name set"
            ))

        logger.debug("Fetching %s", desc)
        namespace = effective_namespace(resource, self.default_namespace)
        try:
            live = self.store.get(resource, namespace)
        except NotFoundError:
            logger.debug("%s doesn't exist on the server", desc)
            return outcome(desc, Classification.ONLY_DECLARED)
        except Exception as e:
            # Cualquier otro fallo del store queda en este recurso
            return failed(desc, StoreError(f"Error fetching {desc}: {e}", cause=e))

        if self.strategy == DiffStrategy.SUBSET:
            live = remove_map_fields(resource.object, live)

        live_text = canonical_text(live)
        config_text = canonical_text(resource.object)

        segments = diff_lines(live_text, config_text)
        if is_unchanged(segments):
            return outcome(desc, Classification.UNCHANGED)

        redact = self.omit_secrets and resource.is_sensitive
        details = format_diff(segments, color=self.color, omit_changes=redact)
        return outcome(desc, Classification.CHANGED, details)
