"""
Diff: enmascarado, comparación, renderizado y orquestación.

Lógica pura salvo la lectura del store (vía contrato LiveStore) y la
escritura en el stream de salida que recibe el orquestador.
"""

from deriva.core.diff.comparator import (
    Classification,
    Comparator,
    ComparisonResult,
    DiffStrategy,
)
from deriva.core.diff.masker import remove_fields, is_empty_value
from deriva.core.diff.orchestrator import DiffCommand
from deriva.core.diff.render import DiffSegment, SegmentKind, diff_lines, format_diff

__all__ = [
    "Classification",
    "Comparator",
    "ComparisonResult",
    "DiffStrategy",
    "DiffCommand",
    "DiffSegment",
    "SegmentKind",
    "diff_lines",
    "format_diff",
    "remove_fields",
    "is_empty_value",
]
