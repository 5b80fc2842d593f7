"""
Renderizado de diffs: marcadores +/-, color ANSI y redacción de secretos.

Formato tipo unified-diff con contexto infinito. La redacción es un
reemplazo textual sobre la forma canónica (JSON indentado), no un
recorrido del esquema.
"""

import difflib
import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List

# Inicio de cada línea del texto (donde van marcador e indentación)
DIFF_LINE_START = re.compile(r"(^|\n)(.)")

# "clave": "valor", → clave: <omitted>
DIFF_KEY_VALUE = re.compile(r'"([-._a-zA-Z0-9]+)":\s"([a-zA-Z0-9=+]+)",?')

GREEN = "\x1b[32m"
RED = "\x1b[31m"
RESET = "\x1b[0m"


class SegmentKind(Enum):
    """Tipo de segmento producido por el diff de líneas"""
    INSERT = "insert"
    DELETE = "delete"
    EQUAL = "equal"


@dataclass(frozen=True)
class DiffSegment:
    """Tramo maximal de líneas insertadas, borradas o iguales"""
    kind: SegmentKind
    text: str


def diff_lines(live_text: str, config_text: str) -> List[DiffSegment]:
    """
    Diff a nivel de línea entre el texto vivo (lado -) y el declarado (lado +).
    Cada línea es un símbolo; el coste depende del número de líneas.
    """
    live_lines = live_text.splitlines(keepends=True)
    config_lines = config_text.splitlines(keepends=True)
    matcher = difflib.SequenceMatcher(None, live_lines, config_lines, autojunk=False)

    segments: List[DiffSegment] = []
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            _append(segments, SegmentKind.EQUAL, "".join(live_lines[i1:i2]))
            continue
        if tag in ("delete", "replace"):
            _append(segments, SegmentKind.DELETE, "".join(live_lines[i1:i2]))
        if tag in ("insert", "replace"):
            _append(segments, SegmentKind.INSERT, "".join(config_lines[j1:j2]))
    return segments


def _append(segments: List[DiffSegment], kind: SegmentKind, text: str) -> None:
    if not text:
        return
    if segments and segments[-1].kind == kind:
        segments[-1] = DiffSegment(kind, segments[-1].text + text)
    else:
        segments.append(DiffSegment(kind, text))


def is_unchanged(segments: List[DiffSegment]) -> bool:
    """Sin diferencias: un único segmento igual (o ambos textos vacíos)."""
    if not segments:
        return True
    return len(segments) == 1 and segments[0].kind == SegmentKind.EQUAL


def redact(text: str) -> str:
    return DIFF_KEY_VALUE.sub(r"\1: <omitted>", text)


def _prefix(text: str, marker: str) -> str:
    return DIFF_LINE_START.sub(lambda m: f"{m.group(1)}{marker}{m.group(2)}", text)


def format_diff(segments: Iterable[DiffSegment], color: bool = False, omit_changes: bool = False) -> str:
    """
    Formatea los segmentos con marcadores y color opcional.

    Args:
        segments: Segmentos en orden
        color: Si True, envuelve inserciones/borrados en códigos ANSI
        omit_changes: Si True, redacta pares clave/valor y suprime el contexto igual

    Returns:
        Texto del diff
    """
    parts: List[str] = []
    for segment in segments:
        text = redact(segment.text) if omit_changes else segment.text

        if segment.kind == SegmentKind.INSERT:
            parts.append(_colorize(_prefix(text, "+ "), GREEN, color))
        elif segment.kind == SegmentKind.DELETE:
            parts.append(_colorize(_prefix(text, "- "), RED, color))
        elif not omit_changes:
            parts.append(_prefix(text, "  "))
    return "".join(parts)


def _colorize(text: str, code: str, color: bool) -> str:
    if not color:
        return text
    return f"{code}{text}{RESET}"
