"""
Orquestación del diff: ordena, compara cada recurso y escribe el reporte.

La salida siempre sale en orden alfabético; con jobs > 1 las comparaciones
corren en paralelo pero se escriben en el mismo orden que en secuencial.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, TextIO

from deriva.core.diff.comparator import Classification, Comparator, ComparisonResult
from deriva.core.resources import Resource, sort_key


class DiffCommand:
    """Compara un conjunto de recursos declarados contra el store y reporta."""

    def __init__(self, comparator: Comparator, omit_same: bool = False, jobs: int = 1):
        self.comparator = comparator
        self.omit_same = omit_same
        self.jobs = max(1, jobs)

    def compare_all(self, resources: Iterable[Resource]) -> List[ComparisonResult]:
        ordered = sorted(resources, key=sort_key)
        if self.jobs == 1 or len(ordered) < 2:
            return [self.comparator.compare(r) for r in ordered]
        with ThreadPoolExecutor(max_workers=self.jobs) as pool:
            # map conserva el orden de entrada
            return list(pool.map(self.comparator.compare, ordered))

    def run(self, resources: Iterable[Resource], out: TextIO) -> bool:
        """
        Escribe el reporte en out.

        Returns:
            True si algún recurso es distinto o solo existe en el config
        """
        diff_found = False
        for result in self.compare_all(resources):
            self.write_result(result, out)
            if result.is_difference:
                diff_found = True
        return diff_found

    def write_result(self, result: ComparisonResult, out: TextIO) -> None:
        if result.classification == Classification.UNCHANGED:
            if not self.omit_same:
                write_header(result, out)
        elif result.classification == Classification.ERROR:
            # Solo el mensaje, sin cabecera ---/live/config
            out.write(f"{result.error}\n")
        elif result.classification == Classification.ONLY_DECLARED:
            write_header(result, out)
            out.write(f"{result.desc} doesn't exist on server\n")
        elif result.classification == Classification.CHANGED:
            write_header(result, out)
            out.write(f"{result.details}\n")


def write_header(result: ComparisonResult, out: TextIO) -> None:
    out.write("---\n")
    out.write(f"- live {result.desc}\n+ config {result.desc}\n")
