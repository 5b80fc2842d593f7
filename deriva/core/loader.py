"""
Loader de documentos declarados (YAML/JSON, multi-documento).
Convierte archivos y directorios en una lista de Resource.
"""

from pathlib import Path
from typing import Any, Iterable, List

import yaml

from deriva.core.errors import ValidationError
from deriva.core.resources import Resource

SUPPORTED_SUFFIXES = (".yaml", ".yml", ".json")

JSON_SCALARS = (str, bool, int, float, type(None))


def _json_key(key: Any) -> Any:
    """Claves escalares como str, igual que una conversión YAML → JSON."""
    if isinstance(key, bool):
        return "true" if key else "false"
    if key is None:
        return "null"
    if isinstance(key, (int, float)):
        return str(key)
    return key


class _JsonLikeLoader(yaml.SafeLoader):
    """SafeLoader sin timestamps y con claves str: solo tipos JSON."""

    def construct_mapping(self, node, deep=False):
        mapping = super().construct_mapping(node, deep=deep)
        return {_json_key(k): v for k, v in mapping.items()}


_JsonLikeLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != "tag:yaml.org,2002:timestamp"]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def check_json_types(value: Any, source: str, path: str = "") -> None:
    """Rechaza valores fuera del conjunto JSON (!!binary, !!set, !!omap, etc.)."""
    if isinstance(value, dict):
        for key, item in value.items():
            if not isinstance(key, str):
                raise ValidationError(f"{source}: clave no escalar en {path or '/'}: {key!r}")
            check_json_types(item, source, f"{path}/{key}")
    elif isinstance(value, list):
        for i, item in enumerate(value):
            check_json_types(item, source, f"{path}/{i}")
    elif not isinstance(value, JSON_SCALARS):
        raise ValidationError(
            f"{source}: valor no JSON ({type(value).__name__}) en {path or '/'}"
        )


def iter_files(paths: Iterable[Path]) -> List[Path]:
    """Expande directorios (recursivo, orden estable) en archivos soportados."""
    files: List[Path] = []
    for path in paths:
        path = Path(path)
        if path.is_dir():
            files.extend(
                f for f in sorted(path.rglob("*"))
                if f.is_file() and f.suffix.lower() in SUPPORTED_SUFFIXES
            )
        elif path.is_file():
            files.append(path)
        else:
            raise ValidationError(f"No existe el archivo o directorio: {path}")
    return files


def _flatten(doc: Any, source: str) -> List[Resource]:
    if not isinstance(doc, dict):
        raise ValidationError(f"{source}: cada documento debe ser un mapa, no {type(doc).__name__}")
    kind = doc.get("kind")
    if not kind:
        raise ValidationError(f"{source}: documento sin 'kind'")
    # v1.List y *List: se aplanan en sus items
    if isinstance(kind, str) and kind.endswith("List") and isinstance(doc.get("items"), list):
        resources: List[Resource] = []
        for item in doc["items"]:
            resources.extend(_flatten(item, source))
        return resources
    return [Resource(doc, source=source)]


def load_file(path: Path) -> List[Resource]:
    """Carga todos los documentos de un archivo."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            docs = list(yaml.load_all(f, Loader=_JsonLikeLoader))
    except yaml.YAMLError as e:
        raise ValidationError(f"{path}: YAML/JSON inválido: {e}") from e

    resources: List[Resource] = []
    for doc in docs:
        if doc is None:
            continue
        check_json_types(doc, str(path))
        resources.extend(_flatten(doc, str(path)))
    return resources


def load_resources(paths: Iterable[Path]) -> List[Resource]:
    """Carga recursos desde archivos y/o directorios."""
    resources: List[Resource] = []
    for f in iter_files(paths):
        resources.extend(load_file(f))
    return resources
