"""
Configuración de ejecución del diff.

Precedencia: flags de CLI > variables DERIVA_* (y .env) > archivo YAML > defaults.
El core no lee .env; eso lo hace la CLI antes de llamar a load_settings().
"""

import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError as PydanticValidationError, field_validator

from deriva.core.diff.comparator import DiffStrategy
from deriva.core.errors import ConfigError

# Archivo de configuración por defecto (cwd)
DEFAULT_CONFIG_FILE = Path("deriva.yaml")

ENV_PREFIX = "DERIVA_"


class DiffSettings(BaseModel):
    """Opciones reconocidas por el diff y los stores."""
    strategy: DiffStrategy = Field(DiffStrategy.ALL, description="all | subset")
    omit_secrets: bool = Field(False, description="Redacta el contenido de los Secret")
    omit_same: bool = Field(False, description="No muestra recursos sin cambios")
    color_output: Optional[bool] = Field(None, description="None = detectar terminal")
    default_namespace: str = Field("default", description="Namespace si el recurso no declara uno")
    jobs: int = Field(1, ge=1, description="Comparaciones en paralelo")
    store_url: Optional[str] = Field(None, description="URL base del API remoto")
    store_token: Optional[str] = Field(None, description="Bearer token del API remoto")
    store_timeout: float = Field(10.0, gt=0, description="Timeout por petición (segundos)")
    store_verify: bool = Field(True, description="Verificar certificado TLS")
    snapshot_dir: Optional[Path] = Field(None, description="Snapshot en disco del estado real")

    @field_validator("strategy", mode="before")
    @classmethod
    def _parse_strategy(cls, value: Any) -> Any:
        if isinstance(value, str):
            return DiffStrategy.parse(value)
        return value


def _from_env(environ: Mapping[str, str]) -> Dict[str, Any]:
    data: Dict[str, Any] = {}
    for name in DiffSettings.model_fields:
        raw = environ.get(f"{ENV_PREFIX}{name.upper()}", "").strip()
        if raw:
            data[name] = raw
    return data


def _from_file(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigError(f"No se pudo leer {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"{path}: YAML inválido: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: la configuración debe ser un mapa")
    return data


def load_settings(
    config_file: Optional[Path] = None,
    overrides: Optional[Dict[str, Any]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> DiffSettings:
    """
    Construye DiffSettings combinando archivo, entorno y overrides.

    Args:
        config_file: YAML explícito; si None se usa ./deriva.yaml cuando existe
        overrides: Valores de la CLI (los None se ignoran)
        environ: Entorno a leer (por defecto os.environ)

    Returns:
        DiffSettings validado
    """
    data: Dict[str, Any] = {}
    if config_file is not None:
        if not config_file.exists():
            raise ConfigError(f"No existe el archivo de configuración: {config_file}")
        data.update(_from_file(config_file))
    elif DEFAULT_CONFIG_FILE.exists():
        data.update(_from_file(DEFAULT_CONFIG_FILE))

    data.update(_from_env(os.environ if environ is None else environ))
    data.update({k: v for k, v in (overrides or {}).items() if v is not None})

    try:
        return DiffSettings(**data)
    except PydanticValidationError as e:
        raise ConfigError(f"Configuración inválida: {e}") from e
