"""
Enmascarado de campos (estrategia subset).

Reduce el objeto vivo a la forma del objeto declarado: el store omite
los campos vacíos/por defecto y añade campos que el config nunca menciona.
Función pura: nunca modifica el documento declarado.
"""

from typing import Any, Dict, List

from deriva.core.errors import MaskingContractError


def is_empty_value(value: Any) -> bool:
    """
    True si el valor es la forma vacía de su tipo JSON.
    Un tipo fuera del conjunto JSON es una violación de contrato.
    """
    if value is None:
        return True
    if isinstance(value, bool):
        return not value
    if isinstance(value, (int, float)):
        return value == 0
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (list, dict)):
        return len(value) == 0
    raise MaskingContractError(
        f"Found unexpected type {type(value).__name__} in structured document (value={value!r})"
    )


def remove_fields(config: Any, live: Any) -> Any:
    """Recursión dirigida por tipo; escalares o tipos distintos pasan el valor vivo tal cual."""
    if isinstance(config, dict) and isinstance(live, dict):
        return remove_map_fields(config, live)
    if isinstance(config, list) and isinstance(live, list):
        return remove_list_fields(config, live)
    return live


def remove_map_fields(config: Dict[str, Any], live: Dict[str, Any]) -> Dict[str, Any]:
    result: Dict[str, Any] = {}
    for key, config_value in config.items():
        if key not in live:
            # El API no devuelve valores vacíos: se copian del config
            if is_empty_value(config_value):
                result[key] = config_value
            continue
        result[key] = remove_fields(config_value, live[key])
    return result


def remove_list_fields(config: List[Any], live: List[Any]) -> List[Any]:
    # Los elementos vivos sobrantes se conservan para que aparezcan en el diff
    result: List[Any] = []
    for i, live_value in enumerate(live):
        if i < len(config):
            result.append(remove_fields(config[i], live_value))
        else:
            result.append(live_value)
    return result
