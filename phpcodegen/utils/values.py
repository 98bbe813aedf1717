import math
from typing import Any

from phpcodegen.constants import PhpLiterals


def is_primitive(value: Any) -> bool:
    """
    Check whether a value can be stored as a literal default.

    Parameters
    ----------
    value : Any
        The candidate value.

    Returns
    -------
    bool
        True for None, bool, int, float, str and PhpConstant references.
    """
    # Imported here because the constant model itself depends on this module.
    from phpcodegen.model.constant import PhpConstant

    return value is None or isinstance(value, (bool, int, float, str, PhpConstant))


def export_value(value: Any) -> str:
    """
    Render a Python value as PHP literal source text.

    Parameters
    ----------
    value : Any
        Value to export. Lists, tuples and dicts are exported recursively as
        short array syntax.

    Returns
    -------
    str
        The PHP source for the value.
    """
    from phpcodegen.model.constant import PhpConstant

    if value is None:
        return PhpLiterals.NULL.value
    if isinstance(value, bool):
        return PhpLiterals.TRUE.value if value else PhpLiterals.FALSE.value
    if isinstance(value, int):
        return repr(value)
    if isinstance(value, float):
        return _export_float(value)
    if isinstance(value, str):
        return _export_string(value)
    if isinstance(value, PhpConstant):
        return value.name or ""
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(export_value(item) for item in value) + "]"
    if isinstance(value, dict):
        items = (f"{export_value(k)} => {export_value(v)}" for k, v in value.items())
        return "[" + ", ".join(items) + "]"
    return str(value)


def _export_float(value: float) -> str:
    if math.isnan(value):
        return PhpLiterals.NAN.value
    if math.isinf(value):
        return PhpLiterals.INF.value if value > 0 else PhpLiterals.NEG_INF.value
    return repr(value)


def _export_string(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"
