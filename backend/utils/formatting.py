from typing import Any, Optional

_ID_SEPARATORS = str.maketrans({",": ".", ".": ","})


def format_number(number: Optional[float], decimals: int = 2) -> str:
    """Format a number the id-ID way: '.' groups thousands, ',' marks decimals."""
    if number is None:
        return "-"
    try:
        formatted = f"{float(number):,.{max(decimals, 0)}f}"
    except (TypeError, ValueError):
        return "-"
    return formatted.translate(_ID_SEPARATORS)


def format_kpi_value(record: Any) -> str:
    """Value of a KPI card with its unit, e.g. '3,352 Persen'."""
    text = format_number(record.value, record.decimals)
    return f"{text} {record.unit}" if record.unit else text
