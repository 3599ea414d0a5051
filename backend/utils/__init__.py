from .retry import RetryPolicy, run_with_retry
from .formatting import format_number, format_kpi_value
from .validation import InputValidator

__all__ = [
    "RetryPolicy",
    "run_with_retry",
    "format_number",
    "format_kpi_value",
    "InputValidator",
]
