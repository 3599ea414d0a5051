from .chart_series import (
    ChartSpec,
    CHART_TYPES,
    build_chart,
    default_chart_type,
    y_domain_max,
)

__all__ = [
    "ChartSpec",
    "CHART_TYPES",
    "build_chart",
    "default_chart_type",
    "y_domain_max",
]
