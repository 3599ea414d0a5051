from .envelope import (
    Envelope,
    SuccessEnvelope,
    FailureEnvelope,
    FailureKind,
    TRANSIENT_KINDS,
    success,
    failure,
)
from .indicators import (
    IndicatorKey,
    SingleSeries,
    Dataset,
    MultiSeries,
    ChartSeries,
    KPIRecord,
    parse_chart_payload,
    parse_kpi_payload,
)
from .feedback import FeedbackSubmission

__all__ = [
    "Envelope",
    "SuccessEnvelope",
    "FailureEnvelope",
    "FailureKind",
    "TRANSIENT_KINDS",
    "success",
    "failure",

    "IndicatorKey",
    "SingleSeries",
    "Dataset",
    "MultiSeries",
    "ChartSeries",
    "KPIRecord",
    "parse_chart_payload",
    "parse_kpi_payload",

    "FeedbackSubmission",
]
