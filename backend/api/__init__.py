from .endpoints import EndpointResolver, build_query_string, with_query
from .executor import RequestExecutor
from .mock import MockDataProvider, MOCK_CHART_DATA, MOCK_KPI_DATA
from .client import StatisticsClient

__all__ = [
    "EndpointResolver",
    "build_query_string",
    "with_query",
    "RequestExecutor",
    "MockDataProvider",
    "MOCK_CHART_DATA",
    "MOCK_KPI_DATA",
    "StatisticsClient",
]
