from typing import Any, Dict, Mapping, Optional, Union

import httpx

from config import ENDPOINTS, logger
from exceptions import UnknownIndicatorException
from models import FailureEnvelope, FailureKind, IndicatorKey, failure

Filters = Mapping[str, Any]


def _stringify(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return ",".join(_stringify(v) for v in value)
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_query_string(filters: Optional[Filters]) -> str:
    """
    Encode a filter set as a URL query string.

    Keys are sorted so the same filters always give the same string. `None`
    values are dropped; list values are comma-joined.
    """
    if not filters:
        return ""
    items = [
        (str(name), _stringify(value))
        for name, value in sorted(filters.items(), key=lambda item: str(item[0]))
        if value is not None
    ]
    return str(httpx.QueryParams(items))


def with_query(path: str, filters: Optional[Filters]) -> str:
    query = build_query_string(filters)
    return f"{path}?{query}" if query else path


class EndpointResolver:
    """Maps logical indicator keys to backend request paths."""

    def __init__(self, table: Optional[Dict[str, str]] = None):
        table = table if table is not None else ENDPOINTS.indicator_table()
        self._table: Dict[IndicatorKey, str] = {}
        for key, path in table.items():
            indicator = IndicatorKey.parse(key)
            if indicator is None:
                raise ValueError(f"Endpoint table contains unknown indicator key: {key}")
            self._table[indicator] = path

    @property
    def keys(self):
        return tuple(self._table)

    def path_for(self, key: Union[str, IndicatorKey]) -> str:
        indicator = IndicatorKey.parse(key)
        if indicator is None or indicator not in self._table:
            raise UnknownIndicatorException(getattr(key, "value", key))
        return self._table[indicator]

    def resolve(
        self,
        key: Union[str, IndicatorKey],
        filters: Optional[Filters] = None,
    ) -> Union[str, FailureEnvelope]:
        try:
            path = self.path_for(key)
        except UnknownIndicatorException as e:
            logger.warning("Endpoint resolution failed: %s", e.message)
            return failure(FailureKind.UNKNOWN_ENDPOINT, e.message, cause=e.details)
        return with_query(path, filters)
