import asyncio
from functools import partial
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from config import ENDPOINTS, Settings, logger
from exceptions import SchemaValidationException
from models import (
    Envelope,
    FailureKind,
    FeedbackSubmission,
    IndicatorKey,
    SuccessEnvelope,
    failure,
    parse_chart_payload,
    parse_kpi_payload,
    success,
)
from utils.retry import Sleep, run_with_retry

from .endpoints import EndpointResolver, Filters
from .executor import RequestExecutor
from .mock import MockDataProvider


class StatisticsClient:
    """
    Entry point for dashboard data: chart series, KPI cards and feedback.

    Every public coroutine returns exactly one envelope. The mock switch is
    read from the injected settings on each call.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        resolver: Optional[EndpointResolver] = None,
        mock: Optional[MockDataProvider] = None,
        executor: Optional[RequestExecutor] = None,
        sleep: Sleep = asyncio.sleep,
    ):
        self.settings = settings
        self.resolver = resolver or EndpointResolver()
        self.mock = mock or MockDataProvider(
            chart_delay=settings.MOCK_CHART_DELAY,
            kpi_delay=settings.MOCK_KPI_DELAY,
            sleep=sleep,
        )
        self.executor = executor or RequestExecutor(settings)
        self._sleep = sleep

    async def fetch_data(
        self,
        path: str,
        method: str = "GET",
        body: Any = None,
    ) -> Envelope:
        if body is None:
            operation = partial(self.executor, path, method)
        else:
            operation = partial(self.executor, path, method, body)
        return await run_with_retry(
            operation,
            self.settings.retry_policy,
            sleep=self._sleep,
            name=f"{method.upper()} {path}",
        )

    async def get_chart_data(
        self,
        key: Union[str, IndicatorKey],
        filters: Optional[Filters] = None,
    ) -> Envelope:
        if self.settings.USE_MOCK_DATA:
            envelope = await self.mock.get_chart_data(key, filters)
        else:
            resolved = self.resolver.resolve(key, filters)
            if not isinstance(resolved, str):
                return resolved
            envelope = await self.fetch_data(resolved)

        if not envelope.ok:
            return envelope
        try:
            return success(parse_chart_payload(envelope.data))
        except SchemaValidationException as e:
            logger.error("Chart payload for %s rejected: %s", getattr(key, "value", key), e.message)
            return failure(FailureKind.INVALID_SHAPE, e.message, cause=envelope.data)

    async def get_ntp_bulanan(self, filters: Optional[Filters] = None) -> Envelope:
        return await self.get_chart_data(IndicatorKey.NTP_BULANAN, filters)

    async def get_indeks_diterima_dibayar(self, filters: Optional[Filters] = None) -> Envelope:
        return await self.get_chart_data(IndicatorKey.NTP_INDEKS, filters)

    async def get_ntp_per_subsektor(self, filters: Optional[Filters] = None) -> Envelope:
        return await self.get_chart_data(IndicatorKey.NTP_SUBSEKTOR, filters)

    async def get_tpak_tahunan(self, filters: Optional[Filters] = None) -> Envelope:
        return await self.get_chart_data(IndicatorKey.TPAK, filters)

    async def get_tpt_tahunan(self, filters: Optional[Filters] = None) -> Envelope:
        return await self.get_chart_data(IndicatorKey.TPT, filters)

    async def get_komposisi_tenaga_kerja(self, filters: Optional[Filters] = None) -> Envelope:
        return await self.get_chart_data(IndicatorKey.KOMPOSISI_TENAGA_KERJA, filters)

    async def get_kpi_data(self) -> Envelope:
        if self.settings.USE_MOCK_DATA:
            envelope = await self.mock.get_kpi_data()
        else:
            envelope = await self.fetch_data(ENDPOINTS.KPI)

        if not envelope.ok:
            return envelope
        try:
            return success(parse_kpi_payload(envelope.data))
        except SchemaValidationException as e:
            logger.error("KPI payload rejected: %s", e.message)
            return failure(FailureKind.INVALID_SHAPE, e.message, cause=envelope.data)

    async def submit_feedback(
        self,
        feedback: Union[FeedbackSubmission, Dict[str, Any]],
    ) -> Envelope:
        if not isinstance(feedback, FeedbackSubmission):
            try:
                feedback = FeedbackSubmission.model_validate(feedback)
            except ValidationError as e:
                first = e.errors()[0]
                field = ".".join(str(part) for part in first.get("loc", ())) or "feedback"
                return failure(
                    FailureKind.INVALID_REQUEST,
                    f"Invalid feedback: {field}: {first.get('msg')}",
                )
        body = feedback.model_dump(exclude_none=True)
        envelope = await self.fetch_data(ENDPOINTS.FEEDBACK, method="POST", body=body)
        if isinstance(envelope, SuccessEnvelope):
            logger.info("Feedback submitted")
        return envelope
