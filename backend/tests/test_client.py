import pytest
from unittest.mock import AsyncMock

from api import StatisticsClient
from models import (
    FailureKind,
    FeedbackSubmission,
    KPIRecord,
    MultiSeries,
    SingleSeries,
    failure,
    success,
)


@pytest.mark.asyncio
class TestGetChartData:
    """Tests for the chart data pipeline."""

    async def test_live_success_parses_schema(self, client, sample_single_series):
        client.executor = AsyncMock(return_value=success(sample_single_series))

        result = await client.get_chart_data("inflasi", {"year": "2024"})

        assert result.ok
        assert isinstance(result.data, SingleSeries)
        assert result.data.values == [2.1, 2.3, 2.0]
        client.executor.assert_awaited_once_with("/inflasi?year=2024", "GET")

    async def test_multi_series_payload(self, client, sample_multi_series):
        client.executor = AsyncMock(return_value=success(sample_multi_series))

        result = await client.get_komposisi_tenaga_kerja()

        assert isinstance(result.data, MultiSeries)
        assert [d.label for d in result.data.datasets] == ["Pertanian", "Industri"]
        client.executor.assert_awaited_once_with("/ketenagakerjaan/komposisi-sektor", "GET")

    async def test_unknown_key_makes_no_network_call(self, client):
        client.executor = AsyncMock()

        result = await client.get_chart_data("does-not-exist")

        assert not result.ok
        assert result.kind == FailureKind.UNKNOWN_ENDPOINT
        assert "does-not-exist" in result.message
        client.executor.assert_not_awaited()

    async def test_invalid_shape(self, client):
        bad = {"title": "IPM", "labels": ["2023", "2024"], "values": [67.1], "period": "2023-2024"}
        client.executor = AsyncMock(return_value=success(bad))

        result = await client.get_chart_data("ipm")

        assert not result.ok
        assert result.kind == FailureKind.INVALID_SHAPE
        assert result.cause == bad
        client.executor.assert_awaited_once()

    async def test_timeouts_are_retried(self, client, sleep_recorder):
        client.executor = AsyncMock(return_value=failure(FailureKind.TIMEOUT, "Request timed out after 5s"))

        result = await client.get_tpt_tahunan()

        assert result.kind == FailureKind.TIMEOUT
        assert client.executor.await_count == 3
        assert sleep_recorder.delays == [1.0, 2.0]

    async def test_server_error_returned_immediately(self, client, sleep_recorder):
        client.executor = AsyncMock(return_value=failure(FailureKind.SERVER_STATUS, "boom", status=500))

        result = await client.get_ntp_bulanan()

        assert result.status == 500
        assert client.executor.await_count == 1
        assert sleep_recorder.delays == []

    async def test_transient_then_success(self, client, sample_single_series):
        client.executor = AsyncMock(side_effect=[
            failure(FailureKind.TRANSPORT, "Connection reset"),
            success(sample_single_series),
        ])

        result = await client.get_tpak_tahunan()

        assert result.ok
        assert client.executor.await_count == 2

    @pytest.mark.parametrize("method,path", [
        ("get_ntp_bulanan", "/ntp/bulanan"),
        ("get_indeks_diterima_dibayar", "/ntp/indeks-diterima-dibayar"),
        ("get_ntp_per_subsektor", "/ntp/per-subsektor"),
        ("get_tpak_tahunan", "/ketenagakerjaan/tpak-tahunan"),
        ("get_tpt_tahunan", "/ketenagakerjaan/tpt-tahunan"),
    ])
    async def test_named_helpers(self, client, sample_single_series, method, path):
        client.executor = AsyncMock(return_value=success(sample_single_series))

        await getattr(client, method)()

        client.executor.assert_awaited_once_with(path, "GET")


@pytest.mark.asyncio
class TestMockMode:

    async def test_mock_ntp_bulanan(self, mock_settings, sleep_recorder):
        client = StatisticsClient(mock_settings, sleep=sleep_recorder)
        client.executor = AsyncMock()

        result = await client.get_chart_data("ntp-bulanan")

        assert result.ok
        assert len(result.data.labels) == 12
        assert len(result.data.values) == len(result.data.labels)
        assert sleep_recorder.delays == [0.5]
        client.executor.assert_not_awaited()

    async def test_mock_unknown_key(self, mock_settings, sleep_recorder):
        client = StatisticsClient(mock_settings, sleep=sleep_recorder)

        result = await client.get_chart_data("does-not-exist")

        assert result.kind == FailureKind.UNKNOWN_MOCK_KEY
        assert "does-not-exist" in result.message
        assert sleep_recorder.delays == [0.5]

    async def test_switch_read_per_call(self, client, sample_single_series):
        client.executor = AsyncMock(return_value=success(sample_single_series))

        live = await client.get_chart_data("inflasi")
        client.settings = client.settings.model_copy(update={"USE_MOCK_DATA": True})
        canned = await client.get_chart_data("inflasi")

        assert live.data.labels == ["Jan", "Feb", "Mar"]
        assert len(canned.data.labels) == 6
        assert client.executor.await_count == 1

    async def test_mock_kpi(self, mock_settings, sleep_recorder):
        client = StatisticsClient(mock_settings, sleep=sleep_recorder)

        result = await client.get_kpi_data()

        assert len(result.data) == 8
        assert all(isinstance(record, KPIRecord) for record in result.data)
        assert sleep_recorder.delays == [0.3]


@pytest.mark.asyncio
class TestKpiAndFeedback:

    async def test_live_kpi(self, client, sample_kpi_records):
        client.executor = AsyncMock(return_value=success(sample_kpi_records))

        result = await client.get_kpi_data()

        assert [record.title for record in result.data] == ["Gini Rasio", "Pengeluaran PerKapita Perempuan"]
        client.executor.assert_awaited_once_with("/kpi", "GET")

    async def test_kpi_not_a_list(self, client):
        client.executor = AsyncMock(return_value=success({"title": "Gini Rasio"}))

        result = await client.get_kpi_data()

        assert result.kind == FailureKind.INVALID_SHAPE

    async def test_submit_feedback(self, client):
        client.executor = AsyncMock(return_value=success({"id": 1}))

        result = await client.submit_feedback(
            FeedbackSubmission(name="Budi", email="Budi@Example.id", message="Data sangat membantu")
        )

        assert result.ok
        client.executor.assert_awaited_once_with(
            "/feedback",
            "POST",
            {"name": "Budi", "email": "budi@example.id", "message": "Data sangat membantu"},
        )

    async def test_feedback_text_sent_verbatim(self, client):
        client.executor = AsyncMock(return_value=success(None))

        result = await client.submit_feedback({"name": "O'Brien", "message": "Data BPS & Kemenaker <2024>"})

        assert result.ok
        client.executor.assert_awaited_once_with(
            "/feedback",
            "POST",
            {"name": "O'Brien", "message": "Data BPS & Kemenaker <2024>"},
        )

    async def test_feedback_with_equals_sign(self, client):
        client.executor = AsyncMock(return_value=success(None))

        result = await client.submit_feedback({"name": "Rina", "message": "Koneksi = lambat sekali"})

        assert result.ok
        assert client.executor.await_args.args[2]["message"] == "Koneksi = lambat sekali"

    async def test_feedback_from_dict_is_validated(self, client):
        client.executor = AsyncMock()

        result = await client.submit_feedback({"name": "", "message": "ok ok"})

        assert result.kind == FailureKind.INVALID_REQUEST
        client.executor.assert_not_awaited()

    async def test_feedback_ignores_mock_mode(self, mock_settings, sleep_recorder):
        client = StatisticsClient(mock_settings, sleep=sleep_recorder)
        client.executor = AsyncMock(return_value=success(None))

        result = await client.submit_feedback({"name": "Ani", "message": "Terima kasih"})

        assert result.ok
        client.executor.assert_awaited_once()
