import pytest
import sys
from pathlib import Path
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock, MagicMock

sys.path.insert(0, str(Path(__file__).parent.parent))


class SleepRecorder:
    """Stand-in for asyncio.sleep that records requested delays."""

    def __init__(self):
        self.delays = []

    async def __call__(self, delay):
        self.delays.append(delay)


@pytest.fixture
def sleep_recorder():
    return SleepRecorder()


@pytest.fixture
def settings():
    """Live-mode settings pointing at a fake backend."""
    from config import Settings
    return Settings(
        BASE_URL="http://stats.test/api",
        TIMEOUT=5.0,
        RETRY_MAX_ATTEMPTS=3,
        RETRY_BASE_DELAY=1.0,
        USE_MOCK_DATA=False,
        _env_file=None,
    )


@pytest.fixture
def mock_settings(settings):
    return settings.model_copy(update={"USE_MOCK_DATA": True})


@pytest.fixture
def client(settings, sleep_recorder):
    from api import StatisticsClient
    return StatisticsClient(settings, sleep=sleep_recorder)


@pytest.fixture
def mock_httpx_client():
    """Mock httpx.AsyncClient used as an async context manager."""
    mock_client = MagicMock()
    mock_client.__aenter__ = AsyncMock(return_value=mock_client)
    mock_client.__aexit__ = AsyncMock(return_value=False)
    return mock_client


def make_response(status_code=200, json_data=None, json_error=None, text=""):
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = json_data
    return response


@pytest.fixture
def sample_single_series():
    return {
        "title": "Inflasi (IHK 2022=100) Bulanan",
        "labels": ["Jan", "Feb", "Mar"],
        "values": [2.1, 2.3, 2.0],
        "period": "Januari - Maret 2024",
    }


@pytest.fixture
def sample_multi_series():
    return {
        "title": "Komposisi Tenaga Kerja per Sektor",
        "labels": ["2023", "2024"],
        "datasets": [
            {"label": "Pertanian", "values": [32, 31], "color": "#4CAF50"},
            {"label": "Industri", "values": [18, 19], "color": "#2196F3"},
        ],
        "period": "2023-2024",
    }


@pytest.fixture
def sample_kpi_records():
    return [
        {
            "title": "Gini Rasio",
            "value": 0.315,
            "decimals": 3,
            "unit": "",
            "period": "Maret 2025",
            "iconColor": "linear-gradient(135deg, #FF9800, #FFA726)",
            "icon": "house",
        },
        {
            "title": "Pengeluaran PerKapita Perempuan",
            "value": 7666,
            "decimals": 0,
            "unit": "Ribu Rupiah",
            "period": "2023",
            "iconColor": "linear-gradient(135deg, #4CAF50, #66BB6A)",
            "icon": "wallet",
        },
    ]


@pytest.fixture
def test_client(mock_settings):
    """TestClient for the FastAPI app backed by the canned data source."""
    import main
    from api import MockDataProvider, StatisticsClient

    async def no_sleep(delay):
        return None

    stats_client = StatisticsClient(mock_settings, mock=MockDataProvider(sleep=no_sleep), sleep=no_sleep)
    main.app.dependency_overrides[main.get_client] = lambda: stats_client
    yield TestClient(main.app)
    main.app.dependency_overrides.clear()
