import asyncio
import copy
from typing import Any, Dict, List, Optional, Union

from config import MOCK_CONFIG, logger
from models import Envelope, FailureKind, IndicatorKey, failure, success
from utils.retry import Sleep

_MONTHS = ["Jan", "Feb", "Mar", "Apr", "Mei", "Jun", "Jul", "Agu", "Sep", "Okt", "Nov", "Des"]
_YEARS = ["2020", "2021", "2022", "2023", "2024"]

MOCK_CHART_DATA: Dict[str, Dict[str, Any]] = {
    "ntp-bulanan": {
        "title": "NTP Bulanan (Nilai Tukar Petani)",
        "labels": _MONTHS,
        "values": [105.2, 104.8, 105.5, 105.1, 104.9, 105.3, 105.7, 105.4, 105.6, 105.8, 105.9, 106.1],
        "period": "Januari - Desember 2024",
    },
    "ntp-indeks": {
        "title": "Indeks Diterima vs Dibayar Petani",
        "labels": _MONTHS,
        "datasets": [
            {
                "label": "Indeks Diterima (It)",
                "values": [105.2, 105.5, 106.0, 105.8, 105.6, 105.9, 106.2, 106.0, 106.3, 106.5, 106.7, 107.0],
                "color": "#003D7A",
            },
            {
                "label": "Indeks Dibayar (Ib)",
                "values": [100.0, 100.2, 100.5, 100.3, 100.1, 100.4, 100.6, 100.4, 100.7, 100.9, 101.1, 101.3],
                "color": "#4FC3F7",
            },
        ],
        "period": "Januari - Desember 2024",
    },
    "ntp-subsektor": {
        "title": "NTP per Subsektor",
        "labels": ["Tanaman Pangan", "Hortikultura", "Perkebunan", "Peternakan", "Perikanan"],
        "values": [105.2, 104.8, 105.5, 105.1, 104.9],
        "period": "2024",
    },
    "tpak": {
        "title": "TPAK Tahunan (Tingkat Partisipasi Angkatan Kerja)",
        "labels": _YEARS,
        "values": [68.5, 69.2, 69.8, 70.1, 70.5],
        "period": "2020-2024",
    },
    "tpt": {
        "title": "TPT Tahunan (Tingkat Pengangguran Terbuka)",
        "labels": _YEARS,
        "values": [4.2, 4.8, 5.1, 4.9, 4.5],
        "period": "2020-2024",
    },
    "komposisi-tenaga-kerja": {
        "title": "Komposisi Tenaga Kerja per Sektor",
        "labels": _YEARS,
        "datasets": [
            {"label": "Pertanian", "values": [35, 34, 33, 32, 31], "color": "#4CAF50"},
            {"label": "Industri", "values": [15, 16, 17, 18, 19], "color": "#2196F3"},
            {"label": "Jasa", "values": [25, 26, 27, 28, 29], "color": "#FF9800"},
            {"label": "Konstruksi", "values": [10, 11, 12, 13, 14], "color": "#9C27B0"},
            {"label": "Lainnya", "values": [15, 13, 11, 9, 7], "color": "#F44336"},
        ],
        "period": "2020-2024",
    },
    "inflasi": {
        "title": "Inflasi (IHK 2022=100) Bulanan",
        "labels": _MONTHS[:6],
        "values": [2.1, 2.3, 2.0, 2.4, 2.2, 2.5],
        "period": "Januari - Juni 2024",
    },
    "pengeluaran": {
        "title": "Komposisi Pengeluaran",
        "labels": ["Makanan", "Perumahan", "Transportasi", "Lainnya"],
        "values": [45, 25, 20, 10],
        "period": "2024",
    },
    "kemiskinan": {
        "title": "Persentase Penduduk Miskin",
        "labels": ["Maret 2020", "Sept 2020", "Maret 2021", "Sept 2021", "Maret 2022", "Sept 2022"],
        "values": [20.5, 19.8, 19.2, 18.9, 18.5, 18.1],
        "period": "2020-2022",
    },
    "ipm": {
        "title": "Indeks Pembangunan Manusia (IPM)",
        "labels": _YEARS,
        "values": [65.2, 65.8, 66.4, 67.1, 67.8],
        "period": "2020-2024",
    },
    "ketenagakerjaan": {
        "title": "Tingkat Pengangguran Terbuka (TPT)",
        "labels": _YEARS,
        "values": [4.2, 4.8, 5.1, 4.9, 4.5],
        "period": "2020-2024",
    },
}

MOCK_KPI_DATA: List[Dict[str, Any]] = [
    {
        "title": "Indeks Kedalaman Kemiskinan (P1)",
        "value": 3.352, "decimals": 3, "unit": "Persen", "period": "Maret 2025",
        "iconColor": "linear-gradient(135deg, #003D7A, #0059B8)", "icon": "shield",
    },
    {
        "title": "Pengeluaran PerKapita Perempuan",
        "value": 7666, "decimals": 0, "unit": "Ribu Rupiah", "period": "2023",
        "iconColor": "linear-gradient(135deg, #4CAF50, #66BB6A)", "icon": "wallet",
    },
    {
        "title": "Rata-rata Lama Sekolah 2024",
        "value": 8.02, "decimals": 2, "unit": "Tahun", "period": "Maret 2025",
        "iconColor": "linear-gradient(135deg, #2196F3, #42A5F5)", "icon": "education",
    },
    {
        "title": "Gini Rasio",
        "value": 0.315, "decimals": 3, "unit": "", "period": "Maret 2025",
        "iconColor": "linear-gradient(135deg, #FF9800, #FFA726)", "icon": "house",
    },
    {
        "title": "Angka Harapan Hidup",
        "value": 71.2, "decimals": 1, "unit": "Tahun", "period": "2024",
        "iconColor": "linear-gradient(135deg, #9C27B0, #BA68C8)", "icon": "health",
    },
    {
        "title": "Tingkat Partisipasi Angkatan Kerja",
        "value": 70.5, "decimals": 1, "unit": "Persen", "period": "2024",
        "iconColor": "linear-gradient(135deg, #F44336, #EF5350)", "icon": "work",
    },
    {
        "title": "Tingkat Pengangguran Terbuka",
        "value": 4.5, "decimals": 1, "unit": "Persen", "period": "2024",
        "iconColor": "linear-gradient(135deg, #00BCD4, #26C6DA)", "icon": "unemployment",
    },
    {
        "title": "Indeks Pembangunan Manusia",
        "value": 67.8, "decimals": 1, "unit": "", "period": "2024",
        "iconColor": "linear-gradient(135deg, #FF5722, #FF7043)", "icon": "development",
    },
]


class MockDataProvider:
    """Canned stand-in for the statistics backend, with fixed latency."""

    def __init__(
        self,
        chart_delay: float = MOCK_CONFIG.CHART_DELAY,
        kpi_delay: float = MOCK_CONFIG.KPI_DELAY,
        sleep: Sleep = asyncio.sleep,
    ):
        self.chart_delay = chart_delay
        self.kpi_delay = kpi_delay
        self._sleep = sleep

    async def get_chart_data(
        self,
        key: Union[str, IndicatorKey],
        filters: Optional[Dict[str, Any]] = None,
    ) -> Envelope:
        # filters are accepted for signature parity; canned data ignores them
        await self._sleep(self.chart_delay)

        name = getattr(key, "value", key)
        payload = MOCK_CHART_DATA.get(name)
        if payload is None:
            logger.warning("Mock data not found for: %s", name)
            return failure(
                FailureKind.UNKNOWN_MOCK_KEY,
                f"Mock data not found for: {name}",
                cause={"key": name},
            )
        return success(copy.deepcopy(payload))

    async def get_kpi_data(self) -> Envelope:
        await self._sleep(self.kpi_delay)
        return success(copy.deepcopy(MOCK_KPI_DATA))
