from dataclasses import dataclass, field
from typing import Dict, Tuple


@dataclass(frozen=True)
class Endpoints:
    """Backend paths for every logical indicator and the fixed endpoints."""
    NTP_BULANAN: str = "/ntp/bulanan"
    NTP_INDEKS_DITERIMA_DIBAYAR: str = "/ntp/indeks-diterima-dibayar"
    NTP_PER_SUBSEKTOR: str = "/ntp/per-subsektor"
    TPAK_TAHUNAN: str = "/ketenagakerjaan/tpak-tahunan"
    TPT_TAHUNAN: str = "/ketenagakerjaan/tpt-tahunan"
    KOMPOSISI_TENAGA_KERJA: str = "/ketenagakerjaan/komposisi-sektor"
    INFLASI: str = "/inflasi"
    PENGELUARAN: str = "/pengeluaran"
    KEMISKINAN: str = "/kemiskinan"
    IPM: str = "/ipm"
    KETENAGAKERJAAN: str = "/ketenagakerjaan"

    FEEDBACK: str = "/feedback"
    KPI: str = "/kpi"

    def indicator_table(self) -> Dict[str, str]:
        return {
            "ntp-bulanan": self.NTP_BULANAN,
            "ntp-indeks": self.NTP_INDEKS_DITERIMA_DIBAYAR,
            "ntp-subsektor": self.NTP_PER_SUBSEKTOR,
            "tpak": self.TPAK_TAHUNAN,
            "tpt": self.TPT_TAHUNAN,
            "komposisi-tenaga-kerja": self.KOMPOSISI_TENAGA_KERJA,
            "inflasi": self.INFLASI,
            "pengeluaran": self.PENGELUARAN,
            "kemiskinan": self.KEMISKINAN,
            "ipm": self.IPM,
            "ketenagakerjaan": self.KETENAGAKERJAAN,
        }


@dataclass(frozen=True)
class RetryDefaults:
    MAX_ATTEMPTS: int = 3
    BASE_DELAY: float = 1.0


@dataclass(frozen=True)
class MockConfig:
    """Artificial latency of the canned data source, in seconds."""
    CHART_DELAY: float = 0.5
    KPI_DELAY: float = 0.3


@dataclass(frozen=True)
class ChartConfig:
    PRIMARY: str = "#003D7A"
    SECONDARY: str = "#4FC3F7"
    SUCCESS: str = "#4CAF50"
    WARNING: str = "#FF9800"
    DANGER: str = "#F44336"
    PALETTE: Tuple[str, ...] = (
        "#003D7A", "#4FC3F7", "#4CAF50", "#FF9800", "#9C27B0", "#2196F3", "#F44336"
    )
    WIDTH: int = 800
    HEIGHT: int = 400
    DOMAIN_HEADROOM: float = 1.1
    DEFAULT_TYPES: Dict[str, str] = field(default_factory=lambda: {
        "ntp-bulanan": "line",
        "ntp-indeks": "multiline",
        "ntp-subsektor": "bar",
        "tpak": "line",
        "tpt": "bar",
        "komposisi-tenaga-kerja": "stacked",
        "inflasi": "line",
        "pengeluaran": "pie",
        "kemiskinan": "bar",
        "ipm": "line",
        "ketenagakerjaan": "line",
    })


ENDPOINTS = Endpoints()
RETRY_DEFAULTS = RetryDefaults()
MOCK_CONFIG = MockConfig()
CHART_CONFIG = ChartConfig()
