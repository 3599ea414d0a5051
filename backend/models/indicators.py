from enum import Enum
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from exceptions import SchemaValidationException


class IndicatorKey(str, Enum):
    """Logical identifiers of the statistical series served by the backend."""
    NTP_BULANAN = "ntp-bulanan"
    NTP_INDEKS = "ntp-indeks"
    NTP_SUBSEKTOR = "ntp-subsektor"
    TPAK = "tpak"
    TPT = "tpt"
    KOMPOSISI_TENAGA_KERJA = "komposisi-tenaga-kerja"
    INFLASI = "inflasi"
    PENGELUARAN = "pengeluaran"
    KEMISKINAN = "kemiskinan"
    IPM = "ipm"
    KETENAGAKERJAAN = "ketenagakerjaan"

    @classmethod
    def parse(cls, raw: Union[str, "IndicatorKey"]) -> Optional["IndicatorKey"]:
        if isinstance(raw, cls):
            return raw
        try:
            return cls(raw)
        except ValueError:
            return None


class SingleSeries(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    labels: List[str]
    values: List[float]
    period: str

    @model_validator(mode="after")
    def _check_lengths(self):
        if len(self.labels) != len(self.values):
            raise ValueError(
                f"labels ({len(self.labels)}) and values ({len(self.values)}) differ in length"
            )
        return self


class Dataset(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    values: List[float]
    color: str


class MultiSeries(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    labels: List[str]
    datasets: List[Dataset]
    period: str

    @model_validator(mode="after")
    def _check_lengths(self):
        for dataset in self.datasets:
            if len(dataset.values) != len(self.labels):
                raise ValueError(
                    f"dataset '{dataset.label}' has {len(dataset.values)} values for {len(self.labels)} labels"
                )
        return self


ChartSeries = Union[SingleSeries, MultiSeries]


class KPIRecord(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str
    value: float
    decimals: int = Field(ge=0)
    unit: str
    period: str
    icon_color: str = Field(alias="iconColor")
    icon: str


def _describe(error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ())) or "payload"
    return f"{location}: {first.get('msg')}"


def parse_chart_payload(data: Any) -> ChartSeries:
    """Validate a chart response body into a single- or multi-series schema."""
    if not isinstance(data, dict):
        raise SchemaValidationException("chart", f"expected an object, got {type(data).__name__}")

    model = MultiSeries if "datasets" in data else SingleSeries
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise SchemaValidationException(model.__name__, _describe(e)) from e


def parse_kpi_payload(data: Any) -> List[KPIRecord]:
    if not isinstance(data, list):
        raise SchemaValidationException("kpi", f"expected an array, got {type(data).__name__}")
    try:
        return [KPIRecord.model_validate(item) for item in data]
    except ValidationError as e:
        raise SchemaValidationException("KPIRecord", _describe(e)) from e
