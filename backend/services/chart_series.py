from typing import List, Literal, Optional, Sequence, Union

from pydantic import BaseModel

from config import CHART_CONFIG
from exceptions import ValidationException
from models import Dataset, MultiSeries, SingleSeries

ChartType = Literal["line", "bar", "multiline", "stacked", "pie"]
CHART_TYPES = ("line", "bar", "multiline", "stacked", "pie")


class Point(BaseModel):
    label: str
    value: float


class Series(BaseModel):
    label: str
    color: str
    points: List[Point]


class Segment(BaseModel):
    label: str
    lower: float
    upper: float


class Layer(BaseModel):
    label: str
    color: str
    segments: List[Segment]


class Slice(BaseModel):
    label: str
    value: float
    fraction: float
    color: str


class ChartSpec(BaseModel):
    """Chart-ready primitives for the front-end renderer."""
    type: ChartType
    title: str
    period: str
    labels: List[str]
    y_max: float = 0.0
    series: List[Series] = []
    layers: List[Layer] = []
    slices: List[Slice] = []


def palette_color(index: int) -> str:
    palette = CHART_CONFIG.PALETTE
    return palette[index % len(palette)]


def y_domain_max(values: Sequence[float]) -> float:
    """Upper bound of the value axis, leaving headroom above the tallest value."""
    top = max(values, default=0.0)
    return max(top, 0.0) * CHART_CONFIG.DOMAIN_HEADROOM


def default_chart_type(key: str, data: Union[SingleSeries, MultiSeries]) -> ChartType:
    chart_type = CHART_CONFIG.DEFAULT_TYPES.get(key)
    if chart_type:
        return chart_type
    return "multiline" if isinstance(data, MultiSeries) else "line"


def _as_datasets(data: Union[SingleSeries, MultiSeries]) -> List[Dataset]:
    if isinstance(data, MultiSeries):
        return list(data.datasets)
    return [Dataset(label=data.title, values=data.values, color=CHART_CONFIG.PRIMARY)]


def _points(labels: Sequence[str], values: Sequence[float]) -> List[Point]:
    return [Point(label=label, value=value) for label, value in zip(labels, values)]


def _stack(labels: Sequence[str], datasets: Sequence[Dataset]) -> List[Layer]:
    totals = [0.0] * len(labels)
    layers = []
    for index, dataset in enumerate(datasets):
        segments = []
        for i, (label, value) in enumerate(zip(labels, dataset.values)):
            lower = totals[i]
            totals[i] = lower + value
            segments.append(Segment(label=label, lower=lower, upper=totals[i]))
        layers.append(Layer(
            label=dataset.label,
            color=dataset.color or palette_color(index),
            segments=segments,
        ))
    return layers


def _pie(labels: Sequence[str], values: Sequence[float]) -> List[Slice]:
    total = sum(values)
    return [
        Slice(
            label=label,
            value=value,
            fraction=(value / total) if total else 0.0,
            color=palette_color(index),
        )
        for index, (label, value) in enumerate(zip(labels, values))
    ]


def build_chart(
    data: Union[SingleSeries, MultiSeries],
    chart_type: Optional[str] = None,
) -> ChartSpec:
    chart_type = chart_type or default_chart_type("", data)
    if chart_type not in CHART_TYPES:
        raise ValidationException("chart", f"unsupported chart type '{chart_type}'")

    base = {
        "type": chart_type,
        "title": data.title,
        "period": data.period,
        "labels": list(data.labels),
    }

    if chart_type in ("line", "bar", "pie"):
        if isinstance(data, MultiSeries):
            raise ValidationException("chart", f"'{chart_type}' charts need single-series data")
        if chart_type == "pie":
            return ChartSpec(**base, slices=_pie(data.labels, data.values))
        return ChartSpec(
            **base,
            y_max=y_domain_max(data.values),
            series=[Series(label=data.title, color=CHART_CONFIG.PRIMARY, points=_points(data.labels, data.values))],
        )

    datasets = _as_datasets(data)

    if chart_type == "stacked":
        layers = _stack(data.labels, datasets)
        tops = [segment.upper for layer in layers for segment in layer.segments]
        return ChartSpec(**base, y_max=y_domain_max(tops), layers=layers)

    all_values = [value for dataset in datasets for value in dataset.values]
    return ChartSpec(
        **base,
        y_max=y_domain_max(all_values),
        series=[
            Series(
                label=dataset.label,
                color=dataset.color or palette_color(index),
                points=_points(data.labels, dataset.values),
            )
            for index, dataset in enumerate(datasets)
        ],
    )
