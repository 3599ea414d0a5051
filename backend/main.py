from functools import lru_cache
from typing import Dict, List, Optional

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api import StatisticsClient
from config import CHART_CONFIG, check_config_on_startup, get_settings, logger
from exceptions import ValidationException
from middleware.context import DashboardContextMiddleware, get_indicator, get_request_id
from models import Envelope, FailureEnvelope, FailureKind, FeedbackSubmission, IndicatorKey
from services import build_chart, default_chart_type
from utils import InputValidator, format_kpi_value

RESERVED_QUERY_PARAMS = {"chart"}

FAILURE_HTTP_STATUS = {
    FailureKind.UNKNOWN_ENDPOINT: 404,
    FailureKind.UNKNOWN_MOCK_KEY: 404,
    FailureKind.INVALID_REQUEST: 422,
    FailureKind.TIMEOUT: 504,
}

app = FastAPI(title="Statistik Dashboard API")

@app.on_event("startup")
async def startup_event():
    check_config_on_startup(get_settings())

app.add_middleware(DashboardContextMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@lru_cache(maxsize=1)
def get_client() -> StatisticsClient:
    return StatisticsClient(get_settings())


def failure_status(envelope: FailureEnvelope) -> int:
    if envelope.kind in FAILURE_HTTP_STATUS:
        return FAILURE_HTTP_STATUS[envelope.kind]
    if envelope.kind == FailureKind.SERVER_STATUS and 400 <= envelope.status < 500:
        return envelope.status
    return 502


def envelope_response(envelope: Envelope, **extra) -> JSONResponse:
    if not envelope.ok:
        logger.warning(
            "Returning %s failure: %s",
            envelope.kind.value,
            envelope.message,
            extra={"request_id": get_request_id(), "indicator": get_indicator()},
        )
        return JSONResponse(status_code=failure_status(envelope), content=envelope.model_dump(mode="json"))
    content = envelope.model_dump(mode="json", by_alias=True)
    content.update(extra)
    return JSONResponse(status_code=200, content=content)


def filters_from_query(request: Request) -> Dict[str, object]:
    """Collect dashboard filters (year, region, ...) from the query string."""
    grouped: Dict[str, List[str]] = {}
    for name, value in request.query_params.multi_items():
        if name in RESERVED_QUERY_PARAMS:
            continue
        value = InputValidator.sanitize_filter_value(value)
        if value:
            grouped.setdefault(name, []).append(value)
    return {name: values[0] if len(values) == 1 else values for name, values in grouped.items()}


@app.get("/")
async def health_check():
    return {"status": "ok", "message": "Statistik Dashboard API is running."}


@app.get("/api/indicators")
async def list_indicators(client: StatisticsClient = Depends(get_client)):
    return {
        "indicators": [
            {
                "key": key.value,
                "path": client.resolver.path_for(key),
                "chart": CHART_CONFIG.DEFAULT_TYPES.get(key.value, "line"),
            }
            for key in client.resolver.keys
        ],
        "mock": client.settings.USE_MOCK_DATA,
    }


@app.get("/api/charts/{indicator}")
async def chart_data(
    indicator: str,
    request: Request,
    chart: Optional[str] = None,
    client: StatisticsClient = Depends(get_client),
):
    envelope = await client.get_chart_data(indicator, filters_from_query(request))
    if not envelope.ok:
        return envelope_response(envelope)

    key = IndicatorKey.parse(indicator)
    chart_type = chart or default_chart_type(key.value if key else indicator, envelope.data)
    try:
        spec = build_chart(envelope.data, chart_type)
    except ValidationException as e:
        return JSONResponse(status_code=422, content={"ok": False, **e.to_dict()})
    return envelope_response(envelope, chart=spec.model_dump(mode="json"))


@app.get("/api/kpi")
async def kpi_data(client: StatisticsClient = Depends(get_client)):
    envelope = await client.get_kpi_data()
    if not envelope.ok:
        return envelope_response(envelope)
    return envelope_response(envelope, display=[format_kpi_value(record) for record in envelope.data])


@app.post("/api/feedback")
async def feedback(req: FeedbackSubmission, client: StatisticsClient = Depends(get_client)):
    envelope = await client.submit_feedback(req)
    return envelope_response(envelope)
