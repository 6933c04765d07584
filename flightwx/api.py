"""Flight weather API: FastAPI surface over the forecast pipeline."""

import os
from functools import lru_cache

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse

from flightwx.agent.flight_conditions import build_system_message
from flightwx.config.loader import load_config
from flightwx.config.schema import FlightwxConfig
from flightwx.models.common import utc_now
from flightwx.models.outcome import OutcomeKind
from flightwx.pipeline.forecast_pipeline import ForecastPipeline
from flightwx.reporting.formatters import outcome_to_dict

CONFIG_PATH = os.environ.get("FLIGHTWX_CONFIG", "flightwx.yaml")

STATUS_BY_KIND = {
    OutcomeKind.SUMMARY: 200,
    OutcomeKind.NOT_FOUND: 200,
    OutcomeKind.INPUT_ERROR: 400,
    OutcomeKind.PARSE_ERROR: 422,
    OutcomeKind.FETCH_ERROR: 502,
    OutcomeKind.PAGINATION_LIMIT: 502,
}

app = FastAPI(title="Flight Weather", version="0.1.0")


@lru_cache(maxsize=1)
def get_config() -> FlightwxConfig:
    return load_config(CONFIG_PATH)


def get_pipeline(config: FlightwxConfig = Depends(get_config)) -> ForecastPipeline:
    return ForecastPipeline(config)


@app.get("/api/forecast/{time_slot_id}")
def get_forecast(time_slot_id: str, pipeline: ForecastPipeline = Depends(get_pipeline)):
    """Weather summary for a local time slot, or a typed failure."""
    outcome = pipeline.run(time_slot_id)
    return JSONResponse(
        status_code=STATUS_BY_KIND[outcome.kind], content=outcome_to_dict(outcome)
    )


@app.get("/api/criteria")
def get_criteria(config: FlightwxConfig = Depends(get_config)):
    """Safety thresholds and the instructions given to the reasoning component."""
    return {
        "criteria": config.criteria.model_dump(),
        "system_message": build_system_message(config.criteria),
    }


@app.get("/api/health")
def get_health(config: FlightwxConfig = Depends(get_config)):
    return {
        "api_key_configured": bool(config.weather.api_key),
        "location": config.location.name if config.location else None,
        "timestamp": utc_now().isoformat(),
    }
