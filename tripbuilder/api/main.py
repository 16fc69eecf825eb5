"""FastAPI application serving the catalog and itinerary generation."""

from __future__ import annotations

import datetime as dt
import logging
import time
from typing import Optional

from dotenv import load_dotenv
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from tripbuilder.adapters.catalog import get_activity, list_accommodations, list_activities
from tripbuilder.api.schemas import (
    AccommodationListResponse,
    ActivityListResponse,
    HealthResponse,
    ItineraryRequest,
    PlanResult,
    QuoteResponse,
    RosterInput,
)
from tripbuilder.application.aggregator import Clock
from tripbuilder.application.contracts import PlanStatus
from tripbuilder.application.plan_itinerary import plan_itinerary
from tripbuilder.config.settings import resolve_settings
from tripbuilder.domain.enums import ActivityCategory
from tripbuilder.domain.exceptions import DomainError
from tripbuilder.infrastructure.logging import configure_logging, get_logger
from tripbuilder.nlg.renderer import generate_pricing_preview
from tripbuilder.pricing.engine import calculate_activity_pricing
from tripbuilder.pricing.participants import create_participants, normalize_children_ages
from tripbuilder.shared.exceptions import CatalogError
from tripbuilder.validators import validate_activity_booking

_api_logger = logging.getLogger("trip-builder.api")

load_dotenv()

_settings = resolve_settings()
configure_logging(_settings.log_level)

app = FastAPI(
    title="trip-builder",
    version="1.0.0",
    docs_url="/docs" if _settings.enable_docs else None,
    redoc_url=None,
)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Inject security response headers."""

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        response.headers["Cache-Control"] = "no-store"
        return response


class RequestLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        started = time.time()
        response = await call_next(request)
        get_logger().event(
            "request",
            method=request.method,
            path=request.url.path,
            status=response.status_code,
            duration_ms=round((time.time() - started) * 1000, 1),
        )
        return response


app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(RequestLogMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=_settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


def get_clock() -> Clock:
    return dt.datetime.now


@app.exception_handler(CatalogError)
async def _catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    _api_logger.warning("catalog error on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(DomainError)
async def _domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse(status="ok")


@app.get("/api/lodgings", response_model=AccommodationListResponse)
def lodgings():
    return AccommodationListResponse(accommodations=list_accommodations())


@app.get("/api/activities", response_model=ActivityListResponse)
def activities(category: Optional[ActivityCategory] = None):
    return ActivityListResponse(activities=list_activities(category))


@app.post("/api/activities/{activity_id}/quote", response_model=QuoteResponse)
def quote(activity_id: str, roster: RosterInput):
    activity = get_activity(activity_id)
    ages = normalize_children_ages(roster.children, roster.children_ages)
    people = create_participants(roster.adults, roster.children, ages, roster.has_seniors)
    pricing = calculate_activity_pricing(activity, people)
    return QuoteResponse(
        activity_id=activity.id,
        pricing=pricing,
        validation=validate_activity_booking(activity, people),
        preview=generate_pricing_preview(pricing.total, pricing.deposit, pricing.remaining),
    )


@app.post("/api/itinerary", response_model=PlanResult)
def itinerary(req: ItineraryRequest, clock: Clock = Depends(get_clock)):
    result = plan_itinerary(req, clock=clock)
    if result.status == PlanStatus.REJECTED:
        return JSONResponse(status_code=422, content=result.model_dump(mode="json"))
    return result
