"""
HTTP surface for the timeline and pricing engines.

Endpoints:
- POST /price            course + options + designation + discount -> price breakdown
- GET  /availability     one business day's blocks with overlap flags
- GET  /timeline         grid labels and the current-time indicator
- GET  /health
"""

import logging
from datetime import date as date_type, datetime
from typing import List, Optional

from fastapi import Depends, FastAPI, HTTPException, Query, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from models import DesignationType, PriceBreakdown, format_time_point, parse_time_point
from pricing import ReservationPriceCalculator, has_prior_reservation
from timeline import BusinessDayClock, InvalidInterval, OutOfOperatingWindow, TimelineGrid
from .config import SalonSettings, get_settings
from .layout import DayLayoutService, LayoutBlock
from .repository import JsonSalonRepository, RecordNotFound, SalonRepository

logger = logging.getLogger(__name__)


# --- Request / response schemas ---

class PriceRequest(BaseModel):
    course_id: str = Field(..., description="Course to price (required)")
    option_ids: List[str] = Field(default_factory=list)
    designation: DesignationType = Field(default=DesignationType.FREE)
    discount_amount: int = Field(default=0, ge=0)
    therapist_id: Optional[str] = Field(default=None, description="Needed for therapist fee overrides")
    customer_id: Optional[str] = Field(default=None, description="Needed for auto-classification")
    auto_classify: bool = Field(default=False, description="Upgrade repeat customers to confirmed nomination")
    start_time: Optional[str] = Field(default=None, description="HH:MM; when given, end_time is derived")


class PriceResponse(PriceBreakdown):
    designation: DesignationType
    end_time: Optional[str] = None


class TimelineResponse(BaseModel):
    granularity_minutes: int
    slot_count: int
    slot_labels: List[str]
    hour_labels: List[str]
    now_offset: Optional[int] = None


# --- Dependencies ---

def get_repository(request: Request) -> SalonRepository:
    return request.app.state.repository


def get_clock(request: Request) -> BusinessDayClock:
    return request.app.state.clock


def get_grid(request: Request) -> TimelineGrid:
    return request.app.state.grid


def create_app(
    repository: Optional[SalonRepository] = None,
    settings: Optional[SalonSettings] = None
) -> FastAPI:
    """Application factory; the repository defaults to the configured JSON data file."""
    settings = settings or get_settings()
    if repository is None:
        repository = JsonSalonRepository.from_file(settings.data_file)

    app = FastAPI(title="Salon Timeline API")
    app.state.repository = repository
    app.state.clock = BusinessDayClock(open_hour=settings.open_hour, close_hour=settings.close_hour)
    app.state.grid = TimelineGrid.for_clock(app.state.clock, settings.slot_minutes)

    @app.exception_handler(RecordNotFound)
    async def record_not_found(request: Request, exc: RecordNotFound):
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(OutOfOperatingWindow)
    async def out_of_window(request: Request, exc: OutOfOperatingWindow):
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    @app.exception_handler(InvalidInterval)
    async def invalid_interval(request: Request, exc: InvalidInterval):
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    @app.get("/health")
    def health():
        return {"status": "ok"}

    @app.post("/price", response_model=PriceResponse)
    def price(
        body: PriceRequest,
        repo: SalonRepository = Depends(get_repository),
        clock: BusinessDayClock = Depends(get_clock),
    ):
        course = repo.get_course(body.course_id)
        options = repo.get_options(body.option_ids)
        therapist_pricing = repo.get_therapist_pricing(body.therapist_id) if body.therapist_id else None

        prior = None
        if body.auto_classify:
            if not (body.customer_id and body.therapist_id):
                raise HTTPException(
                    status_code=422,
                    detail="auto_classify needs both customer_id and therapist_id",
                )
            history = repo.list_reservation_history(body.customer_id, body.therapist_id)
            prior = has_prior_reservation(history, body.customer_id, body.therapist_id)

        calculator = ReservationPriceCalculator(clock)
        quote = calculator.quote(
            course,
            options,
            body.designation,
            therapist_pricing,
            repo.get_shop_defaults(),
            discount_amount=body.discount_amount,
            has_prior_reservation=prior,
        )

        end_time = None
        if body.start_time:
            try:
                start = parse_time_point(body.start_time)
            except ValueError as e:
                raise HTTPException(status_code=422, detail=str(e)) from e
            end = calculator.end_time(start, quote.breakdown.total_duration_minutes)
            end_time = format_time_point(end)

        return PriceResponse(
            **quote.breakdown.model_dump(),
            designation=quote.designation,
            end_time=end_time,
        )

    @app.get("/availability", response_model=List[LayoutBlock])
    def availability(
        date: date_type = Query(..., description="Business day (YYYY-MM-DD)"),
        resource_id: Optional[str] = Query(default=None, description="Limit to one therapist"),
        repo: SalonRepository = Depends(get_repository),
        clock: BusinessDayClock = Depends(get_clock),
        grid: TimelineGrid = Depends(get_grid),
    ):
        service = DayLayoutService(repo, clock, grid)
        return service.layout(date, resource_id)

    @app.get("/timeline", response_model=TimelineResponse)
    def timeline(
        clock: BusinessDayClock = Depends(get_clock),
        grid: TimelineGrid = Depends(get_grid),
    ):
        return TimelineResponse(
            granularity_minutes=grid.granularity_minutes,
            slot_count=grid.slot_count,
            slot_labels=grid.slot_labels(clock),
            hour_labels=grid.hour_labels(clock),
            now_offset=clock.current_offset(datetime.now()),
        )

    logger.info(f"API ready (window {settings.open_hour:02d}:00-{settings.close_hour:02d}:00, "
                f"{app.state.grid.slot_count} slots)")
    return app
