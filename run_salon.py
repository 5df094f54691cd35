"""
Main Execution Script for the Salon Timeline Engine.

Run with: python run_salon.py price --course course_60 --option opt_head --designation nomination --therapist th_01
Layout:   python run_salon.py layout --date 2025-01-15
Serve:    python run_salon.py serve

Data comes from SALON_DATA_FILE (default data/salon.json).
"""

import argparse
import json
import logging
import sys
from datetime import date, datetime

from models import DesignationType, parse_time_point, format_time_point
from pricing import ReservationPriceCalculator, has_prior_reservation
from service import DayLayoutService, JsonSalonRepository, RecordNotFound, get_settings
from timeline import BusinessDayClock, TimelineGrid, TimelineError

logger = logging.getLogger("Main")


def setup_logging(log_level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler()]
    )


def _parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Salon timeline & pricing engine")
    parser.add_argument("--data", help="JSON data file (overrides SALON_DATA_FILE)")
    sub = parser.add_subparsers(dest="command", required=True)

    price = sub.add_parser("price", help="Quote a reservation")
    price.add_argument("--course", required=True, help="Course id")
    price.add_argument("--option", action="append", default=[], help="Option id (repeatable)")
    price.add_argument(
        "--designation",
        choices=[d.value for d in DesignationType],
        default=DesignationType.FREE.value,
    )
    price.add_argument("--therapist", help="Therapist id (for fee overrides)")
    price.add_argument("--customer", help="Customer id (enables auto-classification)")
    price.add_argument("--discount", type=int, default=0)
    price.add_argument("--start", help="Start time HH:MM; prints the derived end time")

    layout = sub.add_parser("layout", help="Print one business day's timeline")
    layout.add_argument("--date", required=True, type=date.fromisoformat)
    layout.add_argument("--resource", help="Therapist id")

    sub.add_parser("serve", help="Run the HTTP API")

    return parser.parse_args(argv)


def run_price(args, repo: JsonSalonRepository, clock: BusinessDayClock) -> None:
    course = repo.get_course(args.course)
    options = repo.get_options(args.option)
    pricing = repo.get_therapist_pricing(args.therapist) if args.therapist else None

    prior = None
    if args.customer and args.therapist:
        history = repo.list_reservation_history(args.customer, args.therapist)
        prior = has_prior_reservation(history, args.customer, args.therapist)

    calculator = ReservationPriceCalculator(clock)
    quote = calculator.quote(
        course, options, DesignationType(args.designation), pricing,
        repo.get_shop_defaults(), discount_amount=args.discount, has_prior_reservation=prior
    )

    report = {"designation": quote.designation.value, **quote.breakdown.model_dump(mode='json')}
    if args.start:
        end = calculator.end_time(parse_time_point(args.start), quote.breakdown.total_duration_minutes)
        report["end_time"] = format_time_point(end)

    print(json.dumps(report, indent=2))


def run_layout(args, repo: JsonSalonRepository, clock: BusinessDayClock, grid: TimelineGrid) -> None:
    blocks = DayLayoutService(repo, clock, grid).layout(args.date, args.resource)

    print("\n" + "=" * 50)
    print(f"📅 TIMELINE {args.date.isoformat()}")
    print("=" * 50)
    for block in blocks:
        marker = "⚠️ " if block.overlapping else "   "
        e = block.entity
        print(f"{marker}{e.resource_id:<8} {e.kind.value:<12} {block.start_time}-{block.end_time}  {e.label}")

    now = clock.current_offset(datetime.now())
    if now is not None:
        print(f"\nNow: offset {now} (slot {grid.slot_index(now)})")


def main(argv=None) -> int:
    args = _parse_args(argv)
    settings = get_settings()
    setup_logging(settings.log_level)

    data_file = args.data or settings.data_file
    clock = BusinessDayClock(open_hour=settings.open_hour, close_hour=settings.close_hour)
    grid = TimelineGrid.for_clock(clock, settings.slot_minutes)

    if args.command == "serve":
        import uvicorn
        from service.api import create_app

        repo = JsonSalonRepository.from_file(data_file)
        logger.info(f"🚀 Serving on {settings.host}:{settings.port}")
        uvicorn.run(create_app(repo, settings), host=settings.host, port=settings.port)
        return 0

    try:
        repo = JsonSalonRepository.from_file(data_file)
        if args.command == "price":
            run_price(args, repo, clock)
        else:
            run_layout(args, repo, clock, grid)
    except FileNotFoundError:
        logger.error(f"❌ Data file {data_file} not found.")
        return 1
    except (RecordNotFound, TimelineError, ValueError) as e:
        logger.error(f"❌ {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
