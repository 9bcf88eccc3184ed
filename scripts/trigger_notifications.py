"""Utility script to run one reminder pass from the command line."""

from __future__ import annotations

import argparse
import logging
from datetime import timedelta

from sqlalchemy.exc import SQLAlchemyError

from eventhub.config import get_settings
from eventhub.infrastructure.database import SessionLocal, initialize_database
from eventhub.infrastructure.scheduler import NotificationScheduler


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for a manual reminder pass."""

    settings = get_settings()
    parser = argparse.ArgumentParser(
        description="Create upcoming-event reminders once, outside the scheduler.",
    )
    parser.add_argument(
        "--window-hours",
        type=int,
        default=settings.notification_window_hours,
        help="How many hours ahead to look for events (default: %(default)s)",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help="Logging level (default: %(default)s)",
    )
    return parser.parse_args()


def main() -> None:
    """Run a single pass and print its counts."""

    args = parse_args()
    if args.window_hours <= 0:
        raise SystemExit("--window-hours must be a positive number.")

    logging.basicConfig(
        level=str(args.log_level).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    try:
        initialize_database()
    except SQLAlchemyError as exc:
        raise SystemExit(f"Could not reach the database: {exc}") from exc

    scheduler = NotificationScheduler(
        SessionLocal, window=timedelta(hours=args.window_hours)
    )
    result = scheduler.process_manually()
    print(
        "Notification pass finished:\n"
        f"  Eligible: {result.eligible}\n"
        f"  Created: {result.created}\n"
        f"  Failed: {result.failed}\n"
        f"  Query failed: {'yes' if result.query_failed else 'no'}"
    )


if __name__ == "__main__":
    main()
