import argparse
from datetime import date

from loguru import logger

from advert_alerts.config import get_settings
from advert_alerts.db.database import init_db
from advert_alerts.scheduler.jobs import check_expiring_adverts, update_remaining_days

settings = get_settings()


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"Invalid date (expected YYYY-MM-DD): {value}"
        ) from None


def main(argv=None):
    parser = argparse.ArgumentParser(description="Advert Alerts CLI")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # init command
    subparsers.add_parser("init", help="Initialize database")

    # check-expiring command
    check_parser = subparsers.add_parser(
        "check-expiring", help="Notify sales reps about adverts ending tomorrow"
    )
    check_parser.add_argument(
        "--date", "-d", type=_parse_date, help="Treat this date as today (YYYY-MM-DD)"
    )

    # update-remaining command
    update_parser = subparsers.add_parser(
        "update-remaining", help="Recompute remaining days and expire finished adverts"
    )
    update_parser.add_argument(
        "--date", "-d", type=_parse_date, help="Treat this date as today (YYYY-MM-DD)"
    )

    # serve command
    subparsers.add_parser("serve", help="Start API server with the scheduler")

    args = parser.parse_args(argv)

    if args.command == "init":
        init_db()
    elif args.command == "check-expiring":
        check_expiring_adverts(args.date)
    elif args.command == "update-remaining":
        result = update_remaining_days(args.date)
        logger.info(f"Result: {result}")
    elif args.command == "serve":
        import uvicorn

        uvicorn.run(
            "advert_alerts.main:app",
            host=settings.api_host,
            port=settings.api_port,
            reload=settings.debug,
        )
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
