import argparse
import json
import logging
import os
import sys
from dataclasses import asdict, is_dataclass
from typing import Any

from wticket.config.logging_config import configure_logging
from wticket.domain.config import Config
from wticket.infrastructure.config_loader import load

logger = logging.getLogger(__name__)

VIEWS = ("tickets", "new-tickets", "employees")


def setup_env(config_path: str | None = None) -> Config:
    """Load configuration and configure logging."""
    config = load(config_path)
    configure_logging(os.getenv("LOG_LEVEL", config.log_level))
    return config


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="wticket", description="Export WTicket listings as JSON.")
    parser.add_argument("view", choices=VIEWS)
    parser.add_argument("--limit", type=int, default=None, help="maximum number of tickets (maxrows)")
    parser.add_argument("--skip", type=int, default=None, help="number of tickets to skip (rel)")
    parser.add_argument("--config", default=None, help="path to config.yaml")
    return parser.parse_args(argv)


def to_jsonable(result: Any) -> Any:
    if isinstance(result, list):
        return [to_jsonable(item) for item in result]
    if is_dataclass(result):
        return asdict(result)
    return result


def run(scraper, args: argparse.Namespace) -> Any:
    if args.view == "tickets":
        return scraper.list_tickets(limit=args.limit, skip=args.skip)
    if args.view == "new-tickets":
        return scraper.list_new_tickets()
    return scraper.list_employees()


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    config = setup_env(args.config)

    from playwright.sync_api import sync_playwright
    from wticket.application.scraper import create_wticket_scraper
    from wticket.domain.errors import WTicketError

    with sync_playwright() as playwright:
        try:
            with create_wticket_scraper(playwright, config.driver_config) as scraper:
                scraper.login(config.credentials.user_login, config.credentials.user_password)
                result = run(scraper, args)
        except WTicketError as e:
            logger.error(f"{type(e).__name__}: {e}")
            return 1

    json.dump(to_jsonable(result), sys.stdout, indent=2, default=str)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
