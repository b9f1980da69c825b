"""
Workshop availability service entry point.

Runs the HTTP API, or answers a single query from the command line
using the same catalog and engine.

Usage:
    HTTP server:  python main.py serve --port 3000
    One query:    python main.py query --services MOT --repairs Brakes --start-date 2026-03-02
"""

import argparse
import json
import logging
import sys

from workshop_availability.config import settings

logger = logging.getLogger(__name__)


def _run_server(args: argparse.Namespace) -> None:
    """Start the FastAPI app under uvicorn."""
    import uvicorn

    logger.info("Listening on http://%s:%d", args.host, args.port)
    logger.info("POST /api/availability - query available slots")
    uvicorn.run(
        "workshop_availability.api.app:app",
        host=args.host,
        port=args.port,
        log_level=settings.log_level.lower(),
    )


def _run_query(args: argparse.Namespace) -> None:
    """Compute availability once and print the JSON response."""
    from workshop_availability.api.validation import validate_availability_request
    from workshop_availability.availability.engine import compute_availability
    from workshop_availability.catalog.loader import WorkshopConfigError, get_workshop_config
    from workshop_availability.utils import parse_iso_date

    body = {"services": args.services, "repairs": args.repairs}
    if args.start_date:
        body["startDate"] = args.start_date

    validation = validate_availability_request(body)
    if not validation.valid or validation.data is None:
        for error in validation.errors:
            logger.error("%s: %s", error.field, error.message)
        sys.exit(1)

    try:
        config = get_workshop_config(args.config)
    except WorkshopConfigError as e:
        logger.error("%s", e)
        sys.exit(1)

    query = validation.data
    period_start = parse_iso_date(query.start_date) if query.start_date else None
    response = compute_availability(config, query, period_start)
    sys.stdout.write(json.dumps(response.to_json_dict(), indent=2) + "\n")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find workshop slots for requested services and repairs."
    )
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the HTTP API.")
    serve.add_argument("--host", default=settings.server.host)
    serve.add_argument("--port", type=int, default=settings.server.port)
    serve.set_defaults(func=_run_server)

    query = sub.add_parser("query", help="Answer one availability query and print JSON.")
    query.add_argument("--services", nargs="*", default=[], help="Requested service ids.")
    query.add_argument("--repairs", nargs="*", default=[], help="Requested repair ids.")
    query.add_argument("--start-date", default=None, help="First day to search (YYYY-MM-DD).")
    query.add_argument(
        "--config",
        default=None,
        help="Path to a workshop catalog JSON file (default: WORKSHOP_CONFIG_PATH).",
    )
    query.set_defaults(func=_run_query)

    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
