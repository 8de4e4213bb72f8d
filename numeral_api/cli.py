"""
CLI entry point for the numeral conversion service.

Usage:
    # Start the HTTP API (defaults come from settings: HOST, PORT)
    python -m numeral_api.cli serve --port 3000

    # Convert values offline, printing the batch result as JSON
    python -m numeral_api.cli convert XIV 14 MMMCMXCIX
"""

import argparse
import json
import logging
import sys

from numeral_api.core.config import settings
from numeral_api.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def cmd_serve(args: argparse.Namespace) -> int:
    """Start the full FastAPI application with uvicorn."""
    import uvicorn

    logger.info("Starting API at http://%s:%d", args.host, args.port)
    logger.info("Documentation: http://%s:%d/api", args.host, args.port)
    uvicorn.run("numeral_api.main:app", host=args.host, port=args.port, reload=False)
    return 0


def cmd_convert(args: argparse.Namespace) -> int:
    """Convert each value independently and print the outcome as JSON.

    Returns:
        0 when every value converted, 1 otherwise.
    """
    from numeral_api.application.conversion.dtos import BatchConvertCommand
    from numeral_api.interfaces.conversion.dependencies import (
        get_batch_convert_use_case,
    )

    result = get_batch_convert_use_case().execute(
        BatchConvertCommand(values=list(args.values))
    )

    results = []
    for item in result.items:
        if item.result is None:
            results.append({"status": "error", "input": item.input, "message": item.error})
        else:
            results.append(
                {
                    "status": "success",
                    "conversion": item.result.direction.value,
                    "input": item.result.input,
                    "roman": item.result.roman,
                    "arabic": item.result.arabic,
                }
            )

    print(json.dumps({"total": result.total, "results": results}, indent=2))
    return 0 if result.failed == 0 else 1


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Roman ↔ Arabic numeral conversion service"
    )
    parser.add_argument(
        "--log-level", default=settings.log_level, help="Logging level"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default=settings.host)
    serve_parser.add_argument("--port", type=int, default=settings.port)
    serve_parser.set_defaults(func=cmd_serve)

    convert_parser = subparsers.add_parser(
        "convert", help="Convert Roman numerals and/or Arabic numbers"
    )
    convert_parser.add_argument("values", nargs="+", help="Values to convert")
    convert_parser.set_defaults(func=cmd_convert)

    args = parser.parse_args(argv)
    # stdout carries the convert output
    configure_logging(level=args.log_level, stream=sys.stderr)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
