"""Unit converter entrypoint.

Run with: python -m unitconv [menu | convert NAME [--] VALUE | serve --port=PORT]
Without a subcommand the interactive menu starts.
"""

from __future__ import annotations

import argparse
import logging
import sys

from unitconv.cli import ConverterMenu, format_result, parse_value
from unitconv.config import HOST, LOG_LEVEL, PORT
from unitconv.core.errors import ConversionError
from unitconv.dependencies import get_conversion_registry

logger = logging.getLogger("unitconv")


def _finite_float(text: str) -> float:
    value = parse_value(text)
    if value is None:
        raise argparse.ArgumentTypeError(f"not a finite number: {text!r}")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="unitconv", description="Physical unit converter")
    parser.add_argument("--log-level", default=LOG_LEVEL, help="Logging level")
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("menu", help="Interactive menu (default)")

    convert = sub.add_parser(
        "convert",
        help="Convert a single value",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="negative values in exponent form need a -- separator:\n"
        "  unitconv convert MetersToFeet -- -1e3",
    )
    convert.add_argument("name", help="Conversion name, e.g. CelsiusToFahrenheit")
    convert.add_argument("value", type=_finite_float, help="Value to convert")

    serve = sub.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--port", type=int, default=PORT, help="Port to listen on")
    serve.add_argument("--host", default=HOST, help="Host to bind to")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    if args.command == "serve":
        import uvicorn

        from unitconv.main import app

        logger.info("Starting unit converter API on %s:%d", args.host, args.port)
        uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())
        return 0

    registry = get_conversion_registry()

    if args.command == "convert":
        try:
            result = registry.convert(args.name, args.value)
        except ConversionError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        print(format_result(result))
        return 0

    ConverterMenu(registry, sys.stdin, sys.stdout, sys.stderr).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
