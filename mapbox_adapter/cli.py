"""CLI entrypoint for the Mapbox geocoding adapter."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from mapbox_adapter.common.config_loader import ProviderConfig, apply_overrides, load_provider_config
from mapbox_adapter.common.constants import COMMANDS, EXIT_HARD_FAIL, EXIT_NO_RESULT, EXIT_SUCCESS
from mapbox_adapter.common.errors import GeocoderError, NoResult
from mapbox_adapter.common.fs import write_json
from mapbox_adapter.common.http import HttpClient
from mapbox_adapter.common.ids import generate_run_id
from mapbox_adapter.common.logging import build_logger, log_event
from mapbox_adapter.common.models import AddressRecord
from mapbox_adapter.provider.mapbox import MapboxProvider


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("command", choices=COMMANDS)
    parser.add_argument("query", nargs="+", help="address text, or LAT LON for reverse")
    parser.add_argument("--config", default="./config/mapbox.yml")
    parser.add_argument("--overlay-config", default=None)
    parser.add_argument("--country", default=None)
    parser.add_argument("--access-token", default=None)
    parser.add_argument("--use-ssl", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument("--limit", type=int, default=None)
    parser.add_argument("--output", default=None)
    parser.add_argument("--log-file", default=None)
    parser.add_argument("--run-id", default=None)
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARN", "ERROR"])
    return parser.parse_args(argv)


def resolve_config(args: argparse.Namespace) -> ProviderConfig:
    overlay = Path(args.overlay_config) if args.overlay_config else None
    config = load_provider_config(Path(args.config), overlay_path=overlay)
    return apply_overrides(
        config,
        country=args.country,
        access_token=args.access_token,
        use_ssl=args.use_ssl,
        limit=args.limit,
    )


def execute_command(provider: MapboxProvider, command: str, query: list[str]) -> list[AddressRecord]:
    if command == "geocode":
        return provider.geocode(" ".join(query))
    if command == "reverse":
        if len(query) != 2:
            raise ValueError("reverse expects exactly two values: LAT LON")
        latitude, longitude = (float(value) for value in query)
        return provider.reverse(latitude, longitude)
    raise ValueError(f"Unknown command: {command}")


def emit_records(records: list[AddressRecord], output: str | None) -> None:
    payload = [record.to_dict() for record in records]
    if output:
        write_json(Path(output), payload)
        return
    sys.stdout.write(json.dumps(payload, ensure_ascii=False, indent=2))
    sys.stdout.write("\n")


def run_command(args: argparse.Namespace, http_client: HttpClient | None = None) -> int:
    run_id = args.run_id or generate_run_id()
    log_path = Path(args.log_file) if args.log_file else None
    logger = build_logger(run_id, log_path=log_path, level=args.log_level)

    config = resolve_config(args)
    owns_client = http_client is None
    client = http_client or HttpClient(timeout=config.timeout, retry=config.retry)
    try:
        provider = MapboxProvider(client, config, logger=logger, run_id=run_id)
        records = execute_command(provider, args.command, args.query)
    except NoResult:
        return EXIT_NO_RESULT
    except GeocoderError as exc:
        log_event(
            logger,
            f"{args.command} failed",
            run_id=run_id,
            provider=MapboxProvider.name,
            event="COMMAND_FAIL",
            status="error",
            error_code=exc.error_code,
        )
        return EXIT_HARD_FAIL
    finally:
        if owns_client:
            client.close()

    emit_records(records, args.output)
    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv or sys.argv[1:])
    try:
        return run_command(args)
    except GeocoderError:
        return EXIT_HARD_FAIL
    except ValueError:
        return EXIT_HARD_FAIL


if __name__ == "__main__":
    raise SystemExit(main())
