"""
Command-line interface for the movie database mock API.

Provides commands for:
- url: Show the request URL for an endpoint and its parameters
- query: Run a request path through the query engine and print the envelope
- load: Load the JSON resources and report per-collection status
- status: Show configuration and record counts
- serve: Run the HTTP API with uvicorn
"""

import argparse
import asyncio
from typing import Dict, List, Optional

from . import envelope
from .config import Config
from .engine import QueryEngine
from .exceptions import DataLoadError, QueryError
from .loader import DataLoader, build_store
from .request_builder import ENDPOINTS, build_request, build_request_url
from .store import CollectionStatus, RecordStore
from .utils import print_header, print_status_table


def parse_params(pairs: Optional[List[str]]) -> Dict[str, str]:
    """Parse 'key=value' strings into a dict."""
    params = {}
    for pair in pairs or []:
        if "=" not in pair:
            raise argparse.ArgumentTypeError(f"Expected key=value, got {pair!r}")
        key, value = pair.split("=", 1)
        params[key.strip()] = value
    return params


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser with all commands."""
    parser = argparse.ArgumentParser(
        prog="moviedb",
        description="Movie Database Mock API - query movies, persons and producers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Show the request URL for a genre-filtered movie list
  python -m moviedb url movies -p genre=Drama -p limit=5

  # Run a request
  python -m moviedb query /api/search -p q=brothers

  # Run an endpoint by name (checks required parameters)
  python -m moviedb query movies-id --id 1997

  # Load the JSON resources and report status
  python -m moviedb load

  # Serve the HTTP API on port 8080
  python -m moviedb serve --port 8080
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # URL command
    url_parser = subparsers.add_parser("url", help="Show the request URL for an endpoint")
    url_parser.add_argument("endpoint", choices=sorted(ENDPOINTS), help="Endpoint name")
    url_parser.add_argument("--id", help="Record id for the *-id endpoints")
    url_parser.add_argument(
        "-p", "--param", action="append", metavar="KEY=VALUE", help="Query parameter (repeatable)"
    )

    # Query command
    query_parser = subparsers.add_parser("query", help="Run a request and print the JSON response")
    query_parser.add_argument("target", help="Request path (/api/...) or endpoint name")
    query_parser.add_argument("--id", help="Record id when target is a *-id endpoint")
    query_parser.add_argument(
        "-p", "--param", action="append", metavar="KEY=VALUE", help="Query parameter (repeatable)"
    )

    # Load command
    subparsers.add_parser("load", help="Load JSON resources and report per-collection status")

    # Status command
    subparsers.add_parser("status", help="Show configuration and record counts")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", help="Bind address (default: API_HOST)")
    serve_parser.add_argument("--port", type=int, help="Port (default: API_PORT)")

    return parser


def cmd_url(config: Config, args) -> int:
    """Run url command."""
    params = parse_params(args.param)
    if args.id:
        params["id"] = args.id
    print(build_request_url(config.base_url, args.endpoint, params))
    return 0


def cmd_query(config: Config, args) -> int:
    """Run query command."""
    params = parse_params(args.param)

    if args.target.startswith(("/", "#")):
        path = args.target
    else:
        if args.id:
            params["id"] = args.id
        try:
            path, params = build_request(args.target, params)
        except QueryError as e:
            print(envelope.to_json(envelope.error_from_exception(e)))
            return 1

    try:
        store = asyncio.run(build_store(config))
    except DataLoadError as e:
        print(envelope.to_json(envelope.create_error_response(503, str(e))))
        return 1

    engine = QueryEngine.from_config(store, config)
    response = engine.process_request(path, params)
    print(envelope.to_json(response))
    return 0 if envelope.is_success(response) else 1


def cmd_load(config: Config) -> int:
    """Run load command."""
    print_header("Load Collections")

    def show(name: str, status: CollectionStatus) -> None:
        print(f"  {name:<10} {status.value}")

    store = RecordStore()
    loader = DataLoader(store, config, on_status=show)
    try:
        report = asyncio.run(loader.load_all())
    except DataLoadError as e:
        print(f"\nERROR: {e}")
        print_status_table(e.errors, title="Errors")
        return 1

    print_status_table(
        {name: status for name, status in report.statuses.items()},
        title="Results",
    )
    if report.errors:
        print_status_table(report.errors, title="Errors")
    print(f"Records: {report.counts}")
    return 0


def cmd_status(config: Config) -> int:
    """Run status command."""
    print_header("Movie Database Status")

    data = {
        "Data mode": config.data_mode,
        "Base URL": config.base_url,
        "Default limit": config.default_limit,
        "Max limit": config.max_limit,
    }
    for name, source in config.sources.items():
        data[f"{name} source"] = source
    print_status_table(data, title="Configuration")

    if config.uses_loader:
        store = RecordStore()
        try:
            asyncio.run(DataLoader(store, config).load_all())
        except DataLoadError as e:
            print(f"\nERROR: {e}")
        print_status_table(store.statuses(), title="Collections")
        if store.errors():
            print_status_table(store.errors(), title="Errors")
    else:
        store = RecordStore.from_sample_data()

    print_status_table(store.counts(), title="Records")
    return 0


def cmd_serve(config: Config, args) -> int:
    """Run serve command."""
    import uvicorn

    uvicorn.run(
        "moviedb_api.main:app",
        host=args.host or config.api_host,
        port=args.port or config.api_port,
        reload=config.api_debug,
    )
    return 0


def main(args: Optional[list] = None) -> int:
    """Main entry point for CLI."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if not parsed_args.command:
        parser.print_help()
        return 0

    try:
        config = Config.from_env()
    except ValueError as e:
        print(f"Configuration error: {e}")
        return 1

    try:
        if parsed_args.command == "url":
            return cmd_url(config, parsed_args)
        elif parsed_args.command == "query":
            return cmd_query(config, parsed_args)
        elif parsed_args.command == "load":
            return cmd_load(config)
        elif parsed_args.command == "status":
            return cmd_status(config)
        elif parsed_args.command == "serve":
            return cmd_serve(config, parsed_args)
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))
    except QueryError as e:
        print(f"ERROR: {e.message}")
        return 1

    parser.print_help()
    return 1
