#!/usr/bin/env python3
"""
LogMCP CLI

This CLI launches the two LogMCP processes and offers a couple of
maintenance commands against the SQLite log store.

Commands:

1) serve
   - Run the log server (FastAPI + uvicorn) on LOG_SERVER_PORT (8081).
     Opens the store, creates the schema and bootstraps demo logs if the
     store is empty before accepting requests.

2) tools
   - Run the MCP tool server on MCP_SERVER_PORT (8080). Its tools call the
     log server at LOG_SERVER_URL.

3) bootstrap
   - Create the schema and load demo logs if the store is empty, then print
     the per-region report.

4) stats
   - Print the log count per region.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Ensure project root is on sys.path when running as a script
ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from configs.settings import Settings, configure_logging
from exceptions.exceptions import BootstrapHardError, StorageError
from runtime.models.log_models import BootstrapReport, RegionLoadStatus
from runtime.store.bootstrap_loader import open_store


def _print_report(report: BootstrapReport) -> None:
    if report.store_was_populated:
        print("[LogMCP] Store already populated; demo data not loaded")
        return

    for result in report.results:
        if result.status == RegionLoadStatus.LOADED:
            print(f"[LogMCP] ✓ {result.region}: {result.count} logs loaded")
        else:
            print(f"[LogMCP] ✗ {result.region}: skipped ({result.reason})")
    print(f"[LogMCP] Total loaded: {report.total_loaded}")


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def cmd_serve(settings: Settings) -> None:
    import uvicorn

    from runtime.api.server import create_app

    print(f"[LogMCP] Log server starting on port {settings.log_server_port}")
    uvicorn.run(
        create_app(settings),
        host=settings.log_server_host,
        port=settings.log_server_port,
        log_level=settings.log_level.lower(),
    )


def cmd_tools(settings: Settings) -> None:
    from runtime.tools.tool_server import main as run_tool_server

    run_tool_server(settings)


def cmd_bootstrap(settings: Settings) -> None:
    print(f"[LogMCP] Opening store {settings.db_path}")
    store, report = open_store(settings)
    store.close()
    _print_report(report)


def cmd_stats(settings: Settings) -> None:
    store, _ = open_store(settings)
    try:
        stats = store.stats()
        total = store.count()
    finally:
        store.close()

    for region in sorted(stats):
        print(f"{region:<8}{stats[region]:>10}")
    print(f"{'total':<8}{total:>10}")


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="LogMCP CLI")
    parser.add_argument(
        "--db-path",
        default=None,
        help="SQLite database file (default: LOG_DB_PATH or './logs.db')",
    )
    parser.add_argument(
        "--demo-logs",
        default=None,
        help="Directory with sample_logs_<region>.json (default: DEMO_LOGS_PATH or '../demo_logs')",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("serve", help="Run the log server HTTP API")
    subparsers.add_parser("tools", help="Run the MCP tool server")
    subparsers.add_parser(
        "bootstrap", help="Create the schema and load demo logs if the store is empty"
    )
    subparsers.add_parser("stats", help="Print log counts per region")

    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    overrides = {}
    if args.db_path:
        overrides["LOG_DB_PATH"] = args.db_path
    if args.demo_logs:
        overrides["DEMO_LOGS_PATH"] = args.demo_logs
    settings = Settings(**overrides)
    configure_logging(settings.log_level)

    commands = {
        "serve": cmd_serve,
        "tools": cmd_tools,
        "bootstrap": cmd_bootstrap,
        "stats": cmd_stats,
    }
    command = commands.get(args.command)
    if command is None:
        parser.error(f"Unknown command: {args.command}")

    try:
        command(settings)
    except (StorageError, BootstrapHardError) as e:
        print(f"[LogMCP] Failed to initialize database: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
