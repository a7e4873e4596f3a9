from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path

from pydantic import ValidationError

from social_graph.settings import SocialGraphSettings, settings

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    level = (settings.log_level or "INFO").upper()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def cmd_version() -> int:
    from social_graph import __version__

    print(__version__)
    return 0


def cmd_ingest(args: argparse.Namespace) -> int:
    _configure_logging()
    from social_graph.graph import DuplicatePolicy, GraphStoreError, check_integrity
    from social_graph.pipeline import build_graph

    overrides: dict = {}
    if args.base_url:
        overrides["base_url"] = args.base_url
    if args.page_size is not None:
        overrides["page_size"] = args.page_size
    if args.strict:
        overrides["duplicate_policy"] = DuplicatePolicy.REJECT
    try:
        cfg = SocialGraphSettings.model_validate({**settings.model_dump(), **overrides})
    except ValidationError as e:
        print(f"invalid options: {e}", file=sys.stderr)
        return 2

    try:
        store, stats = asyncio.run(build_graph(cfg))
    except GraphStoreError as e:
        logger.error("Ingestion aborted: %s", e)
        return 1
    print(json.dumps(asdict(stats), indent=2))

    rc = 0
    if args.output:
        Path(args.output).write_text(json.dumps(store.to_dict(), indent=2), encoding="utf-8")

    if args.verify:
        report = check_integrity(store)
        print(f"integrity: entities={report.entities} relationships={report.relationships}")
        for line in report.dangling:
            print(f"  dangling {line}")
        if not report.ok:
            rc = 1

    if args.fail_on_fetch_error and stats.failed_sources:
        rc = 1
    return rc


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="social-graph")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("version").set_defaults(func=lambda _a: cmd_version())

    ingest = sub.add_parser("ingest", help="Fetch users and posts and build the graph")
    ingest.add_argument("--base-url", default=None, help="API root (default from settings)")
    ingest.add_argument("--page-size", type=int, default=None)
    ingest.add_argument(
        "--strict", action="store_true", help="Reject duplicate entity ids instead of overwriting"
    )
    ingest.add_argument("--output", default=None, help="Write the graph as JSON to this file")
    ingest.add_argument("--verify", action="store_true", help="Check for dangling relationships")
    ingest.add_argument("--fail-on-fetch-error", action="store_true")
    ingest.set_defaults(func=cmd_ingest)

    return p


def app(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    rc = args.func(args)
    raise SystemExit(rc)


if __name__ == "__main__":
    app()
