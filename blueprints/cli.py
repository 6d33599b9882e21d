"""Command-line interface for browsing and seeding blueprints.

Usage:
    # List an author's blueprints with point totals
    blueprints lookup johnconnor

    # Print the draw operations of one blueprint
    blueprints open johnconnor house
    blueprints open johnconnor house --json

    # Push the fixture blueprints to a running service
    blueprints --url http://localhost:8001 seed

    # Run the REST service
    blueprints serve --port 8001

The data source comes from BLUEPRINTS_SOURCE / BLUEPRINTS_API_URL unless
--url is given, in which case the remote source is used.
"""

import argparse
import asyncio
import json
import logging
import os
import sys
from typing import Optional

from blueprints.presenter.browser import BlueprintBrowser
from blueprints.sources.base import BlueprintSource
from blueprints.sources.errors import BlueprintConflictError, BlueprintError
from blueprints.sources.factory import build_source, source_from_env
from blueprints.sources.fixture import FixtureBlueprintSource

logger = logging.getLogger(__name__)


def _make_source(args: argparse.Namespace) -> BlueprintSource:
    if args.url:
        timeout = float(os.environ.get("BLUEPRINTS_TIMEOUT", "30"))
        return build_source("remote", base_url=args.url, timeout=timeout)
    return source_from_env()


async def _lookup(source: BlueprintSource, args: argparse.Namespace) -> int:
    browser = BlueprintBrowser(source)
    page = await browser.author_page(args.author)
    print(page.message)
    if page.rows:
        width = max(len("Blueprint"), *(len(r.name) for r in page.rows))
        print(f"{'Blueprint':<{width}}  Points")
        for row in page.rows:
            print(f"{row.name:<{width}}  {row.point_count}")
        print(f"Total user points: {page.view.total_points}")
    return 0


async def _open(source: BlueprintSource, args: argparse.Namespace) -> int:
    browser = BlueprintBrowser(source)
    drawing = await browser.open_blueprint(args.author, args.name)
    if args.json:
        print(json.dumps(drawing.model_dump(mode="json"), indent=2))
        return 0
    print(f"Current blueprint: {drawing.name}")
    for op in drawing.ops:
        args_text = f"{op.x:g}, {op.y:g}"
        if op.op == "mark_at":
            args_text += f", r={op.radius:g}"
        print(f"  {op.op}({args_text})")
    return 0


async def _seed(source: BlueprintSource, args: argparse.Namespace) -> int:
    fixtures = FixtureBlueprintSource(definitions_dir=args.definitions_dir)
    created = 0
    skipped = 0
    for blueprint in await fixtures.fetch_all():
        try:
            await source.create(blueprint)
            created += 1
            print(f"  Created: {blueprint.author}/{blueprint.name}")
        except BlueprintConflictError:
            skipped += 1
            print(f"  Already exists: {blueprint.author}/{blueprint.name}")
    print(f"\nDone! Created {created} blueprints ({skipped} already present)")
    return 0


async def _run(command, args: argparse.Namespace) -> int:
    source = _make_source(args)
    try:
        return await command(source, args)
    except BlueprintError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        await source.close()


def _serve(args: argparse.Namespace) -> int:
    import uvicorn

    uvicorn.run("blueprints.api.main:app", host=args.host, port=args.port)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="blueprints",
        description="Browse authors' blueprints and render them as draw operations",
    )
    parser.add_argument("--url", help="Base URL of a blueprints service (uses the remote source)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    lookup = subparsers.add_parser("lookup", help="List an author's blueprints")
    lookup.add_argument("author")
    lookup.set_defaults(handler=_lookup)

    open_cmd = subparsers.add_parser("open", help="Print a blueprint's draw operations")
    open_cmd.add_argument("author")
    open_cmd.add_argument("name")
    open_cmd.add_argument("--json", action="store_true", help="Print the drawing as JSON")
    open_cmd.set_defaults(handler=_open)

    seed = subparsers.add_parser("seed", help="Create the fixture blueprints in the configured source")
    seed.add_argument("--definitions-dir", default=None, help="Seed directory (default: bundled fixtures)")
    seed.set_defaults(handler=_seed)

    serve = subparsers.add_parser("serve", help="Run the REST service")
    serve.add_argument("--host", default="0.0.0.0")
    serve.add_argument("--port", type=int, default=8001)
    serve.set_defaults(handler=None)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.command == "serve":
        return _serve(args)
    return asyncio.run(_run(args.handler, args))


if __name__ == "__main__":
    sys.exit(main())
