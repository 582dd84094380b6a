"""Entry point: python -m generator

Fetches the BitBadges OpenAPI spec (or reads --spec), snapshots it to
spec/openapi.yaml, and generates generated/server.py.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import httpx

from .codegen import render, write_server
from .loader import SPEC_URL, fetch_spec, get_version, load_spec, save_spec
from .synthesizer import synthesize


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="python -m generator",
        description="Generate the BitBadges MCP server from the OpenAPI spec.",
    )
    parser.add_argument("--spec", type=Path, help="Local OpenAPI file instead of fetching")
    parser.add_argument("--url", default=SPEC_URL, help="OpenAPI document URL")
    parser.add_argument("--output", type=Path, help="Output path (default: generated/server.py)")
    parser.add_argument("--no-save", action="store_true", help="Do not snapshot the fetched spec")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)

    if args.spec:
        spec = load_spec(args.spec)
        print(f"Loaded OpenAPI spec from {args.spec}")
    else:
        print(f"Fetching OpenAPI spec from {args.url}")
        try:
            spec = fetch_spec(args.url)
        except httpx.HTTPError as e:
            print(f"Failed to fetch OpenAPI spec: {e}", file=sys.stderr)
            return 1
        if not args.no_save:
            print(f"Saved OpenAPI spec to {save_spec(spec)}")

    tools = synthesize(spec)
    output_path = write_server(render(tools, api_version=get_version(spec)), args.output)

    print(f"Generated {output_path} ({len(tools)} tools, {len(spec.get('paths') or {})} paths)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
