"""Translate an ASPX stats response into JSON from the command line.

Reads a saved response file, or fetches one live from a BF2 project.

Usage:
    python -m scripts.translate_aspx getplayerinfo --file raw/player.txt
    python -m scripts.translate_aspx getplayerinfo --param pid=45465736 --group
    python -m scripts.translate_aspx searchforplayers --param nick=foo --project playbf2
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path

from bf2_jsonifier.config.settings import get_settings
from bf2_jsonifier.models.common import Project, Source
from bf2_jsonifier.models.sources import PROJECT_CONFIGS, SOURCE_CONFIGS
from bf2_jsonifier.parsers.errors import AspxError
from bf2_jsonifier.parsers.pipeline import translate_response
from bf2_jsonifier.providers.aspx_client import AspxClient


def parse_params(pairs: list[str]) -> dict[str, str]:
    """Turn ["k=v", ...] into a dict."""
    params: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise ValueError(f"Expected key=value, got {pair!r}")
        params[key] = value
    return params


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Translate a BF2 ASPX stats response into JSON",
    )
    parser.add_argument(
        "source",
        choices=[s.value for s in Source],
        help="ASPX source the response belongs to",
    )
    input_group = parser.add_mutually_exclusive_group(required=True)
    input_group.add_argument(
        "--file",
        type=Path,
        help="Saved raw response to translate",
    )
    input_group.add_argument(
        "--param",
        action="append",
        metavar="KEY=VALUE",
        help="Query parameter for a live request (repeatable)",
    )
    parser.add_argument(
        "--project",
        choices=[p.value for p in Project],
        default=None,
        help="Project to query for live requests",
    )
    parser.add_argument(
        "--group",
        action="store_true",
        help="Add grouped stats (getplayerinfo only)",
    )
    return parser


async def _fetch(source: Source, project: Project, params: dict[str, str]) -> str:
    client = AspxClient(timeout=get_settings().UPSTREAM_TIMEOUT)
    return await client.fetch(PROJECT_CONFIGS[project], SOURCE_CONFIGS[source], params)


def main(argv: list[str] | None = None) -> int:
    """Translate and print; returns the process exit code."""
    args = build_parser().parse_args(argv)
    source = Source(args.source)

    try:
        if args.file is not None:
            raw_text = args.file.read_text(encoding="utf-8")
        else:
            project = Project(args.project or get_settings().DEFAULT_PROJECT)
            raw_text = asyncio.run(_fetch(source, project, parse_params(args.param)))
        response = translate_response(
            raw_text, SOURCE_CONFIGS[source], group_values=args.group,
        )
    except (AspxError, ValueError, OSError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    print(json.dumps(response.model_dump(mode="json", exclude_none=True), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
